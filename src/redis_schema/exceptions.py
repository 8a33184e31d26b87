"""Exception classes for the schema layer.

Exception classes support two patterns:
1. No-argument raise: raise ValidationError()
2. Contextual attributes: err = ValidationError(key="x", value=123); raise err

``DuplicateSchemaKeyError`` and ``ValidationError`` are siblings rather than
parent and child: a registration conflict is a wiring bug that must abort
startup, while a validation failure only fails the read that hit it.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all schema layer errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class DuplicateSchemaKeyError(ApplicationError):
    """Schema key already used."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(f"Schema key already used: {key}", key=key, **kwargs)


class ValidationError(ApplicationError):
    """Data validation failed."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Data validation failed"
        super().__init__(message, **kwargs)


class DataError(ApplicationError):
    """Data processing or parsing error."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Data processing or parsing error"
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "DataError",
    "DuplicateSchemaKeyError",
    "ValidationError",
]
