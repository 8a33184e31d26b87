"""Dotenv file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from ..errors import ConfigurationError

_EXPORT_PREFIX = "export "
_QUOTES = ("'", '"')


class DotenvLoader:
    """Reads ``KEY=value`` defaults from .env-style files."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load key-value pairs from a .env file.

        A missing file yields no values. Later assignments of the same key in
        one file replace earlier ones.

        Args:
            path: Path to .env file

        Returns:
            Dictionary of configuration values

        Raises:
            ConfigurationError: If the file exists but cannot be read
        """
        if not path.exists():
            return {}

        try:
            text = path.read_text()
        except OSError as exc:
            raise ConfigurationError(f"Failed to load configuration from {path}") from exc

        values: Dict[str, str] = {}
        for line in text.splitlines():
            parsed = DotenvLoader.parse_line(line)
            if parsed is not None:
                key, value = parsed
                values[key] = value
        return values

    @staticmethod
    def parse_line(line: str) -> Optional[tuple[str, str]]:
        """
        Parse one line into ``(key, value)``.

        Accepts an optional ``export`` prefix. Quoted values keep their inner
        text verbatim; unquoted values drop a trailing `` # comment``.

        Returns:
            The pair, or ``None`` for blank lines, comments and lines without ``=``
        """
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            return None
        if stripped.startswith(_EXPORT_PREFIX):
            stripped = stripped[len(_EXPORT_PREFIX) :]

        key, raw_value = stripped.split("=", 1)
        key = key.strip()
        if not key:
            return None
        return key, DotenvLoader._clean_value(raw_value.strip())

    @staticmethod
    def _clean_value(value: str) -> str:
        """Strip one matching pair of quotes, or an inline comment from a bare value."""
        if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
            return value[1:-1]
        comment_at = value.find(" #")
        if comment_at != -1:
            value = value[:comment_at]
        return value.strip()
