import threading

import pytest

from redis_schema.exceptions import DuplicateSchemaKeyError, ValidationError
from redis_schema.registry import SchemaRegistry


def test_mark_key_as_used_claims_key_once():
    registry = SchemaRegistry()

    registry.mark_key_as_used("app:counter")

    assert registry.is_used("app:counter")
    assert "app:counter" in registry
    assert len(registry) == 1


def test_duplicate_claim_raises_and_keeps_state():
    registry = SchemaRegistry()
    registry.mark_key_as_used("app:counter")

    with pytest.raises(DuplicateSchemaKeyError) as exc_info:
        registry.mark_key_as_used("app:counter")

    assert exc_info.value.key == "app:counter"
    assert "app:counter" in str(exc_info.value)
    assert len(registry) == 1

    registry.mark_key_as_used("app:other")
    assert registry.keys() == ["app:counter", "app:other"]


def test_duplicate_error_is_not_a_validation_error():
    assert not issubclass(DuplicateSchemaKeyError, ValidationError)


def test_is_used_has_no_side_effect():
    registry = SchemaRegistry()

    assert registry.is_used("missing") is False
    assert len(registry) == 0


def test_concurrent_threads_register_each_key_once():
    registry = SchemaRegistry()
    barrier = threading.Barrier(8)
    outcomes: list[str] = []
    outcomes_lock = threading.Lock()

    def worker():
        barrier.wait()
        try:
            registry.mark_key_as_used("shared")
            result = "ok"
        except DuplicateSchemaKeyError:
            result = "dup"
        with outcomes_lock:
            outcomes.append(result)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count("ok") == 1
    assert outcomes.count("dup") == 7


def test_duplicate_claim_is_reported_only_by_the_exception(caplog):
    registry = SchemaRegistry()
    registry.mark_key_as_used("app:counter")

    with caplog.at_level("DEBUG", logger="redis_schema.registry"):
        with pytest.raises(DuplicateSchemaKeyError):
            registry.mark_key_as_used("app:counter")

    assert not [record for record in caplog.records if record.levelname == "ERROR"]
