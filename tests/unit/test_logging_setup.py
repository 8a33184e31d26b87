import logging

import pytest

from redis_schema import logging_config


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def _clear_root() -> logging.Logger:
    # pytest attaches its capture handlers for the duration of each test
    root = logging.getLogger()
    root.handlers = []
    return root


def test_setup_logging_installs_console_handler_only_without_service():
    root = _clear_root()

    logging_config.setup_logging()

    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)
    assert root.level == logging.INFO
    assert logging.getLogger("redis").level == logging.WARNING


def test_setup_logging_writes_service_file(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    monkeypatch.delenv("LOG_APPEND", raising=False)
    root = _clear_root()

    logging_config.setup_logging("schema-worker")
    logging.getLogger("redis_schema.test").info("hello file")

    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    file_handlers[0].flush()
    assert "hello file" in (tmp_path / "schema-worker.log").read_text()


def test_setup_logging_is_idempotent(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    root = _clear_root()

    logging_config.setup_logging("svc")
    handlers = list(root.handlers)
    logging_config.setup_logging("svc")

    assert root.handlers == handlers


def test_user_friendly_console_only_shows_warnings():
    root = _clear_root()

    logging_config.setup_logging(user_friendly=True)

    (handler,) = root.handlers
    assert handler.level == logging.WARNING
