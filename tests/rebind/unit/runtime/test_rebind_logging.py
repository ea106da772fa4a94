from __future__ import annotations

import json
import logging
import sys

from rebind.api.logging import RebindLoggingConfig
from rebind.runtime.logging import (
    JsonFormatter,
    configure_rebind_logging,
    setup_rebind_logging,
    shutdown_rebind_logging,
)


def test_setup_rebind_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("REBIND_LOG_LEVEL", "DEBUG")
        setup_rebind_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_rebind_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_rebind_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_with_file_streams_json_lines(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_path = tmp_path / "logs" / "rebind.jsonl"
    try:
        configure_rebind_logging(
            RebindLoggingConfig(level_name="info", file_path=str(log_path), file_format="json")
        )
        logging.getLogger("rebind.test").info("binding_replaced input=%s", "space", extra={"n": 2})
        shutdown_rebind_logging()
        lines = log_path.read_text(encoding="utf-8").splitlines()
        payload = json.loads(lines[-1])
        assert payload["level"] == "INFO"
        assert payload["logger"] == "rebind.test"
        assert payload["msg"] == "binding_replaced input=space"
        assert payload["fields"] == {"n": 2}
    finally:
        shutdown_rebind_logging()
        for handler in root.handlers:
            handler.close()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_json_formatter_skips_fields_set_by_other_formatters() -> None:
    record = logging.getLogger("rebind.test").makeRecord(
        "rebind.test", logging.INFO, __file__, 1, "ok", (), None, extra={"n": 1}
    )
    logging.Formatter("%(asctime)s %(message)s").format(record)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["fields"] == {"n": 1}


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.getLogger("rebind.test").makeRecord(
            "rebind.test", logging.ERROR, __file__, 1, "failed", (), exc_info=sys.exc_info()
        )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "failed"
    assert "ValueError: boom" in payload["exc_info"]
