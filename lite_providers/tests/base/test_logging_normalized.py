from __future__ import annotations

import json
import logging

from lite_providers.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    LogContext,
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)
from lite_providers.base.log_support import JsonFormatter
from lite_providers.base.models import Usage


class _Capture(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def _capture(name: str = "lite_providers.test") -> tuple[logging.Logger, _Capture]:
    logger = logging.getLogger(name)
    handler = _Capture()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger, handler


def test_normalized_event_carries_required_keys():
    logger, handler = _capture()
    try:
        normalized_log_event(
            logger,
            "chat.end",
            LogContext(provider="openai", model="gpt-4o-mini"),
            phase="finalize",
            tokens=Usage(prompt_tokens=1, completion_tokens=2, total_tokens=3),
            emitted=True,
            phase_override="ignored",
            attempt_extra=None,
        )
    finally:
        logger.removeHandler(handler)
    payload = json.loads(handler.records[-1].getMessage())
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in payload
    assert payload["event"] == "chat.end"
    assert payload["provider"] == "openai"
    assert payload["attempt"] is None
    assert payload["tokens"] == {"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 3}
    assert "error_code" not in payload
    assert "attempt_extra" not in payload


def test_extra_fields_do_not_clobber_normalized_keys():
    logger, handler = _capture()
    try:
        normalized_log_event(logger, "x", phase="stream", error_code="network", emitted=3, **{"emitted_raw": 1})
        normalized_log_event(logger, "y", phase="start", **{"tokens": {"a": 1}})
    finally:
        logger.removeHandler(handler)
    first = json.loads(handler.records[0].getMessage())
    assert first["error_code"] == "network"
    assert first["emitted"] == 3
    second = json.loads(handler.records[1].getMessage())
    assert second["tokens"] == {"a": 1}


def test_log_event_drops_none_fields_and_respects_level():
    logger, handler = _capture()
    logger.setLevel(logging.WARNING)
    try:
        log_event(logger, "quiet", level=logging.INFO, a=1)
        log_event(logger, "loud", level=logging.WARNING, a=1, b=None)
    finally:
        logger.removeHandler(handler)
    assert len(handler.records) == 1
    assert json.loads(handler.records[0].getMessage()) == {"event": "loud", "a": 1}


def test_json_formatter_hoists_event_payload():
    record = logging.LogRecord("lite_providers.x", logging.INFO, __file__, 1, '{"event": "e", "k": 2}', None, None)
    line = json.loads(JsonFormatter().format(record))
    assert line["event"] == "e"
    assert line["k"] == 2
    assert line["level"] == "INFO"
    assert "msg" not in line


def test_json_formatter_keeps_plain_messages():
    record = logging.LogRecord("lite_providers.x", logging.ERROR, __file__, 1, "plain %s", ("text",), None)
    line = json.loads(JsonFormatter().format(record))
    assert line["msg"] == "plain text"


def test_child_loggers_propagate_to_base():
    child = get_logger("lite_providers.openai")
    assert child.propagate is True
    assert not child.handlers
    assert get_logger().name == "lite_providers"


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "providers.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        assert logger.level == logging.DEBUG
        log_event(logger, "file.event", LogContext(provider="anthropic"))
        for h in logger.handlers:
            h.flush()
        assert '"event": "file.event"' in path.read_text(encoding="utf-8")
    finally:
        configure_logger(level=logging.INFO, file_path=None)
    assert all(getattr(h, "baseFilename", None) != str(path) for h in logger.handlers)
