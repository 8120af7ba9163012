"""Unit tests for structured logging framework.

Tests cover:
- get_logger returns a structlog logger with the name preserved
- JSON output carries timestamp, level, logger and event
- sensitive fields are redacted
- context binding
- configure_logging is explicit: importing the package leaves logging alone
"""

import json
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest
import structlog

import sqlforge
from sqlforge.utils.logging import (
    bind_context,
    configure_logging,
    get_logger,
    sanitize_for_logging,
)


@pytest.mark.unit
def test_get_logger_name_preserved(caplog: pytest.LogCaptureFixture) -> None:
    """Verify logger name is preserved in the JSON output."""
    caplog.set_level(logging.INFO)

    logger = get_logger("my_test_logger")
    logger.info("test_event")

    assert len(caplog.records) >= 1
    log_data = json.loads(caplog.records[-1].message)
    assert log_data.get("logger") == "my_test_logger"


@pytest.mark.unit
def test_json_output_structure(caplog: pytest.LogCaptureFixture) -> None:
    """Verify JSON output contains timestamp, level, logger and event."""
    caplog.set_level(logging.INFO)

    logger = get_logger("test_logger")
    logger.info("test_event", table="users")

    log_data = json.loads(caplog.records[-1].message)

    assert "T" in log_data["timestamp"]
    assert log_data["level"] == "info"
    assert log_data["logger"] == "test_logger"
    assert log_data["event"] == "test_event"
    assert log_data["table"] == "users"


@pytest.mark.unit
def test_non_json_values_are_rendered(caplog: pytest.LogCaptureFixture) -> None:
    """Bound values that JSON cannot encode fall back to repr."""
    caplog.set_level(logging.INFO)

    get_logger("test_logger").info("values_event", values=[b"raw", {1, 2}])

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["values"][0] == repr(b"raw")


@pytest.mark.unit
@pytest.mark.parametrize(
    "key",
    ["password", "access_token", "api_key", "client_secret", "DATABASE_URL", "PASSWORD"],
)
def test_sanitize_for_logging_redacts(key: str) -> None:
    sanitized = sanitize_for_logging({key: "sensitive", "user": "admin"})

    assert sanitized[key] == "[REDACTED]"
    assert sanitized["user"] == "admin"


@pytest.mark.unit
def test_sanitize_for_logging_handles_nested_dicts() -> None:
    data = {"user": "admin", "auth": {"password": "secret123", "token": "abc123"}}
    sanitized = sanitize_for_logging(data)

    assert sanitized["user"] == "admin"
    assert sanitized["auth"] == {"password": "[REDACTED]", "token": "[REDACTED]"}


@pytest.mark.unit
def test_sanitization_in_logged_output(caplog: pytest.LogCaptureFixture) -> None:
    """Verify sensitive data is redacted in actual log output."""
    caplog.set_level(logging.INFO)

    get_logger("test_logger").info("auth_attempt", user="admin", password="secret123")

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["password"] == "[REDACTED]"
    assert log_data["user"] == "admin"


@pytest.mark.unit
def test_context_binding_persists(caplog: pytest.LogCaptureFixture) -> None:
    """Verify bound context persists across log statements."""
    caplog.set_level(logging.INFO)

    logger = bind_context(statement="insert", table="users")
    logger.info("first_event", row=1)
    logger.info("second_event", row=2)

    records = [json.loads(r.message) for r in caplog.records[-2:]]
    for log_data in records:
        assert log_data["statement"] == "insert"
        assert log_data["table"] == "users"
    assert [r["row"] for r in records] == [1, 2]


@pytest.mark.unit
def test_bind_context_returns_bound_logger() -> None:
    assert isinstance(bind_context(statement="select"), structlog.stdlib.BoundLogger)


@pytest.mark.unit
def test_shape_error_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Render-time shape violations emit sql.shape_invalid before raising."""
    from sqlforge.sql import Builder, StatementShapeError

    caplog.set_level(logging.INFO)

    with pytest.raises(StatementShapeError):
        Builder().insert("t1").columns("a", "b").values(1).build()

    events = [json.loads(r.message) for r in caplog.records]
    event = next(e for e in events if e["event"] == "sql.shape_invalid")
    assert event["level"] == "error"
    assert event["table"] == "t1"
    assert event["column_count"] == 2
    assert event["value_count"] == 1
    assert event["statement"] == "insert"
    assert event["logger"] == "sqlforge.sql.operations.base"


@pytest.mark.unit
def test_bind_context_uses_given_logger_name(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    bind_context("sqlforge.sql.operations.base", statement="update").info("bound_event")

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["logger"] == "sqlforge.sql.operations.base"
    assert log_data["statement"] == "update"


@pytest.fixture
def restore_logging():
    """Reinstall the session logging setup after a test reconfigures it."""
    yield
    configure_logging(level=logging.INFO, log_to_file=False)


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for explicit logging setup."""

    def test_import_leaves_host_logging_alone(self):
        """Importing the package installs no handlers and no structlog config."""
        src_dir = Path(sqlforge.__file__).resolve().parents[1]
        code = (
            "import logging, structlog, sqlforge.sql; "
            "print(len(logging.getLogger().handlers), structlog.is_configured())"
        )
        env = {**os.environ, "PYTHONPATH": str(src_dir)}

        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )

        assert result.stdout.split() == ["0", "False"]

    def test_reconfigure_replaces_handlers(self, restore_logging):
        root = logging.getLogger()
        configure_logging(level=logging.INFO, log_to_file=False)
        count = len(root.handlers)

        configure_logging(level=logging.INFO, log_to_file=False)

        assert len(root.handlers) == count

    def test_level_from_settings(self, monkeypatch, restore_logging):
        monkeypatch.setenv("LOG_LEVEL", "error")

        configure_logging(log_to_file=False)

        assert logging.getLogger().level == logging.ERROR

    def test_invalid_settings_fall_back_to_environment(self, monkeypatch, restore_logging):
        """'warn' fails validation but still names a stdlib level."""
        monkeypatch.setenv("LOG_LEVEL", "warn")

        configure_logging(log_to_file=False)

        assert logging.getLogger().level == logging.WARNING

    def test_file_output(self, tmp_path, restore_logging):
        configure_logging(level=logging.INFO, log_to_file=True, log_file_dir=tmp_path)

        get_logger("file_test").info("file_event", table="users")
        for handler in logging.getLogger().handlers:
            handler.flush()

        files = list(tmp_path.glob("sqlforge-*.log"))
        assert len(files) == 1
        line = files[0].read_text(encoding="utf-8").strip().splitlines()[-1]
        log_data = json.loads(line)
        assert log_data["event"] == "file_event"
        assert log_data["table"] == "users"

    def test_file_dir_from_settings(self, tmp_path, monkeypatch, restore_logging):
        log_dir = tmp_path / "logs"
        monkeypatch.setenv("SQLFORGE_LOG_TO_FILE", "true")
        monkeypatch.setenv("SQLFORGE_LOG_FILE_DIR", str(log_dir))

        configure_logging(level=logging.INFO)

        assert list(log_dir.glob("sqlforge-*.log"))
