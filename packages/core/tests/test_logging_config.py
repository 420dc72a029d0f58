"""setup_logging 单元测试"""

import json
import logging

import pytest
import structlog
from todoapp.core.logging_config import QUIET_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """setup_logging 会重新配置 structlog 与 root logger，测试后还原"""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    quiet_levels = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    for name, quiet_level in quiet_levels.items():
        logging.getLogger(name).setLevel(quiet_level)
    structlog.reset_defaults()


class TestSetupLogging:
    def test_json_lines(self, capsys):
        setup_logging("json", "INFO")
        structlog.get_logger().info("draft_restored", keys=["name"])

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "draft_restored"
        assert record["level"] == "info"
        assert record["keys"] == ["name"]
        assert "timestamp" in record

    def test_level_filters_events(self, capsys):
        setup_logging("json", "WARNING")
        log = structlog.get_logger()
        log.info("draft_cleared", removed=3)
        log.warning("draft_field_decode_failed", key="recurring")

        err = capsys.readouterr().err
        assert "draft_cleared" not in err
        assert "draft_field_decode_failed" in err

    def test_stdlib_records_rendered(self, capsys):
        setup_logging("json", "INFO")
        logging.getLogger("todoapp.other").warning("plain %s", "message")

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "plain message"
        assert record["level"] == "warning"

    def test_aiosqlite_quieted(self):
        setup_logging("dev", "DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("aiosqlite").getEffectiveLevel() == logging.WARNING

    def test_unknown_level_uses_info(self):
        setup_logging("dev", "chatty")
        assert logging.getLogger().level == logging.INFO
