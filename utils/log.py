"""JSON 结构化日志"""
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from config.settings import LOG_LEVEL, SERVICE_NAME


class LoanJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def setup_logging(level: str = LOG_LEVEL) -> None:
    """配置根 logger；重复调用只保留一个 handler"""
    logger = logging.getLogger()
    logger.setLevel(level.upper())
    logger.handlers.clear()

    # stderr，避免干扰 CLI 的 stdout 输出
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(LoanJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)
