import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from pythonjsonlogger import jsonlogger

from .config import settings

PACKAGE_LOGGER_PREFIX = "assessment_engine."
LOG_FORMAT = '%(timestamp)s %(level)s %(name)s %(message)s'


class AssessmentJsonFormatter(jsonlogger.JsonFormatter):
    """
    One JSON object per record. Records from the engine carry a `component`
    field ("riasec.scorer", "core.config", ...) so log pipelines can filter
    by pipeline stage without parsing logger names.
    """
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record['level'] = record.levelname
        if record.name.startswith(PACKAGE_LOGGER_PREFIX):
            log_record['component'] = record.name[len(PACKAGE_LOGGER_PREFIX):]
        if record.levelno >= logging.WARNING:
            log_record['location'] = f"{record.module}:{record.lineno}"


def setup_logging(log_level_str: Optional[str] = None) -> logging.Logger:
    """
    Installs a stdout JSON handler on the root logger for host applications.

    The engine never calls this itself. The level defaults to RIASEC_LOG_LEVEL;
    calling it again only changes the level.
    """
    level_name = (log_level_str or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not any(isinstance(h.formatter, AssessmentJsonFormatter) for h in root_logger.handlers):
        log_handler = logging.StreamHandler(sys.stdout)
        log_handler.setFormatter(AssessmentJsonFormatter(LOG_FORMAT))
        root_logger.addHandler(log_handler)
        root_logger.info(f"JSON logging configured at level {logging.getLevelName(log_level)}")

    return root_logger
