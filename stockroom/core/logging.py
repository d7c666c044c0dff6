import json
import logging
from datetime import datetime, timezone
from typing import Optional

from stockroom.config import get_settings

PLAIN_FORMAT = "%(asctime)s %(levelname)s [{app}:{environment}] %(name)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, tagged with the application and environment."""

    def __init__(self, app_name: Optional[str] = None, environment: Optional[str] = None):
        super().__init__()
        self.app_name = app_name
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.app_name:
            payload["app"] = self.app_name
        if self.environment:
            payload["environment"] = self.environment
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def setup_logging() -> None:
    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler()
    if settings.LOG_JSON:
        handler.setFormatter(JsonFormatter(settings.APP_NAME, settings.ENVIRONMENT))
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt=PLAIN_FORMAT.format(app=settings.APP_NAME, environment=settings.ENVIRONMENT),
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    # SQL echo goes through the sqlalchemy.engine logger.
    if settings.SQL_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
