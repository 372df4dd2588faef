import logging
import os
from logging.handlers import RotatingFileHandler

from notify_producer.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: int | str | None = None) -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    if level is None:
        level = settings.LOG_LEVEL.upper()
    root.setLevel(level)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(ch)

    os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_file = os.path.join(settings.LOG_DIR, f"{settings.SERVICE_NAME}.log")
    fh = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5)
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)
