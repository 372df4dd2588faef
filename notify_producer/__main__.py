import logging

import uvicorn

from notify_producer.core.config import settings
from notify_producer.core.logger import configure_logging

logger = logging.getLogger(__name__)


def run() -> None:
    configure_logging()
    logger.info(
        "Notification producer started at http://localhost:%s", settings.PRODUCER_PORT
    )
    uvicorn.run(
        "notify_producer.main:app",
        host=settings.PRODUCER_HOST,
        port=settings.PRODUCER_PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
