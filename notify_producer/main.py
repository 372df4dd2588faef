import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from notify_producer.api.v1 import notifications as notifications_router
from notify_producer.core.config import settings
from notify_producer.core.directory import StaticUserDirectory
from notify_producer.core.errors import NotificationError
from notify_producer.core.logger import configure_logging
from notify_producer.core.notification import NotificationPublisher
from notify_producer.core.queue import NotificationProducer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()

    producer = NotificationProducer(
        settings.RABBITMQ_URL,
        settings.NOTIFICATION_TOPIC,
        publish_timeout=settings.PUBLISH_TIMEOUT,
    )
    try:
        await producer.connect()
    except Exception:
        logger.critical("failed to initialize producer", exc_info=True)
        await producer.close()
        raise

    app.state.producer = producer
    app.state.publisher = NotificationPublisher(StaticUserDirectory(), producer)

    try:
        yield
    finally:
        await producer.close()


app = FastAPI(title="Notification producer", lifespan=lifespan)


@app.exception_handler(NotificationError)
async def notification_error_handler(request: Request, exc: NotificationError):
    if exc.status_code >= 500:
        logger.error("Request to %s failed: %s", request.url.path, exc.message)
    else:
        logger.warning("Request to %s rejected: %s", request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


app.include_router(notifications_router.router)
