# notify_producer/core/notification.py
import logging
import re
from typing import Optional, Protocol

from notify_producer.core.directory import UserDirectory
from notify_producer.core.errors import (
    InvalidInput,
    PublishFailure,
    SerializationError,
    UserNotFound,
)
from notify_producer.schemas.notification import Notification

logger = logging.getLogger(__name__)

USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class Producer(Protocol):
    async def send(self, key: str, body: bytes) -> None: ...


def parse_user_id(field: str, raw: Optional[str]) -> int:
    if raw is None or not USER_ID_PATTERN.fullmatch(raw):
        raise InvalidInput(
            f"failed to parse ID from form value {field}: invalid syntax {raw!r}"
        )
    return int(raw)


def serialize_notification(notification: Notification) -> bytes:
    try:
        return notification.model_dump_json(by_alias=True).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to marshal notification: {e}") from e


class NotificationPublisher:
    def __init__(self, directory: UserDirectory, producer: Producer):
        self.directory = directory
        self.producer = producer

    async def publish(self, from_id: int, to_id: int, message: str) -> Notification:
        """
        Resolve both parties, then publish one notification keyed by the
        recipient id. Nothing reaches the broker unless both ids resolve and
        the record serializes. Each call is a new broker message; there is no
        retry and no deduplication.
        """
        sender = self.directory.resolve(from_id)
        if sender is None:
            logger.warning(f"Sender {from_id} not found")
            raise UserNotFound()
        recipient = self.directory.resolve(to_id)
        if recipient is None:
            logger.warning(f"Recipient {to_id} not found")
            raise UserNotFound()

        notification = Notification(sender=sender, recipient=recipient, message=message)
        payload = serialize_notification(notification)

        try:
            await self.producer.send(str(recipient.id), payload)
        except PublishFailure:
            logger.exception(f"Publishing notification for {recipient.id} failed")
            raise
        except Exception as e:
            logger.exception(f"Publishing notification for {recipient.id} failed")
            raise PublishFailure(str(e) or e.__class__.__name__) from e
        logger.info(f"Notification from {sender.id} sent to key {recipient.id}")
        return notification
