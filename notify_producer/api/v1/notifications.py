# notify_producer/api/v1/notifications.py
import logging

from fastapi import APIRouter, Depends, Form, Request

from notify_producer.core.errors import InvalidInput
from notify_producer.core.notification import NotificationPublisher, parse_user_id
from notify_producer.schemas.notification import MessageOut

logger = logging.getLogger(__name__)
router = APIRouter(tags=["notifications"])


def get_publisher(request: Request) -> NotificationPublisher:
    return request.app.state.publisher


@router.post("/send", response_model=MessageOut)
async def send_notification(
    from_id: str = Form("", alias="fromID"),
    to_id: str = Form("", alias="toID"),
    message: str = Form(""),
    publisher: NotificationPublisher = Depends(get_publisher),
):
    try:
        sender_id = parse_user_id("fromID", from_id)
        recipient_id = parse_user_id("toID", to_id)
    except InvalidInput as e:
        logger.warning(f"Rejected notification request: {e.message}")
        raise

    await publisher.publish(sender_id, recipient_id, message)
    return MessageOut(message="Notification sent successfully!")
