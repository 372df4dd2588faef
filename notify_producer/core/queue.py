import asyncio
import logging
from typing import Optional

from aio_pika import DeliveryMode, ExchangeType, Message, connect_robust
from aio_pika.abc import AbstractExchange, AbstractRobustConnection
from aio_pika.exceptions import AMQPError, ChannelInvalidStateError

from notify_producer.core.errors import PublishFailure

logger = logging.getLogger(__name__)


class NotificationProducer:
    """
    Owns the RabbitMQ connection used to publish notifications.

    The topic is a durable topic exchange; a durable queue of the same name is
    bound to it with "#" so every message is kept until someone consumes it.
    The channel runs with publisher confirms, so `send` returns only once the
    broker has acknowledged the write.
    """

    def __init__(self, url: str, topic: str, publish_timeout: Optional[float] = None):
        self.url = url
        self.topic = topic
        self.publish_timeout = publish_timeout
        self._connection: Optional[AbstractRobustConnection] = None
        self._exchange: Optional[AbstractExchange] = None

    @property
    def is_connected(self) -> bool:
        return self._connection is not None and not self._connection.is_closed

    async def connect(self) -> None:
        if self.is_connected:
            return

        self._connection = await connect_robust(self.url)
        channel = await self._connection.channel(publisher_confirms=True)
        self._exchange = await channel.declare_exchange(
            self.topic, ExchangeType.TOPIC, durable=True
        )
        queue = await channel.declare_queue(self.topic, durable=True)
        await queue.bind(self._exchange, routing_key="#")
        logger.info("Connected to broker, publishing to topic %s", self.topic)

    async def send(self, key: str, body: bytes) -> None:
        if self._exchange is None:
            raise PublishFailure("producer is not connected")

        msg = Message(
            body=body,
            content_type="application/json",
            delivery_mode=DeliveryMode.PERSISTENT,
        )
        try:
            await self._exchange.publish(
                msg, routing_key=key, timeout=self.publish_timeout
            )
        except (
            AMQPError,
            ChannelInvalidStateError,
            ConnectionError,
            asyncio.TimeoutError,
        ) as e:
            raise PublishFailure(str(e) or e.__class__.__name__) from e

    async def close(self) -> None:
        connection, self._connection = self._connection, None
        self._exchange = None
        if connection is not None and not connection.is_closed:
            await connection.close()
            logger.info("Broker connection closed")
