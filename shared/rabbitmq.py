import aio_pika
import structlog

from .events import build_event, to_json

EXCHANGE_NAME = "domain_events"

logger = structlog.get_logger()


class RabbitPublisher:
    """
    Publishes domain events to the topic exchange.

    Disabled when no broker URL is configured. Publish failures are logged and
    never propagate to the request that triggered them.
    """

    def __init__(self, rabbit_url: str | None, service_name: str):
        self.rabbit_url = rabbit_url
        self.service_name = service_name
        self.enabled = bool(rabbit_url)
        self._connection: aio_pika.RobustConnection | None = None
        self._channel: aio_pika.abc.AbstractChannel | None = None
        self._exchange: aio_pika.abc.AbstractExchange | None = None

    async def connect(self):
        if not self.enabled:
            return

        if self._connection and not self._connection.is_closed:
            return

        try:
            self._connection = await aio_pika.connect_robust(self.rabbit_url)
            self._channel = await self._connection.channel()
            self._exchange = await self._channel.declare_exchange(
                EXCHANGE_NAME,
                aio_pika.ExchangeType.TOPIC,
                durable=True,
            )
        except Exception as e:
            logger.warning("rabbitmq connect failed", publisher=self.service_name, error=str(e))
            self._connection = None
            self._channel = None
            self._exchange = None
            raise

    async def publish(self, routing_key: str, message_body: str):
        if not self.enabled:
            return

        try:
            await self.connect()
        except Exception:
            return

        if not self._exchange:
            return

        try:
            msg = aio_pika.Message(
                body=message_body.encode("utf-8"),
                content_type="application/json",
                delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
            )
            await self._exchange.publish(msg, routing_key=routing_key)
        except Exception as e:
            logger.warning(
                "rabbitmq publish failed",
                publisher=self.service_name,
                routing_key=routing_key,
                error=str(e),
            )

    async def publish_event(self, event_type: str, data: dict) -> dict:
        event = build_event(event_type, data, source=self.service_name)
        await self.publish(event_type, to_json(event))
        return event

    async def close(self):
        try:
            if self._connection and not self._connection.is_closed:
                await self._connection.close()
        finally:
            self._connection = None
            self._channel = None
            self._exchange = None
