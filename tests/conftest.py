import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from notify_producer.main import app
from notify_producer.api.v1.notifications import get_publisher
from notify_producer.core.directory import StaticUserDirectory
from notify_producer.core.errors import PublishFailure
from notify_producer.core.notification import NotificationPublisher
from notify_producer.schemas.notification import User


class RecordingProducer:
    def __init__(self):
        self.sent = []
        self.error = None

    async def send(self, key: str, body: bytes) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append((key, body))

    def fail_with(self, message: str):
        self.error = PublishFailure(message)


@pytest.fixture
def directory():
    return StaticUserDirectory([User(id=1, name="Emma"), User(id=2, name="Bruno")])


@pytest.fixture
def producer():
    return RecordingProducer()


@pytest.fixture
def publisher(directory, producer):
    return NotificationPublisher(directory, producer)


@pytest_asyncio.fixture(scope="function")
async def async_app(publisher):
    app.dependency_overrides[get_publisher] = lambda: publisher
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def client(async_app):
    transport = ASGITransport(app=async_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
