from datetime import datetime, timedelta, timezone

import pytest
from dishka import Provider, Scope, make_async_container, provide
from fastapi.testclient import TestClient

from messaging.domain.entities import ChatMessage, ChatRoom
from messaging.domain.ports.repositories import (
    ChatMessageRepository,
    ChatRoomRepository,
)
from messaging.fastapi_app import create_fastapi_app
from messaging.infrastructure.memory import (
    InMemoryChatMessageRepository,
    InMemoryChatRoomRepository,
)
from messaging.setup.ioc.use_cases import UseCaseProvider

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_message(index, chat_id="c1", deleted=False):
    created_at = BASE_TIME + timedelta(minutes=index)
    return ChatMessage(
        id=f"{chat_id}-m{index:02d}",
        chat_id=chat_id,
        text=f"message {index}",
        created_at=created_at,
        created_by="u1" if index % 2 else "u2",
        deleted_at=created_at + timedelta(hours=1) if deleted else None,
    )


def make_room(room_id, host_id, customer_id, updated_minutes, deleted=False):
    return ChatRoom(
        id=room_id,
        booking_id=f"booking-{room_id}",
        host_id=host_id,
        customer_id=customer_id,
        created_at=BASE_TIME,
        updated_at=BASE_TIME + timedelta(minutes=updated_minutes),
        deleted_at=BASE_TIME + timedelta(days=1) if deleted else None,
    )


@pytest.fixture
def message_repository():
    """25 live messages in c1, plus deleted ones and another room's messages."""
    return InMemoryChatMessageRepository(
        [make_message(i) for i in range(25)]
        + [make_message(i, deleted=True) for i in range(25, 28)]
        + [make_message(i, chat_id="c2") for i in range(4)]
    )


@pytest.fixture
def chat_room_repository():
    """u1 hosts r1 and r3 and is the customer of r2; r4 is deleted, r5 is someone else's."""
    return InMemoryChatRoomRepository(
        [
            make_room("r1", host_id="u1", customer_id="u2", updated_minutes=5),
            make_room("r2", host_id="u3", customer_id="u1", updated_minutes=30),
            make_room("r3", host_id="u1", customer_id="u4", updated_minutes=15),
            make_room("r4", host_id="u1", customer_id="u5", updated_minutes=60, deleted=True),
            make_room("r5", host_id="u6", customer_id="u7", updated_minutes=90),
        ]
    )


class InMemoryProvider(Provider):
    def __init__(self, message_repository, chat_room_repository):
        super().__init__()
        self._message_repository = message_repository
        self._chat_room_repository = chat_room_repository

    @provide(scope=Scope.APP)
    def get_chat_message_repository(self) -> ChatMessageRepository:
        return self._message_repository

    @provide(scope=Scope.APP)
    def get_chat_room_repository(self) -> ChatRoomRepository:
        return self._chat_room_repository


@pytest.fixture()
def app(message_repository, chat_room_repository):
    """FastAPI app wired to in-memory repositories."""
    container = make_async_container(
        InMemoryProvider(message_repository, chat_room_repository),
        UseCaseProvider(),
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def user_headers():
    return {"X-User-Id": "u1"}
