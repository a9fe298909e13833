"""Tests for the in-memory repository adapters."""

import pytest

from conftest import make_message
from messaging.domain.value_objects.chat_room_id import ChatRoomId
from messaging.domain.value_objects.criteria import ChatRoomCriteria, MessageCriteria
from messaging.domain.value_objects.pagination import PageWindow, SortOrder
from messaging.domain.value_objects.user_id import UserId
from messaging.infrastructure.memory import InMemoryChatMessageRepository


@pytest.mark.asyncio
async def test_count_matching_skips_deleted_and_other_rooms(message_repository):
    assert await message_repository.count_matching(MessageCriteria(ChatRoomId("c1"))) == 25
    assert await message_repository.count_matching(MessageCriteria(ChatRoomId("c2"))) == 4
    assert await message_repository.count_matching(MessageCriteria(ChatRoomId("nope"))) == 0


@pytest.mark.asyncio
async def test_find_matching_sorts_windows_and_projects(message_repository):
    records = await message_repository.find_matching(
        MessageCriteria(ChatRoomId("c1")),
        ("id", "text"),
        SortOrder(field="created_at", descending=False),
        PageWindow(offset=2, limit=3),
    )

    assert records == [
        {"id": "c1-m02", "text": "message 2"},
        {"id": "c1-m03", "text": "message 3"},
        {"id": "c1-m04", "text": "message 4"},
    ]


@pytest.mark.asyncio
async def test_find_matching_past_the_end_is_empty(message_repository):
    records = await message_repository.find_matching(
        MessageCriteria(ChatRoomId("c1")),
        ("id",),
        SortOrder(field="created_at"),
        PageWindow(offset=30, limit=10),
    )

    assert records == []


@pytest.mark.asyncio
async def test_empty_repository():
    repo = InMemoryChatMessageRepository()
    repo.add(make_message(1, deleted=True))

    assert await repo.count_matching(MessageCriteria(ChatRoomId("c1"))) == 0


@pytest.mark.asyncio
async def test_chat_rooms_match_host_or_customer(chat_room_repository):
    criteria = ChatRoomCriteria(UserId("u2"))

    records = await chat_room_repository.find_matching(
        criteria, ("id", "host_id", "customer_id"), SortOrder(field="updated_at"), PageWindow(0, 10)
    )

    assert await chat_room_repository.count_matching(criteria) == 1
    assert records == [{"id": "r1", "host_id": "u1", "customer_id": "u2"}]


@pytest.mark.asyncio
async def test_deleted_room_is_invisible_to_its_participants(chat_room_repository):
    assert await chat_room_repository.count_matching(ChatRoomCriteria(UserId("u5"))) == 0
