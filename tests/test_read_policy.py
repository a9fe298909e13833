"""Tests for the degrade-to-empty read policy."""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from messaging.application.common.read_policy import PageRead, read_page_or_empty
from messaging.domain.value_objects.pagination import PageWindow, SortOrder

SORT = SortOrder(field="created_at")
WINDOW = PageWindow(offset=0, limit=10)


@pytest.fixture
def repository():
    repo = MagicMock()
    repo.count_matching = AsyncMock(return_value=25)
    repo.find_matching = AsyncMock(return_value=[{"id": "a"}, {"id": "b"}])
    return repo


async def _read(repository):
    return await read_page_or_empty(
        repository, "criteria", ("id",), SORT, WINDOW, context="chat room #c1"
    )


@pytest.mark.asyncio
async def test_reads_count_and_page(repository):
    result = await _read(repository)

    assert result == PageRead(pages=3, records=[{"id": "a"}, {"id": "b"}])
    repository.count_matching.assert_awaited_once_with("criteria")
    repository.find_matching.assert_awaited_once_with("criteria", ("id",), SORT, WINDOW)


@pytest.mark.asyncio
async def test_count_failure_degrades_to_empty_page(repository, caplog):
    repository.count_matching.side_effect = RuntimeError("connection reset")

    with caplog.at_level(logging.ERROR):
        result = await _read(repository)

    assert result == PageRead.empty()
    # The other read still ran to completion
    repository.find_matching.assert_awaited_once()
    assert "chat room #c1" in caplog.text
    assert "connection reset" in caplog.text


@pytest.mark.asyncio
async def test_fetch_failure_degrades_to_empty_page(repository):
    repository.find_matching.side_effect = TimeoutError("slow store")

    result = await _read(repository)

    assert result.pages == 0
    assert result.records == []
    repository.count_matching.assert_awaited_once()


@pytest.mark.asyncio
async def test_missing_fetch_result_degrades_to_empty_page(repository):
    repository.find_matching.return_value = None

    assert await _read(repository) == PageRead.empty()


@pytest.mark.asyncio
async def test_page_beyond_range_keeps_page_count(repository):
    repository.find_matching.return_value = []

    result = await _read(repository)

    assert result.pages == 3
    assert result.records == []


@pytest.mark.asyncio
async def test_cancellation_is_not_contained(repository):
    repository.count_matching.side_effect = asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await _read(repository)


@pytest.mark.asyncio
async def test_cancellation_wins_over_concurrent_store_failure(repository, caplog):
    repository.count_matching.side_effect = RuntimeError("db down")
    repository.find_matching.side_effect = asyncio.CancelledError()

    with caplog.at_level(logging.ERROR):
        with pytest.raises(asyncio.CancelledError):
            await _read(repository)

    assert "Store failure" not in caplog.text
