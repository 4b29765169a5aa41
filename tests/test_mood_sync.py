"""
Tests for MoodSyncService.

Checks that every catalog mutation and every successful lookup by id drives
exactly one statistics operation, and that statistics failures never fail
the catalog operation that triggered them.
"""
import asyncio
from unittest.mock import AsyncMock

import pytest

from errors import ConflictError, NotFoundError, StoreUnavailableError, ValidationError
from tests.factories import make_mood


class TestCreateSync:

    @pytest.mark.asyncio
    async def test_create_adds_counter_at_zero(self, sync_service):
        entry = await sync_service.create_mood(make_mood(label="feliz"))

        counter = await sync_service.get_stats(entry.label)
        assert counter.access_count == 0

    @pytest.mark.asyncio
    async def test_duplicate_create_leaves_single_zero_counter(self, sync_service):
        await sync_service.create_mood(make_mood(label="feliz"))

        with pytest.raises(ConflictError):
            await sync_service.create_mood(make_mood(label="feliz"))

        counters = await sync_service.list_stats()
        assert [(c.mood_label, c.access_count) for c in counters] == [("feliz", 0)]

    @pytest.mark.asyncio
    async def test_invalid_create_touches_nothing(self, sync_service):
        with pytest.raises(ValidationError):
            await sync_service.create_mood(make_mood(phrases=[]))

        assert await sync_service.list_moods() == []
        assert await sync_service.list_stats() == []

    @pytest.mark.asyncio
    async def test_counter_failure_does_not_fail_create(self, sync_service):
        sync_service.stats.ensure_counter = AsyncMock(side_effect=StoreUnavailableError("down"))

        entry = await sync_service.create_mood(make_mood(label="feliz"))

        sync_service.stats.ensure_counter.assert_awaited_once_with("feliz")
        assert (await sync_service.get_mood(entry.id)).label == "feliz"


class TestAccessSync:

    @pytest.mark.asyncio
    async def test_get_records_one_access(self, sync_service):
        entry = await sync_service.create_mood(make_mood(label="feliz"))

        fetched = await sync_service.get_mood(entry.id)

        assert fetched.phrases == entry.phrases
        assert (await sync_service.get_stats("feliz")).access_count == 1

    @pytest.mark.asyncio
    async def test_not_found_records_nothing(self, sync_service):
        sync_service.stats.record_access = AsyncMock()

        with pytest.raises(NotFoundError):
            await sync_service.get_mood("does-not-exist")

        sync_service.stats.record_access.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_gets_lose_no_increments(self, sync_service):
        entry = await sync_service.create_mood(make_mood(label="feliz"))
        hits = 10

        await asyncio.gather(*(sync_service.get_mood(entry.id) for _ in range(hits)))

        assert (await sync_service.get_stats("feliz")).access_count == hits

    @pytest.mark.asyncio
    async def test_access_creates_missing_counter(self, sync_service):
        entry = await sync_service.create_mood(make_mood(label="feliz"))
        await sync_service.stats.delete_counter("feliz")

        await sync_service.get_mood(entry.id)

        assert (await sync_service.get_stats("feliz")).access_count == 1

    @pytest.mark.asyncio
    async def test_access_failure_still_returns_entry(self, sync_service):
        entry = await sync_service.create_mood(make_mood(label="feliz"))
        sync_service.stats.record_access = AsyncMock(side_effect=StoreUnavailableError("down"))

        fetched = await sync_service.get_mood(entry.id)

        assert fetched.id == entry.id


class TestRenameSync:

    @pytest.mark.asyncio
    async def test_rename_moves_counter_with_count(self, sync_service):
        entry = await sync_service.create_mood(make_mood(label="cansada"))
        for _ in range(3):
            await sync_service.get_mood(entry.id)

        await sync_service.update_mood(entry.id, {"label": "exausta"})

        results = await sync_service.filter_moods("exausta")
        assert [e.id for e in results] == [entry.id]
        assert await sync_service.get_stats("cansada") is None
        assert (await sync_service.get_stats("exausta")).access_count == 3

    @pytest.mark.asyncio
    async def test_update_without_label_change_skips_rename(self, sync_service):
        entry = await sync_service.create_mood(make_mood(label="feliz"))
        sync_service.stats.rename_counter = AsyncMock()

        await sync_service.update_mood(entry.id, {"snacks": ["pipoca"]})

        sync_service.stats.rename_counter.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_conflicting_rename_leaves_counters_alone(self, sync_service):
        await sync_service.create_mood(make_mood(label="feliz"))
        other = await sync_service.create_mood(make_mood(label="curiosa"))

        with pytest.raises(ConflictError):
            await sync_service.update_mood(other.id, {"label": "feliz"})

        labels = sorted(c.mood_label for c in await sync_service.list_stats())
        assert labels == ["curiosa", "feliz"]

    @pytest.mark.asyncio
    async def test_rename_unknown_id_raises_not_found(self, sync_service):
        with pytest.raises(NotFoundError):
            await sync_service.update_mood("does-not-exist", {"label": "feliz"})

    @pytest.mark.asyncio
    async def test_rename_failure_does_not_fail_update(self, sync_service):
        entry = await sync_service.create_mood(make_mood(label="cansada"))
        sync_service.stats.rename_counter = AsyncMock(side_effect=StoreUnavailableError("down"))

        updated = await sync_service.update_mood(entry.id, {"label": "exausta"})

        assert updated.label == "exausta"
        sync_service.stats.rename_counter.assert_awaited_once_with("cansada", "exausta")


class TestDeleteSync:

    @pytest.mark.asyncio
    async def test_delete_removes_entry_and_counter(self, sync_service):
        entry = await sync_service.create_mood(make_mood(label="feliz"))
        await sync_service.get_mood(entry.id)

        deleted = await sync_service.delete_mood(entry.id)

        assert deleted.label == "feliz"
        with pytest.raises(NotFoundError):
            await sync_service.get_mood(entry.id)
        assert all(c.mood_label != "feliz" for c in await sync_service.list_stats())

    @pytest.mark.asyncio
    async def test_delete_unknown_id_touches_nothing(self, sync_service):
        await sync_service.create_mood(make_mood(label="feliz"))
        sync_service.stats.delete_counter = AsyncMock()

        with pytest.raises(NotFoundError):
            await sync_service.delete_mood("does-not-exist")

        sync_service.stats.delete_counter.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_counter_delete_failure_leaves_orphan(self, sync_service, stats_service):
        entry = await sync_service.create_mood(make_mood(label="feliz"))
        original_delete = stats_service.delete_counter
        sync_service.stats.delete_counter = AsyncMock(side_effect=StoreUnavailableError("down"))

        await sync_service.delete_mood(entry.id)

        assert await sync_service.list_moods() == []
        assert (await stats_service.get_counter("feliz")) is not None
        assert await original_delete("feliz") is True
