"""
Tests for MoodCatalogService.

Covers validation, label uniqueness and the NotFound paths of the catalog
on its own, without any statistics involved.
"""
import pytest

from errors import ConflictError, NotFoundError, ValidationError
from routers.services import MoodCatalogService, RECOGNIZED_MOODS
from storage.models import LABEL_MAX_LENGTH
from tests.factories import make_mood


class TestCreateMood:
    """create_mood validation and uniqueness."""

    @pytest.mark.asyncio
    async def test_create_trims_label_and_items_keeping_order(self, catalog):
        entry = await catalog.create_mood(make_mood(
            label="  cansada ",
            phrases=["  primeira ", "segunda  ", " terceira"],
        ))

        fetched = await catalog.get_mood(entry.id)
        assert fetched.label == "cansada"
        assert fetched.phrases == ["primeira", "segunda", "terceira"]
        assert fetched.songs == ["Weightless"]
        assert fetched.created_at is not None
        assert fetched.updated_at is not None

    @pytest.mark.asyncio
    async def test_empty_list_is_rejected_and_nothing_persisted(self, catalog):
        with pytest.raises(ValidationError) as exc_info:
            await catalog.create_mood(make_mood(phrases=[]))

        assert any(error["loc"] == ("phrases",) for error in exc_info.value.errors)
        assert await catalog.list_moods() == []

    @pytest.mark.asyncio
    async def test_blank_item_is_rejected(self, catalog):
        with pytest.raises(ValidationError):
            await catalog.create_mood(make_mood(snacks=["banana", "   "]))

    @pytest.mark.asyncio
    async def test_missing_field_is_rejected(self, catalog):
        payload = make_mood()
        del payload["rest_ideas"]

        with pytest.raises(ValidationError):
            await catalog.create_mood(payload)

    @pytest.mark.asyncio
    async def test_blank_label_is_rejected(self, catalog):
        with pytest.raises(ValidationError):
            await catalog.create_mood(make_mood(label="   "))

    @pytest.mark.asyncio
    async def test_free_form_label_allowed_by_default(self, catalog):
        entry = await catalog.create_mood(make_mood(label="exausta"))
        assert entry.label == "exausta"

    @pytest.mark.asyncio
    async def test_strict_mode_only_accepts_recognized_moods(self, database):
        strict_catalog = MoodCatalogService(database, strict_labels=True)

        with pytest.raises(ValidationError):
            await strict_catalog.create_mood(make_mood(label="exausta"))

        entry = await strict_catalog.create_mood(make_mood(label=RECOGNIZED_MOODS[0]))
        assert entry.label == "cansada"

    @pytest.mark.asyncio
    async def test_duplicate_label_conflicts(self, catalog):
        await catalog.create_mood(make_mood(label="feliz"))

        with pytest.raises(ConflictError):
            await catalog.create_mood(make_mood(label="feliz"))

        assert len(await catalog.list_moods()) == 1

    @pytest.mark.asyncio
    async def test_label_match_is_case_sensitive(self, catalog):
        await catalog.create_mood(make_mood(label="feliz"))
        entry = await catalog.create_mood(make_mood(label="Feliz"))

        assert entry.label == "Feliz"


class TestLookup:
    """get_mood, list_moods and filter_by_label."""

    @pytest.mark.asyncio
    async def test_get_unknown_id_raises_not_found(self, catalog):
        with pytest.raises(NotFoundError):
            await catalog.get_mood("does-not-exist")

    @pytest.mark.asyncio
    async def test_list_returns_all_entries(self, catalog):
        await catalog.create_mood(make_mood(label="feliz"))
        await catalog.create_mood(make_mood(label="curiosa"))

        labels = {entry.label for entry in await catalog.list_moods()}
        assert labels == {"feliz", "curiosa"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("label", [None, "", "   "])
    async def test_filter_requires_label(self, catalog, label):
        with pytest.raises(ValidationError):
            await catalog.filter_by_label(label)

    @pytest.mark.asyncio
    async def test_filter_without_match_returns_empty_list(self, catalog):
        await catalog.create_mood(make_mood(label="feliz"))

        assert await catalog.filter_by_label("ansiosa") == []

    @pytest.mark.asyncio
    async def test_filter_returns_matching_entry(self, catalog):
        created = await catalog.create_mood(make_mood(label="feliz"))
        await catalog.create_mood(make_mood(label="curiosa"))

        results = await catalog.filter_by_label("feliz")
        assert [entry.id for entry in results] == [created.id]


class TestUpdateAndDelete:
    """update_mood and delete_mood."""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, catalog):
        entry = await catalog.create_mood(make_mood(label="feliz"))

        updated = await catalog.update_mood(entry.id, {"colors": [" amarelo ", "rosa"]})

        assert updated.colors == ["amarelo", "rosa"]
        assert updated.label == "feliz"
        assert updated.phrases == entry.phrases

    @pytest.mark.asyncio
    async def test_update_unknown_id_raises_not_found(self, catalog):
        with pytest.raises(NotFoundError):
            await catalog.update_mood("does-not-exist", {"label": "feliz"})

    @pytest.mark.asyncio
    async def test_update_to_label_of_other_entry_conflicts(self, catalog):
        await catalog.create_mood(make_mood(label="feliz"))
        other = await catalog.create_mood(make_mood(label="curiosa"))

        with pytest.raises(ConflictError):
            await catalog.update_mood(other.id, {"label": "feliz"})

        assert (await catalog.get_mood(other.id)).label == "curiosa"

    @pytest.mark.asyncio
    async def test_update_keeping_own_label_is_allowed(self, catalog):
        entry = await catalog.create_mood(make_mood(label="feliz"))

        updated = await catalog.update_mood(entry.id, {"label": "feliz", "emojis": ["😀"]})
        assert updated.emojis == ["😀"]

    @pytest.mark.asyncio
    async def test_update_with_empty_list_is_rejected(self, catalog):
        entry = await catalog.create_mood(make_mood(label="feliz"))

        with pytest.raises(ValidationError):
            await catalog.update_mood(entry.id, {"phrases": []})

    @pytest.mark.asyncio
    async def test_update_without_fields_is_rejected(self, catalog):
        entry = await catalog.create_mood(make_mood(label="feliz"))

        with pytest.raises(ValidationError):
            await catalog.update_mood(entry.id, {})

    @pytest.mark.asyncio
    async def test_delete_removes_entry(self, catalog):
        entry = await catalog.create_mood(make_mood(label="feliz"))

        await catalog.delete_mood(entry.id)

        with pytest.raises(NotFoundError):
            await catalog.get_mood(entry.id)

    @pytest.mark.asyncio
    async def test_delete_unknown_id_raises_not_found(self, catalog):
        with pytest.raises(NotFoundError):
            await catalog.delete_mood("does-not-exist")


class TestLabelLength:
    """Labels longer than the label column are rejected before reaching the store."""

    @pytest.mark.asyncio
    async def test_create_with_overlong_label_is_rejected(self, catalog):
        with pytest.raises(ValidationError) as exc_info:
            await catalog.create_mood(make_mood(label="x" * (LABEL_MAX_LENGTH + 1)))

        assert any(error["loc"] == ("label",) for error in exc_info.value.errors)
        assert await catalog.list_moods() == []

    @pytest.mark.asyncio
    async def test_create_with_label_at_limit_is_allowed(self, catalog):
        entry = await catalog.create_mood(make_mood(label="x" * LABEL_MAX_LENGTH))
        assert len(entry.label) == LABEL_MAX_LENGTH

    @pytest.mark.asyncio
    async def test_update_with_overlong_label_is_rejected(self, catalog):
        entry = await catalog.create_mood(make_mood(label="feliz"))

        with pytest.raises(ValidationError):
            await catalog.update_mood(entry.id, {"label": "x" * 300})

        assert (await catalog.get_mood(entry.id)).label == "feliz"
