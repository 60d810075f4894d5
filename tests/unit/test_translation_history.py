"""
Unit tests for translation history: scoping, ordering, pagination and
favorite annotation
"""
import pytest

from app.schemas.translation import GetTranslationHistoryInput
from app.services.translation_query_service import TranslationQueryService


@pytest.mark.asyncio
async def test_history_newest_first(db_session, make_translation):
    oldest = await make_translation(source_text="hello", minutes_ago=60)
    middle = await make_translation(source_text="goodbye", minutes_ago=30)
    newest = await make_translation(source_text="thank you", minutes_ago=10)
    service = TranslationQueryService(db_session)

    history = await service.get_translation_history(GetTranslationHistoryInput(limit=10, offset=0))

    assert [t.id for t in history] == [newest.id, middle.id, oldest.id]
    assert all(
        history[i].created_at >= history[i + 1].created_at for i in range(len(history) - 1)
    )


@pytest.mark.asyncio
async def test_equal_timestamps_ordered_by_insertion(db_session, make_translation):
    first = await make_translation(source_text="a", minutes_ago=5)
    second = await make_translation(source_text="b", minutes_ago=5)
    service = TranslationQueryService(db_session)

    history = await service.get_translation_history(GetTranslationHistoryInput())

    assert [t.id for t in history] == [second.id, first.id]


@pytest.mark.asyncio
async def test_pages_reconstruct_full_history(db_session, make_translation):
    for minutes in range(7):
        await make_translation(source_text=f"phrase {minutes}", minutes_ago=minutes)
    service = TranslationQueryService(db_session)

    full = await service.get_translation_history(GetTranslationHistoryInput(limit=50))
    pages = []
    for offset in range(0, 9, 3):
        pages.extend(
            await service.get_translation_history(GetTranslationHistoryInput(limit=3, offset=offset))
        )

    assert len(full) == 7
    assert [t.id for t in pages] == [t.id for t in full]


@pytest.mark.asyncio
async def test_offset_past_end_is_empty(db_session, make_translation):
    await make_translation()
    service = TranslationQueryService(db_session)

    assert await service.get_translation_history(GetTranslationHistoryInput(offset=5)) == []


@pytest.mark.asyncio
async def test_unspecified_scope_returns_everything(db_session, make_translation):
    await make_translation(user_id=None)
    await make_translation(user_id="u1")
    await make_translation(user_id="u2")
    service = TranslationQueryService(db_session)

    history = await service.get_translation_history(GetTranslationHistoryInput())

    assert {t.user_id for t in history} == {None, "u1", "u2"}


@pytest.mark.asyncio
async def test_anonymous_scope_returns_public_only(db_session, make_translation):
    public = await make_translation(user_id=None)
    await make_translation(user_id="u1")
    service = TranslationQueryService(db_session)

    history = await service.get_translation_history(GetTranslationHistoryInput(user_id=None))

    assert [t.id for t in history] == [public.id]


@pytest.mark.asyncio
async def test_owner_scope_returns_own_translations_only(db_session, make_translation):
    await make_translation(user_id=None)
    mine = await make_translation(user_id="u1")
    await make_translation(user_id="u2")
    service = TranslationQueryService(db_session)

    history = await service.get_translation_history(GetTranslationHistoryInput(user_id="u1"))

    assert [t.id for t in history] == [mine.id]


@pytest.mark.asyncio
async def test_owner_history_marks_own_favorites(db_session, make_translation, make_favorite):
    liked = await make_translation(user_id="u1", minutes_ago=2)
    other = await make_translation(user_id="u1", minutes_ago=1)
    await make_favorite(liked.id, "u1")
    await make_favorite(other.id, "u2")
    service = TranslationQueryService(db_session)

    history = await service.get_translation_history(GetTranslationHistoryInput(user_id="u1"))

    flags = {t.id: t.is_favorite for t in history}
    assert flags == {liked.id: True, other.id: False}


@pytest.mark.asyncio
async def test_favorites_never_duplicate_rows(db_session, make_translation, make_favorite):
    translation = await make_translation(user_id=None)
    await make_favorite(translation.id, "u1")
    await make_favorite(translation.id, "u2")
    await make_favorite(translation.id, "u3")
    service = TranslationQueryService(db_session)

    history = await service.get_translation_history(GetTranslationHistoryInput())

    assert len(history) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("query", [GetTranslationHistoryInput(), GetTranslationHistoryInput(user_id=None)])
async def test_unidentified_requester_sees_no_favorites(db_session, make_translation, make_favorite, query):
    translation = await make_translation(user_id=None)
    await make_favorite(translation.id, "u1")
    service = TranslationQueryService(db_session)

    history = await service.get_translation_history(query)

    assert [t.is_favorite for t in history] == [False]
