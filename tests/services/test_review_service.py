import pytest

from movieservices.database.repos.memory_repo import InMemoryReviewRepo
from movieservices.domain.entities.review import Review
from movieservices.domain.errors import ReviewNotFoundError
from movieservices.services.reviews.service import ReviewService

pytestmark = pytest.mark.anyio


@pytest.fixture()
def svc() -> ReviewService:
    return ReviewService(InMemoryReviewRepo())


async def test_create_and_get(svc):
    saved = await svc.create(Review(review_id="mine", movie_info_id=4, comment="BAD!", rating=5.0))
    assert saved.review_id and saved.review_id != "mine"
    assert await svc.get_by_id(saved.review_id) == saved


async def test_orphan_movie_info_id_is_allowed(svc):
    saved = await svc.create(Review(movie_info_id=999_999, comment="Who?", rating=1.0))
    assert saved.movie_info_id == 999_999


async def test_list_all_filter(svc):
    await svc.create(Review(movie_info_id=1, comment="Amazing", rating=9.0))
    await svc.create(Review(movie_info_id=2, comment="Boring", rating=6.7))
    await svc.create(Review(movie_info_id=3, comment="Fun", rating=8.0))
    assert len(await svc.list_all()) == 3
    assert [r.comment for r in await svc.list_all(movie_info_id=2)] == ["Boring"]


async def test_update_never_touches_movie_info_id(svc):
    saved = await svc.create(Review(movie_info_id=1, comment="Amazing", rating=9.0))
    upd = await svc.update(saved.review_id, {"comment": "Meh", "rating": 5.5, "movie_info_id": 7})
    assert (upd.review_id, upd.movie_info_id, upd.comment, upd.rating) == (saved.review_id, 1, "Meh", 5.5)


async def test_update_missing(svc):
    with pytest.raises(ReviewNotFoundError):
        await svc.update("nope", {"comment": "x"})


async def test_get_missing(svc):
    with pytest.raises(ReviewNotFoundError):
        await svc.get_by_id("nope")


async def test_delete_idempotent(svc):
    saved = await svc.create(Review(movie_info_id=1))
    await svc.delete_by_id(saved.review_id)
    await svc.delete_by_id(saved.review_id)
    assert await svc.list_all() == []


async def test_update_keeps_fields_not_sent(svc):
    saved = await svc.create(Review(movie_info_id=1, comment="Amazing", rating=9.0))
    upd = await svc.update(saved.review_id, {"rating": 7.0})
    assert (upd.comment, upd.rating) == ("Amazing", 7.0)
    upd = await svc.update(saved.review_id, {"comment": "Good"})
    assert (upd.comment, upd.rating) == ("Good", 7.0)
