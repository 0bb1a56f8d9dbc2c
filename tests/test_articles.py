"""
Article endpoint tests: listing, fetching by id and patching votes,
including the 400 / 404 mapping for bad and unknown ids.

Every test starts from the seeded fixture dataset (see conftest.py).
"""
import pytest
from httpx import AsyncClient

ARTICLE_1 = {
    "article_id": 1,
    "title": "Living in the shadow of a great man",
    "topic": "mitch",
    "author": "butter_bridge",
    "body": "I find this existence challenging",
    "created_at": "2020-07-09T20:11:00.000Z",
    "votes": 100,
    "article_img_url": (
        "https://images.pexels.com/photos/158651/"
        "news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"
    ),
}


# ---------------------------------------------------------------------------
# Infrastructure / health
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_health(async_client: AsyncClient):
    resp = await async_client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


# ---------------------------------------------------------------------------
# GET /api/articles
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_articles(async_client: AsyncClient):
    """Every seeded article is returned with the list-view fields and no body."""
    resp = await async_client.get("/api/articles")
    assert resp.status_code == 200
    articles = resp.json()["articles"]
    assert len(articles) == 13

    for article in articles:
        assert isinstance(article["article_id"], int)
        assert isinstance(article["title"], str)
        assert isinstance(article["topic"], str)
        assert isinstance(article["author"], str)
        assert isinstance(article["created_at"], str)
        assert isinstance(article["votes"], int)
        assert isinstance(article["article_img_url"], str)
        assert isinstance(article["comment_count"], int)
        assert "body" not in article


@pytest.mark.asyncio
async def test_list_articles_sorted_newest_first(async_client: AsyncClient):
    resp = await async_client.get("/api/articles")
    dates = [a["created_at"] for a in resp.json()["articles"]]
    assert dates == sorted(dates, reverse=True)


@pytest.mark.asyncio
async def test_list_articles_ties_keep_insertion_order(async_client: AsyncClient):
    """Articles 12 and 13 share a timestamp; the earlier insert comes first."""
    resp = await async_client.get("/api/articles")
    ids = [a["article_id"] for a in resp.json()["articles"]]
    assert ids.index(12) + 1 == ids.index(13)


@pytest.mark.asyncio
async def test_list_articles_comment_counts(async_client: AsyncClient):
    resp = await async_client.get("/api/articles")
    counts = {a["article_id"]: a["comment_count"] for a in resp.json()["articles"]}
    assert counts[1] == 11
    assert counts[2] == 0
    assert counts[3] == 2
    assert sum(counts.values()) == 18


@pytest.mark.asyncio
async def test_list_articles_filter_by_topic(async_client: AsyncClient):
    resp = await async_client.get("/api/articles", params={"topic": "cats"})
    assert resp.status_code == 200
    articles = resp.json()["articles"]
    assert [a["article_id"] for a in articles] == [5]


@pytest.mark.asyncio
async def test_list_articles_topic_without_articles(async_client: AsyncClient):
    resp = await async_client.get("/api/articles", params={"topic": "paper"})
    assert resp.status_code == 200
    assert resp.json()["articles"] == []


@pytest.mark.asyncio
async def test_list_articles_sort_by_votes_ascending(async_client: AsyncClient):
    resp = await async_client.get("/api/articles", params={"sort_by": "votes", "order": "asc"})
    assert resp.status_code == 200
    votes = [a["votes"] for a in resp.json()["articles"]]
    assert votes == sorted(votes)
    assert votes[-1] == 100


@pytest.mark.asyncio
async def test_list_articles_sort_by_comment_count(async_client: AsyncClient):
    resp = await async_client.get("/api/articles", params={"sort_by": "comment_count"})
    articles = resp.json()["articles"]
    counts = [a["comment_count"] for a in articles]
    assert counts == sorted(counts, reverse=True)
    assert articles[0]["article_id"] == 1


@pytest.mark.asyncio
async def test_list_articles_unknown_sort_falls_back(async_client: AsyncClient):
    """Unknown sort_by / order values never fail; default ordering applies."""
    default = (await async_client.get("/api/articles")).json()["articles"]
    resp = await async_client.get(
        "/api/articles", params={"sort_by": "body; DROP TABLE articles", "order": "sideways"}
    )
    assert resp.status_code == 200
    assert resp.json()["articles"] == default


# ---------------------------------------------------------------------------
# GET /api/articles/{article_id}
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_article_by_id(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/1")
    assert resp.status_code == 200
    article = resp.json()["article"]
    assert article == ARTICLE_1
    assert "comment_count" not in article


@pytest.mark.asyncio
async def test_get_article_not_found(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/20")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "Not found"}


@pytest.mark.asyncio
async def test_get_article_negative_id_not_found(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/-1")
    assert resp.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("bad_id", ["banana", "1.5", "1e3", "0x1", "99999999999"])
async def test_get_article_invalid_id(async_client: AsyncClient, bad_id: str):
    resp = await async_client.get(f"/api/articles/{bad_id}")
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad request"}


# ---------------------------------------------------------------------------
# PATCH /api/articles/{article_id}
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_patch_votes_increment(async_client: AsyncClient):
    resp = await async_client.patch("/api/articles/1", json={"newVote": {"inc_votes": 1}})
    assert resp.status_code == 200
    assert resp.json()["article"] == {**ARTICLE_1, "votes": 101}


@pytest.mark.asyncio
async def test_patch_votes_decrement(async_client: AsyncClient):
    resp = await async_client.patch("/api/articles/1", json={"newVote": {"inc_votes": -50}})
    assert resp.status_code == 200
    assert resp.json()["article"] == {**ARTICLE_1, "votes": 50}

    resp = await async_client.get("/api/articles/1")
    assert resp.json()["article"]["votes"] == 50


@pytest.mark.asyncio
async def test_patch_votes_can_go_negative(async_client: AsyncClient):
    resp = await async_client.patch("/api/articles/2", json={"newVote": {"inc_votes": -7}})
    assert resp.status_code == 200
    assert resp.json()["article"]["votes"] == -7


@pytest.mark.asyncio
async def test_patch_votes_inverse_restores_count(async_client: AsyncClient):
    await async_client.patch("/api/articles/1", json={"newVote": {"inc_votes": 37}})
    resp = await async_client.patch("/api/articles/1", json={"newVote": {"inc_votes": -37}})
    assert resp.status_code == 200
    assert resp.json()["article"]["votes"] == 100


@pytest.mark.asyncio
async def test_patch_votes_ignores_extra_properties(async_client: AsyncClient):
    resp = await async_client.patch(
        "/api/articles/1",
        json={"newVote": {"inc_votes": 50, "extra_nonsense": "why am I even here?"}},
    )
    assert resp.status_code == 200
    article = resp.json()["article"]
    assert article == {**ARTICLE_1, "votes": 150}
    assert "extra_nonsense" not in article


@pytest.mark.asyncio
async def test_patch_votes_article_not_found(async_client: AsyncClient):
    resp = await async_client.patch("/api/articles/14", json={"newVote": {"inc_votes": 50}})
    assert resp.status_code == 404
    assert resp.json() == {"msg": "Not found"}


@pytest.mark.asyncio
async def test_patch_votes_invalid_id(async_client: AsyncClient):
    resp = await async_client.patch("/api/articles/banana", json={"newVote": {"inc_votes": 50}})
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad request"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"newVote": {"these_aint_no_votes": 50}},
        {"newVote": {"inc_votes": "fifty"}},
        {"newVote": {"inc_votes": "5"}},
        {"newVote": {"inc_votes": 1.5}},
        {"newVote": {"inc_votes": True}},
        {"newVote": {"inc_votes": None}},
        {"newVote": {"inc_votes": 2**31}},
        {"newVote": 5},
        {"inc_votes": 5},
        {},
    ],
)
async def test_patch_votes_malformed_body(async_client: AsyncClient, payload):
    resp = await async_client.patch("/api/articles/1", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad request"}
    # Rejected before any statement is sent to the database.
    assert resp.headers["x-query-count"] == "0"


@pytest.mark.asyncio
async def test_patch_votes_invalid_json(async_client: AsyncClient):
    resp = await async_client.patch(
        "/api/articles/1",
        content=b'{"newVote": {"inc_votes": ',
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad request"}


@pytest.mark.asyncio
async def test_malformed_body_does_not_change_votes(async_client: AsyncClient):
    await async_client.patch("/api/articles/1", json={"newVote": {"inc_votes": "10"}})
    resp = await async_client.get("/api/articles/1")
    assert resp.json()["article"]["votes"] == 100


@pytest.mark.asyncio
async def test_patch_votes_overflow_rejected(async_client: AsyncClient):
    """An increment the schema accepts but the column cannot hold is a 400."""
    resp = await async_client.patch("/api/articles/1", json={"newVote": {"inc_votes": 2**31 - 1}})
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad request"}

    resp = await async_client.get("/api/articles/1")
    assert resp.json()["article"]["votes"] == 100


@pytest.mark.asyncio
async def test_patch_votes_underflow_rejected(async_client: AsyncClient):
    await async_client.patch("/api/articles/2", json={"newVote": {"inc_votes": -(2**31)}})
    resp = await async_client.patch("/api/articles/2", json={"newVote": {"inc_votes": -1}})
    assert resp.status_code == 400

    resp = await async_client.get("/api/articles/2")
    assert resp.json()["article"]["votes"] == -(2**31)


@pytest.mark.asyncio
async def test_patch_votes_up_to_column_limit(async_client: AsyncClient):
    resp = await async_client.patch("/api/articles/1", json={"newVote": {"inc_votes": 2**31 - 101}})
    assert resp.status_code == 200
    assert resp.json()["article"]["votes"] == 2**31 - 1
