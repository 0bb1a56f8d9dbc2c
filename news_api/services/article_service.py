"""
Article service: reads and vote updates for the Article table.

Design notes
------------
- Services select explicit column lists instead of ORM entities, so the
  list view can never leak ``body`` and ``comment_count`` is computed in
  the same statement with an outer join + GROUP BY.
- Vote changes are one ``UPDATE ... SET votes = votes + :inc RETURNING``
  statement.  The increment happens inside the database, so concurrent
  PATCH requests against the same article cannot lose updates.
- Service functions flush but do not commit; the transaction boundary
  is owned by the ``get_db`` dependency in the router layer.
"""
import logging

from sqlalchemy import BigInteger, asc, cast, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.models import Article, Comment
from news_api.schemas import INT4_MAX, INT4_MIN
from news_api.serialization import isoformat_utc

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Column sets
# ---------------------------------------------------------------------------

_LIST_COLUMNS = (
    Article.article_id,
    Article.title,
    Article.topic,
    Article.author,
    Article.created_at,
    Article.votes,
    Article.article_img_url,
)

_DETAIL_COLUMNS = _LIST_COLUMNS + (Article.body,)

_comment_count = func.count(Comment.comment_id).label("comment_count")

# Columns that are safe to sort by; guards against arbitrary attribute access.
_SORTABLE_COLUMNS = {
    "article_id": Article.article_id,
    "title": Article.title,
    "topic": Article.topic,
    "author": Article.author,
    "created_at": Article.created_at,
    "votes": Article.votes,
    "comment_count": _comment_count,
}


def _resolve_sort_column(sort_by: str):
    """
    Return the column expression for *sort_by*.

    Falls back to ``Article.created_at`` for any unrecognised column name.
    """
    return _SORTABLE_COLUMNS.get(sort_by, Article.created_at)


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def _article_to_dict(row) -> dict:
    """Serialise an article row to a plain dict (list view, no body)."""
    return {
        "article_id": row.article_id,
        "title": row.title,
        "topic": row.topic,
        "author": row.author,
        "created_at": isoformat_utc(row.created_at),
        "votes": row.votes,
        "article_img_url": row.article_img_url,
    }


def _article_detail_to_dict(row) -> dict:
    """Serialise an article row to a plain dict (detail view)."""
    data = _article_to_dict(row)
    data["body"] = row.body
    return data


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def get_articles(
    db: AsyncSession,
    topic: str | None = None,
    sort_by: str = "created_at",
    order: str = "desc",
) -> list[dict]:
    """
    Return every article with its ``comment_count``, newest first by default.

    Rows that tie on the sort column keep insertion order (ascending
    ``article_id``).
    """
    sort_col = _resolve_sort_column(sort_by)
    order_expr = asc(sort_col) if order == "asc" else desc(sort_col)

    q = (
        select(*_LIST_COLUMNS, _comment_count)
        .outerjoin(Comment, Comment.article_id == Article.article_id)
        .group_by(*_LIST_COLUMNS)
        .order_by(order_expr, Article.article_id.asc())
    )
    if topic is not None:
        q = q.where(Article.topic == topic)

    result = await db.execute(q)
    articles = []
    for row in result.all():
        data = _article_to_dict(row)
        data["comment_count"] = row.comment_count
        articles.append(data)
    return articles


async def get_article(db: AsyncSession, article_id: int) -> dict | None:
    """
    Return the full detail dict (including ``body``) for *article_id*.

    Returns None when the article does not exist.
    """
    q = select(*_DETAIL_COLUMNS).where(Article.article_id == article_id)
    row = (await db.execute(q)).one_or_none()
    if row is None:
        return None
    return _article_detail_to_dict(row)


async def article_exists(db: AsyncSession, article_id: int) -> bool:
    q = select(Article.article_id).where(Article.article_id == article_id)
    return (await db.execute(q)).scalar_one_or_none() is not None


class VoteOutOfRange(ValueError):
    """The new vote count would not fit in the ``votes`` column."""


async def update_article_votes(
    db: AsyncSession, article_id: int, inc_votes: int
) -> dict | None:
    """
    Add *inc_votes* (which may be negative) to the article's vote count and
    return the updated detail dict.

    Returns None when the article does not exist.  Raises
    :class:`VoteOutOfRange` when the sum would leave the 32-bit range; the
    row is left untouched in that case.
    """
    # Widen before adding so the range check itself cannot overflow.
    new_votes = cast(Article.votes, BigInteger) + inc_votes
    stmt = (
        update(Article)
        .where(Article.article_id == article_id)
        .where(new_votes.between(INT4_MIN, INT4_MAX))
        .values(votes=new_votes)
        .returning(*_DETAIL_COLUMNS)
        .execution_options(synchronize_session=False)
    )
    row = (await db.execute(stmt)).one_or_none()
    if row is None:
        if await article_exists(db, article_id):
            raise VoteOutOfRange(
                f"Article {article_id} votes {inc_votes:+d} leaves the 32-bit range"
            )
        return None

    logger.debug("Article %d votes %+d -> %d", article_id, inc_votes, row.votes)
    return _article_detail_to_dict(row)
