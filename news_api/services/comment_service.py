"""
Comment service: listing and appending comments on an article.

Comments cannot be edited or deleted through the API.  Both functions
return None when the parent article (or, for inserts, the commenting
user) does not exist so the router can answer 404.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.models import Comment
from news_api.schemas import CommentCreate
from news_api.serialization import isoformat_utc
from news_api.services import article_service, user_service

logger = logging.getLogger(__name__)


def _comment_to_dict(comment: Comment) -> dict:
    return {
        "comment_id": comment.comment_id,
        "article_id": comment.article_id,
        "author": comment.author,
        "body": comment.body,
        "votes": comment.votes,
        "created_at": isoformat_utc(comment.created_at),
    }


async def get_comments(db: AsyncSession, article_id: int) -> list[dict] | None:
    """
    Return the comments on *article_id*, newest first.

    An existing article with no comments yields an empty list; a missing
    article yields None.
    """
    if not await article_service.article_exists(db, article_id):
        return None

    q = (
        select(Comment)
        .where(Comment.article_id == article_id)
        .order_by(Comment.created_at.desc(), Comment.comment_id.desc())
    )
    result = await db.execute(q)
    return [_comment_to_dict(c) for c in result.scalars().all()]


async def add_comment(
    db: AsyncSession,
    article_id: int,
    data: CommentCreate,
) -> dict | None:
    """
    Insert a comment by ``data.username`` on *article_id* and return it.

    ``votes`` and ``created_at`` take their column defaults.  Returns None
    when either the article or the user is unknown; the two cases are only
    told apart in the log.
    """
    if not await article_service.article_exists(db, article_id):
        logger.info("Comment rejected: article %d does not exist", article_id)
        return None
    if not await user_service.user_exists(db, data.username):
        logger.info("Comment rejected: user %r does not exist", data.username)
        return None

    comment = Comment(
        body=data.body,
        author=data.username,
        article_id=article_id,
    )
    db.add(comment)
    await db.flush()
    # Pull the server-generated created_at / votes back into the instance.
    await db.refresh(comment)

    return _comment_to_dict(comment)
