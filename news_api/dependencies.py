import re

from fastapi import Path, Query

from news_api.errors import BadRequest, ValidationFailure
from news_api.schemas import INT4_MAX, INT4_MIN

_INTEGER_RE = re.compile(r"-?[0-9]+")


def parse_article_id(raw: str) -> int:
    """
    Parse an ``article_id`` path segment the way the database would cast it.

    Raises :class:`BadRequest` for anything that is not a plain base-10
    integer fitting a 32-bit INTEGER column (``"banana"``, ``"1.5"``,
    ``"99999999999"``).  Well-formed ids that match no row are left for
    the service layer to report as 404.
    """
    if not _INTEGER_RE.fullmatch(raw):
        raise BadRequest(ValidationFailure.MALFORMED_ID, f"article_id {raw!r} is not an integer")
    value = int(raw)
    if not INT4_MIN <= value <= INT4_MAX:
        raise BadRequest(ValidationFailure.MALFORMED_ID, f"article_id {raw!r} is out of range")
    return value


def valid_article_id(
    article_id: str = Path(..., description="Numeric article identifier."),
) -> int:
    """FastAPI dependency wrapping :func:`parse_article_id`."""
    return parse_article_id(article_id)


class ArticleQueryParams:
    """
    Optional filtering / sorting for ``GET /api/articles``.

    Usage in a router::

        @router.get("")
        async def list_articles(params: ArticleQueryParams = Depends()):
            ...

    None of these parameters can fail a request: the service layer maps an
    unknown ``sort_by`` column to ``created_at`` and anything other than
    ``"asc"`` to descending order.

    Attributes
    ----------
    topic:
        Only return articles whose topic slug equals this value.
    sort_by:
        Column name to sort by.
    order:
        ``"asc"`` or ``"desc"``.
    """

    def __init__(
        self,
        topic: str | None = Query(None, description="Filter by topic slug."),
        sort_by: str = Query("created_at", description="Column name to sort results by."),
        order: str = Query("desc", description="Sort direction: 'asc' or 'desc'."),
    ) -> None:
        self.topic = topic
        self.sort_by = sort_by
        self.order = order.lower()
