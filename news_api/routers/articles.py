from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from news_api.database import get_db
from news_api.errors import BadRequest, ValidationFailure
from news_api.dependencies import ArticleQueryParams, valid_article_id
from news_api.schemas import NewCommentRequest, NewVoteRequest
from news_api.services import article_service, comment_service

router = APIRouter(prefix="/api/articles", tags=["articles"])

@router.get("")
async def list_articles(
    params: ArticleQueryParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    articles = await article_service.get_articles(db, params.topic, params.sort_by, params.order)
    return {"articles": articles}

@router.get("/{article_id}")
async def get_article(article_id: int = Depends(valid_article_id), db: AsyncSession = Depends(get_db)):
    article = await article_service.get_article(db, article_id)
    if not article:
        raise HTTPException(status_code=404, detail=f"Article {article_id} not found")
    return {"article": article}

@router.patch("/{article_id}")
async def patch_article_votes(
    payload: NewVoteRequest,
    article_id: int = Depends(valid_article_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        article = await article_service.update_article_votes(db, article_id, payload.new_vote.inc_votes)
    except (article_service.VoteOutOfRange, DataError) as exc:
        raise BadRequest(ValidationFailure.INVALID_VALUE, str(exc))
    if not article:
        raise HTTPException(status_code=404, detail=f"Article {article_id} not found")
    return {"article": article}

@router.get("/{article_id}/comments")
async def list_comments(article_id: int = Depends(valid_article_id), db: AsyncSession = Depends(get_db)):
    comments = await comment_service.get_comments(db, article_id)
    if comments is None:
        raise HTTPException(status_code=404, detail=f"Article {article_id} not found")
    return {"comments": comments}

@router.post("/{article_id}/comments", status_code=201)
async def add_comment(
    payload: NewCommentRequest,
    article_id: int = Depends(valid_article_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        comment = await comment_service.add_comment(db, article_id, payload.new_comment)
    except IntegrityError:
        # The article or user vanished between the existence checks and the insert.
        raise HTTPException(status_code=404, detail="Referenced article or user not found")
    if not comment:
        raise HTTPException(
            status_code=404,
            detail=f"Article {article_id} or user {payload.new_comment.username!r} not found",
        )
    return {"comment": comment}
