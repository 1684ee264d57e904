"""
Article API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import schemas, service

router = APIRouter()


@router.get("/api/articles/{article_id}", response_model=schemas.ArticleResponse)
async def get_article(article_id: str) -> dict:
    """
    Fetch one article. `article_id` arrives as raw text and is validated by
    the service so malformed ids never reach the repository.
    """
    article = await service.get_article(article_id)
    return {"article": article}
