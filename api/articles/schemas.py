"""
Pydantic schemas for article endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class Article(BaseModel):
    article_id: int
    title: str
    topic: str
    author: str
    body: str
    created_at: datetime
    votes: int
    article_img_url: str


class ArticleResponse(BaseModel):
    article: Article
