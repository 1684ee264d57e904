"""
Pydantic schemas for topic endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class Topic(BaseModel):
    slug: str
    description: str


class TopicsResponse(BaseModel):
    topics: list[Topic]
