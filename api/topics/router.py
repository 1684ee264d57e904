"""
Topic API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import repository, schemas

router = APIRouter()


@router.get("/api/topics", response_model=schemas.TopicsResponse)
async def list_topics() -> dict:
    rows = await repository.list_topics()
    return {
        "topics": [
            {"slug": str(row["slug"]), "description": str(row["description"])}
            for row in rows
        ]
    }
