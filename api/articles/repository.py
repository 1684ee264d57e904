"""
Article persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def get_article_by_id(article_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT article_id, title, topic, author, body, created_at, votes, article_img_url
        FROM articles
        WHERE article_id = $1
        """,
        article_id,
    )
