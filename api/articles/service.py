"""
Article lookup logic.

Scope:
- syntactic validation of the `article_id` path segment
- existence check against the repository
"""

from __future__ import annotations

import re

from core.errors import InvalidInput, NotFound

from . import repository

# article_id is a Postgres INTEGER (SERIAL) column.
MIN_ARTICLE_ID = 1
MAX_ARTICLE_ID = 2**31 - 1
MAX_ARTICLE_ID_DIGITS = len(str(MAX_ARTICLE_ID))

_INTEGER_RE = re.compile(r"-?[0-9]+")


def parse_article_id(raw: str) -> int:
    """
    Parse a base-10 integer path segment.

    Plain ASCII digits with an optional leading minus only; `int()` alone
    would also accept whitespace, `+`, `_` separators and non-ASCII digits.
    Integers too long to fit the id column raise `NotFound` before
    conversion, since `int()` rejects very long digit strings outright.
    """
    if not _INTEGER_RE.fullmatch(raw or ""):
        raise InvalidInput(f"article_id is not an integer: {raw!r}")
    digits = raw.lstrip("-").lstrip("0")
    if len(digits) > MAX_ARTICLE_ID_DIGITS:
        raise NotFound(f"article_id has {len(digits)} digits, outside the id range")
    value = int(digits or "0")
    return -value if raw.startswith("-") else value


async def get_article(raw_article_id: str) -> dict:
    article_id = parse_article_id(raw_article_id)

    # Out-of-range ids cannot match a row; keep them away from the driver.
    if not MIN_ARTICLE_ID <= article_id <= MAX_ARTICLE_ID:
        raise NotFound(f"article {article_id} is outside the id range")

    row = await repository.get_article_by_id(article_id)
    if row is None:
        raise NotFound(f"article {article_id} does not exist")

    return {
        "article_id": int(row["article_id"]),
        "title": str(row["title"]),
        "topic": str(row["topic"]),
        "author": str(row["author"]),
        "body": str(row["body"]),
        "created_at": row["created_at"],
        "votes": int(row["votes"]),
        "article_img_url": str(row["article_img_url"]),
    }
