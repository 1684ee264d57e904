"""
Pydantic schemas for the documentation endpoint.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class EndpointsResponse(BaseModel):
    endpoints: dict[str, Any]
