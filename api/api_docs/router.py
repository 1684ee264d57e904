"""
API documentation endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import schemas, service

router = APIRouter()


@router.get("/api", response_model=schemas.EndpointsResponse)
async def get_endpoints() -> dict:
    return {"endpoints": await service.load_endpoints()}
