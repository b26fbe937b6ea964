"""
Top‑level router for version 1 of the API.

Aggregates domain routers under a unified prefix.  Ships are the only
domain at the moment.
"""

from fastapi import APIRouter

from .endpoints import ships

router = APIRouter()

router.include_router(ships.router, prefix="/ships", tags=["ships"])
