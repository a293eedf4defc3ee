"""
Top-level router for version 1 of the API.

Only the JSON screen actions are versioned; the HTML page router is
included separately at the site root by ``main.create_app``.
"""

from fastapi import APIRouter

from .endpoints import screen

router = APIRouter()

router.include_router(screen.router, prefix="/screen", tags=["screen"])
