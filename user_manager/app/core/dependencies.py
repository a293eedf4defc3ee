"""
FastAPI dependencies shared by the routers.
"""

from fastapi import Request

from ..services.user_table_service import UserTableService


def get_user_table(request: Request) -> UserTableService:
    """Return the screen controller attached to the application by ``create_app``."""
    return request.app.state.user_table
