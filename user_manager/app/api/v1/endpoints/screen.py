"""
JSON actions on the user management screen.

Each endpoint performs one screen action and returns the resulting
``ViewState``.  Handlers are plain functions so that FastAPI runs the
blocking HTTP calls in its thread pool; the controller's lock keeps
requests one at a time.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from user_manager.app.core.dependencies import get_user_table
from user_manager.app.schemas.user import DraftUpdate, NewUserDraft, SearchRequest, ViewState
from user_manager.app.services.user_table_service import UserTableService


router = APIRouter()


@router.get("/", response_model=ViewState)
def get_screen(table: UserTableService = Depends(get_user_table)) -> ViewState:
    """Return the current state, loading the list on first access."""
    return table.mount()


@router.post("/refresh", response_model=ViewState)
def refresh_users(table: UserTableService = Depends(get_user_table)) -> ViewState:
    """Reload the full list from the remote API."""
    return table.fetch_users()


@router.post("/search", response_model=ViewState)
def search_users(
    payload: SearchRequest,
    table: UserTableService = Depends(get_user_table),
) -> ViewState:
    """Show a single user by identifier.

    An empty ``query`` lists all users again.  An unknown identifier empties
    the table and sets ``error`` to ``"User not found."``.
    """
    return table.search(payload.query)


@router.put("/draft", response_model=ViewState)
def update_draft(
    payload: DraftUpdate,
    table: UserTableService = Depends(get_user_table),
) -> ViewState:
    return table.set_draft(payload)


@router.post("/users", response_model=ViewState)
def add_user(
    payload: Optional[NewUserDraft] = Body(None),
    table: UserTableService = Depends(get_user_table),
) -> ViewState:
    """Create a user from ``payload`` or, when omitted, from the stored draft."""
    return table.add_user(payload)


@router.post("/users/{user_id}/edit", response_model=ViewState)
def start_edit(user_id: str, table: UserTableService = Depends(get_user_table)) -> ViewState:
    return table.start_edit(user_id)


@router.put("/users/{user_id}", response_model=ViewState)
def update_user(user_id: str, table: UserTableService = Depends(get_user_table)) -> ViewState:
    """Send the update request and leave edit mode.

    The row is not refreshed from the response.
    """
    return table.update_user(user_id)


@router.delete("/users/{user_id}", response_model=ViewState)
def delete_user(user_id: str, table: UserTableService = Depends(get_user_table)) -> ViewState:
    """Delete a user; the row disappears only if the remote call succeeds."""
    return table.delete_user(user_id)
