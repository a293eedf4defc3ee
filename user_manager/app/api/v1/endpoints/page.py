"""
HTML page and form actions for the user management screen.

``GET /`` renders the screen.  Every form posts to one of the action
routes below, which update the controller and redirect back to ``/``
with ``303 See Other`` so that a browser reload does not resubmit.
"""

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from user_manager.app.core.dependencies import get_user_table
from user_manager.app.schemas.user import NewUserDraft
from user_manager.app.services.page_renderer import render_page
from user_manager.app.services.user_table_service import UserTableService


router = APIRouter()


def _back_to_screen() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
def show_screen(request: Request, table: UserTableService = Depends(get_user_table)) -> HTMLResponse:
    state = table.mount()
    return HTMLResponse(content=render_page(state, title=request.app.title))


@router.post("/search")
def submit_search(
    search_id: str = Form(""),
    table: UserTableService = Depends(get_user_table),
) -> RedirectResponse:
    table.search(search_id)
    return _back_to_screen()


@router.post("/users")
def submit_new_user(
    first_name: str = Form(""),
    last_name: str = Form(""),
    email: str = Form(""),
    department: str = Form(""),
    table: UserTableService = Depends(get_user_table),
) -> RedirectResponse:
    draft = NewUserDraft(first_name=first_name, last_name=last_name, email=email, department=department)
    table.add_user(draft)
    return _back_to_screen()


@router.post("/users/{user_id}/edit")
def submit_edit(user_id: str, table: UserTableService = Depends(get_user_table)) -> RedirectResponse:
    table.start_edit(user_id)
    return _back_to_screen()


@router.post("/users/{user_id}/update")
def submit_update(user_id: str, table: UserTableService = Depends(get_user_table)) -> RedirectResponse:
    # The edited inputs are posted along but the update request carries no body.
    table.update_user(user_id)
    return _back_to_screen()


@router.post("/users/{user_id}/delete")
def submit_delete(user_id: str, table: UserTableService = Depends(get_user_table)) -> RedirectResponse:
    table.delete_user(user_id)
    return _back_to_screen()
