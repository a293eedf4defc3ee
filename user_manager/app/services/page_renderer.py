"""
HTML rendering of the user management screen.

The page is assembled from plain strings; every value that came from the
remote API or from the operator passes through ``html.escape``.  Forms
post back to the routes in ``api/v1/endpoints/page.py``.
"""

import html
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from ..schemas.user import UserRow, ViewState

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<div class="container">
<h2>User Management</h2>
<form class="search-box" method="post" action="/search">
<input type="text" name="search_id" placeholder="Search by ID" value="{search_query}">
<button type="submit">Search</button>
</form>
{error}
<table>
<thead>
<tr><th>ID</th><th>First Name</th><th>Last Name</th><th>Email</th><th>Department</th><th>Actions</th></tr>
</thead>
<tbody>
{rows}
</tbody>
</table>
<h3>Add New User</h3>
<form class="add-user" method="post" action="/users">
<input type="text" name="first_name" placeholder="First Name" value="{first_name}">
<input type="text" name="last_name" placeholder="Last Name" value="{last_name}">
<input type="text" name="email" placeholder="Email" value="{email}">
<input type="text" name="department" placeholder="Department" value="{department}">
<button class="add" type="submit">Add</button>
</form>
</div>
</body>
</html>
"""

EMPTY_ROW = '<tr><td colspan="6">No users found.</td></tr>'


def _e(value: Any) -> str:
    return html.escape("" if value is None else str(value), quote=True)


def _action(user_id: Any, verb: str) -> str:
    return f"/users/{quote(str(user_id), safe='')}/{verb}"


def render_row(row: UserRow, record: Optional[Dict[str, Any]] = None) -> str:
    """Render one table row, as inputs when the row is in edit mode."""
    if row.editing:
        defaults = UserRow.edit_defaults(record or {})
        form_id = f"edit-{_e(row.id)}"
        inputs = "".join(
            f'<td><input type="text" form="{form_id}" name="{name}" value="{_e(value)}"></td>'
            for name, value in (
                ("first_name", defaults.first_name),
                ("last_name", defaults.last_name),
                ("email", defaults.email),
                ("department", defaults.department),
            )
        )
        return (
            f"<tr><td>{_e(row.id)}</td>{inputs}"
            f'<td><form id="{form_id}" method="post" action="{_e(_action(row.id, "update"))}">'
            '<button class="update" type="submit">Update</button></form></td></tr>'
        )
    cells = "".join(
        f"<td>{_e(value)}</td>"
        for value in (row.id, row.first_name, row.last_name, row.email, row.department)
    )
    return (
        f"<tr>{cells}<td>"
        f'<form method="post" action="{_e(_action(row.id, "edit"))}">'
        '<button class="edit" type="submit">Edit</button></form>'
        f'<form method="post" action="{_e(_action(row.id, "delete"))}">'
        '<button class="delete" type="submit">Delete</button></form>'
        "</td></tr>"
    )


def render_page(state: ViewState, title: str = "User Management") -> str:
    """Render the whole screen for ``state``."""
    rows: List[str] = [
        render_row(row, record) for row, record in zip(state.rows, state.users)
    ]
    error = f'<p class="error">{_e(state.error)}</p>' if state.error else ""
    return PAGE_TEMPLATE.format(
        title=_e(title),
        search_query=_e(state.search_query),
        error=error,
        rows="\n".join(rows) if rows else EMPTY_ROW,
        first_name=_e(state.draft.first_name),
        last_name=_e(state.draft.last_name),
        email=_e(state.draft.email),
        department=_e(state.draft.department),
    )
