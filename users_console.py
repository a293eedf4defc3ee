"""Interactive console version of the user management screen.

The console drives the same :class:`UserTableService` as the web screen,
so it shows the same table, applies the same validation and reports the
same error messages.  It reads one command per line:

``list``
    Reload all users from the remote API.
``search [id]``
    Show only the user with the given identifier; without an identifier
    every user is listed again.
``add``
    Prompt for first name, last name, email and department, then create
    the user.  Press Enter to keep the current draft value.
``edit <id>``
    Put a row in edit mode.
``update [id]``
    Send the update for a row (the one in edit mode by default).
``delete <id>``
    Delete a row.
``help`` / ``quit``

The remote API is configured with command line options or the same
environment variables as the web screen (``USERS_API_BASE_URL``,
``USERS_API_TOKEN``, ``USERS_API_TIMEOUT``).

Usage:
    python users_console.py --base-url https://jsonplaceholder.typicode.com
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO

from user_manager.app.core.config import settings
from user_manager.app.core.logging_config import setup_logging
from user_manager.app.schemas.user import DraftUpdate, UserRow, ViewState
from user_manager.app.services.user_table_service import UserTableService
from users_api import UsersAPI


logger = logging.getLogger(__name__)

COLUMNS = ("ID", "First Name", "Last Name", "Email", "Department")

HELP_TEXT = (
    "Commands:\n"
    "  list            Reload all users.\n"
    "  search [id]     Show one user by ID (no ID lists everyone).\n"
    "  add             Fill in and submit the new user form.\n"
    "  edit <id>       Put a row in edit mode.\n"
    "  update [id]     Save the row in edit mode.\n"
    "  delete <id>     Delete a row.\n"
    "  help            Show this message.\n"
    "  quit            Leave."
)

DRAFT_PROMPTS = (
    ("first_name", "First Name"),
    ("last_name", "Last Name"),
    ("email", "Email"),
    ("department", "Department"),
)


def format_table(state: ViewState) -> str:
    """Render the users table as aligned plain text."""
    lines: List[List[str]] = []
    for row, record in zip(state.rows, state.users):
        shown = UserRow.edit_defaults(record) if row.editing else row
        cells = [
            "" if row.id is None else str(row.id),
            shown.first_name,
            shown.last_name,
            shown.email,
            shown.department,
        ]
        if row.editing:
            cells[0] += " *"
        lines.append(cells)
    if not lines:
        return "No users found."
    widths = [
        max(len(COLUMNS[i]), *(len(cells[i]) for cells in lines))
        for i in range(len(COLUMNS))
    ]
    out = ["  ".join(title.ljust(widths[i]) for i, title in enumerate(COLUMNS))]
    out.append("  ".join("-" * width for width in widths))
    out.extend("  ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)) for cells in lines)
    if state.editing_user_id is not None:
        out.append(f"* editing user {state.editing_user_id}; type 'update' to save")
    return "\n".join(line.rstrip() for line in out)


class ConsoleScreen:
    """Line-oriented front end over a :class:`UserTableService`."""

    def __init__(
        self,
        table: UserTableService,
        *,
        stdin: TextIO = sys.stdin,
        stdout: TextIO = sys.stdout,
    ) -> None:
        self.table = table
        self.stdin = stdin
        self.stdout = stdout
        self.handlers: Dict[str, Callable[[str], Optional[ViewState]]] = {
            "list": self._handle_list,
            "search": self._handle_search,
            "add": self._handle_add,
            "edit": self._handle_edit,
            "update": self._handle_update,
            "delete": self._handle_delete,
            "help": self._handle_help,
        }

    # ------------------------------------------------------------------
    # I/O helpers
    # ------------------------------------------------------------------
    def _write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def _prompt(self, label: str) -> Optional[str]:
        self.stdout.write(label)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def show(self, state: ViewState) -> None:
        self._write(format_table(state))
        if state.error:
            self._write(f"Error: {state.error}")

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------
    def _handle_list(self, args: str) -> ViewState:
        return self.table.fetch_users()

    def _handle_search(self, args: str) -> ViewState:
        return self.table.search(args.strip())

    def _handle_add(self, args: str) -> Optional[ViewState]:
        draft = self.table.snapshot().draft
        values: Dict[str, str] = {}
        for field, label in DRAFT_PROMPTS:
            current = getattr(draft, field)
            suffix = f" [{current}]" if current else ""
            answer = self._prompt(f"{label}{suffix}: ")
            if answer is None:
                return None
            values[field] = answer if answer else current
        self.table.set_draft(DraftUpdate(**values))
        return self.table.add_user()

    def _handle_edit(self, args: str) -> Optional[ViewState]:
        user_id = args.strip()
        if not user_id:
            self._write("Usage: edit <id>")
            return None
        return self.table.start_edit(user_id)

    def _handle_update(self, args: str) -> Optional[ViewState]:
        user_id = args.strip()
        if not user_id:
            editing = self.table.snapshot().editing_user_id
            if editing is None:
                self._write("Usage: update <id> (no row is being edited)")
                return None
            user_id = str(editing)
        return self.table.update_user(user_id)

    def _handle_delete(self, args: str) -> Optional[ViewState]:
        user_id = args.strip()
        if not user_id:
            self._write("Usage: delete <id>")
            return None
        return self.table.delete_user(user_id)

    def _handle_help(self, args: str) -> None:
        self._write(HELP_TEXT)
        return None

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------
    def dispatch(self, line: str) -> bool:
        """Run one command line.  Returns ``False`` when the user quits."""
        command, _, args = line.strip().partition(" ")
        command = command.lower()
        if not command:
            return True
        if command in {"quit", "exit", "q"}:
            return False
        handler = self.handlers.get(command)
        if handler is None:
            self._write(f"Unknown command: {command}. Type 'help' for the list of commands.")
            return True
        state = handler(args)
        if state is not None:
            self.show(state)
        return True

    def run(self) -> None:
        self._write("User Management")
        self.show(self.table.mount())
        while True:
            line = self._prompt("> ")
            if line is None or not self.dispatch(line):
                break
        self._write("Bye.")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage users of a remote REST API from the console.")
    ap.add_argument("--base-url", default=settings.users_api_base_url, help="Base URL of the users API")
    ap.add_argument("--token", default=settings.users_api_token, help="Optional bearer token")
    ap.add_argument("--timeout", type=float, default=settings.users_api_timeout, help="Request timeout in seconds")
    ap.add_argument("--log-level", default=settings.log_level, help="Logging level (DEBUG, INFO, ...)")
    ap.add_argument("--log-file", default=settings.log_file, help="Optional file to write logs to")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    api = UsersAPI(base_url=args.base_url, api_key=args.token, timeout=args.timeout)
    screen = ConsoleScreen(UserTableService(api))
    try:
        screen.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
