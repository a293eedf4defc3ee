"""
View-state controller for the user management screen.

``UserTableService`` owns the in-memory state of one screen: the
current snapshot of users, the search box, the row in edit mode, the
new-user draft and the last error message.  Each action issues at most
one request through :class:`users_api.UsersAPI` and merges the outcome
into the state.  A lock serialises actions so that only one request is
ever outstanding; there is no cancellation or de-duplication.

Failures never raise.  They overwrite ``error`` with one of the fixed
messages below and leave the rest of the state as documented per
action.
"""

import copy
import logging
import threading
from typing import Any, Dict, List, Optional

from users_api import UsersAPI

from ..schemas.user import DraftUpdate, NewUserDraft, UserId, UserRow, ViewState

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch users."
USER_NOT_FOUND = "User not found."
FIELDS_REQUIRED = "All fields are required."
ADD_FAILED = "Failed to add user."
UPDATE_FAILED = "Failed to update user."
DELETE_FAILED = "Failed to delete user."


def same_id(left: Any, right: Any) -> bool:
    """Compare identifiers by string form (path parameters arrive as text)."""
    if left is None or right is None:
        return False
    return str(left) == str(right)


class UserTableService:
    """Holds and mutates the state of the user management screen."""

    def __init__(self, api: UsersAPI) -> None:
        self.api = api
        self._lock = threading.RLock()
        self._users: List[Dict[str, Any]] = []
        self._search_query = ""
        self._editing_user_id: Optional[UserId] = None
        self._draft = NewUserDraft()
        self._error: Optional[str] = None
        self._mounted = False

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------
    def snapshot(self) -> ViewState:
        """Return a detached copy of the current state."""
        with self._lock:
            users = copy.deepcopy(self._users)
            rows = [
                UserRow.from_record(user, editing=same_id(user.get("id"), self._editing_user_id))
                for user in users
            ]
            return ViewState(
                users=users,
                rows=rows,
                search_query=self._search_query,
                editing_user_id=self._editing_user_id,
                draft=self._draft.model_copy(),
                error=self._error,
            )

    def mount(self) -> ViewState:
        """Load the list the first time the screen is shown."""
        with self._lock:
            if not self._mounted:
                self._mounted = True
                self.fetch_users()
            return self.snapshot()

    # ------------------------------------------------------------------
    # Remote actions
    # ------------------------------------------------------------------
    def fetch_users(self) -> ViewState:
        """Replace the snapshot with the remote list.

        On failure the previous snapshot is kept and only the error changes.
        """
        with self._lock:
            users, error = self.api.list_users()
            if error:
                logger.warning("Fetching users failed: %s", error.get("message"))
                self._error = FETCH_FAILED
                return self.snapshot()
            self._users = [user for user in users if isinstance(user, dict)]
            self._error = None
            logger.info("Loaded %d users", len(self._users))
            return self.snapshot()

    def search(self, query: Optional[str] = None) -> ViewState:
        """Show only the user with the given identifier.

        An empty query lists everyone again.  A failed lookup empties the
        table.
        """
        with self._lock:
            if query is not None:
                self._search_query = query
            user_id = self._search_query
            if not user_id:
                return self.fetch_users()
            # Anything else is looked up as typed, surrounding spaces included.
            user, error = self.api.get_user(user_id)
            if error or not isinstance(user, dict):
                logger.info("User %s not found: %s", user_id, (error or {}).get("message"))
                self._users = []
                self._error = USER_NOT_FOUND
                return self.snapshot()
            self._users = [user]
            self._error = None
            return self.snapshot()

    def add_user(self, draft: Optional[NewUserDraft] = None) -> ViewState:
        """Create the drafted user and append it to the local snapshot.

        The appended record is synthesised locally because the mock API
        does not persist what it receives.  The draft survives a failed
        request so the operator can retry.
        """
        with self._lock:
            if draft is not None:
                self._draft = draft.model_copy()
            if not self._draft.is_complete():
                self._error = FIELDS_REQUIRED
                return self.snapshot()
            _, error = self.api.create_user(self._draft.to_payload())
            if error:
                logger.warning("Creating user failed: %s", error.get("message"))
                self._error = ADD_FAILED
                return self.snapshot()
            record = self._draft.to_record(len(self._users) + 1)
            self._users.append(record)
            logger.info("Added user %s (%s)", record["id"], record["email"])
            self._draft = NewUserDraft()
            self._error = None
            return self.snapshot()

    def update_user(self, user_id: Any) -> ViewState:
        """Send the update for a row and leave edit mode.

        The request carries no body and the response is not merged back,
        so the row keeps its previous values.
        """
        with self._lock:
            target = self._resolve_id(user_id)
            _, error = self.api.update_user(target)
            if error:
                logger.warning("Updating user %s failed: %s", target, error.get("message"))
                self._error = UPDATE_FAILED
                return self.snapshot()
            self._editing_user_id = None
            self._error = None
            return self.snapshot()

    def delete_user(self, user_id: Any) -> ViewState:
        """Remove a row once the remote delete succeeds."""
        with self._lock:
            target = self._resolve_id(user_id)
            _, error = self.api.delete_user(target)
            if error:
                logger.warning("Deleting user %s failed: %s", target, error.get("message"))
                self._error = DELETE_FAILED
                return self.snapshot()
            self._users = [user for user in self._users if not same_id(user.get("id"), target)]
            if same_id(self._editing_user_id, target):
                self._editing_user_id = None
            self._error = None
            logger.info("Deleted user %s", target)
            return self.snapshot()

    # ------------------------------------------------------------------
    # Local actions
    # ------------------------------------------------------------------
    def start_edit(self, user_id: Any) -> ViewState:
        """Put one row in edit mode, taking it away from any other row."""
        with self._lock:
            self._editing_user_id = self._resolve_id(user_id)
            return self.snapshot()

    def set_search_query(self, query: str) -> ViewState:
        with self._lock:
            self._search_query = query
            return self.snapshot()

    def set_draft(self, update: DraftUpdate) -> ViewState:
        with self._lock:
            changes = update.model_dump(exclude_none=True)
            self._draft = self._draft.model_copy(update=changes)
            return self.snapshot()

    def _resolve_id(self, user_id: Any) -> UserId:
        # Prefer the identifier as stored in the snapshot so its type survives.
        for user in self._users:
            if same_id(user.get("id"), user_id):
                return user["id"]
        return user_id
