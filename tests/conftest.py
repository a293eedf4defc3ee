"""Shared fixtures for the user management tests."""

import json
from typing import Any, Dict, List, Optional, Tuple

import pytest
import requests

from user_manager.app.services.user_table_service import UserTableService


def make_response(status_code: int = 200, body: Any = None, url: str = "") -> requests.Response:
    """Build a real ``requests.Response`` carrying a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return response


class FakeSession:
    """Stands in for ``requests.Session``; replays queued responses."""

    def __init__(self, *outcomes: Any) -> None:
        self.outcomes = list(outcomes)
        self.calls: List[Dict[str, Any]] = []

    def request(self, **kwargs: Any) -> requests.Response:
        self.calls.append(kwargs)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


Result = Tuple[Any, Optional[Dict[str, Any]]]

NETWORK_ERROR = {"status_code": None, "message": "connection refused"}
NOT_FOUND = {"status_code": 404, "message": "{}"}


class FakeUsersAPI:
    """In-memory replacement for ``UsersAPI`` used by the controller tests.

    Each method returns the configured result and records the call.  Set
    ``fail`` to a method name (or a set of names) to make it return an
    error instead.
    """

    def __init__(self, users: Optional[List[Dict[str, Any]]] = None) -> None:
        self.users = users or []
        self.fail: set = set()
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def _error(self, name: str) -> Optional[Dict[str, Any]]:
        if name in self.fail:
            return NOT_FOUND if name == "get_user" else NETWORK_ERROR
        return None

    def list_users(self) -> Result:
        self.calls.append(("list_users", ()))
        error = self._error("list_users")
        if error:
            return [], error
        return [dict(user) for user in self.users], None

    def get_user(self, user_id: Any) -> Result:
        self.calls.append(("get_user", (user_id,)))
        error = self._error("get_user")
        if error:
            return None, error
        for user in self.users:
            if str(user["id"]) == str(user_id):
                return dict(user), None
        return None, NOT_FOUND

    def create_user(self, payload: Dict[str, Any]) -> Result:
        self.calls.append(("create_user", (payload,)))
        error = self._error("create_user")
        if error:
            return None, error
        # The mock API echoes the body with an id that does not match the local list.
        return dict(payload, id=11), None

    def update_user(self, user_id: Any, payload: Optional[Dict[str, Any]] = None) -> Result:
        self.calls.append(("update_user", (user_id, payload)))
        error = self._error("update_user")
        if error:
            return None, error
        return {"id": user_id}, None

    def delete_user(self, user_id: Any) -> Result:
        self.calls.append(("delete_user", (user_id,)))
        error = self._error("delete_user")
        if error:
            return False, error
        return True, None

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def sample_users() -> List[Dict[str, Any]]:
    return [
        {
            "id": 1,
            "name": "Leanne Graham",
            "username": "Bret",
            "email": "Sincere@april.biz",
            "company": {"name": "Romaguera-Crona"},
        },
        {
            "id": 2,
            "name": "Ervin Howell",
            "email": "Shanna@melissa.tv",
            "company": {"name": "Deckow-Crist"},
        },
        {
            "id": 3,
            "name": "Clementine",
            "email": "Nathan@yesenia.net",
        },
    ]


@pytest.fixture
def fake_api(sample_users) -> FakeUsersAPI:
    return FakeUsersAPI(sample_users)


@pytest.fixture
def table(fake_api) -> UserTableService:
    return UserTableService(fake_api)
