"""Users API client.

This module defines a small client wrapper around the remote users REST
resource.  The remote service is a mock API (by default
``https://jsonplaceholder.typicode.com``) which accepts writes but does not
persist them, so callers should treat every response as a transient echo.
The client uses the ``requests`` library internally to make HTTP calls.

The client exposes one method per REST call used by the user management
screen:

* :meth:`list_users` – ``GET /users``.
* :meth:`get_user` – ``GET /users/{id}``.
* :meth:`create_user` – ``POST /users``.
* :meth:`update_user` – ``PUT /users/{id}``.
* :meth:`delete_user` – ``DELETE /users/{id}``.

None of the methods raise on network or HTTP failures.  Each returns a
tuple ``(data, error)`` where ``error`` is ``None`` on success or a
dictionary with the keys ``status_code`` and ``message``.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header.  To enable this behaviour,
initialise the client with ``api_key='<your token>'``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


@dataclass
class ApiEndpoint:
    """A single REST operation on the users resource.

    Attributes:
        path: The URI template, e.g. ``/users`` or ``/users/{id}``.
        method: The HTTP method in upper case (``GET``, ``POST``, etc.).
    """

    path: str
    method: str

    def format(self, user_id: Any = None) -> str:
        """Return the request path with ``{id}`` filled in, if given."""
        if user_id is None:
            return self.path
        # Identifiers come straight from user input; keep them inside one segment.
        return self.path.replace("{id}", quote(str(user_id), safe=""))


class UsersAPI:
    """Client for the remote users collection."""

    ENDPOINTS: Dict[str, ApiEndpoint] = {
        "list": ApiEndpoint(path="/users", method="GET"),
        "get": ApiEndpoint(path="/users/{id}", method="GET"),
        "create": ApiEndpoint(path="/users", method="POST"),
        "update": ApiEndpoint(path="/users/{id}", method="PUT"),
        "delete": ApiEndpoint(path="/users/{id}", method="DELETE"),
    }

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``https://example.com``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            timeout: Timeout in seconds applied to every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/users``).
            json_body: JSON body to send with the request.  ``None`` sends
                no body at all.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                try:
                    return response.json(), None
                except ValueError:
                    logger.warning("Non-JSON response from %s %s", method, url)
                    return None, None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or ""
                    if not message and err_json:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all users.

        Returns:
            A tuple ``(users, error)``. ``users`` contains a list of
            user objects or is empty on failure.
        """
        ep = self.ENDPOINTS["list"]
        data, error = self._request(ep.method, ep.format())
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        # Some deployments wrap the collection in an envelope.
        if isinstance(data, dict):
            for key in ["users", "data", "items"]:
                if key in data and isinstance(data[key], list):
                    return data[key], None
        return [], None

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single user by ID.

        Args:
            user_id: Identifier of the user, as typed by the operator.
        Returns:
            A tuple ``(user, error)``.  A successful response with an
            empty body is reported as a 404 since there is nothing to show.
        """
        ep = self.ENDPOINTS["get"]
        data, error = self._request(ep.method, ep.format(user_id))
        if error:
            return None, error
        if not data:
            return None, {"status_code": 404, "message": f"User {user_id} not found"}
        return data, None

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a new user.

        Args:
            payload: User data to send in the request body.
        Returns:
            A tuple ``(user, error)`` where ``user`` is the server echo.
        """
        ep = self.ENDPOINTS["create"]
        data, error = self._request(ep.method, ep.format(), json_body=payload)
        if error:
            return None, error
        return data, None

    def update_user(
        self, user_id: Any, payload: Dict[str, Any] | None = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Replace a user.

        Args:
            user_id: Identifier of the user to update.
            payload: Optional body.  When omitted the request carries no body.
        Returns:
            A tuple ``(result, error)``.
        """
        ep = self.ENDPOINTS["update"]
        data, error = self._request(ep.method, ep.format(user_id), json_body=payload)
        if error:
            return None, error
        return data, None

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete a user.

        Args:
            user_id: Identifier of the user to delete.
        Returns:
            A tuple ``(success, error)``.
        """
        ep = self.ENDPOINTS["delete"]
        _, error = self._request(ep.method, ep.format(user_id))
        if error:
            return False, error
        return True, None
