"""Tests for the JSON screen API and the HTML form actions."""

import pytest
from fastapi.testclient import TestClient

from user_manager.app.core.config import Settings
from user_manager.app.main import create_app


@pytest.fixture
def client(fake_api):
    app = create_app(Settings(project_name="Test Users"), api=fake_api)
    return TestClient(app)


class TestJsonScreen:
    """Actions under /api/v1/screen."""

    def test_get_screen_mounts(self, client, fake_api):
        response = client.get("/api/v1/screen/")

        assert response.status_code == 200
        body = response.json()
        assert [u["id"] for u in body["users"]] == [1, 2, 3]
        assert body["rows"][0]["first_name"] == "Leanne"
        assert body["rows"][0]["last_name"] == "Graham"
        assert body["error"] is None
        assert fake_api.call_names() == ["list_users"]

    def test_refresh(self, client, fake_api):
        client.get("/api/v1/screen/")
        client.post("/api/v1/screen/refresh")

        assert fake_api.call_names() == ["list_users", "list_users"]

    def test_search_not_found(self, client):
        body = client.post("/api/v1/screen/search", json={"query": "77"}).json()

        assert body["users"] == []
        assert body["error"] == "User not found."
        assert body["search_query"] == "77"

    def test_add_with_body(self, client):
        client.get("/api/v1/screen/")
        body = client.post(
            "/api/v1/screen/users",
            json={"first_name": "Ada", "last_name": "Lovelace", "email": "ada@x.io", "department": "R&D"},
        ).json()

        assert body["users"][-1]["id"] == 4
        assert body["rows"][-1]["department"] == "R&D"
        assert body["draft"] == {"first_name": "", "last_name": "", "email": "", "department": ""}

    def test_add_from_stored_draft_requires_all_fields(self, client, fake_api):
        client.put("/api/v1/screen/draft", json={"first_name": "Ada"})
        body = client.post("/api/v1/screen/users").json()

        assert body["error"] == "All fields are required."
        assert body["draft"]["first_name"] == "Ada"
        assert "create_user" not in fake_api.call_names()

    def test_edit_update_cycle(self, client, fake_api):
        client.get("/api/v1/screen/")
        body = client.post("/api/v1/screen/users/2/edit").json()
        assert body["editing_user_id"] == 2
        assert [row["editing"] for row in body["rows"]] == [False, True, False]

        body = client.put("/api/v1/screen/users/2").json()
        assert body["editing_user_id"] is None
        assert fake_api.calls[-1] == ("update_user", (2, None))

    def test_delete_failure(self, client, fake_api):
        client.get("/api/v1/screen/")
        fake_api.fail.add("delete_user")
        body = client.delete("/api/v1/screen/users/1").json()

        assert body["error"] == "Failed to delete user."
        assert len(body["users"]) == 3

    def test_invalid_search_body(self, client):
        response = client.post("/api/v1/screen/search", json={"query": ["not", "text"]})
        assert response.status_code == 422


class TestPage:
    """HTML screen at the site root."""

    def test_page_lists_users(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        html = response.text
        assert "<title>Test Users</title>" in html
        assert "<td>Leanne</td><td>Graham</td>" in html
        assert "<td>Clementine</td><td>N/A</td>" in html
        assert 'class="error"' not in html

    def test_empty_table_message(self, client, fake_api):
        fake_api.users = []
        html = client.get("/").text
        assert "No users found." in html

    def test_search_form_redirects(self, client):
        client.get("/")
        response = client.post("/search", data={"search_id": "3"}, follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/"

    def test_search_form_shows_result(self, client):
        client.get("/")
        html = client.post("/search", data={"search_id": "3"}).text

        assert "Clementine" in html
        assert "Leanne" not in html
        assert 'value="3"' in html

    def test_fetch_failure_message(self, client, fake_api):
        fake_api.fail.add("list_users")
        html = client.get("/").text

        assert '<p class="error">Failed to fetch users.</p>' in html

    def test_add_form_keeps_draft_on_validation_error(self, client):
        client.get("/")
        html = client.post(
            "/users", data={"first_name": "Ada", "last_name": "", "email": "a@x.io", "department": "R&D"}
        ).text

        assert "All fields are required." in html
        assert 'name="first_name" placeholder="First Name" value="Ada"' in html
        assert 'value="R&amp;D"' in html

    def test_edit_form_renders_inputs(self, client):
        client.get("/")
        html = client.post("/users/1/edit").text

        assert 'name="first_name" value="Leanne"' in html
        assert 'action="/users/1/update"' in html
        assert 'class="update"' in html

    def test_update_form_leaves_edit_mode(self, client, fake_api):
        client.get("/")
        client.post("/users/1/edit")
        html = client.post("/users/1/update", data={"first_name": "Changed"}).text

        assert "Changed" not in html
        assert 'action="/users/1/update"' not in html
        assert fake_api.calls[-1] == ("update_user", (1, None))

    def test_delete_form_removes_row(self, client):
        client.get("/")
        html = client.post("/users/2/delete").text

        assert "Ervin" not in html

    def test_values_are_escaped(self, client, fake_api):
        fake_api.users = [{"id": 9, "name": "<b>Bold</b> Name", "email": "x@y", "company": {"name": "A&B"}}]
        html = client.get("/").text

        assert "<b>Bold</b>" not in html
        assert "&lt;b&gt;Bold&lt;/b&gt;" in html
        assert "A&amp;B" in html

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}
