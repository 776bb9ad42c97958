"""
Tests for the /users HTTP endpoints.

Covers:
- Status codes for each operation
- 404 / 403 mapping of store errors
- The 200 update-miss payload
- Request body validation
- The end-to-end create / delete / list scenario
- Mounting under a configured prefix
"""

from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.main import create_app
from users_api.app.services.user_service import UserStore


class TestListAndGet:
    """Tests for GET /users and GET /users/{id}."""

    def test_list_users(self, client):
        response = client.get("/users")
        assert response.status_code == 200
        assert response.json() == [
            {"id": "1", "name": "Alice", "email": "alice@gmail.com"},
            {"id": "2", "name": "Bob", "email": "bob@gmail.com"},
            {"id": "3", "name": "Charlie", "email": "charlie@gmail.com"},
        ]

    def test_get_user(self, client):
        response = client.get("/users/3")
        assert response.status_code == 200
        assert response.json() == {"id": "3", "name": "Charlie", "email": "charlie@gmail.com"}

    def test_get_missing_user(self, client):
        response = client.get("/users/99")
        assert response.status_code == 404
        assert response.json() == {"detail": "User with id 99 not found"}

    def test_get_forbidden_user(self, client):
        response = client.get("/users/1")
        assert response.status_code == 403
        assert response.json() == {"detail": "Access to this user is forbidden"}

    def test_get_user_one_after_delete(self, client):
        assert client.delete("/users/1").status_code == 200
        assert client.get("/users/1").status_code == 404


class TestCreate:
    """Tests for POST /users and POST /users/create-without-id."""

    def test_create_with_id(self, client, store):
        body = {"id": "4", "name": "David", "email": "david@gmail.com"}
        response = client.post("/users", json=body)
        assert response.status_code == 201
        assert response.json() == body
        assert len(store) == 4

    def test_create_with_duplicate_id(self, client, store):
        client.post("/users", json={"id": "9", "name": "A", "email": "a"})
        client.post("/users", json={"id": "9", "name": "B", "email": "b"})
        assert [user.id for user in store.list()].count("9") == 2

        response = client.delete("/users/9")
        assert response.status_code == 200
        assert "9" not in [user.id for user in store.list()]

    def test_create_without_id(self, client):
        first = client.post("/users/create-without-id", json={"name": "Dana", "email": "d@x.com"})
        second = client.post("/users/create-without-id", json={"name": "Evan", "email": "e@x.com"})
        assert first.status_code == 201
        assert first.json() == {"id": "4", "name": "Dana", "email": "d@x.com"}
        assert second.json()["id"] == "5"

    def test_create_rejects_missing_fields(self, client, store):
        response = client.post("/users", json={"name": "NoId", "email": "n"})
        assert response.status_code == 422
        assert len(store) == 3

    def test_create_without_id_rejects_missing_email(self, client, store):
        response = client.post("/users/create-without-id", json={"name": "Dana"})
        assert response.status_code == 422
        assert len(store) == 3


class TestDelete:
    """Tests for DELETE /users/{id}."""

    def test_delete_user(self, client):
        response = client.delete("/users/2")
        assert response.status_code == 200
        assert response.json() == {"message": "User deleted successfully"}

    def test_delete_missing_user(self, client):
        response = client.delete("/users/99")
        assert response.status_code == 404
        assert response.json() == {"detail": "User with id 99 not found"}


class TestUpdate:
    """Tests for PUT /users/{id}."""

    def test_partial_update(self, client):
        response = client.put("/users/2", json={"name": "Bobby"})
        assert response.status_code == 200
        assert response.json() == {"id": "2", "name": "Bobby", "email": "bob@gmail.com"}

    def test_update_missing_user_is_not_an_error(self, client):
        response = client.put("/users/99", json={"name": "Nobody"})
        assert response.status_code == 200
        assert response.json() == {"error_message": "User not found"}

    def test_update_ignores_null_fields(self, client):
        response = client.put("/users/2", json={"name": None, "email": "b@b"})
        assert response.json() == {"id": "2", "name": "Bob", "email": "b@b"}

    def test_update_missing_user_without_body(self, client):
        response = client.put("/users/99")
        assert response.status_code == 200
        assert response.json() == {"error_message": "User not found"}

    def test_update_without_body_leaves_user_unchanged(self, client):
        response = client.put("/users/2")
        assert response.status_code == 200
        assert response.json() == {"id": "2", "name": "Bob", "email": "bob@gmail.com"}

    def test_update_stores_numbers_as_strings(self, client, store):
        response = client.put("/users/2", json={"name": 5})
        assert response.status_code == 200
        assert response.json()["name"] == "5"
        assert store.list()[1].name == "5"

    def test_update_keeps_order(self, client):
        client.put("/users/1", json={"email": "alice@example.com"})
        ids = [user["id"] for user in client.get("/users").json()]
        assert ids == ["1", "2", "3"]


class TestScenario:
    """End-to-end walk through the main operations."""

    def test_create_delete_list(self, client):
        assert [user["id"] for user in client.get("/users").json()] == ["1", "2", "3"]

        created = client.post("/users/create-without-id", json={"name": "Dana", "email": "d@x.com"})
        assert created.json() == {"id": "4", "name": "Dana", "email": "d@x.com"}

        deleted = client.delete("/users/2")
        assert deleted.json() == {"message": "User deleted successfully"}

        assert [user["id"] for user in client.get("/users").json()] == ["1", "3", "4"]


class TestAppFactory:
    """Tests for create_app store injection."""

    def test_default_store_is_seeded(self):
        app = create_app()
        assert isinstance(app.state.user_store, UserStore)
        assert len(app.state.user_store) == 3

    def test_apps_do_not_share_state(self):
        first, second = create_app(), create_app()
        assert first.state.user_store is not second.state.user_store

    def test_routes_follow_api_prefix(self):
        app = create_app(store=UserStore(), config=Settings(api_prefix="/api/v1"))
        with TestClient(app) as client:
            response = client.get("/api/v1/users")
            assert response.status_code == 200
            assert len(response.json()) == 3
            assert client.get("/api/v1/users/2").json()["name"] == "Bob"
            assert client.get("/users").status_code == 404
