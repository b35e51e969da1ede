# =============================================================================
# tests/test_users_api.py - Person Endpoint Tests
# =============================================================================
# Exercises /users through the TestClient against in-memory SQLite.
#
# Run with: pytest tests/test_users_api.py -v
# =============================================================================

import pytest


# =============================================================================
# GET /users
# =============================================================================

class TestListUsers:
    """Tests for GET /users."""

    def test_empty(self, client):
        response = client.get("/users")

        assert response.status_code == 200
        assert response.json() == []

    def test_lists_stored_persons(self, client, seed_person):
        person_id = seed_person("Ada", 30)

        response = client.get("/users")

        assert response.status_code == 200
        assert response.json() == [{"id": person_id, "name": "Ada", "age": 30}]

    def test_storage_failure(self, broken_client):
        """Database errors become a generic 500."""
        response = broken_client.get("/users")

        assert response.status_code == 500
        assert response.json() == {"error": "Could not get users"}


# =============================================================================
# POST /users
# =============================================================================

class TestCreateUser:
    """Tests for POST /users."""

    def test_creates_and_returns_person_with_id(self, client, read_person):
        response = client.post("/users", json={"name": "Ada", "age": 30})

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Ada"
        assert body["age"] == 30
        assert isinstance(body["id"], int)
        assert read_person(body["id"]) == body

    def test_body_id_is_ignored(self, client, seed_person):
        """The database assigns the id even if the client sends one."""
        taken = seed_person("Grace", 85)

        response = client.post("/users", json={"id": taken, "name": "Ada", "age": 30})

        assert response.status_code == 200
        assert response.json()["id"] != taken

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "Ada"},
            {"age": 30},
            {},
            {"name": "Ada", "age": "thirty"},
            {"name": 42, "age": 30},
            {"name": "Ada", "age": 30.5},
            {"name": "Ada", "age": True},
            {"name": "Ada", "age": "30"},
            ["Ada", 30],
        ],
    )
    def test_bad_shape_is_400_without_mutation(self, client, count_persons, payload):
        """Missing fields or wrong types never reach the database."""
        response = client.post("/users", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request"}
        assert count_persons() == 0

    def test_malformed_json_is_400(self, client, count_persons):
        response = client.post(
            "/users",
            content=b'{"name": "Ada", "age": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request"}
        assert count_persons() == 0

    def test_storage_failure(self, broken_client):
        response = broken_client.post("/users", json={"name": "Ada", "age": 30})

        assert response.status_code == 500
        assert response.json() == {"error": "Could not create user"}


# =============================================================================
# PUT /users/{id}
# =============================================================================

class TestUpdateUser:
    """Tests for PUT /users/{id}."""

    def test_response_matches_persisted_state(self, client, seed_person, read_person):
        """The echoed payload equals what a fresh read returns."""
        person_id = seed_person("Ada", 30)

        response = client.put(f"/users/{person_id}", json={"name": "Ada L.", "age": 36})

        assert response.status_code == 200
        assert response.json() == {"id": person_id, "name": "Ada L.", "age": 36}
        assert read_person(person_id) == response.json()

    def test_unknown_id_is_404(self, client, count_persons):
        response = client.put("/users/999", json={"name": "Nobody", "age": 1})

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}
        assert count_persons() == 0

    def test_unknown_id_echoes_in_compat_mode(self, client, compat_mode, read_person):
        """With the flag off the old silent success returns, and storage disagrees."""
        response = client.put("/users/999", json={"name": "Nobody", "age": 1})

        assert response.status_code == 200
        assert response.json() == {"id": 999, "name": "Nobody", "age": 1}
        assert read_person(999) is None

    @pytest.mark.parametrize("raw_id", ["abc", "1.5", "1e3"])
    def test_non_integer_id_is_400(self, client, raw_id):
        response = client.put(f"/users/{raw_id}", json={"name": "Ada", "age": 30})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid user ID"}

    def test_id_checked_before_body(self, client):
        """A bad id wins over a bad body."""
        response = client.put("/users/abc", json={"name": "Ada"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid user ID"}

    def test_bad_body_is_400_without_mutation(self, client, seed_person, read_person):
        person_id = seed_person("Ada", 30)

        response = client.put(f"/users/{person_id}", json={"name": "Ada", "age": "old"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request"}
        assert read_person(person_id) == {"id": person_id, "name": "Ada", "age": 30}

    def test_storage_failure(self, broken_client):
        response = broken_client.put("/users/1", json={"name": "Ada", "age": 30})

        assert response.status_code == 500
        assert response.json() == {"error": "Could not update user"}


# =============================================================================
# DELETE /users/{id}
# =============================================================================

class TestDeleteUser:
    """Tests for DELETE /users/{id}."""

    def test_deletes_with_204(self, client, seed_person, read_person):
        person_id = seed_person("Ada", 30)

        response = client.delete(f"/users/{person_id}")

        assert response.status_code == 204
        assert response.content == b""
        assert read_person(person_id) is None

    def test_unknown_id_is_404(self, client):
        response = client.delete("/users/999")

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_unknown_id_succeeds_in_compat_mode(self, client, compat_mode):
        """With the flag off, deleting a missing id still reports success."""
        response = client.delete("/users/999")

        assert response.status_code == 204

    def test_non_integer_id_is_400(self, client):
        """DELETE validates the id the same way PUT does."""
        response = client.delete("/users/abc")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid user ID"}

    def test_storage_failure(self, broken_client):
        response = broken_client.delete("/users/1")

        assert response.status_code == 500
        assert response.json() == {"error": "Could not delete user"}


# =============================================================================
# End-to-end Scenario
# =============================================================================

class TestPersonLifecycle:
    """Create, list, delete, list."""

    def test_create_list_delete_list(self, client):
        created = client.post("/users", json={"name": "Ada", "age": 30})
        assert created.status_code == 200
        person = created.json()

        listed = client.get("/users").json()
        assert person in listed

        deleted = client.delete(f"/users/{person['id']}")
        assert deleted.status_code == 204

        listed = client.get("/users").json()
        assert all(p["id"] != person["id"] for p in listed)
