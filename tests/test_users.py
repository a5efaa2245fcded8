"""
Test suite for user endpoints and job applications.
"""

import pytest


@pytest.fixture
def sample_user_data():
    return {
        "username": "u-new",
        "firstName": "First-new",
        "lastName": "Last-new",
        "email": "new@email.com",
        "isAdmin": False,
    }


class TestUserCreation:
    """Tests for POST /users"""

    def test_create_user(self, client, seeded, sample_user_data):
        response = client.post("/users", json=sample_user_data)

        assert response.status_code == 201
        assert response.json() == {"user": sample_user_data}

    def test_is_admin_defaults_to_false(self, client, seeded, sample_user_data):
        del sample_user_data["isAdmin"]

        response = client.post("/users", json=sample_user_data)

        assert response.json()["user"]["isAdmin"] is False

    def test_duplicate_username(self, client, seeded, sample_user_data):
        sample_user_data["username"] = "u1"

        response = client.post("/users", json=sample_user_data)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Duplicate username: u1"

    def test_invalid_email(self, client, seeded, sample_user_data):
        sample_user_data["email"] = "not-an-email"

        response = client.post("/users", json=sample_user_data)

        assert response.status_code == 400


class TestUserRetrieval:
    """Tests for GET /users and GET /users/{username}"""

    def test_list_users(self, client, seeded):
        response = client.get("/users")

        assert response.status_code == 200
        assert response.json() == {
            "users": [
                {
                    "username": "u1",
                    "firstName": "U1F",
                    "lastName": "U1L",
                    "email": "user1@user.com",
                    "isAdmin": False,
                },
                {
                    "username": "u2",
                    "firstName": "U2F",
                    "lastName": "U2L",
                    "email": "user2@user.com",
                    "isAdmin": True,
                },
            ]
        }

    def test_get_user_with_applications(self, client, seeded):
        response = client.get("/users/u1")

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["username"] == "u1"
        assert user["jobs"] == [seeded["job_ids"][0]]

    def test_get_nonexistent_user(self, client, seeded):
        response = client.get("/users/nope")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "No user: nope"


class TestUserUpdate:
    """Tests for PATCH /users/{username}"""

    def test_update_first_name(self, client, seeded):
        response = client.patch("/users/u1", json={"firstName": "New"})

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["firstName"] == "New"
        assert user["lastName"] == "U1L"

    def test_update_is_admin(self, client, seeded):
        response = client.patch("/users/u1", json={"isAdmin": True})

        assert response.json()["user"]["isAdmin"] is True

    def test_cannot_change_username(self, client, seeded):
        response = client.patch("/users/u1", json={"username": "u9"})

        assert response.status_code == 400

    def test_empty_update(self, client, seeded):
        response = client.patch("/users/u1", json={})

        assert response.status_code == 400

    def test_update_nonexistent_user(self, client, seeded):
        response = client.patch("/users/nope", json={"firstName": "Nope"})

        assert response.status_code == 404


class TestUserDeletion:
    """Tests for DELETE /users/{username}"""

    def test_delete_user(self, client, seeded):
        response = client.delete("/users/u1")

        assert response.json() == {"deleted": "u1"}
        assert client.get("/users/u1").status_code == 404

    def test_delete_nonexistent_user(self, client, seeded):
        response = client.delete("/users/nope")

        assert response.status_code == 404


class TestJobApplication:
    """Tests for POST /users/{username}/jobs/{id}"""

    def test_apply(self, client, seeded):
        job_id = seeded["job_ids"][1]

        response = client.post(f"/users/u2/jobs/{job_id}")

        assert response.status_code == 200
        assert response.json() == {"applied": job_id}
        assert client.get("/users/u2").json()["user"]["jobs"] == [job_id]

    def test_apply_twice(self, client, seeded):
        job_id = seeded["job_ids"][0]

        response = client.post(f"/users/u1/jobs/{job_id}")

        assert response.status_code == 400

    def test_apply_to_missing_job(self, client, seeded):
        response = client.post("/users/u1/jobs/99999")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "No job: 99999"

    def test_apply_as_missing_user(self, client, seeded):
        job_id = seeded["job_ids"][0]

        response = client.post(f"/users/nope/jobs/{job_id}")

        assert response.status_code == 404
