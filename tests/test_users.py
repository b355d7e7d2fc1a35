"""
Tests for signup, login and token authentication.
"""

from tests.conftest import signup


class TestSignup:
    """POST /users"""

    def test_signup_success(self, client):
        response = signup(client, "alice", "a@x.com", "pw1")

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "alice"
        assert data["email"] == "a@x.com"
        assert len(data["accessToken"]) == 256
        assert "_id" in data
        assert "password" not in data

    def test_password_stored_hashed(self, client, mongo_client, settings):
        signup(client, "alice", "a@x.com", "pw1")

        stored = mongo_client[settings.database_name]["users"].find_one({"name": "alice"})
        assert stored["password"] != "pw1"
        assert stored["password"].startswith("$2")

    def test_tokens_differ_between_users(self, alice, bob):
        assert alice["accessToken"] != bob["accessToken"]

    def test_duplicate_name_rejected(self, client, alice):
        response = signup(client, "alice", "other@x.com", "pw")

        assert response.status_code == 400
        assert response.json() == {"error": "User name or email already exists"}

    def test_duplicate_email_rejected(self, client, alice):
        response = signup(client, "alice2", "a@x.com", "pw")

        assert response.status_code == 400
        assert response.json()["error"] == "User name or email already exists"

    def test_missing_field(self, client):
        response = client.post("/users", json={"user": "alice", "email": "a@x.com"})

        assert response.status_code == 400
        assert response.json()["error"] == "Missing required field"
        assert "password" in response.json()["fields"]

    def test_empty_field_rejected(self, client):
        response = signup(client, "", "a@x.com", "pw1")

        assert response.status_code == 400

    def test_invalid_email(self, client):
        response = signup(client, "alice", "not-an-email", "pw1")

        assert response.status_code == 400
        assert response.json()["fields"] == ["email"]


class TestLogin:
    """POST /users/{user_name}"""

    def test_login_returns_signup_token(self, client, alice):
        response = client.post("/users/alice", json={"password": "pw1"})

        assert response.status_code == 200
        assert response.json() == {"userName": "alice", "accessToken": alice["accessToken"]}

    def test_login_is_idempotent(self, client, alice):
        first = client.post("/users/alice", json={"password": "pw1"}).json()
        second = client.post("/users/alice", json={"password": "pw1"}).json()

        assert first["accessToken"] == second["accessToken"] == alice["accessToken"]

    def test_wrong_password(self, client, alice):
        response = client.post("/users/alice", json={"password": "nope"})

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_unknown_user_looks_like_wrong_password(self, client, alice):
        unknown = client.post("/users/mallory", json={"password": "pw1"})
        wrong = client.post("/users/alice", json={"password": "nope"})

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()

    def test_missing_password(self, client, alice):
        response = client.post("/users/alice", json={})

        assert response.status_code == 400


class TestAuthentication:
    """Bearer token checks on protected routes"""

    def test_missing_header(self, client):
        response = client.get("/postings/user")

        assert response.status_code == 401
        assert response.json() == {"error": "Missing access token"}

    def test_unknown_token(self, client, alice):
        response = client.get("/postings/user", headers={"Authorization": "f" * 256})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired access token"}

    def test_bare_token(self, client, alice_headers):
        response = client.get("/postings/user", headers=alice_headers)

        assert response.status_code == 200

    def test_bearer_scheme_accepted(self, client, alice):
        response = client.get(
            "/postings/user",
            headers={"Authorization": f"Bearer {alice['accessToken']}"},
        )

        assert response.status_code == 200

    def test_unauthenticated_request_never_reaches_handler(self, client, mongo_client, settings):
        response = client.post("/postings", json={"jobTitle": "Eng", "company": "Acme"})

        assert response.status_code == 401
        assert mongo_client[settings.database_name]["postings"].count_documents({}) == 0
