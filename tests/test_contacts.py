"""
Tests for the contact endpoints.
"""

import pytest


@pytest.fixture
def contact(client, alice_headers):
    response = client.post(
        "/contacts",
        json={"name": "Carol", "company": "Acme", "notes": "Met at meetup"},
        headers=alice_headers,
    )
    assert response.status_code == 201
    return response.json()


class TestContacts:

    def test_create(self, client, alice_headers):
        response = client.post("/contacts", json={"name": "Carol", "company": "Acme"}, headers=alice_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["notes"] == ""
        assert data["userName"] == "alice"

    def test_create_ignores_supplied_owner(self, client, alice_headers):
        response = client.post(
            "/contacts",
            json={"name": "Carol", "company": "Acme", "userName": "bob"},
            headers=alice_headers,
        )

        assert response.json()["userName"] == "alice"

    def test_create_missing_name(self, client, alice_headers):
        response = client.post("/contacts", json={"company": "Acme"}, headers=alice_headers)

        assert response.status_code == 400
        assert response.json()["fields"] == ["name"]

    def test_requires_auth(self, client):
        assert client.get("/contacts").status_code == 401

    def test_list_only_mine(self, client, alice_headers, bob_headers, contact):
        client.post("/contacts", json={"name": "Dave", "company": "Initech"}, headers=bob_headers)

        mine = client.get("/contacts", headers=alice_headers).json()

        assert [c["name"] for c in mine] == ["Carol"]

    def test_get_one(self, client, alice_headers, contact):
        response = client.get(f"/contacts/{contact['_id']}", headers=alice_headers)

        assert response.status_code == 200
        assert response.json()["notes"] == "Met at meetup"

    def test_partial_update(self, client, alice_headers, contact):
        response = client.put(f"/contacts/{contact['_id']}", json={"company": "Globex"}, headers=alice_headers)

        data = response.json()
        assert data["company"] == "Globex"
        assert data["name"] == "Carol"
        assert data["notes"] == "Met at meetup"

    def test_update_ignores_supplied_owner(self, client, alice_headers, contact):
        response = client.put(
            f"/contacts/{contact['_id']}",
            json={"name": "Carol B", "userName": "bob"},
            headers=alice_headers,
        )

        data = response.json()
        assert data["name"] == "Carol B"
        assert data["userName"] == "alice"

    def test_notes_can_be_cleared(self, client, alice_headers, contact):
        response = client.put(f"/contacts/{contact['_id']}", json={"notes": ""}, headers=alice_headers)

        assert response.status_code == 200
        assert response.json()["notes"] == ""

    def test_empty_update_returns_record(self, client, alice_headers, contact):
        response = client.put(f"/contacts/{contact['_id']}", json={}, headers=alice_headers)

        assert response.status_code == 200
        assert response.json()["name"] == "Carol"

    def test_delete(self, client, alice_headers, contact):
        response = client.delete(f"/contacts/{contact['_id']}", headers=alice_headers)

        assert response.json() == {"success": True}
        assert client.get(f"/contacts/{contact['_id']}", headers=alice_headers).status_code == 404


class TestContactOwnership:

    def test_other_user_cannot_read(self, client, bob_headers, contact):
        response = client.get(f"/contacts/{contact['_id']}", headers=bob_headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Contact not found or user not authorized"}

    def test_other_user_cannot_update(self, client, alice_headers, bob_headers, contact):
        response = client.put(f"/contacts/{contact['_id']}", json={"notes": "mine now"}, headers=bob_headers)

        assert response.status_code == 404
        assert client.get(f"/contacts/{contact['_id']}", headers=alice_headers).json()["notes"] == "Met at meetup"

    def test_other_user_empty_update_is_404(self, client, bob_headers, contact):
        response = client.put(f"/contacts/{contact['_id']}", json={}, headers=bob_headers)

        assert response.status_code == 404

    def test_other_user_cannot_delete(self, client, alice_headers, bob_headers, contact):
        assert client.delete(f"/contacts/{contact['_id']}", headers=bob_headers).status_code == 404
        assert client.get(f"/contacts/{contact['_id']}", headers=alice_headers).status_code == 200
