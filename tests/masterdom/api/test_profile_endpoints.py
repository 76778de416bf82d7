"""API tests for the self-service profile."""

from tests.masterdom.api.helpers import API


class TestGetProfile:
    def test_returns_own_profile(self, client, signup):
        anna = signup(
            "anna@example.com",
            "Anna",
            last_name="Ivanova",
            years_of_experience=7,
        )

        response = client.get(f"{API}/profile", headers=anna.headers)

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == str(anna.user_id)
        assert body["email"] == "anna@example.com"
        assert body["role"] == "user"
        assert body["is_admin"] is False
        assert body["first_name"] == "Anna"
        assert body["last_name"] == "Ivanova"
        assert body["years_of_experience"] == 7
        assert body["average_rating"] is None


class TestUpdateProfile:
    def test_partial_update_keeps_other_fields(self, client, signup):
        anna = signup("anna@example.com", "Anna", last_name="Ivanova")

        response = client.patch(
            f"{API}/profile",
            json={"bio": "Plumber based in Sofia"},
            headers=anna.headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["bio"] == "Plumber based in Sofia"
        assert body["last_name"] == "Ivanova"
        assert body["first_name"] == "Anna"

    def test_explicit_null_clears(self, client, signup):
        anna = signup("anna@example.com", "Anna", phone_number="+359 88 123 4567")

        response = client.patch(
            f"{API}/profile",
            json={"phone_number": None},
            headers=anna.headers,
        )

        assert response.status_code == 200
        assert response.json()["phone_number"] is None
        reloaded = client.get(f"{API}/profile", headers=anna.headers).json()
        assert reloaded["phone_number"] is None

    def test_empty_body_changes_nothing(self, client, anna):
        before = client.get(f"{API}/profile", headers=anna.headers).json()

        response = client.patch(f"{API}/profile", json={}, headers=anna.headers)

        assert response.status_code == 200
        assert response.json()["first_name"] == before["first_name"]
        assert response.json()["bio"] == before["bio"]

    def test_first_name_cannot_be_emptied(self, client, anna):
        response = client.patch(
            f"{API}/profile",
            json={"first_name": ""},
            headers=anna.headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_first_name_cannot_be_cleared(self, client, anna):
        response = client.patch(
            f"{API}/profile",
            json={"first_name": None},
            headers=anna.headers,
        )

        assert response.status_code == 400

    def test_role_is_not_accepted(self, client, anna):
        response = client.patch(
            f"{API}/profile",
            json={"role": "admin"},
            headers=anna.headers,
        )

        assert response.status_code == 400
        me = client.get(f"{API}/profile", headers=anna.headers).json()
        assert me["is_admin"] is False
