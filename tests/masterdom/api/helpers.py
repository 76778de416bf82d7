"""Request helpers shared by the API tests."""

from dataclasses import dataclass
from uuid import UUID

from fastapi.testclient import TestClient

API = "/api/v1"
PASSWORD = "SecurePassword123!"
SUPER_ADMIN_EMAIL = "root@example.com"


@dataclass
class Actor:
    """A registered user together with a ready-to-use auth header."""

    user_id: UUID
    email: str
    headers: dict[str, str]


def register(client: TestClient, email: str, first_name: str, **profile):
    return client.post(
        f"{API}/auth/register",
        json={
            "email": email,
            "password": PASSWORD,
            "first_name": first_name,
            **profile,
        },
    )


def login(client: TestClient, email: str) -> dict[str, str]:
    response = client.post(
        f"{API}/auth/login",
        json={"email": email, "password": PASSWORD},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def create_offer(client: TestClient, actor: Actor, title: str, **fields) -> int:
    response = client.post(
        f"{API}/offers",
        json={"offer_type": "service_offer", "title": title, **fields},
        headers=actor.headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]
