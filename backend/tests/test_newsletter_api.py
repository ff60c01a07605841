from sqlalchemy import func, select

from app.config import settings
from app.database.models import Subscriber
from app.services.database_service import database_service

API = settings.api_prefix


def _subscriber_count(client, email):
    async def count():
        async with database_service.get_session() as session:
            result = await session.execute(select(func.count(Subscriber.id)).where(Subscriber.email == email))
            return result.scalar_one()

    return client.portal.call(count)


def test_subscribe_then_duplicate(client):
    response = client.post(f"{API}/newsletter", json={"email": "reader@example.com"})
    assert response.status_code == 200
    assert response.json() == {"message": "Subscription successful"}

    response = client.post(f"{API}/newsletter", json={"email": "Reader@Example.com"})
    assert response.status_code == 409
    assert response.json() == {"message": "Email already subscribed"}

    assert _subscriber_count(client, "reader@example.com") == 1


def test_subscribe_with_form_body(client):
    response = client.post(f"{API}/newsletter", data={"email": "form@example.com"})
    assert response.status_code == 200
    assert _subscriber_count(client, "form@example.com") == 1


def test_subscribe_with_query_parameter(client):
    response = client.post(f"{API}/newsletter", params={"email": "query@example.com"})
    assert response.status_code == 200
    assert _subscriber_count(client, "query@example.com") == 1


def test_invalid_email_is_rejected(client):
    response = client.post(f"{API}/newsletter", json={"email": "not-an-email"})
    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "rest_invalid_param"
    assert body["data"] == {"status": 422}
    assert _subscriber_count(client, "not-an-email") == 0


def test_missing_email_is_rejected(client):
    response = client.post(f"{API}/newsletter", json={})
    assert response.status_code == 422
    assert response.json()["code"] == "rest_invalid_param"


def test_get_is_not_allowed(client):
    response = client.get(f"{API}/newsletter")
    assert response.status_code == 405
    assert response.json()["code"] == "http_405"


def test_undecodable_json_body_is_rejected(client):
    response = client.post(
        f"{API}/newsletter",
        content=b'{"email": "\xff\xfe@example.com"}',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "rest_invalid_param"


def test_malformed_json_body_is_rejected(client):
    response = client.post(
        f"{API}/newsletter",
        content=b'{"email": ',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "rest_invalid_param"
