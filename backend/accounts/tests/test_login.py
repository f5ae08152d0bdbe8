import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.urls import reverse

pytestmark = pytest.mark.django_db

LOGIN_URL = reverse("login")


@pytest.fixture
def trader():
    return get_user_model().objects.create_user(username="trader", password="s3cret")


def test_login_returns_token(api_client, trader):
    resp = api_client.post(LOGIN_URL, {"username": "trader", "password": "s3cret"}, format="json")
    assert resp.status_code == 200
    body = resp.json()
    assert body["token"]
    assert body["username"] == "trader"
    assert body["is_manager"] is False


def test_manager_group_member_is_manager(api_client, trader):
    trader.groups.add(Group.objects.create(name="manager"))
    resp = api_client.post(LOGIN_URL, {"username": "trader", "password": "s3cret"}, format="json")
    assert resp.json()["is_manager"] is True


def test_token_authenticates_api(api_client, trader):
    token = api_client.post(LOGIN_URL, {"username": "trader", "password": "s3cret"}, format="json").json()["token"]
    api_client.credentials(HTTP_AUTHORIZATION=f"Token {token}")
    assert api_client.get(reverse("regions-list")).status_code == 200


def test_bad_credentials(api_client, trader):
    resp = api_client.post(LOGIN_URL, {"username": "trader", "password": "nope"}, format="json")
    assert resp.status_code == 401
    assert resp.json() == {"detail": "Invalid credentials"}


def test_missing_fields(api_client):
    resp = api_client.post(LOGIN_URL, {"username": "trader"}, format="json")
    assert resp.status_code == 400
