"""Tests for login, /auth/me and municipality user registration."""

from unittest.mock import AsyncMock, patch

from officedesk.exceptions import ConflictException
from officedesk.models.enums import PrincipalType, StaffRole
from officedesk.modules.auth.auth import AuthenticatedPrincipal, create_access_token
from tests.factories import citizen_principal, make_office, make_staff, staff_principal

AUTH_URL = "/api/v1/auth"


def _bearer(principal: AuthenticatedPrincipal) -> dict:
    return {"Authorization": f"Bearer {create_access_token(principal)}"}


@patch("officedesk.modules.auth.router.StaffService")
def test_login_returns_usable_token(mock_svc_cls, client):
    mock_svc = AsyncMock()
    mock_svc.authenticate_staff.return_value = make_staff("admin", StaffRole.ADMIN)
    mock_svc_cls.return_value = mock_svc

    response = client.post(f"{AUTH_URL}/login", json={"username": "admin", "password": "secret"})

    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["role"] == "Admin"
    mock_svc.authenticate_staff.assert_awaited_once_with("admin", "secret")

    me = client.get(f"{AUTH_URL}/me", headers={"Authorization": f"Bearer {data['access_token']}"})
    assert me.status_code == 200
    assert me.json() == {"username": "admin", "type": "STAFF", "role": "Admin"}


@patch("officedesk.modules.auth.router.StaffService")
def test_login_with_bad_credentials_is_unauthorized(mock_svc_cls, client):
    mock_svc = AsyncMock()
    mock_svc.authenticate_staff.return_value = None
    mock_svc_cls.return_value = mock_svc

    response = client.post(f"{AUTH_URL}/login", json={"username": "admin", "password": "nope"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_login_requires_username_and_password(client):
    response = client.post(f"{AUTH_URL}/login", json={"username": ""})

    assert response.status_code == 422
    fields = {d["field"] for d in response.json()["details"]}
    assert "body.username" in fields
    assert "body.password" in fields


def test_me_accepts_citizen_tokens(client):
    response = client.get(f"{AUTH_URL}/me", headers=_bearer(citizen_principal("mrossi")))

    assert response.status_code == 200
    assert response.json() == {"username": "mrossi", "type": "CITIZEN", "role": None}


def test_me_rejects_garbage_token(client):
    response = client.get(f"{AUTH_URL}/me", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


def test_real_tokens_go_through_the_gate(client):
    """End to end through JWT decoding: TOSM is refused on an ADMIN route."""
    response = client.get("/api/v1/offices/", headers=_bearer(staff_principal(StaffRole.TOSM)))

    assert response.status_code == 403


@patch("officedesk.modules.auth.router.StaffService")
def test_admin_registers_municipality_user(mock_svc_cls, client, login_as):
    created = make_staff("tosm2", StaffRole.TOSM, offices=[make_office("Waste Office")])
    mock_svc = AsyncMock()
    mock_svc.create_staff.return_value = created
    mock_svc_cls.return_value = mock_svc
    login_as(staff_principal(StaffRole.ADMIN))

    response = client.post(
        f"{AUTH_URL}/register-municipality",
        json={
            "username": "tosm2",
            "name": "Tosm2",
            "surname": "Tester",
            "password": "pw",
            "role": "TOSM",
            "officeNames": ["Waste Office"],
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert "password" not in data
    assert data["officeNames"] == ["Waste Office"]
    mock_svc.create_staff.assert_awaited_once_with(
        username="tosm2",
        name="Tosm2",
        surname="Tester",
        password="pw",
        role="TOSM",
        office_names=["Waste Office"],
    )


@patch("officedesk.modules.auth.router.StaffService")
def test_register_duplicate_username_is_conflict(mock_svc_cls, client, login_as):
    mock_svc = AsyncMock()
    mock_svc.create_staff.side_effect = ConflictException("Staff with username tosm2 already exists")
    mock_svc_cls.return_value = mock_svc
    login_as(staff_principal(StaffRole.ADMIN))

    response = client.post(
        f"{AUTH_URL}/register-municipality",
        json={"username": "tosm2", "name": "T", "surname": "T", "password": "pw", "role": "TOSM"},
    )

    assert response.status_code == 409
    assert response.json()["name"] == "ConflictError"


@patch("officedesk.modules.auth.router.StaffService")
def test_only_admin_registers_users(mock_svc_cls, client, login_as):
    login_as(AuthenticatedPrincipal(username="ma", type=PrincipalType.STAFF, role=StaffRole.MA))

    response = client.post(
        f"{AUTH_URL}/register-municipality",
        json={"username": "x", "name": "X", "surname": "X", "password": "pw", "role": "TOSM"},
    )

    assert response.status_code == 403
    mock_svc_cls.assert_not_called()
