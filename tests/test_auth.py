from datetime import timedelta

from direcional.core.auth.service import AuthService


def test_register_and_login(api):
    response = api.post(
        "/api/v1/auth/register",
        json={"username": "maria", "email": "maria@direcional.com.br", "password": "segredo123"},
    )
    assert response.status_code == 201
    assert response.json()["role"] == "User"

    login = api.post("/api/v1/auth/login-json", json={"username": "maria", "password": "segredo123"})
    assert login.status_code == 200
    body = login.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["username"] == "maria"

    me = api.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    assert me.json()["email"] == "maria@direcional.com.br"


def test_login_with_email_via_form(api, regular_user):
    response = api.post(
        "/api/v1/auth/login",
        data={"username": "corretor@direcional.com.br", "password": "corretor123"},
    )
    assert response.status_code == 200


def test_duplicate_username(api, regular_user):
    response = api.post(
        "/api/v1/auth/register",
        json={"username": "corretor", "email": "outro@direcional.com.br", "password": "segredo123"},
    )
    assert response.status_code == 409


def test_wrong_password(api, regular_user):
    response = api.post("/api/v1/auth/login-json", json={"username": "corretor", "password": "errada"})
    assert response.status_code == 401


def test_inactive_user(api, db_session, regular_user):
    regular_user.is_active = False
    db_session.commit()

    response = api.post("/api/v1/auth/login-json", json={"username": "corretor", "password": "corretor123"})
    assert response.status_code == 403


def test_token_claims(regular_user):
    payload = AuthService.verify_token(AuthService.token_for(regular_user))

    assert payload["user_id"] == regular_user.id
    assert payload["role"] == "User"
    assert payload["iss"] == "DirecionalApi"


def test_expired_token_is_rejected(api, regular_user):
    token = AuthService.create_access_token({"user_id": regular_user.id}, timedelta(minutes=-1))

    response = api.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_health(api):
    assert api.get("/health").json()["status"] == "healthy"


def test_logout_is_informational(api):
    response = api.post("/api/v1/auth/logout")

    assert response.status_code == 200
    assert "Logout" in response.json()["message"]
