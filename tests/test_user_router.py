"""
Tests for /user endpoints.
"""

from app.config.errors import ErrorMessages


def test_signup_and_mypage(client, auth):
    user_id, headers = auth
    response = client.get("/user/mypage", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"id": user_id, "email": "seller@example.com"}


def test_duplicate_email(client, auth):
    response = client.post(
        "/user/signup",
        json={"email": "seller@example.com", "password": "abc123", "password_confirm": "abc123"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == ErrorMessages.EMAIL_ALREADY_EXISTS


def test_password_mismatch(client):
    response = client.post(
        "/user/signup",
        json={"email": "new@example.com", "password": "abc123", "password_confirm": "abc124"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == ErrorMessages.PASSWORD_MISMATCH


def test_weak_password(client):
    response = client.post(
        "/user/signup",
        json={"email": "new@example.com", "password": "abcdefg", "password_confirm": "abcdefg"},
    )
    assert response.status_code == 422


def test_login_with_wrong_password(client, auth):
    response = client.post("/user/login", json={"email": "seller@example.com", "password": "wrong1"})

    assert response.status_code == 401
    assert response.json()["detail"] == ErrorMessages.INVALID_CREDENTIALS

