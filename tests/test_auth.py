import pytest
from fastapi import HTTPException
from jose import jwt

from app.services.auth_service import create_access_token, verify_access_token


def test_access_token_round_trips_identity(test_settings):
    token = create_access_token("alice", name="Alice", avatar_url="http://x/alice.png", config=test_settings)
    identity = verify_access_token(token, test_settings)
    assert identity.sub == "alice"
    assert identity.name == "Alice"
    assert identity.avatar_url == "http://x/alice.png"


def test_token_without_subject_is_rejected(test_settings):
    token = jwt.encode({"name": "nobody"}, test_settings.SECRET_KEY, algorithm=test_settings.ALGORITHM)
    with pytest.raises(HTTPException) as excinfo:
        verify_access_token(token, test_settings)
    assert excinfo.value.status_code == 401


def test_refresh_tokens_are_not_access_tokens(test_settings):
    token = jwt.encode(
        {"sub": "alice", "type": "refresh"},
        test_settings.SECRET_KEY,
        algorithm=test_settings.ALGORITHM,
    )
    with pytest.raises(HTTPException) as excinfo:
        verify_access_token(token, test_settings)
    assert excinfo.value.detail == "Invalid token type"


def test_tokens_without_type_claim_are_accepted(test_settings):
    token = jwt.encode({"sub": "alice"}, test_settings.SECRET_KEY, algorithm=test_settings.ALGORITHM)
    assert verify_access_token(token, test_settings).sub == "alice"


def test_me_returns_verified_identity(client, make_token):
    token = make_token("alice", name="Alice", avatar_url="http://x/alice.png")
    response = client.get("/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json() == {"sub": "alice", "name": "Alice", "avatarUrl": "http://x/alice.png"}


def test_me_requires_credentials(client):
    response = client.get("/me")
    assert response.status_code == 401
    assert response.content == b""


def test_health_is_public(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
