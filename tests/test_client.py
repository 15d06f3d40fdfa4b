import httpx
import pytest
from jose import jwt

from app.client.api import MemoriesClient
from app.client.auth import UnauthenticatedError, get_user


def test_get_user_decodes_cookie_without_verifying(make_token):
    token = make_token("alice", name="Alice", avatar_url="http://x/alice.png")
    user = get_user({"token": token})
    assert user.sub == "alice"
    assert user.name == "Alice"
    assert user.avatar_url == "http://x/alice.png"

    forged = jwt.encode({"sub": "eve", "name": "Eve"}, "some-other-key", algorithm="HS256")
    assert get_user({"token": forged}).sub == "eve"


def test_get_user_requires_token_cookie():
    with pytest.raises(UnauthenticatedError):
        get_user({})
    with pytest.raises(UnauthenticatedError):
        get_user({"token": ""})


def test_get_user_rejects_malformed_token():
    with pytest.raises(UnauthenticatedError):
        get_user({"token": "garbage"})
    no_subject = jwt.encode({"name": "Nobody"}, "key", algorithm="HS256")
    with pytest.raises(UnauthenticatedError):
        get_user({"token": no_subject})


def test_get_user_honours_cookie_name(make_token):
    assert get_user({"session": make_token("alice")}, cookie_name="session").sub == "alice"


def test_memories_client_drives_the_api(client, make_token):
    alice = MemoriesClient(client, {"token": make_token("alice", name="Alice")})
    assert alice.user.name == "Alice"

    created = alice.create_memory("a day at the beach", "http://x/beach.png", is_public=True)
    assert created["userId"] == "alice"
    assert alice.list_memories() == [
        {"id": created["id"], "coverUrl": "http://x/beach.png", "excerpt": "a day at the beach..."}
    ]

    updated = alice.update_memory(created["id"], "a day at the lake", "http://x/lake.png")
    assert updated["isPublic"] is False

    bob = MemoriesClient(client, {"token": make_token("bob")})
    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        bob.get_memory(created["id"])
    assert excinfo.value.response.status_code == 403

    alice.delete_memory(created["id"])
    assert alice.list_memories() == []


def test_memories_client_needs_a_token(client):
    with pytest.raises(UnauthenticatedError):
        MemoriesClient(client, {})
