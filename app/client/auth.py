"""Identity of the signed-in user as seen by the web client.

The token cookie is decoded without checking its signature: the result is
only good for showing a name and avatar. Every authorization decision stays
on the server, which verifies the same token on each request.
"""
from collections.abc import Mapping
from typing import Optional

from jose import JWTError, jwt
from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_TOKEN_COOKIE = 'token'


class UnauthenticatedError(Exception):
    pass


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    sub: str
    name: Optional[str] = None
    avatar_url: Optional[str] = Field(default=None, alias='avatarUrl')


def get_token(cookies: Mapping[str, str], cookie_name: str = DEFAULT_TOKEN_COOKIE) -> str:
    token = cookies.get(cookie_name)
    if not token:
        raise UnauthenticatedError('Unauthenticated')
    return token


def get_user(cookies: Mapping[str, str], cookie_name: str = DEFAULT_TOKEN_COOKIE) -> User:
    token = get_token(cookies, cookie_name)
    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError as exc:
        raise UnauthenticatedError('Malformed token') from exc
    try:
        return User.model_validate(claims)
    except ValidationError as exc:
        raise UnauthenticatedError('Token is missing user claims') from exc
