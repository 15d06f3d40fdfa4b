from typing import Optional
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from loguru import logger
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from app.core.config import Settings, settings

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """Caller resolved from a verified access token."""

    sub: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None


def create_access_token(
    sub: str,
    name: Optional[str] = None,
    avatar_url: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
    config: Optional[Settings] = None,
) -> str:
    config = config or settings
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        'sub': sub,
        'type': 'access',
        'iat': now,
        'exp': now + expires_delta,
    }
    if name is not None:
        payload['name'] = name
    if avatar_url is not None:
        payload['avatarUrl'] = avatar_url
    return jwt.encode(payload, config.SECRET_KEY, algorithm=config.ALGORITHM)


def _unauthenticated(detail: str) -> HTTPException:
    logger.debug('rejected credentials: {}', detail)
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={'WWW-Authenticate': 'Bearer'},
    )


def verify_access_token(token: str, config: Optional[Settings] = None) -> Identity:
    config = config or settings
    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except JWTError as exc:
        raise _unauthenticated('Invalid token') from exc

    if payload.get('type', 'access') != 'access':
        raise _unauthenticated('Invalid token type')

    sub = payload.get('sub')
    if not isinstance(sub, str) or not sub:
        raise _unauthenticated('Token has no subject')
    return Identity(sub=sub, name=payload.get('name'), avatar_url=payload.get('avatarUrl'))


def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Identity:
    if credentials is None:
        raise _unauthenticated('Not authenticated')
    return verify_access_token(credentials.credentials, request.app.state.settings)
