"""
API Dependencies

FastAPI dependency injection for authentication and role gates.

Security: JWT tokens are verified cryptographically, using the identity
provider's JWKS endpoint when AUTH_JWKS_URL is configured and HS256 with
JWT_SECRET otherwise. Never decode without verification.
"""

import logging
from functools import lru_cache
from typing import Annotated, Callable, Optional

import jwt
from jwt import PyJWKClient
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.config.settings import get_settings
from app.domain.authorization import AccessLevel, ensure_allowed
from app.infrastructure.db.dependencies import SessionDep
from app.infrastructure.db.models.user import User
from app.infrastructure.db.repositories.user_repository import UserRepository


logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

JWKS_ALGORITHMS = ["RS256", "ES256"]


@lru_cache
def _get_jwks_client(jwks_url: str) -> PyJWKClient:
    """PyJWKClient per JWKS URL. Keys are cached and refreshed internally."""
    return PyJWKClient(jwks_url, cache_keys=True)


def decode_token(token: str) -> dict:
    """
    Verify a JWT and return its claims.

    Raises:
        jwt.InvalidTokenError: Bad signature, expired, wrong audience/issuer
        jwt.exceptions.PyJWKClientError: JWKS key lookup failed
    """
    settings = get_settings()

    if settings.auth_jwks_url:
        key = _get_jwks_client(settings.auth_jwks_url).get_signing_key_from_jwt(token).key
        algorithms = JWKS_ALGORITHMS
    else:
        key = settings.jwt_secret
        algorithms = [settings.jwt_algorithm]

    return jwt.decode(
        token,
        key,
        algorithms=algorithms,
        audience=settings.jwt_audience,
        issuer=settings.jwt_issuer,
        options={
            "require": ["exp", "sub"],
            "verify_aud": settings.jwt_audience is not None,
        },
    )


async def get_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Bearer token from the Authorization header, else the session cookie."""
    if credentials:
        return credentials.credentials
    return request.cookies.get(get_settings().session_cookie_name)


async def get_current_user(
    session: SessionDep,
    token: Optional[str] = Depends(get_token),
) -> User:
    """
    Resolve the authenticated user, upserting the record on every request.

    The ``sub`` claim is the user's open_id. ``name``, ``email`` and
    ``login_method`` claims overwrite stored values when present;
    ``last_signed_in`` is refreshed and the configured owner identity
    is promoted to superadmin.

    Raises:
        HTTPException 401: token missing, expired, or invalid.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_token(token)
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except (jwt.exceptions.PyJWKClientError, jwt.InvalidTokenError) as e:
        logger.warning("JWT verification failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or unverifiable token",
        )

    open_id = payload.get("sub")
    if not open_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token: missing user ID",
        )

    users = UserRepository(session)
    is_new = await users.get_by_open_id(open_id) is None
    user = await users.upsert(
        open_id,
        name=payload.get("name"),
        email=payload.get("email"),
        login_method=payload.get("login_method"),
        owner_open_id=get_settings().owner_open_id,
    )
    if is_new:
        logger.info(f"[AUTH] Registered user {user.id} (role={user.role})")

    return user


async def get_optional_user(
    session: SessionDep,
    token: Optional[str] = Depends(get_token),
) -> Optional[User]:
    """
    Optionally resolve the user.

    Returns ``None`` if no valid token is provided (for public endpoints).
    """
    if not token:
        return None

    try:
        return await get_current_user(session, token)
    except HTTPException:
        return None


def require_access(level: AccessLevel) -> Callable:
    """
    Dependency factory gating a route on an access level.

    Public routes receive the optional user; every other level needs a
    valid token (401 otherwise) and a role the policy allows (403).
    """
    if level == AccessLevel.PUBLIC:
        async def public_access(
            user: Optional[User] = Depends(get_optional_user),
        ) -> Optional[User]:
            return user

        return public_access

    async def guarded_access(user: User = Depends(get_current_user)) -> User:
        ensure_allowed(user.role, level)
        return user

    return guarded_access


# Type aliases for gated routes
OptionalUser = Annotated[Optional[User], Depends(require_access(AccessLevel.PUBLIC))]
CurrentUser = Annotated[User, Depends(require_access(AccessLevel.AUTHENTICATED))]
AdminUser = Annotated[User, Depends(require_access(AccessLevel.ADMIN))]
SuperadminUser = Annotated[User, Depends(require_access(AccessLevel.SUPERADMIN))]

