"""
Auth module: JWT issuance/verification and the composable route guards.

Guards are small objects with one ``authorize`` coroutine returning ``Allow``
or ``Deny``. ``guarded(...)`` chains them into a FastAPI dependency, so a route
declares its protection in its signature:

    current = Depends(guarded(authenticated, admin_only))

Missing credentials answer 401; a credential that does not verify, or a
subject without the required role, answers 403.
"""

import time
from dataclasses import dataclass
from typing import Optional, Protocol, Union

from fastapi import Depends, Request
from jose import jwt, JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from doctor_portal.config import Settings
from doctor_portal.database import get_db
from doctor_portal.exceptions import (
    ForbiddenError,
    InvalidTokenError,
    PortalError,
    UnauthenticatedError,
)
from doctor_portal.logging_config import get_logger

ALGORITHM = "HS256"

logger = get_logger(__name__)


def create_token(email: str, settings: Settings, expires_in: Optional[int] = None) -> str:
    """Create a signed JWT carrying the email claim."""
    now = int(time.time())
    if expires_in is None:
        expires_in = settings.token_expire_seconds
    payload = {
        "email": email,
        "iat": now,
        "exp": now + expires_in,
    }
    token = jwt.encode(payload, settings.secret_token, algorithm=ALGORITHM)
    logger.info("token_issued", email=email, expires_in=expires_in)
    return token


def verify_token(token: Optional[str], settings: Settings) -> str:
    """Return the email embedded in ``token``.

    Raises UnauthenticatedError when no token is given and InvalidTokenError
    when the signature, expiry or claims do not check out.
    """
    if not token:
        raise UnauthenticatedError()
    try:
        payload = jwt.decode(
            token,
            settings.secret_token,
            algorithms=[ALGORITHM],
            options={"require_exp": True},
        )
    except JWTError as e:
        raise InvalidTokenError() from e
    email = payload.get("email")
    if not isinstance(email, str) or not email:
        raise InvalidTokenError()
    return email


def bearer_token(authorization: str) -> Optional[str]:
    """Token part of an ``Authorization: Bearer <token>`` header, if well formed."""
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        return None
    return parts[1]


@dataclass
class Principal:
    """Identity attached to a request once its token verified."""
    email: str


@dataclass
class Allow:
    principal: Optional[Principal] = None


@dataclass
class Deny:
    status_code: int
    message: str

    @classmethod
    def from_error(cls, error: PortalError) -> "Deny":
        return cls(status_code=error.status_code, message=error.message)


Decision = Union[Allow, Deny]


class Guard(Protocol):
    async def authorize(
        self, request: Request, principal: Optional[Principal], db: AsyncSession
    ) -> Decision:
        ...


class BearerTokenGuard:
    """Requires a verifiable bearer token; yields its principal."""

    async def authorize(self, request, principal, db):
        authorization = request.headers.get("Authorization")
        if not authorization:
            return Deny.from_error(UnauthenticatedError())
        token = bearer_token(authorization)
        if token is None:
            # A present but malformed header counts as an invalid token
            return Deny.from_error(InvalidTokenError())
        try:
            email = verify_token(token, request.app.state.settings)
        except PortalError as e:
            return Deny.from_error(e)
        return Allow(Principal(email=email))


class AdminRoleGuard:
    """Requires the authenticated subject's user record to hold the admin role."""

    async def authorize(self, request, principal, db):
        if principal is None:
            return Deny.from_error(UnauthenticatedError())
        # Deferred: user_service imports create_token from this module
        from doctor_portal.services.user_service import user_service

        user = await user_service.find_user(db, principal.email)
        if user is None or not user.is_admin:
            return Deny.from_error(ForbiddenError())
        return Allow(principal)


authenticated = BearerTokenGuard()
admin_only = AdminRoleGuard()


def guarded(*guards: Guard):
    """Build a dependency that runs ``guards`` in order and returns the principal."""

    async def dependency(request: Request, db: AsyncSession = Depends(get_db)) -> Optional[Principal]:
        principal = None
        for guard in guards:
            decision = await guard.authorize(request, principal, db)
            if isinstance(decision, Deny):
                logger.info(
                    "auth_denied",
                    guard=type(guard).__name__,
                    status_code=decision.status_code,
                    subject=principal.email if principal else None,
                )
                raise PortalError(decision.message, status_code=decision.status_code)
            if decision.principal is not None:
                principal = decision.principal
        return principal

    return dependency
