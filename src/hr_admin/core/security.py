"""
Password hashing and bearer token helpers.

Tokens are HS256 JWTs whose ``sub`` claim is the admin id and whose ``role``
claim mirrors the admin role at issue time.
"""
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import bcrypt
import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from hr_admin.core.config import Settings
from hr_admin.core.exceptions import AuthError


@dataclass(frozen=True)
class TokenClaims:
    actor_id: uuid.UUID
    role: str


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def create_access_token(
    settings: Settings,
    actor_id: uuid.UUID,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    payload = {
        "sub": str(actor_id),
        "role": role,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(settings: Settings, token: str) -> TokenClaims:
    """Decode a bearer token or raise ``AuthError``."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as e:
        raise AuthError("Token has expired") from e
    except InvalidTokenError as e:
        raise AuthError("Invalid or malformed token") from e

    try:
        actor_id = uuid.UUID(payload["sub"])
    except (KeyError, ValueError) as e:
        raise AuthError("Invalid or malformed token") from e
    return TokenClaims(actor_id=actor_id, role=str(payload.get("role", "")))
