# logitrack/adapters/outbound/security/auth_user_manager.py (async version)

import uuid
from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from logitrack.adapters.configuration.config import settings
from logitrack.domain.exceptions import InvalidCredentialsException

SECRET_KEY = settings.SECRET_KEY
ALGORITHM = settings.ALGORITHM
DEFAULT_EXPIRES_MIN = settings.ACCESS_TOKEN_EXPIRE_MINUTES


class UserAuthManager:
    """
    Password hashing and JWT handling for users.
    """

    crypt_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

    @classmethod
    async def hash_password(cls, password: str) -> str:
        """Return the hash of a plain text password."""
        return await run_in_threadpool(cls.crypt_context.hash, password)

    @classmethod
    async def verify_password(cls, plain_password: str, hashed_password: str) -> bool:
        """Verify if the plain text password matches the stored hash."""
        try:
            return await run_in_threadpool(cls.crypt_context.verify, plain_password, hashed_password)
        except ValueError:
            # Stored value is not a recognizable hash
            return False

    @classmethod
    async def create_access_token(cls, subject: str, expires_delta: timedelta = None) -> str:
        """
        Create a JWT access token for the authenticated user.

        - subject: the user's id.
        - expires_delta: custom expiration time.
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=DEFAULT_EXPIRES_MIN)

        expire = datetime.now(timezone.utc) + expires_delta
        payload = {
            "sub": str(subject),
            "exp": int(expire.timestamp()),
            "type": "user",
            "jti": str(uuid.uuid4()),
        }
        return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)

    @classmethod
    async def verify_access_token(cls, token: str) -> dict:
        """
        Verify and decode a JWT access token.
        """
        try:
            payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        except JWTError:
            raise InvalidCredentialsException(detail="Invalid or expired token.")

        if payload.get("type") != "user" or not payload.get("sub"):
            raise InvalidCredentialsException(detail="Invalid token: incorrect type.")
        return payload
