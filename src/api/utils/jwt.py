from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(
    user_id: UUID,
    email: Optional[str] = None,
    expires_delta: timedelta = timedelta(hours=1),
    config=ApplicationConfig,
) -> str:
    """
    Generate an access token shaped like the auth platform's

    Tokens are issued by the hosted auth platform in production; this is used
    for local development and tests.

    Args:
        user_id: Auth user UUID (sub claim)
        email: Verified email of the user
        expires_delta: Token lifetime
        config: Settings holding the signing secret, algorithm and audience

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "exp": now + expires_delta,
        "iat": now,
    }
    if email:
        payload["email"] = email
    if config.JWT_AUDIENCE:
        payload["aud"] = config.JWT_AUDIENCE
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def verify_jwt(token: str, config=ApplicationConfig) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string
        config: Settings of the running app

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            config.JWT_SECRET,
            algorithms=[config.JWT_ALGORITHM],
            audience=config.JWT_AUDIENCE,
            options={"verify_aud": config.JWT_AUDIENCE is not None},
        )
        return payload
    except JWTError:
        return None
