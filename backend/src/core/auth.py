"""Bearer token gate for the bookmark endpoints."""
import logging
import secrets

from fastapi import Request

from core.config import Settings, get_settings
from core.errors import UnauthorizedError

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an `Authorization: Bearer <token>` header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def is_valid_token(provided: str | None, expected: str) -> bool:
    """Constant-time comparison; an unset expected token never matches."""
    if not provided or not expected:
        return False
    return secrets.compare_digest(provided.encode(), expected.encode())


async def verify_api_token(request: Request) -> None:
    """
    Dependency that rejects requests without the configured bearer token.

    Runs before the route's own parameters are used, so rejected requests
    never reach the persistence layer.
    """
    settings: Settings = getattr(request.app.state, "settings", None) or get_settings()
    token = extract_bearer_token(request.headers.get("Authorization"))
    if not is_valid_token(token, settings.api_token):
        logger.error(
            "unauthorized_request",
            extra={"path": request.url.path, "method": request.method},
        )
        raise UnauthorizedError
