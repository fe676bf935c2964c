import hmac

from core.errors import AuthenticationError


def verify_api_key(provided: str | None, expected: str) -> None:
    """Raise AuthenticationError unless ``provided`` matches the configured key."""
    if not provided:
        raise AuthenticationError("API key is required")
    if not expected or not hmac.compare_digest(provided.encode(), expected.encode()):
        raise AuthenticationError("Invalid API key")
