"""API key gate for the search endpoint."""

from core.auth.api_key import verify_api_key

__all__ = ["verify_api_key"]
