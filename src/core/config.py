from os import environ

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    saved_trips_table: str
    search_api_url: str
    search_api_key: str
    search_timeout_seconds: float
    client_api_key: str = ""
    environment: str


class SearchConfig(BaseModel):
    """Read-only settings handed to SearchGateway at construction."""

    model_config = ConfigDict(frozen=True)

    api_url: str
    api_key: str
    timeout_seconds: float = 10.0


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        saved_trips_table=environ.get("SAVED_TRIPS_TABLE", "SavedTrips"),
        search_api_url=environ.get("API_URL", ""),
        search_api_key=environ.get("API_KEY", ""),
        search_timeout_seconds=float(environ.get("SEARCH_TIMEOUT_SECONDS", "10")),
        client_api_key=environ.get("CLIENT_API_KEY", ""),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config


def get_search_config() -> SearchConfig:
    config = get_config()
    return SearchConfig(
        api_url=config.search_api_url,
        api_key=config.search_api_key,
        timeout_seconds=config.search_timeout_seconds,
    )
