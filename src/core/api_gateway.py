"""API Gateway proxy event helpers shared by the Lambda handlers."""

import base64
import json
from typing import Any

from core.errors import ErrorCode, TripServiceError, ValidationError


def get_header(event: dict[str, Any], name: str) -> str | None:
    """Header lookup, case-insensitive as HTTP headers are."""
    headers = event.get("headers") or {}
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def get_query_params(event: dict[str, Any]) -> dict[str, str]:
    return dict(event.get("queryStringParameters") or {})


def get_json_body(event: dict[str, Any]) -> Any:
    body = event.get("body")
    if body is None:
        raise ValidationError("Request body is required", code=ErrorCode.INVALID_REQUEST)
    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body, validate=True).decode("utf-8")
        return json.loads(body)
    except ValueError as e:
        raise ValidationError("Request body must be valid JSON", code=ErrorCode.INVALID_REQUEST) from e


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def error_response(error: TripServiceError) -> dict[str, Any]:
    body: dict[str, Any] = {
        "statusCode": error.status_code,
        "error": error.code.value,
        "message": error.message,
    }
    if isinstance(error, ValidationError) and error.errors:
        body["errors"] = [field_error.model_dump() for field_error in error.errors]
    return json_response(error.status_code, body)
