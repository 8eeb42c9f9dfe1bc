"""Standard JSON envelopes shared by all API endpoints."""

from typing import Any

from fastapi.responses import JSONResponse


def success_response(data: Any, message: str | None = None, status_code: int = 200) -> JSONResponse:
    body: dict[str, Any] = {"status": "success", "data": data}
    if message:
        body["message"] = message
    return JSONResponse(body, status_code=status_code)


def error_response(
    error: str,
    message: str = "An error occurred",
    status_code: int = 500,
    details: Any = None,
) -> JSONResponse:
    body: dict[str, Any] = {
        "status": "error",
        "error": error,
        "message": message,
        "statusCode": status_code,
    }
    if details is not None:
        body["details"] = details
    return JSONResponse(body, status_code=status_code)


def validation_error(message: str, details: Any = None) -> JSONResponse:
    return error_response("VALIDATION_ERROR", message, 400, details)


def configuration_error(message: str) -> JSONResponse:
    return error_response("CONFIGURATION_ERROR", message, 503)


def external_api_error(service: str, details: Any = None) -> JSONResponse:
    return error_response("EXTERNAL_API_ERROR", f"Failed to connect to {service}", 502, details)
