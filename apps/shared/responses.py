"""
Uniform response envelope

Success: {"success": true, "data": ..., "message": "..."}
Failure: {"success": false, "data": null, "error": "...", "details": [...]}
"""
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_body(data: Any, message: Optional[str] = None) -> dict:
    body = {"success": True, "data": data}
    if message:
        body["message"] = message
    return body


def error_body(error: str, details: Optional[list[dict]] = None) -> dict:
    body = {"success": False, "data": None, "error": error}
    if details:
        body["details"] = details
    return body


def success_response(data: Any, message: Optional[str] = None, status_code: int = 200) -> JSONResponse:
    """Wrap a payload (models, lists, dicts) in a success envelope."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(success_body(data, message)),
    )


def error_response(status_code: int, error: str, details: Optional[list[dict]] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(error, details))
