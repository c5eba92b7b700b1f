# backend/student_records/utils/responses.py
from typing import Any


def envelope(data: Any = None, message: str | None = None, count: int | None = None,
             success: bool = True) -> dict:
    """Uniform response wrapper: {success, data?, message?, count?}"""
    body: dict[str, Any] = {"success": success}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if count is not None:
        body["count"] = count
    return body


def error_envelope(message: str, **extra: Any) -> dict:
    body = envelope(message=message, success=False)
    body.update(extra)
    return body
