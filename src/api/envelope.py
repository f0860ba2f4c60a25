"""
Response envelope shared by every endpoint.

Success: {"success": true, "data": ..., "message": ...}
Failure: {"success": false, "error": {"code": ..., "message": ...}}
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None


def error_body(code: str, message: str) -> dict:
    return {"success": False, "error": {"code": code, "message": message}}
