from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

ErrorCode = Literal["INVALID_REQUEST", "MALFORMED_JSON", "INTERNAL_ERROR"]


class ErrorResponse(BaseModel):
    error: str
    code: ErrorCode
    details: dict[str, object] | None = None
    timestamp: datetime
