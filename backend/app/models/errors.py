from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ErrorEnvelope(BaseModel):
    """Body of every error response."""

    status: int
    summary: str
    detail: str
    timestamp: datetime
