"""Health check response schemas."""

from typing import Literal

from pydantic import BaseModel


class HealthOk(BaseModel):
    status: Literal["ok"] = "ok"
    database: Literal["connected"] = "connected"
    timestamp: str


class HealthError(BaseModel):
    status: Literal["error"] = "error"
    database: Literal["disconnected"] = "disconnected"
    error: str
