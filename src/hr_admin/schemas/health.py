from typing import Literal

from pydantic import BaseModel

DatabaseState = Literal["connected", "disconnected"]


class HealthResponse(BaseModel):
    """Readiness report; ``status`` is healthy only while the database answers."""

    status: Literal["healthy", "unhealthy"]
    database: DatabaseState
    version: str


class StatusResponse(BaseModel):
    status: Literal["ok"] = "ok"
