from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


class PurgeError(Enum):
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    API = "api"


class Credentials(BaseModel):
    zone_id: str = ""
    api_token: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.zone_id) and bool(self.api_token)

    class Config:
        frozen = True


class PurgeResult(BaseModel):
    success: bool
    message: str
    details: dict[str, Any] | None = None
    error: PurgeError | None = None

    @property
    def status_label(self) -> str:
        """Label used in log lines."""
        return "SUCCESS" if self.success else "ERROR"

    @property
    def message_type(self) -> str:
        """Banner type for the admin page."""
        return "success" if self.success else "error"

    class Config:
        frozen = True
