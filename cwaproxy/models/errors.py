"""Error envelope models."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ErrorCategory(StrEnum):
    INVALID_REGION = "INVALID_REGION"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INVALID_REQUEST = "INVALID_REQUEST"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class ErrorEnvelope:
    category: ErrorCategory
    message: str
    status_code: int
    details: Any = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"error": str(self.category), "message": self.message}
        if self.details is not None:
            data["details"] = self.details
        return data
