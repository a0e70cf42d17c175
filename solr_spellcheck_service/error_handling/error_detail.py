"""Error codes and the structured error detail carried by SearchFailure."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    PARSING_ERROR = "PARSING_ERROR"
    DICTIONARY_LOAD_ERROR = "DICTIONARY_LOAD_ERROR"


class ErrorDetail(BaseModel):
    """Immutable description of a failure raised by the service."""

    error_code: ErrorCode
    message: str
    correlation_id: UUID
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    service: str
    operation: str
    details: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}
