"""SearchFailure: the single exception surfaced to callers of the service."""

from __future__ import annotations

from typing import Any

from solr_spellcheck_service.error_handling.error_detail import ErrorDetail


class SearchFailure(Exception):
    """Failure talking to Solr, interpreting its response, or loading dictionaries.

    Wraps an ErrorDetail so callers can inspect the error code, the operation that
    failed and the correlation ID of the request.
    """

    def __init__(self, error_detail: ErrorDetail) -> None:
        super().__init__(error_detail.message)
        self.error_detail = error_detail

    @property
    def error_code(self) -> str:
        return self.error_detail.error_code.value

    @property
    def service(self) -> str:
        return self.error_detail.service

    @property
    def operation(self) -> str:
        return self.error_detail.operation

    @property
    def correlation_id(self) -> str:
        return str(self.error_detail.correlation_id)

    def to_dict(self) -> dict[str, Any]:
        """Serializable view, suitable for structured logs and CLI output."""
        return self.error_detail.model_dump(mode="json")

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.error_detail.message}"

    def __repr__(self) -> str:
        return (
            f"SearchFailure(error_code={self.error_code!r}, "
            f"operation={self.operation!r}, correlation_id={self.correlation_id!r})"
        )
