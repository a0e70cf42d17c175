"""
Factory functions that build an ErrorDetail and raise SearchFailure.

Each factory takes the service, operation, message and correlation ID plus any
additional keyword context, which ends up in ErrorDetail.details. Pass `cause`
to chain the original exception.
"""

from __future__ import annotations

from typing import Any, NoReturn
from uuid import UUID

from solr_spellcheck_service.error_handling.error_detail import ErrorCode, ErrorDetail
from solr_spellcheck_service.error_handling.search_failure import SearchFailure


def _raise(
    error_code: ErrorCode,
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    cause: BaseException | None,
    details: dict[str, Any],
) -> NoReturn:
    error_detail = ErrorDetail(
        error_code=error_code,
        message=message,
        correlation_id=correlation_id,
        service=service,
        operation=operation,
        details=details,
    )
    raise SearchFailure(error_detail) from cause


def raise_search_failure(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    cause: BaseException | None = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise for a failed Solr request or unusable Solr response."""
    _raise(
        ErrorCode.EXTERNAL_SERVICE_ERROR,
        service,
        operation,
        message,
        correlation_id,
        cause,
        additional_context,
    )


def raise_parsing_error(
    service: str,
    operation: str,
    parse_target: str,
    message: str,
    correlation_id: UUID,
    cause: BaseException | None = None,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.PARSING_ERROR,
        service,
        operation,
        message,
        correlation_id,
        cause,
        {"parse_target": parse_target, **additional_context},
    )


def raise_dictionary_load_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    cause: BaseException | None = None,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.DICTIONARY_LOAD_ERROR,
        service,
        operation,
        message,
        correlation_id,
        cause,
        additional_context,
    )


def raise_configuration_error(
    service: str,
    operation: str,
    config_key: str,
    message: str,
    correlation_id: UUID,
    cause: BaseException | None = None,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.CONFIGURATION_ERROR,
        service,
        operation,
        message,
        correlation_id,
        cause,
        {"config_key": config_key, **additional_context},
    )
