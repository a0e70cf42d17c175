"""
Unit tests for SearchFailure and the error factory functions.

Validates ErrorDetail creation, correlation ID propagation, exception chaining and
the string form surfaced to callers.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

import pytest

from solr_spellcheck_service.error_handling import (
    ErrorCode,
    SearchFailure,
    raise_configuration_error,
    raise_dictionary_load_error,
    raise_parsing_error,
    raise_search_failure,
)


class TestSearchFailureFactories:
    def test_raise_search_failure(self, correlation_id: UUID) -> None:
        additional_context: dict[str, Any] = {"locale": "en_US", "token": "helo"}

        with pytest.raises(SearchFailure) as exc_info:
            raise_search_failure(
                service="test_service",
                operation="test_operation",
                message="Solr unavailable",
                correlation_id=correlation_id,
                **additional_context,
            )

        error = exc_info.value
        assert error.error_code == ErrorCode.EXTERNAL_SERVICE_ERROR.value
        assert error.service == "test_service"
        assert error.operation == "test_operation"
        assert error.correlation_id == str(correlation_id)
        assert str(error) == "[EXTERNAL_SERVICE_ERROR] Solr unavailable"
        assert error.error_detail.details == additional_context

    def test_cause_is_chained(self, correlation_id: UUID) -> None:
        original = ConnectionError("refused")

        with pytest.raises(SearchFailure) as exc_info:
            raise_search_failure(
                service="svc",
                operation="op",
                message=str(original),
                correlation_id=correlation_id,
                cause=original,
            )

        assert exc_info.value.__cause__ is original
        assert "cause" not in exc_info.value.error_detail.details

    @pytest.mark.parametrize(
        "factory,kwargs,expected_code,expected_details",
        [
            (
                raise_parsing_error,
                {"parse_target": "weight"},
                ErrorCode.PARSING_ERROR,
                {"parse_target": "weight"},
            ),
            (
                raise_configuration_error,
                {"config_key": "SOLR_URL"},
                ErrorCode.CONFIGURATION_ERROR,
                {"config_key": "SOLR_URL"},
            ),
            (raise_dictionary_load_error, {}, ErrorCode.DICTIONARY_LOAD_ERROR, {}),
        ],
    )
    def test_specific_factories(
        self,
        correlation_id: UUID,
        factory: Any,
        kwargs: dict[str, Any],
        expected_code: ErrorCode,
        expected_details: dict[str, Any],
    ) -> None:
        with pytest.raises(SearchFailure) as exc_info:
            factory(
                service="svc",
                operation="op",
                message="failed",
                correlation_id=correlation_id,
                **kwargs,
            )

        assert exc_info.value.error_detail.error_code == expected_code
        assert exc_info.value.error_detail.details == expected_details


def test_to_dict_is_json_serializable(correlation_id: UUID) -> None:
    with pytest.raises(SearchFailure) as exc_info:
        raise_search_failure(
            service="svc", operation="op", message="boom", correlation_id=correlation_id
        )

    data = exc_info.value.to_dict()

    assert data["error_code"] == "EXTERNAL_SERVICE_ERROR"
    assert data["correlation_id"] == str(correlation_id)
    assert isinstance(data["timestamp"], str)
