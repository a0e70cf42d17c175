"""Structured error handling for the Solr Spellcheck Service."""

from .error_detail import ErrorCode, ErrorDetail
from .factories import (
    raise_configuration_error,
    raise_dictionary_load_error,
    raise_parsing_error,
    raise_search_failure,
)
from .search_failure import SearchFailure

__all__ = [
    "ErrorCode",
    "ErrorDetail",
    "SearchFailure",
    "raise_configuration_error",
    "raise_dictionary_load_error",
    "raise_parsing_error",
    "raise_search_failure",
]
