"""Shared fixtures for Solr Spellcheck Service tests."""

from __future__ import annotations

from uuid import UUID, uuid4

import pytest

from solr_spellcheck_service.implementations.tokenizer_impl import (
    DefaultCollator,
    DefaultTokenizer,
)
from solr_spellcheck_service.models import SearchContext


@pytest.fixture
def correlation_id() -> UUID:
    """Provide consistent correlation ID for testing."""
    return uuid4()


@pytest.fixture
def search_context(correlation_id: UUID) -> SearchContext:
    return SearchContext(keywords="helo wrld", locale="en_US", correlation_id=correlation_id)


@pytest.fixture
def tokenizer() -> DefaultTokenizer:
    return DefaultTokenizer()


@pytest.fixture
def collator() -> DefaultCollator:
    return DefaultCollator()
