from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Protocol

from solr_spellcheck_service.models import NGramHolder, SearchContext
from solr_spellcheck_service.solr_query import SolrQuery


class SolrClientProtocol(Protocol):
    """The subset of pysolr.Solr used by this service."""

    def search(self, q: str, search_handler: str | None = None, **kwargs: Any) -> Any:
        """Run a query and return results exposing `docs`."""
        ...

    def add(self, docs: Iterable[dict[str, Any]], commit: bool | None = None, **kwargs: Any) -> Any:
        ...

    def delete(
        self,
        id: Any = None,  # noqa: A002
        q: str | None = None,
        commit: bool | None = None,
        **kwargs: Any,
    ) -> Any:
        ...

    def commit(self, **kwargs: Any) -> Any:
        ...


class StringDistanceProtocol(Protocol):
    def get_distance(self, first: str, second: str) -> float:
        """Score two strings; 1.0 means identical, 0.0 means nothing in common."""
        ...


class NGramBuilderProtocol(Protocol):
    def build_ngram_holder(self, text: str) -> NGramHolder:
        """Decompose text into start, end and full n-gram fields."""
        ...


class NGramQueryBuilderProtocol(Protocol):
    def get_ngram_query(self, text: str) -> SolrQuery:
        """Build a query matching words that share n-grams with text."""
        ...


class TokenizerProtocol(Protocol):
    def tokenize(self, field_name: str, text: str, locale: str) -> list[str]:
        """Split free text into tokens."""
        ...


class CollatorProtocol(Protocol):
    def collate(self, suggestions: Mapping[str, Sequence[str]], tokens: Sequence[str]) -> str:
        """Join per-token suggestions back into one display string."""
        ...


class QuerySuggesterProtocol(Protocol):
    def suggest_token_similars(self, locale: str, max_suggestions: int, token: str) -> list[str]:
        """Rank correction candidates for a single token, best first.

        Raises:
            SearchFailure: On Solr failures or malformed candidate documents
        """
        ...

    def spell_check_keywords(self, search_context: SearchContext) -> str:
        """Best suggestion for every keyword, collated into one string."""
        ...

    def spell_check_keywords_map(
        self, search_context: SearchContext, max_suggestions: int
    ) -> dict[str, list[str]]:
        """Ranked suggestions keyed by keyword token."""
        ...

    def suggest_keyword_queries(self, search_context: SearchContext, max_results: int) -> list[str]:
        """Indexed keyword queries starting with the context keywords."""
        ...


class SpellCheckIndexWriterProtocol(Protocol):
    def clear_dictionary_indexes(self, search_context: SearchContext | None = None) -> None:
        """Delete every spellchecking document from the index."""
        ...

    def index_dictionaries(self, search_context: SearchContext | None = None) -> None:
        """Wipe the spellcheck documents and reload every supported locale."""
        ...

    def index_dictionary(self, locale: str, search_context: SearchContext | None = None) -> None:
        """Load the dictionary files of one locale."""
        ...
