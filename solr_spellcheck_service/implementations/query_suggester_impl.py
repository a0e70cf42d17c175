"""Solr implementation of QuerySuggesterProtocol."""

from __future__ import annotations

import math
from typing import Any
from uuid import UUID, uuid4

from solr_spellcheck_service.error_handling import (
    SearchFailure,
    raise_parsing_error,
    raise_search_failure,
)
from solr_spellcheck_service.filter_queries import (
    KEYWORD_SEARCH,
    LANGUAGE_ID,
    SPELLCHECKING_TYPE,
    TYPE,
    build_filter_queries,
    get_filter_query,
)
from solr_spellcheck_service.logging_utils import create_service_logger
from solr_spellcheck_service.models import SearchContext
from solr_spellcheck_service.protocols import (
    CollatorProtocol,
    NGramQueryBuilderProtocol,
    QuerySuggesterProtocol,
    SolrClientProtocol,
    StringDistanceProtocol,
    TokenizerProtocol,
)
from solr_spellcheck_service.solr_query import SolrQuery, quote_term

logger = create_service_logger("solr_spellcheck_service.query_suggester_impl")

SERVICE_NAME = "solr_spellcheck_service"
SPELLCHECKING_FIELD = "spellchecking"


def _first_value(document: dict[str, Any], field: str) -> Any:
    """Single value of a possibly multi-valued Solr field."""
    value = document[field]
    if isinstance(value, (list, tuple)):
        return value[0]
    return value


class SolrQuerySuggester(QuerySuggesterProtocol):
    """Spelling suggestions and keyword query completion against Solr.

    Candidates come from an n-gram query over the spellchecking documents of a
    locale and are re-ranked here by string distance plus their stored weight.
    """

    def __init__(
        self,
        solr_client: SolrClientProtocol,
        ngram_query_builder: NGramQueryBuilderProtocol,
        string_distance: StringDistanceProtocol,
        threshold: float,
        tokenizer: TokenizerProtocol,
        collator: CollatorProtocol,
        metrics: dict[str, Any] | None = None,
    ) -> None:
        self.solr_client = solr_client
        self.ngram_query_builder = ngram_query_builder
        self.string_distance = string_distance
        self.threshold = threshold
        self.tokenizer = tokenizer
        self.collator = collator
        self.metrics = metrics

    def spell_check_keywords(self, search_context: SearchContext) -> str:
        suggestions = self.spell_check_keywords_map(search_context, 1)

        tokens = self.tokenizer.tokenize(
            SPELLCHECKING_FIELD, search_context.keywords, search_context.locale
        )

        return self.collator.collate(suggestions, tokens)

    def spell_check_keywords_map(
        self, search_context: SearchContext, max_suggestions: int
    ) -> dict[str, list[str]]:
        originals = self.tokenizer.tokenize(
            KEYWORD_SEARCH, search_context.keywords, search_context.locale
        )

        return {
            original: self.suggest_token_similars(
                search_context.locale,
                max_suggestions,
                original,
                correlation_id=search_context.correlation_id,
            )
            for original in originals
        }

    def suggest_token_similars(
        self,
        locale: str,
        max_suggestions: int,
        token: str,
        correlation_id: UUID | None = None,
    ) -> list[str]:
        """Rank correction candidates for token, lowest score first.

        An exact (case-insensitive) hit returns the token alone. When no
        candidate passes the distance threshold, the token is its own suggestion.

        Raises:
            SearchFailure: If Solr fails or a candidate weight is not a number
        """
        correlation_id = correlation_id or uuid4()

        solr_query = self.ngram_query_builder.get_ngram_query(token)

        try:
            words = self._search_token_similars(locale, token, solr_query, correlation_id)
        except SearchFailure:
            self._record("suggestion_operations_total", locale=locale, status="failure")
            raise

        self._record("suggestion_operations_total", locale=locale, status="success")

        ranked = sorted(words.items(), key=lambda item: (item[1], item[0]))

        return [word for word, _ in ranked[: max(max_suggestions, 0)]]

    def suggest_keyword_queries(self, search_context: SearchContext, max_results: int) -> list[str]:
        keywords = search_context.keywords

        solr_query = SolrQuery(
            query=f"start{len(keywords)}:{quote_term(keywords)}",
            filter_queries=build_filter_queries(search_context),
            rows=max_results,
        )

        try:
            results = self.solr_client.search(solr_query.query, **solr_query.to_search_kwargs())
            return [str(_first_value(doc, KEYWORD_SEARCH)) for doc in results.docs]
        except Exception as e:
            logger.debug(
                "Unable to execute Solr query",
                exc_info=True,
                extra={"correlation_id": str(search_context.correlation_id)},
            )
            raise_search_failure(
                service=SERVICE_NAME,
                operation="suggest_keyword_queries",
                message=str(e),
                correlation_id=search_context.correlation_id,
                cause=e,
                keywords=keywords,
            )

    def _search_token_similars(
        self,
        locale: str,
        token: str,
        solr_query: SolrQuery,
        correlation_id: UUID,
    ) -> dict[str, float]:
        solr_query.add_filter_query(get_filter_query(TYPE, SPELLCHECKING_TYPE))
        solr_query.add_filter_query(get_filter_query(LANGUAGE_ID, locale))

        try:
            results = self.solr_client.search(solr_query.query, **solr_query.to_search_kwargs())
            documents = list(results.docs)
        except Exception as e:
            logger.debug(
                "Unable to execute Solr query",
                exc_info=True,
                extra={"correlation_id": str(correlation_id), "locale": locale},
            )
            raise_search_failure(
                service=SERVICE_NAME,
                operation="suggest_token_similars",
                message=str(e),
                correlation_id=correlation_id,
                cause=e,
                locale=locale,
                token=token,
            )

        lower_case_token = token.lower()
        token_suggestions: dict[str, float] = {}

        for document in documents:
            suggestion, weight = self._read_candidate(document, correlation_id)

            if suggestion.lower() == lower_case_token:
                return {token: weight}

            distance = self.string_distance.get_distance(suggestion.lower(), lower_case_token)

            if distance > self.threshold:
                token_suggestions[suggestion] = weight + distance

        if not token_suggestions:
            return {token: 0.0}

        return token_suggestions

    def _read_candidate(self, document: dict[str, Any], correlation_id: UUID) -> tuple[str, float]:
        try:
            suggestion = str(_first_value(document, "word"))
            raw_weight = _first_value(document, "weight")
        except (KeyError, IndexError) as e:
            raise_search_failure(
                service=SERVICE_NAME,
                operation="suggest_token_similars",
                message=f"Spellchecking document is missing field {e}",
                correlation_id=correlation_id,
                cause=e,
            )

        try:
            weight = float(raw_weight)
            if not math.isfinite(weight):
                raise ValueError(f"weight is not finite: {raw_weight!r}")
        except (TypeError, ValueError) as e:
            raise_parsing_error(
                service=SERVICE_NAME,
                operation="suggest_token_similars",
                parse_target="weight",
                message=f"Invalid weight {raw_weight!r} for word {suggestion!r}",
                correlation_id=correlation_id,
                cause=e,
            )

        return suggestion, weight

    def _record(self, name: str, **labels: str) -> None:
        if self.metrics is not None:
            self.metrics[name].labels(**labels).inc()
