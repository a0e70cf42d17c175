"""Dependency injection configuration for the Solr Spellcheck Service using Dishka."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, NewType
from uuid import uuid4

import pysolr
from dishka import Provider, Scope, provide

from solr_spellcheck_service.config import Settings, settings
from solr_spellcheck_service.error_handling import raise_configuration_error
from solr_spellcheck_service.implementations.index_writer_impl import SolrSpellCheckIndexWriter
from solr_spellcheck_service.implementations.ngram_builder_impl import DefaultNGramBuilder
from solr_spellcheck_service.implementations.ngram_query_builder_impl import (
    DefaultNGramQueryBuilder,
)
from solr_spellcheck_service.implementations.query_suggester_impl import SolrQuerySuggester
from solr_spellcheck_service.implementations.string_distance_impl import create_string_distance
from solr_spellcheck_service.implementations.tokenizer_impl import (
    DefaultCollator,
    DefaultTokenizer,
)
from solr_spellcheck_service.logging_utils import create_service_logger
from solr_spellcheck_service.metrics import get_metrics
from solr_spellcheck_service.protocols import (
    CollatorProtocol,
    NGramBuilderProtocol,
    NGramQueryBuilderProtocol,
    QuerySuggesterProtocol,
    SolrClientProtocol,
    SpellCheckIndexWriterProtocol,
    StringDistanceProtocol,
    TokenizerProtocol,
)

logger = create_service_logger("solr_spellcheck_service.di")

MetricsRegistry = NewType("MetricsRegistry", dict[str, Any])


class SolrSpellcheckServiceProvider(Provider):
    """Provider for Solr Spellcheck Service dependencies."""

    def __init__(self, service_settings: Settings | None = None) -> None:
        """Initialize provider, optionally overriding the module-level settings."""
        super().__init__()
        self._settings = service_settings or settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide service settings."""
        return self._settings

    @provide(scope=Scope.APP)
    def provide_metrics(self) -> MetricsRegistry:
        """Provide shared Prometheus metrics."""
        return MetricsRegistry(get_metrics())

    @provide(scope=Scope.APP)
    def provide_solr_client(self, settings: Settings) -> Iterable[SolrClientProtocol]:
        """Provide the pysolr client; its HTTP session is closed with the container."""
        client = pysolr.Solr(
            settings.SOLR_URL,
            timeout=settings.SOLR_TIMEOUT,
            always_commit=False,
        )
        logger.info(f"Solr client created for {settings.SOLR_URL}")
        yield client
        if client.session is not None:
            client.session.close()

    @provide(scope=Scope.APP)
    def provide_string_distance(self, settings: Settings) -> StringDistanceProtocol:
        """Provide the configured string distance metric."""
        try:
            return create_string_distance(settings.STRING_DISTANCE)
        except ValueError as e:
            raise_configuration_error(
                service=settings.SERVICE_NAME,
                operation="provide_string_distance",
                config_key="STRING_DISTANCE",
                message=str(e),
                correlation_id=uuid4(),
                cause=e,
            )

    @provide(scope=Scope.APP)
    def provide_ngram_builder(self) -> NGramBuilderProtocol:
        return DefaultNGramBuilder()

    @provide(scope=Scope.APP)
    def provide_ngram_query_builder(
        self, settings: Settings, ngram_builder: NGramBuilderProtocol
    ) -> NGramQueryBuilderProtocol:
        return DefaultNGramQueryBuilder(
            ngram_builder=ngram_builder,
            rows=settings.NGRAM_QUERY_ROWS,
            start_boost=settings.NGRAM_START_BOOST,
            end_boost=settings.NGRAM_END_BOOST,
        )

    @provide(scope=Scope.APP)
    def provide_tokenizer(self) -> TokenizerProtocol:
        return DefaultTokenizer()

    @provide(scope=Scope.APP)
    def provide_collator(self) -> CollatorProtocol:
        return DefaultCollator()

    @provide(scope=Scope.APP)
    def provide_query_suggester(
        self,
        settings: Settings,
        solr_client: SolrClientProtocol,
        ngram_query_builder: NGramQueryBuilderProtocol,
        string_distance: StringDistanceProtocol,
        tokenizer: TokenizerProtocol,
        collator: CollatorProtocol,
        metrics: MetricsRegistry,
    ) -> QuerySuggesterProtocol:
        """Provide the spelling suggester."""
        return SolrQuerySuggester(
            solr_client=solr_client,
            ngram_query_builder=ngram_query_builder,
            string_distance=string_distance,
            threshold=settings.DISTANCE_THRESHOLD,
            tokenizer=tokenizer,
            collator=collator,
            metrics=metrics,
        )

    @provide(scope=Scope.APP)
    def provide_index_writer(
        self,
        settings: Settings,
        solr_client: SolrClientProtocol,
        ngram_builder: NGramBuilderProtocol,
        metrics: MetricsRegistry,
    ) -> SpellCheckIndexWriterProtocol:
        """Provide the dictionary loader."""
        return SolrSpellCheckIndexWriter(
            solr_client=solr_client,
            ngram_builder=ngram_builder,
            dictionaries_directory=settings.effective_dictionaries_directory,
            supported_locales=settings.SUPPORTED_LOCALES,
            batch_size=settings.SPELLCHECK_BATCH_SIZE,
            commit=settings.SPELLCHECK_COMMIT,
            metrics=metrics,
        )
