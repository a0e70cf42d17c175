"""Admin CLI for dictionary reloads and suggestion lookups against a Solr cluster."""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from typing import NoReturn

import typer
from dishka import Container, make_container

from solr_spellcheck_service.config import settings
from solr_spellcheck_service.di import SolrSpellcheckServiceProvider
from solr_spellcheck_service.error_handling import SearchFailure
from solr_spellcheck_service.logging_utils import bind_request_context, configure_service_logging
from solr_spellcheck_service.models import SearchContext
from solr_spellcheck_service.protocols import (
    QuerySuggesterProtocol,
    SpellCheckIndexWriterProtocol,
)

app = typer.Typer(help="Solr spellcheck admin CLI")


@contextmanager
def _container() -> Iterator[Container]:
    configure_service_logging(
        settings.SERVICE_NAME, environment=settings.ENVIRONMENT, log_level=settings.LOG_LEVEL
    )
    container = make_container(SolrSpellcheckServiceProvider())
    try:
        yield container
    finally:
        container.close()


def _fail(error: SearchFailure) -> NoReturn:
    typer.secho(str(error), fg=typer.colors.RED, err=True)
    typer.echo(json.dumps(error.to_dict(), indent=2), err=True)
    raise typer.Exit(code=1)


@app.command("load-dictionaries")
def load_dictionaries() -> None:
    """Wipe the spellcheck documents and reload every supported locale."""
    context = SearchContext()
    bind_request_context(context.correlation_id, command="load-dictionaries")
    with _container() as container:
        writer = container.get(SpellCheckIndexWriterProtocol)
        try:
            writer.index_dictionaries(context)
        except SearchFailure as e:
            _fail(e)
    typer.secho("Dictionaries loaded.", fg=typer.colors.GREEN)


@app.command("load-dictionary")
def load_dictionary(
    locale: str = typer.Argument(..., help="Locale directory to load, e.g. en_US"),
) -> None:
    """Load the dictionary files of one locale without wiping the index."""
    context = SearchContext(locale=locale)
    bind_request_context(context.correlation_id, command="load-dictionary", locale=locale)
    with _container() as container:
        writer = container.get(SpellCheckIndexWriterProtocol)
        try:
            writer.index_dictionary(locale, context)
        except SearchFailure as e:
            _fail(e)
    typer.secho(f"Dictionary for {locale} loaded.", fg=typer.colors.GREEN)


@app.command()
def suggest(
    keywords: str = typer.Argument(..., help="Text to spell check"),
    locale: str = typer.Option("en_US", help="Locale of the dictionary to use"),
    max_suggestions: int = typer.Option(5, "--max", min=1, help="Suggestions per token"),
) -> None:
    """Print ranked suggestions for every token of the keywords."""
    context = SearchContext(keywords=keywords, locale=locale)
    bind_request_context(context.correlation_id, command="suggest", locale=locale)
    with _container() as container:
        suggester = container.get(QuerySuggesterProtocol)
        try:
            suggestions = suggester.spell_check_keywords_map(context, max_suggestions)
        except SearchFailure as e:
            _fail(e)
    typer.echo(json.dumps(suggestions, indent=2, ensure_ascii=False))


@app.command("did-you-mean")
def did_you_mean(
    keywords: str = typer.Argument(..., help="Text to spell check"),
    locale: str = typer.Option("en_US", help="Locale of the dictionary to use"),
) -> None:
    """Print the collated best correction of the keywords."""
    context = SearchContext(keywords=keywords, locale=locale)
    bind_request_context(context.correlation_id, command="did-you-mean", locale=locale)
    with _container() as container:
        suggester = container.get(QuerySuggesterProtocol)
        try:
            sentence = suggester.spell_check_keywords(context)
        except SearchFailure as e:
            _fail(e)
    typer.echo(sentence)


@app.command("suggest-queries")
def suggest_queries(
    keywords: str = typer.Argument(..., help="Start of a search query"),
    locale: str = typer.Option("en_US", help="Locale of the indexed queries"),
    company_id: int = typer.Option(0, help="Company scope"),
    group_id: list[int] = typer.Option([], help="Group scope, repeatable"),
    max_results: int = typer.Option(10, "--max", min=1, help="Maximum queries returned"),
) -> None:
    """Print indexed keyword queries completing the given start."""
    context = SearchContext(
        keywords=keywords, locale=locale, company_id=company_id, group_ids=group_id
    )
    bind_request_context(context.correlation_id, command="suggest-queries", locale=locale)
    with _container() as container:
        suggester = container.get(QuerySuggesterProtocol)
        try:
            queries = suggester.suggest_keyword_queries(context, max_results)
        except SearchFailure as e:
            _fail(e)
    for query in queries:
        typer.echo(query)


if __name__ == "__main__":
    app()
