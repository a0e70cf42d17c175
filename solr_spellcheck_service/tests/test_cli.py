"""Tests for the admin CLI with the DI container replaced by mocks."""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from unittest.mock import MagicMock, patch
from uuid import uuid4

import pytest
from typer.testing import CliRunner

from solr_spellcheck_service import cli
from solr_spellcheck_service.error_handling import ErrorCode, ErrorDetail, SearchFailure
from solr_spellcheck_service.protocols import (
    QuerySuggesterProtocol,
    SpellCheckIndexWriterProtocol,
)

runner = CliRunner()


@pytest.fixture
def suggester() -> MagicMock:
    return MagicMock(spec=QuerySuggesterProtocol)


@pytest.fixture
def writer() -> MagicMock:
    return MagicMock(spec=SpellCheckIndexWriterProtocol)


@pytest.fixture(autouse=True)
def mock_container(suggester: MagicMock, writer: MagicMock) -> Iterator[None]:
    container = MagicMock()
    container.get.side_effect = {
        QuerySuggesterProtocol: suggester,
        SpellCheckIndexWriterProtocol: writer,
    }.__getitem__

    @contextmanager
    def fake_container() -> Iterator[MagicMock]:
        yield container

    with patch.object(cli, "_container", fake_container):
        yield


def _failure(message: str) -> SearchFailure:
    return SearchFailure(
        ErrorDetail(
            error_code=ErrorCode.EXTERNAL_SERVICE_ERROR,
            message=message,
            correlation_id=uuid4(),
            service="solr_spellcheck_service",
            operation="index_dictionaries",
        )
    )


def test_load_dictionaries(writer: MagicMock) -> None:
    result = runner.invoke(cli.app, ["load-dictionaries"])

    assert result.exit_code == 0
    writer.index_dictionaries.assert_called_once()
    (context,) = writer.index_dictionaries.call_args.args
    assert context.correlation_id is not None
    assert "Dictionaries loaded." in result.stdout


def test_load_dictionaries_failure_exits_non_zero(writer: MagicMock) -> None:
    writer.index_dictionaries.side_effect = _failure("Solr down")

    result = runner.invoke(cli.app, ["load-dictionaries"])

    assert result.exit_code == 1


def test_load_dictionary(writer: MagicMock) -> None:
    result = runner.invoke(cli.app, ["load-dictionary", "es_ES"])

    assert result.exit_code == 0
    locale, context = writer.index_dictionary.call_args.args
    assert locale == "es_ES"
    assert context.locale == "es_ES"


def test_suggest_prints_json(suggester: MagicMock) -> None:
    suggester.spell_check_keywords_map.return_value = {"helo": ["hello", "help"]}

    result = runner.invoke(cli.app, ["suggest", "helo", "--locale", "en_GB", "--max", "2"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"helo": ["hello", "help"]}
    context, max_suggestions = suggester.spell_check_keywords_map.call_args.args
    assert context.keywords == "helo"
    assert context.locale == "en_GB"
    assert max_suggestions == 2


def test_did_you_mean(suggester: MagicMock) -> None:
    suggester.spell_check_keywords.return_value = "hello world"

    result = runner.invoke(cli.app, ["did-you-mean", "helo wrld"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "hello world"


def test_suggest_queries(suggester: MagicMock) -> None:
    suggester.suggest_keyword_queries.return_value = ["liferay portal", "liferay"]

    result = runner.invoke(
        cli.app,
        ["suggest-queries", "life", "--company-id", "10157", "--group-id", "1", "--group-id", "2"],
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["liferay portal", "liferay"]
    context, max_results = suggester.suggest_keyword_queries.call_args.args
    assert context.company_id == 10157
    assert context.group_ids == [1, 2]
    assert max_results == 10
