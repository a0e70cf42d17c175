"""Solr implementation of SpellCheckIndexWriterProtocol."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any
from uuid import UUID, uuid4

from solr_spellcheck_service.error_handling import (
    SearchFailure,
    raise_dictionary_load_error,
    raise_search_failure,
)
from solr_spellcheck_service.filter_queries import (
    LANGUAGE_ID,
    SPELLCHECKING_TYPE,
    TYPE,
    UID,
    get_filter_query,
)
from solr_spellcheck_service.logging_utils import create_service_logger
from solr_spellcheck_service.models import DictionaryRecord, SearchContext
from solr_spellcheck_service.protocols import (
    NGramBuilderProtocol,
    SolrClientProtocol,
    SpellCheckIndexWriterProtocol,
)

logger = create_service_logger("solr_spellcheck_service.index_writer_impl")

SERVICE_NAME = "solr_spellcheck_service"
DEFAULT_BATCH_SIZE = 1000


def get_uid(locale: str, word: str) -> str:
    return f"{locale}_WORD_{word}"


def parse_dictionary_line(line: str) -> DictionaryRecord | None:
    """Parse a `word [weight]` line; None for blank lines.

    An unparsable weight falls back to 0 and is logged as a warning.
    """
    terms = line.split()
    if not terms:
        return None

    weight = 0
    if len(terms) > 1:
        try:
            weight = int(terms[1])
        except ValueError:
            logger.warning(f"Invalid weight for term: {terms[0]}", extra={"weight": terms[1]})

    return DictionaryRecord(word=terms[0], weight=weight)


class SolrSpellCheckIndexWriter(SpellCheckIndexWriterProtocol):
    """Loads per-locale dictionary files into Solr as spellchecking documents.

    Dictionaries live in `<dictionaries_directory>/<locale>/`, one `word weight`
    record per line. Documents are written in batches of `batch_size`, each
    optionally followed by a commit.
    """

    def __init__(
        self,
        solr_client: SolrClientProtocol,
        ngram_builder: NGramBuilderProtocol,
        dictionaries_directory: Path,
        supported_locales: list[str],
        batch_size: int = DEFAULT_BATCH_SIZE,
        commit: bool = False,
        metrics: dict[str, Any] | None = None,
    ) -> None:
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")

        self.solr_client = solr_client
        self.ngram_builder = ngram_builder
        self.dictionaries_directory = Path(dictionaries_directory)
        self.supported_locales = list(supported_locales)
        self.batch_size = batch_size
        self.commit = commit
        self.metrics = metrics

    def clear_dictionary_indexes(self, search_context: SearchContext | None = None) -> None:
        correlation_id = search_context.correlation_id if search_context else uuid4()
        delete_query = get_filter_query(TYPE, SPELLCHECKING_TYPE)

        try:
            self.solr_client.delete(q=delete_query, commit=False)

            if self.commit:
                self.solr_client.commit()
        except Exception as e:
            raise_search_failure(
                service=SERVICE_NAME,
                operation="clear_dictionary_indexes",
                message=f"Unable to delete documents: {e}",
                correlation_id=correlation_id,
                cause=e,
                delete_query=delete_query,
            )

        logger.info(
            "Cleared spellchecking documents",
            extra={"correlation_id": str(correlation_id), "delete_query": delete_query},
        )

    def index_dictionaries(self, search_context: SearchContext | None = None) -> None:
        """Full reload: wipe first, then load each supported locale.

        The wipe is not atomic with the reload; a failure part way through leaves
        the index with only the locales loaded so far. Locale failures do not
        stop the remaining locales, and are reported together at the end.
        """
        correlation_id = search_context.correlation_id if search_context else uuid4()
        context = search_context or SearchContext(correlation_id=correlation_id)

        self.clear_dictionary_indexes(context)

        failed_locales: list[str] = []
        for locale in self.supported_locales:
            try:
                self.index_dictionary(locale, context.model_copy(update={"locale": locale}))
            except SearchFailure as e:
                logger.error(
                    f"Dictionary load failed for locale {locale}: {e}",
                    extra={"correlation_id": str(correlation_id), "locale": locale},
                )
                failed_locales.append(locale)

        if failed_locales:
            raise_dictionary_load_error(
                service=SERVICE_NAME,
                operation="index_dictionaries",
                message=f"Unable to load dictionaries for locales: {', '.join(failed_locales)}",
                correlation_id=correlation_id,
                failed_locales=failed_locales,
            )

    def index_dictionary(self, locale: str, search_context: SearchContext | None = None) -> None:
        correlation_id = search_context.correlation_id if search_context else uuid4()
        dictionary_folder = self.dictionaries_directory / locale

        if not dictionary_folder.is_dir():
            logger.warning(
                f"The dictionary folder {dictionary_folder} does not exist",
                extra={"correlation_id": str(correlation_id), "locale": locale},
            )
            return

        failed_files: list[str] = []
        for file_entry in sorted(dictionary_folder.iterdir()):
            if not file_entry.is_file():
                continue
            try:
                self._index_dictionary_file(file_entry, locale, correlation_id)
            except SearchFailure as e:
                logger.error(
                    f"Dictionary file {file_entry.name} aborted: {e}",
                    extra={"correlation_id": str(correlation_id), "locale": locale},
                )
                failed_files.append(file_entry.name)

        if failed_files:
            raise_dictionary_load_error(
                service=SERVICE_NAME,
                operation="index_dictionary",
                message=f"Unable to load dictionary files for {locale}: {', '.join(failed_files)}",
                correlation_id=correlation_id,
                locale=locale,
                failed_files=failed_files,
            )

    def _index_dictionary_file(self, path: Path, locale: str, correlation_id: UUID) -> int:
        """Stream one dictionary file into Solr, returning the number of documents written."""
        documents: list[dict[str, Any]] = []
        total = 0
        dictionary_file: IO[str] | None = None

        try:
            dictionary_file = path.open(encoding="utf-8")

            for line in dictionary_file:
                record = parse_dictionary_line(line)
                if record is None:
                    continue

                documents.append(self._create_document(locale, record))

                if len(documents) == self.batch_size:
                    self._flush(documents, locale)
                    total += len(documents)
                    documents.clear()

            if documents:
                self._flush(documents, locale)
                total += len(documents)
                documents.clear()
        except Exception as e:
            logger.debug(
                "Unable to index dictionary file",
                exc_info=True,
                extra={"correlation_id": str(correlation_id), "file": str(path)},
            )
            raise_search_failure(
                service=SERVICE_NAME,
                operation="index_dictionary",
                message=str(e),
                correlation_id=correlation_id,
                cause=e,
                locale=locale,
                file=str(path),
                documents_written=total,
            )
        finally:
            if dictionary_file is not None:
                _close_quietly(dictionary_file, path)

        logger.info(
            f"Indexed {total} dictionary words from {path.name}",
            extra={"correlation_id": str(correlation_id), "locale": locale},
        )
        return total

    def _create_document(self, locale: str, record: DictionaryRecord) -> dict[str, Any]:
        document: dict[str, Any] = {
            UID: get_uid(locale, record.word),
            LANGUAGE_ID: locale,
            "word": record.word,
            "weight": str(record.weight),
            TYPE: SPELLCHECKING_TYPE,
        }

        holder = self.ngram_builder.build_ngram_holder(record.word)
        document.update(holder.n_gram_ends)
        document.update(holder.n_gram_starts)
        for field_name, grams in holder.n_grams.items():
            document[field_name] = list(grams)

        return document

    def _flush(self, documents: list[dict[str, Any]], locale: str) -> None:
        self.solr_client.add(list(documents), commit=False)

        if self.commit:
            self.solr_client.commit()

        if self.metrics is not None:
            self.metrics["dictionary_batches_flushed_total"].labels(locale=locale).inc()
            self.metrics["dictionary_documents_indexed_total"].labels(locale=locale).inc(
                len(documents)
            )


def _close_quietly(dictionary_file: IO[str], path: Path) -> None:
    try:
        dictionary_file.close()
    except OSError:
        logger.debug(f"Unable to close dictionary file {path}", exc_info=True)
