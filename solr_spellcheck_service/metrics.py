"""Shared Prometheus metrics for the Solr Spellcheck Service.

Metrics are created once and shared by the suggester, the index writer and the
CLI, avoiding duplicate registration errors in the default registry.
"""

from __future__ import annotations

from typing import Any

from prometheus_client import REGISTRY, Counter

from solr_spellcheck_service.logging_utils import create_service_logger

logger = create_service_logger("solr_spellcheck_service.metrics")

# Global metrics instances (created once, shared by every component)
_metrics: dict[str, Any] | None = None

_METRIC_NAMES = {
    "suggestion_operations_total": "solr_spellcheck_suggestion_operations_total",
    "dictionary_documents_indexed_total": "solr_spellcheck_dictionary_documents_indexed_total",
    "dictionary_batches_flushed_total": "solr_spellcheck_dictionary_batches_flushed_total",
}


def get_metrics() -> dict[str, Any]:
    """Get or create shared metrics instances.

    Returns:
        Dictionary of metric instances keyed by metric name
    """
    global _metrics

    if _metrics is None:
        _metrics = _create_metrics()
        logger.info(f"Shared metrics initialized: {list(_metrics.keys())}")

    return _metrics


def _create_metrics() -> dict[str, Any]:
    try:
        return {
            "suggestion_operations_total": Counter(
                _METRIC_NAMES["suggestion_operations_total"],
                "Total spell check suggestion operations",
                ["locale", "status"],
                registry=REGISTRY,
            ),
            "dictionary_documents_indexed_total": Counter(
                _METRIC_NAMES["dictionary_documents_indexed_total"],
                "Dictionary documents sent to Solr",
                ["locale"],
                registry=REGISTRY,
            ),
            "dictionary_batches_flushed_total": Counter(
                _METRIC_NAMES["dictionary_batches_flushed_total"],
                "Bulk writes issued while loading dictionaries",
                ["locale"],
                registry=REGISTRY,
            ),
        }
    except ValueError as e:
        if "Duplicated timeseries" not in str(e):
            raise
        logger.warning(f"Metrics already exist in registry: {e} - reusing existing collectors.")
        return _get_existing_metrics()


def _get_existing_metrics() -> dict[str, Any]:
    # Counter collectors are registered under their name without the _total suffix
    collectors = REGISTRY._names_to_collectors  # noqa: SLF001
    return {
        key: collectors.get(name) or collectors[name.removesuffix("_total")]
        for key, name in _METRIC_NAMES.items()
    }
