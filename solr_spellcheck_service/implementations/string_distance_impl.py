"""
String distance metrics backed by rapidfuzz.

Every metric returns a normalized similarity in [0, 1] where 1.0 means the strings
are identical. The suggester keeps candidates whose score is above the configured
threshold, so a higher threshold means stricter matching.
"""

from __future__ import annotations

from rapidfuzz.distance import DamerauLevenshtein, JaroWinkler, Levenshtein

from solr_spellcheck_service.protocols import StringDistanceProtocol


class LevenshteinDistance(StringDistanceProtocol):
    """1 - edit distance / length of the longer string."""

    def get_distance(self, first: str, second: str) -> float:
        return Levenshtein.normalized_similarity(first, second)


class DamerauLevenshteinDistance(StringDistanceProtocol):
    """Like LevenshteinDistance but counts an adjacent transposition as one edit."""

    def get_distance(self, first: str, second: str) -> float:
        return DamerauLevenshtein.normalized_similarity(first, second)


class JaroWinklerDistance(StringDistanceProtocol):
    def get_distance(self, first: str, second: str) -> float:
        return JaroWinkler.similarity(first, second)


_METRICS: dict[str, type[StringDistanceProtocol]] = {
    "levenshtein": LevenshteinDistance,
    "damerau_levenshtein": DamerauLevenshteinDistance,
    "jaro_winkler": JaroWinklerDistance,
}


def create_string_distance(name: str) -> StringDistanceProtocol:
    """Instantiate a metric by its configuration name.

    Raises:
        ValueError: If the name is not a known metric
    """
    try:
        return _METRICS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown string distance '{name}', expected one of {sorted(_METRICS)}"
        ) from None
