"""Request and record models shared by the suggester and the dictionary loader.

SearchContext: Request-scoped input (keywords, locale, scoping, correlation).
DictionaryRecord: One parsed dictionary line.
NGramHolder: N-gram decomposition of a word, keyed by Solr field name.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, Field

__all__ = ["DictionaryRecord", "NGramHolder", "SearchContext"]


class SearchContext(BaseModel):
    """Input of a suggestion or dictionary request."""

    keywords: str = ""
    locale: str = Field(default="en_US", description="Locale identifier, e.g. en_US")
    company_id: int = 0
    group_ids: list[int] = Field(default_factory=list)
    correlation_id: UUID = Field(default_factory=uuid4)


class DictionaryRecord(BaseModel):
    """A `word weight` line of a dictionary file."""

    word: str
    weight: int = 0


class NGramHolder(BaseModel):
    """N-grams of a single word.

    n_gram_starts / n_gram_ends map `start<n>` / `end<n>` to the leading and
    trailing gram of length n; n_grams maps `gram<n>` to every gram of length n.
    """

    n_gram_starts: dict[str, str] = Field(default_factory=dict)
    n_gram_ends: dict[str, str] = Field(default_factory=dict)
    n_grams: dict[str, list[str]] = Field(default_factory=dict)
