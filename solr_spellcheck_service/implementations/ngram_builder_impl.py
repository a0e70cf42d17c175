"""Default implementation of NGramBuilderProtocol."""

from __future__ import annotations

from solr_spellcheck_service.models import NGramHolder
from solr_spellcheck_service.protocols import NGramBuilderProtocol


def ngram_lengths(text: str) -> range:
    """Gram lengths indexed for a word of this length.

    Long words use 3- and 4-grams, five letter words 2- and 3-grams, and
    anything shorter 1- and 2-grams.
    """
    length = len(text)
    if length > 5:
        return range(3, 5)
    if length == 5:
        return range(2, 4)
    return range(1, 3)


def form_grams(text: str, size: int) -> list[str]:
    return [text[i : i + size] for i in range(len(text) - size + 1)]


class DefaultNGramBuilder(NGramBuilderProtocol):
    """Builds `start<n>`, `end<n>` and `gram<n>` fields for a word."""

    def build_ngram_holder(self, text: str) -> NGramHolder:
        holder = NGramHolder()

        for size in ngram_lengths(text):
            grams = form_grams(text, size)
            if not grams:
                continue

            holder.n_gram_starts[f"start{size}"] = grams[0]
            holder.n_gram_ends[f"end{size}"] = grams[-1]
            holder.n_grams[f"gram{size}"] = grams

        return holder
