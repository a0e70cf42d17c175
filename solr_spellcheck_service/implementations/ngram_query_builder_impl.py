"""Default implementation of NGramQueryBuilderProtocol."""

from __future__ import annotations

from solr_spellcheck_service.protocols import NGramBuilderProtocol, NGramQueryBuilderProtocol
from solr_spellcheck_service.solr_query import SolrQuery, quote_term


class DefaultNGramQueryBuilder(NGramQueryBuilderProtocol):
    """OR-query over the n-gram fields written by the dictionary loader.

    Leading grams carry start_boost and trailing grams end_boost.
    """

    def __init__(
        self,
        ngram_builder: NGramBuilderProtocol,
        rows: int,
        start_boost: float = 2.0,
        end_boost: float = 1.0,
    ) -> None:
        self.ngram_builder = ngram_builder
        self.rows = rows
        self.start_boost = start_boost
        self.end_boost = end_boost

    def get_ngram_query(self, text: str) -> SolrQuery:
        holder = self.ngram_builder.build_ngram_holder(text)
        clauses: list[str] = []

        if self.start_boost > 0:
            for field, gram in holder.n_gram_starts.items():
                clauses.append(f"{field}:{quote_term(gram)}^{self.start_boost}")

        if self.end_boost > 0:
            for field, gram in holder.n_gram_ends.items():
                clauses.append(f"{field}:{quote_term(gram)}^{self.end_boost}")

        for field, grams in holder.n_grams.items():
            clauses.extend(f"{field}:{quote_term(gram)}" for gram in grams)

        if not clauses:
            # Nothing to decompose, fall back to an exact word lookup
            clauses.append(f"word:{quote_term(text)}")

        return SolrQuery(
            query=" OR ".join(clauses),
            rows=self.rows,
            params={"fl": "word,weight"},
        )
