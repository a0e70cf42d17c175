"""Solr query value object and query-string helpers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


def quote_term(value: str) -> str:
    """Quote a term for the standard query parser.

    Inside quotes only `"` and `\\` are special, and operator words such as
    AND, OR and NOT are plain terms.
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class SolrQuery(BaseModel):
    """A query string plus the request parameters sent alongside it."""

    query: str
    filter_queries: list[str] = Field(default_factory=list)
    rows: int | None = None
    params: dict[str, Any] = Field(default_factory=dict)

    def add_filter_query(self, filter_query: str) -> None:
        self.filter_queries.append(filter_query)

    def to_search_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for pysolr.Solr.search (besides the query string)."""
        kwargs: dict[str, Any] = dict(self.params)
        if self.filter_queries:
            kwargs["fq"] = list(self.filter_queries)
        if self.rows is not None:
            kwargs["rows"] = self.rows
        return kwargs
