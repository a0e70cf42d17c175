"""
Filter-query formatting.

The output format is the wire contract with the Solr schema: `field:value` for a
single value, and `field:v1 OR field:v2 OR ... field:vN ` for several values. The
trailing space of the multi-value form is part of that contract.
"""

from __future__ import annotations

from collections.abc import Sequence

from solr_spellcheck_service.models import SearchContext

COMPANY_ID = "companyId"
GROUP_ID = "groupId"
KEYWORD_SEARCH = "keywordSearch"
LANGUAGE_ID = "languageId"
LOCALE = "locale"
TYPE = "type"
UID = "uid"

SPELLCHECKING_TYPE = "spellchecking"
SUGGESTION_TYPE = "suggestion"


def get_filter_query(field: str, value: str | int | Sequence[str | int]) -> str:
    """Format a filter clause for one field.

    Args:
        field: Solr field name
        value: A scalar, or a non-empty sequence of values to OR together

    Returns:
        The filter query string
    """
    if isinstance(value, (str, int)):
        return f"{field}:{value}"

    values = list(value)
    if not values:
        raise ValueError(f"No values given for filter field '{field}'")

    return "".join(f"{field}:{v} OR " for v in values[:-1]) + f"{field}:{values[-1]} "


def build_filter_queries(search_context: SearchContext) -> list[str]:
    """Company, group, locale and type scoping for keyword query suggestions."""
    filter_queries = [get_filter_query(COMPANY_ID, search_context.company_id)]

    if search_context.group_ids:
        filter_queries.append(get_filter_query(GROUP_ID, search_context.group_ids))

    filter_queries.append(get_filter_query(LOCALE, search_context.locale))
    filter_queries.append(get_filter_query(TYPE, SUGGESTION_TYPE))

    return filter_queries
