"""Query helper shared by both traversal modes."""

from __future__ import annotations

import logging

from triple_browser.core.exceptions import QueryError
from triple_browser.core.protocols import TripleSource
from triple_browser.core.types import Triple

logger = logging.getLogger(__name__)


async def run_query(
    source: TripleSource,
    subject: str | None = None,
    predicate: str | None = None,
    obj: str | None = None,
    limit: int | None = None,
) -> list[Triple]:
    """Run one pattern query, wrapping source failures in QueryError.

    ``limit`` is handed to the source so it can stop scanning early; a
    source that ignores it is truncated here. Truncation is silent.
    """
    pattern = (subject, predicate, obj)
    try:
        triples = await source.match(subject, predicate, obj, limit=limit)
    except QueryError:
        raise
    except Exception as e:
        raise QueryError(pattern, f"Pattern query {pattern} failed: {e}") from e

    triples = list(triples)
    if limit is not None and len(triples) > limit:
        logger.debug("Truncating %d matches for %s to %d", len(triples), pattern, limit)
        triples = triples[:limit]
    return triples
