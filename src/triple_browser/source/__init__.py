"""Triple sources implementing the pattern-match contract."""

from triple_browser.source.memory import InMemoryTripleSource
from triple_browser.source.query import run_query
from triple_browser.source.rdflib_source import RdflibTripleSource

__all__ = [
    "InMemoryTripleSource",
    "RdflibTripleSource",
    "run_query",
]
