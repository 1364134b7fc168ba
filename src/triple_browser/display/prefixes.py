"""IRI shortening for display.

A pure function over an ordered rule table: the first namespace that
prefixes the IRI wins, otherwise a fixed-length suffix of the IRI is shown.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class PrefixRule:
    """Replace a namespace with a short prefix."""

    namespace: str
    prefix: str

    def apply(self, iri: str) -> str | None:
        if iri.startswith(self.namespace):
            return self.prefix + iri[len(self.namespace):]
        return None


DEFAULT_PREFIXES: tuple[PrefixRule, ...] = (
    PrefixRule("http://www.w3.org/2000/01/rdf-schema#", "rdfs:"),
    PrefixRule("http://www.w3.org/1999/02/22-rdf-syntax-ns#", "rdf:"),
    PrefixRule("http://www.w3.org/2002/07/owl#", "owl:"),
    PrefixRule("http://www.w3.org/2004/02/skos/core#", "skos:"),
    PrefixRule("http://xmlns.com/foaf/0.1/", "foaf:"),
    PrefixRule("http://schema.org/", "schema:"),
)

BROWSER_SUFFIX_LENGTH = 60
SPECIALIZED_SUFFIX_LENGTH = 50


def shorten_iri(
    iri: str,
    rules: Sequence[PrefixRule] = DEFAULT_PREFIXES,
    max_length: int = BROWSER_SUFFIX_LENGTH,
) -> str:
    """Shorten an IRI for display.

    Args:
        iri: The IRI to shorten
        rules: Prefix rules, tried in order
        max_length: Suffix length kept when no rule matches

    Returns:
        The prefixed form, the IRI itself if short enough, or ``...`` followed
        by its last ``max_length`` characters.
    """
    for rule in rules:
        short = rule.apply(iri)
        if short is not None:
            return short

    if len(iri) > max_length:
        return f"...{iri[-max_length:]}"
    return iri
