"""Decide whether a predicate group inlines its value or gets child nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

from triple_browser.core.types import Term


@dataclass
class CollapseDecision:
    """Outcome of the collapse policy for one predicate group."""

    literal: str | None = None  # set when the group is collapsed
    values: list[Term] = field(default_factory=list)  # child values otherwise

    @property
    def collapsed(self) -> bool:
        return self.literal is not None


def decide_collapse(terms: list[Term]) -> CollapseDecision:
    """Apply the literal collapse policy to a retained, kind-tagged result set.

    A single literal is inlined on the group. Anything else (several
    literals, or any named resource among the results) becomes one value
    node per term. An empty list stays empty and is not collapsed.
    """
    if len(terms) == 1 and terms[0].is_literal:
        return CollapseDecision(literal=terms[0].value)
    return CollapseDecision(values=list(terms))
