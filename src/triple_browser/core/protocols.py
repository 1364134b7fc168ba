"""Protocols (interfaces) for the collaborators the core talks to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from triple_browser.core.types import Triple


@runtime_checkable
class TripleSource(Protocol):
    """Read-only, pattern-matchable triple store."""

    async def match(
        self,
        subject: str | None = None,
        predicate: str | None = None,
        obj: str | None = None,
        limit: int | None = None,
    ) -> list[Triple]:
        """Return triples matching the pattern; None is a wildcard.

        With ``limit`` set, at most that many matches are produced, and the
        source may stop scanning once it has them.
        """
        ...


@runtime_checkable
class FocusRegistry(Protocol):
    """Routes an externally chosen IRI into the last focused input field."""

    def record_focus(self, field_id: str) -> None:
        """Remember that a field received focus."""
        ...

    def fill_focused(self, value: str) -> str | None:
        """Write value into the last focused field. Returns the field id."""
        ...
