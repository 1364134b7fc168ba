"""In-memory focus registry for routing a chosen IRI into an input field."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class FieldFocusRegistry:
    """Tracks input field values and which field was focused last.

    Values are plain strings keyed by field id. Nothing is persisted.
    """

    def __init__(self) -> None:
        self._values: dict[str, str] = {}
        self._last_focused: str | None = None

    @property
    def last_focused(self) -> str | None:
        return self._last_focused

    def record_focus(self, field_id: str) -> None:
        """Remember that a field received focus."""
        self._last_focused = field_id

    def fill_focused(self, value: str) -> str | None:
        """Write ``value`` into the last focused field.

        Returns:
            The id of the filled field, or None when no field has focus
        """
        if self._last_focused is None:
            logger.debug("No focused field to fill")
            return None
        self._values[self._last_focused] = value
        return self._last_focused

    def set_field_value(self, field_id: str, value: str) -> None:
        self._values[field_id] = value

    def field_value(self, field_id: str) -> str | None:
        return self._values.get(field_id)

    def remove_field(self, field_id: str) -> None:
        """Forget a field; clears focus if it was the focused one."""
        self._values.pop(field_id, None)
        if self._last_focused == field_id:
            self._last_focused = None

    def fields(self) -> dict[str, str]:
        return dict(self._values)
