"""Focus-registry collaborator."""

from triple_browser.focus.registry import FieldFocusRegistry

__all__ = ["FieldFocusRegistry"]
