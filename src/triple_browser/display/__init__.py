"""Display helpers: IRI shortening and tree projection."""

from triple_browser.display.prefixes import (
    DEFAULT_PREFIXES,
    PrefixRule,
    shorten_iri,
)
from triple_browser.display.projector import (
    TreeItem,
    browser_label,
    project_browser_tree,
    project_specialized_tree,
    render_text,
    specialized_label,
)

__all__ = [
    "DEFAULT_PREFIXES",
    "PrefixRule",
    "shorten_iri",
    "TreeItem",
    "browser_label",
    "specialized_label",
    "project_browser_tree",
    "project_specialized_tree",
    "render_text",
]
