"""Exploration configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from triple_browser.core.types import RDFS_LABEL
from triple_browser.display.prefixes import (
    BROWSER_SUFFIX_LENGTH,
    DEFAULT_PREFIXES,
    SPECIALIZED_SUFFIX_LENGTH,
    PrefixRule,
)


@dataclass
class BrowserConfig:
    """Settings shared by the general browser and specialized traversal."""

    # Raw matches examined per predicate group; the rest are dropped silently.
    result_limit: int = 100

    # Single-valued label lookup in specialized traversal
    label_predicate: str = RDFS_LABEL

    # Display
    prefixes: tuple[PrefixRule, ...] = field(default_factory=lambda: DEFAULT_PREFIXES)
    browser_suffix_length: int = BROWSER_SUFFIX_LENGTH
    specialized_suffix_length: int = SPECIALIZED_SUFFIX_LENGTH

    def __post_init__(self) -> None:
        if self.result_limit < 1:
            raise ValueError(f"result_limit must be positive, got {self.result_limit}")
