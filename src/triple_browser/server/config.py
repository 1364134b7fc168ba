"""Server configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from triple_browser.config import BrowserConfig


@dataclass
class ServerConfig:
    """Configuration for the Triple Browser server."""

    # Network
    host: str = "127.0.0.1"
    port: int = 8430

    # Mode: "rest" or "mcp"
    mode: str = "rest"

    # Data: an RDF file parsed with rdflib; empty graph when unset
    data_path: Path | None = None
    data_format: str | None = None

    # Exploration
    browser: BrowserConfig = field(default_factory=BrowserConfig)

    # CORS
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self) -> None:
        if self.mode not in ("rest", "mcp"):
            raise ValueError(f"Unknown server mode: {self.mode}")
