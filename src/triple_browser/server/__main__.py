"""CLI entrypoint: python -m triple_browser.server"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from triple_browser.config import BrowserConfig
from triple_browser.server.config import ServerConfig


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="triple-browser-server",
        description="Triple Browser Server: REST or MCP access to a lazily explored RDF graph",
    )
    p.add_argument("--mode", choices=["rest", "mcp"], default="rest",
                    help="Server mode (default: rest)")
    p.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    p.add_argument("--port", type=int, default=8430, help="Bind port (default: 8430)")
    p.add_argument("--data", type=Path, default=None,
                    help="RDF file to explore (any format rdflib parses)")
    p.add_argument("--format", default=None,
                    help="rdflib format name (default: guessed from the file suffix)")

    # Exploration
    p.add_argument("--result-limit", type=int, default=100,
                    help="Matches examined per predicate group (default: 100)")

    # Logging
    p.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> ServerConfig:
    return ServerConfig(
        host=args.host,
        port=args.port,
        mode=args.mode,
        data_path=args.data,
        data_format=args.format,
        browser=BrowserConfig(result_limit=args.result_limit),
    )


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    config = build_config(args)

    if config.mode == "mcp":
        _run_mcp(config)
    else:
        _run_rest(config)


def _run_rest(config: ServerConfig) -> None:
    import uvicorn

    from triple_browser.server.rest.app import create_app

    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port)


def _run_mcp(config: ServerConfig) -> None:
    from triple_browser.server.mcp.server import create_mcp_server

    server = create_mcp_server(config)
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
