"""Tests for the server command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from triple_browser.server.__main__ import build_config, parse_args


class TestCli:
    def test_defaults(self):
        config = build_config(parse_args([]))
        assert config.mode == "rest"
        assert config.host == "127.0.0.1"
        assert config.port == 8430
        assert config.data_path is None
        assert config.browser.result_limit == 100

    def test_flags(self):
        args = parse_args([
            "--mode", "mcp",
            "--port", "9000",
            "--data", "graph.ttl",
            "--format", "turtle",
            "--result-limit", "25",
        ])
        config = build_config(args)
        assert config.mode == "mcp"
        assert config.port == 9000
        assert config.data_path == Path("graph.ttl")
        assert config.data_format == "turtle"
        assert config.browser.result_limit == 25

    def test_rejects_unknown_mode(self):
        with pytest.raises(SystemExit):
            parse_args(["--mode", "grpc"])

    def test_rejects_zero_result_limit(self):
        with pytest.raises(ValueError):
            build_config(parse_args(["--result-limit", "0"]))
