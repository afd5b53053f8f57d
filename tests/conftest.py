"""Shared fixtures for PingLens tests."""

from pathlib import Path

import pytest

from pinglens.models import PingConfig
from pinglens.parser import PingParser, create_parser

FIXTURES = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    """Return the text of a saved ping output under tests/fixtures."""
    return (FIXTURES / name).read_text(encoding="utf-8")


@pytest.fixture
def load_fixture():
    return read_fixture


@pytest.fixture
def run_parser():
    """Feed a saved ping output through a fresh parser and return the parser."""

    def _run(name: str, host: str, platform: str, config: PingConfig = None) -> PingParser:
        parser = create_parser(host, platform, config or PingConfig(v6=False))
        for line in read_fixture(name).split("\n"):
            parser.consume(line)
        return parser

    return _run
