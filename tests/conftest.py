"""Test setup for gfm2mdx."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def alert_document() -> str:
    """A document with a title, an alert, and a plain quote."""
    return (
        "# Getting Started\n"
        "\n"
        "Intro paragraph.\n"
        "\n"
        "> [!NOTE]\n"
        "> Run `make install` first.\n"
        "\n"
        "> Just a quote.\n"
    )
