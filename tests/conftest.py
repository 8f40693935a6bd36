"""
Pytest configuration shared across test modules.
Ensures the repository root is importable and exposes the HTML fixtures plus a
canned-HTML renderer so crawlers can be driven without a browser.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Tuple, Union

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

FIXTURE_DIR = Path(__file__).parent / "fixtures" / "html"


def load_fixture(name: str) -> str:
    return (FIXTURE_DIR / name).read_text(encoding="utf-8")


class FakeRenderer:
    """PageRenderer stand-in that serves fixture HTML keyed by URL."""

    def __init__(self, pages: Dict[str, Union[str, Exception]]):
        self.pages = pages
        self.calls: List[Tuple[str, str]] = []

    async def render(self, url: str, wait_for: str) -> str:
        self.calls.append((url, wait_for))
        result = self.pages[url]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fixture_html():
    return load_fixture


@pytest.fixture
def fake_renderer_factory():
    return FakeRenderer
