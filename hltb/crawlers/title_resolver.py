"""Resolve a free-text game name to its HowLongToBeat id via the search page."""
from __future__ import annotations

import logging
from urllib.parse import quote

from hltb.config import DEFAULT_BASE_URL
from hltb.errors import NotFoundError
from hltb.parsers.game_detail_parser import SEARCH_RESULT_LINK_SELECTOR, parse_search_result_id
from hltb.utils.playwright_renderer import PageRenderer

logger = logging.getLogger(__name__)


class TitleResolver:
    """Takes the first search result unconditionally; no ranking is done."""

    def __init__(self, renderer: PageRenderer, base_url: str = DEFAULT_BASE_URL):
        self.renderer = renderer
        self.base_url = base_url

    def search_url(self, name: str) -> str:
        return f"{self.base_url}?q={quote(name)}"

    async def resolve_id(self, name: str) -> int:
        if not name or not name.strip():
            raise NotFoundError("Cannot search for an empty game name")

        url = self.search_url(name.strip())
        logger.info("Searching HowLongToBeat for %r", name)
        html = await self.renderer.render(url, SEARCH_RESULT_LINK_SELECTOR)
        try:
            game_id = parse_search_result_id(html)
        except NotFoundError as exc:
            raise NotFoundError(f"No HowLongToBeat result for {name!r}") from exc
        logger.info("Resolved %r to game id %d", name, game_id)
        return game_id


__all__ = ["TitleResolver"]
