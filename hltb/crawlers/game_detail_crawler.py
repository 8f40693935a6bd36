"""HowLongToBeat game page crawler."""
from __future__ import annotations

import logging

from hltb.config import DEFAULT_BASE_URL
from hltb.models.game import GameRecord
from hltb.parsers.game_detail_parser import STATS_TABLE_SELECTOR, parse_game_detail_html
from hltb.utils.playwright_renderer import PageRenderer

logger = logging.getLogger(__name__)


class GameDetailCrawler:
    """Render a /game/<id> page and return its parsed GameRecord."""

    def __init__(self, renderer: PageRenderer, base_url: str = DEFAULT_BASE_URL):
        self.renderer = renderer
        self.base_url = base_url

    def detail_url(self, game_id: int) -> str:
        return f"{self.base_url}game/{game_id}"

    async def crawl_game(self, game_id: int) -> GameRecord:
        url = self.detail_url(game_id)
        logger.info("Fetching game details for id %d", game_id)
        # The table is filled in client-side; wait for it before reading the DOM.
        html = await self.renderer.render(url, STATS_TABLE_SELECTOR)
        record = parse_game_detail_html(game_id, html)
        categories = record.populated_categories()
        logger.info(
            "Parsed %r (id %d): %d categories [%s]",
            record.title,
            game_id,
            len(categories),
            ", ".join(category.value for category in categories),
        )
        return record


__all__ = ["GameDetailCrawler"]
