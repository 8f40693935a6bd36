"""
Name → GameRecord lookup, the public entry point of the package.

Usage:
    record = await lookup("Metal Gear")
    record = lookup_sync("Helldivers 2", sandboxed=False)
"""
from __future__ import annotations

import asyncio
from typing import Optional

from hltb.config import Settings, load_settings
from hltb.crawlers.game_detail_crawler import GameDetailCrawler
from hltb.crawlers.title_resolver import TitleResolver
from hltb.models.game import GameRecord
from hltb.utils.playwright_renderer import PageRenderer, PlaywrightRenderer


async def lookup(
    name: str,
    sandboxed: Optional[bool] = True,
    *,
    renderer: Optional[PageRenderer] = None,
    settings: Optional[Settings] = None,
) -> GameRecord:
    """
    Search for ``name`` and return the completion statistics of the first hit.

    ``sandboxed`` only affects a browser launched here; pass False in containers
    without sandbox support, or None to use HLTB_SANDBOXED. An injected
    ``renderer`` is used as-is and left open.
    """
    settings = settings or load_settings()

    if renderer is not None:
        return await _run(name, renderer, settings)

    async with PlaywrightRenderer.from_settings(settings, sandboxed=sandboxed) as owned:
        return await _run(name, owned, settings)


async def _run(name: str, renderer: PageRenderer, settings: Settings) -> GameRecord:
    game_id = await TitleResolver(renderer, settings.base_url).resolve_id(name)
    return await GameDetailCrawler(renderer, settings.base_url).crawl_game(game_id)


def lookup_sync(name: str, sandboxed: Optional[bool] = True, **kwargs) -> GameRecord:
    return asyncio.run(lookup(name, sandboxed, **kwargs))


__all__ = ["lookup", "lookup_sync"]
