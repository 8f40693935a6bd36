"""
HTML parsers for HowLongToBeat search and game pages.

Works on the fully rendered markup (after client-side hydration), so the
selectors follow the structure the browser produces rather than the raw server
response.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple
from urllib.parse import urlparse

from bs4 import BeautifulSoup
from bs4.element import Tag

from hltb.errors import MalformedResponseError, NotFoundError
from hltb.models.game import Category, GameRecord, StatisticSet
from hltb.utils.duration_parser import parse_duration

logger = logging.getLogger(__name__)

SEARCH_RESULT_LINK_SELECTOR = (
    "#search-results-header > ul > li:nth-child(1) > div"
    " > div[class*='GameCard_search_list_image'] > a"
)
TITLE_SELECTOR = (
    "#__next > div > main > div:nth-child(1) > div > div > div"
    " > div[class*='GameHeader_profile_header']"
)
STATS_TABLE_SELECTOR = (
    "#__next > div > main > div:nth-child(2) > div > div[class*='content_75_static']"
    " > div.in.scrollable.scroll_blue.shadow_box.back_primary"
    " > table[class*='GameTimeTable_game_main_table']"
)
STATS_ROW_SELECTOR = "tbody > tr"

# React leaves this marker between adjacent text interpolations.
EMPTY_INTERPOLATION_MARKER = "<!-- -->"

LABEL_CATEGORIES: Dict[str, Category] = {
    "Main Story": Category.MAIN_STORY,
    "Main + Extra": Category.MAIN_EXTRA,
    "Main + Extras": Category.MAIN_EXTRA,
    "Completionist": Category.COMPLETIONIST,
    "Completionists": Category.COMPLETIONIST,
    "All PlayStyles": Category.ALL_STYLES,
    "Co-Op": Category.CO_OP,
    "Competitive": Category.VERSUS,
}

# Row layout: label | polled | average | median | rushed | leisure
STAT_CELL_OFFSET = 2
STAT_CELL_COUNT = 4
MIN_ROW_CELLS = STAT_CELL_OFFSET + STAT_CELL_COUNT


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def _cell_text(cell: Tag) -> str:
    return cell.get_text(strip=True)


def classify_label(label: Optional[str]) -> Optional[Category]:
    """Map a row label to its category. Matching is exact and case-sensitive."""
    return LABEL_CATEGORIES.get((label or "").strip())


def parse_stat_row(row: Tag) -> Optional[Tuple[Category, StatisticSet]]:
    """
    Classify a statistics table row and parse its four duration cells.

    Rows with an unknown label (headers, spacers) return None. A recognized row
    that is too short means the table layout changed and raises.
    """
    cells = row.find_all("td")
    if not cells:
        return None

    label = _cell_text(cells[0])
    category = classify_label(label)
    if category is None:
        logger.debug("Skipping row with unrecognized label %r", label)
        return None

    if len(cells) < MIN_ROW_CELLS:
        raise MalformedResponseError(
            f"Row {label!r} has {len(cells)} cells, expected at least {MIN_ROW_CELLS}"
        )

    average, median, rushed, leisure = (
        parse_duration(_cell_text(cell))
        for cell in cells[STAT_CELL_OFFSET:MIN_ROW_CELLS]
    )
    return category, StatisticSet(average=average, median=median, rushed=rushed, leisure=leisure)


def parse_title(soup: BeautifulSoup) -> str:
    element = soup.select_one(TITLE_SELECTOR)
    if element is None:
        raise MalformedResponseError("Game title element not found")
    title = element.get_text().replace(EMPTY_INTERPOLATION_MARKER, "").strip()
    if not title:
        raise MalformedResponseError("Game title element is empty")
    return title


def parse_game_detail_html(game_id: int, html: str) -> GameRecord:
    """Build a GameRecord from a rendered /game/<id> page."""
    soup = _soup(html)
    title = parse_title(soup)

    table = soup.select_one(STATS_TABLE_SELECTOR)
    if table is None:
        raise MalformedResponseError(f"Statistics table not found for game {game_id}")

    stats: Dict[Category, StatisticSet] = {}
    for row in table.select(STATS_ROW_SELECTOR):
        parsed = parse_stat_row(row)
        if parsed is None:
            continue
        category, statistic_set = parsed
        # Repeated categories: the last row wins.
        stats[category] = statistic_set

    return GameRecord(
        id=game_id,
        title=title,
        **{category.value: statistic_set for category, statistic_set in stats.items()},
    )


def parse_game_id(href: Optional[str]) -> int:
    """Extract the numeric id from a link such as '/game/5900'."""
    path = urlparse(href or "").path.rstrip("/")
    segment = path.rsplit("/", 1)[-1]
    if not segment.isdecimal() or int(segment) <= 0:
        raise MalformedResponseError(f"Search result link {href!r} does not end in a game id")
    return int(segment)


def parse_search_result_id(html: str) -> int:
    """Return the game id of the first search result on a rendered search page."""
    soup = _soup(html)
    for link in soup.select(SEARCH_RESULT_LINK_SELECTOR):
        href = link.get("href")
        if href:
            return parse_game_id(href)
    raise NotFoundError("No search result link found")


__all__ = [
    "LABEL_CATEGORIES",
    "MIN_ROW_CELLS",
    "SEARCH_RESULT_LINK_SELECTOR",
    "STATS_TABLE_SELECTOR",
    "STAT_CELL_OFFSET",
    "TITLE_SELECTOR",
    "classify_label",
    "parse_game_detail_html",
    "parse_game_id",
    "parse_search_result_id",
    "parse_stat_row",
    "parse_title",
]
