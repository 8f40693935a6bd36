"""
Immutable records describing a game and its completion-time statistics.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from hltb.errors import MalformedResponseError


class Category(str, Enum):
    MAIN_STORY = "main_story"
    MAIN_EXTRA = "main_extra"
    COMPLETIONIST = "completionist"
    ALL_STYLES = "all_styles"
    CO_OP = "co_op"
    VERSUS = "versus"


@dataclass(frozen=True)
class StatisticSet:
    """Four completion measures for one play style, in seconds."""
    average: Optional[float] = None
    median: Optional[float] = None
    rushed: Optional[float] = None    # fastest completions
    leisure: Optional[float] = None   # slowest completions


@dataclass(frozen=True)
class GameRecord:
    """
    One game's identity plus whichever statistic categories its page reported.

    Absent categories are None; callers must not assume any subset is present.
    """
    id: int
    title: str
    main_story: Optional[StatisticSet] = None
    main_extra: Optional[StatisticSet] = None
    completionist: Optional[StatisticSet] = None
    all_styles: Optional[StatisticSet] = None
    co_op: Optional[StatisticSet] = None
    versus: Optional[StatisticSet] = None

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise MalformedResponseError(f"Invalid game id: {self.id!r}")
        if not self.title or not self.title.strip():
            raise MalformedResponseError(f"Game {self.id} has an empty title")

    def statistics(self, category: Category) -> Optional[StatisticSet]:
        return getattr(self, Category(category).value)

    def populated_categories(self) -> List[Category]:
        return [category for category in Category if self.statistics(category) is not None]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["Category", "StatisticSet", "GameRecord"]
