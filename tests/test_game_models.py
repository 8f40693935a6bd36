import dataclasses
import json

import pytest

from hltb.errors import MalformedResponseError
from hltb.models.game import Category, GameRecord, StatisticSet


def test_records_are_frozen():
    record = GameRecord(id=5900, title="Metal Gear")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.title = "Changed"  # type: ignore[misc]
    stats = StatisticSet(average=1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        stats.average = 2.0  # type: ignore[misc]


@pytest.mark.parametrize("game_id", [0, -1, True, "5900"])
def test_invalid_id_rejected(game_id):
    with pytest.raises(MalformedResponseError):
        GameRecord(id=game_id, title="Metal Gear")


@pytest.mark.parametrize("title", ["", "   "])
def test_empty_title_rejected(title):
    with pytest.raises(MalformedResponseError):
        GameRecord(id=1, title=title)


def test_statistics_lookup_by_category():
    co_op = StatisticSet(average=298800.0)
    record = GameRecord(id=129232, title="Helldivers 2", co_op=co_op)
    assert record.statistics(Category.CO_OP) is co_op
    assert record.statistics("versus") is None
    assert record.populated_categories() == [Category.CO_OP]


def test_to_dict_is_json_ready():
    record = GameRecord(
        id=5900,
        title="Metal Gear",
        main_story=StatisticSet(average=15000.0, median=14400.0, rushed=None, leisure=25920.0),
    )
    payload = record.to_dict()

    assert payload["id"] == 5900
    assert payload["main_story"] == {"average": 15000.0, "median": 14400.0, "rushed": None, "leisure": 25920.0}
    assert payload["co_op"] is None
    assert json.loads(json.dumps(payload)) == payload
