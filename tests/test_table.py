from stendhal.table import (
    display_row,
    image_url,
    item_url,
    sort_records,
    visible_columns,
)


def _record(name, atk, special=None):
    return {
        "name": name, "class": "swords", "image": name.replace(" ", "_"),
        "value": 0, "level": 0, "rate": 3.0, "atk": atk, "def": 0,
        "range": 0, "dpt": atk / 3, "special": special or [],
    }


class TestSortRecords:
    def test_by_name(self):
        records = [_record("katana", 9), _record("dagger", 6)]
        assert [r["name"] for r in sort_records(records)] == ["dagger", "katana"]

    def test_descending(self):
        records = [_record("dagger", 6), _record("katana", 9)]
        result = sort_records(records, "atk", descending=True)
        assert [r["name"] for r in result] == ["katana", "dagger"]

    def test_stable_for_ties(self):
        records = [_record("b", 6), _record("a", 6)]
        result = sort_records(records, "atk", descending=True)
        assert [r["name"] for r in result] == ["b", "a"]

    def test_unknown_column_sorts_by_name(self):
        records = [_record("katana", 9), _record("dagger", 6)]
        result = sort_records(records, "weight")
        assert [r["name"] for r in result] == ["dagger", "katana"]


class TestVisibleColumns:
    def test_weapons(self):
        assert visible_columns("swords") == [
            "name", "class", "image", "value", "level", "rate", "atk", "dpt",
            "special"]

    def test_ranged(self):
        assert "range" in visible_columns("ranged")
        assert "dpt" in visible_columns("ranged")

    def test_armor(self):
        assert visible_columns("armor") == [
            "name", "class", "image", "value", "level", "def", "special"]

    def test_projectiles(self):
        columns = visible_columns("arrows")
        assert "atk" in columns and "range" in columns

    def test_other(self):
        assert visible_columns("food") == [
            "name", "class", "image", "value", "level", "special"]


class TestRows:
    def test_item_url(self):
        assert item_url(_record("l hand sword", 5)) == \
            "https://stendhalgame.org/item/swords/l_hand_sword.html"

    def test_image_url(self):
        assert image_url(_record("dagger", 6)).endswith(
            "/master/data/sprites/items/swords/dagger.png")

    def test_display_row(self):
        record = _record("dagger", 6, ["fire", "def (1)"])
        assert display_row(record, ["name", "rate", "special"]) == [
            "dagger", "3", "fire, def (1)"]
