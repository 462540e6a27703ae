import json

import pytest

from ff4data import IndexOutOfRange, parse_monster_data
from ff4data.export import combine_monster, dump_monsters, monster_filename


@pytest.fixture
def data(image_builder):
    image = (
        image_builder.set_name(0, [0x4F, 0x5C, 0x62, 0x5C])
        .set_record(0, [0x83, 0x06, 0x00, 0x01, 0x02, 0x00, 0x02, 0x41, 0x01, 0x88, 0x00, 0x01, 0x00, 0x80])
        .set_record(1, [0x01, 0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xF0, 0x00])
        .set_u16("monster_xp", 0, 1200)
        .set_row("monster_stats", 1, [0x01, 0x4B, 0x13])
        .set_row("monster_drop_tables", 1, [0x42, 0x43, 0x44, 0x45])
        .set_groups(bytes([0xFF, 0x08, 0x04, 0x09, 0x05, 0xFF]))
        .build()
    )
    return parse_monster_data(image)


def test_combine_monster(data) -> None:
    combined = combine_monster(data, 0)
    assert combined["name"] == "Naga"
    assert combined["xp"] == 1200
    assert combined["monster"]["is_boss"] is True
    assert combined["monster"]["attack_statuses"] == ("poison",)
    assert combined["monster"]["creature_types"] == ("undead",)
    assert combined["physical_attack"] == {"base": 0x13, "mult": 0x01, "rate": 0x4B}
    assert combined["drop_table"] == {
        "common": 0x42,
        "uncommon": 0x43,
        "rare": 0x44,
        "very_rare": 0x45,
    }
    assert combined["ai"] == [
        {"condition_set_index": 0x08, "action_index": 0x04},
        {"condition_set_index": 0x09, "action_index": 0x05},
    ]


def test_combine_monster_without_drop_or_group(data) -> None:
    combined = combine_monster(data, 1)
    assert combined["drop_table"] is None
    assert combined["monster"]["drop_table_index"] is None
    assert combined["ai"] is None  # group 0xF0 was never decoded


def test_dump_monsters(data, tmp_path) -> None:
    out = tmp_path / "out" / "monster"
    written = dump_monsters(data, out)
    assert len(written) == len(data.monsters)
    assert written[0].name == "00-Naga.json"
    assert monster_filename(data, 0xA6) == "a6-.json"

    payload = json.loads(written[0].read_text(encoding="utf-8"))
    assert payload["monster"]["level"] == 3
    assert payload["monster"]["attack_statuses"] == ["poison"]
    assert payload["monster"]["weaknesses"] is None


def test_dump_monsters_bad_index_writes_nothing(image_builder, tmp_path) -> None:
    image = image_builder.set_record(
        7, [0x01, 0x01, 0x00, 0x00, 0x00, 0xE0, 0x00, 0x00, 0x00, 0x00]
    ).build()
    data = parse_monster_data(image)
    with pytest.raises(IndexOutOfRange) as excinfo:
        dump_monsters(data, tmp_path / "out")
    assert excinfo.value.table == "monster_stats"
    assert excinfo.value.index == 0xE0
    assert not (tmp_path / "out").exists()
