import json

import pytest

from tilerogue import spell_type
from tilerogue.spell_type import (
    SpellAreaKind,
    SpellKind,
    SpellType,
    get_spell_types,
    load_spell_types,
    parse_spell_types,
    set_global_spell_types,
)


def _entry(index, **overrides):
    data = {
        "index": index,
        "name": f"Spell {index}",
        "kind": "Attack",
        "area_kind": "Missile",
        "description": "A test spell",
        "max_charges": 3,
        "range": 6,
        "basepower": 10,
        "cost": 20,
    }
    data.update(overrides)
    return data


@pytest.fixture
def fresh_registry(monkeypatch):
    monkeypatch.setattr(spell_type, "_spell_types", None)


def test_from_dict_fields():
    spell = SpellType.from_dict(_entry(1, kind="Heal", area_kind="Area", area_radius=2))
    assert spell.kind is SpellKind.HEAL
    assert spell.area_kind is SpellAreaKind.AREA
    assert spell.area_radius == 2
    assert spell.max_charges == 3
    assert spell.name == "Spell 1"


def test_from_dict_missing_radius_is_none():
    assert SpellType.from_dict(_entry(1)).area_radius is None
    assert SpellType.from_dict(_entry(1, area_radius=None)).area_radius is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"kind": "Teleport"},
        {"area_kind": "Cone"},
        {"cost": -1},
        {"range": "far"},
        {"max_charges": True},
        {"name": 5},
    ],
)
def test_from_dict_rejects_bad_values(overrides):
    with pytest.raises(ValueError):
        SpellType.from_dict(_entry(1, **overrides))


def test_from_dict_rejects_missing_field():
    data = _entry(1)
    del data["basepower"]
    with pytest.raises(ValueError):
        SpellType.from_dict(data)


def test_parse_places_by_index():
    table = parse_spell_types(json.dumps([_entry(3), _entry(1)]))
    assert len(table) == 4
    assert table[0] is None
    assert table[2] is None
    assert table[1].index == 1
    assert table[3].index == 3


def test_parse_empty_list_gives_single_slot():
    assert parse_spell_types("[]") == [None]


def test_parse_rejects_non_list():
    with pytest.raises(ValueError):
        parse_spell_types(json.dumps(_entry(1)))


def test_parse_rejects_bad_json():
    with pytest.raises(ValueError):
        parse_spell_types("{not json")


def test_load_from_file(tmp_path):
    path = tmp_path / "spells.json"
    path.write_text(json.dumps([_entry(2, kind="Summon")]), encoding="utf-8")
    table = load_spell_types(path)
    assert table[2].kind is SpellKind.SUMMON
    assert table[:2] == [None, None]


def test_registry_unset_raises(fresh_registry):
    with pytest.raises(RuntimeError):
        get_spell_types()


def test_registry_set_once(fresh_registry):
    table = parse_spell_types(json.dumps([_entry(1)]))
    set_global_spell_types(table)
    assert get_spell_types() == table
    with pytest.raises(RuntimeError):
        set_global_spell_types(table)