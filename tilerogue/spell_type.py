"""Spell definitions loaded from JSON and a process-wide registry of them."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from os import PathLike
from typing import Any

_U32_MAX = 2**32 - 1


class SpellKind(enum.Enum):
    ATTACK = "Attack"
    HEAL = "Heal"
    BUFF = "Buff"
    DEBUFF = "Debuff"
    SUMMON = "Summon"


class SpellAreaKind(enum.Enum):
    MISSILE = "Missile"
    AREA = "Area"
    BOMB = "Bomb"


def _u32(data: dict[str, Any], key: str) -> int:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an unsigned integer")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"field {key!r} is out of range: {value}")
    return value


def _string(data: dict[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _enum(data: dict[str, Any], key: str, kind: type[enum.Enum]) -> Any:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    try:
        return kind(data[key])
    except ValueError:
        raise ValueError(f"unknown {key!r} value: {data[key]!r}") from None


@dataclass(frozen=True)
class SpellType:
    """A kind of spell a caster can learn."""

    index: int
    name: str
    kind: SpellKind
    area_kind: SpellAreaKind
    area_radius: int | None
    description: str
    max_charges: int
    range: int
    basepower: int
    cost: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpellType:
        """Build a spell type from one decoded JSON object."""
        if not isinstance(data, dict):
            raise ValueError("spell type entry must be an object")
        area_radius = None
        if data.get("area_radius") is not None:
            area_radius = _u32(data, "area_radius")
        return cls(
            index=_u32(data, "index"),
            name=_string(data, "name"),
            kind=_enum(data, "kind", SpellKind),
            area_kind=_enum(data, "area_kind", SpellAreaKind),
            area_radius=area_radius,
            description=_string(data, "description"),
            max_charges=_u32(data, "max_charges"),
            range=_u32(data, "range"),
            basepower=_u32(data, "basepower"),
            cost=_u32(data, "cost"),
        )


def parse_spell_types(text: str) -> list[SpellType | None]:
    """Parse a JSON list of spells into a list indexed by each spell's index.

    Unused indexes hold ``None``; the list is never empty.
    """
    entries = json.loads(text)
    if not isinstance(entries, list):
        raise ValueError("spell file must hold a JSON list")
    spells = [SpellType.from_dict(entry) for entry in entries]
    size = max((spell.index for spell in spells), default=0) + 1
    table: list[SpellType | None] = [None] * size
    for spell in spells:
        table[spell.index] = spell
    return table


def load_spell_types(
    path: str | PathLike[str] = "assets/spells.json",
) -> list[SpellType | None]:
    """Read and parse a spell definition file."""
    with open(path, encoding="utf-8") as handle:
        return parse_spell_types(handle.read())


_spell_types: list[SpellType | None] | None = None


def set_global_spell_types(spell_types: list[SpellType | None]) -> None:
    """Install the spell table; may be done only once."""
    global _spell_types
    if _spell_types is not None:
        raise RuntimeError("global spell types already set")
    _spell_types = list(spell_types)


def get_spell_types() -> list[SpellType | None]:
    """Return the installed spell table."""
    if _spell_types is None:
        raise RuntimeError("global spell types not initialized")
    return _spell_types