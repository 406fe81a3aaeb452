"""Spells known by a caster, and a pending cast of one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tilerogue.position import Position
from tilerogue.spell_type import SpellType


@dataclass
class PlayerSpell:
    """A learned spell together with its remaining charges."""

    spell_type: SpellType
    charges: int

    @classmethod
    def from_spell_type(cls, spell_type: SpellType) -> PlayerSpell:
        """A freshly learned spell with all charges available."""
        return cls(spell_type=spell_type, charges=spell_type.max_charges)


@dataclass
class SpellExecution:
    """A spell being cast by a creature at a target position."""

    spell: PlayerSpell
    caster: Any
    target: Position