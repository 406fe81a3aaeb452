import pytest

from tilerogue.player_spell import PlayerSpell, SpellExecution
from tilerogue.position import Position
from tilerogue.spell_type import SpellAreaKind, SpellKind, SpellType


@pytest.fixture
def bolt():
    return SpellType(
        index=1,
        name="Bolt",
        kind=SpellKind.ATTACK,
        area_kind=SpellAreaKind.MISSILE,
        area_radius=None,
        description="A bolt",
        max_charges=4,
        range=5,
        basepower=8,
        cost=10,
    )


def test_from_spell_type_has_full_charges(bolt):
    spell = PlayerSpell.from_spell_type(bolt)
    assert spell.charges == bolt.max_charges
    assert spell.spell_type is bolt


def test_charges_are_per_instance(bolt):
    first = PlayerSpell.from_spell_type(bolt)
    second = PlayerSpell.from_spell_type(bolt)
    first.charges -= 1
    assert second.charges == bolt.max_charges
    assert first.charges == bolt.max_charges - 1


def test_spell_execution_holds_parts(bolt):
    spell = PlayerSpell.from_spell_type(bolt)
    caster = object()
    target = Position(2, 3)
    execution = SpellExecution(spell=spell, caster=caster, target=target)
    assert execution.caster is caster
    assert execution.target == Position(2, 3)
    assert execution.spell.spell_type.name == "Bolt"