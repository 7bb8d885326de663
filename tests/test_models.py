import dataclasses

import pytest

from battlegrid import assets
from battlegrid.models import (
    UNIT_TYPES,
    CombatResult,
    CursorPos,
    Stats,
    Tile,
    Unit,
)


def make_unit(kind="infantry", damage=0):
    return Unit(id=0, unit_type=UNIT_TYPES[kind], team=1, x=0, y=0, damage_taken=damage)


def test_unit_type_stats_match_source():
    infantry = UNIT_TYPES["infantry"].stats
    assert infantry == Stats(attack=4, health=6, defense=5, attack_range=1, speed=1)
    cavalry = UNIT_TYPES["cavalry"].stats
    assert cavalry == Stats(attack=7, health=5, defense=4, attack_range=1, speed=2)
    archer = UNIT_TYPES["archer"].stats
    assert archer == Stats(attack=5, health=4, defense=2, attack_range=3, speed=1)


@pytest.mark.parametrize(
    "kind, name, symbol",
    [
        ("infantry", "Infantry", assets.INFANTRY_SYMBOL),
        ("cavalry", "Cavalry", assets.CAVALRY_SYMBOL),
        ("archer", "Archer", assets.ARCHER_SYMBOL),
    ],
)
def test_unit_carries_type_name_and_symbol(kind, name, symbol):
    unit = make_unit(kind)
    assert unit.unit_type.name == name
    assert unit.unit_type.symbol == symbol
    assert unit.remaining_health() == UNIT_TYPES[kind].stats.health


@pytest.mark.parametrize("kind", ["infantry", "cavalry", "archer"])
def test_fresh_unit_is_alive_with_full_health(kind):
    unit = make_unit(kind)
    assert unit.is_alive() is True
    assert unit.remaining_health() == UNIT_TYPES[kind].stats.health


@pytest.mark.parametrize("kind", ["infantry", "cavalry", "archer"])
def test_unit_dies_when_damage_reaches_health(kind):
    health = UNIT_TYPES[kind].stats.health
    assert make_unit(kind, damage=health - 1).is_alive() is True
    assert make_unit(kind, damage=health).is_alive() is False
    assert make_unit(kind, damage=health + 1).is_alive() is False


def test_remaining_health_subtracts_damage():
    unit = make_unit("infantry", damage=2)
    assert unit.remaining_health() + unit.damage_taken == unit.unit_type.stats.health


def test_units_compare_by_identity():
    first = make_unit()
    second = make_unit()
    assert first == first
    assert not (first == second)


def test_stats_are_immutable():
    stats = Stats(attack=1, health=2, defense=3, attack_range=1, speed=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        stats.attack = 99
    assert stats.attack == 1


def test_defaults_of_tile_and_cursor():
    assert Tile().terrain == "grass"
    cursor = CursorPos()
    assert (cursor.x, cursor.y) == (0, 0)


def test_combat_result_holds_units():
    attacker = make_unit()
    target = make_unit("archer")
    result = CombatResult(damage_dealt=1, target=target, attacker=attacker)
    assert result.attacker is attacker
    assert result.target is target