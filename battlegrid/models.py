"""Data types for units, their stats and combat results."""

from __future__ import annotations

from dataclasses import dataclass

from battlegrid import assets


@dataclass
class Tile:
    """One square of terrain."""

    terrain: str = "grass"


@dataclass(frozen=True)
class Stats:
    """Combat statistics shared by every unit of a type."""

    attack: int
    health: int
    defense: int
    attack_range: int
    speed: int


@dataclass(frozen=True)
class UnitType:
    """A kind of unit: its display name, map symbol and stats."""

    name: str
    symbol: str
    stats: Stats


@dataclass(eq=False)
class Unit:
    """A unit on the battlefield. Units compare by identity."""

    id: int
    unit_type: UnitType
    team: int
    x: int
    y: int
    damage_taken: int = 0

    def is_alive(self) -> bool:
        """True while the damage taken is below the unit's health."""
        return self.damage_taken < self.unit_type.stats.health

    def remaining_health(self) -> int:
        """Health left after the damage taken."""
        return self.unit_type.stats.health - self.damage_taken


@dataclass
class CombatResult:
    """The outcome of one attack."""

    damage_dealt: int
    target: Unit
    attacker: Unit


@dataclass
class CursorPos:
    """Position of the selection cursor on the battlefield."""

    x: int = 0
    y: int = 0


UNIT_TYPES: dict[str, UnitType] = {
    "infantry": UnitType(
        name="Infantry",
        symbol=assets.INFANTRY_SYMBOL,
        stats=Stats(attack=4, health=6, defense=5, attack_range=1, speed=1),
    ),
    "cavalry": UnitType(
        name="Cavalry",
        symbol=assets.CAVALRY_SYMBOL,
        stats=Stats(attack=7, health=5, defense=4, attack_range=1, speed=2),
    ),
    "archer": UnitType(
        name="Archer",
        symbol=assets.ARCHER_SYMBOL,
        stats=Stats(attack=5, health=4, defense=2, attack_range=3, speed=1),
    ),
}