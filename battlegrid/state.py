"""The state of one game: units, turn, cursor and results."""

from __future__ import annotations

from dataclasses import dataclass, field

from battlegrid.models import UNIT_TYPES, CombatResult, CursorPos, Unit

_DEFAULT_LAYOUT = [
    (0, "infantry", 1, 12, 3),
    (1, "infantry", 1, 15, 3),
    (2, "infantry", 1, 17, 3),
    (7, "cavalry", 1, 6, 2),
    (3, "infantry", 2, 13, 20),
    (4, "infantry", 2, 20, 20),
    (5, "infantry", 2, 16, 20),
    (6, "archer", 2, 17, 20),
]


def default_units() -> list[Unit]:
    """Return a fresh copy of the starting army layout."""
    return [
        Unit(id=unit_id, unit_type=UNIT_TYPES[kind], team=team, x=x, y=y)
        for unit_id, kind, team, x, y in _DEFAULT_LAYOUT
    ]


@dataclass
class GameState:
    """Everything that changes while a game is played."""

    units: list[Unit] = field(default_factory=default_units)
    cursor: CursorPos = field(default_factory=CursorPos)
    battlefield_size: tuple[int, int] = (32, 24)
    active_player: int = 1
    turn_number: int = 1
    last_combat_results: list[CombatResult] = field(default_factory=list)
    winning_team: int = 0

    @property
    def width(self) -> int:
        return self.battlefield_size[0]

    @property
    def height(self) -> int:
        return self.battlefield_size[1]

    def living_units(self) -> list[Unit]:
        """Units that are still alive, in their original order."""
        return [unit for unit in self.units if unit.is_alive()]

    def unit_at(self, x: int, y: int) -> Unit | None:
        """The first living unit at the given position, or None."""
        return next(
            (unit for unit in self.units if unit.x == x and unit.y == y and unit.is_alive()),
            None,
        )