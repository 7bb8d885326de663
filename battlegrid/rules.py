"""Game rules: movement, targeting, combat and turn order."""

from __future__ import annotations

import math
import random
import sys

from battlegrid.models import CombatResult, Unit
from battlegrid.state import GameState

_DEFAULT_RNG = random.Random()

# Keys are lower case while unit type names are capitalised, so every
# lookup falls back to the default weight.
_TARGET_WEIGHTS = {"cavalry": 3, "infantry": 2, "archer": 2}
_DEFAULT_TARGET_WEIGHT = 2


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else _DEFAULT_RNG


def is_unit_ally(unit: Unit, other: Unit) -> bool:
    """True if `other` is not a valid enemy of `unit`: itself, a teammate or dead."""
    return other.id == unit.id or other.team == unit.team or not other.is_alive()


def manhattan_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    return abs(x2 - x1) + abs(y2 - y1)


def find_closest_unit(state: GameState, unit: Unit) -> tuple[Unit | None, int]:
    """The nearest living enemy and its distance; (None, sys.maxsize) if none."""
    closest: Unit | None = None
    min_dist = sys.maxsize
    for other in state.units:
        if is_unit_ally(unit, other):
            continue
        dist = manhattan_distance(unit.x, unit.y, other.x, other.y)
        if dist < min_dist:
            min_dist = dist
            closest = other
    return closest, min_dist


def units_on_line(state: GameState, y: int) -> list[Unit]:
    """Living units on row `y`."""
    return [unit for unit in state.living_units() if unit.y == y]


def move_unit(unit: Unit, dx: int, dy: int) -> None:
    """Move a unit, skipping any axis whose result would be negative."""
    if unit.x + dx >= 0:
        unit.x += dx
    if unit.y + dy >= 0:
        unit.y += dy


def throw_dice(faces: int, rng: random.Random | None = None) -> int:
    """Roll a die, giving a value from 1 to faces - 1."""
    if faces < 2:
        raise ValueError(f"a die needs at least 2 faces, got {faces}")
    return _rng(rng).randrange(faces - 1) + 1


def resolve_combat(
    state: GameState, attacker: Unit, target: Unit, rng: random.Random | None = None
) -> CombatResult:
    """Resolve one attack, apply its damage on a hit and record the result."""
    attacker_dice = throw_dice(6, rng)
    defender_dice = throw_dice(6, rng)
    total_attack = attacker.unit_type.stats.attack + attacker_dice
    total_defense = target.unit_type.stats.defense + defender_dice
    damage = 2 if defender_dice == 1 or attacker_dice == 6 else 1

    if total_attack > total_defense:
        target.damage_taken += damage
    result = CombatResult(damage_dealt=damage, target=target, attacker=attacker)
    state.last_combat_results.append(result)
    return result


def change_turn(state: GameState) -> None:
    """Hand over to the other player; a new turn starts after player 2."""
    if state.active_player == 1:
        state.active_player = 2
    else:
        state.turn_number += 1
        state.active_player = 1


def check_winner(state: GameState) -> None:
    """Set the winning team once one side has no living units."""
    remaining = {1: 0, 2: 0}
    for unit in state.living_units():
        remaining[1 if unit.team == 1 else 2] += 1
    if remaining[1] == 0:
        state.winning_team = 2
    elif remaining[2] == 0:
        state.winning_team = 1


def end_turn(state: GameState, rng: random.Random | None = None) -> None:
    """Let every living unit of the active player act, then change turn."""
    check_winner(state)
    if state.winning_team != 0:
        return
    state.last_combat_results = []
    for unit in state.units:
        if unit.team != state.active_player or not unit.is_alive():
            continue
        in_range = enemies_in_range(state, unit)
        if in_range:
            target = pick_target(in_range, rng)
            resolve_combat(state, unit, target, rng)
        else:
            move_unit_towards_closest(state, unit)
    change_turn(state)


def move_cursor(state: GameState, dx: int, dy: int) -> None:
    """Move the cursor, ignoring any axis that would leave the battlefield."""
    width, height = state.battlefield_size
    cursor = state.cursor
    if 0 <= cursor.x + dx < width:
        cursor.x += dx
    if 0 <= cursor.y + dy < height:
        cursor.y += dy


def _toward(magnitude: float, direction: int) -> int:
    return int(math.copysign(magnitude, direction))


def move_unit_towards_closest(state: GameState, unit: Unit) -> bool:
    """Step a unit towards the nearest enemy. Returns True if it moved."""
    closest, dist = find_closest_unit(state, unit)
    speed = unit.unit_type.stats.speed
    if closest is None or dist <= speed:
        return False

    dx = closest.x - unit.x
    dy = closest.y - unit.y
    move_x = _toward(min(abs(dx), speed), dx)
    move_y = _toward(min(abs(dy), speed), dy)

    remaining_speed = speed - max(abs(move_x), abs(move_y))
    if remaining_speed > 0:
        if abs(dx) > abs(dy):
            move_y += _toward(min(remaining_speed, abs(dy - abs(move_y))), dy)
        else:
            move_x += _toward(min(remaining_speed, abs(dx - abs(move_x))), dx)

    new_x = unit.x + move_x
    new_y = unit.y + move_y
    if any(
        other.id != unit.id and other.x == new_x and other.y == new_y and other.is_alive()
        for other in state.units
    ):
        return False

    move_unit(unit, move_x, move_y)
    return True


def enemies_in_range(state: GameState, unit: Unit) -> list[Unit]:
    """Living enemies within the unit's attack range."""
    reach = unit.unit_type.stats.attack_range
    return [
        other
        for other in state.units
        if not is_unit_ally(unit, other)
        and manhattan_distance(unit.x, unit.y, other.x, other.y) <= reach
    ]


def pick_target(targets: list[Unit], rng: random.Random | None = None) -> Unit | None:
    """Pick the enemy with the highest weighted die roll; earlier wins ties."""
    target: Unit | None = None
    highest_score = 0
    for enemy in targets:
        weight = _TARGET_WEIGHTS.get(enemy.unit_type.name, _DEFAULT_TARGET_WEIGHT)
        score = throw_dice(6, rng) * weight
        if score > highest_score:
            highest_score = score
            target = enemy
    return target