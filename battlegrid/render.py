"""Text rendering of the battlefield, combat log and unit details."""

from __future__ import annotations

from battlegrid import assets
from battlegrid.models import Tile, Unit
from battlegrid.state import GameState

_TERRAIN_TEXTURES = {"grass": assets.GRASS_TEXTURE}


def _team_colour(unit: Unit) -> str:
    return assets.GREEN_TEXT if unit.team == 1 else assets.RED_TEXT


def unit_name(unit: Unit) -> str:
    """The unit's symbol and name, coloured by team."""
    return (
        f"{_team_colour(unit)}[{unit.unit_type.symbol}]"
        f"{unit.unit_type.name}{assets.RESET_TEXT}"
    )


def _unit_lookup(state: GameState) -> dict[tuple[int, int], Unit]:
    """Living units by position; a later unit hides an earlier one."""
    return {(unit.x, unit.y): unit for unit in state.living_units()}


def _render_cell(lookup: dict[tuple[int, int], Unit], tile: Tile, x: int, y: int) -> str:
    unit = lookup.get((x, y))
    if unit is not None:
        return f"{_team_colour(unit)}[{unit.unit_type.symbol}]{assets.RESET_TEXT}"
    return _TERRAIN_TEXTURES.get(tile.terrain, assets.GRASS_TEXTURE)


def cell_render(state: GameState, x: int, y: int) -> str:
    """The three-character drawing of one battlefield square."""
    return _render_cell(_unit_lookup(state), Tile(), x, y)


def battlefield_lines(state: GameState) -> list[str]:
    """One rendered line per battlefield row."""
    lookup = _unit_lookup(state)
    tile = Tile()
    return [
        "".join(_render_cell(lookup, tile, x, y) for x in range(state.width))
        for y in range(state.height)
    ]


def status_line(state: GameState) -> str:
    """Cursor position, active player and turn number."""
    return (
        f"{state.cursor.x}, {state.cursor.y} "
        f"Current player: {state.active_player}, current turn: {state.turn_number}"
    )


def combat_info_lines(state: GameState) -> list[str]:
    """The victory message, the last combat results, or the logo."""
    if state.winning_team != 0:
        return [f"Victory for team {state.winning_team}!"]
    if not state.last_combat_results:
        return assets.GAME_LOGO.split("\n")
    return [
        f"{unit_name(result.attacker)} attacked {unit_name(result.target)}, "
        f"{result.damage_dealt} damage dealt."
        for result in state.last_combat_results
    ]


def unit_info_lines(state: GameState) -> list[str]:
    """Details of the living unit under the cursor."""
    unit = state.unit_at(state.cursor.x, state.cursor.y)
    if unit is None:
        return ["No unit at this position"]
    stats = unit.unit_type.stats
    return [
        unit_name(unit),
        f"ATK: {stats.attack}",
        f"DEF: {stats.defense}",
        f"HP: {unit.remaining_health()}/{stats.health}",
    ]