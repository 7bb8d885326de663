import re

from battlegrid import assets
from battlegrid.models import CombatResult
from battlegrid.render import (
    battlefield_lines,
    cell_render,
    combat_info_lines,
    status_line,
    unit_info_lines,
    unit_name,
)
from battlegrid.state import GameState

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _unit(state, unit_id):
    return next(unit for unit in state.units if unit.id == unit_id)


def test_unit_name_team_one_is_green():
    state = GameState()
    name = unit_name(_unit(state, 0))
    assert name == assets.GREEN_TEXT + "[I]Infantry" + assets.RESET_TEXT


def test_unit_name_team_two_is_red():
    state = GameState()
    name = unit_name(_unit(state, 6))
    assert name == assets.RED_TEXT + "[A]Archer" + assets.RESET_TEXT


def test_empty_cell_is_grass():
    state = GameState()
    assert cell_render(state, 0, 0) == assets.GRASS_TEXTURE


def test_cell_with_unit_shows_symbol():
    state = GameState()
    assert cell_render(state, 12, 3) == assets.GREEN_TEXT + "[I]" + assets.RESET_TEXT
    assert cell_render(state, 6, 2) == assets.GREEN_TEXT + "[C]" + assets.RESET_TEXT


def test_dead_unit_is_not_drawn():
    state = GameState()
    unit = _unit(state, 0)
    unit.damage_taken = unit.unit_type.stats.health
    assert cell_render(state, 12, 3) == assets.GRASS_TEXTURE


def test_later_unit_hides_earlier_one_on_same_square():
    state = GameState()
    first, second = _unit(state, 0), _unit(state, 6)
    second.x, second.y = first.x, first.y
    assert cell_render(state, first.x, first.y) == assets.RED_TEXT + "[A]" + assets.RESET_TEXT


def test_battlefield_lines_dimensions():
    state = GameState()
    lines = battlefield_lines(state)
    assert len(lines) == state.height
    assert all(len(_ANSI.sub("", line)) == 3 * state.width for line in lines)


def test_battlefield_lines_contain_units_on_their_rows():
    state = GameState()
    lines = battlefield_lines(state)
    assert lines[3].count("[I]") == 3
    assert lines[20].count("[") == 4
    assert "[" not in lines[0]


def test_status_line_default():
    assert status_line(GameState()) == "0, 0 Current player: 1, current turn: 1"


def test_status_line_follows_state():
    state = GameState()
    state.cursor.x, state.cursor.y = 5, 7
    state.active_player, state.turn_number = 2, 3
    assert status_line(state) == "5, 7 Current player: 2, current turn: 3"


def test_combat_info_victory():
    state = GameState()
    state.winning_team = 2
    assert combat_info_lines(state) == ["Victory for team 2!"]


def test_combat_info_shows_logo_without_results():
    assert "\n".join(combat_info_lines(GameState())) == assets.GAME_LOGO


def test_combat_info_lists_results():
    state = GameState()
    attacker, target = _unit(state, 0), _unit(state, 3)
    state.last_combat_results = [
        CombatResult(damage_dealt=2, target=target, attacker=attacker)
    ]
    assert combat_info_lines(state) == [
        f"{unit_name(attacker)} attacked {unit_name(target)}, 2 damage dealt."
    ]


def test_unit_info_for_hovered_unit():
    state = GameState()
    state.cursor.x, state.cursor.y = 12, 3
    unit = _unit(state, 0)
    unit.damage_taken = 2
    assert unit_info_lines(state) == [
        unit_name(unit),
        "ATK: 4",
        "DEF: 5",
        "HP: 4/6",
    ]


def test_unit_info_without_unit():
    assert unit_info_lines(GameState()) == ["No unit at this position"]