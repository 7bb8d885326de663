# battlegrid

A small turn-based battle simulator that runs in your terminal. Two armies of
infantry, cavalry and archers face each other on a 32 × 24 grass field. On each
turn, the units of the active team act by themselves. A unit attacks an enemy
within its range. If no enemy is in range, it marches toward the closest
living enemy. Dice settle each combat. The game ends when one team has no
living units left.

## Installation

```
pip install .
```

## Playing

```
battlegrid
battlegrid --seed 42
```

`--seed` fixes the dice, so the same seed replays the same battle.

The screen has three framed panels:

- **Battlefield**: the grid. Team 1 units are shown in green and team 2 units
  in red. `[I]` marks infantry, `[C]` cavalry and `[A]` archers. A status line
  below the grid shows the cursor position, the active player and the turn
  number.
- **Unit info** (top right): the attack, defence and remaining health of the
  living unit under the cursor, or "No unit at this position".
- **Combat log** (bottom): the attacks made in the most recent turn, the
  victory message once a team has won, or the title logo before any attack.

You do not control the units yourself. The cursor is only for inspecting units,
and Space lets the active team's units act.

### Controls

| Key            | Action                          |
|----------------|---------------------------------|
| Arrow keys     | Move the cursor                 |
| Space          | End the current player's turn   |
| Ctrl+C         | Quit                            |

## Unit types

| Type     | Health | Attack | Defence | Speed | Range |
|----------|--------|--------|---------|-------|-------|
| Infantry | 6      | 4      | 5       | 1     | 1     |
| Cavalry  | 5      | 7      | 4       | 2     | 1     |
| Archer   | 4      | 5      | 2       | 1     | 3     |

Distances are counted in Manhattan distance. Each die gives a value from 1
to 5. An attack hits when attack plus the attacker's die is greater than
defence plus the defender's die. A hit deals 1 damage, or 2 if the defender
rolls a 1. The combat log lists every attack with the damage it would deal,
whether it hit or not. When several enemies are in range, the target is chosen
by a die roll.

A unit does not move onto a square held by a living unit. If its path is
blocked, it stays where it is for that turn.

## Using the engine from Python

The rules work without the terminal interface:

```python
import random

from battlegrid.state import GameState
from battlegrid.rules import end_turn
from battlegrid.render import combat_info_lines

state = GameState()
rng = random.Random(42)
for _ in range(500):
    if state.winning_team:
        break
    end_turn(state, rng)
print("\n".join(combat_info_lines(state)))
```

- `battlegrid.state.GameState` holds the units, cursor, active player, turn
  number, last combat results and winning team (0 while the game goes on).
- `battlegrid.rules` has `end_turn`, `move_cursor`, `resolve_combat`,
  `enemies_in_range`, `find_closest_unit`, `move_unit_towards_closest` and the
  other rules. Functions that roll dice take an optional `random.Random`.
- `battlegrid.render` returns the panels as lists of lines (`battlefield_lines`,
  `status_line`, `combat_info_lines`, `unit_info_lines`). The lines contain
  ANSI colour codes.
- `battlegrid.app.compose_screen(state, width, height)` lays out the whole
  screen as lines of text.

## Limitations

The game has a single fixed starting layout and one kind of terrain (grass).
It cannot save or load games, and you cannot give orders to individual units.

## Running the tests

```
pip install ".[test]"
pytest
```