# zinf

A small top-down action game played on a 24 × 16 tile grid. You walk
through each level and use your sword on the monsters that wander it. Clear
every monster to move on to the next level, and clear all three levels to win.

## Installing

```
pip install .
```

This also installs `pygame`, which the game uses for its window, input and
drawing.

## Playing

```
zinf
```

By default the game looks for the sprite images in `./resources` and for
the level files in the current directory. Both can be changed:

```
zinf --resources path/to/sprites --levels path/to/levels
```

The `resources` directory must hold these images: `Link_front.png`,
`Link_back.png`, `Link_left.png`, `Link_right.png`, `Enemy_front.png`,
`Enemy_back.png`, `Enemy_left.png`, `Enemy_right.png`, `Ground.png`,
`Obstacle.png`, `Attack_up.png`, `Attack_down.png`, `Attack_left.png` and
`Attack_right.png`. A missing image stops the game with `FileNotFoundError`.

The game opens on a menu. **Up** and **Down** move between options (the
cursor wraps around) and **Enter** picks one.

During play:

| Key | Action |
|-----|--------|
| W / A / S / D | Move up / left / down / right one tile |
| J | Swing the sword in the direction you face |

- The sword hits every monster on the tiles in front of you, three tiles deep
  on levels 1 and 2 and two tiles deep on level 3. Each monster hit is worth
  100 points. A new swing can start only once the last one (0.3 s) is over.
- Walking into a monster costs a life, pushes you back to where you came from
  and turns you around. You are then invincible for 1.5 seconds and your
  sprite blinks.
- A hit monster flashes red for half a second before it disappears.
- Monsters take a random step every 0.8 s on level 1, 0.6 s on level 2 and
  0.4 s on level 3. They do not walk into obstacles, off the map or onto
  each other.
- Losing all three lives ends the game. The game-over screen and the victory
  screen both let you restart from level 1 or quit.
- The bar at the top shows lives (`VIDAS`), level (`NIVEL`) and score
  (`SCORE`).
- Closing the window ends the game from any screen.

## Level files

Levels are plain text files named `nivel1.txt`, `nivel2.txt` and
`nivel3.txt`. Each holds 16 rows of 24 characters; line breaks are ignored,
so only the count of characters matters. Fewer than 384 characters raises
`ValueError`.

- `P` is an obstacle that neither you nor the monsters can enter
- `J` is where the player starts
- `M` places a monster (at most 20 per level; further ones are ignored)
- any other character is open ground

A level with no `M` counts as won at once.

## What it does not do

The main menu lists a `Scoreboard` option, but no scores are kept: picking
it leaves you on the menu. Scores are not saved between games.

## Using the pieces

The game logic does not need a window, so it can be driven directly:

```python
import random

from zinf.gameplay import GameplaySession
from zinf.level import Direction, parse_level
from zinf.player import Player

text = "J" + "." * 23 + "\n" + "M" + "." * 23 + "\n" + ("." * 24 + "\n") * 14
level = parse_level(text)

session = GameplaySession(level, 1, Player(), rng=random.Random(0))
result = session.step(1 / 60, direction=Direction.DOWN, attack_pressed=True)
```

- `zinf.level`: `parse_level`, `load_level`, the `Level` grid (`tile`,
  `is_blocked`) and `Direction` (`step`).
- `zinf.player.Player`: position, lives, score and invincibility.
- `zinf.monster.MonsterPack`: the level's monsters and their moves.
- `zinf.combat`: `Combat` for sword attacks, `attack_range` and
  `process_collisions`.
- `zinf.gameplay.GameplaySession.step` advances one frame given the elapsed
  time, the direction pressed and whether the attack key was pressed, and
  returns a `GameplayResult` (`WON` or `LOST`) once the level is over, or
  `None`.
- `zinf.screens.OptionMenu` is the wrapping option list behind the menu
  screens; `zinf.app.GameFlow` decides which screen comes next.

## Running the tests

```
pip install .[test]
pytest
```