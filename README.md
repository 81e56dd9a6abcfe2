# arcadelab

A two-character tile platformer you can play in a pygame window, and the
game logic of a top-down zombie arena shooter. The rules of both games are
kept apart from drawing, so they can be used and tested without a window.

## The platformer

Two characters, Thomas and Bob, have to reach the goal tile of each level
before the time runs out. Levels are text grids of digits, one digit per
tile:

| Digit | Tile        |
|-------|-------------|
| 0     | empty space |
| 1     | solid block |
| 2     | fire        |
| 3     | water       |
| 4     | goal        |

Touching fire or water, or leaving the map, sends a character back to the
level's start. When both characters reach the goal, or the time runs out,
the next level loads. After the fourth level play starts again from the
first, with a time limit that is a tenth shorter on each new cycle.

### Running it

```
pip install .
arcadelab
```

The game opens full screen. To play in a window instead:

```
arcadelab --window 1280 720
```

Controls:

- Return: start playing the loaded level
- W / A / D: Thomas jumps and moves
- Up / Left / Right: Bob jumps and moves
- Q: switch which character the camera follows
- E: toggle split screen (Thomas on the left, Bob on the right)
- Escape, or closing the window: quit

The game reads, relative to the working directory, the images
`graphics/background.png`, `graphics/tiles_sheet.png`, `graphics/thomas.png`
and `graphics/bob.png`, and the levels `levels/level1.txt` to
`levels/level4.txt`. These files are not part of the package; you supply
them.

### Using the pieces

- `arcadelab.game.Engine`: the game state; `update(dt)` advances one frame,
  `on_key_pressed` and `handle_input` take input, `view_centers()` says where
  the camera looks.
- `arcadelab.characters`: `Thomas`, `Bob` and their shared
  `PlayableCharacter` physics, steered by `Key` values.
- `arcadelab.levels`: `parse_level`, `build_level_quads` and
  `LevelManager`, which steps through the four levels.
- `arcadelab.app.GameWindow`: the pygame window that draws an `Engine`.

## The zombie arena

The arena shooter's pieces are in the package as a library:

- `arcadelab.bullet.Bullet`: a bullet with a fixed speed that stops 1000
  pixels from where it was fired.
- `arcadelab.zombie.Zombie` and `ZombieKind`: bloaters, chasers and
  crawlers, each with its own speed and health, that walk towards a given
  point.
- `arcadelab.pickup.Pickup` and `PickupKind`: health and ammo pickups that
  appear, expire and reappear on a timer, and can be upgraded.
- `arcadelab.arena.create_background` and `create_horde`: the tiled floor
  and the zombies spawned along the arena's edges.
- `arcadelab.weapons.Gun`: clip, spare ammunition, reloading, fire rate and
  a pool of 100 bullets.
- `arcadelab.session`: `GameState`, `Upgrade`, `Scoreboard`,
  `load_hi_score` / `save_hi_score`, `wave_arena`, `wave_zombie_count`,
  `hud_text`, and `ArenaSession`, which moves between states, starts waves
  and counts kills.

A short example:

```python
from arcadelab.arena import create_horde
from arcadelab.session import ArenaSession, Upgrade, wave_arena, wave_zombie_count

zombies = create_horde(wave_zombie_count(1), wave_arena(1))

session = ArenaSession(scores_path="gamedata/scores.txt")
session.press_return()                  # game over -> levelling up
session.choose_upgrade(Upgrade.FIRE_RATE)  # starts wave 1
print(session.hud().zombies)            # "Zombies:5"
```

### What the arena does not do

There is no command or window for the arena shooter, and no player
character for it: `ArenaSession` only counts the health and speed upgrades
chosen. Nothing runs its frames for you; moving zombies and bullets,
checking hits and collecting pickups is left to the caller. Neither game
plays sounds, and the platformer shows no on-screen timer or text.

## Tests

```
pip install .[test]
pytest
```