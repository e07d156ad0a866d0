# pillarsofself

*The 7 Pillars of Self* is a short, calm game about self-reflection. You visit
seven pillars: Emotional, Purpose, Financial, Physical, Mental, Environmental
and Spiritual. Each pillar has a small activity. When you finish the activity,
that pillar lights up. When all seven are lit, a completion screen appears.

The package also holds the small toolkit the game is built on. It has 2D vector
helpers, an entity/component store, an asset registry, a music player and a
scene/engine loop. The display, fonts, images and sound all use `pygame`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

Start the journey:

```
pillars-of-self
```

This opens a 1200×800 window. It uses pygame's built-in font, so it needs no
asset files.

| Screen                                | Keys                                                            |
|---------------------------------------|-----------------------------------------------------------------|
| Welcome                               | `Enter` goes to the main menu                                   |
| Main menu                             | `1`–`7` opens a pillar                                          |
| Emotional, Purpose, Financial, Mental | `1`–`4` selects an answer, then `Enter` activates the pillar    |
| Physical                              | a breathing circle grows and shrinks; `Space` activates the pillar |
| Environmental                         | `Space` grows the tree by a tenth; a click in the tree area grows it by a fifth; a full tree activates the pillar |
| Spiritual                             | `Space` activates the pillar                                    |
| Completion                            | `Enter` clears all pillars and returns to the main menu         |

On every screen except the welcome screen, `Escape` returns to the main menu.

### Menu-driven variant

```
pillars-of-self-menu [--config PATH] [--assets PATH]
```

This variant starts from a title menu run by `GameEngine`. Both options
default to `../config.txt`.

- `--config` names the file that holds the line `Window <width> <height>`. If
  several lines are valid, the last one wins. A word starting with `#` turns
  the rest of its line into a comment, and the comment text is printed. If the
  file has no valid `Window` line, the program stops with `ValueError`.
- `--assets` names the file of assets, one per line. Lines that start with any
  other word are ignored.

```
Font      <name> <path>
Texture   <name> <path>
Sprite    <name> <texture> <left> <top> <width> <height>
Animation <name> <texture> <frame-width> <frame-height> <frames> <seconds> <repeat>
```

In an `Animation` line, `<repeat>` is `0` or `1`. A malformed `Sprite` or
`Animation` line stops the reading of further lines of that kind. The menu
needs two fonts, `main` and `Arcade`:

- a font that cannot be loaded raises `RuntimeError`;
- a texture that cannot be loaded is reported on stderr and skipped.

Menu keys:

- `Enter` starts the seven-pillar journey in the same window.
- `Escape` closes the window.
- `W`/`Up` and `S`/`Down` move through the menu entries. There is only one entry.

## Using the toolkit

The journey logic in `pillarsofself.pillars` does not depend on the display,
so you can drive it directly:

```python
from pillarsofself.pillars import GameState, Key, PillarsJourney

journey = PillarsJourney()
journey.handle_key(Key.ENTER)   # welcome -> main menu
journey.handle_key(Key.NUM6)    # open the Environmental pillar
for _ in range(10):
    journey.handle_key(Key.SPACE)
assert journey.state is GameState.MAIN_MENU
assert journey.activated[5]
```

`PillarsJourney.update(dt)` moves the breathing and glow animations forward by
`dt` seconds. It switches to `GameState.COMPLETION` once every pillar is
active. `PillarsView(surface, journey).render()` draws the current screen on a
pygame surface and returns the texts it drew.

Entities are created through an `EntityManager`:

- an added entity appears in `get_entities()` after the next `update()`;
- a destroyed entity is removed on the next `update()`.

```python
from pillarsofself.components import CTransform
from pillarsofself.entity_manager import EntityManager
from pillarsofself.utilities import Vec2

manager = EntityManager()
player = manager.add_entity("player")
player.add_component(CTransform(Vec2(10.0, 20.0)))
manager.update()
assert manager.get_entities("player") == [player]
```

Other modules:

- `pillarsofself.assets` parses asset text without loading any files, through
  `parse_named_paths`, `parse_sprite_recs` and `parse_animation_recs`.
  `Assets` accepts its own font, sound and texture loaders.
- `pillarsofself.music_player.MusicPlayer` plays one looping theme at a time.
  Volume runs from 0 to 100.
- `pillarsofself.scene.Scene` is the abstract base for screens. It keeps a map
  from keys to action names and receives `Command` objects.

## What it does not do

- `Assets.load_from_file` does not load `Sound` lines. Sounds can only be added
  with `Assets.add_sound`.
- Neither game variant plays music or sound effects.
- In the menu-driven variant, the journey reacts only to keys, not to mouse
  clicks.
- Progress is not saved between runs.