# cosmosdodge

A small arcade game. Your ship sits at the bottom of the screen. Aliens fall
from above, and you steer left and right to keep out of their way until the
clock runs out. The on-screen text is in Russian.

## Installing

```
pip install .
```

## Playing

```
cosmosdodge
cosmosdodge --assets path/to/assets --seed 42
```

Options:

- `--assets DIR` – a directory holding `images/` and `sounds/` subdirectories.
- `--seed N` – seed for the random columns the aliens fall from.

The main menu offers **New game**, **Rules** and **Exit**, chosen with the mouse.

- Use the **Left** and **Right** arrow keys to move the ship.
- You start with 3 lives.
- **Level 1** lasts 10 seconds. A green alien falls every second, and each hit costs one life.
- **Level 2** lasts 20 seconds. Green aliens fall every 0.8 seconds and red ones every
  2 seconds; each hit costs one life.
- **Level 3** lasts 30 seconds. Black aliens fall every 3 seconds as well, and touching
  one takes all remaining lives.
- When a level ends, click *Continue* to start the next one.
- Losing all lives shows a defeat message; closing it returns to the menu.
- Surviving level 3 wins the game, and the dialog lets you play again (*Да*) or go back
  to the menu (*Нет*).

### Artwork and sound

The package contains no image or sound files. Without `--assets` the sprites are drawn
as coloured ellipses on a plain background and the game is silent. With `--assets`,
any of these files that are present are used:

- `images/`: `background1.jpg` (menu), `background.png` (playfield), `hero.png`,
  `green.png`, `red.png`, `black.png`, `icon.png`
- `sounds/`: `button.wav`, `game2.wav` (music), `hit.wav`, `hit1.wav`, `hit2.wav`,
  `newlevel.wav`

If audio cannot be initialised, the game runs without sound.

## Using the game logic

The rules live in `cosmosdodge.game` and need no display; time is simulated in
milliseconds:

```python
import random
from cosmosdodge.game import Game, Direction, Phase

game = Game(rng=random.Random(1))
game.key_down(Direction.LEFT)
game.advance(1000)          # one second of game time
print(game.lives_text())    # "Жизни: 3" unless something hit the ship
print(game.timer_text())    # "Время: 9"
for sound in game.drain_sounds():
    print(sound)

game.advance(9000)
if game.phase is Phase.LEVEL_COMPLETE:
    game.next_level()
```

- `Game.advance(ms)` raises `ValueError` for a negative duration.
- `Game.next_level()` raises `RuntimeError` unless the current level is complete.
- `Game.spawn(kind)`, `Game.update()` and `Game.decrease_time()` perform single steps
  directly.

`cosmosdodge.entities` defines `Rect`, `Player`, `AlienKind`, `Alien` and
`spawn_alien(kind, rng)`. `cosmosdodge.app` defines the menu layout
(`menu_buttons()`, `menu_action_at(pos)`, `rules_text()`), the pygame `App` and
`main()`.

## Running the tests

```
pip install .[test]
pytest
```