# snaketwo

An arcade snake game. You steer the snake around the field and eat apples to
grow longer and faster. You clear a level by eating ten apples on it. The
apples you eat are saved to your profile and you can spend them in the shop
on a new snake colour. The achievements screen shows the milestones you have
reached.

## Installing

```
pip install .
```

## Playing

```
snaketwo
```

This opens an 800 × 600 window with the main menu. The game reads its files
from an `assets` directory in the working directory:

- `assets/fonts/slant_regular.ttf` is the font for all text. It is required.
- `assets/texture/TitleScreen.png`, `ShopMenu.png` and `AchievementsMenu.png`
  are the menu backgrounds. They are optional; without them the background is
  black.
- `assets/levels/levels.txt` lists the level files, one name per line. Names
  whose file does not exist are skipped. At least one level must be present.
- `assets/levels/<name>` is a layout of 30 lines of 40 characters. Each `x`
  is a wall cell.
- `assets/save/dataProfile.txt` holds your profile: total apples eaten, most
  apples in one game and high score, one number per line.
- `assets/save/Bought.txt` holds the index of the equipped snake colour.

The game creates both save files when it first writes them.

### Controls

| Screen       | Key         | Action                                        |
|--------------|-------------|-----------------------------------------------|
| Main menu    | Up / Down   | Move the selection; it wraps around           |
| Main menu    | Enter       | Play, Shop, Achievements or Quit              |
| Game         | Arrow keys  | Queue a turn; a turn back on itself is ignored |
| Game         | Pause       | Pause or resume                               |
| Game         | Escape      | Quit the game                                 |
| Game over    | Space       | Save the result and try again                 |
| Game over    | Q           | Save the result and return to the main menu   |
| Shop         | Up / Down   | Move the selection; it wraps around           |
| Shop         | Enter       | Buy and equip the selected colour             |
| Shop         | Q           | Return to the main menu                       |
| Achievements | Up / Down   | Page through the achievements, four at a time |
| Achievements | Q           | Return to the main menu                       |

Closing the window also quits.

### Rules and scoring

- The snake starts three sections long, heading right, at speed 5. Speed is
  counted in moves per second.
- On every move your score goes up by the snake's length plus the number of
  apples eaten so far plus one.
- Each apple adds four sections to the tail, one per move, and raises the
  speed by one.
- When you have eaten ten apples on a level and another level exists, the
  next level starts. The snake is reset there and its speed is 2 plus the
  level number.
- Hitting a wall or the snake's own body ends the game.

### Shop

The Green, Red and Blue snakes cost 25 apples each. The Yellow snake costs 50.
When you buy a colour, its price is taken from your saved apple total and the
colour is equipped at once.

### Achievements

There are sixteen achievements:

- seven for the total number of apples eaten: 1, 10, 50, 100, 200, 500 and
  1000;
- seven for the high score: 100, 1000, 5000, 10000, 50000, 100000 and 500000;
- two secret ones.

Unlocked achievements are shown in gold.

## Using it as a library

`snaketwo.rules` has no display dependency, so you can drive a game
yourself:

```python
from snaketwo.rules import Direction, SnakeGame, discover_levels

game = SnakeGame(discover_levels("assets/levels"))  # starts at level 1
game.add_direction(Direction.DOWN)
game.step()            # move one cell now
game.tick(0.25)        # or let time pass; returns True if the snake moved
print(game.score, game.state, game.snake[0].position)
```

You can also call `parse_level(lines)` to turn a layout into `Wall` blocks.

Other modules:

- `snaketwo.profile` reads and writes the save files:
  - `read_profile`
  - `record_game`
  - `read_currency` and `write_currency`
  - `read_equipped` and `write_equipped`
- `snaketwo.achievements.unlocked_achievements(total_apples, score)` lists the
  achievements that a pair of totals has earned.
- `snaketwo.state` has the `State` base class, the `StateManager` stack that
  switches screens between frames, and `AppContext`.
- `snaketwo.game.Game` runs the main loop. `Game.frame()` runs a single
  frame.

## Running the tests

```
pip install .[test]
pytest
```