import random

import pytest

from snaketwo.entities import CELL_SIZE, SnakeColor, Wall
from snaketwo.rules import (
    Direction,
    GameState,
    SnakeGame,
    START_POSITIONS,
    discover_levels,
    parse_level,
)

WALL_AHEAD = [""] * 5 + ["......x"]
PARKED = (0.0, 0.0)


def write_level(directory, name, rows=()):
    path = directory / name
    path.write_text("\n".join(rows) + "\n")
    return path


def make_game(tmp_path, rows=(), seed=1, extra_levels=0):
    levels = [write_level(tmp_path, "level1.txt", rows)]
    levels += [write_level(tmp_path, f"extra{n}.txt") for n in range(extra_levels)]
    game = SnakeGame(levels, rng=random.Random(seed))
    game.apple.position = PARKED
    return game


def put_apple_ahead(game):
    head = game.snake[0].position
    game.apple.position = (head[0] + CELL_SIZE, head[1])


def positions(game):
    return [section.position for section in game.snake]


def test_parse_level_first_cell_is_origin():
    assert parse_level(["x"]) == [Wall((0.0, 0.0))]


@pytest.mark.parametrize(
    "lines, expected",
    [(["x" * 41], 40), (["x"] * 31, 30)],
)
def test_parse_level_ignores_cells_beyond_grid(lines, expected):
    assert len(parse_level(lines)) == expected


def test_parse_level_walls_lie_on_cells():
    walls = parse_level([".x.", "", "x..x"])
    assert all(w.position[0] % CELL_SIZE == 0 and w.position[1] % CELL_SIZE == 0 for w in walls)
    assert len(walls) == 3


def test_discover_levels_keeps_existing_in_order(tmp_path):
    write_level(tmp_path, "b.txt")
    write_level(tmp_path, "a.txt")
    (tmp_path / "levels.txt").write_text("b.txt\nmissing.txt\na.txt\n")
    assert discover_levels(tmp_path) == [tmp_path / "b.txt", tmp_path / "a.txt"]


def test_discover_levels_without_manifest(tmp_path):
    assert discover_levels(tmp_path) == []


def test_no_levels_raises():
    with pytest.raises(IndexError):
        SnakeGame([])


def test_initial_state(tmp_path):
    game = make_game(tmp_path)
    assert positions(game) == list(START_POSITIONS)
    assert (game.score, game.speed, game.level) == (0, 5, 1)
    assert game.direction is Direction.RIGHT
    assert game.state is GameState.RUNNING


def test_snake_color_is_used(tmp_path):
    level = write_level(tmp_path, "level1.txt")
    game = SnakeGame([level], color=SnakeColor.BLUE, rng=random.Random(3))
    assert {section.color for section in game.snake} == {SnakeColor.BLUE}


def test_step_moves_head_and_tail_follows(tmp_path):
    game = make_game(tmp_path)
    before = positions(game)
    game.step()
    after = positions(game)
    assert after[0] == (before[0][0] + CELL_SIZE, before[0][1])
    assert after[1:] == before[:-1]
    assert game.snake[0].rect().x == after[0][0]


def test_step_scores(tmp_path):
    game = make_game(tmp_path)
    game.step()
    assert game.score == 4


def test_reverse_turn_is_ignored(tmp_path):
    game = make_game(tmp_path)
    game.add_direction(Direction.LEFT)
    game.step()
    assert game.direction is Direction.RIGHT
    assert not game.direction_queue


def test_turn_is_applied(tmp_path):
    game = make_game(tmp_path)
    head = game.snake[0].position
    game.add_direction(Direction.UP)
    game.step()
    assert game.direction is Direction.UP
    assert game.snake[0].position == (head[0], head[1] - CELL_SIZE)


def test_add_direction_drops_repeats(tmp_path):
    game = make_game(tmp_path)
    for direction in (Direction.UP, Direction.UP, Direction.LEFT):
        game.add_direction(direction)
    assert list(game.direction_queue) == [Direction.UP, Direction.LEFT]


def test_tick_waits_for_speed(tmp_path):
    game = make_game(tmp_path)
    before = positions(game)
    assert game.tick(0.1) is False
    assert positions(game) == before
    assert game.tick(0.1) is True
    assert positions(game) != before
    assert game.time_since_last_move == 0.0


def test_pause_stops_and_resumes(tmp_path):
    game = make_game(tmp_path)
    before = positions(game)
    game.toggle_pause()
    assert game.state is GameState.PAUSED
    assert game.tick(1.0) is False
    assert positions(game) == before
    game.toggle_pause()
    assert game.state is GameState.RUNNING
    assert game.tick(1.0) is True


def test_eating_apple_grows_and_speeds_up(tmp_path):
    game = make_game(tmp_path)
    put_apple_ahead(game)
    speed = game.speed
    game.step()
    assert (game.apples_total, game.apples_this_level) == (1, 1)
    assert game.sections_to_add == 4
    assert game.speed == speed + 1
    assert not game.snake[0].rect().intersects(game.apple.rect())
    length = len(game.snake)
    game.apple.position = PARKED
    game.step()
    assert len(game.snake) == length + 1
    assert game.sections_to_add == 3


def test_wall_collision_ends_game(tmp_path):
    game = make_game(tmp_path, WALL_AHEAD)
    game.step()
    assert game.state is GameState.GAMEOVER
    before = positions(game)
    assert game.tick(1.0) is False
    assert positions(game) == before


def test_self_collision_ends_game(tmp_path):
    game = make_game(tmp_path)
    game.sections_to_add = 4
    for _ in range(4):
        game.step()
    assert game.state is GameState.RUNNING
    for direction in (Direction.UP, Direction.LEFT, Direction.DOWN):
        game.add_direction(direction)
        game.step()
    assert game.state is GameState.GAMEOVER


def test_pause_does_nothing_after_game_over(tmp_path):
    game = make_game(tmp_path, WALL_AHEAD)
    game.step()
    game.toggle_pause()
    assert game.state is GameState.GAMEOVER


def test_start_resets_after_game_over(tmp_path):
    game = make_game(tmp_path, WALL_AHEAD)
    game.step()
    game.start()
    assert game.state is GameState.RUNNING
    assert game.score == 0
    assert positions(game) == list(START_POSITIONS)


def test_tenth_apple_starts_next_level(tmp_path):
    game = make_game(tmp_path, extra_levels=1)
    game.apples_this_level = game.apples_total = 9
    game.add_direction(Direction.DOWN)
    put_apple_ahead(game)
    game.step()
    assert game.level == 2
    assert (game.apples_this_level, game.apples_total) == (0, 10)
    assert positions(game) == list(START_POSITIONS)
    assert game.direction is Direction.RIGHT
    assert not game.direction_queue
    assert game.sections_to_add == 0


def test_tenth_apple_on_last_level_keeps_level(tmp_path):
    game = make_game(tmp_path)
    game.apples_this_level = 9
    put_apple_ahead(game)
    speed = game.speed
    game.step()
    assert (game.level, game.apples_this_level) == (1, 10)
    assert game.speed == speed + 1
    assert game.sections_to_add == 4


@pytest.mark.parametrize("seed", range(20))
def test_place_apple_avoids_snake_and_walls(tmp_path, seed):
    rows = ["x" * 40] + ["x" + "x." * 19 + "x" for _ in range(28)] + ["x" * 40]
    game = make_game(tmp_path, rows, seed=seed)
    for _ in range(5):
        game.place_apple()
        apple = game.apple.rect()
        blockers = [*game.walls, *game.snake]
        assert not any(apple.intersects(blocker.rect()) for blocker in blockers)


@pytest.mark.parametrize("seed", range(10))
def test_place_apple_stays_inside_border(tmp_path, seed):
    game = make_game(tmp_path, seed=seed)
    for _ in range(20):
        game.place_apple()
        x, y = game.apple.position
        assert x % CELL_SIZE == 0 and y % CELL_SIZE == 0
        assert CELL_SIZE <= x <= 800 - 2 * CELL_SIZE
        assert CELL_SIZE <= y <= 600 - 2 * CELL_SIZE


def test_direction_opposites_block_reversal(tmp_path):
    game = make_game(tmp_path)
    for direction in (Direction.UP, Direction.UP.opposite):
        game.add_direction(direction)
        game.step()
        assert game.direction is Direction.UP
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert all(d.opposite.opposite is d for d in Direction)