"""The play screen: runs a game of snake, draws it and reacts to keys."""

from __future__ import annotations

import random
from itertools import chain
from pathlib import Path

import pygame

from snaketwo.entities import BLUE, GREEN, YELLOW, SnakeColor
from snaketwo.profile import ProfileData, read_equipped, record_game
from snaketwo.rules import RESOLUTION, Direction, GameState, SnakeGame, discover_levels
from snaketwo.state import AppContext, State

FONT_FILE = Path("fonts") / "slant_regular.ttf"
PROFILE_FILE = Path("save") / "dataProfile.txt"
BOUGHT_FILE = Path("save") / "Bought.txt"
BLACK = (0, 0, 0)
HUD_Y = -9

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

_GAME_OVER_LINES = (
    ("GAME OVER", 72, YELLOW, 100),
    ("Press SPACE to try again", 38, GREEN, 200),
    ("Press Q to quit to Main menu", 30, YELLOW, 500),
)


class _Screen(State):
    """Shared plumbing of the screens: asset paths, fonts, events and drawing."""

    def __init__(self, context: AppContext, background: Path | None = None) -> None:
        self.context = context
        self.assets = Path(context.assets)
        self.font_path = self.assets / FONT_FILE
        self.profile_path = self.assets / PROFILE_FILE
        self.bought_path = self.assets / BOUGHT_FILE
        self.background_path = None if background is None else self.assets / background
        self._fonts: dict[int, pygame.font.Font] = {}
        self._background: pygame.Surface | None = None

    def handle_key(self, key: int) -> None:
        """React to one key."""

    def _poll(self, key_event: int) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.context.running = False
            elif event.type == key_event:
                self.handle_key(event.key)

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(str(self.font_path), size)
        return self._fonts[size]

    def _text(self, text: str, size: int, color) -> pygame.Surface:
        return self._font(size).render(text, True, color)

    def _blit(self, surface: pygame.Surface, text: str, size: int, color, position) -> None:
        surface.blit(self._text(text, size, color), position)

    def _clear(self, surface: pygame.Surface) -> None:
        surface.fill(BLACK)
        path = self.background_path
        if self._background is None and path is not None and path.is_file():
            self._background = pygame.image.load(str(path))
        if self._background is not None:
            surface.blit(self._background, (0, 0))

    @staticmethod
    def _present(surface: pygame.Surface) -> None:
        if pygame.display.get_init() and surface is pygame.display.get_surface():
            pygame.display.flip()


class EngineScreen(_Screen):
    """The screen on which the snake is played."""

    def __init__(self, context: AppContext, rng: random.Random | None = None) -> None:
        super().__init__(context)
        color = SnakeColor.from_index(read_equipped(self.bought_path))
        self.game = SnakeGame(discover_levels(self.assets / "levels"), color, rng)

    def update(self, delta: float) -> None:
        self.game.tick(delta)

    def input(self) -> None:
        self._poll(pygame.KEYDOWN)

    def handle_key(self, key: int) -> None:
        """React to one pressed key."""
        if key == pygame.K_ESCAPE:
            self.context.running = False
        if key == pygame.K_PAUSE:
            self.game.toggle_pause()
        if self.game.state is GameState.GAMEOVER:
            if key == pygame.K_SPACE:
                self._save()
                self.game.start()
            elif key == pygame.K_q:
                self._save()
                from snaketwo.main_menu import MainMenu

                self.context.states.add(MainMenu(self.context))
        direction = _KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.game.add_direction(direction)

    def _save(self) -> ProfileData:
        return record_game(self.profile_path, self.game.apples_total, self.game.score)

    def draw(self) -> None:
        surface = self.context.window
        game = self.game
        width = RESOLUTION[0]
        self._clear(surface)

        shapes = chain(
            ((wall.color, wall.rect()) for wall in game.walls),
            [(game.apple.color, game.apple.rect())],
            ((section.color.rgb, section.rect()) for section in game.snake),
        )
        for color, rect in shapes:
            pygame.draw.rect(surface, color, (rect.x, rect.y, rect.width, rect.height))

        title = self._text("Snake II", 28, BLUE)
        surface.blit(title, (width / 2 - title.get_width() / 2, HUD_Y))
        level = self._text(f"level {game.level}", 28, BLUE)
        surface.blit(level, (15, HUD_Y))
        apples = self._text(f"apples {game.apples_total}", 28, BLUE)
        surface.blit(apples, (15 + level.get_width() + 20, HUD_Y))
        score = self._text(str(game.score), 28, BLUE)
        surface.blit(score, (width - score.get_width() - 15, HUD_Y))

        if game.state is GameState.GAMEOVER:
            for text, size, color, y in _GAME_OVER_LINES:
                rendered = self._text(text, size, color)
                surface.blit(rendered, (width / 2 - rendered.get_width() / 2, y))

        self._present(surface)