"""The title screen menu."""

from __future__ import annotations

from pathlib import Path

import pygame

from snaketwo.entities import WHITE
from snaketwo.state import AppContext, State

FONT_FILE = Path("fonts") / "slant_regular.ttf"
BACKGROUND_FILE = Path("texture") / "TitleScreen.png"
FILL_COLOR = (255, 204, 153)
FONT_SIZE = 50
SELECTED_FONT_SIZE = 80
OPTIONS: tuple[str, ...] = ("Play", "Shop", "Achievements", "Quit")


class MainMenu(State):
    """Lets the player pick between playing, the shop, achievements and quitting."""

    def __init__(self, context: AppContext) -> None:
        self.context = context
        assets = Path(context.assets)
        self.font_path = assets / FONT_FILE
        self.background_path = assets / BACKGROUND_FILE
        self.options = OPTIONS
        self.selected = 0
        self._fonts: dict[int, pygame.font.Font] = {}
        self._background: pygame.Surface | None = None

    def update(self, delta: float) -> None:
        """The menu has nothing that advances with time."""

    def input(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.context.running = False
            elif event.type == pygame.KEYUP:
                self.handle_key(event.key)

    def handle_key(self, key: int) -> None:
        """React to one released key."""
        if key == pygame.K_DOWN:
            self.move_down()
        if key == pygame.K_UP:
            self.move_up()
        if key == pygame.K_RETURN:
            self.select()

    def move_up(self) -> None:
        """Select the previous option, wrapping to the last."""
        self.selected = (self.selected - 1) % len(self.options)

    def move_down(self) -> None:
        """Select the next option, wrapping to the first."""
        self.selected = (self.selected + 1) % len(self.options)

    def select(self) -> None:
        """Act on the selected option."""
        choice = self.options[self.selected]
        if choice == "Play":
            from snaketwo.engine import EngineScreen

            self.context.states.add(EngineScreen(self.context))
        elif choice == "Shop":
            from snaketwo.shop import ShopScreen

            self.context.states.add(ShopScreen(self.context))
        elif choice == "Achievements":
            from snaketwo.achievements import AchievementsScreen

            self.context.states.add(AchievementsScreen(self.context))
        elif choice == "Quit":
            self.context.running = False

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(str(self.font_path), size)
        return self._fonts[size]

    def draw(self) -> None:
        surface = self.context.window
        surface.fill((0, 0, 0))
        if self._background is None and self.background_path.is_file():
            self._background = pygame.image.load(str(self.background_path))
        if self._background is not None:
            surface.blit(self._background, (0, 0))

        for index, option in enumerate(self.options):
            if index == self.selected:
                font, color = self._font(SELECTED_FONT_SIZE), WHITE
            else:
                font, color = self._font(FONT_SIZE), FILL_COLOR
            surface.blit(font.render(option, True, color), (100, 100 * (index + 1)))

        if pygame.display.get_init() and surface is pygame.display.get_surface():
            pygame.display.flip()