"""The application: window, fixed-step main loop and entry point."""

from __future__ import annotations

import time
from pathlib import Path

import pygame

from snaketwo.main_menu import MainMenu
from snaketwo.state import AppContext

SECONDS_PER_FRAME = 1.0 / 60.0
WINDOW_SIZE = (800, 600)
TITLE = "SnakeII"


class Game:
    """Owns the window and drives the active state at a fixed frame rate."""

    def __init__(self, assets: Path | str = Path("assets"), window: pygame.Surface | None = None) -> None:
        self._owns_display = window is None
        if window is None:
            pygame.init()
            window = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(TITLE)
        self.context = AppContext(window=window, assets=Path(assets))
        self.context.states.add(MainMenu(self.context))

    def frame(self) -> None:
        """Apply pending state changes, then run one frame of the active state."""
        states = self.context.states
        states.state_change()
        current = states.current()
        current.input()
        current.update(SECONDS_PER_FRAME)
        current.draw()

    def run(self) -> None:
        """Run frames until the game is told to stop."""
        last = time.perf_counter()
        behind = 0.0
        try:
            while self.context.running:
                now = time.perf_counter()
                behind += now - last
                last = now
                if behind <= SECONDS_PER_FRAME:
                    time.sleep(SECONDS_PER_FRAME - behind)
                    continue
                while behind > SECONDS_PER_FRAME and self.context.running:
                    behind -= SECONDS_PER_FRAME
                    self.frame()
        finally:
            if self._owns_display:
                pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    Game().run()
    return 0