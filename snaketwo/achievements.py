"""The achievements screen and the rules that unlock each achievement."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from snaketwo.engine import _Screen
from snaketwo.profile import read_profile
from snaketwo.state import AppContext

BACKGROUND_FILE = Path("texture") / "AchievementsMenu.png"
GRAY = (96, 96, 96)
ORANGE = (255, 204, 153)
GOLD = (212, 175, 55)
PAGE_SIZE = 4
LAST_PAGE_START = 12
TITLE_FONT_SIZE = 35
DESCRIPTION_FONT_SIZE = 20


@dataclass(frozen=True)
class Achievement:
    """A goal, reached once every condition it sets holds."""

    title: str
    description: str
    min_apples: int = 0
    min_score: int = 0
    exact_apples: int | None = None

    def is_unlocked(self, total_apples: int, score: int) -> bool:
        if self.exact_apples is not None and total_apples != self.exact_apples:
            return False
        return total_apples >= self.min_apples and score >= self.min_score


_APPLE_GOALS = (
    ("I", 1, "You ate 1 Apple."),
    ("II", 10, "You ate 10 apples."),
    ("III", 50, "You ate 50 apples."),
    ("IV", 100, "You ate 100 apples."),
    ("V", 200, "You ate 200 apples."),
    ("VI", 500, "You ate 500 apples."),
    ("VII", 1000, "You ate 1000 apples."),
)

_SCORE_GOALS = (
    ("I", 100, 100),
    ("II", 1000, 1000),
    ("III", 5000, 5000),
    ("IV", 10000, 10000),
    ("V", 50000, 50000),
    ("VI", 100000, 1000000),
    ("VII", 500000, 5000000),
)

ACHIEVEMENTS: tuple[Achievement, ...] = (
    *(Achievement(f"Apple {numeral}", text, min_apples=goal) for numeral, goal, text in _APPLE_GOALS),
    *(
        Achievement(f"Score {numeral}", f"You got a score of {shown} points.", min_score=goal)
        for numeral, goal, shown in _SCORE_GOALS
    ),
    Achievement("Grand Secret I", "A good n00b?", exact_apples=1337),
    Achievement("Grand Secret II", "2 funny numbers.", min_apples=69, min_score=420),
)


def unlocked_achievements(total_apples: int, score: int) -> list[Achievement]:
    """The achievements reached with these totals, in display order."""
    return [a for a in ACHIEVEMENTS if a.is_unlocked(total_apples, score)]


class AchievementsScreen(_Screen):
    """Shows the achievements four to a page, unlocked ones in gold."""

    def __init__(self, context: AppContext) -> None:
        super().__init__(context, BACKGROUND_FILE)
        profile = read_profile(self.profile_path)
        self.total_apples = profile.apples
        self.high_score = profile.high_score
        self.page_start = 0
        self.unlocked: set[int] = set()

    def update(self, delta: float) -> None:
        self.unlocked = {
            index
            for index, achievement in enumerate(ACHIEVEMENTS)
            if achievement.is_unlocked(self.total_apples, self.high_score)
        }

    def input(self) -> None:
        self._poll(pygame.KEYUP)

    def handle_key(self, key: int) -> None:
        """React to one released key."""
        if key == pygame.K_DOWN and self.page_start != LAST_PAGE_START:
            self.page_start += PAGE_SIZE
        elif key == pygame.K_UP and self.page_start != 0:
            self.page_start -= PAGE_SIZE
        elif key == pygame.K_q:
            from snaketwo.main_menu import MainMenu

            self.context.states.add(MainMenu(self.context))

    def draw(self) -> None:
        surface = self.context.window
        self._clear(surface)

        page = ACHIEVEMENTS[self.page_start:self.page_start + PAGE_SIZE]
        for offset, achievement in enumerate(page):
            color = GOLD if self.page_start + offset in self.unlocked else GRAY
            top = 110 + 110 * offset
            self._blit(surface, achievement.title, TITLE_FONT_SIZE, color, (75, top))
            self._blit(surface, achievement.description, DESCRIPTION_FONT_SIZE, color, (75, top + 50))

        for text, size, position in (
            ("Press Q to quit to Main menu", 30, (420, 560)),
            (f"Most apples eaten: {self.total_apples}", 40, (75, 5)),
            (f"Your highest score: {self.high_score}", 40, (75, 45)),
        ):
            self._blit(surface, text, size, ORANGE, position)

        self._present(surface)