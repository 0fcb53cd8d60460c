"""The shop screen, where apples buy a new snake colour."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from snaketwo.engine import _Screen
from snaketwo.entities import SnakeColor, WHITE
from snaketwo.profile import read_currency, read_equipped, write_currency, write_equipped
from snaketwo.state import AppContext

BACKGROUND_FILE = Path("texture") / "ShopMenu.png"
FILL_COLOR = (255, 204, 153)
ITEM_FONT_SIZE = 35
SELECTED_FONT_SIZE = 40
CHILD_FONT_SIZE = 20
COST_TEXT = "Cost: 25 apples"
EQUIPPED_TEXT = "Equipped"


@dataclass(frozen=True)
class ShopItem:
    """A snake colour on sale."""

    name: str
    color: SnakeColor
    price: int


ITEMS: tuple[ShopItem, ...] = (
    ShopItem("Green Snake", SnakeColor.GREEN, 25),
    ShopItem("Red Snake", SnakeColor.RED, 25),
    ShopItem("Blue Snake", SnakeColor.BLUE, 25),
    ShopItem("Yellow Snake", SnakeColor.YELLOW, 50),
)


class ShopScreen(_Screen):
    """Lists the snake colours and lets the player buy and equip one."""

    def __init__(self, context: AppContext) -> None:
        super().__init__(context, BACKGROUND_FILE)
        self.items = ITEMS
        self.currency = read_currency(self.profile_path)
        self.equipped = read_equipped(self.bought_path)
        self.selected = 0

    def update(self, delta: float) -> None:
        """Nothing advances with time in the shop."""

    def input(self) -> None:
        self._poll(pygame.KEYUP)

    def handle_key(self, key: int) -> None:
        """React to one released key."""
        if key == pygame.K_DOWN:
            self.move_down()
        elif key == pygame.K_UP:
            self.move_up()
        elif key == pygame.K_q:
            from snaketwo.main_menu import MainMenu

            self.context.states.add(MainMenu(self.context), replace=True)
        elif key == pygame.K_RETURN:
            self.buy(self.selected, self.items[self.selected].price)

    def move_up(self) -> None:
        """Select the previous item, wrapping to the last."""
        self.selected = (self.selected - 1) % len(self.items)

    def move_down(self) -> None:
        """Select the next item, wrapping to the first."""
        self.selected = (self.selected + 1) % len(self.items)

    def buy(self, index: int, price: int) -> bool:
        """Buy and equip colour ``index`` if enough apples are saved."""
        if self.currency < price:
            return False
        self.currency -= price
        self.equipped = index
        write_equipped(self.bought_path, self.equipped)
        write_currency(self.profile_path, self.currency)
        return True

    def draw(self) -> None:
        surface = self.context.window
        self._clear(surface)

        self._blit(surface, "Press Q to quit to Main menu", 30, FILL_COLOR, (420, 560))
        self._blit(surface, f"Apples: {self.currency}", 40, FILL_COLOR, (75, 25))

        for index, item in enumerate(self.items):
            top = 110 + 120 * index
            selected = index == self.selected
            self._blit(
                surface,
                item.name,
                SELECTED_FONT_SIZE if selected else ITEM_FONT_SIZE,
                WHITE if selected else FILL_COLOR,
                (75, top),
            )
            equipped = index == self.equipped
            self._blit(
                surface,
                EQUIPPED_TEXT if equipped else COST_TEXT,
                CHILD_FONT_SIZE,
                item.color.rgb if equipped else FILL_COLOR,
                (75, top + 40),
            )

        self._present(surface)