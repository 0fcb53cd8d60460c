import pygame

from snaketwo.achievements import AchievementsScreen
from snaketwo.engine import EngineScreen
from snaketwo.main_menu import OPTIONS, MainMenu
from snaketwo.shop import ShopScreen
from snaketwo.state import AppContext


def _menu(tmp_path):
    context = AppContext(assets=tmp_path)
    menu = MainMenu(context)
    context.states.add(menu)
    context.states.state_change()
    return context, menu


def test_options_in_order(tmp_path):
    _, menu = _menu(tmp_path)
    seen = [menu.options[menu.selected]]
    for _ in range(3):
        menu.move_down()
        seen.append(menu.options[menu.selected])
    assert seen == ["Play", "Shop", "Achievements", "Quit"]
    assert tuple(seen) == OPTIONS


def test_starts_on_play(tmp_path):
    _, menu = _menu(tmp_path)
    assert menu.options[menu.selected] == "Play"


def test_move_up_wraps_to_last(tmp_path):
    _, menu = _menu(tmp_path)
    menu.move_up()
    assert menu.options[menu.selected] == "Quit"


def test_move_down_wraps_to_first(tmp_path):
    _, menu = _menu(tmp_path)
    for _ in range(len(OPTIONS)):
        menu.move_down()
    assert menu.selected == 0


def test_keys_move_selection(tmp_path):
    _, menu = _menu(tmp_path)
    menu.handle_key(pygame.K_DOWN)
    menu.handle_key(pygame.K_DOWN)
    assert menu.options[menu.selected] == "Achievements"
    menu.handle_key(pygame.K_UP)
    assert menu.options[menu.selected] == "Shop"


def test_quit_stops_running(tmp_path):
    context, menu = _menu(tmp_path)
    menu.move_up()
    menu.handle_key(pygame.K_RETURN)
    assert context.running is False


def test_shop_opens_with_saved_currency(tmp_path):
    save = tmp_path / "save"
    save.mkdir()
    (save / "dataProfile.txt").write_text("40\n5\n100\n")
    context, menu = _menu(tmp_path)
    menu.move_down()
    menu.select()
    context.states.state_change()
    current = context.states.current()
    assert isinstance(current, ShopScreen)
    assert current.currency == 40


def test_achievements_opens(tmp_path):
    context, menu = _menu(tmp_path)
    menu.move_down()
    menu.move_down()
    menu.select()
    context.states.state_change()
    current = context.states.current()
    assert isinstance(current, AchievementsScreen)
    assert current.page_start == 0


def test_play_starts_game_at_level_one(tmp_path):
    levels = tmp_path / "levels"
    levels.mkdir()
    (levels / "levels.txt").write_text("level1.txt\n")
    (levels / "level1.txt").write_text("\n")
    context, menu = _menu(tmp_path)
    menu.handle_key(pygame.K_RETURN)
    context.states.state_change()
    current = context.states.current()
    assert isinstance(current, EngineScreen)
    assert current.game.level == 1
    assert len(context.states) == 2