import pytest

from dreamdex.gba_rom import Language
from dreamdex.scripts import language_options
from dreamdex.select_menu import MenuType, SelectMenu


def _menu(enable_cancel=False):
    menu = SelectMenu(enable_cancel, MenuType.LANG)
    for label, value in language_options():
        menu.add_option(label, value)
    return menu


def test_menu_types():
    assert MenuType(1) is MenuType.LANG
    assert MenuType(2) is MenuType.CART


def test_starts_on_first_option():
    menu = _menu()
    assert menu.selection == 0
    assert menu.selected_value is Language.ENG


def test_move_down_wraps():
    menu = _menu()
    count = len(menu.options)
    for _ in range(count):
        menu.move_down()
    assert menu.selection == 0


def test_move_up_wraps_to_last():
    menu = _menu()
    assert menu.move_up() == len(menu.options) - 1
    assert menu.selected_value is None


def test_up_undoes_down():
    menu = _menu()
    menu.move_down()
    menu.move_down()
    menu.move_up()
    assert menu.selected_value is Language.JPN


def test_confirm_returns_value_and_clears():
    menu = _menu()
    menu.move_down()
    menu.move_down()
    assert menu.confirm() is Language.SPA
    assert menu.options == []
    assert menu.values == []


def test_cancel_disabled_raises():
    menu = _menu(enable_cancel=False)
    with pytest.raises(RuntimeError):
        menu.cancel()
    assert len(menu.options) == 8


def test_cancel_enabled_clears():
    menu = _menu(enable_cancel=True)
    assert menu.cancel() is None
    assert menu.options == []


def test_empty_menu_raises():
    menu = SelectMenu(False, MenuType.CART)
    with pytest.raises(ValueError):
        menu.move_down()
    with pytest.raises(ValueError):
        menu.confirm()


def test_set_lang():
    menu = SelectMenu(False, MenuType.CART)
    menu.set_lang(Language.KOR)
    assert menu.lang is Language.KOR