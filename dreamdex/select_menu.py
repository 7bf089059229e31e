"""A vertical menu of options, moved through with up and down."""

from __future__ import annotations

from enum import IntEnum


class MenuType(IntEnum):
    LANG = 1
    CART = 2


class SelectMenu:
    """A list of labelled options; confirming returns the chosen value.

    An option whose value is None is the cancel entry.  Confirming or
    cancelling closes the menu, which clears its options.
    """

    def __init__(self, enable_cancel: bool, menu_type: MenuType) -> None:
        self.cancel_enabled = enable_cancel
        self.menu_type = MenuType(menu_type)
        self.options: list[str] = []
        self.values: list[object] = []
        self.selection = 0
        self.lang: object = None

    def add_option(self, option: str, return_value: object) -> None:
        self.options.append(option)
        self.values.append(return_value)

    def clear_options(self) -> None:
        self.options.clear()
        self.values.clear()
        self.selection = 0

    def set_lang(self, lang: object) -> None:
        """Set the language whose cartridges the game menu shows."""
        self.lang = lang

    def _require_options(self) -> int:
        if not self.options:
            raise ValueError("menu has no options")
        return len(self.options)

    @property
    def selected_value(self) -> object:
        """Value of the highlighted option."""
        self._require_options()
        return self.values[self.selection]

    def move_down(self) -> int:
        """Highlight the next option, wrapping to the first."""
        count = self._require_options()
        self.selection = (self.selection + 1) % count
        return self.selection

    def move_up(self) -> int:
        """Highlight the previous option, wrapping to the last."""
        count = self._require_options()
        self.selection = (self.selection + count - 1) % count
        return self.selection

    def confirm(self) -> object:
        """Close the menu and return the highlighted option's value."""
        value = self.selected_value
        self.clear_options()
        return value

    def cancel(self) -> None:
        """Close the menu without a choice; only allowed when cancel is enabled."""
        if not self.cancel_enabled:
            raise RuntimeError("cancelling is not enabled for this menu")
        self.clear_options()
        return None