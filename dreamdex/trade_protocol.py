"""Constants and states of the Game Boy link cable trade protocol."""

from __future__ import annotations

from enum import IntEnum


class ConnectionState(IntEnum):
    PRE_CONNECT_TWO = 0
    NOT_CONNECTED = 1
    CONNECTED = 2
    TRADE_CENTRE = 3
    COLOSSEUM = 4


class TradeCentreState(IntEnum):
    INIT = 0
    READY_TO_GO = 1
    SEEN_FIRST_WAIT = 2
    SENDING_RANDOM_DATA = 3
    WAITING_TO_SEND_DATA = 4
    SENDING_DATA = 5
    SENDING_PATCH_DATA = 6
    MIMIC = 7
    TRADE_PENDING = 8
    TRADE_CONFIRMATION = 9
    DONE = 10


PKMN_BLANK = 0x00

ITEM_1_HIGHLIGHTED = 0xD0
ITEM_2_HIGHLIGHTED = 0xD1
ITEM_3_HIGHLIGHTED = 0xD2
ITEM_1_SELECTED = 0xD4
ITEM_2_SELECTED = 0xD5
ITEM_3_SELECTED = 0xD6

GEN_I_CABLE_TRADE_CENTER = 0xD4
GEN_I_CABLE_CLUB_COLOSSEUM = 0xD5

GEN_II_CABLE_TRADE_CENTER = 0xD1
GEN_II_CABLE_CLUB_COLOSSEUM = 0xD2
GEN_II_TIME_CAPSULE = 0xD2

PKMN_MASTER = 0x01
PKMN_SLAVE = 0x02
PKMN_MASTER_GEN_III = 0x8FFF
PKMN_SLAVE_GEN_III = 0xB9A0
PKMN_CONNECTED_I = 0x60
PKMN_CONNECTED_II = 0x61
PKMN_WAIT = 0x7F

PKMN_ACTION = 0x60

PKMN_TRADE_CENTRE = ITEM_1_SELECTED
PKMN_COLOSSEUM = ITEM_2_SELECTED
PKMN_BREAK_LINK = ITEM_3_SELECTED

TRADE_CENTRE_WAIT = 0xFD

_MENU_NAMES = {
    ITEM_1_HIGHLIGHTED: "ITEM_1_HIGHLIGHTED",
    ITEM_2_HIGHLIGHTED: "ITEM_2_HIGHLIGHTED",
    ITEM_3_HIGHLIGHTED: "ITEM_3_HIGHLIGHTED",
    PKMN_TRADE_CENTRE: "TRADE_CENTRE",
    PKMN_COLOSSEUM: "COLOSSEUM",
    PKMN_BREAK_LINK: "BREAK_LINK",
}


def menu_selection_name(value: int) -> str:
    """Name the cable club menu byte sent over the link."""
    try:
        return _MENU_NAMES[value]
    except KeyError:
        raise ValueError(f"not a menu selection byte: {value:#04x}") from None