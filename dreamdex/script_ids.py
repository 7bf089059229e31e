"""Identifiers of the lines of the professor's scripts.

A script is a flat table indexed by one number space.  Dialogue lines come
first, then commands, then conditionals.  Each block follows directly
after the one before it.
"""

from __future__ import annotations

from enum import IntEnum


class Dia(IntEnum):
    """Dialogue lines."""

    OPEN = 0
    E4 = 1
    MG_RS = 2
    MG_FRLGE = 3
    START = 4
    LETS_START = 5
    ERROR_1 = 6
    CONN_GOOD = 7
    LINK_GOOD = 8
    TRANS_GOOD = 9
    NEW_DEX = 10
    NO_NEW_DEX = 11
    SEND_FRIEND_HOENN_RS = 12
    SEND_FRIEND_KANTO = 13
    THANK = 14
    GET_MON = 15
    ERROR_TIME_ONE = 16
    ERROR_TIME_TWO = 17
    ERROR_DISCONNECT = 18
    ERROR_COM_ENDED = 19
    ERROR_COLOSSEUM = 20
    MG_OTHER_EVENT = 21
    PKMN_TO_COLLECT = 22
    NO_VALID_PKMN = 23
    WHAT_GAME_TRANS = 24
    WHAT_LANG_TRANS = 25
    ASK_QUEST = 26
    NO_GB_ROM = 27
    IN_BOX = 28
    MYTHIC_CONVERT = 29
    CANCEL = 30
    WHAT_LANG_EVENT = 31
    WHAT_GAME_EVENT = 32
    K_DEX_NOT_FULL = 33
    J_DEX_NOT_FULL = 34
    SOME_INVALID_PKMN = 35
    MENU_BACK = 36
    SEND_FRIEND_HOENN_E = 37
    IS_MISSINGNO = 38


DIA_SIZE = 39
DIA_END = DIA_SIZE


class Cmd(IntEnum):
    """Commands run while a script plays; script entry points live here too."""

    T_SCRIPT_START = DIA_END + 0
    E_SCRIPT_START = DIA_END + 1
    START_LINK = DIA_END + 2
    IMPORT_POKEMON = DIA_END + 3
    BACK_TO_MENU = DIA_END + 4
    SHOW_PROF = DIA_END + 5
    HIDE_PROF = DIA_END + 6
    SET_TUTOR_TRUE = DIA_END + 7
    END_SCRIPT = DIA_END + 8
    GAME_MENU = DIA_END + 9
    LANG_MENU = DIA_END + 10
    SLIDE_PROF_LEFT = DIA_END + 11
    SLIDE_PROF_RIGHT = DIA_END + 12
    CONTINUE_LINK = DIA_END + 13
    BOX_MENU = DIA_END + 14
    MYTHIC_MENU = DIA_END + 15
    LOAD_SIMP = DIA_END + 16
    CANCEL_LINK = DIA_END + 17
    END_MISSINGNO = DIA_END + 18


CMD_SIZE = 19
CMDS_END = DIA_END + CMD_SIZE


class Cond(IntEnum):
    """Conditionals that choose between two following lines."""

    ERROR_TIMEOUT_ONE = CMDS_END + 0
    ERROR_DISCONNECT = CMDS_END + 1
    ERROR_COM_ENDED = CMDS_END + 2
    ERROR_TIMEOUT_TWO = CMDS_END + 3
    ERROR_COLOSSEUM = CMDS_END + 4
    BEAT_E4 = CMDS_END + 5
    MG_ENABLED = CMDS_END + 6
    TUTORIAL_COMPLETE = CMDS_END + 7
    NEW_POKEMON = CMDS_END + 8
    IS_HOENN_RS = CMDS_END + 9
    IS_FRLGE = CMDS_END + 10
    MG_OTHER_EVENT = CMDS_END + 11
    PKMN_TO_COLLECT = CMDS_END + 12
    GB_ROM_EXISTS = CMDS_END + 13
    CHECK_MYTHIC = CMDS_END + 14
    CHECK_DEX = CMDS_END + 15
    CHECK_KANTO = CMDS_END + 16
    SOME_INVALID_PKMN = CMDS_END + 17
    IS_HOENN_E = CMDS_END + 18
    CHECK_MISSINGNO = CMDS_END + 19


COND_SIZE = 20
COND_END = CMDS_END + COND_SIZE

SCRIPT_SIZE = COND_END


def kind_of(index: int) -> Dia | Cmd | Cond:
    """Return the dialogue, command or conditional identifier for a script index.

    Raises ValueError when the index lies outside the script table.
    """
    for kind in (Dia, Cmd, Cond):
        try:
            return kind(index)
        except ValueError:
            continue
    raise ValueError(f"script index out of range: {index}")