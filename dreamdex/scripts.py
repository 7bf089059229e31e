"""The transfer and event scripts the professor walks the player through.

A script is a table indexed by the numbers of :mod:`dreamdex.script_ids`.
Entries that no line is written for hold an empty :class:`ScriptObj`.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Mapping

from dreamdex.gba_rom import Language
from dreamdex.script_ids import SCRIPT_SIZE, Cmd, Cond, Dia
from dreamdex.script_obj import ScriptObj


class GbGame(Enum):
    """The Game Boy games a transfer or event can be made with."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    GOLD = "gold"
    SILVER = "silver"
    CRYSTAL = "crystal"


MenuOption = tuple[str, object]


def _empty_script() -> list[ScriptObj]:
    return [ScriptObj() for _ in range(SCRIPT_SIZE)]


def build_transfer_script(dialogue: Mapping[Dia, str]) -> list[ScriptObj]:
    """Build the table of lines for transferring Pokémon from a Game Boy game."""
    script = _empty_script()

    def text(dia: Dia, next_index: int) -> None:
        script[dia] = ScriptObj.text_line(dialogue[dia], next_index)

    def command(index: int, run: int, next_index: int) -> None:
        script[index] = ScriptObj.command(run, next_index)

    def conditional(cond: int, if_true: int, if_false: int) -> None:
        script[cond] = ScriptObj.conditional(cond, if_true, if_false)

    # Check that the conditions are set for the transfer
    command(Cmd.T_SCRIPT_START, Cmd.SHOW_PROF, Cond.TUTORIAL_COMPLETE)
    conditional(Cond.TUTORIAL_COMPLETE, Cond.BEAT_E4, Dia.OPEN)
    text(Dia.OPEN, Cmd.SET_TUTOR_TRUE)
    command(Cmd.SET_TUTOR_TRUE, Cmd.SET_TUTOR_TRUE, Cmd.END_SCRIPT)
    conditional(Cond.BEAT_E4, Cond.MG_ENABLED, Dia.E4)
    text(Dia.E4, Cmd.END_SCRIPT)
    conditional(Cond.MG_ENABLED, Cond.MG_OTHER_EVENT, Cond.IS_FRLGE)
    conditional(Cond.IS_FRLGE, Dia.MG_FRLGE, Dia.MG_RS)
    text(Dia.MG_FRLGE, Cmd.END_SCRIPT)
    text(Dia.MG_RS, Cmd.END_SCRIPT)
    conditional(Cond.MG_OTHER_EVENT, Dia.MG_OTHER_EVENT, Cond.PKMN_TO_COLLECT)
    conditional(Cond.PKMN_TO_COLLECT, Dia.PKMN_TO_COLLECT, Dia.ASK_QUEST)
    text(Dia.MG_OTHER_EVENT, Dia.ASK_QUEST)
    text(Dia.PKMN_TO_COLLECT, Cmd.END_SCRIPT)

    # Ask which game and language are used
    text(Dia.WHAT_GAME_TRANS, Cmd.GAME_MENU)
    script[Cmd.GAME_MENU] = ScriptObj.conditional(
        Cmd.GAME_MENU, Cond.GB_ROM_EXISTS, Dia.WHAT_LANG_TRANS
    )
    text(Dia.WHAT_LANG_TRANS, Cmd.LANG_MENU)
    script[Cmd.LANG_MENU] = ScriptObj.conditional(
        Cmd.LANG_MENU, Dia.WHAT_GAME_TRANS, Dia.MENU_BACK
    )
    text(Dia.ASK_QUEST, Cmd.SLIDE_PROF_LEFT)
    command(Cmd.SLIDE_PROF_LEFT, Cmd.SLIDE_PROF_LEFT, Dia.WHAT_LANG_TRANS)
    command(Cmd.SLIDE_PROF_RIGHT, Cmd.SLIDE_PROF_RIGHT, Dia.LETS_START)
    conditional(Cond.GB_ROM_EXISTS, Cmd.SLIDE_PROF_RIGHT, Dia.NO_GB_ROM)
    text(Dia.NO_GB_ROM, Dia.WHAT_LANG_TRANS)
    text(Dia.MENU_BACK, Cmd.END_SCRIPT)

    # Start the link and check for errors
    text(Dia.LETS_START, Dia.START)
    text(Dia.START, Cmd.START_LINK)
    command(Cmd.START_LINK, Cmd.START_LINK, Cond.ERROR_TIMEOUT_ONE)
    conditional(Cond.ERROR_TIMEOUT_ONE, Cond.ERROR_TIMEOUT_TWO, Dia.ERROR_TIME_ONE)
    text(Dia.ERROR_TIME_ONE, Dia.START)
    conditional(Cond.ERROR_TIMEOUT_TWO, Cond.ERROR_COM_ENDED, Dia.ERROR_TIME_TWO)
    text(Dia.ERROR_TIME_TWO, Dia.START)
    conditional(Cond.ERROR_COM_ENDED, Cond.ERROR_COLOSSEUM, Dia.ERROR_COM_ENDED)
    text(Dia.ERROR_COM_ENDED, Dia.START)
    conditional(Cond.ERROR_COLOSSEUM, Cond.ERROR_DISCONNECT, Dia.ERROR_COLOSSEUM)
    text(Dia.ERROR_COLOSSEUM, Dia.START)
    conditional(Cond.ERROR_DISCONNECT, Cmd.LOAD_SIMP, Dia.ERROR_DISCONNECT)
    text(Dia.ERROR_DISCONNECT, Dia.START)

    # Pause the link and show the box
    script[Cmd.LOAD_SIMP] = ScriptObj.conditional(
        Cmd.LOAD_SIMP, Cond.SOME_INVALID_PKMN, Dia.NO_VALID_PKMN
    )
    text(Dia.NO_VALID_PKMN, Cmd.CANCEL_LINK)
    conditional(Cond.SOME_INVALID_PKMN, Dia.SOME_INVALID_PKMN, Cond.CHECK_MYTHIC)
    text(Dia.SOME_INVALID_PKMN, Cond.CHECK_MYTHIC)
    conditional(Cond.CHECK_MYTHIC, Dia.MYTHIC_CONVERT, Cond.CHECK_MISSINGNO)
    text(Dia.MYTHIC_CONVERT, Cmd.MYTHIC_MENU)
    command(Cmd.MYTHIC_MENU, Cmd.MYTHIC_MENU, Cond.CHECK_MISSINGNO)
    conditional(Cond.CHECK_MISSINGNO, Dia.IS_MISSINGNO, Dia.IN_BOX)
    text(Dia.IS_MISSINGNO, Dia.IN_BOX)
    text(Dia.IN_BOX, Cmd.BOX_MENU)
    script[Cmd.BOX_MENU] = ScriptObj.conditional(
        Cmd.BOX_MENU, Cmd.IMPORT_POKEMON, Dia.CANCEL
    )
    text(Dia.CANCEL, Cmd.CANCEL_LINK)
    command(Cmd.IMPORT_POKEMON, Cmd.IMPORT_POKEMON, Cmd.CONTINUE_LINK)
    command(Cmd.CONTINUE_LINK, Cmd.CONTINUE_LINK, Cmd.END_MISSINGNO)
    command(Cmd.CANCEL_LINK, Cmd.CANCEL_LINK, Cmd.END_SCRIPT)
    command(Cmd.END_MISSINGNO, Cmd.END_MISSINGNO, Dia.TRANS_GOOD)

    # Finish and report on what was transferred
    text(Dia.TRANS_GOOD, Cond.NEW_POKEMON)
    conditional(Cond.NEW_POKEMON, Dia.NEW_DEX, Dia.NO_NEW_DEX)
    text(Dia.NEW_DEX, Cond.IS_HOENN_RS)
    text(Dia.NO_NEW_DEX, Cond.IS_HOENN_RS)
    conditional(Cond.IS_HOENN_RS, Dia.SEND_FRIEND_HOENN_RS, Cond.IS_HOENN_E)
    conditional(Cond.IS_HOENN_E, Dia.SEND_FRIEND_HOENN_E, Dia.SEND_FRIEND_KANTO)
    text(Dia.SEND_FRIEND_HOENN_RS, Dia.THANK)
    text(Dia.SEND_FRIEND_HOENN_E, Dia.THANK)
    text(Dia.SEND_FRIEND_KANTO, Dia.THANK)
    text(Dia.THANK, Cmd.END_SCRIPT)

    # Hide the dialogue and the professor
    command(Cmd.END_SCRIPT, Cmd.END_SCRIPT, Cmd.BACK_TO_MENU)
    command(Cmd.BACK_TO_MENU, Cmd.BACK_TO_MENU, Cmd.T_SCRIPT_START)
    return script


def build_event_script(dialogue: Mapping[Dia, str]) -> list[ScriptObj]:
    """Build the table of lines for sending an event to a Game Boy game."""
    script = _empty_script()

    def text(dia: Dia, next_index: int) -> None:
        script[dia] = ScriptObj.text_line(dialogue[dia], next_index)

    script[Cmd.E_SCRIPT_START] = ScriptObj.command(Cmd.SHOW_PROF, Dia.ASK_QUEST)
    text(Dia.ASK_QUEST, Cmd.SLIDE_PROF_LEFT)

    text(Dia.WHAT_GAME_EVENT, Cmd.GAME_MENU)
    script[Cmd.GAME_MENU] = ScriptObj.conditional(
        Cmd.GAME_MENU, Cond.GB_ROM_EXISTS, Dia.WHAT_LANG_EVENT
    )
    text(Dia.WHAT_LANG_EVENT, Cmd.LANG_MENU)
    script[Cmd.LANG_MENU] = ScriptObj.command(Cmd.LANG_MENU, Dia.WHAT_GAME_EVENT)
    script[Cmd.SLIDE_PROF_LEFT] = ScriptObj.command(
        Cmd.SLIDE_PROF_LEFT, Dia.WHAT_LANG_EVENT
    )
    script[Cmd.SLIDE_PROF_RIGHT] = ScriptObj.command(
        Cmd.SLIDE_PROF_RIGHT, Cond.CHECK_DEX
    )
    script[Cond.GB_ROM_EXISTS] = ScriptObj.conditional(
        Cond.GB_ROM_EXISTS, Cmd.SLIDE_PROF_RIGHT, Dia.NO_GB_ROM
    )
    text(Dia.NO_GB_ROM, Dia.WHAT_LANG_EVENT)

    # Check the player's dex
    script[Cond.CHECK_DEX] = ScriptObj.conditional(
        Cond.CHECK_DEX, 0, Cond.CHECK_KANTO
    )
    script[Cond.CHECK_KANTO] = ScriptObj.conditional(
        Cond.CHECK_KANTO, Dia.K_DEX_NOT_FULL, Dia.J_DEX_NOT_FULL
    )
    text(Dia.K_DEX_NOT_FULL, Cmd.END_SCRIPT)
    text(Dia.J_DEX_NOT_FULL, Cmd.END_SCRIPT)

    script[Cmd.END_SCRIPT] = ScriptObj.command(Cmd.END_SCRIPT, Cmd.BACK_TO_MENU)
    script[Cmd.BACK_TO_MENU] = ScriptObj.command(
        Cmd.BACK_TO_MENU, Cmd.T_SCRIPT_START
    )
    return script


def language_options() -> list[MenuOption]:
    """Entries of the language menu; the cancel entry's value is None."""
    return [
        ("English", Language.ENG),
        ("Japanese", Language.JPN),
        ("Spanish", Language.SPA),
        ("French", Language.FRE),
        ("German", Language.GER),
        ("Italian", Language.ITA),
        ("Korean", Language.KOR),
        ("Cancel", None),
    ]


def game_options(lang: Language | None) -> list[MenuOption]:
    """Entries of the game menu for a language; the cancel entry's value is None."""
    if lang is Language.JPN:
        games = [
            ("Red", GbGame.RED),
            ("Green", GbGame.GREEN),
            ("Blue", GbGame.BLUE),
            ("Yellow", GbGame.YELLOW),
            ("Gold", GbGame.GOLD),
            ("Silver", GbGame.SILVER),
            ("Crystal", GbGame.CRYSTAL),
        ]
    elif lang is Language.KOR:
        games = [("Gold", GbGame.GOLD), ("Silver", GbGame.SILVER)]
    else:
        games = [
            ("Red", GbGame.RED),
            ("Blue", GbGame.BLUE),
            ("Yellow", GbGame.YELLOW),
            ("Gold", GbGame.GOLD),
            ("Silver", GbGame.SILVER),
            ("Crystal", GbGame.CRYSTAL),
        ]
    return games + [("Cancel", None)]


def next_line_id(line: ScriptObj, run_conditional: Callable[[int], bool]) -> int:
    """Index of the line after ``line``, running its command or conditional."""
    if line.cond_id == 0:
        return line.true_index
    if run_conditional(line.cond_id):
        return line.true_index
    return line.false_index