"""Lookup of GBA ROM data by game, revision and language."""

from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType

from dreamdex.gba_rom import (
    EMERALD_SHARED,
    FIRERED_LEAFGREEN_SHARED,
    GERMAN_ROMS,
    RUBY_SAPPHIRE_SHARED,
    Game,
    GbaRomData,
    Language,
    Version,
)

SPA_RUBY_V0 = GbaRomData(
    gamecode=Game.RUBY,
    version=Version.V1_0,
    language=Language.SPA,
    loc_copy_mon_to_pc=0x803DB64,
    loc_get_set_pokedex_flag=0x8091220,
    loc_read_flash_sector=0x8126078,
    loc_m4a_mplay_stop=0x81E3450,
    loc_mplay_start=0x81E336C,
    loc_create_fanfare_task=0x8075404,
    loc_voicegroup=0x8445680,
    loc_pic_table_npc=0x8371D20,
    **RUBY_SAPPHIRE_SHARED,
)

SPA_SAPPHIRE_V0 = GbaRomData(
    gamecode=Game.SAPPHIRE,
    version=Version.V1_0,
    language=Language.SPA,
    loc_copy_mon_to_pc=0x803DB64,
    loc_get_set_pokedex_flag=0x8091220,
    loc_read_flash_sector=0x8126078,
    loc_m4a_mplay_stop=0x81E33E0,
    loc_mplay_start=0x81E32FC,
    loc_create_fanfare_task=0x8075408,
    loc_voicegroup=0x84453BC,
    loc_pic_table_npc=0x8371CB0,
    **RUBY_SAPPHIRE_SHARED,
)

SPA_RUBY_V1 = replace(SPA_RUBY_V0, version=Version.V1_1)
SPA_SAPPHIRE_V1 = replace(SPA_SAPPHIRE_V0, version=Version.V1_1)

SPA_FIRERED_V0 = GbaRomData(
    gamecode=Game.FIRERED,
    version=Version.V1_0,
    language=Language.SPA,
    loc_copy_mon_to_pc=0x8040A7C,
    loc_get_set_pokedex_flag=0x808902C,
    loc_read_flash_sector=0x8104E44,
    loc_load_save_section30=0x815D588,
    loc_m4a_mplay_stop=0x81DD470,
    loc_mplay_start=0x81DD38C,
    loc_create_fanfare_task=0x8071D24,
    loc_voicegroup=0x848F174,
    loc_pic_table_npc=0x839C220,
    **FIRERED_LEAFGREEN_SHARED,
)

SPA_LEAFGREEN_V0 = GbaRomData(
    gamecode=Game.LEAFGREEN,
    version=Version.V1_0,
    language=Language.SPA,
    loc_copy_mon_to_pc=0x8040A7C,
    loc_get_set_pokedex_flag=0x8089000,
    loc_read_flash_sector=0x8104E1C,
    loc_load_save_section30=0x815D564,
    loc_m4a_mplay_stop=0x81DD44C,
    loc_mplay_start=0x81DD368,
    loc_create_fanfare_task=0x8071D24,
    loc_voicegroup=0x848E86C,
    loc_pic_table_npc=0x839C200,
    **FIRERED_LEAFGREEN_SHARED,
)

SPA_EMERALD_V0 = GbaRomData(
    gamecode=Game.EMERALD,
    version=Version.V1_0,
    language=Language.SPA,
    loc_copy_mon_to_pc=0x806B490,
    loc_get_set_pokedex_flag=0x80C0428,
    loc_read_flash_sector=0x8152DF0,
    loc_load_save_section30=0x81D3738,
    loc_m4a_mplay_stop=0x82E8104,
    loc_mplay_start=0x82E8020,
    loc_create_fanfare_task=0x80A3184,
    loc_voicegroup=0x8689028,
    loc_pic_table_npc=0x8509A60,
    **EMERALD_SHARED,
)

SPANISH_ROMS = (
    SPA_RUBY_V0,
    SPA_SAPPHIRE_V0,
    SPA_RUBY_V1,
    SPA_SAPPHIRE_V1,
    SPA_FIRERED_V0,
    SPA_LEAFGREEN_V0,
    SPA_EMERALD_V0,
)

_ALL_ROMS = GERMAN_ROMS + SPANISH_ROMS

_INDEX = MappingProxyType(
    {(rom.gamecode, rom.version, rom.language): rom for rom in _ALL_ROMS}
)


def find_rom(game: Game, version: Version, language: Language) -> GbaRomData:
    """Return the ROM data for one game revision and language.

    Raises KeyError when that combination is not supported.
    """
    try:
        return _INDEX[(game, version, language)]
    except KeyError:
        raise KeyError(
            f"no ROM data for {game.name} {version.value} ({language.name})"
        ) from None


def all_roms() -> tuple[GbaRomData, ...]:
    """Every supported ROM, in catalogue order."""
    return _ALL_ROMS