import dataclasses

import pytest

from dreamdex.gba_rom import (
    GER_RUBY_V0,
    Game,
    Language,
    TextRegion,
    Version,
)
from dreamdex.rom_catalog import all_roms, find_rom


def test_find_spanish_ruby():
    rom = find_rom(Game.RUBY, Version.V1_0, Language.SPA)
    assert rom.loc_copy_mon_to_pc == 0x803DB64
    assert rom.loc_m4a_mplay_stop == 0x81E3450
    assert rom.language is Language.SPA


def test_find_german_returns_existing_entry():
    assert find_rom(Game.RUBY, Version.V1_0, Language.GER) is GER_RUBY_V0


def test_spanish_emerald_values():
    rom = find_rom(Game.EMERALD, Version.V1_0, Language.SPA)
    assert rom.loc_voicegroup == 0x8689028
    assert rom.loc_load_save_section30 == 0x81D3738
    assert rom.text_region is TextRegion.HOENN
    assert rom.special_draw_whole_map_view == 0x91


def test_spanish_revisions_differ_only_in_version():
    v0 = find_rom(Game.SAPPHIRE, Version.V1_0, Language.SPA)
    v1 = find_rom(Game.SAPPHIRE, Version.V1_1, Language.SPA)
    assert v1.version is Version.V1_1
    assert dataclasses.replace(v1, version=Version.V1_0) == v0


def test_frlg_share_values():
    fr = find_rom(Game.FIRERED, Version.V1_0, Language.SPA)
    lg = find_rom(Game.LEAFGREEN, Version.V1_0, Language.SPA)
    assert fr.loc_save_data_buffer == lg.loc_save_data_buffer == 0x02039A38
    assert fr.loc_get_set_pokedex_flag == 0x808902C
    assert lg.loc_get_set_pokedex_flag == 0x8089000


def test_missing_combination_raises():
    with pytest.raises(KeyError):
        find_rom(Game.EMERALD, Version.V1_1, Language.SPA)
    with pytest.raises(KeyError):
        find_rom(Game.RUBY, Version.V1_0, Language.KOR)


def test_all_roms_unique_and_findable():
    roms = all_roms()
    keys = {(r.gamecode, r.version, r.language) for r in roms}
    assert len(keys) == len(roms) == 14
    for rom in roms:
        assert find_rom(rom.gamecode, rom.version, rom.language) is rom