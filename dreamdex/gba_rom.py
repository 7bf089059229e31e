"""Per-cartridge addresses and settings of the GBA games the transfer targets.

Each :class:`GbaRomData` describes one game, revision and language: where
its functions and RAM structures live, which flags mark game progress and
where the delivery NPC is placed.  Values that are the same for every
language of a game family are kept in the ``*_SHARED`` mappings.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType


class Game(Enum):
    RUBY = "ruby"
    SAPPHIRE = "sapphire"
    FIRERED = "firered"
    LEAFGREEN = "leafgreen"
    EMERALD = "emerald"


class Language(Enum):
    JPN = "jpn"
    ENG = "eng"
    FRE = "fre"
    ITA = "ita"
    GER = "ger"
    SPA = "spa"
    KOR = "kor"


class Version(Enum):
    V1_0 = "1.0"
    V1_1 = "1.1"


class TextRegion(Enum):
    HOENN = "hoenn"
    KANTO = "kanto"


@dataclass(frozen=True, kw_only=True)
class GbaRomData:
    """Addresses, offsets and flags of one GBA game revision."""

    gamecode: Game
    version: Version
    language: Language
    is_valid: bool = True

    loc_copy_mon_to_pc: int
    loc_get_set_pokedex_flag: int
    loc_read_flash_sector: int
    loc_load_save_section30: int = 0
    loc_m4a_mplay_stop: int
    loc_mplay_start: int
    loc_create_fanfare_task: int
    loc_voicegroup: int
    loc_pic_table_npc: int

    loc_save_block1: int = 0
    loc_save_data_buffer: int
    loc_special_var_0x8000: int
    loc_mplay_info_bgm: int
    loc_mplay_info_se2: int
    loc_fanfare_counter: int
    loc_pltt_buffer_faded: int
    loc_sprites: int

    offset_ramscript: int
    offset_flags: int
    offset_wondercard: int = 0
    offset_script: int
    text_region: TextRegion
    special_draw_whole_map_view: int

    e4_flag: int
    mg_flag: int
    unused_flag_start: int

    map_bank: int
    map_id: int
    npc_id: int
    npc_palette: int

    def_map_bank: int
    def_map_id: int
    def_npc_id: int

    old_map_bank: int
    old_map_id: int
    old_npc_id: int

    loc_save_block1_ptr: int = 0

    def is_ruby_sapphire(self) -> bool:
        """True for Ruby and Sapphire."""
        return self.gamecode in (Game.RUBY, Game.SAPPHIRE)

    def is_hoenn(self) -> bool:
        """True for the games set in Hoenn: Ruby, Sapphire and Emerald."""
        return self.gamecode in (Game.RUBY, Game.SAPPHIRE, Game.EMERALD)


RUBY_SAPPHIRE_SHARED = MappingProxyType(
    {
        "loc_save_block1": 0x02025734,
        "loc_save_data_buffer": 0x02000000,
        "loc_special_var_0x8000": 0x0202E8C4,
        "loc_mplay_info_bgm": 0x03007380 + 0x10,
        "loc_mplay_info_se2": 0x03007400 + 0x10,
        "loc_fanfare_counter": 0x030006DA,
        "loc_pltt_buffer_faded": 0x0202EEC8,
        "loc_sprites": 0x02020004,
        "offset_ramscript": 0x3690,
        "offset_flags": 0x1220,
        "offset_script": 0x0810,
        "text_region": TextRegion.HOENN,
        "special_draw_whole_map_view": 0x8E,
        "e4_flag": 0x800 + 0x04,
        "mg_flag": 0x800 + 0x4C,
        "unused_flag_start": 0x21,
        "map_bank": 14,
        "map_id": 11,
        "npc_id": 1,
        "npc_palette": 5,
        "def_map_bank": 8,
        "def_map_id": 1,
        "def_npc_id": 1,
        "old_map_bank": 20,
        "old_map_id": 2,
        "old_npc_id": 1,
    }
)

FIRERED_LEAFGREEN_SHARED = MappingProxyType(
    {
        "loc_save_data_buffer": 0x02039A38,
        "loc_special_var_0x8000": 0x020370B8,
        "loc_mplay_info_bgm": 0x03007300 - 0x110,
        "loc_mplay_info_se2": 0x03007380 - 0x110,
        "loc_fanfare_counter": 0x03000FC6,
        "loc_pltt_buffer_faded": 0x020375F8,
        "loc_sprites": 0x0202063C,
        "offset_ramscript": 0x361C,
        "offset_flags": 0x0EE0,
        "offset_wondercard": 0x0460,
        "offset_script": 0x079C,
        "text_region": TextRegion.KANTO,
        "special_draw_whole_map_view": 0x8E,
        "e4_flag": 0x800 + 0x2C,
        "mg_flag": 0x800 + 0x39,
        "unused_flag_start": 0xAF,
        "map_bank": 31,
        "map_id": 0,
        "npc_id": 1,
        "npc_palette": 3,
        "def_map_bank": 0xFF,
        "def_map_id": 0xFF,
        "def_npc_id": 0xFF,
        "old_map_bank": 30,
        "old_map_id": 0,
        "old_npc_id": 1,
        "loc_save_block1_ptr": 0x03005008,
    }
)

EMERALD_SHARED = MappingProxyType(
    {
        "loc_save_data_buffer": 0x0203ABBC,
        "loc_special_var_0x8000": 0x020375D8,
        "loc_mplay_info_bgm": 0x03007420,
        "loc_mplay_info_se2": 0x03007630,
        "loc_fanfare_counter": 0x03000F4E,
        "loc_pltt_buffer_faded": 0x02037B14,
        "loc_sprites": 0x02020630,
        "offset_ramscript": 0x3728,
        "offset_flags": 0x1270,
        "offset_wondercard": 0x056C,
        "offset_script": 0x08A8,
        "text_region": TextRegion.HOENN,
        "special_draw_whole_map_view": 0x91,
        "e4_flag": 0x860 + 0x04,
        "mg_flag": 0x860 + 0x7B,
        "unused_flag_start": 0x20,
        "map_bank": 15,
        "map_id": 13,
        "npc_id": 1,
        "npc_palette": 5,
        "def_map_bank": 0xFF,
        "def_map_id": 0xFF,
        "def_npc_id": 0xFF,
        "old_map_bank": 20,
        "old_map_id": 2,
        "old_npc_id": 1,
        "loc_save_block1_ptr": 0x03005D8C,
    }
)


GER_RUBY_V0 = GbaRomData(
    gamecode=Game.RUBY,
    version=Version.V1_0,
    language=Language.GER,
    loc_copy_mon_to_pc=0x803DB6C,
    loc_get_set_pokedex_flag=0x8091194,
    loc_read_flash_sector=0x8125F78,
    loc_m4a_mplay_stop=0x81EB6AC,
    loc_mplay_start=0x81EB5C8,
    loc_create_fanfare_task=0x8075308,
    loc_voicegroup=0x844E184,
    loc_pic_table_npc=0x8379F70,
    **RUBY_SAPPHIRE_SHARED,
)

GER_SAPPHIRE_V0 = GbaRomData(
    gamecode=Game.SAPPHIRE,
    version=Version.V1_0,
    language=Language.GER,
    loc_copy_mon_to_pc=0x803DB6C,
    loc_get_set_pokedex_flag=0x8091194,
    loc_read_flash_sector=0x8125F78,
    loc_m4a_mplay_stop=0x81EB640,
    loc_mplay_start=0x81EB55C,
    loc_create_fanfare_task=0x807530C,
    loc_voicegroup=0x844E0F0,
    loc_pic_table_npc=0x8379F04,
    **RUBY_SAPPHIRE_SHARED,
)

GER_RUBY_V1 = replace(GER_RUBY_V0, version=Version.V1_1)
GER_SAPPHIRE_V1 = replace(GER_SAPPHIRE_V0, version=Version.V1_1)

GER_FIRERED_V0 = GbaRomData(
    gamecode=Game.FIRERED,
    version=Version.V1_0,
    language=Language.GER,
    loc_copy_mon_to_pc=0x8040A90,
    loc_get_set_pokedex_flag=0x8088F58,
    loc_read_flash_sector=0x8104D5C,
    loc_load_save_section30=0x815D45C,
    loc_m4a_mplay_stop=0x81E1BD4,
    loc_mplay_start=0x81E1AF0,
    loc_create_fanfare_task=0x8071C50,
    loc_voicegroup=0x8496E9C,
    loc_pic_table_npc=0x83A097C,
    **FIRERED_LEAFGREEN_SHARED,
)

GER_LEAFGREEN_V0 = GbaRomData(
    gamecode=Game.LEAFGREEN,
    version=Version.V1_0,
    language=Language.GER,
    loc_copy_mon_to_pc=0x8040A90,
    loc_get_set_pokedex_flag=0x8088F2C,
    loc_read_flash_sector=0x8104D34,
    loc_load_save_section30=0x815D438,
    loc_m4a_mplay_stop=0x81E1BB0,
    loc_mplay_start=0x81E1ACC,
    loc_create_fanfare_task=0x8071C50,
    loc_voicegroup=0x8496008,
    loc_pic_table_npc=0x83A095C,
    **FIRERED_LEAFGREEN_SHARED,
)

GER_EMERALD_V0 = GbaRomData(
    gamecode=Game.EMERALD,
    version=Version.V1_0,
    language=Language.GER,
    loc_copy_mon_to_pc=0x806B494,
    loc_get_set_pokedex_flag=0x80C0430,
    loc_read_flash_sector=0x8152CF0,
    loc_load_save_section30=0x81D3640,
    loc_m4a_mplay_stop=0x82F66B8,
    loc_mplay_start=0x82F65D4,
    loc_create_fanfare_task=0x80A318C,
    loc_voicegroup=0x8697C60,
    loc_pic_table_npc=0x8518134,
    **EMERALD_SHARED,
)

GERMAN_ROMS = (
    GER_RUBY_V0,
    GER_SAPPHIRE_V0,
    GER_RUBY_V1,
    GER_SAPPHIRE_V1,
    GER_FIRERED_V0,
    GER_LEAFGREEN_V0,
    GER_EMERALD_V0,
)