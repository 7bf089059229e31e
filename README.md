# dreamdex

`dreamdex` is a plain Python library (no runtime dependencies) holding the
pieces used to move Pokémon from the Game Boy and Game Boy Color games into
the Game Boy Advance games:

* an assembler for the Game Boy CPU, for building link-cable payloads,
* address tables for the German and Spanish Game Boy Advance cartridges,
* the tool's own small save-data block,
* constants of the link-cable trade protocol,
* builders for the pieces of a Mystery Gift script,
* the professor's dialogue, the transfer and event scripts, a script player
  and a pick-one menu model.

Install with `pip install .`; the test suite runs with pytest
(`pip install .[test]`, then `pytest`).

## `dreamdex.z80_asm`

`Z80Assembler(data_size, memory_offset)` writes machine code into a
zero-filled `bytearray` of fixed size (`data`), at position `index`.
Methods are named after the mnemonics: `ld`, `ldh`, `ldhl`, `add`, `adc`,
`sub`, `sbc`, `and_`, `xor`, `or_`, `cp`, `inc`, `dec`, `rlc`, `rrc`, `rl`,
`rr`, `sla`, `sra`, `swap`, `srl`, `bit`, `res`, `set`, `jr`, `jp`, `call`,
`ret`, `reti`, `rst`, `push`, `pop`, `daa`, `cpl`, `scf`, `ccf`, `nop`,
`halt`, `stop`, `di` and `ei`. `add_byte` writes one raw byte. `jr`, `jp`,
`call` and `ret` take an optional flag (`NZ_F`, `Z_F`, `NC_F`, `C_F`) as
first argument.

Operands are integers tagged in their top byte. A bare integer is an
unsigned byte; `i8(value)`, `u16(value)` and `bit(number)` tag signed bytes,
words and bit numbers (and raise `ValueError` when out of range). Registers
and pointers are module constants: `A`, `B`, `C`, `D`, `E`, `H`, `L`,
`HL_PTR`, `BC`, `DE`, `HL`, `SP`, `AF`, `BC_PTR`, `DE_PTR`, `HLI_PTR`,
`HLD_PTR`.

```python
from dreamdex.z80_asm import Z80Assembler, A, HL, u16

asm = Z80Assembler(16, 0xC5D0)
asm.ld(HL, u16(0xD000))
asm.ld(A, 0x42)
asm.ret()
```

An operand combination with no encoding raises `Z80AsmError`; writing past
the end of the buffer raises `IndexError`.

`Z80Variable(registry=None, data=())` is a block of data whose address is
needed by earlier instructions: `place_ptr` records the operand to patch
(call it just before assembling the instruction), `insert_variable` writes
the data, and `update_ptrs` patches every recorded operand. `load_data`
replaces its contents. `Z80Jump(registry=None)` does the same for jump
targets with `place_relative_jump`, `place_direct_jump`, `set_start` and
`update_jumps`. Both raise `Z80AsmError` when patched before their place is
known. If a list is passed as `registry`, the object appends itself to it.

## `dreamdex.gba_rom` and `dreamdex.rom_catalog`

`GbaRomData` is a frozen dataclass describing one cartridge revision and
language: function and RAM addresses, save-block offsets, progress flags
and NPC map placement. `Game`, `Version`, `Language` and `TextRegion` name
them. `is_ruby_sapphire()` and `is_hoenn()` answer the questions the
scripts branch on.

`rom_catalog.find_rom(game, version, language)` returns a known entry and
raises `KeyError` otherwise; `all_roms()` returns every entry. The catalogue
holds the German and Spanish Ruby and Sapphire (1.0 and 1.1), FireRed,
LeafGreen and Emerald (1.0) only.

## `dreamdex.save_data`

`CustomSaveData` holds 34 bytes: a caught flag per species, a tutorial flag
and a default language (`tutorial_flag` and `default_language` properties).
`load(sector)` reads them out of the Hall of Fame sector's bytes, and
`write(sector)` returns a copy of those bytes with them written in; both
raise `ValueError` for a sector too short. `is_caught`, `set_caught`,
`initialize` (clear, then mark the tutorial done) and
`dex_completion(gen, include_mythicals)` manage the Dream Dex.

## `dreamdex.trade_protocol`

`ConnectionState`, `TradeCentreState` and the byte constants of the cable
club handshake. `menu_selection_name(value)` names a menu byte and raises
`ValueError` for any other.

## `dreamdex.script_vars`

A `ScriptBuffer(rom)` holds the write position, target ROM and variables of
one Mystery Gift script. Into a byte array passed to them, `AsmVar` and
`XseVar` place labels whose references are patched by `fill_references`
(`location_in_section30` gives the label's address once loaded),
`TextboxVar` writes already-encoded text ended by `0xFF` (stripping colour
codes on Hoenn games), `MovementVar` writes movement lists ended by `0xFE`,
`SpriteVar` writes a sprite header, tiles and palette, and `MusicVar` writes
tracks followed by an aligned song header.

## Scripts and dialogue

`script_ids` numbers the script table: `Dia` (dialogue), `Cmd` (commands)
and `Cond` (conditionals); `kind_of(index)` returns the member for an index
or raises `ValueError`. `ScriptObj` is one line, made with
`ScriptObj.text_line`, `ScriptObj.command` or `ScriptObj.conditional`.

`dialogue.build_dialogue()` returns every dialogue line (`|` separates
pages). `scripts.build_transfer_script(dialogue)` and
`scripts.build_event_script(dialogue)` wire them into the two tables;
`language_options()` and `game_options(lang)` give menu entries (games named
by `GbGame`, cancel as `None`); `next_line_id(line, run_conditional)` picks
the next line, calling your function for commands and conditionals.

`text_engine.ScriptPlayer(script, start, run_conditional)` walks a table:
`pages()` yields each page shown until a command calls `exit()`.
`split_pages` splits a line on `|`.

`select_menu.SelectMenu(enable_cancel, menu_type)` is the pick-one menu
(`MenuType.LANG` or `MenuType.CART`): `add_option`, `set_lang`, wrapping
`move_down` and `move_up`, `selected_value`, and `confirm` or `cancel`,
which both clear the options. `cancel` raises `RuntimeError` when not
enabled.

## What it does not do

There is no command to run and no screen. The package does not talk over a
link cable, read or write flash memory, decode or convert Pokémon data,
encode text into the games' character sets, or decide the conditionals
itself: callers supply the sector bytes, the encoded text and the function
that answers each command and conditional.