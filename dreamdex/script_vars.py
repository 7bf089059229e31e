"""Labels and data blocks placed into a Mystery Gift script being assembled.

A :class:`ScriptBuffer` holds the write position shared by all variables of
one script, the ROM they target and the list of registered variables.  The
variables write into a byte array passed to them (normally the script's
bytes) and advance the shared position as they go.  References to a label
are recorded first and patched in by ``fill_references`` once the label's
place is known.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import MutableSequence, Sequence

from dreamdex.gba_rom import GbaRomData

_STRING_END = 0xFF
_MOVEMENT_END = 0xFE
_COLOR_CODE = 0xFC
_COLOR_ARGUMENT = 0x01
_PALETTE_BYTES = 32


@dataclass
class ScriptBuffer:
    """Write position, target ROM and variables of one script being built."""

    rom: GbaRomData
    position: int = 0
    variables: list = field(default_factory=list)


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


class _ScriptVar(ABC):
    def __init__(self, script: ScriptBuffer, value: int = 0) -> None:
        script.variables.append(self)
        self.script = script
        self.value = value
        self.start = 0

    @property
    def rom(self) -> GbaRomData:
        return self.script.rom

    @abstractmethod
    def set_start(self) -> None:
        """Mark the current position as this variable's start."""

    def place_word(self) -> int:
        """Mark the start here and return the variable's value."""
        self.set_start()
        return self.value

    def fill_references(self, buffer: MutableSequence[int]) -> None:
        raise TypeError(f"{type(self).__name__} has no references to fill")

    def _emit(self, buffer: MutableSequence[int], value: int) -> None:
        buffer[self.script.position] = value & 0xFF
        self.script.position += 1

    def _emit_word(self, buffer: MutableSequence[int], value: int) -> None:
        for shift in range(0, 32, 8):
            self._emit(buffer, value >> shift)


class AsmVar(_ScriptVar):
    """A label inside Thumb code, referenced relatively or absolutely."""

    def __init__(self, script: ScriptBuffer, value: int = 0) -> None:
        super().__init__(script, value)
        self.is_direct = False
        self.locations: list[int] = []

    def set_start(self, is_direct: bool = False) -> None:
        self.start = self.script.position - 2
        self.is_direct = is_direct

    def add_reference(self, command_offset: int = 0) -> int:
        """Record a reference at the current position; returns the placeholder 0."""
        self.locations.append(self.script.position + command_offset)
        return 0x00

    def fill_references(self, buffer: MutableSequence[int]) -> None:
        for location in self.locations:
            if self.is_direct:
                address = (
                    self.start
                    + self.rom.loc_save_block1
                    + self.rom.offset_ramscript
                    + 7
                )
                for j in range(4):
                    buffer[location + j] = (
                        buffer[location + j] + (address >> (j * 8))
                    ) & 0xFF
            else:
                delta = _trunc_div(self.start - location, 4) & 0xFF
                buffer[location] = (buffer[location] + delta) & 0xFF

    def location_in_section30(self) -> int:
        """Address of the label once section 30 is loaded, with the Thumb bit set."""
        return self.start + self.rom.loc_save_data_buffer + 3


class XseVar(_ScriptVar):
    """A label inside event script bytecode, referenced as a 16-bit offset."""

    def __init__(self, script: ScriptBuffer, value: int = 0) -> None:
        super().__init__(script, value)
        self.locations: list[int] = []
        self.command_offset = 0
        self.reference_var: XseVar | None = None

    def set_start(self) -> None:
        self.start = self.script.position - 4

    def add_reference(
        self, command_offset: int, offset_from: XseVar | None = None
    ) -> int:
        """Record a reference, optionally relative to another label; returns 0."""
        self.locations.append(self.script.position + command_offset)
        self.command_offset = command_offset
        self.reference_var = offset_from
        return 0x0000

    def fill_references(self, buffer: MutableSequence[int]) -> None:
        for location in self.locations:
            base = self.reference_var.start if self.reference_var is not None else 0
            delta = self.start - base
            buffer[location] = (buffer[location] + (delta & 0xFF)) & 0xFF
            buffer[location + 1] = (
                buffer[location + 1] + ((delta & 0xFF00) >> 8)
            ) & 0xFF

    def location_in_section30(self) -> int:
        """Address of the label once section 30 is loaded."""
        return self.start + self.rom.loc_save_data_buffer


class TextboxVar(_ScriptVar):
    """A string, already in the game's character encoding, ended by 0xFF."""

    def __init__(
        self,
        script: ScriptBuffer,
        text: bytes = b"",
        old_event: bool = False,
    ) -> None:
        super().__init__(script)
        self.text = bytes(text)
        self.old_event = old_event

    def set_start(self) -> None:
        self.start = self.script.position - (4 if self.old_event else 0)

    def set_virtual_start(self) -> None:
        self.start = self.script.position - 4

    def _write_text(self, buffer: MutableSequence[int]) -> None:
        strip_colors = self.rom.is_hoenn()
        text = self.text
        parser = 0
        while parser < len(text):
            character = text[parser]
            if (
                strip_colors
                and character == _COLOR_CODE
                and parser + 1 < len(text)
                and text[parser + 1] == _COLOR_ARGUMENT
            ):
                parser += 3
                continue
            self._emit(buffer, character)
            parser += 1
        self._emit(buffer, _STRING_END)

    def insert_text(self, buffer: MutableSequence[int]) -> None:
        """Write the string at the current position."""
        self.set_start()
        self._write_text(buffer)

    def insert_virtual_text(self, buffer: MutableSequence[int]) -> None:
        """Write the string, with the start placed four bytes back."""
        self.set_virtual_start()
        self._write_text(buffer)


class MovementVar(_ScriptVar):
    """A list of movement commands ended by 0xFE."""

    def __init__(self, script: ScriptBuffer, movement: Sequence[int] = ()) -> None:
        super().__init__(script)
        self.movement = list(movement)

    def set_start(self) -> None:
        self.start = self.script.position

    def insert_movement(self, buffer: MutableSequence[int]) -> None:
        self.set_start()
        for step in self.movement:
            self._emit(buffer, step)
        self._emit(buffer, _MOVEMENT_END)


class SpriteVar(_ScriptVar):
    """A sprite sheet header, its tile data and a 16-colour palette."""

    def set_start(self) -> None:
        self.start = self.script.position

    def insert_sprite_data(
        self,
        buffer: MutableSequence[int],
        sprite_words: Sequence[int],
        size: int,
        palette: Sequence[int],
    ) -> None:
        """Write pointer, size, ``size`` bytes of tile words and the palette."""
        self.set_start()
        pointer = self.rom.loc_save_data_buffer + self.script.position + 8
        self._emit_word(buffer, pointer)
        self._emit_word(buffer, size)
        for parser in range(size):
            self._emit(buffer, sprite_words[parser // 4] >> (8 * (parser % 4)))
        for parser in range(_PALETTE_BYTES):
            self._emit(buffer, palette[parser // 2] >> (8 * (parser % 2)))


class MusicVar(_ScriptVar):
    """A song: its tracks followed by an aligned song header."""

    def __init__(self, script: ScriptBuffer) -> None:
        super().__init__(script)
        self.tracks: list[bytes] = []

    def set_start(self) -> None:
        self.start = self.script.position

    def add_track(self, track: Sequence[int]) -> None:
        self.tracks.append(bytes(value & 0xFF for value in track))

    def insert_music_data(
        self,
        buffer: MutableSequence[int],
        block_count: int,
        priority: int,
        reverb: int,
        tone_data_pointer: int,
    ) -> None:
        """Write every track, then the header pointing at them."""
        track_pointers = []
        for track in self.tracks:
            track_pointers.append(
                self.script.position + self.rom.loc_save_data_buffer
            )
            for value in track:
                self._emit(buffer, value)

        self.script.position += -self.script.position % 4
        self.set_start()
        self._emit(buffer, len(self.tracks))
        self._emit(buffer, block_count)
        self._emit(buffer, priority)
        self._emit(buffer, reverb)
        self._emit_word(buffer, tone_data_pointer)
        for pointer in track_pointers:
            self._emit_word(buffer, pointer)