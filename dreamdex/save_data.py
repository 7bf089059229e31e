"""The tool's own save data, kept in an unused corner of the Hall of Fame sector.

The data is a small block of bytes inside one 4 KiB flash sector:

* 32 bytes of caught flags, one bit per species,
* one byte telling whether the tutorial has been seen,
* one byte with the default language.
"""

from __future__ import annotations

HALL_OF_FAME = 0x01C000
SECTOR_ADDRESS = HALL_OF_FAME + 0x1000
SECTOR_SIZE = 0x1000
HOF_SECTION = 2032

CAUGHT_DATA = 0x00
TUTORIAL_FLAG = 0x20
DEFAULT_LANGUAGE = 0x21
SAVE_DATA_SIZE = 0x22

_CAUGHT_BITS = TUTORIAL_FLAG * 8


class CustomSaveData:
    """Caught flags, tutorial flag and default language."""

    def __init__(self) -> None:
        self.data = bytearray(SAVE_DATA_SIZE)

    @staticmethod
    def _check_sector(sector: bytes) -> None:
        if len(sector) < HOF_SECTION + SAVE_DATA_SIZE:
            raise ValueError(
                f"sector of {len(sector)} bytes is too short to hold save data"
            )

    def load(self, sector: bytes) -> None:
        """Read the save data out of the Hall of Fame sector's contents."""
        self._check_sector(sector)
        self.data = bytearray(sector[HOF_SECTION:HOF_SECTION + SAVE_DATA_SIZE])

    def write(self, sector: bytes) -> bytearray:
        """Return a copy of the sector's contents with the save data written in."""
        self._check_sector(sector)
        updated = bytearray(sector)
        updated[HOF_SECTION:HOF_SECTION + SAVE_DATA_SIZE] = self.data
        return updated

    @staticmethod
    def _check_dex(dex_num: int) -> None:
        if not 0 <= dex_num < _CAUGHT_BITS:
            raise ValueError(f"dex number out of range: {dex_num}")

    def is_caught(self, dex_num: int) -> bool:
        self._check_dex(dex_num)
        return bool((self.data[CAUGHT_DATA + dex_num // 8] >> (dex_num % 8)) & 1)

    def set_caught(self, dex_num: int) -> None:
        self._check_dex(dex_num)
        self.data[CAUGHT_DATA + dex_num // 8] |= 1 << (dex_num % 8)

    @property
    def default_language(self) -> int:
        return self.data[DEFAULT_LANGUAGE]

    @default_language.setter
    def default_language(self, value: int) -> None:
        self.data[DEFAULT_LANGUAGE] = value & 0xFF

    @property
    def tutorial_flag(self) -> bool:
        return bool(self.data[TUTORIAL_FLAG])

    @tutorial_flag.setter
    def tutorial_flag(self, value: bool) -> None:
        self.data[TUTORIAL_FLAG] = int(bool(value))

    def initialize(self) -> None:
        """Clear everything and mark the tutorial as done."""
        self.data = bytearray(SAVE_DATA_SIZE)
        self.tutorial_flag = True

    def dex_completion(self, gen: int, include_mythicals: bool) -> int:
        """Count caught species of one generation, optionally with its mythical."""
        start, stop = (1, 151) if gen == 1 else (152, 251)
        end = stop + (1 if include_mythicals else 0)
        return sum(1 for dex in range(start, end) if self.is_caught(dex))