"""Game Boy CPU assembler, GBA ROM tables, save data, Mystery Gift script pieces and dialogue scripts for Pokémon transfers."""

__version__ = "0.1.0"