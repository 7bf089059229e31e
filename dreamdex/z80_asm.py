"""A small assembler for the Game Boy CPU (the Z80-like SM83).

Operands are plain integers tagged with a type in their top byte:

* a bare integer is an unsigned 8-bit immediate,
* :func:`i8`, :func:`u16` and :func:`bit` tag signed bytes, words and bit
  numbers,
* the register, pointer and flag constants carry their own tags.

Every opcode method appends its encoding to :attr:`Z80Assembler.data` and
raises :class:`Z80AsmError` when the operand combination is not encodable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

T_U8 = 0x00000000
T_I8 = 0x01000000
T_U16 = 0x02000000
T_8BIT_REG = 0x03000000
T_16BIT_REG = 0x04000000
T_16BIT_PTR = 0x05000000
T_BIT = 0x06000000
T_FLAG = 0x07000000

B = 0x00 | T_8BIT_REG
C = 0x01 | T_8BIT_REG
D = 0x02 | T_8BIT_REG
E = 0x03 | T_8BIT_REG
H = 0x04 | T_8BIT_REG
L = 0x05 | T_8BIT_REG
HL_PTR = 0x06 | T_8BIT_REG
A = 0x07 | T_8BIT_REG

BC = 0x00 | T_16BIT_REG
DE = 0x01 | T_16BIT_REG
HL = 0x02 | T_16BIT_REG
SP = 0x03 | T_16BIT_REG
AF = 0x03 | T_16BIT_REG  # Shares SP's encoding; only meaningful for PUSH/POP

BC_PTR = 0x00 | T_16BIT_PTR
DE_PTR = 0x01 | T_16BIT_PTR
HLI_PTR = 0x02 | T_16BIT_PTR
HLD_PTR = 0x03 | T_16BIT_PTR

NZ_F = 0x00 | T_FLAG
Z_F = 0x01 | T_FLAG
NC_F = 0x02 | T_FLAG
C_F = 0x03 | T_FLAG

REGISTERS_8 = (B, C, D, E, H, L, HL_PTR, A)
REGISTERS_16 = (BC, DE, HL, SP)
FLAGS = (NZ_F, Z_F, NC_F, C_F)


class Z80AsmError(ValueError):
    """Raised when an instruction cannot be encoded."""


def _type(operand: int) -> int:
    return operand & 0xFF000000


def i8(value: int) -> int:
    """Tag a signed byte (-128..127) as an 8-bit signed operand."""
    if not -128 <= value <= 127:
        raise ValueError(f"signed byte out of range: {value}")
    return T_I8 | (value & 0xFF)


def u16(value: int) -> int:
    """Tag an unsigned 16-bit value as a word operand."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"word out of range: {value}")
    return T_U16 | value


def bit(number: int) -> int:
    """Tag a bit number (0..7) for the BIT, RES and SET instructions."""
    if not 0 <= number <= 7:
        raise ValueError(f"bit number out of range: {number}")
    return T_BIT | number


class Z80Assembler:
    """Fixed-size code buffer that instructions are assembled into."""

    def __init__(self, data_size: int, memory_offset: int) -> None:
        self.data = bytearray(data_size)
        self.index = 0
        self.memory_offset = memory_offset

    def add_byte(self, value: int) -> None:
        """Append one byte (truncated to 8 bits) at the current position."""
        if self.index >= len(self.data):
            raise IndexError(
                f"assembler buffer of {len(self.data)} bytes is full"
            )
        self.data[self.index] = value & 0xFF
        self.index += 1

    def _add_word(self, value: int) -> None:
        self.add_byte(value)
        self.add_byte(value >> 8)

    @staticmethod
    def _fail(name: str, *operands: int) -> Z80AsmError:
        return Z80AsmError(
            f"Invalid Z80 {name} command: " + ", ".join(str(o) for o in operands)
        )

    # Loads

    def ld(self, destination: int, source: int) -> None:
        if _type(destination) == T_16BIT_REG and _type(source) == T_U16:
            self.add_byte(0b00000001 | (destination << 4))
            self._add_word(source)
        elif _type(destination) == T_16BIT_PTR and source == A:
            self.add_byte(0b00000010 | (destination << 4))
        elif _type(destination) == T_8BIT_REG and _type(source) == T_U8:
            self.add_byte(0b00000110 | (destination << 3))
            self.add_byte(source)
        elif _type(destination) == T_U16 and source == SP:
            self.add_byte(0x08)
        elif destination == A and _type(source) == T_16BIT_PTR:
            self.add_byte(0b00001010 | (source << 4))
        elif (
            _type(destination) == T_8BIT_REG
            and _type(source) == T_8BIT_REG
            and not (destination == HL_PTR and source == HL_PTR)
        ):
            self.add_byte(0b01000000 | (destination << 3) | source)
        elif _type(destination) == T_U16 and source == A:
            self.add_byte(0xEA)
            self._add_word(destination)
        elif destination == A and _type(source) == T_U16:
            self.add_byte(0xFA)
            self._add_word(source)
        elif destination == SP and source == HL:
            self.add_byte(0xF9)
        else:
            raise self._fail("LD", source, destination)

    def ldh(self, source: int, destination: int) -> None:
        if _type(source) == T_U8 and destination == A:
            self.add_byte(0xE0)
            self.add_byte(source)
        elif source == C and destination == A:
            self.add_byte(0xE2)
        elif source == A and _type(destination) == T_U8:
            self.add_byte(0xF0)
            self.add_byte(destination)
        elif source == A and destination == C:
            self.add_byte(0xE2)
        else:
            raise self._fail("LDH", source, destination)

    def ldhl(self, offset: int) -> None:
        if _type(offset) != T_I8:
            raise self._fail("LDHL", offset)
        self.add_byte(0xF8)
        self.add_byte(offset)

    # Arithmetic and logic

    def add(self, destination: int, source: int) -> None:
        if destination == A and _type(source) == T_8BIT_REG:
            self.add_byte(0b10000000 | source)
        elif destination == HL and _type(source) == T_16BIT_REG:
            self.add_byte(0b00001001 | (source << 4))
        elif destination == A and _type(source) == T_U8:
            self.add_byte(0xC6)
            self.add_byte(source)
        elif destination == SP and _type(source) == T_I8:
            self.add_byte(0xE8)
            self.add_byte(source)
        else:
            raise self._fail("ADD", source, destination)

    def _alu(self, name: str, register_base: int, immediate_opcode: int,
             destination: int, source: int) -> None:
        if destination == A and _type(source) == T_8BIT_REG:
            self.add_byte(register_base | source)
        elif destination == A and _type(source) == T_U8:
            self.add_byte(immediate_opcode)
            self.add_byte(source)
        else:
            raise self._fail(name, source, destination)

    def adc(self, destination: int, source: int) -> None:
        self._alu("ADC", 0b10001000, 0xCE, destination, source)

    def sub(self, destination: int, source: int) -> None:
        self._alu("SUB", 0b10010000, 0xD6, destination, source)

    def sbc(self, destination: int, source: int) -> None:
        self._alu("SBC", 0b10011000, 0xDE, destination, source)

    def and_(self, destination: int, source: int) -> None:
        self._alu("AND", 0b10100000, 0xE6, destination, source)

    def xor(self, destination: int, source: int) -> None:
        self._alu("XOR", 0b10101000, 0xEE, destination, source)

    def or_(self, destination: int, source: int) -> None:
        self._alu("OR", 0b10110000, 0xF6, destination, source)

    def cp(self, destination: int, source: int) -> None:
        self._alu("CP", 0b10111000, 0xFE, destination, source)

    def inc(self, reg: int) -> None:
        if _type(reg) == T_16BIT_REG:
            self.add_byte(0b00000011 | (reg << 4))
        elif _type(reg) == T_8BIT_REG:
            self.add_byte(0b00000100 | (reg << 3))
        else:
            raise self._fail("INC", reg)

    def dec(self, reg: int) -> None:
        if _type(reg) == T_16BIT_REG:
            self.add_byte(0b00001011 | (reg << 4))
        elif _type(reg) == T_8BIT_REG:
            self.add_byte(0b00000101 | (reg << 3))
        else:
            raise self._fail("DEC", reg)

    # Single-byte instructions

    def halt(self) -> None:
        self.add_byte(0x76)

    def nop(self) -> None:
        self.add_byte(0x00)

    def stop(self) -> None:
        self.add_byte(0x10)

    def daa(self) -> None:
        self.add_byte(0x27)

    def cpl(self) -> None:
        self.add_byte(0x2F)

    def scf(self) -> None:
        self.add_byte(0x37)

    def ccf(self) -> None:
        self.add_byte(0x3F)

    def reti(self) -> None:
        self.add_byte(0xD9)

    def di(self) -> None:
        self.add_byte(0xF3)

    def ei(self) -> None:
        self.add_byte(0xFB)

    # Rotates, shifts and bit operations

    def _rot(self, reg: int, info: int) -> None:
        if reg == A:
            self.add_byte(0b00000111 | (info << 3))
        elif _type(reg) == T_8BIT_REG:
            self.add_byte(0xCB)
            self.add_byte((info << 3) | reg)
        else:
            raise self._fail("ROT", reg)

    def rlc(self, reg: int) -> None:
        self._rot(reg, 0x00)

    def rrc(self, reg: int) -> None:
        self._rot(reg, 0x01)

    def rl(self, reg: int) -> None:
        self._rot(reg, 0x02)

    def rr(self, reg: int) -> None:
        self._rot(reg, 0x03)

    def _prefixed(self, name: str, base: int, reg: int) -> None:
        if _type(reg) != T_8BIT_REG:
            raise self._fail(name, reg)
        self.add_byte(0xCB)
        self.add_byte(base | reg)

    def sla(self, reg: int) -> None:
        self._prefixed("SLA", 0b00100000, reg)

    def sra(self, reg: int) -> None:
        self._prefixed("SRA", 0b00101000, reg)

    def swap(self, reg: int) -> None:
        self._prefixed("SWAP", 0b00110000, reg)

    def srl(self, reg: int) -> None:
        self._prefixed("SRL", 0b00111000, reg)

    def _bit_op(self, name: str, base: int, bit_number: int, reg: int) -> None:
        if (
            _type(bit_number) != T_BIT
            or _type(reg) != T_8BIT_REG
            or (bit_number & 0xFF) > 7
        ):
            raise self._fail(name, reg)
        self.add_byte(0xCB)
        self.add_byte(base | (bit_number << 3) | reg)

    def bit(self, bit: int, reg: int) -> None:
        self._bit_op("BIT", 0b01000000, bit, reg)

    def res(self, bit: int, reg: int) -> None:
        self._bit_op("RES", 0b10000000, bit, reg)

    def set(self, bit: int, reg: int) -> None:
        self._bit_op("SET", 0b11000000, bit, reg)

    # Control flow

    def jr(self, flag_or_distance: int, distance: int | None = None) -> None:
        if distance is None:
            if _type(flag_or_distance) != T_I8:
                raise self._fail("JR", flag_or_distance)
            self.add_byte(0x18)
            self.add_byte(flag_or_distance)
            return
        flag = flag_or_distance
        if _type(flag) != T_FLAG or _type(distance) != T_I8:
            raise self._fail("JR", flag, distance)
        self.add_byte(0x20 | (flag << 3))
        self.add_byte(distance)

    def ret(self, flag: int | None = None) -> None:
        if flag is None:
            self.add_byte(0xC9)
        elif _type(flag) == T_FLAG:
            self.add_byte(0b11000000 | (flag << 3))
        else:
            raise self._fail("RET", flag)

    def push(self, source: int) -> None:
        if _type(source) != T_16BIT_REG:
            raise self._fail("PUSH", source)
        self.add_byte(0b11000101 | (source << 4))

    def pop(self, destination: int) -> None:
        if _type(destination) != T_16BIT_REG:
            raise self._fail("POP", destination)
        self.add_byte(0b11000001 | (destination << 4))

    def jp(self, flag_or_destination: int, destination: int | None = None) -> None:
        if destination is None:
            target = flag_or_destination
            if _type(target) == T_U16:
                self.add_byte(0xC3)
                self._add_word(target)
            elif target == HL:
                self.add_byte(0xE9)
            else:
                raise self._fail("JP", target)
            return
        flag = flag_or_destination
        if _type(flag) != T_FLAG or _type(destination) != T_U16:
            raise self._fail("JP", flag, destination)
        self.add_byte(0b11000010 | (flag << 3))
        self._add_word(destination)

    def call(self, flag_or_destination: int, destination: int | None = None) -> None:
        if destination is None:
            target = flag_or_destination
            if _type(target) != T_U16:
                raise self._fail("CALL", target)
            self.add_byte(0xCD)
            self._add_word(target)
            return
        flag = flag_or_destination
        if _type(flag) != T_FLAG or _type(destination) != T_U16:
            raise self._fail("CALL", flag, destination)
        self.add_byte(0b11000100 | (flag << 3))
        self._add_word(destination)

    def rst(self, value: int) -> None:
        if value % 8 == 0 and 0 <= (value & 0xFF) <= 0x38:
            self.add_byte(0b11000111 | value)
        else:
            raise self._fail("RST", value)


@dataclass
class _Placement:
    assembler: Z80Assembler
    location: int


class Z80Variable:
    """A block of data whose address is patched into earlier instructions."""

    def __init__(self, registry: list | None = None, data: Iterable[int] = ()) -> None:
        if registry is not None:
            registry.append(self)
        self.data = bytearray(value & 0xFF for value in data)
        self._placements: list[_Placement] = []
        self._mem_location: int | None = None

    @property
    def size(self) -> int:
        return len(self.data)

    def load_data(self, data: Iterable[int]) -> None:
        """Replace the variable's contents."""
        self.data = bytearray(value & 0xFF for value in data)

    def place_ptr(self, assembler: Z80Assembler) -> int:
        """Record that the next instruction's operand points here; returns 0."""
        self._placements.append(_Placement(assembler, assembler.index + 1))
        return 0x0000

    def insert_variable(self, assembler: Z80Assembler) -> None:
        """Write the data at the assembler's current position."""
        self._mem_location = (assembler.index - 1) + assembler.memory_offset
        for value in self.data:
            assembler.add_byte(value)

    def update_ptrs(self) -> None:
        """Patch every recorded pointer with the variable's address."""
        if self._mem_location is None:
            raise Z80AsmError("variable has not been inserted")
        for placement in self._placements:
            placement.assembler.data[placement.location] = self._mem_location & 0xFF
            placement.assembler.data[placement.location + 1] = (
                self._mem_location >> 8
            ) & 0xFF


class _JumpKind(Enum):
    DIRECT = "direct"
    RELATIVE = "relative"


@dataclass
class _JumpPlacement:
    assembler: Z80Assembler
    location: int
    kind: _JumpKind = field(default=_JumpKind.DIRECT)


class Z80Jump:
    """A jump target whose address is patched into earlier jumps."""

    def __init__(self, registry: list | None = None) -> None:
        if registry is not None:
            registry.append(self)
        self._placements: list[_JumpPlacement] = []
        self._mem_location: int | None = None

    def _place(self, assembler: Z80Assembler, kind: _JumpKind) -> int:
        self._placements.append(_JumpPlacement(assembler, assembler.index + 1, kind))
        return 0x0000

    def place_relative_jump(self, assembler: Z80Assembler) -> int:
        """Record a relative jump about to be assembled; returns 0."""
        return self._place(assembler, _JumpKind.RELATIVE)

    def place_direct_jump(self, assembler: Z80Assembler) -> int:
        """Record an absolute jump about to be assembled; returns 0."""
        return self._place(assembler, _JumpKind.DIRECT)

    def set_start(self, assembler: Z80Assembler) -> None:
        """Mark the assembler's current position as the jump target."""
        self._mem_location = (assembler.index - 1) + assembler.memory_offset

    def update_jumps(self) -> None:
        """Patch every recorded jump with the target."""
        if self._mem_location is None:
            raise Z80AsmError("jump target has not been set")
        for placement in self._placements:
            buffer = placement.assembler.data
            if placement.kind is _JumpKind.DIRECT:
                buffer[placement.location] = self._mem_location & 0xFF
                buffer[placement.location + 1] = (self._mem_location >> 8) & 0xFF
            else:
                buffer[placement.location] = (
                    self._mem_location
                    - (placement.location + placement.assembler.memory_offset)
                ) & 0xFF