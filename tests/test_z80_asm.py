import pytest

from dreamdex.z80_asm import (
    A,
    AF,
    B,
    BC,
    BC_PTR,
    C,
    D,
    DE,
    E,
    H,
    HL,
    HL_PTR,
    L,
    NC_F,
    NZ_F,
    REGISTERS_8,
    REGISTERS_16,
    SP,
    Z80AsmError,
    Z80Assembler,
    Z80Jump,
    Z80Variable,
    C_F,
    Z_F,
    bit,
    i8,
    u16,
)


def assemble(*calls):
    asm = Z80Assembler(32, 0xC000)
    for name, args in calls:
        getattr(asm, name)(*args)
    return list(asm.data[: asm.index])


@pytest.mark.parametrize(
    "name, opcode",
    [
        ("halt", 0x76),
        ("nop", 0x00),
        ("stop", 0x10),
        ("daa", 0x27),
        ("cpl", 0x2F),
        ("scf", 0x37),
        ("ccf", 0x3F),
        ("reti", 0xD9),
        ("di", 0xF3),
        ("ei", 0xFB),
        ("ret", 0xC9),
    ],
)
def test_single_byte_instructions(name, opcode):
    assert assemble((name, ())) == [opcode]


def test_ld_register_pair_immediate():
    assert assemble(("ld", (DE, u16(0xABCD)))) == [0x11, 0xCD, 0xAB]


def test_ld_word_immediates_by_register():
    codes = [assemble(("ld", (r, u16(0))))[0] for r in REGISTERS_16]
    assert codes == [0x01, 0x11, 0x21, 0x31]


def test_ld_absolute_store_and_load():
    assert assemble(("ld", (u16(0xC5D0), A))) == [0xEA, 0xD0, 0xC5]
    assert assemble(("ld", (A, u16(0xC5D0)))) == [0xFA, 0xD0, 0xC5]


def test_ld_sp_hl():
    assert assemble(("ld", (SP, HL))) == [0xF9]


def test_ld_register_immediate_is_two_bytes():
    out = assemble(("ld", (B, 0x42)))
    assert len(out) == 2 and out[1] == 0x42


def test_ld_register_to_register_range():
    for dst in REGISTERS_8:
        for src in REGISTERS_8:
            if dst == HL_PTR and src == HL_PTR:
                continue
            (code,) = assemble(("ld", (dst, src)))
            assert 0x40 <= code <= 0x7F
            assert code != 0x76


def test_ld_pointer_forms_use_pair_number():
    store = assemble(("ld", (BC_PTR, A)))
    load = assemble(("ld", (A, BC_PTR)))
    assert len(store) == 1 and len(load) == 1
    assert store[0] != load[0]


def test_ld_hl_ptr_to_hl_ptr_rejected():
    with pytest.raises(Z80AsmError):
        assemble(("ld", (HL_PTR, HL_PTR)))


def test_ld_invalid_combination_rejected():
    with pytest.raises(Z80AsmError, match="LD"):
        assemble(("ld", (BC, DE)))


def test_add_immediate_and_sp():
    assert assemble(("add", (A, 0x10))) == [0xC6, 0x10]
    assert assemble(("add", (SP, i8(-2)))) == [0xE8, 0xFE]


def test_add_register_range():
    codes = [assemble(("add", (A, r)))[0] for r in REGISTERS_8]
    assert all(0x80 <= code <= 0x87 for code in codes)
    assert len(set(codes)) == 8


def test_add_hl_register_pair():
    codes = [assemble(("add", (HL, r)))[0] for r in REGISTERS_16]
    assert codes == [0x09, 0x19, 0x29, 0x39]


@pytest.mark.parametrize(
    "name, opcode",
    [
        ("adc", 0xCE),
        ("sub", 0xD6),
        ("sbc", 0xDE),
        ("and_", 0xE6),
        ("xor", 0xEE),
        ("or_", 0xF6),
        ("cp", 0xFE),
    ],
)
def test_alu_immediates(name, opcode):
    assert assemble((name, (A, 0x33))) == [opcode, 0x33]


@pytest.mark.parametrize("name", ["add", "adc", "sub", "sbc", "and_", "xor", "or_", "cp"])
def test_alu_rejects_non_a_destination(name):
    with pytest.raises(Z80AsmError):
        assemble((name, (B, C)))


def test_alu_register_forms_are_distinct():
    names = ["add", "adc", "sub", "sbc", "and_", "xor", "or_", "cp"]
    codes = [assemble((n, (A, B)))[0] for n in names]
    assert len(set(codes)) == len(names)


def test_inc_dec_register_pairs():
    assert [assemble(("inc", (r,)))[0] for r in REGISTERS_16] == [0x03, 0x13, 0x23, 0x33]
    assert [assemble(("dec", (r,)))[0] for r in REGISTERS_16] == [0x0B, 0x1B, 0x2B, 0x3B]


def test_inc_eight_bit_registers():
    codes = [assemble(("inc", (r,)))[0] for r in REGISTERS_8]
    assert codes == [0x04, 0x0C, 0x14, 0x1C, 0x24, 0x2C, 0x34, 0x3C]


def test_dec_eight_bit_registers():
    codes = [assemble(("dec", (r,)))[0] for r in REGISTERS_8]
    assert codes == [0x05, 0x0D, 0x15, 0x1D, 0x25, 0x2D, 0x35, 0x3D]


def test_inc_rejects_immediate():
    with pytest.raises(Z80AsmError):
        assemble(("inc", (u16(5),)))


def test_rotate_a():
    codes = [assemble((n, (A,)))[0] for n in ("rlc", "rrc", "rl", "rr")]
    assert codes == [0x07, 0x0F, 0x17, 0x1F]


def test_rotate_other_register_is_prefixed():
    out = assemble(("rl", (C,)))
    assert len(out) == 2 and out[0] == 0xCB


def test_rotate_rejects_pair():
    with pytest.raises(Z80AsmError):
        assemble(("rr", (HL,)))


def test_jr_unconditional():
    assert assemble(("jr", (i8(5),))) == [0x18, 5]


def test_jr_conditional():
    assert assemble(("jr", (NZ_F, i8(3)))) == [0x20, 3]
    assert assemble(("jr", (Z_F, i8(3))))[1] == 3


def test_jr_rejects_untagged_distance():
    with pytest.raises(Z80AsmError):
        assemble(("jr", (u16(3),)))
    with pytest.raises(Z80AsmError):
        assemble(("jr", (NZ_F, 3)))


def test_conditional_ret_jp_call():
    flags = (NZ_F, Z_F, NC_F, C_F)
    assert [assemble(("ret", (f,)))[0] for f in flags] == [0xC0, 0xC8, 0xD0, 0xD8]
    assert [assemble(("jp", (f, u16(0))))[0] for f in flags] == [0xC2, 0xCA, 0xD2, 0xDA]
    assert [assemble(("call", (f, u16(0))))[0] for f in flags] == [0xC4, 0xCC, 0xD4, 0xDC]


def test_jp_and_call_absolute():
    assert assemble(("jp", (u16(0x1234),))) == [0xC3, 0x34, 0x12]
    assert assemble(("jp", (HL,))) == [0xE9]
    assert assemble(("call", (u16(0x1234),))) == [0xCD, 0x34, 0x12]


def test_jp_call_ret_reject_bad_operands():
    with pytest.raises(Z80AsmError):
        assemble(("jp", (DE,)))
    with pytest.raises(Z80AsmError):
        assemble(("call", (HL,)))
    with pytest.raises(Z80AsmError):
        assemble(("ret", (B,)))


def test_push_pop_relationship():
    for reg in (BC, DE, HL, AF):
        (push,) = assemble(("push", (reg,)))
        (pop,) = assemble(("pop", (reg,)))
        assert push == pop | 0x04


def test_push_rejects_eight_bit():
    with pytest.raises(Z80AsmError):
        assemble(("push", (A,)))
    with pytest.raises(Z80AsmError, match="POP"):
        assemble(("pop", (A,)))


def test_rst_vectors():
    assert assemble(("rst", (0x00,))) == [0xC7]
    assert assemble(("rst", (0x38,))) == [0xFF]


@pytest.mark.parametrize("value", [0x39, 0x40, 0x04])
def test_rst_rejects_invalid_vectors(value):
    with pytest.raises(Z80AsmError):
        assemble(("rst", (value,)))


def test_ldh_forms():
    assert assemble(("ldh", (0x44, A))) == [0xE0, 0x44]
    assert assemble(("ldh", (A, 0x44))) == [0xF0, 0x44]
    assert assemble(("ldh", (C, A))) == [0xE2]
    with pytest.raises(Z80AsmError):
        assemble(("ldh", (B, A)))


def test_ldhl():
    assert assemble(("ldhl", (i8(4),))) == [0xF8, 4]
    with pytest.raises(Z80AsmError):
        assemble(("ldhl", (4,)))


def test_prefixed_shifts_encode_register():
    outputs = []
    for name in ("sla", "sra", "swap", "srl"):
        out = assemble((name, (E,)))
        assert out[0] == 0xCB
        assert out[1] & 0x07 == E & 0x07
        outputs.append(out[1])
    assert len(set(outputs)) == 4


def test_shift_rejects_pair():
    with pytest.raises(Z80AsmError):
        assemble(("swap", (BC,)))


def test_bit_res_set():
    results = {}
    for name in ("bit", "res", "set"):
        out = assemble((name, (bit(3), D)))
        assert out[0] == 0xCB
        assert out[1] & 0x07 == D & 0x07
        assert (out[1] >> 3) & 0x07 == 3
        results[name] = out[1]
    assert len(set(results.values())) == 3


def test_bit_rejects_untagged_number():
    with pytest.raises(Z80AsmError):
        assemble(("bit", (3, H)))
    with pytest.raises(Z80AsmError):
        assemble(("set", (bit(2), HL)))


def test_operand_helpers_validate_range():
    with pytest.raises(ValueError):
        i8(200)
    with pytest.raises(ValueError):
        u16(-1)
    with pytest.raises(ValueError):
        bit(8)


def test_add_byte_overflow():
    asm = Z80Assembler(2, 0)
    asm.nop()
    asm.nop()
    with pytest.raises(IndexError):
        asm.nop()


def test_add_byte_truncates():
    asm = Z80Assembler(1, 0)
    asm.add_byte(0x1AB)
    assert asm.data[0] == 0xAB
    assert asm.index == 1


def test_variable_pointer_patching():
    registry = []
    asm = Z80Assembler(16, 0xC000)
    var = Z80Variable(registry, [0xAA, 0xBB])
    asm.ld(HL, u16(var.place_ptr(asm)))
    asm.ret()
    index_before = asm.index
    var.insert_variable(asm)
    var.update_ptrs()
    assert registry == [var]
    assert asm.data[index_before:index_before + 2] == bytearray([0xAA, 0xBB])
    pointer = asm.data[1] | (asm.data[2] << 8)
    assert pointer == asm.memory_offset + index_before - 1
    assert var.size == 2


def test_variable_load_data_replaces_contents():
    var = Z80Variable(data=[1])
    var.load_data([0x101, 2, 3])
    assert var.data == bytearray([1, 2, 3])


def test_variable_update_before_insert_fails():
    asm = Z80Assembler(4, 0)
    var = Z80Variable(None, [1])
    asm.ld(HL, u16(var.place_ptr(asm)))
    with pytest.raises(Z80AsmError):
        var.update_ptrs()


def test_relative_jump_patching():
    registry = []
    asm = Z80Assembler(16, 0xC000)
    target = Z80Jump(registry)
    asm.nop()
    asm.jr(NZ_F, i8(target.place_relative_jump(asm)))
    asm.nop()
    asm.nop()
    target.set_start(asm)
    target.update_jumps()
    assert registry == [target]
    location = 2
    displacement = asm.data[location]
    destination = asm.index - 1 + asm.memory_offset
    assert (location + asm.memory_offset + displacement) & 0xFFFF == destination


def test_direct_jump_patching():
    asm = Z80Assembler(16, 0xD000)
    target = Z80Jump()
    asm.jp(u16(target.place_direct_jump(asm)))
    asm.nop()
    target.set_start(asm)
    target.update_jumps()
    patched = asm.data[1] | (asm.data[2] << 8)
    assert patched == asm.index - 1 + asm.memory_offset


def test_jump_update_without_start_fails():
    asm = Z80Assembler(4, 0)
    target = Z80Jump()
    asm.jp(u16(target.place_direct_jump(asm)))
    with pytest.raises(Z80AsmError):
        target.update_jumps()


def test_unused_register_constants_encode():
    out = assemble(("ld", (L, B)))
    assert len(out) == 1 and out[0] & 0x07 == B & 0x07