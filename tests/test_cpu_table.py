import pytest

from sidez import opcodes as op
from sidez.cpu_table import CycleStep, build_instruction_table

NEXT = "interrupts_and_next_opcode"


@pytest.fixture(scope="module")
def table():
    return build_instruction_table()


def row(table, opcode):
    steps = []
    for step in table[opcode << 3:(opcode + 1) << 3]:
        steps.append(step)
        if step.action == NEXT:
            break
    return steps


def names(table, opcode):
    return [step.action for step in row(table, opcode)]


def test_table_size(table):
    assert len(table) == 0x101 << 3


def test_extra_row_is_empty(table):
    assert all(step == CycleStep() for step in table[0x100 << 3:])


@pytest.mark.parametrize("opcode", range(0x100))
def test_every_opcode_ends_with_next_fetch(table, opcode):
    steps = names(table, opcode)
    assert steps[-1] == NEXT
    assert steps.count(NEXT) == 1
    rest = table[(opcode << 3) + len(steps):(opcode + 1) << 3]
    assert all(step.action is None for step in rest)


def test_invalid_opcodes_are_the_halt_instructions(table):
    invalid = {o for o in range(0x100) if "invalid_opcode" in names(table, o)}
    assert invalid == set(op.HLT_ALL)


def test_lda_immediate(table):
    assert names(table, op.LDAb) == ["fetch_data_byte", "lda_instr", NEXT]


def test_brk_sequence(table):
    steps = row(table, op.BRKn)
    assert [s.action for s in steps] == [
        "fetch_data_byte",
        "push_high_pc",
        "brk_push_low_pc",
        "push_sr",
        "irq_lo_request",
        "irq_hi_request",
        "fetch_next_opcode",
        NEXT,
    ]
    assert [s.nosteal for s in steps[1:4]] == [True, True, True]
    assert not any(s.nosteal for s in steps[4:])


def test_jsr_pushes_are_writes(table):
    steps = row(table, op.JSRw)
    pushes = [s for s in steps if s.action in ("push_high_pc", "push_low_pc")]
    assert len(pushes) == 2
    assert all(s.nosteal for s in pushes)
    assert steps[-2].action == "jmp_instr"


@pytest.mark.parametrize("opcode", [op.ADCz, op.LDAa, op.CMPix, op.LAXiy, op.BITa])
def test_read_modes_fetch_operand_before_execution(table, opcode):
    steps = names(table, opcode)
    assert steps[-3] == "fetch_eff_addr_data_byte"


@pytest.mark.parametrize("opcode", [op.STAz, op.STAa, op.STXzy, op.SAXix, op.JMPw])
def test_write_modes_do_not_fetch_operand(table, opcode):
    assert "fetch_eff_addr_data_byte" not in names(table, opcode)


@pytest.mark.parametrize(
    "opcode", [op.ASLz, op.INCax, op.DCPiy, op.ISBay, op.RRAix, op.SLOa, op.SREzx]
)
def test_read_modify_write_ends_with_two_writes(table, opcode):
    steps = row(table, opcode)
    assert steps[-2].action == "put_eff_addr_data_byte"
    assert steps[-2].nosteal and steps[-3].nosteal
    assert not any(s.nosteal for s in steps[:-3])


@pytest.mark.parametrize("opcode", op.NOPn_ALL + op.NOPb_ALL + op.NOPax_ALL)
def test_nops_are_legal(table, opcode):
    assert "invalid_opcode" not in names(table, opcode)


@pytest.mark.parametrize(
    "opcode", [op.BPLr, op.BMIr, op.BVCr, op.BVSr, op.BCCr, op.BCSr, op.BNEr, op.BEQr]
)
def test_branches_have_fix_step(table, opcode):
    steps = names(table, opcode)
    assert steps[0] == "fetch_data_byte"
    assert steps[2] == "fix_branch"


def test_page_crossing_read_uses_skipping_fetch(table):
    assert "fetch_high_addr_x2" in names(table, op.LDAax)
    assert "fetch_high_addr_x" in names(table, op.STAax)
    assert "fetch_high_eff_addr_y2" in names(table, op.LDAiy)
    assert "fetch_high_eff_addr_y" in names(table, op.STAiy)


def test_no_row_overflows(table):
    for opcode in range(0x100):
        assert len(row(table, opcode)) <= 8


def test_aliases_share_rows(table):
    assert names(table, op.SBCb) == names(table, 0xEB)
    assert names(table, op.ANCb) == names(table, 0x2B)
    assert names(table, op.DCMiy) == names(table, op.DCPiy)