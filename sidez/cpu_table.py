"""The cycle-by-cycle instruction table of the 6510.

Every opcode owns eight consecutive slots, starting at ``opcode << 3``.
Each slot names the processor action performed in that cycle and whether
the cycle is a write, which the VIC-II cannot steal.
"""

from __future__ import annotations

from dataclasses import dataclass

from sidez import opcodes as op

_TABLE_SIZE = 0x101 << 3


@dataclass(frozen=True)
class CycleStep:
    """One processor cycle: the action's name and whether it may not be stolen."""

    action: str | None = None
    nosteal: bool = False


def _read(name: str) -> CycleStep:
    return CycleStep(name)


def _write(name: str) -> CycleStep:
    return CycleStep(name, True)


def _steps(*names: str) -> tuple[CycleStep, ...]:
    return tuple(_read(name) for name in names)


_PUT = _write("put_eff_addr_data_byte")


def _rmw(name: str) -> tuple[CycleStep, ...]:
    return (_write(name), _PUT)


# (opcodes, reads its operand, addressing cycles)
_ADDRESSING: tuple[tuple[tuple[int, ...], bool, tuple[CycleStep, ...]], ...] = (
    (
        (op.ASLn, op.CLCn, op.CLDn, op.CLIn, op.CLVn, op.DEXn, op.DEYn, op.INXn,
         op.INYn, op.LSRn, *op.NOPn_ALL, op.PHAn, op.PHPn, op.PLAn, op.PLPn,
         op.ROLn, op.RORn, op.SECn, op.SEDn, op.SEIn, op.TAXn, op.TAYn, op.TSXn,
         op.TXAn, op.TXSn, op.TYAn),
        False,
        _steps("throw_away_fetch"),
    ),
    (
        (op.ADCb, op.ANDb, *op.ANCb_ALL, op.ANEb, op.ASRb, op.ARRb, op.BCCr,
         op.BCSr, op.BEQr, op.BMIr, op.BNEr, op.BPLr, op.BRKn, op.BVCr, op.BVSr,
         op.CMPb, op.CPXb, op.CPYb, op.EORb, op.LDAb, op.LDXb, op.LDYb, op.LXAb,
         *op.NOPb_ALL, op.ORAb, *op.SBCb_ALL, op.SBXb, op.RTIn, op.RTSn),
        False,
        _steps("fetch_data_byte"),
    ),
    (
        (op.ADCz, op.ANDz, op.BITz, op.CMPz, op.CPXz, op.CPYz, op.EORz, op.LAXz,
         op.LDAz, op.LDXz, op.LDYz, op.ORAz, *op.NOPz_ALL, op.SBCz, op.ASLz,
         op.DCPz, op.DECz, op.INCz, op.ISBz, op.LSRz, op.ROLz, op.RORz, op.SREz,
         op.SLOz, op.RLAz, op.RRAz),
        True,
        _steps("fetch_low_addr"),
    ),
    (
        (op.SAXz, op.STAz, op.STXz, op.STYz),
        False,
        _steps("fetch_low_addr"),
    ),
    (
        (op.ADCzx, op.ANDzx, op.CMPzx, op.EORzx, op.LDAzx, op.LDYzx,
         *op.NOPzx_ALL, op.ORAzx, op.SBCzx, op.ASLzx, op.DCPzx, op.DECzx,
         op.INCzx, op.ISBzx, op.LSRzx, op.RLAzx, op.ROLzx, op.RORzx, op.RRAzx,
         op.SLOzx, op.SREzx),
        True,
        _steps("fetch_low_addr_x", "waste_cycle"),
    ),
    (
        (op.STAzx, op.STYzx),
        False,
        _steps("fetch_low_addr_x", "waste_cycle"),
    ),
    (
        (op.LDXzy, op.LAXzy),
        True,
        _steps("fetch_low_addr_y", "waste_cycle"),
    ),
    (
        (op.STXzy, op.SAXzy),
        False,
        _steps("fetch_low_addr_y", "waste_cycle"),
    ),
    (
        (op.ADCa, op.ANDa, op.BITa, op.CMPa, op.CPXa, op.CPYa, op.EORa, op.LAXa,
         op.LDAa, op.LDXa, op.LDYa, op.NOPa, op.ORAa, op.SBCa, op.ASLa, op.DCPa,
         op.DECa, op.INCa, op.ISBa, op.LSRa, op.ROLa, op.RORa, op.SLOa, op.SREa,
         op.RLAa, op.RRAa),
        True,
        _steps("fetch_low_addr", "fetch_high_addr"),
    ),
    (
        (op.JMPw, op.SAXa, op.STAa, op.STXa, op.STYa),
        False,
        _steps("fetch_low_addr", "fetch_high_addr"),
    ),
    (
        (op.JSRw,),
        False,
        _steps("fetch_low_addr"),
    ),
    (
        (op.ADCax, op.ANDax, op.CMPax, op.EORax, op.LDAax, op.LDYax,
         *op.NOPax_ALL, op.ORAax, op.SBCax),
        True,
        _steps("fetch_low_addr", "fetch_high_addr_x2", "throw_away_read"),
    ),
    (
        (op.ASLax, op.DCPax, op.DECax, op.INCax, op.ISBax, op.LSRax, op.RLAax,
         op.ROLax, op.RORax, op.RRAax, op.SLOax, op.SREax),
        True,
        _steps("fetch_low_addr", "fetch_high_addr_x", "throw_away_read"),
    ),
    (
        (op.SHYax, op.STAax),
        False,
        _steps("fetch_low_addr", "fetch_high_addr_x", "throw_away_read"),
    ),
    (
        (op.ADCay, op.ANDay, op.CMPay, op.EORay, op.LASay, op.LAXay, op.LDAay,
         op.LDXay, op.ORAay, op.SBCay),
        True,
        _steps("fetch_low_addr", "fetch_high_addr_y2", "throw_away_read"),
    ),
    (
        (op.DCPay, op.ISBay, op.RLAay, op.RRAay, op.SLOay, op.SREay),
        True,
        _steps("fetch_low_addr", "fetch_high_addr_y", "throw_away_read"),
    ),
    (
        (op.SHAay, op.SHSay, op.SHXay, op.STAay),
        False,
        _steps("fetch_low_addr", "fetch_high_addr_y", "throw_away_read"),
    ),
    (
        (op.JMPi,),
        False,
        _steps("fetch_low_pointer", "fetch_high_pointer",
               "fetch_low_eff_addr", "fetch_high_eff_addr"),
    ),
    (
        (op.ADCix, op.ANDix, op.CMPix, op.EORix, op.LAXix, op.LDAix, op.ORAix,
         op.SBCix, op.DCPix, op.ISBix, op.SLOix, op.SREix, op.RLAix, op.RRAix),
        True,
        _steps("fetch_low_pointer", "fetch_low_pointer_x",
               "fetch_low_eff_addr", "fetch_high_eff_addr"),
    ),
    (
        (op.SAXix, op.STAix),
        False,
        _steps("fetch_low_pointer", "fetch_low_pointer_x",
               "fetch_low_eff_addr", "fetch_high_eff_addr"),
    ),
    (
        (op.ADCiy, op.ANDiy, op.CMPiy, op.EORiy, op.LAXiy, op.LDAiy, op.ORAiy,
         op.SBCiy),
        True,
        _steps("fetch_low_pointer", "fetch_low_eff_addr",
               "fetch_high_eff_addr_y2", "throw_away_read"),
    ),
    (
        (op.DCPiy, op.ISBiy, op.RLAiy, op.RRAiy, op.SLOiy, op.SREiy),
        True,
        _steps("fetch_low_pointer", "fetch_low_eff_addr",
               "fetch_high_eff_addr_y", "throw_away_read"),
    ),
    (
        (op.SHAiy, op.STAiy),
        False,
        _steps("fetch_low_pointer", "fetch_low_eff_addr",
               "fetch_high_eff_addr_y", "throw_away_read"),
    ),
)


def _branch(name: str) -> tuple[CycleStep, ...]:
    return _steps(name, "fix_branch")


# (opcodes, execution cycles)
_INSTRUCTIONS: tuple[tuple[tuple[int, ...], tuple[CycleStep, ...]], ...] = (
    ((op.ADCz, op.ADCzx, op.ADCa, op.ADCax, op.ADCay, op.ADCix, op.ADCiy,
      op.ADCb), _steps("adc_instr")),
    (op.ANCb_ALL, _steps("anc_instr")),
    ((op.ANDz, op.ANDzx, op.ANDa, op.ANDax, op.ANDay, op.ANDix, op.ANDiy,
      op.ANDb), _steps("and_instr")),
    ((op.ANEb,), _steps("ane_instr")),
    ((op.ARRb,), _steps("arr_instr")),
    ((op.ASLn,), _steps("asla_instr")),
    ((op.ASLz, op.ASLzx, op.ASLa, op.ASLax), _rmw("asl_instr")),
    ((op.ASRb,), _steps("alr_instr")),
    ((op.BCCr,), _branch("bcc_instr")),
    ((op.BCSr,), _branch("bcs_instr")),
    ((op.BEQr,), _branch("beq_instr")),
    ((op.BITz, op.BITa), _steps("bit_instr")),
    ((op.BMIr,), _branch("bmi_instr")),
    ((op.BNEr,), _branch("bne_instr")),
    ((op.BPLr,), _branch("bpl_instr")),
    ((op.BRKn,), (
        _write("push_high_pc"),
        _write("brk_push_low_pc"),
        _write("push_sr"),
        _read("irq_lo_request"),
        _read("irq_hi_request"),
        _read("fetch_next_opcode"),
    )),
    ((op.BVCr,), _branch("bvc_instr")),
    ((op.BVSr,), _branch("bvs_instr")),
    ((op.CLCn,), _steps("clc_instr")),
    ((op.CLDn,), _steps("cld_instr")),
    ((op.CLIn,), _steps("cli_instr")),
    ((op.CLVn,), _steps("clv_instr")),
    ((op.CMPz, op.CMPzx, op.CMPa, op.CMPax, op.CMPay, op.CMPix, op.CMPiy,
      op.CMPb), _steps("cmp_instr")),
    ((op.CPXz, op.CPXa, op.CPXb), _steps("cpx_instr")),
    ((op.CPYz, op.CPYa, op.CPYb), _steps("cpy_instr")),
    ((op.DCPz, op.DCPzx, op.DCPa, op.DCPax, op.DCPay, op.DCPix, op.DCPiy),
     _rmw("dcm_instr")),
    ((op.DECz, op.DECzx, op.DECa, op.DECax), _rmw("dec_instr")),
    ((op.DEXn,), _steps("dex_instr")),
    ((op.DEYn,), _steps("dey_instr")),
    ((op.EORz, op.EORzx, op.EORa, op.EORax, op.EORay, op.EORix, op.EORiy,
      op.EORb), _steps("eor_instr")),
    ((op.INCz, op.INCzx, op.INCa, op.INCax), _rmw("inc_instr")),
    ((op.INXn,), _steps("inx_instr")),
    ((op.INYn,), _steps("iny_instr")),
    ((op.ISBz, op.ISBzx, op.ISBa, op.ISBax, op.ISBay, op.ISBix, op.ISBiy),
     _rmw("ins_instr")),
    ((op.JSRw,), (
        _read("waste_cycle"),
        _write("push_high_pc"),
        _write("push_low_pc"),
        _read("fetch_high_addr"),
        _read("jmp_instr"),
    )),
    ((op.JMPw, op.JMPi), _steps("jmp_instr")),
    ((op.LASay,), _steps("las_instr")),
    ((op.LAXz, op.LAXzy, op.LAXa, op.LAXay, op.LAXix, op.LAXiy),
     _steps("lax_instr")),
    ((op.LDAz, op.LDAzx, op.LDAa, op.LDAax, op.LDAay, op.LDAix, op.LDAiy,
      op.LDAb), _steps("lda_instr")),
    ((op.LDXz, op.LDXzy, op.LDXa, op.LDXay, op.LDXb), _steps("ldx_instr")),
    ((op.LDYz, op.LDYzx, op.LDYa, op.LDYax, op.LDYb), _steps("ldy_instr")),
    ((op.LSRn,), _steps("lsra_instr")),
    ((op.LSRz, op.LSRzx, op.LSRa, op.LSRax), _rmw("lsr_instr")),
    ((*op.NOPn_ALL, *op.NOPb_ALL, *op.NOPz_ALL, *op.NOPzx_ALL, op.NOPa,
      *op.NOPax_ALL), ()),
    ((op.LXAb,), _steps("oal_instr")),
    ((op.ORAz, op.ORAzx, op.ORAa, op.ORAax, op.ORAay, op.ORAix, op.ORAiy,
      op.ORAb), _steps("ora_instr")),
    ((op.PHAn,), (_write("pha_instr"),)),
    ((op.PHPn,), (_write("push_sr"),)),
    ((op.PLAn,), _steps("waste_cycle", "pla_instr")),
    ((op.PLPn,), _steps("waste_cycle", "pop_sr")),
    ((op.RLAz, op.RLAzx, op.RLAix, op.RLAa, op.RLAax, op.RLAay, op.RLAiy),
     _rmw("rla_instr")),
    ((op.ROLn,), _steps("rola_instr")),
    ((op.ROLz, op.ROLzx, op.ROLa, op.ROLax), _rmw("rol_instr")),
    ((op.RORn,), _steps("rora_instr")),
    ((op.RORz, op.RORzx, op.RORa, op.RORax), _rmw("ror_instr")),
    ((op.RRAa, op.RRAax, op.RRAay, op.RRAz, op.RRAzx, op.RRAix, op.RRAiy),
     _rmw("rra_instr")),
    ((op.RTIn,), _steps("waste_cycle", "pop_sr", "pop_low_pc", "pop_high_pc",
                        "rti_instr")),
    ((op.RTSn,), _steps("waste_cycle", "pop_low_pc", "pop_high_pc",
                        "rts_instr")),
    ((op.SAXz, op.SAXzy, op.SAXa, op.SAXix), (_write("axs_instr"),)),
    ((op.SBCz, op.SBCzx, op.SBCa, op.SBCax, op.SBCay, op.SBCix, op.SBCiy,
      *op.SBCb_ALL), _steps("sbc_instr")),
    ((op.SBXb,), _steps("sbx_instr")),
    ((op.SECn,), _steps("sec_instr")),
    ((op.SEDn,), _steps("sed_instr")),
    ((op.SEIn,), _steps("sei_instr")),
    ((op.SHAay, op.SHAiy), (_write("axa_instr"),)),
    ((op.SHSay,), (_write("shs_instr"),)),
    ((op.SHXay,), (_write("xas_instr"),)),
    ((op.SHYax,), (_write("say_instr"),)),
    ((op.SLOz, op.SLOzx, op.SLOa, op.SLOax, op.SLOay, op.SLOix, op.SLOiy),
     _rmw("aso_instr")),
    ((op.SREz, op.SREzx, op.SREa, op.SREax, op.SREay, op.SREix, op.SREiy),
     _rmw("lse_instr")),
    ((op.STAz, op.STAzx, op.STAa, op.STAax, op.STAay, op.STAix, op.STAiy),
     (_write("sta_instr"),)),
    ((op.STXz, op.STXzy, op.STXa), (_write("stx_instr"),)),
    ((op.STYz, op.STYzx, op.STYa), (_write("sty_instr"),)),
    ((op.TAXn,), _steps("tax_instr")),
    ((op.TAYn,), _steps("tay_instr")),
    ((op.TSXn,), _steps("tsx_instr")),
    ((op.TXAn,), _steps("txa_instr")),
    ((op.TXSn,), _steps("txs_instr")),
    ((op.TYAn,), _steps("tya_instr")),
)


def _index(groups) -> dict:
    table = {}
    for group in groups:
        for opcode in group[0]:
            table[opcode] = group[1:]
    return table


_ADDRESSING_BY_OPCODE = _index(_ADDRESSING)
_INSTRUCTION_BY_OPCODE = _index(_INSTRUCTIONS)

_FETCH_OPERAND = _read("fetch_eff_addr_data_byte")
_INVALID = _read("invalid_opcode")
_NEXT = _read("interrupts_and_next_opcode")


def build_instruction_table() -> list[CycleStep]:
    """Build the per-cycle table, indexed by ``(opcode << 3) + cycle``.

    Opcodes lacking an addressing mode or an implementation get an
    ``invalid_opcode`` step; every opcode ends with a step that checks for
    interrupts and fetches the next opcode. Unused slots are empty steps.
    """
    table = [CycleStep() for _ in range(_TABLE_SIZE)]

    for opcode in range(0x100):
        row: list[CycleStep] = []

        addressing = _ADDRESSING_BY_OPCODE.get(opcode)
        if addressing is not None:
            reads, steps = addressing
            row.extend(steps)
            if reads:
                row.append(_FETCH_OPERAND)

        instruction = _INSTRUCTION_BY_OPCODE.get(opcode)
        if instruction is not None:
            row.extend(instruction[0])

        if addressing is None or instruction is None:
            row.append(_INVALID)

        row.append(_NEXT)

        base = opcode << 3
        table[base:base + len(row)] = row

    return table