"""Register state and per-cycle actions of the 6510 processor core."""

from __future__ import annotations

from collections.abc import Callable

from sidez import opcodes as op
from sidez.cpu_alu import add_with_carry, and_rotate_right, compare, subtract_with_carry
from sidez.cpu_table import CycleStep, build_instruction_table
from sidez.flags import Flags

# Interrupt cycle marker: larger than any cycle count (about 0x103 << 3).
MAX_CYCLE = 65536

# Cycles between an interrupt request and the processor reacting to it.
INTERRUPT_DELAY = 2

# Magic values for the unstable LXA and ANE opcodes.
LXA_MAGIC = 0xEE
ANE_MAGIC = 0xEF

SP_PAGE = 0x01


class InstructionSet:
    """Registers, interrupt bookkeeping and every instruction cycle.

    Memory access goes through :meth:`cpu_read` and :meth:`cpu_write`, which
    use a flat 64 KiB RAM here; a system bus replaces them by overriding.
    """

    halt_error: type[Exception] = RuntimeError

    def __init__(self) -> None:
        self.memory = bytearray(0x10000)
        self.flags = Flags()

        self.a = 0
        self.x = 0
        self.y = 0
        self.sp = 0xFF
        self.pc = 0

        self.effective_address = 0
        self.pointer = 0
        self.data = 0

        self.cycle_count = 0
        self.interrupt_cycle = MAX_CYCLE
        self.irq_asserted_on_pin = False
        self.nmi_flag = False
        self.rst_flag = False
        self.rdy = True
        self.adl_carry = False
        self.d1x1 = False
        self.rdy_on_throw_away_read = False

        self.instruction_table: list[CycleStep] = build_instruction_table()
        self._actions: tuple[Callable[[], None] | None, ...] = tuple(
            getattr(self, step.action) if step.action else None
            for step in self.instruction_table
        )

        self._initialise()

    # -- memory -----------------------------------------------------------

    def cpu_read(self, addr: int) -> int:
        """Read a byte from the address space."""
        return self.memory[addr & 0xFFFF]

    def cpu_write(self, addr: int, data: int) -> None:
        """Write a byte to the address space."""
        self.memory[addr & 0xFFFF] = data & 0xFF

    # -- machinery --------------------------------------------------------

    def _initialise(self) -> None:
        """Reset registers and interrupt state; the next cycle fetches an opcode."""
        self.sp = 0xFF
        self.cycle_count = (op.BRKn << 3) + 6
        self.flags.reset()
        self.pc = 0
        self.irq_asserted_on_pin = False
        self.nmi_flag = False
        self.rst_flag = False
        self.interrupt_cycle = MAX_CYCLE
        self.rdy = True
        self.d1x1 = False

    def _clock(self) -> None:
        """Execute the current cycle and advance to the next one."""
        action = self._actions[self.cycle_count]
        self.cycle_count += 1
        if action is None:
            raise self.halt_error(f"no action at cycle slot {self.cycle_count - 1:#x}")
        action()

    def check_interrupts(self) -> bool:
        """True if an interrupt is requested and not masked."""
        return self.rst_flag or self.nmi_flag or (
            self.irq_asserted_on_pin and not self.flags.i
        )

    def calculate_interrupt_trigger_cycle(self) -> None:
        if self.interrupt_cycle == MAX_CYCLE and self.check_interrupts():
            self.interrupt_cycle = self.cycle_count

    def interrupts_and_next_opcode(self) -> None:
        if self.cycle_count > self.interrupt_cycle + INTERRUPT_DELAY:
            self.cpu_read(self.pc)
            self.cycle_count = op.BRKn << 3
            self.d1x1 = True
            self.interrupt_cycle = MAX_CYCLE
        else:
            self.fetch_next_opcode()

    def fetch_next_opcode(self) -> None:
        self.rdy_on_throw_away_read = False
        self.cycle_count = self.cpu_read(self.pc) << 3
        self.pc = (self.pc + 1) & 0xFFFF

        if not self.check_interrupts():
            self.interrupt_cycle = MAX_CYCLE
        elif self.interrupt_cycle != MAX_CYCLE:
            self.interrupt_cycle = -MAX_CYCLE

    def invalid_opcode(self) -> None:
        raise self.halt_error(f"processor halted at {(self.pc - 1) & 0xFFFF:#06x}")

    # -- stack ------------------------------------------------------------

    def push(self, data: int) -> None:
        self.cpu_write((SP_PAGE << 8) | self.sp, data)
        self.sp = (self.sp - 1) & 0xFF

    def pop(self) -> int:
        self.sp = (self.sp + 1) & 0xFF
        return self.cpu_read((SP_PAGE << 8) | self.sp)

    def push_low_pc(self) -> None:
        self.push(self.pc & 0xFF)

    def push_high_pc(self) -> None:
        self.push(self.pc >> 8)

    def push_sr(self) -> None:
        # B flag is clear for hardware interrupts; bit 5 is always set.
        self.push(self.flags.pack() | (0x20 if self.d1x1 else 0x30))

    def pop_sr(self) -> None:
        self.flags.unpack(self.pop())
        self.calculate_interrupt_trigger_cycle()

    def pop_low_pc(self) -> None:
        self.effective_address = (self.effective_address & 0xFF00) | self.pop()

    def pop_high_pc(self) -> None:
        self.effective_address = (self.effective_address & 0x00FF) | (self.pop() << 8)

    def brk_push_low_pc(self) -> None:
        self.push_low_pc()
        if self.rst_flag:
            self.effective_address = 0xFFFC
        elif self.nmi_flag:
            self.effective_address = 0xFFFA
        else:
            self.effective_address = 0xFFFE
        self.rst_flag = False
        self.nmi_flag = False
        self.calculate_interrupt_trigger_cycle()

    def irq_lo_request(self) -> None:
        self.pc = (self.pc & 0xFF00) | self.cpu_read(self.effective_address)
        self.d1x1 = False

    def irq_hi_request(self) -> None:
        high = self.cpu_read((self.effective_address + 1) & 0xFFFF)
        self.pc = (self.pc & 0x00FF) | (high << 8)
        self.flags.i = True

    # -- addressing -------------------------------------------------------

    def waste_cycle(self) -> None:
        pass

    def throw_away_fetch(self) -> None:
        self.cpu_read(self.pc)

    def throw_away_read(self) -> None:
        self.cpu_read(self.effective_address)
        if self.adl_carry:
            self.effective_address = (self.effective_address + 0x100) & 0xFFFF

    def fetch_data_byte(self) -> None:
        self.data = self.cpu_read(self.pc)
        if not self.d1x1:
            self.pc = (self.pc + 1) & 0xFFFF

    def fetch_low_addr(self) -> None:
        self.effective_address = self.cpu_read(self.pc)
        self.pc = (self.pc + 1) & 0xFFFF

    def fetch_low_addr_x(self) -> None:
        self.fetch_low_addr()
        self.effective_address = (self.effective_address + self.x) & 0xFF

    def fetch_low_addr_y(self) -> None:
        self.fetch_low_addr()
        self.effective_address = (self.effective_address + self.y) & 0xFF

    def fetch_high_addr(self) -> None:
        high = self.cpu_read(self.pc)
        self.effective_address = (self.effective_address & 0xFF) | (high << 8)
        self.pc = (self.pc + 1) & 0xFFFF

    def _index_low(self, index: int) -> None:
        self.effective_address = (self.effective_address + index) & 0xFFFF
        self.adl_carry = self.effective_address > 0xFF

    def fetch_high_addr_x(self) -> None:
        self._index_low(self.x)
        self.fetch_high_addr()

    def fetch_high_addr_x2(self) -> None:
        self.fetch_high_addr_x()
        if not self.adl_carry:
            self.cycle_count += 1

    def fetch_high_addr_y(self) -> None:
        self._index_low(self.y)
        self.fetch_high_addr()

    def fetch_high_addr_y2(self) -> None:
        self.fetch_high_addr_y()
        if not self.adl_carry:
            self.cycle_count += 1

    def fetch_low_pointer(self) -> None:
        self.pointer = self.cpu_read(self.pc)
        self.pc = (self.pc + 1) & 0xFFFF

    def fetch_low_pointer_x(self) -> None:
        self.pointer = (self.pointer & 0xFF00) | ((self.pointer + self.x) & 0xFF)

    def fetch_high_pointer(self) -> None:
        self.pointer = (self.pointer & 0xFF) | (self.cpu_read(self.pc) << 8)
        self.pc = (self.pc + 1) & 0xFFFF

    def fetch_low_eff_addr(self) -> None:
        self.effective_address = self.cpu_read(self.pointer)

    def fetch_high_eff_addr(self) -> None:
        self.pointer = (self.pointer & 0xFF00) | ((self.pointer + 1) & 0xFF)
        high = self.cpu_read(self.pointer)
        self.effective_address = (self.effective_address & 0xFF) | (high << 8)

    def fetch_high_eff_addr_y(self) -> None:
        self._index_low(self.y)
        self.fetch_high_eff_addr()

    def fetch_high_eff_addr_y2(self) -> None:
        self.fetch_high_eff_addr_y()
        if not self.adl_carry:
            self.cycle_count += 1

    def fetch_eff_addr_data_byte(self) -> None:
        self.data = self.cpu_read(self.effective_address)

    def put_eff_addr_data_byte(self) -> None:
        self.cpu_write(self.effective_address, self.data)

    # -- documented instructions -----------------------------------------

    def adc_instr(self) -> None:
        self.a = add_with_carry(self.flags, self.a, self.data)
        self.interrupts_and_next_opcode()

    def sbc_instr(self) -> None:
        self.a = subtract_with_carry(self.flags, self.a, self.data)
        self.interrupts_and_next_opcode()

    def and_instr(self) -> None:
        self.a &= self.data
        self.flags.set_nz(self.a)
        self.interrupts_and_next_opcode()

    def eor_instr(self) -> None:
        self.a ^= self.data
        self.flags.set_nz(self.a)
        self.interrupts_and_next_opcode()

    def ora_instr(self) -> None:
        self.a |= self.data
        self.flags.set_nz(self.a)
        self.interrupts_and_next_opcode()

    def bit_instr(self) -> None:
        self.flags.z = (self.a & self.data) == 0
        self.flags.n = bool(self.data & 0x80)
        self.flags.v = bool(self.data & 0x40)
        self.interrupts_and_next_opcode()

    def asl_instr(self) -> None:
        self.put_eff_addr_data_byte()
        self.flags.c = bool(self.data & 0x80)
        self.data = (self.data << 1) & 0xFF
        self.flags.set_nz(self.data)

    def asla_instr(self) -> None:
        self.flags.c = bool(self.a & 0x80)
        self.a = (self.a << 1) & 0xFF
        self.flags.set_nz(self.a)
        self.interrupts_and_next_opcode()

    def lsr_instr(self) -> None:
        self.put_eff_addr_data_byte()
        self.flags.c = bool(self.data & 0x01)
        self.data >>= 1
        self.flags.set_nz(self.data)

    def lsra_instr(self) -> None:
        self.flags.c = bool(self.a & 0x01)
        self.a >>= 1
        self.flags.set_nz(self.a)
        self.interrupts_and_next_opcode()

    def _rol(self, value: int) -> tuple[int, bool]:
        result = ((value << 1) & 0xFF) | (1 if self.flags.c else 0)
        return result, bool(value & 0x80)

    def _ror(self, value: int) -> tuple[int, bool]:
        result = (value >> 1) | (0x80 if self.flags.c else 0)
        return result, bool(value & 0x01)

    def rol_instr(self) -> None:
        self.put_eff_addr_data_byte()
        self.data, carry = self._rol(self.data)
        self.flags.set_nz(self.data)
        self.flags.c = carry

    def rola_instr(self) -> None:
        self.a, carry = self._rol(self.a)
        self.flags.set_nz(self.a)
        self.flags.c = carry
        self.interrupts_and_next_opcode()

    def ror_instr(self) -> None:
        self.put_eff_addr_data_byte()
        self.data, carry = self._ror(self.data)
        self.flags.set_nz(self.data)
        self.flags.c = carry

    def rora_instr(self) -> None:
        self.a, carry = self._ror(self.a)
        self.flags.set_nz(self.a)
        self.flags.c = carry
        self.interrupts_and_next_opcode()

    def fix_branch(self) -> None:
        self.cpu_read(self.effective_address)
        self.pc = (self.pc + (0x0100 if self.data < 0x80 else 0xFF00)) & 0xFFFF

    def branch_instr(self, condition: bool) -> None:
        if not condition:
            self.interrupts_and_next_opcode()
            return

        self.cpu_read(self.pc)
        target = (self.pc & 0xFF) + self.data
        self.adl_carry = (target > 0xFF) != (self.data > 0x7F)
        self.effective_address = (target & 0xFF) | (self.pc & 0xFF00)
        self.pc = self.effective_address

        if not self.adl_carry:
            self.cycle_count += 1
            # Taken branches on the same page delay interrupts.
            if self.interrupt_cycle >> 3 == self.cycle_count >> 3:
                self.interrupt_cycle += 2

    def bcc_instr(self) -> None:
        self.branch_instr(not self.flags.c)

    def bcs_instr(self) -> None:
        self.branch_instr(self.flags.c)

    def beq_instr(self) -> None:
        self.branch_instr(self.flags.z)

    def bne_instr(self) -> None:
        self.branch_instr(not self.flags.z)

    def bmi_instr(self) -> None:
        self.branch_instr(self.flags.n)

    def bpl_instr(self) -> None:
        self.branch_instr(not self.flags.n)

    def bvc_instr(self) -> None:
        self.branch_instr(not self.flags.v)

    def bvs_instr(self) -> None:
        self.branch_instr(self.flags.v)

    def clc_instr(self) -> None:
        self.flags.c = False
        self.interrupts_and_next_opcode()

    def cld_instr(self) -> None:
        self.flags.d = False
        self.interrupts_and_next_opcode()

    def cli_instr(self) -> None:
        self.flags.i = False
        self.calculate_interrupt_trigger_cycle()
        self.interrupts_and_next_opcode()

    def clv_instr(self) -> None:
        self.flags.v = False
        self.interrupts_and_next_opcode()

    def sec_instr(self) -> None:
        self.flags.c = True
        self.interrupts_and_next_opcode()

    def sed_instr(self) -> None:
        self.flags.d = True
        self.interrupts_and_next_opcode()

    def sei_instr(self) -> None:
        self.flags.i = True
        self.interrupts_and_next_opcode()
        if not self.rst_flag and not self.nmi_flag and self.interrupt_cycle != MAX_CYCLE:
            self.interrupt_cycle = MAX_CYCLE

    def cmp_instr(self) -> None:
        compare(self.flags, self.a, self.data)
        self.interrupts_and_next_opcode()

    def cpx_instr(self) -> None:
        compare(self.flags, self.x, self.data)
        self.interrupts_and_next_opcode()

    def cpy_instr(self) -> None:
        compare(self.flags, self.y, self.data)
        self.interrupts_and_next_opcode()

    def dec_instr(self) -> None:
        self.put_eff_addr_data_byte()
        self.data = (self.data - 1) & 0xFF
        self.flags.set_nz(self.data)

    def inc_instr(self) -> None:
        self.put_eff_addr_data_byte()
        self.data = (self.data + 1) & 0xFF
        self.flags.set_nz(self.data)

    def dex_instr(self) -> None:
        self.x = (self.x - 1) & 0xFF
        self.flags.set_nz(self.x)
        self.interrupts_and_next_opcode()

    def dey_instr(self) -> None:
        self.y = (self.y - 1) & 0xFF
        self.flags.set_nz(self.y)
        self.interrupts_and_next_opcode()

    def inx_instr(self) -> None:
        self.x = (self.x + 1) & 0xFF
        self.flags.set_nz(self.x)
        self.interrupts_and_next_opcode()

    def iny_instr(self) -> None:
        self.y = (self.y + 1) & 0xFF
        self.flags.set_nz(self.y)
        self.interrupts_and_next_opcode()

    def jmp_instr(self) -> None:
        self.pc = self.effective_address
        self.interrupts_and_next_opcode()

    def rti_instr(self) -> None:
        self.pc = self.effective_address
        self.interrupts_and_next_opcode()

    def rts_instr(self) -> None:
        self.cpu_read(self.effective_address)
        self.pc = (self.effective_address + 1) & 0xFFFF

    def lda_instr(self) -> None:
        self.a = self.data
        self.flags.set_nz(self.a)
        self.interrupts_and_next_opcode()

    def ldx_instr(self) -> None:
        self.x = self.data
        self.flags.set_nz(self.x)
        self.interrupts_and_next_opcode()

    def ldy_instr(self) -> None:
        self.y = self.data
        self.flags.set_nz(self.y)
        self.interrupts_and_next_opcode()

    def pha_instr(self) -> None:
        self.push(self.a)

    def pla_instr(self) -> None:
        self.a = self.pop()
        self.flags.set_nz(self.a)

    def sta_instr(self) -> None:
        self.data = self.a
        self.put_eff_addr_data_byte()

    def stx_instr(self) -> None:
        self.data = self.x
        self.put_eff_addr_data_byte()

    def sty_instr(self) -> None:
        self.data = self.y
        self.put_eff_addr_data_byte()

    def tax_instr(self) -> None:
        self.x = self.a
        self.flags.set_nz(self.x)
        self.interrupts_and_next_opcode()

    def tay_instr(self) -> None:
        self.y = self.a
        self.flags.set_nz(self.y)
        self.interrupts_and_next_opcode()

    def tsx_instr(self) -> None:
        self.x = self.sp
        self.flags.set_nz(self.x)
        self.interrupts_and_next_opcode()

    def txa_instr(self) -> None:
        self.a = self.x
        self.flags.set_nz(self.a)
        self.interrupts_and_next_opcode()

    def txs_instr(self) -> None:
        self.sp = self.x
        self.interrupts_and_next_opcode()

    def tya_instr(self) -> None:
        self.a = self.y
        self.flags.set_nz(self.a)
        self.interrupts_and_next_opcode()

    # -- undocumented instructions ---------------------------------------

    def sh_instr(self) -> None:
        """Store Cycle data ANDed with the target's high byte plus one."""
        high = self.effective_address >> 8
        if self.adl_carry:
            self.effective_address = (self.effective_address & 0xFF) | (
                (high & self.data) << 8
            )
        else:
            high = (high + 1) & 0xFF

        # During DMA the ADH+1 term drops off.
        if not self.rdy_on_throw_away_read:
            self.data &= high

        self.put_eff_addr_data_byte()

    def axa_instr(self) -> None:
        self.data = self.x & self.a
        self.sh_instr()

    def say_instr(self) -> None:
        self.data = self.y
        self.sh_instr()

    def xas_instr(self) -> None:
        self.data = self.x
        self.sh_instr()

    def shs_instr(self) -> None:
        self.sp = self.a & self.x
        self.data = self.sp
        self.sh_instr()

    def axs_instr(self) -> None:
        self.data = self.a & self.x
        self.put_eff_addr_data_byte()

    def alr_instr(self) -> None:
        self.a &= self.data
        self.flags.c = bool(self.a & 0x01)
        self.a >>= 1
        self.flags.set_nz(self.a)
        self.interrupts_and_next_opcode()

    def anc_instr(self) -> None:
        self.a &= self.data
        self.flags.set_nz(self.a)
        self.flags.c = self.flags.n
        self.interrupts_and_next_opcode()

    def ane_instr(self) -> None:
        self.a = (self.a | ANE_MAGIC) & self.x & self.data
        self.flags.set_nz(self.a)
        self.interrupts_and_next_opcode()

    def arr_instr(self) -> None:
        self.a = and_rotate_right(self.flags, self.a, self.data)
        self.interrupts_and_next_opcode()

    def aso_instr(self) -> None:
        self.put_eff_addr_data_byte()
        self.flags.c = bool(self.data & 0x80)
        self.data = (self.data << 1) & 0xFF
        self.a |= self.data
        self.flags.set_nz(self.a)

    def dcm_instr(self) -> None:
        self.put_eff_addr_data_byte()
        self.data = (self.data - 1) & 0xFF
        compare(self.flags, self.a, self.data)

    def ins_instr(self) -> None:
        self.put_eff_addr_data_byte()
        self.data = (self.data + 1) & 0xFF
        self.a = subtract_with_carry(self.flags, self.a, self.data)

    def las_instr(self) -> None:
        self.data &= self.sp
        self.flags.set_nz(self.data)
        self.a = self.x = self.sp = self.data
        self.interrupts_and_next_opcode()

    def lax_instr(self) -> None:
        self.a = self.x = self.data
        self.flags.set_nz(self.a)
        self.interrupts_and_next_opcode()

    def lse_instr(self) -> None:
        self.put_eff_addr_data_byte()
        self.flags.c = bool(self.data & 0x01)
        self.data >>= 1
        self.a ^= self.data
        self.flags.set_nz(self.a)

    def oal_instr(self) -> None:
        self.a = self.data & (self.a | LXA_MAGIC)
        self.x = self.a
        self.flags.set_nz(self.x)
        self.interrupts_and_next_opcode()

    def rla_instr(self) -> None:
        self.put_eff_addr_data_byte()
        self.data, carry = self._rol(self.data)
        self.flags.c = carry
        self.a &= self.data
        self.flags.set_nz(self.a)

    def rra_instr(self) -> None:
        self.put_eff_addr_data_byte()
        self.data, carry = self._ror(self.data)
        self.flags.c = carry
        self.a = add_with_carry(self.flags, self.a, self.data)

    def sbx_instr(self) -> None:
        tmp = (self.x & self.a) - self.data
        self.x = tmp & 0xFF
        self.flags.set_nz(self.x)
        self.flags.c = tmp >= 0
        self.interrupts_and_next_opcode()