"""Cycle-exact 6510 processor driven by an event scheduler."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum
from typing import Protocol

from sidez import opcodes as op
from sidez.cpu_ops import INTERRUPT_DELAY, MAX_CYCLE, InstructionSet


class ClockPhase(IntEnum):
    """The two phases of the system clock."""

    PHI1 = 0
    PHI2 = 1


class HaltInstruction(Exception):
    """Raised when the processor executes an opcode that locks it up."""


class Scheduler(Protocol):
    """What the processor needs from an event scheduler.

    ``schedule`` runs ``event`` after ``cycles`` clock cycles; with a phase
    it runs on that phase, otherwise on the current one. ``cancel`` removes
    a pending event and does nothing if it is not pending.
    """

    def schedule(
        self, event: Callable[[], None], cycles: int, phase: ClockPhase | None = None
    ) -> None: ...

    def cancel(self, event: Callable[[], None]) -> None: ...


class Bus(Protocol):
    """The system bus the processor reads and writes through."""

    def cpu_read(self, addr: int) -> int: ...

    def cpu_write(self, addr: int, data: int) -> None: ...


# Cycles during which the processor still latches state while stalled.
_SH_THROW_AWAY_CYCLES = frozenset(
    {
        (op.SHAiy << 3) + 3,
        (op.SHSay << 3) + 2,
        (op.SHYax << 3) + 2,
        (op.SHXay << 3) + 2,
        (op.SHAay << 3) + 2,
    }
)


class MOS6510(InstructionSet):
    """6510 core: one instruction cycle per scheduled event.

    Cycles that write cannot be stolen; while RDY is low, read cycles stall.
    """

    SR_INTERRUPT = 2

    halt_error = HaltInstruction

    def __init__(self, scheduler: Scheduler, bus: Bus) -> None:
        self._scheduler = scheduler
        self._bus = bus
        # Keep one object per event so the scheduler can cancel it.
        self._nosteal = self._event_without_steals
        self._steal = self._event_with_steals
        self._clear_int = self._remove_irq
        super().__init__()

    # -- memory -----------------------------------------------------------

    def cpu_read(self, addr: int) -> int:
        """Read a byte through the system bus."""
        return self._bus.cpu_read(addr & 0xFFFF)

    def cpu_write(self, addr: int, data: int) -> None:
        """Write a byte through the system bus."""
        self._bus.cpu_write(addr & 0xFFFF, data & 0xFF)

    # -- events -----------------------------------------------------------

    def _initialise(self) -> None:
        super()._initialise()
        self._scheduler.schedule(self._nosteal, 0, ClockPhase.PHI2)

    def _event_without_steals(self) -> None:
        self._clock()
        self._scheduler.schedule(self._nosteal, 1)

    def _event_with_steals(self) -> None:
        if self.instruction_table[self.cycle_count].nosteal:
            self._clock()
            self._scheduler.schedule(self._steal, 1)
            return

        cycle = self.cycle_count
        if cycle == op.CLIn << 3:
            self.flags.i = False
            if self.irq_asserted_on_pin and self.interrupt_cycle == MAX_CYCLE:
                self.interrupt_cycle = -MAX_CYCLE
        elif cycle == op.SEIn << 3:
            self.flags.i = True
            if (
                not self.rst_flag
                and not self.nmi_flag
                and cycle <= self.interrupt_cycle + INTERRUPT_DELAY
            ):
                self.interrupt_cycle = MAX_CYCLE
        elif cycle in _SH_THROW_AWAY_CYCLES:
            self.rdy_on_throw_away_read = True

        # A stalled processor still takes the first clock of interrupt delay.
        if self.interrupt_cycle == self.cycle_count:
            self.interrupt_cycle -= 1

    def _remove_irq(self) -> None:
        if not self.rst_flag and not self.nmi_flag and self.interrupt_cycle != MAX_CYCLE:
            self.interrupt_cycle = MAX_CYCLE

    # -- public interface -------------------------------------------------

    def reset(self) -> None:
        """Reset registers, set the processor port and jump through the reset vector."""
        self._initialise()
        self.cpu_write(0, 0x2F)
        self.cpu_write(1, 0x37)
        low = self.cpu_read(0xFFFC)
        high = self.cpu_read(0xFFFD)
        self.effective_address = low | (high << 8)
        self.pc = self.effective_address

    @staticmethod
    def credits() -> str:
        """Credits for the processor emulation."""
        return (
            "MOS6510 Cycle Exact Emulation\n"
            "\t(C) 2000 Simon A. White\n"
            "\t(C) 2008-2010 Antti S. Lankila\n"
            "\t(C) 2011-2020 Leandro Nini\n"
        )

    def set_rdy(self, rdy: bool) -> None:
        """Set the RDY line; while low the processor pauses on its next read."""
        self.rdy = rdy
        if rdy:
            self._scheduler.cancel(self._steal)
            self._scheduler.schedule(self._nosteal, 0, ClockPhase.PHI2)
        else:
            self._scheduler.cancel(self._nosteal)
            self._scheduler.schedule(self._steal, 0, ClockPhase.PHI2)

    def trigger_rst(self) -> None:
        """Abort whatever is running and enter the reset sequence."""
        self._initialise()
        self.cycle_count = op.BRKn << 3
        self.rst_flag = True
        self.calculate_interrupt_trigger_cycle()

    def trigger_nmi(self) -> None:
        """Request a non-maskable interrupt; it cannot be withdrawn."""
        self.nmi_flag = True
        self.calculate_interrupt_trigger_cycle()
        if not self.rdy:
            self._scheduler.cancel(self._steal)
            self._scheduler.schedule(self._steal, 0, ClockPhase.PHI2)

    def trigger_irq(self) -> None:
        """Pull the IRQ line low."""
        self.irq_asserted_on_pin = True
        self.calculate_interrupt_trigger_cycle()
        if not self.rdy and self.interrupt_cycle == self.cycle_count:
            self._scheduler.cancel(self._steal)
            self._scheduler.schedule(self._steal, 0, ClockPhase.PHI2)

    def clear_irq(self) -> None:
        """Release the IRQ line."""
        self.irq_asserted_on_pin = False
        self._scheduler.schedule(self._clear_int, INTERRUPT_DELAY, ClockPhase.PHI1)