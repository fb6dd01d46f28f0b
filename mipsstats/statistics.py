"""Aggregate statistics gathered over a single pass of an instruction trace."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .branch import BranchOutcome, classify_branch
from .classifier import (
    RegisterAccess,
    RegisterEffect,
    is_arithmetic,
    is_load,
    is_store,
    register_effects,
)
from .constants import REGISTER_COUNT
from .instruction import Instruction, InstructionFormat, decode


logger = logging.getLogger(__name__)


@dataclass
class RegisterUsage:
    """Read and write counters for one architectural register."""

    reads: int = 0
    writes: int = 0

    def apply(self, effect: RegisterEffect) -> None:
        if effect.access is RegisterAccess.READ:
            self.reads += effect.delta
        else:
            self.writes += effect.delta

    def as_tuple(self) -> Tuple[int, int]:
        return self.reads, self.writes


def _empty_register_table() -> List[RegisterUsage]:
    return [RegisterUsage() for _ in range(REGISTER_COUNT)]


@dataclass
class Statistics:
    """Running counters for a trace.

    ``insts`` always equals ``r_type + i_type + j_type`` because the format
    tally is the only place either is incremented.
    """

    insts: int = 0
    r_type: int = 0
    i_type: int = 0
    j_type: int = 0
    fwd_taken: int = 0
    bkw_taken: int = 0
    not_taken: int = 0
    loads: int = 0
    stores: int = 0
    arith: int = 0
    registers: List[RegisterUsage] = field(default_factory=_empty_register_table)

    def register(self, index: int) -> RegisterUsage:
        if not 0 <= index < REGISTER_COUNT:
            raise ValueError(f"register index {index} outside 0..{REGISTER_COUNT - 1}")
        return self.registers[index]

    # ------------------------------------------------------------------
    # tallies
    # ------------------------------------------------------------------

    def record_format(self, fmt: InstructionFormat) -> None:
        self.insts += 1
        if fmt is InstructionFormat.R:
            self.r_type += 1
        elif fmt is InstructionFormat.I:
            self.i_type += 1
        else:
            self.j_type += 1

    def record_memory_access(self, instruction: Instruction) -> None:
        if is_load(instruction):
            self.loads += 1
        elif is_store(instruction):
            self.stores += 1

    def record_arithmetic(self, instruction: Instruction) -> None:
        if is_arithmetic(instruction):
            self.arith += 1

    def record_register_effects(self, effects: Iterable[RegisterEffect]) -> None:
        for effect in effects:
            self.register(effect.register).apply(effect)

    def record_branch(self, outcome: Optional[BranchOutcome]) -> None:
        if outcome is BranchOutcome.FORWARD_TAKEN:
            self.fwd_taken += 1
        elif outcome is BranchOutcome.BACKWARD_TAKEN:
            self.bkw_taken += 1
        elif outcome is BranchOutcome.NOT_TAKEN:
            self.not_taken += 1

    def classify(self, instruction: Instruction) -> None:
        """Apply the four per-instruction tallies for ``instruction``."""

        self.record_format(instruction.format)
        self.record_memory_access(instruction)
        self.record_arithmetic(instruction)
        self.record_register_effects(register_effects(instruction))

    # ------------------------------------------------------------------
    # derived values
    # ------------------------------------------------------------------

    def percentage(self, count: int) -> float:
        """Return ``count`` as a percentage of all instructions (0.0 when empty)."""

        if self.insts == 0:
            return 0.0
        return count / self.insts * 100

    def register_table(self) -> List[Tuple[int, int]]:
        return [usage.as_tuple() for usage in self.registers]


class TraceAnalyzer:
    """Fold decoded instructions into a :class:`Statistics` record.

    Only the most recent instruction is retained; it supplies the previous
    address and opcode for branch classification.
    """

    def __init__(self) -> None:
        self._statistics = Statistics()
        self._previous: Optional[Instruction] = None

    def feed(self, instruction: Instruction) -> None:
        stats = self._statistics
        stats.classify(instruction)
        previous = self._previous
        if previous is not None:
            stats.record_branch(
                classify_branch(previous.address, instruction.address, previous.opcode)
            )
        self._previous = instruction

    def feed_all(self, instructions: Iterable[Instruction]) -> None:
        for instruction in instructions:
            self.feed(instruction)

    @property
    def statistics(self) -> Statistics:
        return self._statistics


def analyse_trace(records: Iterable[Tuple[int, int]]) -> Statistics:
    """Decode ``(address, word)`` pairs in order and return their statistics."""

    analyzer = TraceAnalyzer()
    analyzer.feed_all(decode(address, word) for address, word in records)
    stats = analyzer.statistics
    logger.debug(
        "analysed %d instructions (r=%d i=%d j=%d)",
        stats.insts,
        stats.r_type,
        stats.i_type,
        stats.j_type,
    )
    return stats


__all__ = ["RegisterUsage", "Statistics", "TraceAnalyzer", "analyse_trace"]
