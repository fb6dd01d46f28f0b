"""Representation utilities for raw MIPS32 instruction words."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .constants import JUMP_OPCODES, OP_SPECIAL


WORD_SIZE = 4


def extract_bits(word: int, start: int, end: int) -> int:
    """Return bits ``start..end`` (inclusive) of ``word`` shifted down to bit 0.

    Ranges are not validated; callers pass the fixed field boundaries of the
    instruction encoding.
    """

    mask = ((1 << (end - start + 1)) - 1) << start
    return (word & mask) >> start


class InstructionFormat(enum.Enum):
    """Encoding format of an instruction word."""

    R = "r"
    I = "i"  # noqa: E741
    J = "j"


def format_for_opcode(opcode: int) -> InstructionFormat:
    if opcode == OP_SPECIAL:
        return InstructionFormat.R
    if opcode in JUMP_OPCODES:
        return InstructionFormat.J
    return InstructionFormat.I


@dataclass(frozen=True)
class Instruction:
    address: int
    word: int

    @property
    def opcode(self) -> int:
        return extract_bits(self.word, 26, 31)

    @property
    def rs(self) -> int:
        return extract_bits(self.word, 21, 25)

    @property
    def rt(self) -> int:
        return extract_bits(self.word, 16, 20)

    @property
    def rd(self) -> int:
        return extract_bits(self.word, 11, 15)

    @property
    def shamt(self) -> int:
        return extract_bits(self.word, 6, 10)

    @property
    def funct(self) -> int:
        return extract_bits(self.word, 0, 5)

    @property
    def immediate(self) -> int:
        return extract_bits(self.word, 0, 15)

    @property
    def jump_target(self) -> int:
        return extract_bits(self.word, 0, 25)

    @property
    def format(self) -> InstructionFormat:
        return format_for_opcode(self.opcode)

    def describe(self) -> str:
        return (
            f"{self.address:08X}: {self.word:08X}    {self.format.name}-type "
            f"op={self.opcode:02X} rs={self.rs} rt={self.rt} rd={self.rd} "
            f"shamt={self.shamt} funct={self.funct:02X}"
        )


def decode(address: int, word: int) -> Instruction:
    """Decode ``word`` fetched from ``address``.

    Decoding never fails: every bit pattern yields field values and exactly
    one format, even when the fields are meaningless for the opcode.
    """

    return Instruction(address, word)
