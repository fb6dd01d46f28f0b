"""Per-instruction classification rules.

Every rule is a pure function of a decoded :class:`Instruction`; none of them
look at previously seen instructions.  The statistics accumulator applies the
results, so classifying the same instruction twice simply counts it twice.

Register attribution is expressed as a list of :class:`RegisterEffect` deltas.
Each format starts from a default set of reads and writes which the named
exceptions then adjust.  The deltas are returned in application order so the
accumulator replays exactly the same sequence of increments and decrements.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List

from .constants import (
    ARITHMETIC_FUNCTS,
    ARITHMETIC_IMMEDIATE_OPCODES,
    BRANCH_OPCODES,
    FUNCT_JR,
    LINK_REGISTER,
    LOAD_OPCODES,
    OP_JAL,
    OP_LUI,
    OP_SPECIAL,
    RT_SOURCE_OPCODES,
    SHIFT_IMMEDIATE_FUNCTS,
    STORE_OPCODES,
)
from .instruction import Instruction, InstructionFormat


class RegisterAccess(enum.Enum):
    READ = "read"
    WRITE = "write"


@dataclass(frozen=True)
class RegisterEffect:
    """A single adjustment of a register usage counter."""

    register: int
    access: RegisterAccess
    delta: int

    def describe(self) -> str:
        return f"r{self.register} {self.access.value} {self.delta:+d}"


def _read(register: int, delta: int = 1) -> RegisterEffect:
    return RegisterEffect(register, RegisterAccess.READ, delta)


def _write(register: int, delta: int = 1) -> RegisterEffect:
    return RegisterEffect(register, RegisterAccess.WRITE, delta)


def is_load(instruction: Instruction) -> bool:
    return instruction.opcode in LOAD_OPCODES


def is_store(instruction: Instruction) -> bool:
    return instruction.opcode in STORE_OPCODES


def is_arithmetic(instruction: Instruction) -> bool:
    if instruction.opcode == OP_SPECIAL:
        return instruction.funct in ARITHMETIC_FUNCTS
    return instruction.opcode in ARITHMETIC_IMMEDIATE_OPCODES


def register_effects(instruction: Instruction) -> List[RegisterEffect]:
    """Return the register read/write deltas caused by ``instruction``."""

    fmt = instruction.format
    if fmt is InstructionFormat.R:
        return _r_type_effects(instruction)
    if fmt is InstructionFormat.I:
        return _i_type_effects(instruction)
    return _j_type_effects(instruction)


def _r_type_effects(instruction: Instruction) -> List[RegisterEffect]:
    rs, rt, rd = instruction.rs, instruction.rt, instruction.rd
    effects = [_write(rd), _read(rs), _read(rt)]

    funct = instruction.funct
    if funct == FUNCT_JR:
        # jr only reads its target register.
        effects.extend([_write(rd, -1), _read(rt, -1)])
    elif funct in SHIFT_IMMEDIATE_FUNCTS:
        # The shift amount comes from shamt, rs is unused.
        effects.append(_read(rs, -1))
    return effects


def _i_type_effects(instruction: Instruction) -> List[RegisterEffect]:
    rs, rt = instruction.rs, instruction.rt
    effects = [_write(rt), _read(rs)]

    opcode = instruction.opcode
    if opcode == OP_LUI:
        effects.append(_read(rs, -1))
    elif opcode in BRANCH_OPCODES:
        effects.extend([_write(rt, -1), _read(rt)])
    elif opcode in RT_SOURCE_OPCODES:
        effects.extend([_read(rt), _write(rt, -1)])
    return effects


def _j_type_effects(instruction: Instruction) -> List[RegisterEffect]:
    if instruction.opcode != OP_JAL:
        return []
    # jal carries no register fields: the default rt/rs attribution is undone
    # and only the link register is written.
    rs, rt = instruction.rs, instruction.rt
    return [
        _write(rt),
        _read(rs),
        _write(rt, -1),
        _read(rs, -1),
        _write(LINK_REGISTER),
    ]


__all__ = [
    "RegisterAccess",
    "RegisterEffect",
    "is_load",
    "is_store",
    "is_arithmetic",
    "register_effects",
]
