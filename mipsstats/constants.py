"""Opcode and function-code tables used by the trace statistics rules."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Primary opcodes
# ---------------------------------------------------------------------------

OP_SPECIAL = 0x00
OP_J = 0x02
OP_JAL = 0x03
OP_BEQ = 0x04
OP_BNE = 0x05
OP_ADDI = 0x08
OP_ADDIU = 0x09
OP_LUI = 0x0F
OP_SB = 0x28
OP_SH = 0x29
OP_SW = 0x2B
OP_SC = 0x38

JUMP_OPCODES = frozenset({OP_J, OP_JAL})
BRANCH_OPCODES = frozenset({OP_BEQ, OP_BNE})

# lb/lh/lw/lbu/lhu.  Older reports labelled this set with the funct mnemonics
# add/addu/subu/and/or; the opcode values are what counts.  lwl/lwr (0x22,
# 0x26) have never been part of the set.
LOAD_OPCODES = frozenset({0x20, 0x21, 0x23, 0x24, 0x25})
STORE_OPCODES = frozenset({OP_SB, OP_SH, OP_SW})

# Stores plus store-conditional: rt is a source operand, never a destination.
RT_SOURCE_OPCODES = frozenset({OP_SB, OP_SH, OP_SW, OP_SC})

ARITHMETIC_IMMEDIATE_OPCODES = frozenset({OP_ADDI, OP_ADDIU})

# ---------------------------------------------------------------------------
# SPECIAL (opcode 0) function codes
# ---------------------------------------------------------------------------

FUNCT_SLL = 0x00
FUNCT_SRL = 0x02
FUNCT_SRA = 0x03
FUNCT_JR = 0x08

ARITHMETIC_FUNCTS = frozenset(
    {
        0x20,  # add
        0x21,  # addu
        0x22,  # sub
        0x23,  # subu
        0x18,  # mult
        0x19,  # multu
        0x1A,  # div
        0x1B,  # divu
        0x10,  # mfhi
        0x12,  # mflo
        0x00,
        0x01,
    }
)

SHIFT_IMMEDIATE_FUNCTS = frozenset({FUNCT_SLL, FUNCT_SRL, FUNCT_SRA})

# ---------------------------------------------------------------------------
# Register file
# ---------------------------------------------------------------------------

REGISTER_COUNT = 32
LINK_REGISTER = 31


__all__ = [
    "OP_SPECIAL",
    "OP_J",
    "OP_JAL",
    "OP_BEQ",
    "OP_BNE",
    "OP_ADDI",
    "OP_ADDIU",
    "OP_LUI",
    "OP_SB",
    "OP_SH",
    "OP_SW",
    "OP_SC",
    "JUMP_OPCODES",
    "BRANCH_OPCODES",
    "LOAD_OPCODES",
    "STORE_OPCODES",
    "RT_SOURCE_OPCODES",
    "ARITHMETIC_IMMEDIATE_OPCODES",
    "FUNCT_SLL",
    "FUNCT_SRL",
    "FUNCT_SRA",
    "FUNCT_JR",
    "ARITHMETIC_FUNCTS",
    "SHIFT_IMMEDIATE_FUNCTS",
    "REGISTER_COUNT",
    "LINK_REGISTER",
]
