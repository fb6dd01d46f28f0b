"""Branch direction inference from consecutive trace addresses."""

from __future__ import annotations

import enum
from typing import Optional

from .constants import BRANCH_OPCODES
from .instruction import WORD_SIZE


class BranchOutcome(enum.Enum):
    """Observed direction of control flow between two trace entries.

    ``FORWARD_TAKEN``
        The next address lies beyond the fall-through slot.

    ``BACKWARD_TAKEN``
        The next address is lower than the previous one.

    ``NOT_TAKEN``
        A conditional branch (``beq``/``bne``) fell through to the next word.
    """

    FORWARD_TAKEN = "fwd-taken"
    BACKWARD_TAKEN = "bkw-taken"
    NOT_TAKEN = "not-taken"


def classify_branch(
    prev_address: int, curr_address: int, prev_opcode: int
) -> Optional[BranchOutcome]:
    """Classify the transfer from ``prev_address`` to ``curr_address``.

    Returns ``None`` for plain sequential flow out of a non-branch
    instruction.  A zero difference is not a backward jump and only counts
    when the previous instruction was a conditional branch.
    """

    diff = curr_address - prev_address
    if diff > WORD_SIZE:
        return BranchOutcome.FORWARD_TAKEN
    if diff < 0:
        return BranchOutcome.BACKWARD_TAKEN
    if prev_opcode in BRANCH_OPCODES:
        return BranchOutcome.NOT_TAKEN
    return None


__all__ = ["BranchOutcome", "classify_branch"]
