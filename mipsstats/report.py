"""Text rendering for trace statistics."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .statistics import Statistics


def render_report(stats: Statistics) -> str:
    """Return the ``key: value`` report for ``stats``.

    Counts come first, then branch and instruction-mix percentages with six
    decimals, then ``reg-<n>: <reads> <writes>`` for all 32 registers.
    """

    lines: List[str] = [
        f"insts: {stats.insts}",
        f"r-type: {stats.r_type}",
        f"i-type: {stats.i_type}",
        f"j-type: {stats.j_type}",
    ]
    percentages = (
        ("fwd-taken", stats.fwd_taken),
        ("bkw-taken", stats.bkw_taken),
        ("not-taken", stats.not_taken),
        ("loads", stats.loads),
        ("stores", stats.stores),
        ("arith", stats.arith),
    )
    for key, count in percentages:
        lines.append(f"{key}: {stats.percentage(count):.6f}")
    for index, (reads, writes) in enumerate(stats.register_table()):
        lines.append(f"reg-{index}: {reads} {writes}")
    return "\n".join(lines) + "\n"


def write_report(stats: Statistics, output_path: Path) -> None:
    output_path.write_text(render_report(stats), "utf-8")


__all__ = ["render_report", "write_report"]
