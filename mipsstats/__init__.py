"""Public package exports for the MIPS trace statistics tool."""

from .branch import BranchOutcome, classify_branch
from .classifier import RegisterAccess, RegisterEffect, register_effects
from .instruction import Instruction, InstructionFormat, decode, extract_bits
from .report import render_report, write_report
from .statistics import RegisterUsage, Statistics, TraceAnalyzer, analyse_trace
from .trace import TraceFormatError, TraceRecord, parse_trace, read_trace

__all__ = [
    "BranchOutcome",
    "classify_branch",
    "RegisterAccess",
    "RegisterEffect",
    "register_effects",
    "Instruction",
    "InstructionFormat",
    "decode",
    "extract_bits",
    "render_report",
    "write_report",
    "RegisterUsage",
    "Statistics",
    "TraceAnalyzer",
    "analyse_trace",
    "TraceFormatError",
    "TraceRecord",
    "parse_trace",
    "read_trace",
]
