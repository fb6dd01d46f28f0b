"""Readers for whitespace separated ``<address> <word>`` hex traces."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple


logger = logging.getLogger(__name__)

MAX_VALUE = (1 << 64) - 1

_HEX_TOKEN = re.compile(r"(0[xX])?[0-9a-fA-F]+")


class TraceFormatError(ValueError):
    """Raised when a trace record cannot be parsed."""

    def __init__(self, message: str, *, record: int, line: int) -> None:
        super().__init__(f"record {record} (line {line}): {message}")
        self.record = record
        self.line = line


@dataclass(frozen=True)
class TraceRecord:
    address: int
    word: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.address, self.word))


def _tokens(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    for line_no, line in enumerate(lines, start=1):
        for token in line.split():
            yield line_no, token


def _parse_value(token: str, *, record: int, line: int) -> int:
    if not _HEX_TOKEN.fullmatch(token):
        raise TraceFormatError(f"invalid hexadecimal value {token!r}", record=record, line=line)
    value = int(token, 16)
    if value > MAX_VALUE:
        raise TraceFormatError(
            f"value {token!r} does not fit in 64 bits", record=record, line=line
        )
    return value


def parse_trace(
    lines: Iterable[str], *, max_records: Optional[int] = None
) -> Iterator[TraceRecord]:
    """Yield :class:`TraceRecord` pairs from ``lines`` in input order.

    Records are pairs of tokens; line breaks carry no meaning.  Parsing is
    strict: the first malformed token, a dangling address without its word or
    a record beyond ``max_records`` raises :class:`TraceFormatError`.
    """

    tokens = _tokens(lines)
    record = 0
    for line_no, address_token in tokens:
        record += 1
        if max_records is not None and record > max_records:
            raise TraceFormatError(
                f"trace exceeds the limit of {max_records} records",
                record=record,
                line=line_no,
            )
        address = _parse_value(address_token, record=record, line=line_no)
        try:
            word_line, word_token = next(tokens)
        except StopIteration:
            raise TraceFormatError(
                f"address {address_token!r} has no instruction word",
                record=record,
                line=line_no,
            ) from None
        word = _parse_value(word_token, record=record, line=word_line)
        yield TraceRecord(address, word)


def read_trace(path: Path, *, max_records: Optional[int] = None) -> List[TraceRecord]:
    """Load every record of the trace stored at ``path``."""

    with path.open("r", encoding="utf-8") as handle:
        records = list(parse_trace(handle, max_records=max_records))
    logger.debug("read %d trace records from %s", len(records), path)
    return records


__all__ = ["MAX_VALUE", "TraceFormatError", "TraceRecord", "parse_trace", "read_trace"]
