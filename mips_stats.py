#!/usr/bin/env python3
"""Compute instruction-mix, branch and register statistics for a MIPS trace."""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import List, Optional, Sequence

from mipsstats import TraceFormatError, TraceRecord, analyse_trace, read_trace, write_report


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "trace",
        nargs="?",
        type=Path,
        default=Path("trace.txt"),
        help="Trace of whitespace separated <address> <word> hex pairs",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=Path("statistics.txt"),
        help="Where to write the statistics report",
    )
    parser.add_argument(
        "--max-records",
        type=int,
        default=None,
        help="Reject traces holding more than this many records",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)
    if args.max_records is not None and args.max_records < 0:
        parser.error("--max-records must be non-negative")
    return args


def load_records(path: Path, max_records: Optional[int]) -> List[TraceRecord]:
    try:
        return read_trace(path, max_records=max_records)
    except (TraceFormatError, UnicodeDecodeError) as exc:
        raise SystemExit(f"malformed trace {path}: {exc}") from exc
    except OSError as exc:
        raise SystemExit(f"unable to read trace {path}: {exc.strerror or exc}") from exc


def main(argv: Optional[Sequence[str]] = None) -> None:
    start_time = time.perf_counter()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    records = load_records(args.trace, args.max_records)
    stats = analyse_trace(records)
    try:
        write_report(stats, args.out)
    except OSError as exc:
        raise SystemExit(f"unable to write statistics {args.out}: {exc.strerror or exc}") from exc
    print(f"statistics written to {args.out} ({stats.insts} instructions)")

    total_time = time.perf_counter() - start_time
    logging.getLogger(__name__).debug("total execution time: %.2fs", total_time)


if __name__ == "__main__":
    main()
