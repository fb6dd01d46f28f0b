from pathlib import Path

import pytest

from mipsstats.trace import TraceFormatError, TraceRecord, parse_trace, read_trace


def test_parse_one_record_per_line() -> None:
    records = list(parse_trace(["1000 00430820\n", "1004 8FA80000\n"]))

    assert records == [TraceRecord(0x1000, 0x00430820), TraceRecord(0x1004, 0x8FA80000)]


def test_records_are_whitespace_separated_pairs() -> None:
    records = list(parse_trace(["1000 00430820 1004", "\t8fa80000\n", "\n"]))

    assert [tuple(record) for record in records] == [
        (0x1000, 0x00430820),
        (0x1004, 0x8FA80000),
    ]


def test_hex_prefix_is_accepted() -> None:
    assert list(parse_trace(["0x400000 0X00000000"])) == [TraceRecord(0x400000, 0)]


def test_full_64_bit_values() -> None:
    (record,) = parse_trace(["ffffffffffffffff 1"])

    assert record.address == 0xFFFFFFFFFFFFFFFF


def test_malformed_token_identifies_record() -> None:
    with pytest.raises(TraceFormatError, match=r"record 2 \(line 2\): invalid hexadecimal value 'zz'") as info:
        list(parse_trace(["1000 0", "zz 0"]))

    assert info.value.record == 2
    assert info.value.line == 2


@pytest.mark.parametrize("token", ["-4", "+4", "0x", "12g4", "1_000"])
def test_non_hex_tokens_are_rejected(token: str) -> None:
    with pytest.raises(TraceFormatError, match="invalid hexadecimal"):
        list(parse_trace([f"1000 {token}"]))


def test_value_wider_than_64_bits_is_rejected() -> None:
    with pytest.raises(TraceFormatError, match="does not fit in 64 bits"):
        list(parse_trace(["1" + "0" * 16 + " 0"]))


def test_dangling_address_is_rejected() -> None:
    with pytest.raises(TraceFormatError, match="record 2 .*has no instruction word"):
        list(parse_trace(["1000 0", "1004"]))


def test_records_before_a_malformed_one_are_still_yielded() -> None:
    parsed = parse_trace(["1000 0", "1004 xyz"])

    assert next(parsed) == TraceRecord(0x1000, 0)
    with pytest.raises(TraceFormatError):
        next(parsed)


def test_max_records_limit() -> None:
    lines = [f"{4 * i:x} 0" for i in range(3)]

    assert len(list(parse_trace(lines, max_records=3))) == 3
    with pytest.raises(TraceFormatError, match="limit of 2 records"):
        list(parse_trace(lines, max_records=2))


def test_no_fixed_record_cap() -> None:
    lines = [f"{4 * i:x} 00430820" for i in range(2500)]

    assert len(list(parse_trace(lines))) == 2500


def test_read_trace(tmp_path: Path) -> None:
    path = tmp_path / "trace.txt"
    path.write_text("1000 00430820\n1004 0c000400\n", "utf-8")

    assert read_trace(path) == [TraceRecord(0x1000, 0x00430820), TraceRecord(0x1004, 0x0C000400)]


def test_read_trace_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_trace(tmp_path / "missing.txt")


def test_empty_trace() -> None:
    assert list(parse_trace(["", "   \n"])) == []
