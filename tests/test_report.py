from pathlib import Path

from mipsstats.report import render_report, write_report
from mipsstats.statistics import Statistics, analyse_trace
from mipsstats.trace import parse_trace


FIVE_INSTRUCTION_TRACE = """\
1000 00430820
1004 8fa80000
1008 11000003
1018 afa80004
1000 0c000400
"""


def _report_lines(text: str) -> dict:
    return dict(line.split(": ", 1) for line in text.splitlines())


def test_five_instruction_report() -> None:
    stats = analyse_trace(parse_trace(FIVE_INSTRUCTION_TRACE.splitlines()))

    lines = _report_lines(render_report(stats))

    assert lines["insts"] == "5"
    assert lines["r-type"] == "1"
    assert lines["i-type"] == "3"
    assert lines["j-type"] == "1"
    assert lines["fwd-taken"] == "20.000000"
    assert lines["bkw-taken"] == "20.000000"
    assert lines["not-taken"] == "0.000000"
    assert lines["loads"] == "20.000000"
    assert lines["stores"] == "20.000000"
    assert lines["arith"] == "20.000000"
    assert lines["reg-0"] == "1 0"
    assert lines["reg-1"] == "0 1"
    assert lines["reg-2"] == "1 0"
    assert lines["reg-3"] == "1 0"
    assert lines["reg-8"] == "2 1"
    assert lines["reg-29"] == "2 0"
    assert lines["reg-31"] == "0 1"


def test_report_field_order() -> None:
    keys = [line.split(":", 1)[0] for line in render_report(Statistics()).splitlines()]

    assert keys[:10] == [
        "insts",
        "r-type",
        "i-type",
        "j-type",
        "fwd-taken",
        "bkw-taken",
        "not-taken",
        "loads",
        "stores",
        "arith",
    ]
    assert keys[10:] == [f"reg-{index}" for index in range(32)]


def test_percentages_use_six_decimals() -> None:
    trace = ["0 8fa80000", "4 00000000", "8 00000000"]

    lines = _report_lines(render_report(analyse_trace(parse_trace(trace))))

    assert lines["loads"] == "33.333333"
    assert lines["arith"] == "66.666667"


def test_empty_trace_renders_zero_percentages() -> None:
    text = render_report(analyse_trace([]))

    lines = _report_lines(text)
    assert lines["insts"] == "0"
    for key in ("fwd-taken", "bkw-taken", "not-taken", "loads", "stores", "arith"):
        assert lines[key] == "0.000000"
    assert text.endswith("reg-31: 0 0\n")


def test_write_report(tmp_path: Path) -> None:
    output = tmp_path / "statistics.txt"

    write_report(analyse_trace([(0, 0x00430820)]), output)

    assert output.read_text("utf-8").startswith("insts: 1\nr-type: 1\n")
