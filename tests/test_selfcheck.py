import io
import logging

from geospatial.__main__ import TapReporter, run
from geospatial.logger import setup_logger
from geospatial.vectors import KNOWN_VECTORS


def test_run_known_vectors():
    out = io.StringIO()
    assert run(out=out) == 0

    lines = out.getvalue().splitlines()
    assert lines[0] == f"1..{len(KNOWN_VECTORS) * 4}"
    assert len(lines) == len(KNOWN_VECTORS) * 4 + 1
    assert all(line.startswith("ok ") for line in lines[1:])
    assert lines[1] == "ok 1 encode_with_len"
    assert lines[-1] == f"ok {len(KNOWN_VECTORS) * 4} lon"


def test_run_reports_failures():
    out = io.StringIO()
    assert run([("zzzz", 0.0, 0.0, 1.0)], out=out) == 1

    lines = out.getvalue().splitlines()
    assert lines == [
        "1..4",
        "not ok 1 encode_with_len",
        "ok 2 decode",
        "ok 3 lat",
        "ok 4 lon",
    ]


def test_tap_reporter_counts():
    out = io.StringIO()
    tap = TapReporter(out)
    tap.ok(True, "first")
    tap.ok(False, "second")
    assert (tap.count, tap.failed) == (2, 1)
    assert out.getvalue() == "ok 1 first\nnot ok 2 second\n"


def test_setup_logger_adds_one_handler():
    first = setup_logger("geospatial.test", logging.DEBUG)
    second = setup_logger("geospatial.test", logging.DEBUG)
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG
