"""Timing report printed and logged after a solve."""

from __future__ import annotations

import sys
from datetime import timedelta

_LOG_FILE = "solver_output.log"


def _seconds(value) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


def _input_string(argv) -> str:
    return "".join(f"{arg} " for arg in argv)


def format_report(setup_time, solve_time, success, argv):
    """Return the human-readable report; times are timedeltas or seconds."""
    setup = _seconds(setup_time)
    solve_ms = _seconds(solve_time) * 1000
    return (
        "\n \\---- Solver Market output ----/\n\n"
        f"input: {_input_string(argv)}\n"
        f"Success: {int(bool(success))}\n"
        f"Setup time: {setup:.6g} s\n"
        f"Solve time: {solve_ms:.6g} ms\n\n"
        "\n \\-----------------------------/\n"
    )


def format_log_line(setup_time, solve_time, success, argv):
    """Return the line appended to the log: input, success, setup s, solve ms."""
    setup = _seconds(setup_time)
    solve_ms = _seconds(solve_time) * 1000
    return f"{_input_string(argv)} {int(bool(success))} {setup:.6f} {solve_ms:.6f}\n"


def solver_market_output(
    setup_time, solve_time, success, argv, log_path=_LOG_FILE, stream=None
):
    """Print the report and append a line to the log file."""
    out = sys.stdout if stream is None else stream
    out.write(format_report(setup_time, solve_time, success, argv))
    try:
        with open(log_path, "a", encoding="utf-8") as log:
            log.write(format_log_line(setup_time, solve_time, success, argv))
    except OSError:
        sys.stderr.write(f"Error: Could not open {log_path} for writing.\n")