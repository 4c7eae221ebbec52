#!/usr/bin/env python3
"""
Approximate π, then report the repeating digit patterns in its expansion.

Usage:
  python pi_report.py                 -> 100 decimal places
  python pi_report.py 50
  python pi_report.py --precision 1K
  python pi_report.py -p 1e2
  python pi_report.py 30 --verbose
"""

from __future__ import annotations

import logging
import math
import sys
import time
from decimal import Decimal
from typing import List, NamedTuple

from pi_chudnovsky import calculate_pi, fractional_digits
from pi_patterns import AnalysisResult, analyze

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 100


class Options(NamedTuple):
    precision: int
    verbose: bool = False


# =========================
# Argument parsing
# =========================


def parse_precision_spec(spec: str) -> int:
    """
    Parse a precision like "100", "1K", "1e2" (K = 1_000, case-insensitive).

    Raises ValueError unless the result is a positive integer.
    """
    s = spec.strip()
    if not s:
        raise ValueError("Empty precision specification")

    multiplier = 1
    if s[-1] in "kK":
        multiplier = 1_000
        s = s[:-1].strip()
        if not s:
            raise ValueError(f"Missing number before suffix in {spec!r}")

    mantissa_str, sep, exp_str = s.lower().partition("e")
    if sep:
        if not mantissa_str or not exp_str:
            raise ValueError(f"Invalid scientific notation: {spec!r}")
        exp = int(exp_str)
        if exp < 0:
            raise ValueError(f"Negative exponent not supported in {spec!r}")
        value = int(mantissa_str) * 10 ** exp
    else:
        value = int(s)

    value *= multiplier
    if value <= 0:
        raise ValueError(f"Precision must be positive: {spec!r}")
    return value


def get_options_from_args(argv: List[str]) -> Options:
    """Read options from CLI arguments (argv[0] is the program name)."""
    precision_spec: str | None = None
    verbose = False
    args = argv[1:]

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--precision", "-p"):
            if i + 1 >= len(args):
                raise ValueError(f"Flag {arg!r} requires a value")
            precision_spec = args[i + 1]
            i += 2
            continue
        if arg in ("--verbose", "-v"):
            verbose = True
        elif not arg.startswith("-") and precision_spec is None:
            precision_spec = arg
        else:
            raise ValueError(f"Unexpected argument {arg!r}")
        i += 1

    if precision_spec is None:
        return Options(DEFAULT_PRECISION, verbose)
    return Options(parse_precision_spec(precision_spec), verbose)


# =========================
# Report
# =========================


def format_number(value: float) -> str:
    """
    Shortest round-trip digits, in fixed notation between 1e-7 and 1e21
    (242, not 242.0; 1.2193263111263526e+17 -> 121932631112635260).
    """
    if value == 0:
        return "0"
    if math.isfinite(value) and 1e-7 <= abs(value) < 1e21:
        return f"{Decimal(repr(value)).normalize():f}"
    return repr(value)


def report_lines(result: AnalysisResult, precision: int) -> List[str]:
    smallest = format_number(result.smallest_value)
    largest = format_number(result.largest_value)
    return [
        f"Calculated π to {precision} decimal places: 3.{result.digits}",
        f"Repeating patterns found: {result.patterns}",
        f"Smallest repeating pattern: {result.smallest}",
        f"Largest repeating pattern: {result.largest}",
        f"Result of smallest ({smallest}) * largest ({largest}): "
        f"{format_number(result.product)}",
        f"Non-repeating remainder of π: {result.remainder}",
    ]


def run(precision: int) -> AnalysisResult:
    start = time.perf_counter()
    pi_text = calculate_pi(precision)
    result = analyze(fractional_digits(pi_text))
    elapsed = time.perf_counter() - start
    logger.debug(
        "Analysed %d digits in %.4f s (%d patterns, %d unique)",
        len(result.digits),
        elapsed,
        len(result.patterns),
        len(result.unique),
    )
    return result


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv
    try:
        options = get_options_from_args(argv)
    except ValueError as e:
        prog = argv[0] if argv else "pi_report.py"
        sys.stderr.write(f"Error: {e}\n")
        sys.stderr.write("Usage examples:\n")
        sys.stderr.write(f"  {prog}\n")
        sys.stderr.write(f"  {prog} 50\n")
        sys.stderr.write(f"  {prog} --precision 1K\n")
        sys.stderr.write(f"  {prog} -p 1e2 --verbose\n")
        return 1

    if options.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s"
        )

    result = run(options.precision)
    for line in report_lines(result, options.precision):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
