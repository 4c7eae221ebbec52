"""
Repeating-pattern analysis of a digit string.

Pipeline (single pass, order-sensitive):

  1. count every substring of length 1 .. n//2 and keep those seen twice or
     more, longest first
  2. collapse to distinct pattern strings
  3. pick the smallest / largest pattern, and their product over the
     patterns that parse to a positive number
  4. remove every pattern from the text, then strip leading zeros
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

PatternRecord = Tuple[str, int]


@dataclass
class AnalysisResult:
    digits: str
    patterns: List[PatternRecord] = field(default_factory=list)
    unique: List[str] = field(default_factory=list)
    smallest: str = ""
    largest: str = ""
    smallest_value: float = 0.0
    largest_value: float = 0.0
    product: float = 0.0
    remainder: str = ""


# =========================
# Pattern scan
# =========================


def find_repeating_patterns(text: str) -> List[PatternRecord]:
    """
    Count all substrings of length 1 .. len(text)//2 (overlapping).

    Returns (pattern, count) pairs with count > 1, sorted by pattern length
    descending. Equal lengths keep scan order: shorter lengths are scanned
    first, then increasing start offset.
    """
    n = len(text)
    counts: Dict[str, int] = {}  # insertion order == scan order

    for length in range(1, n // 2 + 1):
        for start in range(n - length + 1):
            substring = text[start : start + length]
            counts[substring] = counts.get(substring, 0) + 1

    repeating = [(pattern, count) for pattern, count in counts.items() if count > 1]
    # sorted() is stable
    repeating = sorted(repeating, key=lambda record: len(record[0]), reverse=True)

    logger.debug(
        "Scanned %d distinct substrings, %d repeat", len(counts), len(repeating)
    )
    return repeating


def unique_patterns(patterns: List[PatternRecord]) -> List[str]:
    """Distinct pattern strings, first occurrence wins."""
    return list(dict.fromkeys(pattern for pattern, _count in patterns))


# =========================
# Extremes
# =========================


def parse_number(pattern: str) -> float:
    """Float value of a pattern, 0.0 when it does not parse."""
    try:
        return float(pattern)
    except ValueError:
        return 0.0


def valid_patterns(unique: List[str]) -> List[str]:
    """Patterns whose numeric value is > 0 ("012" stays, "00" goes)."""
    return [pattern for pattern in unique if parse_number(pattern) > 0]


def select_extremes(unique: List[str]) -> Tuple[str, str]:
    """(smallest, largest) = (last, first) of a longest-first list."""
    if not unique:
        return "", ""
    return unique[-1], unique[0]


def numeric_extremes(unique: List[str]) -> Tuple[float, float]:
    """Smallest and largest over the positive-valued patterns, as floats."""
    valid = valid_patterns(unique)
    if not valid:
        return 0.0, 0.0
    smallest, largest = select_extremes(valid)
    return parse_number(smallest), parse_number(largest)


# =========================
# Remainder
# =========================


def strip_patterns(text: str, unique: List[str]) -> str:
    """
    Remove every occurrence of each pattern, in list order, then strip
    leading zeros.

    Patterns are removed as literal text. Order matters: a longer pattern
    removed first can consume characters a shorter one would have matched.
    """
    remainder = text
    for pattern in unique:
        remainder = remainder.replace(pattern, "")
    return remainder.lstrip("0")


def analyze(text: str) -> AnalysisResult:
    patterns = find_repeating_patterns(text)
    unique = unique_patterns(patterns)
    smallest, largest = select_extremes(unique)
    smallest_value, largest_value = numeric_extremes(unique)

    return AnalysisResult(
        digits=text,
        patterns=patterns,
        unique=unique,
        smallest=smallest,
        largest=largest,
        smallest_value=smallest_value,
        largest_value=largest_value,
        product=smallest_value * largest_value,
        remainder=strip_patterns(text, unique),
    )
