import unittest

from pi_chudnovsky import calculate_pi, fractional_digits
from pi_patterns import (
    analyze,
    find_repeating_patterns,
    numeric_extremes,
    select_extremes,
    strip_patterns,
    unique_patterns,
    valid_patterns,
)


def count_overlapping(text, pattern):
    count = 0
    start = text.find(pattern)
    while start != -1:
        count += 1
        start = text.find(pattern, start + 1)
    return count


class TestFindRepeatingPatterns(unittest.TestCase):
    def test_alternating_digits(self):
        self.assertEqual(
            find_repeating_patterns("1212121"),
            [("121", 3), ("212", 2), ("12", 3), ("21", 3), ("1", 4), ("2", 3)],
        )

    def test_overlapping_occurrences_are_counted(self):
        self.assertEqual(find_repeating_patterns("1111"), [("11", 3), ("1", 4)])

    def test_only_half_length_substrings(self):
        # "123" occurs twice but is longer than len // 2
        patterns = dict(find_repeating_patterns("123123"))
        self.assertIn("123", patterns)
        self.assertNotIn("1231", patterns)
        self.assertEqual(find_repeating_patterns("12312"), [("12", 2), ("1", 2), ("2", 2)])

    def test_no_repeats(self):
        self.assertEqual(find_repeating_patterns("1234"), [])
        self.assertEqual(find_repeating_patterns("7"), [])
        self.assertEqual(find_repeating_patterns(""), [])

    def test_equal_lengths_keep_scan_order(self):
        patterns = find_repeating_patterns("9898")
        self.assertEqual([p for p, _ in patterns], ["98", "9", "8"])


class TestPatternsOnPiDigits(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.digits = fractional_digits(calculate_pi(100))
        cls.patterns = find_repeating_patterns(cls.digits)
        cls.unique = unique_patterns(cls.patterns)

    def test_every_pattern_repeats(self):
        for pattern, count in self.patterns:
            self.assertGreaterEqual(count, 2)
            self.assertEqual(count_overlapping(self.digits, pattern), count)

    def test_rescan_is_identical(self):
        self.assertEqual(find_repeating_patterns(self.digits), self.patterns)

    def test_unique_list_is_distinct_and_longest_first(self):
        self.assertEqual(len(self.unique), len(set(self.unique)))
        lengths = [len(p) for p in self.unique]
        self.assertEqual(lengths, sorted(lengths, reverse=True))

    def test_remainder_has_no_leading_zero(self):
        result = analyze(self.digits)
        self.assertFalse(result.remainder.startswith("0"))


class TestExtremes(unittest.TestCase):
    def test_select_extremes(self):
        self.assertEqual(select_extremes(["121", "212", "12", "2"]), ("2", "121"))
        self.assertEqual(select_extremes([]), ("", ""))

    def test_valid_patterns_parse_then_compare(self):
        self.assertEqual(valid_patterns(["012", "00", "0", "7"]), ["012", "7"])

    def test_numeric_extremes_skip_zero_patterns(self):
        self.assertEqual(numeric_extremes(["012", "00", "5", "0"]), (5.0, 12.0))
        self.assertEqual(numeric_extremes(["00", "0"]), (0.0, 0.0))


class TestStripPatterns(unittest.TestCase):
    def test_removal_order_matters(self):
        self.assertEqual(strip_patterns("1232", ["23", "12"]), "")
        self.assertEqual(strip_patterns("1232", ["12", "23"]), "32")

    def test_all_occurrences_removed(self):
        self.assertEqual(strip_patterns("4545145", ["45"]), "1")

    def test_leading_zeros_stripped(self):
        self.assertEqual(strip_patterns("0071", []), "71")
        self.assertEqual(strip_patterns("0123", ["1"]), "23")
        self.assertEqual(strip_patterns("00450045", ["45"]), "")


class TestAnalyze(unittest.TestCase):
    def test_alternating_digits(self):
        result = analyze("1212121")
        self.assertEqual(result.unique, ["121", "212", "12", "21", "1", "2"])
        self.assertEqual(result.largest, "121")
        self.assertEqual(result.smallest, "2")
        self.assertEqual((result.smallest_value, result.largest_value), (2.0, 121.0))
        self.assertEqual(result.product, 242.0)
        self.assertEqual(result.remainder, "")

    def test_only_zeros(self):
        result = analyze("000")
        self.assertEqual(result.patterns, [("0", 3)])
        self.assertEqual((result.smallest, result.largest), ("0", "0"))
        self.assertEqual(result.product, 0.0)
        self.assertEqual(result.remainder, "")

    def test_nothing_repeats(self):
        result = analyze("0123")
        self.assertEqual(result.unique, [])
        self.assertEqual(result.product, 0.0)
        self.assertEqual(result.remainder, "123")

    def test_empty_input(self):
        result = analyze("")
        self.assertEqual((result.smallest, result.largest, result.remainder), ("", "", ""))
        self.assertEqual(result.product, 0.0)


if __name__ == "__main__":
    unittest.main()
