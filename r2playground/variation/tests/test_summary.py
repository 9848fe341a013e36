"""Unit tests for summary.py"""

import unittest

import numpy as np

from r2playground.variation.driver import run
from r2playground.variation.errors import DegenerateInput
from r2playground.variation.generator import Sample, generate
from r2playground.variation.summary import describe_sample, format_stat_line, generate_report


class TestDescribeSample(unittest.TestCase):
    """Test cases for describe_sample function."""

    def test_keys_and_values(self):
        """Test descriptive statistics of x and y."""
        sample = generate(seed=123, size=100, noise_scale=1.0)
        description = describe_sample(sample)

        self.assertEqual(description["x"]["n"], 100)
        self.assertAlmostEqual(description["y"]["mean"], float(np.mean(sample.y)))
        self.assertAlmostEqual(description["y"]["variance"], float(np.var(sample.y, ddof=1)))
        self.assertEqual(description["x"]["min"], float(sample.x.min()))
        for key in ("skewness", "kurtosis", "max"):
            self.assertIn(key, description["x"])

    def test_pearson_r_squared_equals_r2(self):
        """Test that the squared correlation equals R² of the fitted line."""
        entry = run(5, 100, [0.8])[0]
        description = describe_sample(entry.sample)

        self.assertAlmostEqual(description["pearson_r"] ** 2, entry.breakdown.r_squared, places=10)

    def test_degenerate(self):
        """Test that constant variables raise DegenerateInput."""
        with self.assertRaises(DegenerateInput):
            describe_sample(Sample(x=[1.0, 1.0, 1.0], y=[1.0, 2.0, 3.0]))
        with self.assertRaises(DegenerateInput):
            describe_sample(Sample(x=[1.0], y=[1.0]))


class TestFormatStatLine(unittest.TestCase):
    """Test cases for format_stat_line function."""

    def test_formats(self):
        """Test numeric, boolean, special float and array values."""
        self.assertEqual(format_stat_line("r_squared", 0.912345), "r_squared: 0.9123")
        self.assertEqual(format_stat_line("n", 100), "n: 100.0000")
        self.assertEqual(format_stat_line("ok", True), "ok: True")
        self.assertEqual(format_stat_line("v", float("inf")), "v: inf")
        self.assertEqual(format_stat_line("v", float("nan")), "v: nan")
        self.assertEqual(format_stat_line("name", "low"), "name: low")
        self.assertIsNone(format_stat_line("x", np.zeros(3)))


class TestGenerateReport(unittest.TestCase):
    """Test cases for generate_report function."""

    def test_report_blocks(self):
        """Test that the report has one block per configuration and a summary."""
        entries = run(123, 100, [0.3, 1.0])
        report = generate_report(entries, seed=123)

        self.assertIn("seed: 123", report)
        self.assertIn("noise_scale = 0.3", report)
        self.assertIn("noise_scale = 1.0", report)
        self.assertIn("SUMMARY", report)
        self.assertIn(f"r_squared: {entries[0].breakdown.r_squared:.4f}", report)
        self.assertLess(report.index("noise_scale = 0.3"), report.index("noise_scale = 1.0"))

    def test_single_configuration_has_no_summary(self):
        """Test that a single configuration is reported without comparison."""
        report = generate_report(run(1, 10, [0.5]))

        self.assertNotIn("SUMMARY", report)
        self.assertNotIn("seed:", report)


if __name__ == "__main__":
    unittest.main()
