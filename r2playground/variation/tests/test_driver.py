"""Unit tests for driver.py"""

import unittest

import numpy as np

from r2playground.variation.driver import TABLE_COLUMNS, ComparisonEntry, comparison_table, run
from r2playground.variation.errors import InvalidArgument


class TestRun(unittest.TestCase):
    """Test cases for run function."""

    def setUp(self):
        """Set up test fixtures."""
        self.seed = 123
        self.size = 100
        self.noise_scales = [1.0, 0.3, 2.0]

    def test_one_entry_per_scale_in_order(self):
        """Test that entries follow the order of the input noise scales."""
        entries = run(self.seed, self.size, self.noise_scales)

        self.assertEqual(len(entries), len(self.noise_scales))
        self.assertEqual([e.noise_scale for e in entries], self.noise_scales)
        for entry in entries:
            self.assertIsInstance(entry, ComparisonEntry)
            self.assertEqual(len(entry.sample), self.size)
            self.assertEqual(entry.sample.noise_scale, entry.noise_scale)

    def test_reference_monotonicity(self):
        """Test that more injected noise lowers R² for the reference configurations."""
        low, high = run(self.seed, self.size, [0.3, 1.0])

        self.assertGreater(low.breakdown.r_squared, high.breakdown.r_squared)

    def test_order_independent(self):
        """Test that each configuration's result does not depend on its position."""
        forward = run(self.seed, self.size, [0.3, 1.0])
        backward = run(self.seed, self.size, [1.0, 0.3])

        self.assertEqual(forward[0].sample, backward[1].sample)
        self.assertEqual(forward[0].breakdown, backward[1].breakdown)

    def test_thread_pool_matches_sequential(self):
        """Test that parallel evaluation gives the same ordered results."""
        sequential = run(self.seed, self.size, self.noise_scales)
        parallel = run(self.seed, self.size, self.noise_scales, max_workers=3)

        self.assertEqual([e.noise_scale for e in parallel], self.noise_scales)
        for seq_entry, par_entry in zip(sequential, parallel):
            self.assertEqual(seq_entry.sample, par_entry.sample)
            self.assertEqual(seq_entry.fit, par_entry.fit)
            self.assertEqual(seq_entry.breakdown, par_entry.breakdown)

    def test_empty(self):
        """Test that no noise scales give no entries."""
        self.assertEqual(run(self.seed, self.size, []), [])

    def test_failure_names_configuration(self):
        """Test that a bad configuration propagates with its noise scale."""
        with self.assertRaises(InvalidArgument) as context:
            run(self.seed, self.size, [0.3, -0.5])

        self.assertEqual(context.exception.noise_scale, -0.5)

    def test_failure_in_thread_pool_propagates(self):
        """Test that errors raised in worker threads reach the caller."""
        with self.assertRaises(InvalidArgument):
            run(self.seed, self.size, [0.3, -0.5], max_workers=2)


class TestComparisonTable(unittest.TestCase):
    """Test cases for comparison_table function."""

    def test_rows(self):
        """Test columns, order and values of the table rows."""
        entries = run(123, 100, [0.3, 1.0])
        rows = comparison_table(entries)

        self.assertEqual(len(rows), 2)
        for row, entry in zip(rows, entries):
            with self.subTest(noise_scale=entry.noise_scale):
                self.assertEqual(list(row.keys()), TABLE_COLUMNS)
                self.assertEqual(row["noise_scale"], entry.noise_scale)
                self.assertAlmostEqual(row["mean"], float(np.mean(entry.sample.y)))
                self.assertAlmostEqual(row["variance"], float(np.var(entry.sample.y, ddof=1)))
                self.assertEqual(row["r_squared"], entry.breakdown.r_squared)

    def test_variance_is_sstot_over_n_minus_one(self):
        """Test the relation between the reported variance and SSTot."""
        row = comparison_table(run(7, 50, [0.5]))[0]

        self.assertAlmostEqual(row["variance"], row["ss_tot"] / 49)

    def test_higher_noise_higher_variance(self):
        """Test the 'low variance' / 'high variance' naming of the reference run."""
        low, high = comparison_table(run(123, 100, [0.3, 1.0]))

        self.assertLess(low["variance"], high["variance"])


if __name__ == "__main__":
    unittest.main()
