"""Descriptive statistics and text reports for generated samples."""

import numbers
from typing import Any, Dict, Optional, Sequence

import numpy as np
from scipy import stats

from .driver import ComparisonEntry, comparison_table
from .errors import DegenerateInput
from .generator import Sample


def _describe_array(values: np.ndarray) -> Dict[str, float]:
    description = stats.describe(values)
    return {
        "n": int(description.nobs),
        "mean": float(description.mean),
        "variance": float(description.variance),
        "min": float(description.minmax[0]),
        "max": float(description.minmax[1]),
        "skewness": float(description.skewness),
        "kurtosis": float(description.kurtosis),
    }


def describe_sample(sample: Sample) -> Dict[str, Any]:
    """Describe the distributions of x and y and their linear correlation.

    Returns:
        Dictionary with 'x' and 'y' statistics (n, mean, variance, min, max,
        skewness, kurtosis) plus the Pearson correlation 'pearson_r' and its
        'pearson_p_value'. For a one-predictor OLS fit pearson_r ** 2 equals R².

    Raises:
        DegenerateInput: If the sample has fewer than 2 observations or x or y is constant.
    """
    if len(sample) < 2:
        raise DegenerateInput(
            f"Cannot describe a sample of {len(sample)} observation(s)",
            sample.noise_scale, sample.seed,
        )
    if np.ptp(sample.x) == 0 or np.ptp(sample.y) == 0:
        raise DegenerateInput(
            "Correlation is undefined for a constant variable",
            sample.noise_scale, sample.seed,
        )

    r, p_value = stats.pearsonr(sample.x, sample.y)
    return {
        "x": _describe_array(sample.x),
        "y": _describe_array(sample.y),
        "pearson_r": float(r),
        "pearson_p_value": float(p_value),
    }


def format_stat_line(key: str, val: Any) -> Optional[str]:
    """Format a single key/value pair as a line for text reports.

    Array-like values are skipped (None is returned).
    """
    if isinstance(val, (np.ndarray, list, tuple)):
        return None

    if isinstance(val, (bool, np.bool_)):
        return f"{key}: {val}"

    if isinstance(val, numbers.Number):
        v = float(val)
        if np.isinf(v):
            return f"{key}: inf"
        if np.isnan(v):
            return f"{key}: nan"
        return f"{key}: {v:.4f}"

    return f"{key}: {val}"


def generate_report(entries: Sequence[ComparisonEntry], seed: Optional[int] = None) -> str:
    """Plain text report with one block per configuration and an R² comparison."""
    report_lines = ["=" * 50, "VARIATION DECOMPOSITION", "=" * 50]
    if seed is not None:
        report_lines.append(f"seed: {seed}")

    for entry, row in zip(entries, comparison_table(entries)):
        report_lines.append("")
        report_lines.append(f"noise_scale = {entry.noise_scale}")
        report_lines.append("-" * 50)
        report_lines.append(f"n: {len(entry.sample)}")
        report_lines.append(format_stat_line("intercept", entry.fit.intercept))
        report_lines.append(format_stat_line("slope", entry.fit.slope))
        for key, val in row.items():
            if key == "noise_scale":
                continue
            line = format_stat_line(key, val)
            if line is not None:
                report_lines.append(line)

    if len(entries) >= 2:
        report_lines.append("")
        report_lines.append("=" * 50)
        report_lines.append("SUMMARY")
        report_lines.append("=" * 50)
        ordered = sorted(entries, key=lambda e: e.noise_scale)
        lowest, highest = ordered[0], ordered[-1]
        report_lines.append(
            f"• R²: {lowest.breakdown.r_squared:.3f} at noise_scale={lowest.noise_scale} "
            f"vs {highest.breakdown.r_squared:.3f} at noise_scale={highest.noise_scale}"
        )

    return "\n".join(report_lines)
