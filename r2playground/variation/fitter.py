"""Ordinary least squares fit of y on a single predictor x."""

import logging
from dataclasses import dataclass

import numpy as np

from .errors import DegenerateInput
from .generator import Sample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FitResult:
    """Fitted line y_hat = intercept + slope * x."""

    intercept: float
    slope: float

    def predict(self, x) -> np.ndarray:
        return self.intercept + self.slope * np.asarray(x, dtype=float)

    def __call__(self, x) -> np.ndarray:
        return self.predict(x)


def fit(sample: Sample) -> FitResult:
    """Fit y ~ x by ordinary least squares using the closed-form solution.

    slope = Sxy / Sxx (covariance over variance), intercept = mean(y) - slope * mean(x).

    Raises:
        DegenerateInput: If the sample has fewer than 2 observations or all x are equal.
    """
    n = len(sample)
    if n < 2:
        raise DegenerateInput(
            f"Cannot fit a line to {n} observation(s), need at least 2",
            sample.noise_scale, sample.seed,
        )

    x, y = sample.x, sample.y
    # exact check, a constant float array can still have a tiny non-zero Sxx
    if np.ptp(x) == 0:
        raise DegenerateInput(
            "x has zero variance, the slope is undefined",
            sample.noise_scale, sample.seed,
        )

    x_mean = x.mean()
    y_mean = y.mean()
    dx = x - x_mean
    s_xx = np.dot(dx, dx)
    s_xy = np.dot(dx, y - y_mean)

    slope = s_xy / s_xx
    intercept = y_mean - slope * x_mean

    logger.debug("Fitted intercept=%.6f slope=%.6f on %d points", intercept, slope, n)
    return FitResult(intercept=float(intercept), slope=float(slope))
