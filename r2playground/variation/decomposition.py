"""Decomposition of total variation into regression and residual sums of squares."""

import logging
from dataclasses import dataclass

import numpy as np

from .config import IDENTITY_RTOL
from .errors import DegenerateInput, InconsistentFit
from .fitter import FitResult
from .generator import Sample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VariationBreakdown:
    """Sums of squares of one sample and its fitted line.

    For an OLS fit with intercept ss_tot == ss_reg + ss_resid and
    0 <= r_squared <= 1.
    """

    ss_tot: float
    ss_reg: float
    ss_resid: float
    r_squared: float

    @property
    def identity_gap(self) -> float:
        """Absolute difference between SSTot and SSReg + SSResid."""
        return abs(self.ss_tot - (self.ss_reg + self.ss_resid))

    def is_consistent(self, rtol: float = IDENTITY_RTOL) -> bool:
        """Whether SSTot == SSReg + SSResid holds within a relative tolerance."""
        return self.identity_gap <= rtol * self.ss_tot

    def as_dict(self) -> dict:
        return {
            "ss_tot": self.ss_tot,
            "ss_reg": self.ss_reg,
            "ss_resid": self.ss_resid,
            "r_squared": self.r_squared,
        }


def decompose(sample: Sample, fit: FitResult, check: bool = True, rtol: float = IDENTITY_RTOL) -> VariationBreakdown:
    """Compute SSTot, SSReg, SSResid and R² = SSReg / SSTot.

    Args:
        sample: The observations the line was fitted on
        fit: Fitted line, normally fit(sample)
        check: Verify SSTot == SSReg + SSResid, which is equivalent to
            R² == 1 - SSResid / SSTot
        rtol: Relative tolerance of the check

    Returns:
        VariationBreakdown with the three sums of squares and R²

    Raises:
        DegenerateInput: If all y are equal (SSTot = 0, R² undefined).
        InconsistentFit: If check is set and the identity does not hold,
            i.e. `fit` is not the least squares line of `sample`.
    """
    x, y = sample.x, sample.y

    if len(y) == 0 or np.ptp(y) == 0:
        raise DegenerateInput(
            "y has zero total variation, R² is undefined",
            sample.noise_scale, sample.seed,
        )

    y_mean = y.mean()
    x_mean = x.mean()
    # same line as fit.predict(x), evaluated around the predictor mean so that a
    # large offset in x does not cancel away the precision of slope * x
    y_hat = (fit.intercept + fit.slope * x_mean) + fit.slope * (x - x_mean)

    ss_tot = float(np.sum((y - y_mean) ** 2))
    ss_reg = float(np.sum((y_hat - y_mean) ** 2))
    ss_resid = float(np.sum((y - y_hat) ** 2))
    r_squared = ss_reg / ss_tot

    breakdown = VariationBreakdown(ss_tot=ss_tot, ss_reg=ss_reg, ss_resid=ss_resid, r_squared=r_squared)

    if check and not breakdown.is_consistent(rtol):
        raise InconsistentFit(
            f"SSTot={ss_tot:.6g} differs from SSReg + SSResid={ss_reg + ss_resid:.6g} "
            f"by {breakdown.identity_gap:.3g}, the fit is not the least squares line of this sample",
            sample.noise_scale, sample.seed,
        )

    logger.debug(
        "SSTot=%.6f SSReg=%.6f SSResid=%.6f R²=%.6f", ss_tot, ss_reg, ss_resid, r_squared
    )
    return breakdown
