"""Error types raised by the variation core."""

from typing import Optional


class VariationError(ValueError):
    """Base class for all errors raised while generating, fitting or decomposing a sample.

    Carries the configuration (noise scale and seed) that triggered the failure
    when it is known, so callers comparing several configurations can tell
    which one broke.
    """

    def __init__(self, message: str, noise_scale: Optional[float] = None, seed: Optional[int] = None):
        self.noise_scale = noise_scale
        self.seed = seed
        if noise_scale is not None or seed is not None:
            message = f"{message} (noise_scale={noise_scale}, seed={seed})"
        super().__init__(message)


class InvalidArgument(VariationError):
    """Bad generator parameters or malformed sample arrays."""


class DegenerateInput(VariationError):
    """The sample does not admit the requested statistic (zero variance, too few points)."""


class InconsistentFit(VariationError):
    """SSTot does not equal SSReg + SSResid, i.e. the fit is not the OLS fit of the sample."""
