"""Synthetic paired samples y = x + noise."""

import logging
import numbers
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .errors import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Sample:
    """Paired observations (x, y).

    Both arrays are converted to 1-D float arrays and made read-only, so a
    sample cannot change once built. `seed` and `noise_scale` record the
    configuration that generated it and are None for hand-built samples.
    """

    x: np.ndarray
    y: np.ndarray
    seed: Optional[int] = None
    noise_scale: Optional[float] = None

    def __post_init__(self):
        x = np.array(self.x, dtype=float)
        y = np.array(self.y, dtype=float)

        if x.ndim != 1 or y.ndim != 1:
            raise InvalidArgument(
                f"Sample arrays must be 1-D, got shapes {x.shape} and {y.shape}",
                self.noise_scale, self.seed,
            )
        if len(x) != len(y):
            raise InvalidArgument(
                f"Sample arrays must have equal length, got {len(x)} and {len(y)}",
                self.noise_scale, self.seed,
            )
        if not (np.isfinite(x).all() and np.isfinite(y).all()):
            raise InvalidArgument("Sample arrays contain nan or inf", self.noise_scale, self.seed)

        x.setflags(write=False)
        y.setflags(write=False)
        # frozen dataclass: bypass __setattr__ to store the converted arrays
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __len__(self):
        return len(self.x)

    def __eq__(self, other):
        if not isinstance(other, Sample):
            return NotImplemented
        return np.array_equal(self.x, other.x) and np.array_equal(self.y, other.y)


def _validate_generation_args(seed, size, noise_scale) -> None:
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise InvalidArgument(f"size must be an integer, got {size!r}", noise_scale, seed)
    if size <= 0:
        raise InvalidArgument(f"size must be positive, got {size}", noise_scale, seed)
    if not isinstance(noise_scale, numbers.Real) or not np.isfinite(noise_scale):
        raise InvalidArgument(f"noise_scale must be a finite number, got {noise_scale!r}", noise_scale, seed)
    if noise_scale < 0:
        raise InvalidArgument(f"noise_scale must be non-negative, got {noise_scale}", noise_scale, seed)


def generate(seed: int, size: int, noise_scale: float, rng: Optional[np.random.Generator] = None) -> Sample:
    """Generate a sample with an exact unit-slope relationship corrupted by Gaussian noise.

    x is drawn from a standard normal, then the noise e is drawn from a normal
    with standard deviation `noise_scale`, and y = x + e. The draws come from
    a generator seeded with `seed`, never from the global NumPy state, so the
    same arguments always return the same sample.

    Args:
        seed: Seed for numpy.random.default_rng
        size: Number of paired observations (> 0)
        noise_scale: Standard deviation of the noise term (>= 0)
        rng: Explicit generator to draw from instead of a fresh one built from `seed`

    Returns:
        Sample(x, y) tagged with noise_scale and with seed, or with seed=None
        when the draws came from an explicit `rng`

    Raises:
        InvalidArgument: If size <= 0 or noise_scale < 0.
    """
    _validate_generation_args(seed, size, noise_scale)

    sample_seed = seed
    if rng is None:
        rng = np.random.default_rng(seed)
    else:
        # the seed did not produce these draws
        sample_seed = None

    x = rng.standard_normal(size)
    noise = rng.normal(loc=0.0, scale=noise_scale, size=size)
    y = x + noise

    logger.debug("Generated sample of size %d (seed=%s, noise_scale=%s)", size, seed, noise_scale)
    return Sample(x=x, y=y, seed=sample_seed, noise_scale=float(noise_scale))
