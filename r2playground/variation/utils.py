"""HDF5 export of comparison runs."""

from typing import List, Sequence

import h5py
import numpy as np

from .driver import ComparisonEntry
from .generator import Sample

# attribute value marking a seed or noise scale the sample does not know
MISSING = -1


def _group_name(index: int) -> str:
    return f"config_{index:03d}"


def dump_run_to_h5(entries: Sequence[ComparisonEntry], save_path: str) -> None:
    """Dumps the samples, fitted lines and breakdowns of a run into an HDF5 file.

    One group per configuration (config_000, config_001, ...) in run order, each
    holding x, y and y_hat datasets; the fit and the sums of squares are stored
    as group attributes. `noise_scale` is the entry's configuration while
    `sample_noise_scale` and `seed` describe the sample itself.
    """
    with h5py.File(save_path, "w") as f:
        f.attrs["num_configurations"] = len(entries)

        for i, entry in enumerate(entries):
            sample = entry.sample
            group = f.create_group(_group_name(i))
            group.create_dataset("x", data=sample.x)
            group.create_dataset("y", data=sample.y)
            group.create_dataset("y_hat", data=entry.fit.predict(sample.x))

            group.attrs["noise_scale"] = entry.noise_scale
            group.attrs["sample_noise_scale"] = MISSING if sample.noise_scale is None else sample.noise_scale
            group.attrs["seed"] = MISSING if sample.seed is None else sample.seed
            group.attrs["intercept"] = entry.fit.intercept
            group.attrs["slope"] = entry.fit.slope
            for key, val in entry.breakdown.as_dict().items():
                group.attrs[key] = val


def load_samples_from_h5(path: str) -> List[Sample]:
    """Read back the samples written by dump_run_to_h5, in run order."""
    samples = []
    with h5py.File(path, "r") as f:
        for i in range(int(f.attrs["num_configurations"])):
            group = f[_group_name(i)]
            seed = int(group.attrs["seed"])
            noise_scale = float(group.attrs["sample_noise_scale"])
            samples.append(
                Sample(
                    x=np.asarray(group["x"][:]),
                    y=np.asarray(group["y"][:]),
                    seed=None if seed == MISSING else seed,
                    noise_scale=None if noise_scale == MISSING else noise_scale,
                )
            )
    return samples
