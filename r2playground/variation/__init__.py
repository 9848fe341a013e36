"""Variation decomposition and R² for synthetic one-predictor samples."""

from .config import (
    get_available_configurations,
    get_default_noise_scales,
    get_noise_scale,
    get_run_settings,
    load_config,
)
from .decomposition import VariationBreakdown, decompose
from .driver import ComparisonEntry, comparison_table, run
from .errors import DegenerateInput, InconsistentFit, InvalidArgument, VariationError
from .fitter import FitResult, fit
from .generator import Sample, generate
from .summary import describe_sample, generate_report
from .utils import dump_run_to_h5, load_samples_from_h5

__version__ = "0.0.1"
__all__ = [
    "get_available_configurations",
    "get_default_noise_scales",
    "get_noise_scale",
    "get_run_settings",
    "load_config",
    "VariationBreakdown",
    "decompose",
    "ComparisonEntry",
    "comparison_table",
    "run",
    "DegenerateInput",
    "InconsistentFit",
    "InvalidArgument",
    "VariationError",
    "FitResult",
    "fit",
    "Sample",
    "generate",
    "describe_sample",
    "generate_report",
    "dump_run_to_h5",
    "load_samples_from_h5",
]
