"""Main module for the variation package."""

import argparse
import logging
import sys

from .config import get_available_configurations, get_identity_rtol, get_noise_scale, get_run_settings, load_config
from .driver import run
from .errors import VariationError
from .summary import generate_report
from .utils import dump_run_to_h5

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Decompose the variation of synthetic samples and compare R² across noise scales.")
    parser.add_argument("--config", type=str, default=None, help="YAML config file. Defaults to the packaged config.yaml.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed, overrides the config.")
    parser.add_argument("--size", type=int, default=None, help="Number of paired observations, overrides the config.")
    parser.add_argument("--noise_scales", type=float, nargs="+", default=None, help="Noise scales to compare, in order. Overrides the config.")
    parser.add_argument("--configurations", type=str, nargs="+", default=None, choices=get_available_configurations(), help="Reference configurations to compare instead of --noise_scales.")
    parser.add_argument("--max_workers", type=int, default=None, help="Evaluate configurations in a thread pool of this size.")
    parser.add_argument("--save_path", type=str, default=None, help="Dump the run to this HDF5 file.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.noise_scales is not None and args.configurations is not None:
        parser.error("--noise_scales and --configurations are mutually exclusive")

    config = load_config(args.config)
    seed, size, noise_scales = get_run_settings(config)

    if args.seed is not None:
        seed = args.seed
    if args.size is not None:
        size = args.size
    if args.configurations is not None:
        noise_scales = [get_noise_scale(name) for name in args.configurations]
    elif args.noise_scales is not None:
        noise_scales = args.noise_scales

    logger.debug("Run settings: seed=%s size=%s noise_scales=%s", seed, size, noise_scales)

    try:
        entries = run(seed, size, noise_scales, max_workers=args.max_workers, rtol=get_identity_rtol(config))
    except VariationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(generate_report(entries, seed=seed))

    if args.save_path:
        dump_run_to_h5(entries, args.save_path)
        print(f"\n[OK] Run saved to {args.save_path}")

    return 0
