"""Configuration module for the reference variance configurations."""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

DEFAULT_SEED = 123
DEFAULT_SIZE = 100
# relative tolerance for SSTot == SSReg + SSResid
IDENTITY_RTOL = 1e-9

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

# reference configurations: add new noise levels here
# noise_scale: standard deviation of the noise added to y = x + noise
REFERENCE_CONFIGURATIONS = {
    "low_variance": {
        "noise_scale": 0.3,
        "description": "y stays close to the line, most variation is explained",
    },
    "high_variance": {
        "noise_scale": 1.0,
        "description": "noise as large as the signal, R² drops markedly",
    },
}


def get_available_configurations() -> List[str]:
    """Return list of reference configuration names."""
    return list(REFERENCE_CONFIGURATIONS.keys())


def get_noise_scale(name: str) -> float:
    """Return the noise scale of a reference configuration."""
    if name not in REFERENCE_CONFIGURATIONS:
        raise ValueError(
            f"Unknown configuration: '{name}'. Available: {', '.join(get_available_configurations())}"
        )
    return REFERENCE_CONFIGURATIONS[name]["noise_scale"]


def get_default_noise_scales() -> List[float]:
    """Noise scales of all reference configurations, low variance first."""
    return [get_noise_scale(name) for name in get_available_configurations()]


def load_config(config_path: Optional[str] = None) -> Dict:
    """Load configuration from a YAML file (the packaged config.yaml by default)."""
    path = DEFAULT_CONFIG_PATH if config_path is None else Path(config_path)
    with open(path, "r") as f:
        return yaml.safe_load(f)


def get_run_settings(config: Dict) -> Tuple[int, int, List[float]]:
    """Extract (seed, size, noise_scales) from a loaded configuration.

    Args:
        config: Dictionary as returned by load_config

    Returns:
        Tuple of seed, sample size and the noise scales in configuration order

    Raises:
        ValueError: If a required section or key is missing.
    """
    for section in ("generation", "configurations"):
        if section not in config or not config[section]:
            raise ValueError(f"Config is missing the '{section}' section")

    gen_config = config["generation"]
    missing = {"seed", "size"} - set(gen_config)
    if missing:
        raise ValueError(f"Config 'generation' section missing keys: {sorted(missing)}")

    noise_scales = []
    for name, entry in config["configurations"].items():
        if "noise_scale" not in entry:
            raise ValueError(f"Configuration '{name}' has no noise_scale")
        noise_scales.append(float(entry["noise_scale"]))

    return int(gen_config["seed"]), int(gen_config["size"]), noise_scales


def get_identity_rtol(config: Dict) -> float:
    """Tolerance for the decomposition identity, falling back to IDENTITY_RTOL."""
    return float(config.get("decomposition", {}).get("identity_rtol", IDENTITY_RTOL))
