"""Configuration schema and validation."""

from typing import Dict, Any, List
from dataclasses import dataclass, asdict, fields
import yaml


@dataclass
class KMeansConfig:
    cluster_count: int
    seed: int = 42
    max_steps: int = 100
    min_row_entries: int = 3
    init_low: float = 0.0
    init_high: float = 100.0
    reseed_dead: bool = False

    def __post_init__(self):
        errors = validate_config(asdict(self))
        if errors:
            raise ValueError("Invalid configuration: " + "; ".join(errors))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: str) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def validate_config(config: Dict[str, Any]) -> List[str]:
    """Validate configuration, return list of errors."""
    errors = []
    known = {f.name for f in fields(KMeansConfig)}
    
    for key in config:
        if key not in known:
            errors.append(f"Unknown option '{key}'")
    
    if "cluster_count" not in config:
        errors.append("Missing 'cluster_count'")
    elif not isinstance(config["cluster_count"], int) or config["cluster_count"] < 1:
        errors.append("'cluster_count' must be a positive integer")
    
    max_steps = config.get("max_steps", 100)
    if not isinstance(max_steps, int) or max_steps < 1:
        errors.append("'max_steps' must be a positive integer")
    
    min_entries = config.get("min_row_entries", 3)
    if not isinstance(min_entries, int) or min_entries < 0:
        errors.append("'min_row_entries' must be a non-negative integer")
    
    low = config.get("init_low", 0.0)
    high = config.get("init_high", 100.0)
    if not isinstance(low, (int, float)) or not isinstance(high, (int, float)):
        errors.append("'init_low' and 'init_high' must be numbers")
    elif low >= high:
        errors.append("'init_low' must be below 'init_high'")
    
    return errors


def config_from_dict(config: Dict[str, Any]) -> KMeansConfig:
    """Build a KMeansConfig, raising ValueError on invalid input."""
    errors = validate_config(config)
    if errors:
        raise ValueError("Invalid configuration: " + "; ".join(errors))
    return KMeansConfig(**config)
