"""Run configuration."""

from .schema import KMeansConfig, load_config, validate_config, config_from_dict
