"""Configuration data, fluent builder and file loading for MOEA/D runs."""

from .loader import load_moead_config, read_params_file
from .moead import CONFIG_FIELDS, MOEADConfig, MOEADConfigData

__all__ = [
    "CONFIG_FIELDS",
    "MOEADConfig",
    "MOEADConfigData",
    "load_moead_config",
    "read_params_file",
]
