"""Dex-preopt configuration: schemas and loader for global and per-module settings."""

__version__ = "0.1.0"

from dexpreopt.arch import ArchType
from dexpreopt.config import (
    ConfigError,
    ConfigParseError,
    ConfigReadError,
    GlobalConfig,
    ModuleConfig,
    Tools,
    load_global_config,
    load_module_config,
)

__all__ = [
    "__version__",
    "ArchType",
    "ConfigError",
    "ConfigParseError",
    "ConfigReadError",
    "GlobalConfig",
    "ModuleConfig",
    "Tools",
    "load_global_config",
    "load_module_config",
]
