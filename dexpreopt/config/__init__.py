"""Configuration schemas and JSON loading for dex preopting."""

from dexpreopt.config.loader import (
    ConfigError,
    ConfigParseError,
    ConfigReadError,
    dump_config,
    load_global_config,
    load_module_config,
    parse_global_config,
    parse_module_config,
)
from dexpreopt.config.schemas import GlobalConfig, ModuleConfig, Tools

__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigReadError",
    "GlobalConfig",
    "ModuleConfig",
    "Tools",
    "dump_config",
    "load_global_config",
    "load_module_config",
    "parse_global_config",
    "parse_module_config",
]
