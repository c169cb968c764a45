"""
Config loader: read a JSON config file and decode it into a GlobalConfig or ModuleConfig.

- One generic routine (_load_config) shared by both record shapes.
- Keys match field names exactly; unknown keys are ignored; missing keys keep their zero value.
- No validation beyond structural decoding; consistency checks belong to the consumers.
- Failures raise ConfigReadError (file) or ConfigParseError (content); nothing is cached or logged here.
"""

from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from dexpreopt.config.schemas import GlobalConfig, ModuleConfig

ConfigT = TypeVar("ConfigT", bound=BaseModel)


class ConfigError(Exception):
    """Base error for config loading; path is None when decoding in-memory data."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigReadError(ConfigError):
    """Config file could not be opened or read (missing, permission denied, I/O error)."""


class ConfigParseError(ConfigError):
    """Config content is not valid JSON or does not fit the target record."""

    def __init__(self, message: str, path: str | Path | None = None, errors: list | None = None) -> None:
        super().__init__(message, path)
        self.errors = errors or []


def _decode(data: bytes | str, model_cls: type[ConfigT], path: str | Path | None = None) -> ConfigT:
    """Decode JSON text into a fresh model_cls instance; raise ConfigParseError on any mismatch."""
    where = f"{path}: " if path is not None else ""
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConfigParseError(
                f"{where}config is not UTF-8 text: {e}",
                path=path,
                errors=[{"type": "unicode_decode", "loc": (), "msg": str(e)}],
            ) from e
    try:
        return model_cls.model_validate_json(data)
    except ValidationError as e:
        raise ConfigParseError(
            f"{where}invalid {model_cls.__name__}: {e}",
            path=path,
            errors=e.errors(include_url=False),
        ) from e


def _load_config(path: str | Path, model_cls: type[ConfigT]) -> ConfigT:
    """
    Read the file at path and decode it into model_cls.

    The whole file is read (and the handle closed) before decoding starts.

    Raises:
        ConfigReadError: If the file cannot be read.
        ConfigParseError: If the content is not valid JSON for model_cls.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ConfigReadError(f"cannot read config {path}: {e.strerror or e}", path=path) from e
    return _decode(data, model_cls, path=path)


def load_global_config(path: str | Path) -> GlobalConfig:
    """Load the global dex-preopt config from a JSON file."""
    return _load_config(path, GlobalConfig)


def load_module_config(path: str | Path) -> ModuleConfig:
    """Load a per-module dex-preopt config from a JSON file."""
    return _load_config(path, ModuleConfig)


def parse_global_config(data: bytes | str) -> GlobalConfig:
    """Decode a global config from JSON already in memory."""
    return _decode(data, GlobalConfig)


def parse_module_config(data: bytes | str) -> ModuleConfig:
    """Decode a module config from JSON already in memory."""
    return _decode(data, ModuleConfig)


def dump_config(config: BaseModel, indent: int | None = None) -> str:
    """
    Encode a config record as JSON, every field included.

    Output uses the same keys the loader reads, so loading it back gives an equal record.
    """
    return config.model_dump_json(indent=indent)
