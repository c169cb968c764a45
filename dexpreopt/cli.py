"""
Command line for inspecting dex-preopt config files: global, module, version.

Log level comes from DEXPREOPT_LOG_LEVEL (default WARNING); logs go to stderr.
"""

import argparse
import logging
import os
import sys
from typing import Callable

import structlog
from pydantic import BaseModel

from dexpreopt import __version__

logger = structlog.get_logger(__name__)

EXIT_READ_ERROR = 2
EXIT_PARSE_ERROR = 3


def _configure_logging() -> None:
    """Filter structlog output by DEXPREOPT_LOG_LEVEL and send it to stderr."""
    name = os.environ.get("DEXPREOPT_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _show(path: str, kind: str, load: Callable[[str], BaseModel]) -> int:
    from dexpreopt.config.loader import ConfigParseError, ConfigReadError, dump_config

    try:
        config = load(path)
    except ConfigReadError as e:
        logger.debug("config_read_failed", path=path, kind=kind, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_READ_ERROR
    except ConfigParseError as e:
        logger.debug("config_parse_failed", path=path, kind=kind, error_count=len(e.errors))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    logger.info("config_loaded", path=path, kind=kind)
    print(dump_config(config, indent=2))
    return 0


def cmd_global(args: argparse.Namespace) -> int:
    """Load a global config and print it as JSON (zero values included)."""
    from dexpreopt.config.loader import load_global_config
    return _show(args.path, "global", load_global_config)


def cmd_module(args: argparse.Namespace) -> int:
    """Load a module config and print it as JSON (zero values included)."""
    from dexpreopt.config.loader import load_module_config
    return _show(args.path, "module", load_module_config)


def cmd_version(_: argparse.Namespace) -> int:
    """Print version."""
    print(__version__)
    return 0


def main() -> int:
    _configure_logging()
    parser = argparse.ArgumentParser(
        prog="dexpreopt-config",
        description="Dex-preopt config files: load and print global or module config, version.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_global = sub.add_parser("global", help="Load a global config JSON file and print the decoded record")
    p_global.add_argument("path", help="Path to the global config JSON file")
    p_global.set_defaults(func=cmd_global)

    p_module = sub.add_parser("module", help="Load a module config JSON file and print the decoded record")
    p_module.add_argument("path", help="Path to the module config JSON file")
    p_module.set_defaults(func=cmd_module)

    p_version = sub.add_parser("version", help="Print version")
    p_version.set_defaults(func=cmd_version)

    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
