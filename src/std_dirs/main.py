"""Command line entry point for std-dirs.

Usage: std-dirs APP_NAME [show|create|remove] [--platform TAG] [--log-level LEVEL]

Option precedence: CLI flag > env var (STD_DIRS_PLATFORM, STD_DIRS_LOG_LEVEL) > default.
"""

import os
import sys
from dataclasses import dataclass

from loguru import logger

from .config import Config
from .errors import DirectoryError
from .platforms import current_platform

ACTIONS = ("show", "create", "remove")
FLAGS = ("--platform", "--log-level")
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
USAGE = "usage: std-dirs APP_NAME [show|create|remove] [--platform TAG] [--log-level LEVEL]"


class UsageError(ValueError):
    """Raised when the command line cannot be understood."""


@dataclass
class Options:
    app_name: str
    action: str = "show"
    platform: str = ""
    log_level: str = "WARNING"


def _split_args(args: list[str]) -> tuple[list[str], dict[str, str]]:
    """Separate positional arguments from --flag VALUE and --flag=VALUE options.

    A flag given last with no value is ignored, like an unset flag.
    """
    positional: list[str] = []
    flags: dict[str, str] = {}
    i = 0
    while i < len(args):
        arg = args[i]
        if arg.startswith("-") and arg != "-":
            name, eq, value = arg.partition("=")
            if name not in FLAGS:
                raise UsageError(f"unknown option {name!r}")
            if eq:
                flags[name] = value
            elif i + 1 < len(args):
                i += 1
                flags[name] = args[i]
        else:
            positional.append(arg)
        i += 1
    return positional, flags


def load_options(args: list[str] | None = None) -> Options:
    """Parse CLI arguments, falling back to environment variables and defaults.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Options with platform and log level filled in

    Raises:
        UsageError: If the app name is missing, the action or an option is unknown
    """
    if args is None:
        args = sys.argv[1:]

    positional, flags = _split_args(args)

    if not positional:
        raise UsageError("missing APP_NAME")
    if len(positional) > 2:
        raise UsageError(f"unexpected arguments: {' '.join(positional[2:])}")
    action = positional[1] if len(positional) == 2 else "show"
    if action not in ACTIONS:
        raise UsageError(f"unknown action {action!r}, expected one of {', '.join(ACTIONS)}")

    platform = flags.get("--platform") or os.environ.get("STD_DIRS_PLATFORM") or current_platform()
    log_level = flags.get("--log-level") or os.environ.get("STD_DIRS_LOG_LEVEL") or "WARNING"
    return Options(app_name=positional[0], action=action, platform=platform, log_level=log_level.upper())


def setup_logging(level: str) -> None:
    """Replace loguru's default sink with a stderr sink at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def main(args: list[str] | None = None) -> int:
    """Main entry point for std-dirs. Returns the process exit code."""
    try:
        opts = load_options(args)
        setup_logging(opts.log_level)
    except ValueError as e:
        # UsageError, or a log level loguru does not know
        print(f"std-dirs: {e}\n{USAGE}", file=sys.stderr)
        return 2

    cfg = Config(opts.app_name, platform=opts.platform)

    try:
        if opts.action == "create":
            cfg.create_all()
            logger.info(f"Created directories for {opts.app_name}")
        elif opts.action == "remove":
            cfg.remove_all()
            logger.info(f"Removed directories for {opts.app_name}")
    except DirectoryError as e:
        logger.error(f"{e} ({e.__cause__})")
        return 1

    for kind, directory in cfg.directories():
        print(f"{kind}: {directory}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
