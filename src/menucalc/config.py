"""Runtime settings resolved from defaults, environment and command line."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from menucalc.exceptions import ConfigurationError
from menucalc.messages import CATALOGS, Messages

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

LANG_ENV = "MENUCALC_LANG"
LOG_LEVEL_ENV = "MENUCALC_LOG_LEVEL"

DEFAULT_LANGUAGE = "en"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Validated application settings."""

    language: str = DEFAULT_LANGUAGE
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.language not in CATALOGS:
            raise ConfigurationError("language", self.language)
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError("log_level", self.log_level)

    @property
    def messages(self) -> Messages:
        return CATALOGS[self.language]

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="menucalc",
        description="Interactive menu-driven calculator.",
    )
    parser.add_argument(
        "--lang",
        dest="language",
        choices=sorted(CATALOGS),
        help=f"Console language (default: ${LANG_ENV} or {DEFAULT_LANGUAGE})",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        help=(
            "Diagnostics level on stderr "
            f"(default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})"
        ),
    )
    return parser


def load_settings(
    argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None
) -> Settings:
    """
    Resolve settings; command-line flags override environment variables.

    Args:
        argv: Arguments without the program name (default: ``sys.argv[1:]``)
        environ: Environment mapping (default: ``os.environ``)

    Returns:
        The resolved settings

    Raises:
        ConfigurationError: If an environment value is not supported
        SystemExit: If the command line is invalid (raised by argparse)
    """
    args = build_parser().parse_args(argv)
    env = os.environ if environ is None else environ

    language = args.language or env.get(LANG_ENV, DEFAULT_LANGUAGE)
    log_level = args.log_level or env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    return Settings(
        language=language.strip().lower(),
        log_level=log_level.strip().upper(),
    )
