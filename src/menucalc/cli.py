"""Process entry point: settings, logging, wiring and top-level fault handling."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from menucalc.config import load_settings
from menucalc.console import Console
from menucalc.core import Application
from menucalc.operations import build_registry

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int, stream: TextIO | None = None) -> None:
    """Send diagnostics to stderr so stdout carries only the console dialogue."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=stream if stream is not None else sys.stderr,
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """
    Run the calculator until the user exits.

    Args:
        argv: Command-line arguments without the program name
        stdin: Input stream (default: ``sys.stdin``)
        stdout: Output stream (default: ``sys.stdout``)
        environ: Environment mapping (default: ``os.environ``)

    Returns:
        Process exit status: 0 after a normal exit, 1 after a startup fault
    """
    console = Console(stdin, stdout)
    try:
        settings = load_settings(argv, environ)
        configure_logging(settings.logging_level)
        logger.debug("Starting with %s", settings)

        registry = build_registry(settings.messages.operation_names)
        Application(registry, console, settings.messages).run()
    except Exception as e:
        logger.exception("Calculator stopped by an unexpected fault")
        console.write_line(str(e))
        return 1
    return 0
