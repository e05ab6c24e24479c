"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from tasktracker_cli.exceptions import TaskTrackerError
from tasktracker_cli.utils.exit_codes import ERROR_GENERAL, SUCCESS
from tasktracker_cli.utils.logger import RENDERED, get_logger
from tasktracker_cli.utils.ui.formatters import format_error


def command_wrapper(func: Callable) -> Callable:
    """Wrap a command with logging and error-to-exit-code mapping.

    Task Tracker errors are rendered and mapped to their own exit code;
    anything else is reported as an unexpected failure.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except TaskTrackerError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s",
                cmd,
                elapsed,
                str(e),
                extra=RENDERED,
            )
            format_error(str(e))
            if e.exit_code == SUCCESS:
                return None
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
                extra=RENDERED,
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
