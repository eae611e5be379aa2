import functools
import logging
import sys

from rich.console import Console
from rich.markup import escape

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

logger = logging.getLogger("npsearch")
err_console = Console(stderr=True)


class NpsearchError(Exception):
    """Base for every error that ends a search session."""

    message = "Something went wrong."
    exit_code = 1

    def __init__(self, message=None):
        super().__init__(message or self.message)


class EmptyQueryError(NpsearchError):
    message = "You need to pass search terms!"


class EmptyResultsError(NpsearchError):
    message = "No results found!"
    # zero matches is a normal outcome, not a failure
    exit_code = 0


class NetworkError(NpsearchError):
    message = "Search request failed."


class InstallError(NpsearchError):
    message = (
        "Something went wrong with the install. "
        "I'm afraid you're on your own for this one."
    )


def handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (SystemExit, KeyboardInterrupt):
            raise
        except NpsearchError as e:
            logger.debug("%s ▶ %r", func.__name__, e)
            style = "yellow" if e.exit_code == 0 else "bold red"
            err_console.print(f"[{style}]{escape(str(e))}[/{style}]", highlight=False)
            sys.exit(e.exit_code)
        except Exception as e:
            logger.error(f"{func.__name__} ▶ {e}")
            sys.exit(1)

    return wrapper
