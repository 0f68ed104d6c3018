import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Route taskcli logs to stderr so stdout carries only command output.

    Call once, before the first log call. Safe to call again (tests do):
    handlers from a previous call are replaced.
    """
    logger = logging.getLogger("taskcli")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
