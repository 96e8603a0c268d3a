"""Logging setup for the validator CLI: progress on stderr, reports on stdout."""

import logging
import sys


def setup_logging(verbose: bool = False):
    """Send log records to stderr so text and JSON reports on stdout stay parseable."""
    level = logging.INFO if verbose else logging.ERROR
    log_format = "%(name)s: %(message)s" if verbose else "%(message)s"
    logging.basicConfig(level=level, format=log_format, stream=sys.stderr, force=True)
