"""
Logging Configuration

Configures logging for the extractor.
Output goes to stderr to keep stdout clean for JSON output and reports.

BeautifulSoup reports parser trouble on saved pages (XHTML parsed as HTML,
text that looks like a filename) through the warnings module. Those are
routed into logging so they share the stderr format, and --quiet hides them.
"""

import logging
import sys

LOGGER_NAME = "wishlist_extractor"
WARNINGS_LOGGER_NAME = "py.warnings"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the extractor and for parser warnings.

    Args:
        verbose: If True, set level to DEBUG
        quiet: If True, set level to WARNING and drop parser warnings
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)

    logging.captureWarnings(True)
    warnings_logger = logging.getLogger(WARNINGS_LOGGER_NAME)
    warnings_logger.setLevel(logging.ERROR if quiet else logging.WARNING)
    warnings_logger.handlers.clear()
    warnings_logger.addHandler(handler)
    warnings_logger.propagate = False
