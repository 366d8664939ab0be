from __future__ import annotations

import logging
import sys


def configure_logging(verbose: bool = False) -> None:
    """Send cssbuilder's structlog events to stderr, filtered at WARNING (DEBUG when verbose)."""
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        force=True,
    )
