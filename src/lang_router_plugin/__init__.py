"""
Lang Router Plugin - Adds localized routing (vue-lang-router) to vue-cli projects.
"""

import logging
import sys

from .main import main as run_main

logger = logging.getLogger(__name__)


def main() -> None:
    """Console script entry point."""
    try:
        sys.exit(run_main())
    except KeyboardInterrupt:
        logger.info("Aborted by user")
        sys.exit(130)


__all__ = ["main"]
