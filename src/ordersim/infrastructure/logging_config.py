"""Process-wide logging setup for the CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
    # Keep HTTP connection chatter out of INFO output.
    logging.getLogger("urllib3").setLevel(logging.WARNING)
