"""Logging setup.

Levels:
- INFO: business events (user/library/album created, photo uploaded or deleted)
- WARNING: client failures worth noticing (bad password, rejected token)
- DEBUG: actor resolution details

Passwords, hashes and tokens are never logged.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the photolib logger tree to write to stdout."""
    root = logging.getLogger("photolib")
    root.setLevel(level)

    if not any(getattr(h, "_photolib", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._photolib = True
        root.addHandler(handler)
