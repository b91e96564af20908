"""Logging setup shared by the package and the command line."""
import logging
import sys
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_ROOT = "sudoku_puzzler"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a logger under the package root, attaching one stderr handler to the root."""
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
        root.propagate = False
    if level is not None:
        root.setLevel(level)
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
