import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None):
    """Configure root logging once; later calls only adjust the level.

    Logs go to stderr by default so stdout stays reserved for rendered URLs.
    """
    root = logging.getLogger()
    level = level.upper()
    if root.handlers:
        root.setLevel(level)
        return
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
