"""
Reference: N/A (setup).
Purpose: Root logging config for the map server and tools.
Dependencies: logging.
Ext Hooks: Add JSON formatter.
"""

import logging
import os
from datetime import datetime


def configure_logging(level=logging.INFO, *, log_to_file: bool = False) -> None:
    """
    Configure root logging with a readable format and optional file sink.
    level may be an int or a name such as "DEBUG".
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    datefmt = "%H:%M:%S"
    logging.basicConfig(level=level, format=fmt, datefmt=datefmt)

    # Tone down chatty libraries
    for noisy in ("werkzeug", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    if log_to_file:
        os.makedirs("logs", exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d-%H%M%S")
        fh = logging.FileHandler(f"logs/hexpath-{ts}.log", encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(fmt, datefmt))
        logging.getLogger().addHandler(fh)
