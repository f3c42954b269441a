# log.py

import logging
import os
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_FILENAME = "snapcanvas.log"

_LOGGER_CONFIGURED = False


def setup_logging(level: Union[int, str] = logging.INFO,
                  log_dir: Optional[Union[str, os.PathLike]] = None) -> None:
    """
    Configures console logging and, when `log_dir` is given, a file handler.
    Calling it again is a no-op.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)
    root.addHandler(console)

    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(d / LOG_FILENAME, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            root.addHandler(fh)
        except OSError as e:
            # Console logging still works without the file
            logging.getLogger(__name__).warning("Could not open log file in %s: %s", log_dir, e)

    _LOGGER_CONFIGURED = True
