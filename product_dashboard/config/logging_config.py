# product_dashboard/config/logging_config.py

"""Per-session logging for the product dashboard.

Every launch (TUI or headless listing) writes to its own file under
``logs/``, named after the launch time, e.g.
``logs/session_20260214_153045.log``. The store, the catalog client and
the presentation layers all log below the ``product_dashboard`` logger,
so one file holds the whole session including remote-call tracebacks.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from product_dashboard.config.settings import Settings

ROOT_LOGGER_NAME = "product_dashboard"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)

_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(console_level: int = logging.WARNING) -> Path:
    """Attach the session file handler and a stderr handler.

    Args:
        console_level: Threshold for the stderr handler. The file
            handler always records DEBUG and above.

    Returns:
        The :class:`~pathlib.Path` of this session's log file.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"session_{stamp}.log"

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Already configured in this process (tests, repeated launches)
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.debug("Session log opened at %s", log_file)
    return log_file
