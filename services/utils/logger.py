# services/utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER = "doces"


def setup_logger(log_dir: Optional[Union[str, Path]] = None, level: Union[int, str] = logging.INFO):
    """
    Configure the application logger.

    Features:
    - Daily rotating log files (one file per day, 7 kept)
    - Console + file output
    - Unified log format with timestamp and level
    - Creates directories automatically

    Module loggers are children of ``doces`` (see ``get_logger``) and
    propagate here.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate handlers (Streamlit re-runs the script on every interaction)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=log_path / "doces.log",
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logger initialized")
    return logger


def get_logger(area: str) -> logging.Logger:
    """Child logger, e.g. get_logger('catalog') -> 'doces.catalog'."""
    return logging.getLogger(f"{ROOT_LOGGER}.{area}")
