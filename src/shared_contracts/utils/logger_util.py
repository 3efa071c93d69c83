import logging
import os
from pathlib import Path
from typing import Optional, Union

from shared_contracts.config import ENV_LOG_DIR, Settings, load_settings


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Get a named logger with standard formatting.

    Level and log directory default to the values in ``load_settings()``.
    File output is only enabled when ``SHARED_CONTRACTS_LOG_DIR`` is set.

    Example:
        logger = get_logger(__name__)
        logger.info("This is an info message.")

    Returns:
        logging.Logger: Configured logger instance.
    """
    settings_error = None
    try:
        settings = load_settings()
    except ValueError as exc:
        # invalid level: keep the default level, honour the log directory
        settings, settings_error = Settings(log_dir=os.getenv(ENV_LOG_DIR) or None), exc
    if level is None:
        level = settings.log_level
    logger = logging.getLogger(name)

    # avoid adding duplicate handlers if called repeatedly (common in tests)
    if logger.handlers:
        logger.setLevel(level)
        return logger

    logs_dir = Path(settings.log_dir) if settings.log_dir else None
    if logs_dir is not None:
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            # unwritable log directory: stream only
            logs_dir = None

    formatter = logging.Formatter(
        '%(asctime)s     || %(name)s \n%(levelname)s   || %(message)s \n',
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    if logs_dir is not None:
        filehandler = logging.FileHandler(str(logs_dir / f"{name}.log"), encoding="utf-8")
        filehandler.setFormatter(formatter)
        logger.addHandler(filehandler)

    logger.setLevel(level)
    # stop passing records to the root logger (avoid duplicated messages)
    logger.propagate = False

    if settings_error is not None:
        logger.warning("%s; falling back to %s", settings_error, settings.log_level)
    logger.debug("'%s' initialized with level %s", name, logging.getLevelName(logger.level))
    return logger
