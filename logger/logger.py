# logger/logger.py
"""
Log setup for collection runs - session files, daily rotation and console output.
"""
import logging
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

# All project loggers hang off the package names below
PROJECT_LOGGERS = ("extractors", "pipelines", "configurations")

FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)-20s | "
    "%(funcName)-15s:%(lineno)-4d | %(message)s"
)
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Simple colored formatter"""
    COLORS = {
        'DEBUG': '\033[36m', 'INFO': '\033[32m', 'WARNING': '\033[33m',
        'ERROR': '\033[31m', 'CRITICAL': '\033[35m', 'RESET': '\033[0m'
    }

    def format(self, record):
        record.colored_levelname = (
            f"{self.COLORS.get(record.levelname, '')}"
            f"{record.levelname:<8}"
            f"{self.COLORS['RESET']}"
        )
        return super().format(record)


def _console_handler(
    use_rich: bool, console: Optional[Console] = None
) -> logging.Handler:
    if use_rich:
        return RichHandler(
            console=console, show_time=True, show_path=False, markup=False
        )

    handler = logging.StreamHandler()
    handler.setFormatter(
        ColoredFormatter(
            '%(asctime)s | %(colored_levelname)s | %(name)-15s | %(message)s',
            datefmt='%H:%M:%S'
        )
    )
    return handler


def _attach(
    logger: logging.Logger,
    file_handler: logging.Handler,
    console_handler: logging.Handler,
    level: int,
) -> logging.Logger:
    file_handler.setFormatter(
        logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT)
    )

    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    logger.propagate = False
    return logger


def setup_daily_rotating_logger(
    name: str,
    log_file: Union[str, Path],
    level: int = logging.INFO,
    days_to_keep: int = 30,
    use_rich: bool = False,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Creates a logger that rotates at midnight.

    Rotated files are suffixed with the date, e.g. ``collection.log.2024-08-16``.
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = TimedRotatingFileHandler(
        filename=log_path,
        when='midnight',
        interval=1,
        backupCount=days_to_keep,
        encoding='utf-8',
    )
    file_handler.suffix = "%Y-%m-%d"

    return _attach(
        logging.getLogger(name),
        file_handler,
        _console_handler(use_rich, console),
        level,
    )


def setup_session_based_logger(
    name: str,
    log_dir: Union[str, Path] = "logs",
    level: int = logging.INFO,
    use_rich: bool = False,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Creates a new log file for each collection run.

    Log files will be named like:
    - match_collection_2024-08-16_14-30-25.log
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = log_dir / f"{name}_{timestamp}.log"

    logger = _attach(
        logging.getLogger(name),
        logging.FileHandler(log_file, encoding='utf-8'),
        _console_handler(use_rich, console),
        level,
    )

    logger.info(f"=== NEW SESSION STARTED: {timestamp} ===")
    logger.info(f"Log file: {log_file}")
    return logger


def setup_smart_logger(
    name: str,
    log_file: Union[str, Path],
    strategy: str = "session",
    level: int = logging.INFO,
    **kwargs
) -> logging.Logger:
    """
    Smart logger that chooses the rotation strategy.

    Args:
        name: Logger name
        log_file: Base log file path
        strategy: "daily" or "session"
        level: Logging level
        **kwargs: Additional arguments for specific handlers
    """
    if strategy == "daily":
        return setup_daily_rotating_logger(name, log_file, level, **kwargs)
    elif strategy == "session":
        return setup_session_based_logger(name, Path(log_file).parent, level, **kwargs)
    else:
        raise ValueError(f"Unknown strategy: {strategy}")


def configure_project_logging(
    name: str,
    log_dir: Union[str, Path] = "logs",
    level: Union[str, int] = logging.INFO,
    console: Optional[Console] = None,
    strategy: str = "session",
) -> logging.Logger:
    """
    Set up the run logger and route the package loggers into it.

    Extractor and pipeline modules log through ``logging.getLogger(__name__)``;
    their records are forwarded to the run logger's handlers so that a
    single file holds the whole run.

    Args:
        name: Run logger name, also the log file prefix
        log_dir: Directory for the log files
        level: Level name ("INFO") or number
        console: Rich console to share with progress output
        strategy: "session" for one file per run, "daily" for a file
            rotated at midnight

    Returns:
        The configured run logger
    """
    if isinstance(level, str):
        level_name = level.upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name}")

    run_logger = setup_smart_logger(
        name,
        Path(log_dir) / f"{name}.log",
        strategy,
        level,
        use_rich=True,
        console=console,
    )

    for package in PROJECT_LOGGERS:
        package_logger = logging.getLogger(package)
        package_logger.setLevel(level)
        package_logger.handlers = list(run_logger.handlers)
        package_logger.propagate = False

    return run_logger
