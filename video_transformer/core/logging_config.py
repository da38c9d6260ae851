"""
Logging configuration for the Video Transformer.

Console output is colored by level; the optional log file gets every record
in a detailed, uncolored format and rotates by size. Library loggers that are
chatty under uvicorn are quieted unless DEBUG is requested.
"""

import logging
import logging.handlers
import sys
import time
from pathlib import Path
from typing import Dict, Optional, Tuple

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'

# logger name -> (level when debugging, level otherwise)
COMPONENT_LEVELS: Dict[str, Tuple[int, int]] = {
    'video_transformer.video': (logging.DEBUG, logging.INFO),
    'video_transformer.api': (logging.DEBUG, logging.INFO),
    'performance': (logging.DEBUG, logging.INFO),
    'uvicorn': (logging.INFO, logging.WARNING),
    'uvicorn.access': (logging.INFO, logging.WARNING),
    'fastapi': (logging.INFO, logging.WARNING),
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that wraps the level name in ANSI colors"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        # Handlers share the record; the file handler must see the plain name
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


class VideoTransformerLogger:
    """Installs handlers on the root logger and tunes component levels"""

    def __init__(self, log_level: str = "INFO", log_file: Optional[str] = None,
                 enable_console: bool = True, max_bytes: int = 10 * 1024 * 1024, backup_count: int = 5):
        self.log_level = log_level.upper()
        self.level = getattr(logging, self.log_level)
        self.log_file = log_file
        self.enable_console = enable_console
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self._configure_root()
        self._configure_components()

        logging.getLogger(__name__).info(f"Logging initialized - Level: {self.log_level}, File: {self.log_file}")

    def _configure_root(self) -> None:
        root_logger = logging.getLogger()
        root_logger.setLevel(self.level)

        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        if self.enable_console:
            root_logger.addHandler(self._console_handler())

        if self.log_file:
            file_handler = self._file_handler()
            if file_handler:
                root_logger.addHandler(file_handler)

    def _console_handler(self) -> logging.Handler:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(self.level)
        handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT))
        return handler

    def _file_handler(self) -> Optional[logging.Handler]:
        """Rotating file handler, or None when the file cannot be opened"""
        try:
            Path(self.log_file).parent.mkdir(parents=True, exist_ok=True)
            handler = logging.handlers.RotatingFileHandler(
                self.log_file, maxBytes=self.max_bytes, backupCount=self.backup_count
            )
        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)
            return None

        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(FILE_FORMAT))
        return handler

    def _configure_components(self) -> None:
        debugging = self.level <= logging.DEBUG
        for name, (debug_level, normal_level) in COMPONENT_LEVELS.items():
            logging.getLogger(name).setLevel(debug_level if debugging else normal_level)

    @staticmethod
    def install_exception_hook() -> None:
        """Route uncaught exceptions through logging instead of bare stderr"""

        def handle_exception(exc_type, exc_value, exc_traceback):
            if issubclass(exc_type, KeyboardInterrupt):
                sys.__excepthook__(exc_type, exc_value, exc_traceback)
                return
            logging.getLogger("uncaught_exception").critical(
                "Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback)
            )

        sys.excepthook = handle_exception


class PerformanceLogger:
    """Times external tool invocations under the performance.<component> logger"""

    def __init__(self, name: str):
        self.logger = logging.getLogger(f"performance.{name}")

    def start_timer(self, operation: str) -> float:
        self.logger.debug(f"Started: {operation}")
        return time.monotonic()

    def end_timer(self, operation: str, started: float) -> float:
        duration = time.monotonic() - started
        self.logger.info(f"Completed: {operation} in {duration:.3f}s")
        return duration


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> VideoTransformerLogger:
    """Configure logging for the whole process"""
    logger_setup = VideoTransformerLogger(log_level=log_level, log_file=log_file)
    VideoTransformerLogger.install_exception_hook()
    return logger_setup


def get_performance_logger(component_name: str) -> PerformanceLogger:
    return PerformanceLogger(component_name)
