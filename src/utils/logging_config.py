import logging
import sys
from pathlib import Path

import structlog

from src.config.config import Config


class CustomFormatter(logging.Formatter):
    """Custom formatter that implements the required format: [yyyy-mm-dd hh:mm:ss] [log_type] [class_name]: {message}"""

    def format(self, record):
        # Extract class name from the logger name
        class_name = record.name.split('.')[-1] if '.' in record.name else record.name

        # Format timestamp as yyyy-mm-dd hh:mm:ss
        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        formatted_message = f"[{timestamp}] [{record.levelname}] [{class_name}]: {record.getMessage()}"

        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def ensure_logs_directory() -> Path:
    """Ensure the logs directory exists."""
    logs_dir = Path("logs")
    logs_dir.mkdir(exist_ok=True)
    return logs_dir


def get_log_file_path(settings: Config) -> Path:
    """Get the log file path based on environment."""
    logs_dir = ensure_logs_directory()
    return logs_dir / f"weather_proxy_{settings.environment}.log"


def quiet_library_loggers():
    """
    Raise HTTP client loggers to WARNING.

    httpx logs every request URL at INFO, and the upstream URL carries the API key.
    """
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


def get_event_renderer(settings: Config):
    """Pick the structlog renderer for the configured log format."""
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True)


def setup_logging(settings: Config):
    """
    Configure logging for the application.

    structlog events are rendered to a single message and handed to the
    standard library, which writes them to stdout (and optionally a log file)
    with the format:
    [yyyy-mm-dd hh:mm:ss] [log_type] [class_name]: {message}
    """
    level = getattr(logging, settings.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = CustomFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = None
    if settings.log_to_file:
        log_file_path = get_log_file_path(settings)
        file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    quiet_library_loggers()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            get_event_renderer(settings),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(__name__)
    logger.info(
        "Logging configured",
        level=settings.log_level,
        log_format=settings.log_format,
        log_file=str(log_file_path) if log_file_path else None,
    )
