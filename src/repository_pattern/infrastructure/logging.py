import logging
import logging.handlers
import os
from pathlib import Path

LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_FILE = LOG_DIR / "repository_pattern.log"
CONSOLE_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_DIR.mkdir(parents=True, exist_ok=True)

log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
formatter = logging.Formatter(log_format)

root_logger = logging.getLogger()
root_logger.setLevel(logging.DEBUG)

# Console shows LOG_LEVEL and above (INFO unless overridden)
console_handler = logging.StreamHandler()
console_handler.setLevel(getattr(logging, CONSOLE_LOG_LEVEL, logging.INFO))
console_handler.setFormatter(formatter)
root_logger.addHandler(console_handler)

# Rotate every 10MB, keep 5 backups
file_handler = logging.handlers.RotatingFileHandler(
    LOG_FILE, maxBytes=10*1024*1024, backupCount=5, encoding='utf-8'
)
file_handler.setLevel(logging.DEBUG)
file_handler.setFormatter(formatter)
root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Gets a configured logger instance."""
    return logging.getLogger(name)
