import logging
import os

PACKAGE_LOGGER_NAME = "polypiece"


class PackageFormatter(logging.Formatter):
    """Formatter adding the module path for WARNING and higher levels"""

    def format(self, record):
        if record.levelno >= logging.WARNING:
            self._style._fmt = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
        else:
            self._style._fmt = "%(asctime)s - %(levelname)s - %(message)s"
        return super().format(record)


def setup_logger(name=PACKAGE_LOGGER_NAME, log_file=None, level=logging.INFO):
    """Set up logger to output to console and optionally to a file"""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates if called multiple times
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = PackageFormatter()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
