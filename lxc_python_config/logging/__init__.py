"""Module de logging."""

from lxc_python_config.logging.base import Logger, NullLogger
from lxc_python_config.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "NullLogger",
    "FileLogger",
]
