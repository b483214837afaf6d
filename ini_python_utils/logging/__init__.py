"""Module de logging."""

from ini_python_utils.logging.base import Logger
from ini_python_utils.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
