"""Module de logging."""

from cfgini.logging.base import Logger, NullLogger
from cfgini.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "NullLogger",
    "FileLogger",
]
