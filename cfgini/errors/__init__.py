"""Module de gestion des erreurs."""

from cfgini.errors.base import ErrorHandler, ErrorHandlerChain
from cfgini.errors.exceptions import (ApplicationError,
                                      ConfigurationError,
                                      FileConfigurationError,
                                      IniError,
                                      FormatError,
                                      SectionMissingError,
                                      KeyMissingError,
                                      ProtectedSectionError)
from cfgini.errors.console_handler import ConsoleErrorHandler
from cfgini.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "IniError",
    "FormatError",
    "SectionMissingError",
    "KeyMissingError",
    "ProtectedSectionError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
]
