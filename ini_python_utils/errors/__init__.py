"""Module de gestion des erreurs."""

from ini_python_utils.errors.base import ErrorHandler, ErrorHandlerChain
from ini_python_utils.errors.exceptions import (ApplicationError,
                                                ConfigurationError,
                                                IniError,
                                                IniLookupError,
                                                MissingSectionError,
                                                MissingKeyError,
                                                IniNameError,
                                                IniFormatError)
from ini_python_utils.errors.console_handler import ConsoleErrorHandler
from ini_python_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "IniError",
    "IniLookupError",
    "MissingSectionError",
    "MissingKeyError",
    "IniNameError",
    "IniFormatError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
]
