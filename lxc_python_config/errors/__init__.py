"""Module de gestion des erreurs."""

from lxc_python_config.errors.base import ErrorHandler, ErrorHandlerChain
from lxc_python_config.errors.exceptions import (AllocationFailureError,
                                                 ApplicationError,
                                                 ConfigFileError,
                                                 ConfigurationError,
                                                 InvalidAddressError,
                                                 InvalidDirectiveError,
                                                 InvalidValueError,
                                                 MissingContextError,
                                                 NameTooLongError,
                                                 PathTooLongError,
                                                 UnknownDirectiveError)
from lxc_python_config.errors.console_handler import ConsoleErrorHandler
from lxc_python_config.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ConfigFileError",
    "InvalidDirectiveError",
    "UnknownDirectiveError",
    "InvalidValueError",
    "InvalidAddressError",
    "MissingContextError",
    "PathTooLongError",
    "NameTooLongError",
    "AllocationFailureError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
]
