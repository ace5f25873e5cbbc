"""
LXC Python Config - Lecture des fichiers de configuration de conteneurs lxc.

Modules disponibles:
- confile: Lecture ligne par ligne et dispatch des directives
  (ConfigReader, read_config, DispatchTable)
- conf: Modèle de la configuration d'un conteneur (LxcConf,
  NetworkDevice, CgroupEntry, ...)
- network: Analyse des adresses IPv4/IPv6 et des noms d'interface
- config: Réglages du lecteur (ReaderSettings, TOML/JSON)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
"""

__version__ = "1.0.0"

from lxc_python_config.logging import Logger, NullLogger, FileLogger
from lxc_python_config.config import (
    ConfigLoader,
    FileConfigLoader,
    ReaderSettings,
    ReaderSettingsLoader,
)
from lxc_python_config.errors import (
    ApplicationError,
    ConfigurationError,
    ConfigFileError,
    InvalidDirectiveError,
    UnknownDirectiveError,
    InvalidValueError,
    InvalidAddressError,
    MissingContextError,
    PathTooLongError,
    NameTooLongError,
    AllocationFailureError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from lxc_python_config.conf import (
    LxcConf,
    NetworkDevice,
    NetworkType,
    NetworkFlag,
    Ipv4Binding,
    Ipv6Binding,
    CgroupEntry,
    UtsName,
)
from lxc_python_config.confile import (
    ConfigReader,
    read_config,
    DispatchTable,
    DEFAULT_TABLE,
)

__all__ = [
    # Logging
    "Logger",
    "NullLogger",
    "FileLogger",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "ReaderSettings",
    "ReaderSettingsLoader",
    # Errors - Exceptions
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
    # Errors - Handlers
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Conf - Modèles
    "LxcConf",
    "NetworkDevice",
    "NetworkType",
    "NetworkFlag",
    "Ipv4Binding",
    "Ipv6Binding",
    "CgroupEntry",
    "UtsName",
    # Confile - Lecture
    "ConfigReader",
    "read_config",
    "DispatchTable",
    "DEFAULT_TABLE",
]
