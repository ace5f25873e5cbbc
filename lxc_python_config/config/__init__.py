"""Module de réglages."""

from lxc_python_config.config.loader import (
    ConfigFileLoader,
    ConfigLoader,
    FileConfigLoader,
)
from lxc_python_config.config.settings import (
    IFNAMSIZ,
    MAXPATHLEN,
    UTSNAME_NODENAME_SIZE,
    ReaderSettings,
    ReaderSettingsLoader,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "ConfigFileLoader",
    "ReaderSettings",
    "ReaderSettingsLoader",
    "IFNAMSIZ",
    "MAXPATHLEN",
    "UTSNAME_NODENAME_SIZE",
]
