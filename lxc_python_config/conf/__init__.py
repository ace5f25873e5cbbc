"""Module conf : modele de la configuration d'un conteneur."""

from lxc_python_config.conf.models import (
    CgroupEntry,
    Ipv4Binding,
    Ipv6Binding,
    LxcConf,
    NetworkDevice,
    NetworkFlag,
    NetworkType,
    UtsName,
)

__all__ = [
    "LxcConf",
    "NetworkDevice",
    "NetworkType",
    "NetworkFlag",
    "Ipv4Binding",
    "Ipv6Binding",
    "CgroupEntry",
    "UtsName",
]
