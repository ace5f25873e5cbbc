"""Module reseau : analyse des adresses et noms d'interface."""

from lxc_python_config.network.validators import (
    classful_prefix,
    parse_ipv4,
    parse_ipv6,
    validate_ifname,
)

__all__ = [
    "parse_ipv4",
    "parse_ipv6",
    "classful_prefix",
    "validate_ifname",
]
