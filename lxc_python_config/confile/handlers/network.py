"""Handlers des directives lxc.network.*.

lxc.network.type crée une interface et en fait l'interface courante ;
les autres directives complètent cette interface. Chaque handler
valide entièrement la valeur avant de modifier l'interface.
"""

from lxc_python_config.conf.models import (Ipv4Binding, Ipv6Binding,
                                           NetworkDevice, NetworkFlag,
                                           NetworkType)
from lxc_python_config.config.settings import ReaderSettings
from lxc_python_config.confile.context import ParseContext
from lxc_python_config.confile.handlers.common import parse_integer
from lxc_python_config.errors.exceptions import (InvalidAddressError,
                                                 InvalidValueError)
from lxc_python_config.network.validators import (classful_prefix,
                                                  parse_ipv4, parse_ipv6,
                                                  validate_ifname)

IPV6_DEFAULT_PREFIX = 64


def config_network_type(key: str, value: str, context: ParseContext) -> None:
    """Déclare une nouvelle interface en tête de liste."""
    try:
        network_type = NetworkType(value)
    except ValueError as e:
        raise InvalidValueError(
            "Type de réseau invalide", key=key, value=value
        ) from e

    context.commit_device(NetworkDevice(type=network_type))


def config_network_flags(key: str, value: str, context: ParseContext) -> None:
    """Active le drapeau UP, quelle que soit la valeur."""
    device = context.require_device(key, value)
    if value != "up":
        context.logger.log_warning(
            f"Valeur '{value}' pour {key} interprétée comme 'up'"
        )
    device.flags |= NetworkFlag.UP


def _ifname(key: str, value: str, settings: ReaderSettings) -> str:
    try:
        return validate_ifname(value, settings.ifname_max)
    except ValueError as e:
        raise InvalidValueError(
            "Nom d'interface invalide", key=key, value=value
        ) from e


def config_network_link(key: str, value: str, context: ParseContext) -> None:
    device = context.require_device(key, value)
    device.link = _ifname(key, value, context.settings)


def config_network_name(key: str, value: str, context: ParseContext) -> None:
    device = context.require_device(key, value)
    device.name = _ifname(key, value, context.settings)


def config_network_hwaddr(key: str, value: str, context: ParseContext) -> None:
    device = context.require_device(key, value)
    device.hwaddr = value


def config_network_mtu(key: str, value: str, context: ParseContext) -> None:
    device = context.require_device(key, value)
    device.mtu = value


def _prefix(
    key: str, value: str, text: str, maximum: int, settings: ReaderSettings
) -> int:
    prefix = parse_integer(key, text, settings)
    # legacy_numeric laisse passer un signe : "-1" doit aussi être refusé
    if not 0 <= prefix <= maximum:
        raise InvalidValueError(
            f"Préfixe hors plage (0-{maximum})", key=key, value=value
        )
    return prefix


def config_network_ipv4(key: str, value: str, context: ParseContext) -> None:
    """Ajoute une adresse ``A.B.C.D[/prefix][ broadcast]``.

    Sans préfixe explicite, la longueur est déduite de la classe de
    l'adresse (A=8, B=16, C=24, sinon 0).
    """
    device = context.require_device(key, value)

    address_text, space, broadcast_text = value.partition(" ")
    address_text, slash, prefix_text = address_text.partition("/")

    try:
        address = parse_ipv4(address_text)
        broadcast = parse_ipv4(broadcast_text) if space else None
    except ValueError as e:
        raise InvalidAddressError(
            "Adresse IPv4 invalide", key=key, value=value
        ) from e

    if slash:
        prefix = _prefix(key, value, prefix_text, 32, context.settings)
    else:
        prefix = classful_prefix(address)

    device.ipv4.append(
        Ipv4Binding(address=address, prefix=prefix, broadcast=broadcast)
    )


def config_network_ipv6(key: str, value: str, context: ParseContext) -> None:
    """Ajoute une adresse ``addr[/prefix]`` (préfixe 64 par défaut)."""
    device = context.require_device(key, value)

    address_text, slash, prefix_text = value.partition("/")

    try:
        address = parse_ipv6(address_text)
    except ValueError as e:
        raise InvalidAddressError(
            "Adresse IPv6 invalide", key=key, value=value
        ) from e

    prefix = IPV6_DEFAULT_PREFIX
    if slash:
        prefix = _prefix(key, value, prefix_text, 128, context.settings)

    device.ipv6.append(Ipv6Binding(address=address, prefix=prefix))
