"""Fonctions de validation pour les donnees reseau des conteneurs.

Ce module fournit les analyseurs d'adresses IPv4/IPv6, le calcul du
prefixe par classe d'adresse et la validation des noms d'interface.
Les fonctions levent ValueError ; la traduction en erreurs de
configuration est faite par les handlers de directives.
"""

import ipaddress
import re

# Pas de zero en tete : "010.0.0.1" est refuse
_OCTET = r"(0|[1-9]\d{0,2})"
_DOTTED_QUAD_RE = re.compile(rf"^{_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET}$")


def parse_ipv4(text: str) -> ipaddress.IPv4Address:
    """Analyse une adresse IPv4 en notation pointee stricte.

    Args:
        text: Adresse sous la forme A.B.C.D.

    Returns:
        L'adresse IPv4 analysee.

    Raises:
        ValueError: Si l'adresse est invalide.
    """
    match = _DOTTED_QUAD_RE.match(text)
    if not match:
        raise ValueError(f"Adresse IPv4 invalide : {text!r}")
    for octet in match.groups():
        if not 0 <= int(octet) <= 255:
            raise ValueError(
                f"Octet hors plage (0-255) : {octet} dans {text!r}"
            )
    return ipaddress.IPv4Address(text)


def parse_ipv6(text: str) -> ipaddress.IPv6Address:
    """Analyse une adresse IPv6 sous sa forme textuelle standard.

    Les identifiants de zone (``fe80::1%eth0``) sont refuses.

    Raises:
        ValueError: Si l'adresse est invalide.
    """
    if not text or "%" in text:
        raise ValueError(f"Adresse IPv6 invalide : {text!r}")
    try:
        return ipaddress.IPv6Address(text)
    except ipaddress.AddressValueError as e:
        raise ValueError(f"Adresse IPv6 invalide : {text!r}") from e


def classful_prefix(address: ipaddress.IPv4Address) -> int:
    """Retourne la longueur de prefixe historique d'une adresse.

    Classe A (0xxx) -> 8, classe B (10xx) -> 16, classe C (110x) -> 24,
    toute autre adresse (multicast, reservee) -> 0.
    """
    first_octet = address.packed[0]
    if first_octet & 0x80 == 0:
        return 8
    if first_octet & 0xC0 == 0x80:
        return 16
    if first_octet & 0xE0 == 0xC0:
        return 24
    return 0


def validate_ifname(name: str, max_length: int) -> str:
    """Valide la longueur d'un nom d'interface.

    La longueur est mesuree en octets UTF-8 ; ``max_length`` est inclus.

    Raises:
        ValueError: Si le nom est trop long.
    """
    length = len(name.encode("utf-8"))
    if length > max_length:
        raise ValueError(
            f"Nom d'interface trop long ({length} > {max_length}) : {name!r}"
        )
    return name
