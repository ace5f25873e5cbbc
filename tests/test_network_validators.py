"""Tests pour les validateurs reseau."""

import ipaddress

import pytest

from lxc_python_config.network.validators import (
    classful_prefix,
    parse_ipv4,
    parse_ipv6,
    validate_ifname,
)


class TestParseIpv4:
    """Tests pour parse_ipv4."""

    def test_ip_valide(self) -> None:
        """Adresse standard analysee."""
        assert parse_ipv4("192.168.1.1") == ipaddress.IPv4Address("192.168.1.1")

    def test_ip_quatre_octets(self) -> None:
        """L'adresse analysee occupe 4 octets."""
        assert parse_ipv4("10.0.0.5").packed == b"\x0a\x00\x00\x05"

    def test_ip_octet_hors_plage(self) -> None:
        """Octet superieur a 255 leve ValueError."""
        with pytest.raises(ValueError):
            parse_ipv4("192.168.1.256")

    def test_ip_trois_octets(self) -> None:
        """Adresse incomplete leve ValueError."""
        with pytest.raises(ValueError):
            parse_ipv4("10.0.0")

    def test_ip_zero_en_tete(self) -> None:
        """Zero en tete d'octet leve ValueError."""
        with pytest.raises(ValueError):
            parse_ipv4("010.0.0.1")

    def test_ip_vide(self) -> None:
        """Chaine vide leve ValueError."""
        with pytest.raises(ValueError):
            parse_ipv4("")


class TestParseIpv6:
    """Tests pour parse_ipv6."""

    def test_ip_compressee(self) -> None:
        """Forme compressee acceptee."""
        assert parse_ipv6("fe80::1") == ipaddress.IPv6Address("fe80::1")

    def test_ip_seize_octets(self) -> None:
        """L'adresse analysee occupe 16 octets."""
        assert len(parse_ipv6("2001:db8::1").packed) == 16

    def test_ip_invalide(self) -> None:
        """Groupes en trop levent ValueError."""
        with pytest.raises(ValueError):
            parse_ipv6("1:2:3:4:5:6:7:8:9")

    def test_zone_refusee(self) -> None:
        """Identifiant de zone leve ValueError."""
        with pytest.raises(ValueError):
            parse_ipv6("fe80::1%eth0")

    def test_ip_vide(self) -> None:
        """Chaine vide leve ValueError."""
        with pytest.raises(ValueError):
            parse_ipv6("")


class TestClassfulPrefix:
    """Tests pour classful_prefix."""

    @pytest.mark.parametrize(
        ("address", "prefix"),
        [
            ("10.0.0.5", 8),
            ("127.0.0.1", 8),
            ("128.0.0.1", 16),
            ("172.16.0.5", 16),
            ("191.255.0.1", 16),
            ("192.168.0.5", 24),
            ("223.1.1.1", 24),
            ("224.0.0.1", 0),
            ("240.0.0.1", 0),
        ],
    )
    def test_classes(self, address: str, prefix: int) -> None:
        """Prefixe deduit de la classe historique."""
        assert classful_prefix(ipaddress.IPv4Address(address)) == prefix


class TestValidateIfname:
    """Tests pour validate_ifname."""

    def test_nom_a_la_limite(self) -> None:
        """Un nom de longueur egale a la limite est accepte."""
        assert validate_ifname("a" * 16, 16) == "a" * 16

    def test_nom_trop_long(self) -> None:
        """Un nom depassant la limite leve ValueError."""
        with pytest.raises(ValueError):
            validate_ifname("a" * 17, 16)
