"""Modeles de donnees de la configuration d'un conteneur.

Ce module definit l'agregat LxcConf rempli ligne par ligne par le
lecteur, ainsi que les enregistrements qu'il contient : interfaces
reseau, liaisons IPv4/IPv6, entrees cgroup et nom d'hote.

Les enregistrements feuilles sont immuables ; seuls l'agregat et
les interfaces reseau sont modifies pendant la lecture.
"""

from dataclasses import dataclass, field
from enum import IntFlag, StrEnum
from ipaddress import IPv4Address, IPv6Address
from typing import Any, Optional


class NetworkType(StrEnum):
    """Types d'interface reseau reconnus par lxc.network.type."""

    VETH = "veth"
    MACVLAN = "macvlan"
    PHYS = "phys"
    EMPTY = "empty"


class NetworkFlag(IntFlag):
    """Drapeaux d'une interface (valeurs de <net/if.h>)."""

    NONE = 0
    UP = 0x1


@dataclass(frozen=True)
class Ipv4Binding:
    """Adresse IPv4 attachee a une interface.

    Attributes:
        address: Adresse de l'interface.
        prefix: Longueur de prefixe (0-32).
        broadcast: Adresse de broadcast optionnelle.
    """

    address: IPv4Address
    prefix: int
    broadcast: Optional[IPv4Address] = None

    def __post_init__(self) -> None:
        if not 0 <= self.prefix <= 32:
            raise ValueError(f"Prefixe IPv4 hors plage (0-32) : {self.prefix}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": str(self.address),
            "prefix": self.prefix,
            "broadcast": str(self.broadcast) if self.broadcast else None,
        }


@dataclass(frozen=True)
class Ipv6Binding:
    """Adresse IPv6 attachee a une interface.

    Attributes:
        address: Adresse de l'interface.
        prefix: Longueur de prefixe (0-128, 64 par defaut).
    """

    address: IPv6Address
    prefix: int = 64

    def __post_init__(self) -> None:
        if not 0 <= self.prefix <= 128:
            raise ValueError(
                f"Prefixe IPv6 hors plage (0-128) : {self.prefix}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {"address": str(self.address), "prefix": self.prefix}


@dataclass
class NetworkDevice:
    """Interface reseau declaree par lxc.network.type.

    Attributes:
        type: Type d'interface.
        flags: Drapeaux (UP si lxc.network.flags est present).
        link: Interface hote associee.
        name: Nom de l'interface dans le conteneur.
        hwaddr: Adresse MAC, conservee telle quelle.
        mtu: MTU, conservee sous forme de chaine.
        ipv4: Liaisons IPv4 dans l'ordre de declaration.
        ipv6: Liaisons IPv6 dans l'ordre de declaration.
    """

    type: NetworkType
    flags: NetworkFlag = NetworkFlag.NONE
    link: Optional[str] = None
    name: Optional[str] = None
    hwaddr: Optional[str] = None
    mtu: Optional[str] = None
    ipv4: list[Ipv4Binding] = field(default_factory=list)
    ipv6: list[Ipv6Binding] = field(default_factory=list)

    @property
    def is_up(self) -> bool:
        return bool(self.flags & NetworkFlag.UP)

    def to_dict(self) -> dict[str, Any]:
        """Serialise l'interface en dictionnaire compatible JSON.

        Returns:
            Dictionnaire representant l'interface.
        """
        return {
            "type": str(self.type),
            "flags": [flag.name.lower() for flag in NetworkFlag
                      if flag and flag in self.flags],
            "link": self.link,
            "name": self.name,
            "hwaddr": self.hwaddr,
            "mtu": self.mtu,
            "ipv4": [binding.to_dict() for binding in self.ipv4],
            "ipv6": [binding.to_dict() for binding in self.ipv6],
        }


@dataclass(frozen=True)
class CgroupEntry:
    """Reglage d'un controleur cgroup (lxc.cgroup.<subsystem>)."""

    subsystem: str
    value: str


@dataclass(frozen=True)
class UtsName:
    """Enregistrement du nom d'hote du conteneur."""

    nodename: str


@dataclass
class LxcConf:
    """Configuration complete d'un conteneur.

    Attributes:
        network: Interfaces reseau, la plus recente en tete.
        cgroup: Entrees cgroup dans l'ordre de declaration, doublons
            conserves.
        mount_list: Lignes fstab declarees par lxc.mount.entry.
        fstab: Chemin d'un fichier fstab externe (lxc.mount).
        rootfs: Chemin du systeme de fichiers racine.
        pivotdir: Repertoire de pivot_root.
        utsname: Nom d'hote du conteneur.
        pts: Nombre de pseudo-terminaux (0 = pas de devpts prive).
        tty: Nombre de consoles tty.
    """

    network: list[NetworkDevice] = field(default_factory=list)
    cgroup: list[CgroupEntry] = field(default_factory=list)
    mount_list: list[str] = field(default_factory=list)
    fstab: Optional[str] = None
    rootfs: Optional[str] = None
    pivotdir: Optional[str] = None
    utsname: Optional[UtsName] = None
    pts: int = 0
    tty: int = 0

    def add_network(self, device: NetworkDevice) -> None:
        """Insere une interface en tete de liste."""
        self.network.insert(0, device)

    def to_dict(self) -> dict[str, Any]:
        """Serialise la configuration en dictionnaire compatible JSON.

        Returns:
            Dictionnaire representant la configuration.
        """
        return {
            "network": [device.to_dict() for device in self.network],
            "cgroup": [
                {"subsystem": entry.subsystem, "value": entry.value}
                for entry in self.cgroup
            ],
            "mount_list": list(self.mount_list),
            "fstab": self.fstab,
            "rootfs": self.rootfs,
            "pivotdir": self.pivotdir,
            "utsname": self.utsname.nodename if self.utsname else None,
            "pts": self.pts,
            "tty": self.tty,
        }
