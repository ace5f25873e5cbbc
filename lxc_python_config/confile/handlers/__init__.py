"""Handlers des familles de directives et table de dispatch par défaut."""

from lxc_python_config.confile.dispatch import DispatchTable
from lxc_python_config.confile.handlers.network import (
    config_network_flags,
    config_network_hwaddr,
    config_network_ipv4,
    config_network_ipv6,
    config_network_link,
    config_network_mtu,
    config_network_name,
    config_network_type,
)
from lxc_python_config.confile.handlers.system import (
    config_cgroup,
    config_mount,
    config_pivotdir,
    config_pts,
    config_rootfs,
    config_tty,
    config_utsname,
)

# L'ordre compte : la première entrée dont le préfixe débute la clé gagne
DEFAULT_TABLE = DispatchTable([
    ("lxc.pts", config_pts),
    ("lxc.tty", config_tty),
    ("lxc.cgroup", config_cgroup),
    ("lxc.mount", config_mount),
    ("lxc.rootfs", config_rootfs),
    ("lxc.utsname", config_utsname),
    ("lxc.network.type", config_network_type),
    ("lxc.pivotdir", config_pivotdir),
    ("lxc.network.flags", config_network_flags),
    ("lxc.network.link", config_network_link),
    ("lxc.network.name", config_network_name),
    ("lxc.network.hwaddr", config_network_hwaddr),
    ("lxc.network.mtu", config_network_mtu),
    ("lxc.network.ipv4", config_network_ipv4),
    ("lxc.network.ipv6", config_network_ipv6),
])

__all__ = [
    "DEFAULT_TABLE",
    "config_pts",
    "config_tty",
    "config_cgroup",
    "config_mount",
    "config_rootfs",
    "config_pivotdir",
    "config_utsname",
    "config_network_type",
    "config_network_flags",
    "config_network_link",
    "config_network_name",
    "config_network_hwaddr",
    "config_network_mtu",
    "config_network_ipv4",
    "config_network_ipv6",
]
