"""Handlers des directives système : cgroup, montages, racine, nom d'hôte
et terminaux.
"""

from lxc_python_config.conf.models import CgroupEntry, UtsName
from lxc_python_config.confile.context import ParseContext
from lxc_python_config.confile.handlers.common import (check_path,
                                                       parse_integer)
from lxc_python_config.errors.exceptions import (InvalidDirectiveError,
                                                 NameTooLongError)

CGROUP_TOKEN = "lxc.cgroup."
MOUNT_ENTRY_TOKEN = "lxc.mount.entry"


def config_pts(key: str, value: str, context: ParseContext) -> None:
    context.conf.pts = parse_integer(key, value, context.settings)


def config_tty(key: str, value: str, context: ParseContext) -> None:
    context.conf.tty = parse_integer(key, value, context.settings)


def config_cgroup(key: str, value: str, context: ParseContext) -> None:
    """Ajoute une entrée ``lxc.cgroup.<subsystem> = <valeur>``.

    Le sous-système est tout ce qui suit 'lxc.cgroup.' dans la clé.
    Les entrées d'un même sous-système s'accumulent.
    """
    index = key.find(CGROUP_TOKEN)
    subsystem = key[index + len(CGROUP_TOKEN):] if index >= 0 else ""
    if not subsystem:
        raise InvalidDirectiveError(
            "Sous-système cgroup manquant", key=key, value=value
        )

    context.conf.cgroup.append(CgroupEntry(subsystem=subsystem, value=value))


def config_mount(key: str, value: str, context: ParseContext) -> None:
    """Gère lxc.mount.entry (ligne fstab) et lxc.mount (fichier fstab).

    Le préfixe 'lxc.mount' capte aussi 'lxc.mount.entry' : la
    distinction se fait ici, sur la présence de 'lxc.mount.entry'.
    """
    if MOUNT_ENTRY_TOKEN in key:
        context.conf.mount_list.append(value)
        return

    context.conf.fstab = check_path(key, value, context.settings)


def config_rootfs(key: str, value: str, context: ParseContext) -> None:
    context.conf.rootfs = check_path(key, value, context.settings)


def config_pivotdir(key: str, value: str, context: ParseContext) -> None:
    context.conf.pivotdir = check_path(key, value, context.settings)


def config_utsname(key: str, value: str, context: ParseContext) -> None:
    """Copie le nom d'hôte dans un enregistrement UtsName.

    Raises:
        NameTooLongError: Si le nom ne tient pas dans le champ nodename
            (terminateur compris).
    """
    if len(value.encode("utf-8")) >= context.settings.hostname_size:
        raise NameTooLongError("Nom d'hôte trop long", key=key, value=value)

    context.conf.utsname = UtsName(nodename=value)
