"""Contexte partagé par les handlers pendant une session de lecture."""

from dataclasses import dataclass, field
from typing import Optional

from lxc_python_config.conf.models import LxcConf, NetworkDevice
from lxc_python_config.config.settings import ReaderSettings
from lxc_python_config.errors.exceptions import MissingContextError
from lxc_python_config.logging.base import Logger, NullLogger


@dataclass
class ParseContext:
    """État explicite d'une session de lecture.

    L'interface courante est la dernière déclarée par
    lxc.network.type ; les directives lxc.network.* suivantes s'y
    appliquent. Sur un agrégat déjà rempli, la session démarre sur
    la tête de sa liste d'interfaces.

    Attributes:
        conf: Agrégat en cours de remplissage.
        settings: Plafonds et mode de lecture numérique.
        logger: Logger des diagnostics.
        current_device: Interface ciblée par les sous-directives.
    """

    conf: LxcConf
    settings: ReaderSettings = field(default_factory=ReaderSettings)
    logger: Logger = field(default_factory=NullLogger)
    current_device: Optional[NetworkDevice] = None

    def __post_init__(self) -> None:
        if self.current_device is None and self.conf.network:
            self.current_device = self.conf.network[0]

    def require_device(self, key: str, value: str) -> NetworkDevice:
        """Retourne l'interface courante.

        Raises:
            MissingContextError: Si aucune interface n'est déclarée.
        """
        if self.current_device is None:
            raise MissingContextError(
                "Aucune interface réseau déclarée pour cette option",
                key=key,
                value=value,
            )
        return self.current_device

    def commit_device(self, device: NetworkDevice) -> None:
        """Attache une nouvelle interface et en fait l'interface courante."""
        self.conf.add_network(device)
        self.current_device = device
