"""Réglages du lecteur de configuration lxc.

Les plafonds de longueur reprennent les constantes de la plateforme
Linux : IFNAMSIZ pour les noms d'interface, MAXPATHLEN pour les
chemins et la taille du champ nodename de struct utsname.

Example:
    Fichier de réglages attendu (TOML):

        [reader]
        ifname_max = 16
        path_max = 4096
        hostname_size = 65
        legacy_numeric = false
"""

from pathlib import Path

from pydantic import BaseModel, Field

from lxc_python_config.config.loader import ConfigFileLoader, ConfigLoader

IFNAMSIZ = 16
MAXPATHLEN = 4096
UTSNAME_NODENAME_SIZE = 65


class ReaderSettings(BaseModel):
    """Réglages appliqués par les handlers de directives.

    Attributes:
        ifname_max: Longueur maximale (incluse) d'un nom d'interface.
        path_max: Un chemin de longueur >= path_max est refusé.
        hostname_size: Un nom d'hôte de longueur >= hostname_size
            est refusé.
        legacy_numeric: Si True, lxc.pts/lxc.tty et les préfixes
            acceptent du texte non numérique (valeur 0) au lieu
            de lever InvalidValueError.
    """

    model_config = {"extra": "forbid", "frozen": True}

    ifname_max: int = Field(default=IFNAMSIZ, gt=0)
    path_max: int = Field(default=MAXPATHLEN, gt=0)
    hostname_size: int = Field(default=UTSNAME_NODENAME_SIZE, gt=0)
    legacy_numeric: bool = False


class ReaderSettingsLoader(ConfigFileLoader[ReaderSettings]):
    """Chargeur de ReaderSettings depuis la section [reader].

    Example:
        >>> settings = ReaderSettingsLoader("reader.toml").load()
        >>> settings.path_max
        4096
    """

    DEFAULT_SECTION: str = "reader"

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        super().__init__(config_path, config_loader)

    def load(self, section: str | None = None) -> ReaderSettings:
        """Charge et valide les réglages.

        Une section absente donne les réglages par défaut.

        Raises:
            pydantic.ValidationError: Si une valeur est invalide ou
                si une clé inconnue est présente.
        """
        section_name = section or self.DEFAULT_SECTION
        if section_name not in self.config:
            return ReaderSettings()
        return ReaderSettings.model_validate(self._get_section(section_name))
