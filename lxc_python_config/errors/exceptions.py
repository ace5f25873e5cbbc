"""
Exceptions levées lors de la lecture d'un fichier de configuration lxc.

Toutes héritent de ApplicationError pour s'intégrer dans la chaîne
d'error handlers (ConsoleErrorHandler, LoggerErrorHandler).
"""

from typing import Optional


class ApplicationError(Exception):
    """Exception de base pour toutes les erreurs du paquet."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les erreurs de configuration."""
    pass


class ConfigFileError(ConfigurationError):
    """Erreur rattachée à une directive d'un fichier de configuration.

    Le message nomme la clé et la valeur fautives. La source et le
    numéro de ligne sont renseignés par le lecteur une fois l'erreur
    remontée jusqu'à la boucle de lecture.

    Attributes:
        reason: Description courte du problème.
        key: Clé de la directive (si connue).
        value: Valeur de la directive (si connue).
        source: Fichier ou flux d'origine.
        line_number: Numéro de ligne (à partir de 1).
    """

    def __init__(
        self,
        reason: str,
        key: Optional[str] = None,
        value: Optional[str] = None,
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.key = key
        self.value = value
        self.source: Optional[str] = None
        self.line_number: Optional[int] = None

    def locate(self, source: str, line_number: int) -> None:
        """Attache la position de la ligne fautive à l'erreur."""
        self.source = source
        self.line_number = line_number

    def __str__(self) -> str:
        message = self.reason
        if self.key is not None and self.value is not None:
            message += f" ('{self.key}' = '{self.value}')"
        elif self.key is not None:
            message += f" ('{self.key}')"
        if self.line_number is not None:
            message = f"{self.source}:{self.line_number}: {message}"
        return message


class InvalidDirectiveError(ConfigFileError):
    """Ligne sans séparateur '=' ou sous-clé cgroup/mount malformée."""


class UnknownDirectiveError(ConfigFileError):
    """Aucune entrée de la table de dispatch ne correspond à la clé."""


class InvalidValueError(ConfigFileError):
    """Valeur énumérée, numérique ou nom d'interface invalide."""


class InvalidAddressError(ConfigFileError):
    """Adresse IPv4 ou IPv6 malformée."""


class MissingContextError(ConfigFileError):
    """Directive réseau sans interface déclarée au préalable."""


class PathTooLongError(ConfigFileError):
    """Chemin dépassant la longueur maximale autorisée."""


class NameTooLongError(ConfigFileError):
    """Nom d'hôte dépassant la taille du champ nodename."""


class AllocationFailureError(ConfigFileError):
    """Ressources épuisées pendant la construction de la configuration."""
