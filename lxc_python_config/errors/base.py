"""Interfaces abstraites pour la gestion des erreurs de lecture."""

import sys
from abc import ABC, abstractmethod
from typing import Optional

from lxc_python_config.errors.exceptions import ConfigurationError

# sysexits.h
EX_SOFTWARE = 70
EX_CONFIG = 78


class ErrorHandler(ABC):
    """Interface de base pour les handlers d'erreurs.

    Un handler reçoit l'erreur déjà localisée par ConfigReader
    (source et numéro de ligne renseignés) avant qu'elle ne remonte.
    """

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass


class ErrorHandlerChain(ErrorHandler):
    """Diffuse les erreurs à tous les handlers enregistrés.

    La chaîne est elle-même un ErrorHandler : elle peut être passée
    telle quelle à ConfigReader ou à read_config.

    Example:
        >>> chain = (ErrorHandlerChain()
        ...          .add_handler(ConsoleErrorHandler())
        ...          .add_handler(LoggerErrorHandler(logger)))
        >>> read_config("/etc/lxc/web.conf", error_handler=chain)
    """

    def __init__(self) -> None:
        self.handlers: list[ErrorHandler] = []

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        """Ajoute un handler à la chaîne.

        Returns:
            La chaîne elle-même, pour enchaîner les ajouts.
        """
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> None:
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(
        self, error: Exception, exit_code: Optional[int] = None
    ) -> None:
        """Gère l'erreur et termine le programme.

        Args:
            error: L'exception à traiter avant la sortie.
            exit_code: Code de sortie. Par défaut EX_CONFIG (78) pour
                une erreur de configuration, EX_SOFTWARE (70) sinon.
        """
        self.handle(error)
        if exit_code is None:
            exit_code = (
                EX_CONFIG if isinstance(error, ConfigurationError)
                else EX_SOFTWARE
            )
        sys.exit(exit_code)
