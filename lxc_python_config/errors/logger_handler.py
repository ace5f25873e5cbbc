"""
    LoggerErrorHandler (journalisation des erreurs de lecture)
"""
from lxc_python_config.errors.base import ErrorHandler
from lxc_python_config.errors.exceptions import (ApplicationError,
                                                 ConfigFileError)
from lxc_python_config.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour journaliser les erreurs via le Logger injecté.

    Une ConfigFileError est journalisée avec sa position puis sa
    directive, sous une forme facile à filtrer :
    ``InvalidValueError [web.conf:3] lxc.tty = abc : Valeur invalide``.
    """

    def __init__(self,
                 logger: Logger,
                 base_error_type: type[Exception] = ApplicationError
                 ) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
            base_error_type: Classe de base des erreurs connues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        if isinstance(error, ConfigFileError):
            self.logger.log_error(self._format_file_error(error))
        elif isinstance(error, self.base_error_type):
            self.logger.log_error(f"{type(error).__name__}: {error}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {error}"
            )

    @staticmethod
    def _format_file_error(error: ConfigFileError) -> str:
        parts = [type(error).__name__]
        if error.line_number is not None:
            parts.append(f"[{error.source}:{error.line_number}]")
        if error.key is not None:
            directive = error.key
            if error.value is not None:
                directive += f" = {error.value}"
            parts.append(directive)
        return f"{' '.join(parts)} : {error.reason}"
