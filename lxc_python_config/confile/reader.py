"""Lecteur de fichiers de configuration lxc.

Ce module fournit ConfigReader, qui enchaîne pour chaque ligne le
découpage, la recherche dans la table de dispatch et l'appel du
handler. La première erreur interrompt la lecture et remonte à
l'appelant ; l'agrégat n'est alors pas garanti complet.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from lxc_python_config.conf.models import LxcConf
from lxc_python_config.config.settings import ReaderSettings
from lxc_python_config.confile.context import ParseContext
from lxc_python_config.confile.dispatch import DispatchTable
from lxc_python_config.confile.handlers import DEFAULT_TABLE
from lxc_python_config.confile.parse import iter_lines, parse_line
from lxc_python_config.errors.base import ErrorHandler
from lxc_python_config.errors.exceptions import (AllocationFailureError,
                                                 ConfigFileError)
from lxc_python_config.logging.base import Logger, NullLogger


class ConfigReader:
    """Remplit un LxcConf à partir de lignes ``<clé> = <valeur>``.

    Attributes:
        logger: Instance de Logger pour tracer la lecture.
        settings: Plafonds et mode de lecture numérique.
        table: Table de dispatch des directives.
        error_handler: Handler optionnel appelé avec l'erreur localisée
            avant qu'elle ne remonte (ex: ErrorHandlerChain).

    Example:
        >>> from lxc_python_config import FileLogger
        >>> reader = ConfigReader(FileLogger("/var/log/lxc-conf.log"))
        >>> conf = LxcConf()
        >>> reader.read("/etc/lxc/web.conf", conf)
        >>> conf.network[0].type
        <NetworkType.VETH: 'veth'>
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        settings: Optional[ReaderSettings] = None,
        table: Optional[DispatchTable] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """Initialise le lecteur.

        Args:
            logger: Logger des diagnostics (silencieux si None).
            settings: Réglages (valeurs par défaut si None).
            table: Table de dispatch (DEFAULT_TABLE si None).
            error_handler: Handler des erreurs de lecture. L'erreur
                remonte toujours à l'appelant après son passage.
        """
        self.logger = logger or NullLogger()
        self.settings = settings or ReaderSettings()
        self.table = table or DEFAULT_TABLE
        self.error_handler = error_handler

    def read(self, source: Union[str, Path], conf: LxcConf) -> None:
        """Lit un fichier de configuration dans l'agrégat fourni.

        Args:
            source: Chemin du fichier.
            conf: Agrégat à remplir.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            ConfigFileError: À la première ligne invalide.
        """
        self.logger.log_info(f"Lecture de la configuration {source}")
        self._read(iter_lines(source), conf, str(source))

    def read_lines(
        self,
        lines: Iterable[str],
        conf: LxcConf,
        source: str = "<lines>",
    ) -> None:
        """Lit une suite de lignes brutes dans l'agrégat fourni.

        Raises:
            ConfigFileError: À la première ligne invalide.
        """
        self._read(enumerate(lines, start=1), conf, source)

    def _read(
        self,
        numbered_lines: Iterable[tuple[int, str]],
        conf: LxcConf,
        source: str,
    ) -> None:
        context = ParseContext(
            conf=conf, settings=self.settings, logger=self.logger
        )
        directives = 0

        for line_number, line in numbered_lines:
            try:
                if self._process_line(line, context):
                    directives += 1
            except ConfigFileError as e:
                self._report(e, source, line_number)
                raise
            except MemoryError as e:
                error = AllocationFailureError(
                    "Mémoire insuffisante", value=line
                )
                self._report(error, source, line_number)
                raise error from e

        self.logger.log_info(
            f"{source} : {directives} directive(s) appliquée(s), "
            f"{len(conf.network)} interface(s), "
            f"{len(conf.cgroup)} entrée(s) cgroup, "
            f"{len(conf.mount_list)} montage(s)"
        )

    def _report(
        self, error: ConfigFileError, source: str, line_number: int
    ) -> None:
        error.locate(source, line_number)
        self.logger.log_error(str(error))
        if self.error_handler is not None:
            self.error_handler.handle(error)

    def _process_line(self, line: str, context: ParseContext) -> bool:
        """Applique une ligne ; retourne False si elle est ignorée."""
        directive = parse_line(line)
        if directive is None:
            return False
        self.table.dispatch(directive.key, directive.value, context)
        return True


def read_config(
    source: Union[str, Path],
    conf: Optional[LxcConf] = None,
    logger: Optional[Logger] = None,
    settings: Optional[ReaderSettings] = None,
    error_handler: Optional[ErrorHandler] = None,
) -> LxcConf:
    """Lit un fichier de configuration lxc.

    Args:
        source: Chemin du fichier.
        conf: Agrégat à remplir ; un nouvel agrégat vide si None.
        logger: Logger des diagnostics.
        settings: Réglages du lecteur.
        error_handler: Handler appelé avec l'erreur avant qu'elle
            ne remonte.

    Returns:
        L'agrégat rempli.

    Raises:
        FileNotFoundError: Si le fichier n'existe pas.
        ConfigFileError: À la première ligne invalide.
    """
    if conf is None:
        conf = LxcConf()
    ConfigReader(
        logger=logger, settings=settings, error_handler=error_handler
    ).read(source, conf)
    return conf
