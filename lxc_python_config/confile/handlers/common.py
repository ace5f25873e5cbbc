"""Outils partagés par les handlers de directives."""

import re

from lxc_python_config.config.settings import ReaderSettings
from lxc_python_config.errors.exceptions import (InvalidValueError,
                                                 PathTooLongError)

_STRICT_INT_RE = re.compile(r"^[0-9]+$")
_LEGACY_INT_RE = re.compile(r"^[ \t\n\v\f\r]*([+-]?[0-9]+)")


def parse_integer(key: str, value: str, settings: ReaderSettings) -> int:
    """Convertit une valeur numérique positive.

    En mode strict, seule une suite de chiffres est acceptée. En mode
    legacy_numeric, les chiffres de tête sont lus et tout texte non
    numérique vaut 0, sans erreur.

    Raises:
        InvalidValueError: En mode strict, si la valeur n'est pas un
            entier positif.
    """
    if settings.legacy_numeric:
        match = _LEGACY_INT_RE.match(value)
        return int(match.group(1)) if match else 0

    if not _STRICT_INT_RE.match(value):
        raise InvalidValueError(
            "Valeur numérique attendue", key=key, value=value
        )
    return int(value)


def check_path(key: str, value: str, settings: ReaderSettings) -> str:
    """Vérifie qu'un chemin tient sous le plafond path_max.

    Raises:
        PathTooLongError: Si la longueur UTF-8 atteint path_max.
    """
    if len(value.encode("utf-8")) >= settings.path_max:
        raise PathTooLongError("Chemin trop long", key=key, value=value)
    return value
