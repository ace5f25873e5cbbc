"""Découpage des lignes d'un fichier de configuration lxc.

Une ligne utile a la forme ``<clé> = <valeur>`` ; seul le premier
'=' sépare la clé de la valeur. Les lignes vides ou commençant par
'#' (après les blancs de tête) sont ignorées.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from lxc_python_config.errors.exceptions import InvalidDirectiveError

BLANKS = " \t\r\n\v\f"
COMMENT_CHAR = "#"
SEPARATOR = "="


@dataclass(frozen=True)
class Directive:
    """Paire clé/valeur extraite d'une ligne."""

    key: str
    value: str


def trim(text: str) -> str:
    """Retire les blancs des deux côtés. Idempotent."""
    return text.strip(BLANKS)


def is_line_empty(line: str) -> bool:
    """Indique si une ligne ne contient que des blancs."""
    return not line.lstrip(BLANKS)


def parse_line(line: str) -> Optional[Directive]:
    """Découpe une ligne brute en directive.

    Args:
        line: Ligne brute, avec ou sans fin de ligne.

    Returns:
        La directive, ou None si la ligne est vide ou commentée.

    Raises:
        InvalidDirectiveError: Si la ligne ne contient pas de '=' ou
            n'est pas de l'UTF-8 valide.
    """
    stripped = line.lstrip(BLANKS)
    if not stripped or stripped.startswith(COMMENT_CHAR):
        return None

    # iter_lines décode avec surrogateescape : les octets invalides
    # restent sous forme de surrogates isolés
    try:
        stripped.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidDirectiveError(
            f"Ligne non UTF-8 (octet invalide en position {e.start})"
        ) from e

    key, separator, value = stripped.partition(SEPARATOR)
    if not separator:
        raise InvalidDirectiveError(
            f"Ligne de configuration invalide : {trim(stripped)!r}"
        )

    return Directive(key=trim(key), value=trim(value))


def iter_lines(path: Union[str, Path]) -> Iterator[tuple[int, str]]:
    """Parcourt un fichier ligne par ligne.

    Args:
        path: Chemin du fichier de configuration.

    Les octets non UTF-8 ne lèvent pas d'erreur ici : ils sont conservés
    en surrogates et parse_line refuse la ligne concernée.

    Yields:
        Couples (numéro de ligne à partir de 1, ligne sans fin de ligne).

    Raises:
        FileNotFoundError: Si le fichier n'existe pas.
    """
    with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
        for line_number, line in enumerate(f, start=1):
            yield line_number, line.rstrip("\r\n")
