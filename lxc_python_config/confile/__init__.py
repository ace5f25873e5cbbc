"""Module confile : lecture des fichiers de configuration lxc.

Chaîne de traitement d'une ligne :
ligne -> parse_line -> Directive -> DispatchTable -> handler(clé, valeur, contexte)
"""

from lxc_python_config.confile.context import ParseContext
from lxc_python_config.confile.dispatch import DispatchTable, Handler
from lxc_python_config.confile.handlers import DEFAULT_TABLE
from lxc_python_config.confile.parse import (
    Directive,
    is_line_empty,
    iter_lines,
    parse_line,
    trim,
)
from lxc_python_config.confile.reader import ConfigReader, read_config

__all__ = [
    "ConfigReader",
    "read_config",
    "ParseContext",
    "DispatchTable",
    "Handler",
    "DEFAULT_TABLE",
    "Directive",
    "parse_line",
    "iter_lines",
    "is_line_empty",
    "trim",
]
