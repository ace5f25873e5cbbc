"""Table de dispatch des directives par préfixe de clé.

La recherche parcourt la table dans l'ordre et retient la PREMIÈRE
entrée dont le préfixe débute la clé, pas la plus longue. Une entrée
courte placée avant une entrée plus spécifique l'emporte donc ; c'est
au handler de la première de faire la distinction (cas de lxc.mount
et lxc.mount.entry).
"""

from typing import Callable, Iterable, Sequence

from lxc_python_config.confile.context import ParseContext
from lxc_python_config.errors.exceptions import UnknownDirectiveError

Handler = Callable[[str, str, ParseContext], None]


class DispatchTable:
    """Liste ordonnée et figée de couples (préfixe, handler).

    Example:
        >>> table = DispatchTable([("lxc.tty", config_tty)])
        >>> table.dispatch("lxc.tty", "4", context)
    """

    def __init__(self, entries: Iterable[tuple[str, Handler]]) -> None:
        self._entries: tuple[tuple[str, Handler], ...] = tuple(entries)

    def prefixes(self) -> Sequence[str]:
        """Retourne les préfixes dans l'ordre de la table."""
        return [prefix for prefix, _ in self._entries]

    def lookup(self, key: str) -> Handler:
        """Sélectionne le handler de la première entrée correspondante.

        Raises:
            UnknownDirectiveError: Si aucun préfixe ne correspond.
        """
        for prefix, handler in self._entries:
            if key.startswith(prefix):
                return handler
        raise UnknownDirectiveError("Clé inconnue", key=key)

    def dispatch(self, key: str, value: str, context: ParseContext) -> None:
        """Applique la directive ; les exceptions du handler remontent."""
        handler = self.lookup(key)
        handler(key, value, context)
