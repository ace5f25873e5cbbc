"""
    ConsoleErrorHandler (affichage des erreurs de lecture)
"""
from lxc_python_config.errors.base import ErrorHandler
from lxc_python_config.errors.exceptions import (AllocationFailureError,
                                                 ApplicationError,
                                                 InvalidAddressError,
                                                 InvalidDirectiveError,
                                                 InvalidValueError,
                                                 MissingContextError,
                                                 NameTooLongError,
                                                 PathTooLongError,
                                                 UnknownDirectiveError)

DEFAULT_SOLUTIONS: dict[type[Exception], str] = {
    InvalidDirectiveError: (
        "Écrivez chaque ligne sous la forme <clé> = <valeur>, "
        "en UTF-8 (ex: lxc.cgroup.cpuset.cpus = 0,1)."
    ),
    UnknownDirectiveError: "Vérifiez l'orthographe de la clé (ex: lxc.network.type).",
    InvalidValueError: (
        "Utilisez veth, macvlan, phys ou empty pour lxc.network.type, "
        "un entier positif pour lxc.tty, lxc.pts et les préfixes, "
        "un nom d'interface de 16 octets au plus."
    ),
    MissingContextError: "Déclarez lxc.network.type avant les options de l'interface.",
    InvalidAddressError: "Utilisez A.B.C.D[/prefix] en IPv4 ou addr[/prefix] en IPv6.",
    PathTooLongError: "Raccourcissez le chemin indiqué.",
    NameTooLongError: "Raccourcissez le nom d'hôte.",
    AllocationFailureError: "Libérez de la mémoire puis relancez la lecture.",
}


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs
                             connues/inconnues (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"}
                       fusionné avec DEFAULT_SOLUTIONS.
        """
        self.base_error_type = base_error_type
        self.solutions = {**DEFAULT_SOLUTIONS, **(solutions or {})}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur."""
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: Exception) -> str:
        # Le type le plus proche dans le MRO l'emporte
        for klass in type(error).__mro__:
            if klass in self.solutions:
                return self.solutions[klass]
        return "Vérifiez votre fichier de configuration."

    def _handle_known_error(self, error: Exception) -> None:
        """Gère les erreurs connues du projet.

        Affiche le type et le message de l'erreur, suivi d'une
        suggestion de solution.
        """
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues."""
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec ces informations."
        )
