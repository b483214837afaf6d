"""
    ConsoleErrorHandler (générique, configurable)
"""
from ini_python_utils.errors.base import ErrorHandler
from ini_python_utils.errors.exceptions import (ApplicationError,
                                                ConfigurationError,
                                                IniFormatError,
                                                IniLookupError,
                                                IniNameError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur. Les OSError sont traitées à part car elles proviennent
    directement de la lecture ou de l'écriture du fichier INI.
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
            solutions: Dictionnaire {TypeException: "message solution"},
                prioritaire sur les messages par défaut.
        """
        self.base_error_type = base_error_type
        self.solutions = solutions or {}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        elif isinstance(error, OSError):
            self._handle_io_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: Exception) -> str | None:
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution
        return None

    def _handle_known_error(self, error: Exception) -> None:
        """Affiche le type et le message, suivis d'une solution adaptée."""
        print(f"\n🛑 {type(error).__name__}: {str(error)}")

        solution = self._solution_for(error)
        if solution is not None:
            print(f"\n🔧 Solution : {solution}")
        elif isinstance(error, IniLookupError):
            print("\n🔧 Solution : Vérifiez le nom de la section et de la clé.")
        elif isinstance(error, IniFormatError):
            print("\n🔧 Solution : Corrigez la valeur dans le fichier INI.")
        elif isinstance(error, IniNameError):
            print("\n🔧 Solution : Donnez un nom non vide à la section et à la clé.")
        elif isinstance(error, ConfigurationError):
            print("\n🔧 Solution : Vérifiez votre fichier de configuration.")
        else:
            print("\n🔧 Solution : Voir les suggestions ci-dessus.")

    def _handle_io_error(self, error: OSError) -> None:
        """Affiche une erreur de lecture/écriture de fichier."""
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        print("\n🔧 Solution : Vérifiez le chemin et les permissions du fichier.")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues."""
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec ces informations."
        )
