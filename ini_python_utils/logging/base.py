"""Interface abstraite pour le logging."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface pour le système de logging.

    Les composants INI reçoivent un Logger optionnel par injection :
    aucune implémentation concrète n'est imposée (DIP).
    """

    @abstractmethod
    def log_debug(self, message: str) -> None:
        """Log un message de diagnostic (ex: résumé d'un parsing)."""
        pass

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Log une erreur."""
        pass
