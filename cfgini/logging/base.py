"""Interface abstraite pour le logging, et implémentation muette."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface pour le système de logging."""

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


class NullLogger(Logger):
    """Logger qui ignore tous les messages.

    Utilisé par la CLI quand aucun fichier de log n'est configuré.
    """

    def log_info(self, message: str) -> None:
        pass

    def log_warning(self, message: str) -> None:
        pass

    def log_error(self, message: str) -> None:
        pass
