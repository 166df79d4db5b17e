"""Interfaces abstraites pour le traitement des erreurs de cfgini."""

from abc import ABC, abstractmethod


class ErrorHandler(ABC):
    """Interface de base pour les handlers d'erreurs.

    Une implémentation décide comment une erreur remonte à
    l'utilisateur : message console, entrée de log, etc.
    """

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass


class ErrorHandlerChain:
    """Diffuse une erreur à tous les handlers enregistrés, dans l'ordre.

    La CLI y branche un handler console (message sur stdout) puis un
    handler logger (trace dans le fichier de log).

    Attributes:
        handlers: Handlers appelés pour chaque erreur.
        exit_code: Code de sortie renvoyé par handle().
    """

    def __init__(
        self,
        handlers: list[ErrorHandler] | None = None,
        exit_code: int = 1
    ) -> None:
        """Initialise la chaîne.

        Args:
            handlers: Handlers initiaux (défaut: aucun).
            exit_code: Code de sortie associé à toute erreur (défaut: 1).
        """
        self.handlers: list[ErrorHandler] = list(handlers or [])
        self.exit_code = exit_code

    def add_handler(self, handler: ErrorHandler) -> None:
        """Ajoute un handler en fin de chaîne."""
        self.handlers.append(handler)

    def handle(self, error: Exception) -> int:
        """Fait passer l'erreur à travers tous les handlers.

        Args:
            error: L'exception à diffuser.

        Returns:
            Le code de sortie à utiliser par l'appelant.
        """
        for handler in self.handlers:
            handler.handle(error)
        return self.exit_code
