"""
    ConsoleErrorHandler : une ligne sur la sortie standard par erreur
"""
import sys
from typing import TextIO

from cfgini.errors.base import ErrorHandler
from cfgini.errors.exceptions import ApplicationError


class ConsoleErrorHandler(ErrorHandler):
    """Handler qui affiche les erreurs dans la console.

    Les erreurs connues (sous-classes de base_error_type) sont affichées
    avec leur seul message, ce que les scripts appelant `cfg` peuvent
    analyser facilement. Les erreurs inattendues sont préfixées.
    Dans tous les cas, exactement une ligne est écrite.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        stream: TextIO | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base des erreurs connues
                             (défaut: ApplicationError).
            stream: Flux de sortie (défaut: sys.stdout au moment
                    de l'affichage).
        """
        self.base_error_type = base_error_type
        self.stream = stream

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur sur une ligne.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            message = str(error)
        else:
            message = f"Erreur inattendue: {type(error).__name__}: {error}"
        # Une seule ligne, même si le message en contient plusieurs
        message = " ".join(message.splitlines())
        print(message, file=self.stream or sys.stdout)
