"""
Module contenant les exceptions personnalisées de cfgini.

Ce module suit le principe SRP en isolant la gestion des exceptions.
"""


class ApplicationError(Exception):
    """Exception de base pour toute l'application."""
    pass

class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass

class FileConfigurationError(ConfigurationError):
    """Fichier de configuration introuvable ou illisible."""
    pass

class IniError(ApplicationError):
    """Exception de base pour les opérations sur un document INI."""
    pass


class FormatError(IniError, ValueError):
    """Ligne INI mal formée.

    Attributes:
        lineno: Numéro de la ligne fautive (à partir de 1).
        line: Contenu de la ligne, sans les espaces de bord.
    """

    def __init__(self, lineno: int, line: str) -> None:
        self.lineno = lineno
        self.line = line
        super().__init__(f"format incorrect ligne {lineno} : {line!r}")


class SectionMissingError(IniError, LookupError):
    """La section demandée n'existe pas."""

    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(f"section inexistante : {section!r}")


class KeyMissingError(IniError, LookupError):
    """La clé demandée n'existe pas dans une section existante."""

    def __init__(self, section: str, key: str) -> None:
        self.section = section
        self.key = key
        super().__init__(
            f"clé inexistante dans la section {section!r} : {key!r}"
        )


class ProtectedSectionError(IniError):
    """La section par défaut ne peut pas être supprimée."""

    def __init__(self) -> None:
        super().__init__("impossible de supprimer la section par défaut")
