"""
cfgini - Analyse, modification et écriture de fichiers INI.

Modules disponibles:
- ini: Document INI (IniDocument), analyse, sérialisation, fichiers
- errors: Exceptions et handlers d'erreurs
- logging: Gestion des logs (Logger, FileLogger, NullLogger)
- config: Réglages de la CLI (TOML, JSON, validation pydantic)
- cli: Commande `cfg get` / `cfg set`
"""

__version__ = "1.0.0"

from cfgini.logging import Logger, FileLogger, NullLogger
from cfgini.errors import (
    ApplicationError,
    ConfigurationError,
    FileConfigurationError,
    IniError,
    FormatError,
    SectionMissingError,
    KeyMissingError,
    ProtectedSectionError,
)
from cfgini.ini import (
    DEFAULT_SECTION,
    IniDocument,
    IniFileManager,
    new,
    parse,
    parse_string,
    to_string,
    write,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    "NullLogger",
    # Erreurs
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "IniError",
    "FormatError",
    "SectionMissingError",
    "KeyMissingError",
    "ProtectedSectionError",
    # INI
    "DEFAULT_SECTION",
    "IniDocument",
    "IniFileManager",
    "new",
    "parse",
    "parse_string",
    "to_string",
    "write",
]
