"""Réglages de la CLI `cfg`.

Les réglages sont lus dans un fichier TOML (ou JSON) optionnel :

    [cli]
    default_file = "default.cfg"
    encoding = "utf-8"

    [logging]
    file = "~/.local/state/cfgini/cfg.log"
    level = "INFO"

Ordre de recherche : chemin explicite (--config), variable
d'environnement CFGINI_CONFIG, puis SEARCH_PATHS. Sans fichier,
les valeurs par défaut s'appliquent.
"""

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from cfgini.config.loader import ConfigLoader, FileConfigLoader
from cfgini.errors.exceptions import ConfigurationError, FileConfigurationError

ENV_VAR = "CFGINI_CONFIG"

SEARCH_PATHS: list[Path] = [
    Path("cfgini.toml"),
    Path("~/.config/cfgini/config.toml"),
]


class LoggingSettings(BaseModel):
    """Section [logging] : journalisation des opérations."""

    model_config = ConfigDict(extra="forbid")

    file: str | None = None
    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"niveau de log inconnu : {value!r}")
        return level


class CliSettings(BaseModel):
    """Section [cli] : fichier INI par défaut et son encodage."""

    model_config = ConfigDict(extra="forbid")

    default_file: str = "default.cfg"
    encoding: str = "utf-8"


class Settings(BaseModel):
    """Ensemble des réglages de la CLI."""

    model_config = ConfigDict(extra="forbid")

    cli: CliSettings = CliSettings()
    logging: LoggingSettings = LoggingSettings()

    def logging_config(self) -> dict[str, Any]:
        """Configuration au format attendu par FileLogger."""
        return {
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
            }
        }

    def log_file(self) -> str | None:
        """Chemin du fichier de log, `~` développé, ou None."""
        if not self.logging.file:
            return None
        return str(Path(self.logging.file).expanduser())


def find_settings_file(
    search_paths: list[str | Path] | None = None
) -> Path | None:
    """Cherche le fichier de réglages dans les emplacements définis."""
    env_path = os.environ.get(ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    for path in search_paths if search_paths is not None else SEARCH_PATHS:
        path = Path(path).expanduser()
        if path.exists():
            return path
    return None


def load_settings(
    config_path: str | Path | None = None,
    search_paths: list[str | Path] | None = None,
    loader: ConfigLoader | None = None
) -> Settings:
    """
    Charge les réglages de la CLI.

    Args:
        config_path: Fichier explicite ; doit exister
        search_paths: Emplacements à essayer si config_path est None
        loader: Chargeur injectable (défaut: FileConfigLoader)

    Returns:
        Les réglages validés, ou les valeurs par défaut si aucun
        fichier n'est trouvé

    Raises:
        FileConfigurationError: Si le fichier désigné n'existe pas
        ConfigurationError: Si le fichier est invalide
    """
    if config_path is not None:
        path = Path(config_path).expanduser()
    else:
        path = find_settings_file(search_paths)
        if path is None:
            return Settings()

    loader = loader or FileConfigLoader()
    try:
        return loader.load(path, schema=Settings)
    except FileNotFoundError as e:
        raise FileConfigurationError(str(e)) from e
    except ValueError as e:
        raise ConfigurationError(_describe(path, e)) from e


def _describe(path: Path, error: Exception) -> str:
    if isinstance(error, ValidationError):
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in error.errors()
        )
        return f"réglages invalides dans {path} : {details}"
    return f"réglages illisibles dans {path} : {error}"
