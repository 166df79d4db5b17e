"""Gestionnaire de fichiers INI.

Ce module fournit IniFileManager, qui enchaîne ouverture de fichier,
analyse, modification et réécriture complète autour d'un IniDocument.
"""

import os
from collections.abc import Callable, Mapping
from pathlib import Path

from cfgini.errors.exceptions import FileConfigurationError, IniError
from cfgini.ini.document import IniDocument
from cfgini.ini.parser import parse
from cfgini.ini.writer import to_string, write
from cfgini.logging.base import Logger

# Droits des fichiers créés par set_key / update_section
FILE_MODE = 0o660


class IniFileManager:
    """Lecture, écriture et mise à jour de fichiers INI sur disque.

    Chaque modification relit le fichier, applique le changement en
    mémoire puis réécrit tout le fichier depuis le début. Commentaires
    et lignes vides d'origine sont donc perdus à la réécriture.

    Attributes:
        logger: Instance de Logger pour tracer les opérations.
        encoding: Encodage des fichiers lus et écrits.

    Example:
        >>> from cfgini.logging import FileLogger
        >>> manager = IniFileManager(FileLogger("/tmp/cfgini.log"))
        >>> manager.set_key(Path("app.cfg"), "server", "port", "8080")
        >>> manager.get_key(Path("app.cfg"), "server", "port")
        '8080'
    """

    def __init__(self, logger: Logger, encoding: str = "utf-8") -> None:
        """Initialise le gestionnaire avec un logger.

        Args:
            logger: Instance de Logger pour les messages.
            encoding: Encodage des fichiers (défaut: utf-8).
        """
        self.logger = logger
        self.encoding = encoding

    def read(self, path: Path) -> IniDocument:
        """Lit et analyse un fichier INI.

        Args:
            path: Chemin du fichier INI.

        Returns:
            Le document analysé.

        Raises:
            FileConfigurationError: Si le fichier ne peut pas être ouvert.
            FormatError: Si le contenu est mal formé.
        """
        path = Path(path)
        try:
            with open(path, "rb") as f:
                document = self._parse(path, f)
        except OSError as e:
            raise self._file_error(path, e) from e

        self.logger.log_info(f"Fichier {path} lu avec succès.")
        return document

    def write(self, path: Path, document: IniDocument) -> None:
        """Écrit un document dans un fichier, créé ou tronqué.

        Raises:
            FileConfigurationError: Si le fichier ne peut pas être écrit.
        """
        path = Path(path)
        try:
            with open(path, "wb") as f:
                write(document, f, self.encoding)
        except OSError as e:
            raise self._file_error(path, e) from e

        self.logger.log_info(f"Fichier {path} écrit avec succès.")

    def get_key(self, path: Path, section: str, key: str) -> str:
        """Lit la valeur d'une clé dans un fichier.

        Raises:
            FileConfigurationError: Si le fichier ne peut pas être ouvert.
            FormatError: Si le contenu est mal formé.
            SectionMissingError: Si la section n'existe pas.
            KeyMissingError: Si la clé n'existe pas.
        """
        document = self.read(path)
        try:
            return document.section_get_key(section, key)
        except IniError as e:
            self.logger.log_error(f"Lecture de {path} : {e}")
            raise

    def set_key(self, path: Path, section: str, key: str, value: str) -> None:
        """Affecte une clé dans un fichier, créé s'il n'existe pas.

        Le fichier n'est pas modifié si son contenu existant est mal formé.

        Raises:
            FileConfigurationError: Si le fichier ne peut pas être ouvert.
            FormatError: Si le contenu existant est mal formé.
        """
        def apply(document: IniDocument) -> bool:
            document.section_set_key(section, key, value)
            return True

        self._rewrite(path, apply)
        self.logger.log_info(f"[{section}] {key} mis à jour dans {path}.")

    def update_section(
        self, path: Path, section: str, data: Mapping[str, str]
    ) -> bool:
        """Fusionne des paires dans une section d'un fichier.

        Compare les valeurs actuelles avec les nouvelles et ne réécrit
        le fichier que si des modifications sont nécessaires.

        Args:
            path: Chemin du fichier INI, créé s'il n'existe pas.
            section: Nom de la section, créée si besoin.
            data: Paires clé=valeur à fusionner.

        Returns:
            True si le fichier a été modifié, False sinon.

        Raises:
            FileConfigurationError: Si le fichier ne peut pas être ouvert.
            FormatError: Si le contenu existant est mal formé.
        """
        def apply(document: IniDocument) -> bool:
            current = (
                document.section_get(section)
                if document.has_section(section) else None
            )
            changed = current is None or any(
                current.get(key) != value for key, value in data.items()
            )
            document.section_update(section, data)
            return changed

        updated = self._rewrite(path, apply)
        if updated:
            self.logger.log_info(f"Section [{section}] mise à jour dans {path}.")
        else:
            self.logger.log_info(
                f"Fichier {path} déjà configuré avec les valeurs cibles."
            )
        return updated

    def _rewrite(
        self, path: Path, change: Callable[[IniDocument], bool]
    ) -> bool:
        """Ouvre (ou crée) le fichier, applique change, réécrit si besoin.

        change reçoit le document et retourne True s'il faut réécrire.
        """
        path = Path(path)
        try:
            fd = os.open(path, os.O_RDWR | os.O_CREAT, FILE_MODE)
            with os.fdopen(fd, "r+b") as f:
                document = self._parse(path, f)
                if not change(document):
                    return False
                f.seek(0)
                f.truncate()
                f.write(to_string(document).encode(self.encoding))
        except OSError as e:
            raise self._file_error(path, e) from e
        return True

    def _parse(self, path: Path, stream) -> IniDocument:
        try:
            return parse(stream, self.encoding)
        except IniError as e:
            self.logger.log_error(f"Analyse de {path} : {e}")
            raise
        except UnicodeDecodeError as e:
            message = f"{path} n'est pas encodé en {self.encoding} : {e.reason}"
            self.logger.log_error(message)
            raise FileConfigurationError(message) from e

    def _file_error(self, path: Path, error: OSError) -> FileConfigurationError:
        message = f"impossible d'ouvrir {path} : {error.strerror or error}"
        self.logger.log_error(message)
        return FileConfigurationError(message)
