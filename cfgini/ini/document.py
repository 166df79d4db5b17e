"""Représentation en mémoire d'un document INI.

Un document est une table {section: {clé: valeur}}. La section par
défaut, de nom vide, reçoit les paires qui précèdent tout en-tête
`[nom]` ; elle existe toujours et ne peut pas être supprimée.

Example:
    >>> doc = new()
    >>> doc.section_set_key("server", "port", "8080")
    >>> doc.section_get_key("server", "port")
    '8080'
"""

from collections.abc import Iterator, Mapping

from cfgini.errors.exceptions import (
    KeyMissingError,
    ProtectedSectionError,
    SectionMissingError,
)

DEFAULT_SECTION = ""


class IniDocument:
    """Document INI mutable : sections nommées de paires clé=valeur.

    Les opérations de modification agissent en place. Les sections
    et les clés conservent leur ordre d'insertion, ce qui rend la
    sérialisation déterministe sans que les appelants doivent s'y fier.

    Le document n'est pas protégé contre les accès concurrents.
    """

    def __init__(self) -> None:
        """Crée un document contenant uniquement la section par défaut."""
        self._sections: dict[str, dict[str, str]] = {DEFAULT_SECTION: {}}

    # Lecture

    def section_get(self, name: str) -> dict[str, str]:
        """Retourne une copie des paires d'une section.

        Args:
            name: Nom de la section ("" pour la section par défaut).

        Returns:
            Dictionnaire clé -> valeur de la section.

        Raises:
            SectionMissingError: Si la section n'existe pas.
        """
        return dict(self._require(name))

    def section_get_key(self, section: str, key: str) -> str:
        """Retourne la valeur d'une clé dans une section.

        Raises:
            SectionMissingError: Si la section n'existe pas.
            KeyMissingError: Si la section existe mais pas la clé.
        """
        pairs = self._require(section)
        if key not in pairs:
            raise KeyMissingError(section, key)
        return pairs[key]

    def default_section_get(self) -> dict[str, str]:
        """Retourne une copie des paires de la section par défaut."""
        return self.section_get(DEFAULT_SECTION)

    def default_section_get_key(self, key: str) -> str:
        """Retourne la valeur d'une clé de la section par défaut."""
        return self.section_get_key(DEFAULT_SECTION, key)

    # Modification

    def section_set_key(self, section: str, key: str, value: str) -> None:
        """Affecte une valeur, en créant la section si besoin."""
        self._sections.setdefault(section, {})[key] = value

    def default_section_set_key(self, key: str, value: str) -> None:
        """Affecte une valeur dans la section par défaut."""
        self.section_set_key(DEFAULT_SECTION, key, value)

    def section_del_key(self, section: str, key: str) -> None:
        """Supprime une clé ; une clé absente n'est pas une erreur.

        Raises:
            SectionMissingError: Si la section n'existe pas.
        """
        self._require(section).pop(key, None)

    def default_section_del_key(self, key: str) -> None:
        """Supprime une clé de la section par défaut."""
        self.section_del_key(DEFAULT_SECTION, key)

    def section_del(self, name: str) -> None:
        """Supprime une section entière.

        Raises:
            ProtectedSectionError: Si name désigne la section par défaut.
            SectionMissingError: Si la section n'existe pas.
        """
        if name == DEFAULT_SECTION:
            raise ProtectedSectionError()
        self._require(name)
        del self._sections[name]

    def section_update(self, section: str, data: Mapping[str, str]) -> None:
        """Fusionne data dans la section, créée si besoin.

        Les clés de data écrasent les clés existantes de même nom,
        les autres clés de la section sont conservées.
        """
        self._sections.setdefault(section, {}).update(data)

    # Utilitaires

    def sections(self) -> list[str]:
        """Noms des sections, section par défaut en tête."""
        return list(self._sections)

    def has_section(self, name: str) -> bool:
        return name in self._sections

    def items(self) -> Iterator[tuple[str, dict[str, str]]]:
        """Itère sur (nom, copie des paires) pour chaque section."""
        for name, pairs in self._sections.items():
            yield name, dict(pairs)

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Copie profonde du contenu du document."""
        return {name: dict(pairs) for name, pairs in self._sections.items()}

    def _require(self, name: str) -> dict[str, str]:
        try:
            return self._sections[name]
        except KeyError:
            raise SectionMissingError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniDocument):
            return NotImplemented
        return self._sections == other._sections

    def __repr__(self) -> str:
        return f"IniDocument({self._sections!r})"


def new() -> IniDocument:
    """Crée un document vide (seule la section par défaut existe)."""
    return IniDocument()
