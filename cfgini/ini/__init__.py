"""Module INI : modèle, analyse, sérialisation et gestion de fichiers.

Classes principales:
    - IniDocument: Document INI en mémoire {section: {clé: valeur}}
    - IniFileManager: Lecture/écriture/mise à jour de fichiers INI

Fonctions:
    - new: Document vide
    - parse / parse_string: Analyse depuis un flux ou une chaîne
    - write / to_string: Sérialisation vers un flux ou une chaîne

Example:
    >>> from cfgini.ini import parse_string, to_string
    >>> doc = parse_string("age = 18\\n[first]\\nfirstk = firstv\\n")
    >>> doc.section_get_key("first", "firstk")
    'firstv'
    >>> doc.section_update("LOL", {"year": "2018"})
    >>> print(to_string(doc), end="")
    age=18
    [first]
    firstk=firstv
    [LOL]
    year=2018
"""

from cfgini.ini.document import DEFAULT_SECTION, IniDocument, new
from cfgini.ini.manager import IniFileManager
from cfgini.ini.parser import parse, parse_string
from cfgini.ini.writer import to_string, write

__all__ = [
    # Modèle
    "DEFAULT_SECTION",
    "IniDocument",
    "new",
    # Analyse / sérialisation
    "parse",
    "parse_string",
    "write",
    "to_string",
    # Fichiers
    "IniFileManager",
]
