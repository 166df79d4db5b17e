"""Analyse ligne à ligne du format INI.

Grammaire acceptée, une ligne à la fois après suppression des espaces
de bord :
- ligne vide, ou commençant par `#` : ignorée ;
- `[nom]` : ouvre la section `nom` (nom non vide, non retaillé).
  Un en-tête répété reprend la même section ;
- `clé = valeur` : découpée au premier `=`, clé et valeur retaillées
  et non vides.

Toute autre ligne lève FormatError et l'analyse s'arrête : aucun
document partiel n'est renvoyé.
"""

from typing import IO, AnyStr

from cfgini.errors.exceptions import FormatError
from cfgini.ini.document import DEFAULT_SECTION, IniDocument

LINE_BREAK = "\n"
SEPARATOR = "="
COMMENT = "#"


def parse(stream: IO[AnyStr], encoding: str = "utf-8") -> IniDocument:
    """Construit un document depuis un flux, lu entièrement en mémoire.

    Args:
        stream: Flux texte ou binaire ouvert en lecture.
        encoding: Encodage appliqué si le flux est binaire.

    Returns:
        Le document analysé.

    Raises:
        FormatError: À la première ligne mal formée.
        OSError: Si la lecture du flux échoue.
    """
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode(encoding)
    return parse_string(data)


def parse_string(text: str) -> IniDocument:
    """Construit un document depuis une chaîne.

    Raises:
        FormatError: À la première ligne mal formée.
    """
    document = IniDocument()
    _fill(document, text)
    return document


def _fill(document: IniDocument, text: str) -> None:
    current = DEFAULT_SECTION
    for lineno, raw in enumerate(text.split(LINE_BREAK), start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT):
            continue

        if line.startswith("[") and line.endswith("]"):
            name = line[1:-1]
            if not name:
                raise FormatError(lineno, line)
            current = name
            # en-tête répété : on complète la section existante
            document.section_update(current, {})
            continue

        key, sep, value = line.partition(SEPARATOR)
        key, value = key.strip(), value.strip()
        if not sep or not key or not value:
            raise FormatError(lineno, line)
        document.section_set_key(current, key, value)
