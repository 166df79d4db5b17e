"""Sérialisation d'un document INI.

La section par défaut est écrite en premier, sans en-tête, puis chaque
section nommée sous la forme `[nom]` suivie de ses lignes `clé=valeur`.
Aucun échappement n'est appliqué : une valeur contenant `=`, `#`, des
crochets ou un saut de ligne ne se relit pas à l'identique.
Commentaires et lignes vides de la source ne sont pas conservés.
"""

import io
from typing import IO

from cfgini.ini.document import DEFAULT_SECTION, IniDocument
from cfgini.ini.parser import LINE_BREAK, SEPARATOR


def to_string(document: IniDocument) -> str:
    """Retourne le texte INI du document, sans le modifier."""
    lines: list[str] = []
    for name, pairs in document.items():
        if name != DEFAULT_SECTION:
            lines.append(f"[{name}]")
        lines.extend(f"{key}{SEPARATOR}{value}" for key, value in pairs.items())
    return "".join(line + LINE_BREAK for line in lines)


def write(document: IniDocument, stream: IO, encoding: str = "utf-8") -> None:
    """Écrit le document dans un flux texte ou binaire.

    Args:
        document: Document à sérialiser.
        stream: Flux ouvert en écriture.
        encoding: Encodage utilisé pour tout flux qui n'est pas un
            io.TextIOBase.

    Raises:
        OSError: Si l'écriture dans le flux échoue.
    """
    content = to_string(document)
    if isinstance(stream, io.TextIOBase):
        stream.write(content)
    else:
        stream.write(content.encode(encoding))
    stream.flush()
