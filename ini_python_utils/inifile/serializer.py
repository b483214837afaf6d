"""Sérialisation d'un IniDocument en texte INI.

Format produit, pour chaque section dans l'ordre du document :

    [section]\\r\\n
    cle1=valeur1\\r\\n
    cle2=valeur2\\r\\n

Le terminateur de ligne est CRLF quelle que soit la plateforme.
Aucune ligne vide n'est insérée entre les sections.
"""

from typing import TYPE_CHECKING

from ini_python_utils.inifile.base import IniWriter

if TYPE_CHECKING:
    from ini_python_utils.inifile.document import IniDocument

CRLF = "\r\n"


class IniSerializer(IniWriter):
    """Sérialiseur INI.

    Attributes:
        line_terminator: Fin de ligne écrite après chaque ligne.
        sort_sections: Si True, sections triées alphabétiquement ;
            sinon ordre du document. Les clés gardent toujours
            l'ordre d'insertion.
    """

    def __init__(
        self, line_terminator: str = CRLF, sort_sections: bool = False
    ) -> None:
        self.line_terminator = line_terminator
        self.sort_sections = sort_sections

    def serialize(self, document: "IniDocument") -> str:
        names = list(document.sections())
        if self.sort_sections:
            names.sort()

        lines: list[str] = []
        for name in names:
            lines.append(f"[{name}]")
            for key, value in document.section_entries(name).items():
                lines.append(f"{key}={value}")
        return "".join(line + self.line_terminator for line in lines)


def serialize(document: "IniDocument") -> str:
    """Sérialise un document avec les réglages par défaut (CRLF, ordre du document)."""
    return IniSerializer().serialize(document)
