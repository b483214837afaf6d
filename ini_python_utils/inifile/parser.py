"""Parseurs de texte INI.

Règles communes (parsing ligne par ligne, en une passe) :

1. Chaque ';' ou '#' du flux brut est remplacé par un saut de ligne avant
   le découpage : ce qui suit devient une ligne logique à part entière,
   parsée comme les autres (y compris à l'intérieur d'une valeur).
2. Chaque ligne est nettoyée des espaces en début et fin ; les lignes
   vides sont ignorées.
3. Une ligne qui commence par '[' et finit par ']' ouvre une section.
4. La section en cours n'est enregistrée à l'ouverture d'une nouvelle
   section que si elle porte un nom : les clés situées avant le premier
   en-tête sont perdues. La dernière section est toujours enregistrée,
   même sans nom. Une section rouverte est fusionnée avec la précédente.
5. Une ligne contenant '=' est une paire clé=valeur ; une clé vide ou
   une ligne sans '=' est ignorée.

Aucune erreur n'est levée sur une syntaxe invalide.
"""

from typing import Iterator, Optional

from ini_python_utils.inifile.base import IniParser
from ini_python_utils.inifile.document import IniDocument
from ini_python_utils.logging.base import Logger

_COMMENT_AS_NEWLINE = str.maketrans({";": "\n", "#": "\n"})


class LegacyIniParser(IniParser):
    """Parseur compatible avec les fichiers INI existants.

    Conserve deux comportements historiques :
    - la ligne est découpée sur chaque '=' et seuls les deux premiers
      segments sont gardés ("a=b=c" donne a -> "b") ;
    - tous les caractères '[' et ']' sont retirés du nom de section
      ("[foo]bar]" donne "foobar").

    Example:
        >>> doc = LegacyIniParser().parse("[db]\\nhost=localhost ; local\\n")
        >>> doc.read_string("db", "host")
        'localhost'
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        """Initialise le parseur.

        Args:
            logger: Logger optionnel pour le résumé de parsing.
        """
        self._logger = logger

    def parse(self, raw_text: str) -> IniDocument:
        sections: dict[str, dict[str, str]] = {}
        section = ""
        entries: dict[str, str] = {}
        ignored = 0

        for line in self._logical_lines(raw_text):
            if not line:
                continue
            if line.startswith("[") and line.endswith("]"):
                if section:
                    sections.setdefault(section, {}).update(entries)
                section = self._section_name(line)
                entries = {}
            elif "=" in line:
                key, value = self._split_pair(line)
                if key:
                    entries[key] = value
                else:
                    ignored += 1
            else:
                ignored += 1

        sections.setdefault(section, {}).update(entries)
        document = IniDocument(sections)

        if self._logger:
            self._logger.log_debug(
                f"Parsing INI terminé : {len(document)} section(s), "
                f"{ignored} ligne(s) ignorée(s)"
            )
        return document

    @staticmethod
    def _logical_lines(raw_text: str) -> Iterator[str]:
        for line in raw_text.translate(_COMMENT_AS_NEWLINE).split("\n"):
            yield line.strip()

    def _section_name(self, line: str) -> str:
        return line.replace("[", "").replace("]", "").strip()

    def _split_pair(self, line: str) -> tuple[str, str]:
        segments = line.split("=")
        value = segments[1].strip() if len(segments) > 1 else ""
        return segments[0].strip(), value


class StandardIniParser(LegacyIniParser):
    """Parseur sans les comportements historiques.

    La paire est découpée sur le premier '=' seulement ("a=b=c" donne
    a -> "b=c") et le nom de section est la ligne privée de son premier
    et de son dernier caractère. Les autres règles sont identiques.
    """

    def _section_name(self, line: str) -> str:
        return line[1:-1].strip()

    def _split_pair(self, line: str) -> tuple[str, str]:
        key, _, value = line.partition("=")
        return key.strip(), value.strip()


def parse(raw_text: str) -> IniDocument:
    """Parse un texte INI avec le parseur compatible (LegacyIniParser)."""
    return LegacyIniParser().parse(raw_text)
