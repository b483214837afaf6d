"""Module IniFile pour la lecture et l'écriture de fichiers INI.

Ce module fournit un modèle en mémoire (sections ordonnées de paires
clé=valeur), un codec texte et un fichier adossé au disque :
- Parsing tolérant : les lignes mal formées sont ignorées
- Commentaires ';' et '#' supprimés jusqu'à la fin de la ligne
- Accesseurs typés (chaîne, entier, flottant, booléen "1"/"0")
- Sérialisation CRLF, sans ligne vide entre sections

Classes principales:
    - IniDocument: Document en mémoire avec accesseurs typés
    - IniParser / IniWriter: Interfaces abstraites du codec
    - LegacyIniParser: Parseur compatible (comportement par défaut)
    - StandardIniParser: Parseur sans les comportements historiques
    - IniSerializer: Sérialiseur INI
    - IniFile: Document chargé depuis et sauvegardé dans un fichier

Fonctions utilitaires:
    - parse: Texte -> IniDocument
    - serialize: IniDocument -> texte

Example:
    >>> from pathlib import Path
    >>> from ini_python_utils.inifile import IniFile
    >>>
    >>> ini = IniFile(Path("/tmp/server.ini"))
    >>> ini.write_string("server", "host", "localhost")
    >>> ini.write_integer("server", "port", 8080)
    >>> ini.save()
    >>> ini.read_integer("server", "port")
    8080
"""

from ini_python_utils.inifile.base import IniParser, IniWriter
from ini_python_utils.inifile.serializer import IniSerializer, serialize
from ini_python_utils.inifile.document import IniDocument
from ini_python_utils.inifile.parser import (
    LegacyIniParser,
    StandardIniParser,
    parse,
)
from ini_python_utils.inifile.file import IniFile

__all__ = [
    # Interfaces abstraites
    "IniParser",
    "IniWriter",
    # Implémentations
    "IniDocument",
    "LegacyIniParser",
    "StandardIniParser",
    "IniSerializer",
    "IniFile",
    # Fonctions utilitaires
    "parse",
    "serialize",
]
