"""Interfaces abstraites pour le codec de fichiers INI.

Ce module définit les contrats (ABC) pour :
- IniParser : conversion texte brut -> IniDocument
- IniWriter : conversion IniDocument -> texte
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ini_python_utils.inifile.document import IniDocument


class IniParser(ABC):
    """Interface pour un parseur de texte INI.

    Un parseur ne lève jamais d'erreur sur une syntaxe invalide :
    les lignes mal formées sont ignorées.
    """

    @abstractmethod
    def parse(self, raw_text: str) -> "IniDocument":
        """Construit un document depuis le contenu d'un fichier INI.

        Args:
            raw_text: Contenu brut du fichier.

        Returns:
            Document peuplé.
        """
        pass


class IniWriter(ABC):
    """Interface pour la sérialisation d'un document INI."""

    @abstractmethod
    def serialize(self, document: "IniDocument") -> str:
        """Génère le contenu du fichier INI.

        Args:
            document: Document à sérialiser.

        Returns:
            Contenu formaté du fichier INI.
        """
        pass
