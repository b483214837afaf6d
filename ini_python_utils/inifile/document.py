"""Modèle en mémoire d'un fichier INI.

IniDocument associe à chaque nom de section un dictionnaire
clé -> valeur. Toutes les valeurs sont des chaînes : les accesseurs
typés (read_integer, write_boolean, ...) convertissent à la lecture
et à l'écriture.

L'ordre des sections et des clés est l'ordre de première apparition
lors du parsing, ou l'ordre d'insertion pour un document construit
par programme.
"""

import re
from collections.abc import Iterator, KeysView, Mapping

from ini_python_utils.errors.exceptions import (IniFormatError,
                                                IniNameError,
                                                MissingKeyError,
                                                MissingSectionError)
from ini_python_utils.inifile.serializer import IniSerializer

# Entier décimal signé, chiffres ASCII uniquement
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
# Littéral décimal avec exposant optionnel, ou "inf"/"nan" tels que str(float)
_DOUBLE_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|nan)"
)

BOOLEAN_TRUE = "1"
BOOLEAN_FALSE = "0"


def _check_section(section: str, allow_unnamed: bool) -> None:
    if not isinstance(section, str):
        raise TypeError(
            f"Nom de section de type {type(section).__name__}, str attendu"
        )
    if section.strip():
        return
    if allow_unnamed and section == "":
        return
    raise IniNameError(f"Nom de section vide : {section!r}", section)


def _check_entry(section: str, key: str, value: str) -> None:
    if not isinstance(key, str):
        raise TypeError(
            f"[{section}] clé de type {type(key).__name__}, str attendu"
        )
    if not key.strip():
        raise IniNameError(
            f"[{section}] nom de clé vide : {key!r}", section, key
        )
    if not isinstance(value, str):
        raise TypeError(
            f"[{section}] {key} : valeur de type {type(value).__name__}, "
            "str attendu"
        )


class IniDocument:
    """Document INI : sections ordonnées de paires clé=valeur.

    Les écritures créent la section si elle n'existe pas. Les lectures
    lèvent MissingSectionError ou MissingKeyError en cas d'absence,
    avant toute tentative de conversion.

    Example:
        >>> doc = IniDocument()
        >>> doc.write_integer("server", "port", 8080)
        >>> doc.read_integer("server", "port")
        8080
        >>> doc.read_string("server", "port")
        '8080'
    """

    def __init__(
        self, data: Mapping[str, Mapping[str, str]] | None = None
    ) -> None:
        """Initialise le document.

        La section sans nom ("") est acceptée ici : c'est celle que
        produit le parsing d'un fichier sans en-tête.

        Args:
            data: Contenu initial optionnel {section: {clé: valeur}}.

        Raises:
            TypeError: Si un nom ou une valeur n'est pas une chaîne.
            IniNameError: Si un nom de section ou de clé est vide.
        """
        self._sections: dict[str, dict[str, str]] = {}
        if data:
            for section, entries in data.items():
                self._merge(section, entries, allow_unnamed=True)

    # Introspection

    def sections(self) -> KeysView[str]:
        """Retourne les noms de sections (vue ensembliste ordonnée).

        La vue est un instantané : les écritures ultérieures ne la
        modifient pas, on peut donc écrire en la parcourant.
        """
        return dict.fromkeys(self._sections).keys()

    def section_entries(self, section: str) -> dict[str, str]:
        """Retourne une copie des paires clé=valeur d'une section.

        Raises:
            MissingSectionError: Si la section n'existe pas.
        """
        return dict(self._get_section(section))

    def has_section(self, section: str) -> bool:
        return section in self._sections

    def has_key(self, section: str, key: str) -> bool:
        return key in self._sections.get(section, {})

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Copie profonde du contenu sous forme de dictionnaires."""
        return {
            name: dict(entries) for name, entries in self._sections.items()
        }

    # Stockage brut

    def get_raw(self, section: str, key: str) -> str:
        """Retourne la valeur brute stockée.

        Raises:
            MissingSectionError: Si la section n'existe pas.
            MissingKeyError: Si la clé n'existe pas dans la section.
        """
        entries = self._get_section(section)
        if key not in entries:
            raise MissingKeyError(section, key)
        return entries[key]

    def set_raw(self, section: str, key: str, value: str) -> None:
        """Stocke une valeur brute, en créant la section si besoin.

        Raises:
            TypeError: Si le nom de section, la clé ou la valeur
                n'est pas une chaîne.
            IniNameError: Si la section (hors section sans nom déjà
                présente) ou la clé est vide après nettoyage.
        """
        self._merge(section, {key: value}, allow_unnamed=False)

    def update_section(
        self, section: str, entries: Mapping[str, str]
    ) -> None:
        """Fusionne des paires dans une section (créée si absente).

        Les clés déjà présentes sont écrasées, leur position est conservée.
        Mêmes contrôles que set_raw.
        """
        self._merge(section, entries, allow_unnamed=False)

    def _merge(
        self,
        section: str,
        entries: Mapping[str, str],
        allow_unnamed: bool,
    ) -> None:
        _check_section(
            section, allow_unnamed or section in self._sections
        )
        for key, value in entries.items():
            _check_entry(section, key, value)
        self._sections.setdefault(section, {}).update(entries)

    def _get_section(self, section: str) -> dict[str, str]:
        try:
            return self._sections[section]
        except KeyError:
            raise MissingSectionError(section) from None

    # Lecteurs typés

    def read_string(self, section: str, key: str) -> str:
        return self.get_raw(section, key)

    def read_integer(self, section: str, key: str) -> int:
        """Lit une valeur comme entier en base 10.

        Seuls un signe optionnel et des chiffres ASCII sont acceptés.

        Raises:
            MissingSectionError: Si la section n'existe pas.
            MissingKeyError: Si la clé n'existe pas.
            IniFormatError: Si la valeur n'est pas un entier décimal.
        """
        value = self.get_raw(section, key)
        if not _INTEGER_PATTERN.fullmatch(value):
            raise IniFormatError(section, key, value, "integer")
        return int(value)

    def read_double(self, section: str, key: str) -> float:
        """Lit une valeur comme nombre à virgule flottante.

        Formes acceptées : signe optionnel, chiffres ASCII avec point et
        exposant optionnels ("3.14", ".5", "1e+20"), ainsi que "inf" et
        "nan" produits par write_double. Les espaces, les séparateurs
        "_" et "Infinity" sont refusés.

        Raises:
            MissingSectionError: Si la section n'existe pas.
            MissingKeyError: Si la clé n'existe pas.
            IniFormatError: Si la valeur n'est pas un littéral flottant.
        """
        value = self.get_raw(section, key)
        if not _DOUBLE_PATTERN.fullmatch(value):
            raise IniFormatError(section, key, value, "double")
        return float(value)

    def read_boolean(self, section: str, key: str) -> bool:
        """Retourne True si et seulement si la valeur vaut exactement "1".

        "true", "yes", "0" ou la chaîne vide donnent False.
        """
        return self.get_raw(section, key) == BOOLEAN_TRUE

    # Écrivains typés

    def write_string(self, section: str, key: str, value: str) -> None:
        self.set_raw(section, key, value)

    def write_integer(self, section: str, key: str, value: int) -> None:
        self.set_raw(section, key, str(value))

    def write_double(self, section: str, key: str, value: float) -> None:
        """Stocke un flottant via sa conversion décimale par défaut.

        Aucune précision n'est imposée : str(value) est utilisé tel quel.
        """
        self.set_raw(section, key, str(value))

    def write_boolean(self, section: str, key: str, value: bool) -> None:
        self.set_raw(section, key, BOOLEAN_TRUE if value else BOOLEAN_FALSE)

    # Protocoles Python

    def __contains__(self, section: object) -> bool:
        return section in self._sections

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniDocument):
            return NotImplemented
        return self._sections == other._sections

    def __repr__(self) -> str:
        return f"IniDocument({self._sections!r})"

    def __str__(self) -> str:
        return IniSerializer().serialize(self)
