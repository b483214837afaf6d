"""
Module contenant les exceptions personnalisées pour ini_python_utils.

Ce module suit le principe SRP en isolant la gestion des exceptions.
Les erreurs d'entrée/sortie ne sont pas encapsulées : les exceptions
OSError (permission refusée, disque plein, etc.) remontent telles quelles.
"""


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class ConfigurationError(ApplicationError):
    """Paramètres de configuration invalides (fichier TOML/JSON, valeurs)."""
    pass


class IniError(ApplicationError):
    """Exception de base pour les accès aux valeurs d'un document INI.

    Attributes:
        section: Nom de la section concernée.
        key: Nom de la clé concernée (None si non applicable).
    """

    def __init__(
        self,
        message: str,
        section: str,
        key: str | None = None
    ) -> None:
        super().__init__(message)
        self.section = section
        self.key = key


class IniLookupError(IniError, LookupError):
    """Section ou clé absente du document."""
    pass


class MissingSectionError(IniLookupError):
    """La section demandée n'existe pas dans le document."""

    def __init__(self, section: str) -> None:
        super().__init__(f"Section '{section}' introuvable", section)


class MissingKeyError(IniLookupError):
    """La clé demandée n'existe pas dans la section."""

    def __init__(self, section: str, key: str) -> None:
        super().__init__(
            f"Clé '{key}' introuvable dans la section '{section}'",
            section,
            key,
        )


class IniNameError(IniError, ValueError):
    """Nom de section ou de clé vide, impossible à relire après sauvegarde."""
    pass


class IniFormatError(IniError, ValueError):
    """La valeur stockée ne peut pas être convertie dans le type demandé.

    Attributes:
        value: Valeur brute stockée.
        target: Nom du type cible (ex: "integer", "double").
    """

    def __init__(
        self, section: str, key: str, value: str, target: str
    ) -> None:
        super().__init__(
            f"[{section}] {key}={value!r} : conversion en {target} "
            "impossible",
            section,
            key,
        )
        self.value = value
        self.target = target
