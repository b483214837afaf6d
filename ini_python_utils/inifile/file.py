"""Fichier INI adossé à un chemin sur disque.

Ce module fournit IniFile : le document est chargé à la construction
(vide si le fichier n'existe pas) puis réécrit intégralement par save().
"""

from collections.abc import KeysView
from pathlib import Path
from typing import Optional, Union

from ini_python_utils.config.settings import (IniFileSettings,
                                              IniSettingsLoader)
from ini_python_utils.inifile.base import IniParser, IniWriter
from ini_python_utils.inifile.document import IniDocument
from ini_python_utils.logging.base import Logger


class IniFile:
    """Fichier de configuration INI avec accesseurs typés.

    Les lectures/écritures typées sont déléguées à l'IniDocument
    en mémoire ; seul save() touche au disque.

    save() tronque le fichier puis l'écrit : pas de renommage atomique
    ni de verrou. En cas d'échec en cours d'écriture, le fichier peut
    rester partiellement écrit ; le document en mémoire reste intact.

    Attributes:
        path: Chemin du fichier INI.
        settings: Réglages d'encodage et de format.

    Example:
        >>> ini = IniFile(Path("/tmp/app.ini"))
        >>> ini.write_boolean("main", "enabled", True)
        >>> ini.save()
        >>> IniFile(Path("/tmp/app.ini")).read_boolean("main", "enabled")
        True
    """

    def __init__(
        self,
        path: Union[str, Path],
        logger: Optional[Logger] = None,
        settings: Optional[IniFileSettings] = None,
        parser: Optional[IniParser] = None,
        serializer: Optional[IniWriter] = None,
    ) -> None:
        """Initialise le fichier et charge son contenu.

        Args:
            path: Chemin du fichier INI (peut ne pas exister).
            logger: Logger optionnel.
            settings: Réglages ; valeurs par défaut si None.
            parser: Parseur ; déduit des réglages si None.
            serializer: Sérialiseur ; déduit des réglages si None.

        Raises:
            OSError: Si le fichier existe mais ne peut pas être lu.
        """
        self.path = Path(path)
        self.settings = settings or IniFileSettings()
        self._logger = logger
        self._parser = parser or self.settings.build_parser(logger)
        self._serializer = serializer or self.settings.build_serializer()
        self._document = self._load()

    @classmethod
    def from_settings_file(
        cls,
        path: Union[str, Path],
        config_path: Union[str, Path],
        logger: Optional[Logger] = None,
    ) -> "IniFile":
        """Crée un IniFile dont les réglages viennent d'un fichier TOML/JSON.

        Sans logger fourni, un FileLogger est construit depuis la
        section [logging] du fichier de réglages si elle indique un
        `file`.

        Args:
            path: Chemin du fichier INI.
            config_path: Chemin du fichier de réglages (sections [ini]
                et [logging]).
            logger: Logger optionnel, prioritaire sur [logging].

        Raises:
            FileNotFoundError: Si le fichier de réglages n'existe pas.
            ConfigurationError: Si les réglages sont invalides.
        """
        loader = IniSettingsLoader(config_path)
        logger = logger or loader.build_logger()
        return cls(path, logger=logger, settings=loader.load())

    @property
    def document(self) -> IniDocument:
        return self._document

    def _load(self) -> IniDocument:
        if not self.path.exists():
            if self._logger:
                self._logger.log_info(
                    f"Fichier {self.path} absent : document vide."
                )
            return IniDocument()

        try:
            # newline="" : pas de traduction des fins de ligne
            with open(
                self.path, "r", encoding=self.settings.encoding, newline=""
            ) as f:
                raw_text = f.read()
        except (OSError, UnicodeError) as e:
            if self._logger:
                self._logger.log_error(
                    f"Erreur lors de la lecture du fichier {self.path}: {e}"
                )
            raise

        document = self._parser.parse(raw_text)
        if self._logger:
            self._logger.log_info(f"Fichier {self.path} lu avec succès.")
        return document

    def reload(self) -> None:
        """Relit le fichier, en abandonnant les modifications non sauvées."""
        self._document = self._load()

    def save(self) -> None:
        """Écrit le document dans le fichier, en écrasant son contenu.

        Raises:
            OSError: Si l'écriture échoue (remontée telle quelle).
        """
        content = self._serializer.serialize(self._document)
        try:
            with open(
                self.path, "w", encoding=self.settings.encoding, newline=""
            ) as f:
                f.write(content)
        except (OSError, UnicodeError) as e:
            if self._logger:
                self._logger.log_error(
                    f"Erreur lors de l'écriture du fichier {self.path}: {e}"
                )
            raise

        if self._logger:
            self._logger.log_info(
                f"Fichier {self.path} écrit avec succès "
                f"({len(self._document)} section(s))."
            )

    # Délégation au document

    def sections(self) -> KeysView[str]:
        return self._document.sections()

    def section_entries(self, section: str) -> dict[str, str]:
        return self._document.section_entries(section)

    def has_section(self, section: str) -> bool:
        return self._document.has_section(section)

    def has_key(self, section: str, key: str) -> bool:
        return self._document.has_key(section, key)

    def read_string(self, section: str, key: str) -> str:
        return self._document.read_string(section, key)

    def read_integer(self, section: str, key: str) -> int:
        return self._document.read_integer(section, key)

    def read_double(self, section: str, key: str) -> float:
        return self._document.read_double(section, key)

    def read_boolean(self, section: str, key: str) -> bool:
        return self._document.read_boolean(section, key)

    def write_string(self, section: str, key: str, value: str) -> None:
        self._document.write_string(section, key, value)

    def write_integer(self, section: str, key: str, value: int) -> None:
        self._document.write_integer(section, key, value)

    def write_double(self, section: str, key: str, value: float) -> None:
        self._document.write_double(section, key, value)

    def write_boolean(self, section: str, key: str, value: bool) -> None:
        self._document.write_boolean(section, key, value)

    def __str__(self) -> str:
        return self._serializer.serialize(self._document)

    def __repr__(self) -> str:
        return f"IniFile({str(self.path)!r})"
