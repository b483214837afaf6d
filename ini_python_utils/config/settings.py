"""Réglages d'un fichier INI et leur chargement depuis TOML/JSON.

Exemple de fichier de réglages (TOML) :

    [ini]
    encoding = "utf-8"
    line_terminator = "\\r\\n"
    sort_sections = false
    parser = "legacy"

    [logging]
    level = "DEBUG"
    file = "/var/log/app/ini.log"

Les deux sections sont optionnelles. Les autres sections du fichier
sont ignorées.
"""

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import (BaseModel, ConfigDict, Field, ValidationError,
                      field_validator)

from ini_python_utils.config.loader import ConfigLoader, FileConfigLoader
from ini_python_utils.errors.exceptions import ConfigurationError
from ini_python_utils.logging.base import Logger
from ini_python_utils.logging.file_logger import (DEFAULT_FORMAT,
                                                  DEFAULT_LEVEL, FileLogger)

PARSER_LEGACY = "legacy"
PARSER_STANDARD = "standard"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class IniFileSettings(BaseModel):
    """Réglages de lecture/écriture d'un fichier INI.

    Attributes:
        encoding: Encodage du fichier INI.
        line_terminator: Fin de ligne écrite par save().
        sort_sections: Trier les sections alphabétiquement à l'écriture.
        parser: "legacy" (compatible) ou "standard".
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: str = "utf-8"
    line_terminator: Literal["\r\n", "\n"] = "\r\n"
    sort_sections: bool = False
    parser: Literal["legacy", "standard"] = PARSER_LEGACY

    @field_validator("encoding")
    @classmethod
    def encoding_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("encoding est requis")
        return v

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IniFileSettings":
        """Crée les réglages depuis un dictionnaire.

        Raises:
            ConfigurationError: Si une clé est inconnue ou une valeur invalide.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Réglages INI invalides : {e}") from e

    def build_parser(self, logger: Optional[Logger] = None):
        """Instancie le parseur correspondant au réglage `parser`."""
        from ini_python_utils.inifile.parser import (LegacyIniParser,
                                                     StandardIniParser)

        if self.parser == PARSER_STANDARD:
            return StandardIniParser(logger)
        return LegacyIniParser(logger)

    def build_serializer(self):
        """Instancie le sérialiseur correspondant aux réglages."""
        from ini_python_utils.inifile.serializer import IniSerializer

        return IniSerializer(
            line_terminator=self.line_terminator,
            sort_sections=self.sort_sections,
        )


class LoggingSettings(BaseModel):
    """Section [logging] : niveau, format et fichier de log.

    Sans `file`, aucun logger n'est construit.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = DEFAULT_LEVEL
    format: str = DEFAULT_FORMAT
    file: str | None = None

    @field_validator("level")
    @classmethod
    def must_be_known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Niveau de log {v!r} inconnu. "
                f"Valeurs autorisées : {list(LOG_LEVELS)}"
            )
        return level

    def to_logger_config(self) -> dict[str, Any]:
        """Retourne la configuration attendue par FileLogger."""
        return {"logging": {"level": self.level, "format": self.format}}


class SettingsFile(BaseModel):
    """Contenu complet d'un fichier de réglages."""

    model_config = ConfigDict(frozen=True)

    ini: IniFileSettings = Field(default_factory=IniFileSettings)
    logging: LoggingSettings | None = None


class IniSettingsLoader:
    """Charge les réglages INI et de log depuis un fichier TOML ou JSON.

    Le fichier est validé par SettingsFile ; une section [ini] absente
    donne les réglages par défaut.

    Example:
        >>> loader = IniSettingsLoader("settings.toml")
        >>> loader.load().encoding
        'utf-8'
    """

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        """Charge et valide le fichier de réglages.

        Args:
            config_path: Chemin vers le fichier (.toml ou .json).
            config_loader: Chargeur injectable. Si None, utilise
                FileConfigLoader.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            ValueError: Si l'extension n'est pas supportée.
            ConfigurationError: Si le contenu est invalide.
        """
        loader = config_loader or FileConfigLoader()
        self._settings: SettingsFile = loader.load(
            config_path, schema=SettingsFile
        )

    @property
    def settings(self) -> SettingsFile:
        return self._settings

    def load(self) -> IniFileSettings:
        """Retourne les réglages de la section [ini]."""
        return self._settings.ini

    def build_logger(self) -> Optional[Logger]:
        """Construit un FileLogger depuis la section [logging].

        Returns:
            Le logger, ou None si la section ou son `file` est absent.
        """
        logging_settings = self._settings.logging
        if logging_settings is None or not logging_settings.file:
            return None
        return FileLogger(
            logging_settings.file,
            config=logging_settings.to_logger_config(),
        )
