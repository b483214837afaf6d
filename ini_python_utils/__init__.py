"""
INI Python Utils - Lecture et écriture de fichiers de configuration INI.

Modules disponibles:
- inifile: Document INI, parseurs, sérialiseur, fichier sur disque
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
- config: Chargement des réglages (TOML, JSON)
"""

__version__ = "1.0.0"

from ini_python_utils.logging import Logger, FileLogger
from ini_python_utils.errors import (
    ApplicationError,
    ConfigurationError,
    IniError,
    IniLookupError,
    MissingSectionError,
    MissingKeyError,
    IniNameError,
    IniFormatError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from ini_python_utils.inifile import (
    IniParser,
    IniWriter,
    IniDocument,
    LegacyIniParser,
    StandardIniParser,
    IniSerializer,
    IniFile,
    parse,
    serialize,
)
from ini_python_utils.config import (
    ConfigLoader,
    LoggingSettings,
    SettingsFile,
    FileConfigLoader,
    IniFileSettings,
    IniSettingsLoader,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Errors - Exceptions
    "ApplicationError",
    "ConfigurationError",
    "IniError",
    "IniLookupError",
    "MissingSectionError",
    "MissingKeyError",
    "IniNameError",
    "IniFormatError",
    # Errors - Handlers
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # IniFile - Interfaces
    "IniParser",
    "IniWriter",
    # IniFile - Implémentations
    "IniDocument",
    "LegacyIniParser",
    "StandardIniParser",
    "IniSerializer",
    "IniFile",
    # IniFile - Utilitaires
    "parse",
    "serialize",
    # Config
    "ConfigLoader",
    "LoggingSettings",
    "SettingsFile",
    "FileConfigLoader",
    "IniFileSettings",
    "IniSettingsLoader",
]
