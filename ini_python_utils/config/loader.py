"""Chargement des fichiers de réglages TOML et JSON."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel, ValidationError

from ini_python_utils.errors.exceptions import ConfigurationError


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement des réglages.

    Injectée dans IniSettingsLoader, elle permet de remplacer la
    lecture disque par un mock dans les tests.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type[BaseModel] | None = None
    ) -> Union[Dict[str, Any], BaseModel]:
        """
        Charge un fichier de réglages.

        Args:
            config_path: Chemin vers le fichier de réglages
            schema: Modèle pydantic optionnel. Si fourni, retourne une
                instance validée du modèle ; sinon le dict brut.

        Returns:
            Dictionnaire brut ou instance du schema
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Chargeur de réglages depuis un fichier .toml ou .json.

    Le format est déduit de l'extension. Un fichier mal formé ou
    refusé par le schema lève ConfigurationError.
    """

    def load(
        self,
        config_path: Union[str, Path],
        schema: type[BaseModel] | None = None
    ) -> Union[Dict[str, Any], BaseModel]:
        """
        Charge un fichier de réglages TOML ou JSON.

        Args:
            config_path: Chemin vers le fichier de réglages
            schema: Modèle pydantic optionnel

        Returns:
            Dictionnaire brut ou instance du schema

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si l'extension n'est pas supportée
            TypeError: Si schema n'est pas un BaseModel
            ConfigurationError: Si le contenu est mal formé ou
                refusé par le schema
        """
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        suffix = path.suffix.lower()
        try:
            if suffix == ".toml":
                with open(path, "rb") as f:
                    raw_config = tomllib.load(f)
            elif suffix == ".json":
                with open(path, "r", encoding="utf-8") as f:
                    raw_config = json.load(f)
            else:
                raise ValueError(
                    f"Extension non supportée: {suffix}. "
                    "Utilisez .toml ou .json"
                )
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Fichier de configuration {path} illisible : {e}"
            ) from e

        if schema is None:
            return raw_config

        try:
            return self._validate_with_schema(raw_config, schema)
        except ValidationError as e:
            raise ConfigurationError(
                f"Fichier de configuration {path} invalide : {e}"
            ) from e

    @staticmethod
    def _validate_with_schema(
        data: Dict[str, Any], schema: type[BaseModel]
    ) -> BaseModel:
        """Valide un dict via un modèle pydantic.

        Raises:
            TypeError: Si schema n'est pas un BaseModel.
            ValidationError: Si les données sont refusées.
        """
        if not (
            isinstance(schema, type)
            and issubclass(schema, BaseModel)
        ):
            raise TypeError(
                f"Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )

        return schema.model_validate(data)
