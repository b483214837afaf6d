"""Tests pour la validation Pydantic de FileConfigLoader."""

import json
import tempfile
import unittest
from typing import Literal

from pydantic import BaseModel, ValidationError, field_validator

from ini_python_utils.config import FileConfigLoader
from ini_python_utils.errors import ConfigurationError


class IniSettingsSchema(BaseModel):
    """Modele Pydantic des reglages INI."""
    encoding: str = "utf-8"
    parser: Literal["legacy", "standard"] = "legacy"
    sort_sections: bool = False

    model_config = {"extra": "forbid"}


class LoggingSchema(BaseModel):
    """Modele avec validation personnalisee."""
    level: str

    @field_validator("level")
    @classmethod
    def must_be_known_level(cls, v: str) -> str:
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError("Niveau de log inconnu")
        return v.upper()


class SettingsFileSchema(BaseModel):
    """Modele avec sous-sections."""
    ini: IniSettingsSchema
    logging: LoggingSchema


class TestFileConfigLoaderWithSchema(unittest.TestCase):
    """Tests FileConfigLoader.load() avec schema Pydantic."""

    def setUp(self):
        self.loader = FileConfigLoader()

    def _write_json(self, data: dict) -> str:
        """Ecrit un fichier JSON temporaire et retourne le chemin."""
        f = tempfile.NamedTemporaryFile(
            mode="w", suffix=".json", delete=False
        )
        json.dump(data, f)
        f.close()
        return f.name

    def test_load_without_schema_returns_dict(self):
        """Sans schema, load() retourne un dict brut."""
        path = self._write_json({"encoding": "latin-1"})
        result = self.loader.load(path)
        self.assertIsInstance(result, dict)
        self.assertEqual(result["encoding"], "latin-1")

    def test_load_with_valid_schema(self):
        """Avec schema valide, retourne une instance du modele."""
        path = self._write_json({"encoding": "latin-1", "parser": "standard"})
        result = self.loader.load(path, schema=IniSettingsSchema)
        self.assertIsInstance(result, IniSettingsSchema)
        self.assertEqual(result.encoding, "latin-1")
        self.assertEqual(result.parser, "standard")

    def test_load_with_invalid_data_raises(self):
        """Donnees invalides levent ConfigurationError, cause ValidationError."""
        path = self._write_json({"parser": "strict"})
        with self.assertRaises(ConfigurationError) as ctx:
            self.loader.load(path, schema=IniSettingsSchema)
        self.assertIsInstance(ctx.exception.__cause__, ValidationError)

    def test_load_with_extra_fields_raises(self):
        """Champs inconnus avec extra=forbid levent une erreur."""
        path = self._write_json({"encoding": "utf-8", "colour": "red"})
        with self.assertRaises(ConfigurationError):
            self.loader.load(path, schema=IniSettingsSchema)

    def test_load_nested_schema(self):
        """Schema avec sous-sections et validateur personnalise."""
        path = self._write_json({
            "ini": {"sort_sections": True},
            "logging": {"level": "debug"},
        })
        result = self.loader.load(path, schema=SettingsFileSchema)
        self.assertTrue(result.ini.sort_sections)
        self.assertEqual(result.logging.level, "DEBUG")

    def test_custom_validator_rejects(self):
        path = self._write_json({"ini": {}, "logging": {"level": "loud"}})
        with self.assertRaises(ConfigurationError):
            self.loader.load(path, schema=SettingsFileSchema)

    def test_schema_not_basemodel_raises_type_error(self):
        """Un schema qui n'est pas un BaseModel leve TypeError."""
        path = self._write_json({"encoding": "utf-8"})
        with self.assertRaises(TypeError):
            self.loader.load(path, schema=dict)


if __name__ == "__main__":
    unittest.main()
