"""
JSON Schema Contract Validators

Calculator configuration documents are checked against symbol_config.json
(draft 2020-12, shipped in schema/ next to this module) with the jsonschema
library before any symbol name is resolved.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"


class SchemaLoader:
    """Loads and meta-validates the schema files of SCHEMA_DIR, once per name."""

    def __init__(self):
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'symbol_config')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid draft 2020-12 schema
        """
        if schema_name not in self._schemas:
            schema_path = SCHEMA_DIR / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            with open(schema_path, "r", encoding="utf-8") as f:
                schema = json.load(f)

            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

            self._schemas[schema_name] = schema

        return self._schemas[schema_name]


class SymbolConfigValidator:
    """Validator for calculator symbol configuration documents."""

    SCHEMA_NAME = "symbol_config"

    def __init__(self, loader: Optional[SchemaLoader] = None):
        loader = loader or SchemaLoader()
        self.schema = loader.load_schema(self.SCHEMA_NAME)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: If the document does not match the schema
        """
        self._validator.validate(data)


_SYMBOL_CONFIG_VALIDATOR = SymbolConfigValidator()


def validate_symbol_config(data: Dict[str, Any]) -> None:
    """
    Validate a calculator configuration document.

    Args:
        data: Parsed JSON document

    Raises:
        ValidationError: If the document does not match the schema
    """
    _SYMBOL_CONFIG_VALIDATOR.validate(data)
