"""
Calculator Configuration — symbol sets from JSON documents

A configuration names the optional symbols of a calculator:

    {
      "schema_version": "1",
      "operators": ["modulus"],
      "constants": ["pi", {"value": 1.5, "symbols": ["k"]}],
      "functions": ["sqrt", "ln"]
    }

Documents are validated against the symbol_config JSON Schema before any
name is resolved. Omitted "constants" / "functions" keep the defaults.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from src.core.contracts.validators import validate_symbol_config
from src.core.domain.constant import CONSTANT_LIBRARY, Constant
from src.core.domain.function import FUNCTION_LIBRARY, Function
from src.core.domain.operator import OPERATOR_LIBRARY, Operator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorConfig:
    """
    Symbols a calculator is built with.

    Attributes:
        operators: Added to the built-in operators
        constants: Replace the default constants (None keeps the defaults)
        functions: Replace the default functions (None keeps the defaults)
    """

    operators: tuple[Operator, ...] = ()
    constants: Optional[tuple[Constant, ...]] = None
    functions: Optional[tuple[Function, ...]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CalculatorConfig":
        """
        Build a configuration from a parsed JSON document.

        Args:
            data: Document matching symbol_config.json

        Returns:
            CalculatorConfig

        Raises:
            jsonschema.ValidationError: If the document breaks the schema
            ValueError: If a name is not in the operator/constant/function library
        """
        validate_symbol_config(data)

        operators = tuple(
            _resolve(name, OPERATOR_LIBRARY, "operator") for name in data.get("operators", [])
        )

        constants: Optional[tuple[Constant, ...]] = None
        if "constants" in data:
            constants = tuple(_resolve_constant(item) for item in data["constants"])

        functions: Optional[tuple[Function, ...]] = None
        if "functions" in data:
            functions = tuple(
                _resolve(name, FUNCTION_LIBRARY, "function") for name in data["functions"]
            )

        config = cls(operators=operators, constants=constants, functions=functions)
        logger.info(
            "Calculator config loaded: operators=%s constants=%s functions=%s",
            [op.symbol for op in config.operators],
            "default" if constants is None else [c.name for c in constants],
            "default" if functions is None else [f.name for f in functions],
        )
        return config


def load_config(path: Union[str, Path]) -> CalculatorConfig:
    """
    Read a configuration file.

    Args:
        path: JSON file

    Returns:
        CalculatorConfig

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        jsonschema.ValidationError: If the document breaks the schema
        ValueError: If a library name is unknown
    """
    path = Path(path)
    logger.info("Loading calculator config from %s", path)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return CalculatorConfig.from_dict(data)


def _resolve(name: str, library: Dict[str, Any], kind: str) -> Any:
    key = name.lower()
    if key not in library:
        available = ", ".join(sorted(library))
        raise ValueError(f"Unknown {kind} '{name}', available: {available}")
    return library[key]


def _resolve_constant(item: Union[str, Dict[str, Any]]) -> Constant:
    if isinstance(item, str):
        return _resolve(item, CONSTANT_LIBRARY, "constant")
    return Constant(value=item["value"], symbols=tuple(item["symbols"]))
