"""
Tests for calculator configuration and its JSON Schema contract

Checks:
1. Validity of the schema itself
2. Validation of documents (required fields, types, unknown fields)
3. Resolution of library names
4. Loading from a file and building a Calculator
"""

import json
import math

import pytest
from jsonschema import ValidationError

from src.calculator import Calculator, CalculatorConfig, UnrecognizedSymbolError, load_config
from src.core.contracts import SchemaLoader, SymbolConfigValidator, validate_symbol_config
from src.core.domain import MODULUS, PHI, PI
from src.core.domain.function import LN, SQRT


@pytest.fixture
def valid_config() -> dict:
    return {
        "schema_version": "1",
        "operators": ["modulus"],
        "constants": ["pi", {"value": 1.5, "symbols": ["k"]}],
        "functions": ["sqrt", "ln"],
    }


# =============================================================================
# SCHEMA
# =============================================================================


class TestSymbolConfigSchema:
    """Tests for symbol_config.json"""

    def test_schema_loads(self) -> None:
        schema = SchemaLoader().load_schema("symbol_config")
        assert schema["title"] == "Calculator symbol configuration"

    def test_unknown_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_valid_document(self, valid_config: dict) -> None:
        validate_symbol_config(valid_config)
        SymbolConfigValidator().validate(valid_config)

    def test_minimal_document(self) -> None:
        validate_symbol_config({"schema_version": "1"})

    def test_missing_schema_version(self) -> None:
        with pytest.raises(ValidationError, match="schema_version"):
            validate_symbol_config({"operators": []})

    def test_wrong_schema_version(self) -> None:
        with pytest.raises(ValidationError):
            validate_symbol_config({"schema_version": "2"})

    def test_unknown_field(self, valid_config: dict) -> None:
        valid_config["variables"] = ["x"]
        with pytest.raises(ValidationError):
            validate_symbol_config(valid_config)

    def test_custom_constant_without_symbols(self) -> None:
        document = {"schema_version": "1", "constants": [{"value": 2.0, "symbols": []}]}
        with pytest.raises(ValidationError):
            validate_symbol_config(document)

    def test_validator_uses_given_loader(self) -> None:
        loader = SchemaLoader()
        validator = SymbolConfigValidator(loader)
        assert validator.schema is loader.load_schema("symbol_config")

    def test_functions_must_be_names(self) -> None:
        with pytest.raises(ValidationError):
            validate_symbol_config({"schema_version": "1", "functions": [1]})


# =============================================================================
# CONFIG
# =============================================================================


class TestCalculatorConfig:
    """Tests for CalculatorConfig.from_dict"""

    def test_names_resolved(self, valid_config: dict) -> None:
        config = CalculatorConfig.from_dict(valid_config)

        assert config.operators == (MODULUS,)
        assert config.constants[0] == PI
        assert config.constants[1].symbols == ("k",)
        assert config.functions == (SQRT, LN)

    def test_omitted_lists_keep_defaults(self) -> None:
        config = CalculatorConfig.from_dict({"schema_version": "1"})

        assert config.operators == ()
        assert config.constants is None
        assert config.functions is None

    def test_library_constant(self) -> None:
        config = CalculatorConfig.from_dict({"schema_version": "1", "constants": ["PHI"]})
        assert config.constants == (PHI,)

    def test_unknown_operator(self) -> None:
        with pytest.raises(ValueError, match="Unknown operator 'power'"):
            CalculatorConfig.from_dict({"schema_version": "1", "operators": ["power"]})

    def test_unknown_function(self) -> None:
        with pytest.raises(ValueError, match="Unknown function 'sec'"):
            CalculatorConfig.from_dict({"schema_version": "1", "functions": ["sec"]})

    def test_invalid_document_rejected_before_resolution(self) -> None:
        with pytest.raises(ValidationError):
            CalculatorConfig.from_dict({"schema_version": "1", "operators": [42]})

    def test_config_immutable(self) -> None:
        config = CalculatorConfig()
        with pytest.raises(AttributeError):
            config.operators = (MODULUS,)


# =============================================================================
# LOADING
# =============================================================================


class TestLoadConfig:
    """Tests for load_config and Calculator.from_config"""

    def test_load_and_evaluate(self, tmp_path, valid_config: dict) -> None:
        path = tmp_path / "calculator.json"
        path.write_text(json.dumps(valid_config), encoding="utf-8")

        calculator = Calculator.from_config(load_config(path))

        assert calculator.evaluate("2k % 2") == 1
        assert calculator.evaluate("sqrt(16)") == 4
        assert calculator.evaluate("pi") == math.pi

    def test_replaced_functions_unavailable(self, tmp_path, valid_config: dict) -> None:
        path = tmp_path / "calculator.json"
        path.write_text(json.dumps(valid_config), encoding="utf-8")

        calculator = Calculator.from_config(load_config(str(path)))

        with pytest.raises(UnrecognizedSymbolError):
            calculator.evaluate("sin(0)")

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_default_config(self) -> None:
        calculator = Calculator.from_config(CalculatorConfig())
        assert calculator.evaluate("sin(0) + e") == math.e
