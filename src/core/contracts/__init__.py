"""
Contract Validation Module

Validation of the JSON documents accepted by the calculator.
"""

from .validators import SchemaLoader, SymbolConfigValidator, validate_symbol_config

__all__ = [
    # Classes
    "SchemaLoader",
    "SymbolConfigValidator",
    # Functions
    "validate_symbol_config",
]
