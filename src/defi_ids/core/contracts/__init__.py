"""
Contract Validation Module

Валидация JSON-запросов на derivation по JSON Schema.
"""

from .validators import (
    ContractValidator,
    DerivationRequestValidator,
    SchemaLoader,
    validate_derivation_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DerivationRequestValidator",
    # Functions
    "validate_derivation_request",
]
