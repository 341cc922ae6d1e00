"""
Domain values: Identifier, TypedValue, DomainTag и модели результатов.
"""

from defi_ids.core.domain.results import DIGEST_SIZE, DerivationResult, HashedEncoding
from defi_ids.core.domain.tags import DomainTag
from defi_ids.core.domain.values import (
    ADDRESS_WIDTH,
    UINT256_MAX,
    WORD_WIDTH,
    FieldKind,
    FieldValue,
    Identifier,
    TypedValue,
    address,
    bytes32,
    raw_bytes,
    string,
    uint256,
    validate_quantity,
)

__all__ = [
    # Constants
    "ADDRESS_WIDTH",
    "WORD_WIDTH",
    "UINT256_MAX",
    "DIGEST_SIZE",
    # Values
    "Identifier",
    "FieldKind",
    "FieldValue",
    "TypedValue",
    "validate_quantity",
    # Field constructors
    "address",
    "bytes32",
    "uint256",
    "string",
    "raw_bytes",
    # Tags
    "DomainTag",
    # Results
    "HashedEncoding",
    "DerivationResult",
]
