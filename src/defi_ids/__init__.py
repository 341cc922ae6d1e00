"""
defi_ids — детерминированные идентификаторы DeFi-сущностей.

Packed-кодирование полей, каноникализация пар токенов и domain-tagged
хеширование (Keccak-256) для пулов, позиций, ордеров и bridge-переводов.
"""

from defi_ids.core.domain import DomainTag, Identifier
from defi_ids.core.encoding import (
    canonicalize,
    derive,
    keccak256,
    pack,
    pack_parallel,
)
from defi_ids.core.errors import (
    DerivationError,
    EncodingError,
    IdenticalInputError,
    LengthMismatchError,
    ZeroValueError,
)
from defi_ids.derivations import derive_from_request

__version__ = "0.1.0"

__all__ = [
    "DomainTag",
    "Identifier",
    "canonicalize",
    "derive",
    "keccak256",
    "pack",
    "pack_parallel",
    "DerivationError",
    "EncodingError",
    "IdenticalInputError",
    "LengthMismatchError",
    "ZeroValueError",
    "derive_from_request",
]
