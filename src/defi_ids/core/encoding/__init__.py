"""
Encoding: каноникализация, packed-сериализация, batch-кодирование, хеширование.
"""

# Canonicalizer
from defi_ids.core.encoding.canonical import CanonicalPair, canonicalize

# Packed Serializer
from defi_ids.core.encoding.packed import pack, pack_tagged, typed_sequence

# Batch Encoder
from defi_ids.core.encoding.batch import ensure_equal_length, pack_parallel

# Domain-Tagged Hasher
from defi_ids.core.encoding.hashing import (
    DEFAULT_HASHER,
    DomainTaggedHasher,
    HashAlgorithm,
    HasherConfig,
    derive,
    keccak256,
    sha3_256,
)

__all__ = [
    # Canonicalizer
    "CanonicalPair",
    "canonicalize",
    # Packed Serializer
    "pack",
    "pack_tagged",
    "typed_sequence",
    # Batch Encoder
    "ensure_equal_length",
    "pack_parallel",
    # Hasher
    "DEFAULT_HASHER",
    "DomainTaggedHasher",
    "HashAlgorithm",
    "HasherConfig",
    "derive",
    "keccak256",
    "sha3_256",
]
