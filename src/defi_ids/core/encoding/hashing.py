"""
Domain-Tagged Hasher — сведение packed-кодирования к 256-битному digest

digest = H(pack(fields) ++ tag)

H по умолчанию — Keccak-256 (pycryptodome), побайтово совместимый с
reference-реализацией. SHA3-256 (hashlib) допустим там, где побайтовая
совместимость не требуется: доменное разделение сохраняется.

Обратите внимание: Keccak-256 и SHA3-256 различаются padding'ом и дают
разные digest для одинакового входа.
"""

import hashlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from Crypto.Hash import keccak

from defi_ids.core.domain.tags import DomainTag
from defi_ids.core.domain.values import TypedValue
from defi_ids.core.encoding.packed import pack_tagged


class HashAlgorithm(str, Enum):
    """256-битная хеш-функция"""

    KECCAK_256 = "keccak-256"
    SHA3_256 = "sha3-256"


@dataclass(frozen=True)
class HasherConfig:
    """Конфигурация хешера."""

    algorithm: HashAlgorithm = HashAlgorithm.KECCAK_256


def keccak256(data: bytes) -> bytes:
    """
    Keccak-256 (исходный Keccak padding, не FIPS-202 SHA3).

    Examples:
        >>> keccak256(b"").hex()[:8]
        'c5d24601'
    """
    hasher = keccak.new(digest_bits=256)
    hasher.update(data)
    return hasher.digest()


def sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


_HASH_FUNCTIONS = {
    HashAlgorithm.KECCAK_256: keccak256,
    HashAlgorithm.SHA3_256: sha3_256,
}


@dataclass(frozen=True)
class DomainTaggedHasher:
    """
    Хешер с доменным разделением.

    Stateless: один экземпляр безопасно использовать из любых потоков.
    """

    config: HasherConfig = field(default_factory=HasherConfig)

    def digest(self, data: bytes) -> bytes:
        """Хеш произвольной последовательности байт (32 байта)."""
        return _HASH_FUNCTIONS[self.config.algorithm](data)

    def derive(self, fields: Iterable[TypedValue], tag: DomainTag) -> bytes:
        """
        digest = H(pack(fields) ++ tag)

        Args:
            fields: Упорядоченные поля сущности
            tag: Тег доменного разделения операции

        Returns:
            32-байтный digest
        """
        return self.digest(pack_tagged(fields, tag))


DEFAULT_HASHER = DomainTaggedHasher()


def derive(fields: Iterable[TypedValue], tag: DomainTag) -> bytes:
    """derive() с хешером по умолчанию (Keccak-256)."""
    return DEFAULT_HASHER.derive(fields, tag)
