"""
Results — модели результатов derivation-операций

Immutable Pydantic модели. Digest всегда ровно 32 байта.
"""

from typing import Any, Dict, Final, Optional

from pydantic import BaseModel, Field


DIGEST_SIZE: Final[int] = 32


class HashedEncoding(BaseModel):
    """
    Результат операции с выходом "digest + bytes".

    data — packed-последовательность (с тегом, если он есть), digest — её хеш.
    """

    digest: bytes = Field(
        ..., min_length=DIGEST_SIZE, max_length=DIGEST_SIZE, description="256-битный digest"
    )
    data: bytes = Field(..., description="Packed-кодирование до хеширования")

    model_config = {"frozen": True}

    @property
    def digest_hex(self) -> str:
        return "0x" + self.digest.hex()

    @property
    def data_hex(self) -> str:
        return "0x" + self.data.hex()


class DerivationResult(BaseModel):
    """
    Результат диспетчеризации запроса по имени операции.

    Для digest-only операций data = None, для bytes-only — digest = None.
    """

    operation: str = Field(..., min_length=1, description="Имя операции из каталога")
    digest: Optional[bytes] = Field(
        None, min_length=DIGEST_SIZE, max_length=DIGEST_SIZE, description="Digest (nullable)"
    )
    data: Optional[bytes] = Field(None, description="Packed bytes (nullable)")

    model_config = {"frozen": True}

    def to_json_dict(self) -> Dict[str, Any]:
        """Сериализация с 0x-hex строками вместо bytes."""
        return {
            "operation": self.operation,
            "digest": None if self.digest is None else "0x" + self.digest.hex(),
            "data": None if self.data is None else "0x" + self.data.hex(),
        }
