"""
Batch Encoder — сериализация параллельных массивов

pack_parallel(A, B) = pack(A) ++ pack(B): сначала все элементы A по
порядку, затем все элементы B. Элементы НЕ чередуются.

Используется для пар path/amounts и pools/weights.
"""

from typing import Sequence

from defi_ids.core.domain.values import TypedValue
from defi_ids.core.encoding.packed import pack
from defi_ids.core.errors import LengthMismatchError


def ensure_equal_length(seq_a: Sequence, seq_b: Sequence) -> None:
    """
    Raises:
        LengthMismatchError: Если len(seq_a) != len(seq_b)
    """
    if len(seq_a) != len(seq_b):
        raise LengthMismatchError(
            f"Parallel arrays length mismatch: {len(seq_a)} != {len(seq_b)}"
        )


def pack_parallel(seq_a: Sequence[TypedValue], seq_b: Sequence[TypedValue]) -> bytes:
    """
    Packed-кодирование двух массивов одинаковой длины.

    Args:
        seq_a: Первый массив (например, path)
        seq_b: Второй массив (например, amounts)

    Returns:
        pack(seq_a) ++ pack(seq_b)

    Raises:
        LengthMismatchError: Если длины различаются
    """
    ensure_equal_length(seq_a, seq_b)
    return pack(seq_a) + pack(seq_b)
