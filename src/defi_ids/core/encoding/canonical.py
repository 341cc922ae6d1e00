"""
Canonicalizer — каноникализация неупорядоченной пары идентификаторов

Сущность, определённая над неупорядоченной парой (например, торговый пул),
должна идентифицироваться одинаково при любом порядке аргументов.

ИНВАРИАНТЫ:
1. canonicalize(a, b) == canonicalize(b, a) для всех валидных a != b
2. low < high (беззнаковое сравнение байт)
3. Ошибки проверяются до формирования результата
"""

from dataclasses import dataclass

from defi_ids.core.domain.values import Identifier
from defi_ids.core.errors import IdenticalInputError, ZeroValueError


@dataclass(frozen=True)
class CanonicalPair:
    """Упорядоченная пара (low, high), low < high."""

    low: Identifier
    high: Identifier


def canonicalize(a: Identifier, b: Identifier) -> CanonicalPair:
    """
    Упорядочивание пары идентификаторов.

    Args:
        a: Первый идентификатор
        b: Второй идентификатор

    Returns:
        CanonicalPair(min(a, b), max(a, b))

    Raises:
        IdenticalInputError: Если a == b
        ZeroValueError: Если a или b — нулевой идентификатор
    """
    if a == b:
        raise IdenticalInputError(f"Identical identifiers: {a}")
    if a.is_zero or b.is_zero:
        raise ZeroValueError("Zero identifier in pair")
    if a < b:
        return CanonicalPair(low=a, high=b)
    return CanonicalPair(low=b, high=a)
