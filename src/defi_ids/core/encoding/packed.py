"""
Packed Serializer — минимальная конкатенация типизированных полей

Формат:
- поля конкатенируются строго в порядке аргументов
- без padding между полями
- без length-префиксов
- числовые поля — big-endian в объявленной ширине

Кодирование неоднозначно в общем случае: ["ab", "c"] и ["a", "bc"] дают
одинаковые байты. Каждая derivation-операция имеет фиксированный layout,
а хвостовой DomainTag и поля фиксированной ширины закрепляют границы.
Новая операция с двумя соседними динамическими полями вернёт неоднозначность.

Любое изменение порядка, ширины или тега меняет все digest.
"""

from typing import Iterable, Sequence

from defi_ids.core.domain.tags import DomainTag
from defi_ids.core.domain.values import FieldKind, Identifier, TypedValue


def pack(fields: Iterable[TypedValue]) -> bytes:
    """
    Packed-кодирование последовательности полей.

    Args:
        fields: Упорядоченные типизированные значения

    Returns:
        Конкатенация байтовых представлений полей

    Examples:
        >>> pack([TypedValue(FieldKind.UINT256, 1)]).hex()[-2:]
        '01'
        >>> ab_c = [TypedValue(FieldKind.STRING, "ab"), TypedValue(FieldKind.STRING, "c")]
        >>> a_bc = [TypedValue(FieldKind.STRING, "a"), TypedValue(FieldKind.STRING, "bc")]
        >>> pack(ab_c) == pack(a_bc)
        True
    """
    return b"".join(field.encode() for field in fields)


def pack_tagged(fields: Iterable[TypedValue], tag: DomainTag) -> bytes:
    """
    Packed-кодирование с хвостовым тегом: pack(fields) ++ tag.

    Это ровно та последовательность, которая подаётся в хеш-функцию.
    """
    return pack(fields) + DomainTag(tag).to_bytes()


def typed_sequence(kind: FieldKind, values: Sequence) -> list[TypedValue]:
    """
    Обёртка однородного массива в TypedValue одного типа.

    Identifier-поля принимают Identifier, int, hex-строку или bytes.
    """
    if kind == FieldKind.ADDRESS:
        return [TypedValue(kind, Identifier.address(v)) for v in values]
    if kind == FieldKind.BYTES32:
        return [TypedValue(kind, Identifier.bytes32(v)) for v in values]
    return [TypedValue(kind, v) for v in values]
