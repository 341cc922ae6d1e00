"""
Values — базовые значения кодирования

Identifier, Quantity и TypedValue: иммутабельные value-типы без identity,
сравниваются только по своим байтам.

Ширины полей (reference domain):
- address  → 20 байт
- bytes32  → 32 байта
- uint256  → 32 байта, big-endian
- string   → UTF-8, собственная длина
- bytes    → собственная длина

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Числовые поля всегда сериализуются big-endian ровно в объявленную ширину
2. Нулевой Identifier — sentinel "unset"
3. Порядок Identifier — беззнаковое числовое сравнение байт
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Union

from defi_ids.core.errors import EncodingError, QuantityRangeError


# =============================================================================
# ШИРИНЫ И ГРАНИЦЫ
# =============================================================================

ADDRESS_WIDTH: Final[int] = 20
WORD_WIDTH: Final[int] = 32

UINT256_MAX: Final[int] = (1 << 256) - 1


# =============================================================================
# QUANTITY
# =============================================================================


def validate_quantity(value: int) -> int:
    """
    Проверка, что значение — корректный uint256.

    Args:
        value: Количество, цена, timestamp, nonce и т.п.

    Returns:
        То же значение

    Raises:
        QuantityRangeError: Если значение отрицательное, > UINT256_MAX или не int
    """
    # bool — подкласс int, но как Quantity не допускается
    if isinstance(value, bool) or not isinstance(value, int):
        raise QuantityRangeError(
            f"Quantity must be int, got {type(value).__name__}"
        )
    if value < 0 or value > UINT256_MAX:
        raise QuantityRangeError(f"Quantity {value} outside uint256 range")
    return value


# =============================================================================
# IDENTIFIER
# =============================================================================


def _strip_hex(text: str) -> str:
    return text[2:] if text[:2] in ("0x", "0X") else text


@dataclass(frozen=True, order=True)
class Identifier:
    """
    Идентификатор фиксированной ширины (адрес аккаунта/токена или bytes32).

    Хранится как беззнаковое число; порядок и равенство — числовые.
    Два идентификатора равны тогда и только тогда, когда равны их байты.
    """

    value: int
    width: int = ADDRESS_WIDTH

    def __post_init__(self) -> None:
        if self.width not in (ADDRESS_WIDTH, WORD_WIDTH):
            raise EncodingError(f"Unsupported identifier width {self.width}")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise EncodingError(
                f"Identifier value must be int, got {type(self.value).__name__}"
            )
        if self.value < 0 or self.value >= 1 << (8 * self.width):
            raise EncodingError(
                f"Identifier value does not fit in {self.width} bytes"
            )

    @classmethod
    def address(cls, value: Union[int, str, bytes]) -> "Identifier":
        """20-байтный адрес из int, hex-строки или bytes."""
        return cls._coerce(value, ADDRESS_WIDTH)

    @classmethod
    def bytes32(cls, value: Union[int, str, bytes]) -> "Identifier":
        """32-байтный идентификатор (например, pool id)."""
        return cls._coerce(value, WORD_WIDTH)

    @classmethod
    def from_hex(cls, text: str, width: int = ADDRESS_WIDTH) -> "Identifier":
        """
        Парсинг hex-строки ('0x' опционален).

        Строка должна содержать ровно 2 * width hex-символов.

        Raises:
            EncodingError: Если длина или символы некорректны
        """
        digits = _strip_hex(text)
        if len(digits) != 2 * width:
            raise EncodingError(
                f"Expected {2 * width} hex digits for {width}-byte identifier, "
                f"got {len(digits)}"
            )
        try:
            data = bytes.fromhex(digits)
        except ValueError:
            raise EncodingError(f"Invalid hex identifier: {text!r}")
        # bytes.fromhex пропускает пробелы: ширину проверяем по результату
        if len(data) != width:
            raise EncodingError(f"Invalid hex identifier: {text!r}")
        return cls.from_bytes(data)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Identifier":
        """Ширина определяется длиной data (20 или 32)."""
        return cls(int.from_bytes(data, "big"), len(data))

    @classmethod
    def _coerce(cls, value: Union[int, str, bytes], width: int) -> "Identifier":
        if isinstance(value, Identifier):
            if value.width != width:
                raise EncodingError(
                    f"Identifier width {value.width} != expected {width}"
                )
            return value
        if isinstance(value, str):
            return cls.from_hex(value, width)
        if isinstance(value, (bytes, bytearray)):
            if len(value) != width:
                raise EncodingError(
                    f"Expected {width} bytes, got {len(value)}"
                )
            return cls.from_bytes(bytes(value))
        return cls(value, width)

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(self.width, "big")

    def to_hex(self) -> str:
        return "0x" + self.to_bytes().hex()

    def __str__(self) -> str:
        return self.to_hex()


# =============================================================================
# TYPED VALUE
# =============================================================================


class FieldKind(str, Enum):
    """Тип поля packed-кодирования"""

    ADDRESS = "address"
    BYTES32 = "bytes32"
    UINT256 = "uint256"
    STRING = "string"
    BYTES = "bytes"


FieldValue = Union[Identifier, int, str, bytes]


@dataclass(frozen=True)
class TypedValue:
    """
    Значение поля вместе с его типом.

    Фиксированные типы (address, bytes32, uint256) кодируются ровно в свою
    ширину; динамические (string, bytes) — в собственную длину, без
    length-префикса.
    """

    kind: FieldKind
    value: FieldValue

    def __post_init__(self) -> None:
        kind = self.kind
        value = self.value
        if kind in (FieldKind.ADDRESS, FieldKind.BYTES32):
            width = ADDRESS_WIDTH if kind == FieldKind.ADDRESS else WORD_WIDTH
            if not isinstance(value, Identifier) or value.width != width:
                raise EncodingError(
                    f"{kind.value} field requires {width}-byte Identifier"
                )
        elif kind == FieldKind.UINT256:
            validate_quantity(value)  # type: ignore[arg-type]
        elif kind == FieldKind.STRING:
            if not isinstance(value, str):
                raise EncodingError("string field requires str")
        elif not isinstance(value, (bytes, bytearray)):
            raise EncodingError("bytes field requires bytes")

    def encode(self) -> bytes:
        """Байтовое представление поля без padding."""
        if self.kind in (FieldKind.ADDRESS, FieldKind.BYTES32):
            return self.value.to_bytes()  # type: ignore[union-attr]
        if self.kind == FieldKind.UINT256:
            return self.value.to_bytes(WORD_WIDTH, "big")  # type: ignore[union-attr]
        if self.kind == FieldKind.STRING:
            return self.value.encode("utf-8")  # type: ignore[union-attr]
        return bytes(self.value)  # type: ignore[arg-type]


# =============================================================================
# КОНСТРУКТОРЫ ПОЛЕЙ
# =============================================================================


def address(value: Union[Identifier, int, str, bytes]) -> TypedValue:
    return TypedValue(FieldKind.ADDRESS, Identifier.address(value))


def bytes32(value: Union[Identifier, int, str, bytes]) -> TypedValue:
    return TypedValue(FieldKind.BYTES32, Identifier.bytes32(value))


def uint256(value: int) -> TypedValue:
    return TypedValue(FieldKind.UINT256, value)


def string(value: str) -> TypedValue:
    return TypedValue(FieldKind.STRING, value)


def raw_bytes(value: bytes) -> TypedValue:
    return TypedValue(FieldKind.BYTES, bytes(value))
