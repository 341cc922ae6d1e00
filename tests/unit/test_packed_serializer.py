"""
Тесты для Packed Serializer и Batch Encoder

Проверяет:
1. Конкатенацию в порядке аргументов без padding и length-префиксов
2. Хвостовой тег в pack_tagged
3. Неоднозначность динамических полей (принятый trade-off формата)
4. pack_parallel: не чередует элементы, проверяет длины
"""

import doctest

import pytest

from defi_ids.core.domain import (
    DomainTag,
    FieldKind,
    Identifier,
    address,
    raw_bytes,
    string,
    uint256,
)
from defi_ids.core.encoding import pack, pack_parallel, pack_tagged, typed_sequence
from defi_ids.core.encoding import packed
from defi_ids.core.errors import LengthMismatchError


ADDR_1 = Identifier.address("0x" + "11" * 20)
ADDR_2 = Identifier.address("0x" + "22" * 20)


class TestPack:
    """Тесты для pack"""

    def test_empty(self) -> None:
        assert pack([]) == b""

    def test_field_order_preserved(self) -> None:
        data = pack([address(ADDR_1), uint256(7), address(ADDR_2)])
        assert data == (
            b"\x11" * 20 + (7).to_bytes(32, "big") + b"\x22" * 20
        )
        assert len(data) == 72

    def test_order_matters(self) -> None:
        assert pack([address(ADDR_1), address(ADDR_2)]) != pack(
            [address(ADDR_2), address(ADDR_1)]
        )

    def test_no_length_prefix_for_dynamic_fields(self) -> None:
        assert pack([string("abc"), raw_bytes(b"\x01")]) == b"abc\x01"

    def test_dynamic_fields_ambiguous(self) -> None:
        """Формат неоднозначен для соседних динамических полей"""
        assert pack([string("ab"), string("c")]) == pack([string("a"), string("bc")])

    def test_accepts_generator(self) -> None:
        assert pack(uint256(i) for i in range(3)) == b"".join(
            i.to_bytes(32, "big") for i in range(3)
        )

    def test_docstring_examples(self) -> None:
        """Примеры в docstring исполняемы"""
        result = doctest.testmod(packed)
        assert result.attempted > 0
        assert result.failed == 0


class TestPackTagged:
    """Тесты для pack_tagged"""

    def test_tag_appended_last(self) -> None:
        data = pack_tagged([uint256(1)], DomainTag.LIMIT_ORDER)
        assert data == (1).to_bytes(32, "big") + b"LIMIT_ORDER"

    def test_tag_only(self) -> None:
        assert pack_tagged([], DomainTag.DEFI_TX) == b"DEFI_TX"


class TestTypedSequence:
    """Тесты для typed_sequence"""

    def test_addresses_from_hex(self) -> None:
        values = typed_sequence(FieldKind.ADDRESS, ["0x" + "11" * 20])
        assert values[0].value == ADDR_1

    def test_uints(self) -> None:
        values = typed_sequence(FieldKind.UINT256, [1, 2])
        assert [v.kind for v in values] == [FieldKind.UINT256, FieldKind.UINT256]


class TestPackParallel:
    """Тесты для pack_parallel"""

    def test_not_interleaved(self) -> None:
        """Все элементы A, затем все элементы B"""
        seq_a = [address(ADDR_1), address(ADDR_2)]
        seq_b = [uint256(10), uint256(20)]
        data = pack_parallel(seq_a, seq_b)
        assert data == pack(seq_a) + pack(seq_b)
        assert data[:40] == b"\x11" * 20 + b"\x22" * 20

    def test_empty_arrays(self) -> None:
        assert pack_parallel([], []) == b""

    def test_length_mismatch_rejected(self) -> None:
        with pytest.raises(LengthMismatchError, match="length_mismatch"):
            pack_parallel([address(ADDR_1), address(ADDR_2)], [uint256(1)])

    def test_length_mismatch_empty_side(self) -> None:
        with pytest.raises(LengthMismatchError):
            pack_parallel([], [uint256(1)])
