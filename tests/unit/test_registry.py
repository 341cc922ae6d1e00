"""
Тесты для каталога операций и derive_from_request

Проверяет:
1. Полноту каталога и уникальность тегов
2. Конверсию JSON-параметров
3. Совпадение результата dispatch с прямым вызовом операции
4. Обязательность current_time для time-зависимых операций
5. Пропагацию ошибок без частичного результата
"""

import logging

import pytest
from jsonschema import ValidationError

from defi_ids.core.contracts import DerivationRequestValidator
from defi_ids.core.domain import DerivationResult, DomainTag, Identifier
from defi_ids.core.encoding import DomainTaggedHasher, HashAlgorithm, HasherConfig
from defi_ids.core.errors import (
    IdenticalInputError,
    LengthMismatchError,
    QuantityRangeError,
    UnknownOperationError,
)
from defi_ids.derivations import (
    OPERATIONS,
    OutputKind,
    defi_transaction_id,
    derive_from_request,
    get_operation,
    limit_order,
    list_operations,
    pool_id,
    staking_pool_config,
    swap_data,
)
from defi_ids.derivations import registry


ADDR_1 = "0x" + "11" * 20
ADDR_2 = "0x" + "22" * 20
NOW = 1_700_000_000


class TestCatalog:
    """Тесты каталога операций"""

    def test_all_operations_present(self) -> None:
        assert [spec.name for spec in list_operations()] == [
            "PoolId",
            "TradingPosition",
            "SwapData",
            "LimitOrder",
            "YieldPosition",
            "FlashLoanData",
            "StakingPoolConfig",
            "UserMultiPoolHash",
            "YieldStrategy",
            "CrossChainBridgeData",
            "DeFiTransactionId",
            "StopLossOrder",
            "TakeProfitOrder",
            "TrailingStopOrder",
        ]

    def test_tags_unique_per_operation(self) -> None:
        tags = [spec.tag for spec in OPERATIONS.values() if spec.tag is not None]
        assert len(tags) == len(set(tags)) == len(DomainTag)

    def test_only_pool_id_canonicalizes(self) -> None:
        assert [s.name for s in OPERATIONS.values() if s.canonicalize] == ["PoolId"]

    def test_time_dependent_operations(self) -> None:
        assert {s.name for s in OPERATIONS.values() if s.time_param} == {
            "StakingPoolConfig",
            "DeFiTransactionId",
        }

    def test_get_unknown_operation(self) -> None:
        with pytest.raises(UnknownOperationError, match="unknown_operation"):
            get_operation("MarketOrder")


class TestDeriveFromRequest:
    """Тесты для derive_from_request"""

    def test_pool_id_digest(self) -> None:
        result = derive_from_request(
            {"operation": "PoolId", "params": {"token_a": ADDR_2, "token_b": ADDR_1, "fee": 3000}}
        )
        assert isinstance(result, DerivationResult)
        assert result.digest == pool_id(Identifier.address(ADDR_1), Identifier.address(ADDR_2), 3000)
        assert result.data is None

    def test_limit_order_digest_and_bytes(self) -> None:
        result = derive_from_request(
            {
                "operation": "LimitOrder",
                "params": {
                    "maker": ADDR_1,
                    "taker": ADDR_2,
                    "token_in": ADDR_1,
                    "token_out": ADDR_2,
                    "amount_in": "1000000000000000000",
                    "amount_out": 10**18,
                    "nonce": 1000,
                },
            }
        )
        direct = limit_order(ADDR_1, ADDR_2, ADDR_1, ADDR_2, 10**18, 10**18, 1000)
        assert result.digest == direct.digest
        assert result.data == direct.data

    def test_bytes_output(self) -> None:
        result = derive_from_request(
            {
                "operation": "FlashLoanData",
                "params": {"token": ADDR_1, "amount": 1, "callback_data": "0xbeef"},
            }
        )
        assert result.digest is None
        assert result.data.endswith(b"\xbe\xefFLASH_LOAN")

    def test_injected_time(self) -> None:
        result = derive_from_request(
            {
                "operation": "StakingPoolConfig",
                "params": {"token": ADDR_1, "reward_rate": 1, "lock_period": 2, "max_stakers": 3},
            },
            current_time=NOW,
        )
        assert result.data == staking_pool_config(ADDR_1, 1, 2, 3, NOW)

    def test_transaction_id_uses_injected_time(self) -> None:
        request = {
            "operation": "DeFiTransactionId",
            "params": {"tx_type": "SWAP", "user": ADDR_1, "nonce": 9},
        }
        result = derive_from_request(request, current_time=NOW)
        assert result.digest == defi_transaction_id("SWAP", ADDR_1, NOW, 9)
        assert derive_from_request(request, current_time=NOW) == result

    def test_missing_time_rejected(self) -> None:
        with pytest.raises(ValueError, match="missing_current_time"):
            derive_from_request(
                {
                    "operation": "DeFiTransactionId",
                    "params": {"tx_type": "SWAP", "user": ADDR_1, "nonce": 9},
                }
            )

    def test_custom_hasher(self) -> None:
        hasher = DomainTaggedHasher(HasherConfig(algorithm=HashAlgorithm.SHA3_256))
        request = {"operation": "PoolId", "params": {"token_a": ADDR_1, "token_b": ADDR_2, "fee": 1}}
        assert derive_from_request(request, hasher=hasher).digest == pool_id(
            ADDR_1, ADDR_2, 1, hasher=hasher
        )
        assert derive_from_request(request, hasher=hasher) != derive_from_request(request)

    def test_to_json_dict(self) -> None:
        result = derive_from_request(
            {
                "operation": "TakeProfitOrder",
                "params": {"user": ADDR_1, "token": ADDR_2, "amount": 1, "take_profit_price": 2},
            }
        )
        payload = result.to_json_dict()
        assert payload["operation"] == "TakeProfitOrder"
        assert payload["digest"] is None
        assert payload["data"].startswith("0x" + "11" * 20 + "22" * 20)

    def test_identical_tokens_propagated(self) -> None:
        with pytest.raises(IdenticalInputError):
            derive_from_request(
                {"operation": "PoolId", "params": {"token_a": ADDR_1, "token_b": ADDR_1, "fee": 1}}
            )

    def test_length_mismatch_propagated(self) -> None:
        with pytest.raises(LengthMismatchError):
            derive_from_request(
                {
                    "operation": "SwapData",
                    "params": {"path": [ADDR_1, ADDR_2], "amounts": [1], "deadline": NOW},
                }
            )

    def test_quantity_overflow_propagated(self) -> None:
        with pytest.raises(QuantityRangeError):
            derive_from_request(
                {
                    "operation": "PoolId",
                    "params": {"token_a": ADDR_1, "token_b": ADDR_2, "fee": str(2**256)},
                }
            )

    def test_integral_float_quantity_converted(self) -> None:
        """jsonschema принимает 3000.0 как integer — значение конвертируется в int"""
        result = derive_from_request(
            {"operation": "PoolId", "params": {"token_a": ADDR_1, "token_b": ADDR_2, "fee": 3000.0}}
        )
        assert result.digest == pool_id(ADDR_1, ADDR_2, 3000)

    def test_integral_float_in_array_converted(self) -> None:
        result = derive_from_request(
            {
                "operation": "SwapData",
                "params": {"path": [ADDR_1], "amounts": [5.0], "deadline": float(NOW)},
            }
        )
        assert result.data == swap_data([ADDR_1], [5], NOW)

    def test_validator_built_at_import(self) -> None:
        assert isinstance(registry._VALIDATOR, DerivationRequestValidator)

    def test_invalid_request_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="defi_ids.derivations.registry"):
            with pytest.raises(ValidationError):
                derive_from_request({"operation": "PoolId", "params": {}})
        assert "Rejected derivation request" in caplog.text

    def test_output_kinds(self) -> None:
        assert OPERATIONS["PoolId"].output == OutputKind.DIGEST
        assert OPERATIONS["TradingPosition"].output == OutputKind.DIGEST_AND_BYTES
        assert OPERATIONS["SwapData"].output == OutputKind.BYTES
