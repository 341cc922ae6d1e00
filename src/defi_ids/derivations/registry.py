"""
Operation Registry — каталог derivation-операций и диспетчеризация запросов

Каталог связывает имя операции с функцией, порядком и типами параметров,
тегом и видом выхода. derive_from_request() валидирует JSON-запрос,
конвертирует параметры (hex → Identifier, decimal string → int),
подставляет явно переданное время и вызывает операцию.

Текущее время никогда не читается из окружения: вызывающая сторона
передаёт current_time, поэтому одинаковый запрос с одинаковым временем
всегда даёт одинаковый результат.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from jsonschema import ValidationError

from defi_ids.core.contracts import DerivationRequestValidator
from defi_ids.core.domain import (
    DerivationResult,
    DomainTag,
    FieldKind,
    Identifier,
)
from defi_ids.core.encoding import DomainTaggedHasher
from defi_ids.core.errors import EncodingError, UnknownOperationError
from defi_ids.derivations import pools, trading, transfers

logger = logging.getLogger(__name__)


class OutputKind(str, Enum):
    """Вид выхода операции"""

    DIGEST = "digest"
    BYTES = "bytes"
    DIGEST_AND_BYTES = "digest+bytes"


@dataclass(frozen=True)
class ParamSpec:
    """Тип параметра запроса."""

    kind: FieldKind
    array: bool = False


@dataclass(frozen=True)
class OperationSpec:
    """
    Описание операции каталога.

    params перечислены в порядке сериализации; time_param — имя параметра,
    который заполняется из current_time, а не из запроса.
    canonicalize — метаданные каталога (для list_operations), диспетчер его
    не читает: каноникализацию выполняет сама функция операции.
    """

    name: str
    function: Callable[..., Any]
    params: Mapping[str, ParamSpec]
    output: OutputKind
    tag: Optional[DomainTag] = None
    canonicalize: bool = False
    time_param: Optional[str] = None
    accepts_hasher: bool = False


_ADDRESS = ParamSpec(FieldKind.ADDRESS)
_BYTES32 = ParamSpec(FieldKind.BYTES32)
_UINT = ParamSpec(FieldKind.UINT256)
_STRING = ParamSpec(FieldKind.STRING)
_BYTES = ParamSpec(FieldKind.BYTES)


OPERATIONS: Dict[str, OperationSpec] = {
    spec.name: spec
    for spec in (
        OperationSpec(
            name="PoolId",
            function=pools.pool_id,
            params={"token_a": _ADDRESS, "token_b": _ADDRESS, "fee": _UINT},
            output=OutputKind.DIGEST,
            canonicalize=True,
            accepts_hasher=True,
        ),
        OperationSpec(
            name="TradingPosition",
            function=trading.trading_position,
            params={
                "user": _ADDRESS,
                "token_in": _ADDRESS,
                "token_out": _ADDRESS,
                "amount_in": _UINT,
                "min_amount_out": _UINT,
            },
            output=OutputKind.DIGEST_AND_BYTES,
            accepts_hasher=True,
        ),
        OperationSpec(
            name="SwapData",
            function=trading.swap_data,
            params={
                "path": ParamSpec(FieldKind.ADDRESS, array=True),
                "amounts": ParamSpec(FieldKind.UINT256, array=True),
                "deadline": _UINT,
            },
            output=OutputKind.BYTES,
        ),
        OperationSpec(
            name="LimitOrder",
            function=trading.limit_order,
            params={
                "maker": _ADDRESS,
                "taker": _ADDRESS,
                "token_in": _ADDRESS,
                "token_out": _ADDRESS,
                "amount_in": _UINT,
                "amount_out": _UINT,
                "nonce": _UINT,
            },
            output=OutputKind.DIGEST_AND_BYTES,
            tag=DomainTag.LIMIT_ORDER,
            accepts_hasher=True,
        ),
        OperationSpec(
            name="YieldPosition",
            function=pools.yield_position_id,
            params={"user": _ADDRESS, "pool": _BYTES32, "amount": _UINT, "start_time": _UINT},
            output=OutputKind.DIGEST,
            tag=DomainTag.YIELD_POSITION,
            accepts_hasher=True,
        ),
        OperationSpec(
            name="FlashLoanData",
            function=transfers.flash_loan_data,
            params={"token": _ADDRESS, "amount": _UINT, "callback_data": _BYTES},
            output=OutputKind.BYTES,
            tag=DomainTag.FLASH_LOAN,
        ),
        OperationSpec(
            name="StakingPoolConfig",
            function=pools.staking_pool_config,
            params={
                "token": _ADDRESS,
                "reward_rate": _UINT,
                "lock_period": _UINT,
                "max_stakers": _UINT,
                "current_time": _UINT,
            },
            output=OutputKind.BYTES,
            time_param="current_time",
        ),
        OperationSpec(
            name="UserMultiPoolHash",
            function=pools.user_multi_pool_hash,
            params={"user": _ADDRESS, "pool_ids": ParamSpec(FieldKind.BYTES32, array=True)},
            output=OutputKind.DIGEST,
            tag=DomainTag.MULTI_POOL_USER,
            accepts_hasher=True,
        ),
        OperationSpec(
            name="YieldStrategy",
            function=pools.yield_strategy,
            params={
                "strategy_name": _STRING,
                "pools": ParamSpec(FieldKind.ADDRESS, array=True),
                "weights": ParamSpec(FieldKind.UINT256, array=True),
            },
            output=OutputKind.BYTES,
            tag=DomainTag.YIELD_STRATEGY,
        ),
        OperationSpec(
            name="CrossChainBridgeData",
            function=transfers.cross_chain_bridge_data,
            params={
                "source_chain": _UINT,
                "target_chain": _UINT,
                "token": _ADDRESS,
                "amount": _UINT,
                "recipient": _ADDRESS,
            },
            output=OutputKind.BYTES,
            tag=DomainTag.CROSS_CHAIN_BRIDGE,
        ),
        OperationSpec(
            name="DeFiTransactionId",
            function=transfers.defi_transaction_id,
            params={"tx_type": _STRING, "user": _ADDRESS, "timestamp": _UINT, "nonce": _UINT},
            output=OutputKind.DIGEST,
            tag=DomainTag.DEFI_TX,
            time_param="timestamp",
            accepts_hasher=True,
        ),
        OperationSpec(
            name="StopLossOrder",
            function=trading.stop_loss_order,
            params={
                "user": _ADDRESS,
                "token": _ADDRESS,
                "amount": _UINT,
                "stop_price": _UINT,
                "trigger_price": _UINT,
            },
            output=OutputKind.BYTES,
            tag=DomainTag.STOP_LOSS_ORDER,
        ),
        OperationSpec(
            name="TakeProfitOrder",
            function=trading.take_profit_order,
            params={
                "user": _ADDRESS,
                "token": _ADDRESS,
                "amount": _UINT,
                "take_profit_price": _UINT,
            },
            output=OutputKind.BYTES,
            tag=DomainTag.TAKE_PROFIT_ORDER,
        ),
        OperationSpec(
            name="TrailingStopOrder",
            function=trading.trailing_stop_order,
            params={
                "user": _ADDRESS,
                "token": _ADDRESS,
                "amount": _UINT,
                "trailing_percent": _UINT,
                "activation_price": _UINT,
            },
            output=OutputKind.BYTES,
            tag=DomainTag.TRAILING_STOP_ORDER,
        ),
    )
}


def list_operations() -> List[OperationSpec]:
    """Каталог операций в порядке объявления."""
    return list(OPERATIONS.values())


def get_operation(name: str) -> OperationSpec:
    """
    Raises:
        UnknownOperationError: Если операции нет в каталоге
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(f"Unknown operation: {name!r}")


# =============================================================================
# КОНВЕРСИЯ ПАРАМЕТРОВ
# =============================================================================


def _convert_scalar(kind: FieldKind, value: Any) -> Any:
    if kind == FieldKind.ADDRESS:
        return Identifier.address(value)
    if kind == FieldKind.BYTES32:
        return Identifier.bytes32(value)
    if kind == FieldKind.UINT256:
        # JSON-контракт допускает decimal string для значений > 2**53;
        # jsonschema считает 3000.0 валидным integer
        if isinstance(value, str):
            return int(value)
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value
    if kind == FieldKind.BYTES:
        if isinstance(value, str):
            digits = value[2:] if value.startswith("0x") else value
            try:
                return bytes.fromhex(digits)
            except ValueError:
                raise EncodingError(f"Invalid hex bytes: {value!r}")
        return bytes(value)
    return value


def convert_params(spec: OperationSpec, params: Mapping[str, Any]) -> Dict[str, Any]:
    """Конверсия JSON-параметров в аргументы функции операции."""
    converted: Dict[str, Any] = {}
    for name, param in spec.params.items():
        if name == spec.time_param:
            continue
        value = params[name]
        if param.array:
            converted[name] = [_convert_scalar(param.kind, v) for v in value]
        else:
            converted[name] = _convert_scalar(param.kind, value)
    return converted


# =============================================================================
# DISPATCH
# =============================================================================


# Глобальный экземпляр валидатора
_VALIDATOR = DerivationRequestValidator()


def _to_result(name: str, output: OutputKind, value: Any) -> DerivationResult:
    if output == OutputKind.DIGEST_AND_BYTES:
        return DerivationResult(operation=name, digest=value.digest, data=value.data)
    if output == OutputKind.DIGEST:
        return DerivationResult(operation=name, digest=value)
    return DerivationResult(operation=name, data=value)


def derive_from_request(
    request: Mapping[str, Any],
    current_time: Optional[int] = None,
    hasher: Optional[DomainTaggedHasher] = None,
) -> DerivationResult:
    """
    Выполнение derivation по JSON-запросу.

    Args:
        request: {"operation": <имя>, "params": {...}}
        current_time: Текущее время (unix seconds) для time-зависимых операций
        hasher: Хешер (по умолчанию Keccak-256)

    Returns:
        DerivationResult

    Raises:
        ValidationError: Если запрос не соответствует JSON-контракту
        ValueError: Если time-зависимой операции не передано current_time
        DerivationError: Ошибки каноникализации, длины массивов, кодирования
    """
    try:
        _VALIDATOR.validate(dict(request))
    except ValidationError as e:
        logger.warning(
            "Rejected derivation request for operation %r: %s",
            request.get("operation"),
            e.message,
        )
        raise

    spec = get_operation(request["operation"])
    kwargs = convert_params(spec, request["params"])

    if spec.time_param is not None:
        if current_time is None:
            raise ValueError(
                f"{spec.name} requires current_time (missing_current_time)"
            )
        kwargs[spec.time_param] = current_time
    if spec.accepts_hasher and hasher is not None:
        kwargs["hasher"] = hasher

    value = spec.function(**kwargs)
    logger.debug("Derived %s (%s)", spec.name, spec.output.value)
    return _to_result(spec.name, spec.output, value)
