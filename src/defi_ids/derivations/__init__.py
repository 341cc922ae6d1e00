"""
Derivations — каталог операций над DeFi-сущностями.

Каждая операция — stateless композиция canonicalize / pack / pack_parallel /
derive с фиксированным layout полей и собственным тегом.
"""

from defi_ids.derivations.pools import (
    pool_id,
    staking_pool_config,
    user_multi_pool_hash,
    yield_position_id,
    yield_strategy,
)
from defi_ids.derivations.trading import (
    limit_order,
    stop_loss_order,
    swap_data,
    take_profit_order,
    trading_position,
    trailing_stop_order,
)
from defi_ids.derivations.transfers import (
    cross_chain_bridge_data,
    defi_transaction_id,
    flash_loan_data,
)
from defi_ids.derivations.registry import (
    OPERATIONS,
    OperationSpec,
    OutputKind,
    ParamSpec,
    convert_params,
    derive_from_request,
    get_operation,
    list_operations,
)

__all__ = [
    # Pools
    "pool_id",
    "yield_position_id",
    "user_multi_pool_hash",
    "staking_pool_config",
    "yield_strategy",
    # Trading
    "trading_position",
    "swap_data",
    "limit_order",
    "stop_loss_order",
    "take_profit_order",
    "trailing_stop_order",
    # Transfers
    "flash_loan_data",
    "cross_chain_bridge_data",
    "defi_transaction_id",
    # Registry
    "OPERATIONS",
    "OperationSpec",
    "OutputKind",
    "ParamSpec",
    "convert_params",
    "derive_from_request",
    "get_operation",
    "list_operations",
]
