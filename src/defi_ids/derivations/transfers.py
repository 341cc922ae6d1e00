"""
Transfer derivations — flash loan, cross-chain bridge, идентификатор транзакции

sourceChain/targetChain — числовые chain id (uint256), поэтому в bridge
нет двух соседних полей переменной длины.
"""

from typing import Optional

from defi_ids.core.domain import (
    DomainTag,
    Identifier,
    address,
    raw_bytes,
    string,
    uint256,
)
from defi_ids.core.encoding import DEFAULT_HASHER, DomainTaggedHasher, pack_tagged


def flash_loan_data(token: Identifier, amount: int, callback_data: bytes) -> bytes:
    """token ++ amount ++ callbackData ++ "FLASH_LOAN" (callbackData как есть)."""
    return pack_tagged(
        [address(token), uint256(amount), raw_bytes(callback_data)],
        DomainTag.FLASH_LOAN,
    )


def cross_chain_bridge_data(
    source_chain: int,
    target_chain: int,
    token: Identifier,
    amount: int,
    recipient: Identifier,
) -> bytes:
    return pack_tagged(
        [
            uint256(source_chain),
            uint256(target_chain),
            address(token),
            uint256(amount),
            address(recipient),
        ],
        DomainTag.CROSS_CHAIN_BRIDGE,
    )


def defi_transaction_id(
    tx_type: str,
    user: Identifier,
    timestamp: int,
    nonce: int,
    hasher: Optional[DomainTaggedHasher] = None,
) -> bytes:
    """
    Идентификатор DeFi-транзакции.

    Args:
        tx_type: Тип транзакции (например, 'SWAP')
        user: Адрес пользователя
        timestamp: Текущее время, передаётся вызывающей стороной
        nonce: Nonce пользователя

    Returns:
        32-байтный digest
    """
    fields = [string(tx_type), address(user), uint256(timestamp), uint256(nonce)]
    return (hasher or DEFAULT_HASHER).derive(fields, DomainTag.DEFI_TX)
