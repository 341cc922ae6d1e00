"""
Trading derivations — позиции, свопы и ордера

| Операция            | Поля                                                         | Тег                 | Выход          |
|---------------------|--------------------------------------------------------------|---------------------|----------------|
| trading_position    | user, tokenIn, tokenOut, amountIn, minAmountOut              | —                   | digest + bytes |
| swap_data           | path[], amounts[], deadline                                  | —                   | bytes          |
| limit_order         | maker, taker, tokenIn, tokenOut, amountIn, amountOut, nonce  | LIMIT_ORDER         | digest + bytes |
| stop_loss_order     | user, token, amount, stopPrice, triggerPrice                 | STOP_LOSS_ORDER     | bytes          |
| take_profit_order   | user, token, amount, takeProfitPrice                         | TAKE_PROFIT_ORDER   | bytes          |
| trailing_stop_order | user, token, amount, trailingPercent, activationPrice        | TRAILING_STOP_ORDER | bytes          |

Для тегированных операций возвращаемые байты включают хвостовой тег и
совпадают с последовательностью, подаваемой в хеш.
"""

from typing import Optional, Sequence

from defi_ids.core.domain import (
    DomainTag,
    FieldKind,
    HashedEncoding,
    Identifier,
    address,
    raw_bytes,
    uint256,
)
from defi_ids.core.encoding import (
    DEFAULT_HASHER,
    DomainTaggedHasher,
    pack,
    pack_parallel,
    pack_tagged,
    typed_sequence,
)


# =============================================================================
# ПОЗИЦИИ И СВОПЫ
# =============================================================================


def trading_position(
    user: Identifier,
    token_in: Identifier,
    token_out: Identifier,
    amount_in: int,
    min_amount_out: int,
    hasher: Optional[DomainTaggedHasher] = None,
) -> HashedEncoding:
    """
    Идентификатор торговой позиции и её packed-кодирование.

    Returns:
        HashedEncoding(digest=H(data), data)
    """
    data = pack(
        [
            address(user),
            address(token_in),
            address(token_out),
            uint256(amount_in),
            uint256(min_amount_out),
        ]
    )
    return HashedEncoding(digest=(hasher or DEFAULT_HASHER).digest(data), data=data)


def swap_data(
    path: Sequence[Identifier],
    amounts: Sequence[int],
    deadline: int,
) -> bytes:
    """
    Packed-кодирование свопа: pack(path) ++ pack(amounts) ++ deadline.

    Raises:
        LengthMismatchError: Если len(path) != len(amounts)
    """
    body = pack_parallel(
        typed_sequence(FieldKind.ADDRESS, path),
        typed_sequence(FieldKind.UINT256, amounts),
    )
    return pack([raw_bytes(body), uint256(deadline)])


# =============================================================================
# ОРДЕРА
# =============================================================================


def limit_order(
    maker: Identifier,
    taker: Identifier,
    token_in: Identifier,
    token_out: Identifier,
    amount_in: int,
    amount_out: int,
    nonce: int,
    hasher: Optional[DomainTaggedHasher] = None,
) -> HashedEncoding:
    """
    Хеш лимитного ордера.

    order_data = maker ++ taker ++ tokenIn ++ tokenOut ++ amountIn ++ amountOut
                 ++ nonce ++ "LIMIT_ORDER"
    order_hash = H(order_data)
    """
    data = pack_tagged(
        [
            address(maker),
            address(taker),
            address(token_in),
            address(token_out),
            uint256(amount_in),
            uint256(amount_out),
            uint256(nonce),
        ],
        DomainTag.LIMIT_ORDER,
    )
    return HashedEncoding(digest=(hasher or DEFAULT_HASHER).digest(data), data=data)


def stop_loss_order(
    user: Identifier,
    token: Identifier,
    amount: int,
    stop_price: int,
    trigger_price: int,
) -> bytes:
    return pack_tagged(
        [
            address(user),
            address(token),
            uint256(amount),
            uint256(stop_price),
            uint256(trigger_price),
        ],
        DomainTag.STOP_LOSS_ORDER,
    )


def take_profit_order(
    user: Identifier,
    token: Identifier,
    amount: int,
    take_profit_price: int,
) -> bytes:
    return pack_tagged(
        [address(user), address(token), uint256(amount), uint256(take_profit_price)],
        DomainTag.TAKE_PROFIT_ORDER,
    )


def trailing_stop_order(
    user: Identifier,
    token: Identifier,
    amount: int,
    trailing_percent: int,
    activation_price: int,
) -> bytes:
    """trailing_percent — целое число (единицы задаёт вызывающая сторона)."""
    return pack_tagged(
        [
            address(user),
            address(token),
            uint256(amount),
            uint256(trailing_percent),
            uint256(activation_price),
        ],
        DomainTag.TRAILING_STOP_ORDER,
    )
