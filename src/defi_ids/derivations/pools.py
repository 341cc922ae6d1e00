"""
Pool derivations — идентификаторы пулов, yield-позиций и стейкинга

| Операция          | Поля                                            | Тег             | Выход  |
|-------------------|-------------------------------------------------|-----------------|--------|
| pool_id           | token0, token1, fee (после каноникализации)     | —               | digest |
| yield_position_id | user, poolId, amount, startTime                 | YIELD_POSITION  | digest |
| user_multi_pool   | user, poolIds[]                                 | MULTI_POOL_USER | digest |
| staking_config    | token, rewardRate, lockPeriod, maxStakers, now  | —               | bytes  |
| yield_strategy    | strategyName, pools[], weights[]                | YIELD_STRATEGY  | bytes  |
"""

from typing import Optional, Sequence

from defi_ids.core.domain import (
    DomainTag,
    FieldKind,
    Identifier,
    address,
    bytes32,
    raw_bytes,
    string,
    uint256,
)
from defi_ids.core.encoding import (
    DEFAULT_HASHER,
    DomainTaggedHasher,
    canonicalize,
    pack,
    pack_parallel,
    pack_tagged,
    typed_sequence,
)


def pool_id(
    token_a: Identifier,
    token_b: Identifier,
    fee: int,
    hasher: Optional[DomainTaggedHasher] = None,
) -> bytes:
    """
    Идентификатор торгового пула.

    Пара токенов неупорядочена: pool_id(a, b, fee) == pool_id(b, a, fee).

    Raises:
        IdenticalInputError: Если token_a == token_b
        ZeroValueError: Если один из токенов нулевой
    """
    pair = canonicalize(Identifier.address(token_a), Identifier.address(token_b))
    data = pack([address(pair.low), address(pair.high), uint256(fee)])
    return (hasher or DEFAULT_HASHER).digest(data)


def yield_position_id(
    user: Identifier,
    pool: Identifier,
    amount: int,
    start_time: int,
    hasher: Optional[DomainTaggedHasher] = None,
) -> bytes:
    """Идентификатор yield-позиции пользователя в пуле (pool — bytes32)."""
    fields = [address(user), bytes32(pool), uint256(amount), uint256(start_time)]
    return (hasher or DEFAULT_HASHER).derive(fields, DomainTag.YIELD_POSITION)


def user_multi_pool_hash(
    user: Identifier,
    pool_ids: Sequence[Identifier],
    hasher: Optional[DomainTaggedHasher] = None,
) -> bytes:
    """Хеш пользователя по набору пулов; порядок pool_ids значим."""
    fields = [address(user)] + typed_sequence(FieldKind.BYTES32, pool_ids)
    return (hasher or DEFAULT_HASHER).derive(fields, DomainTag.MULTI_POOL_USER)


def staking_pool_config(
    token: Identifier,
    reward_rate: int,
    lock_period: int,
    max_stakers: int,
    current_time: int,
) -> bytes:
    """
    Packed-конфигурация стейкинг-пула.

    current_time передаётся явно вызывающей стороной; одинаковое время
    даёт одинаковые байты.
    """
    return pack(
        [
            address(token),
            uint256(reward_rate),
            uint256(lock_period),
            uint256(max_stakers),
            uint256(current_time),
        ]
    )


def yield_strategy(
    strategy_name: str,
    pools: Sequence[Identifier],
    weights: Sequence[int],
) -> bytes:
    """
    Packed-кодирование стратегии: name ++ pools[] ++ weights[] ++ тег.

    Raises:
        LengthMismatchError: Если len(pools) != len(weights)
    """
    body = pack_parallel(
        typed_sequence(FieldKind.ADDRESS, pools),
        typed_sequence(FieldKind.UINT256, weights),
    )
    return pack_tagged([string(strategy_name), raw_bytes(body)], DomainTag.YIELD_STRATEGY)
