"""
DomainTag — теги доменного разделения

Каждый тег — фиксированный ASCII-литерал, однозначно связанный с одной
derivation-операцией. Тег дописывается в конец packed-кодирования перед
хешированием, поэтому операции с совпадающими полями никогда не дают
одинаковый digest.

Теги не выводятся из входа, не пустые и не переиспользуются.
"""

from enum import Enum


class DomainTag(str, Enum):
    """Тег доменного разделения"""

    LIMIT_ORDER = "LIMIT_ORDER"
    YIELD_POSITION = "YIELD_POSITION"
    FLASH_LOAN = "FLASH_LOAN"
    MULTI_POOL_USER = "MULTI_POOL_USER"
    YIELD_STRATEGY = "YIELD_STRATEGY"
    CROSS_CHAIN_BRIDGE = "CROSS_CHAIN_BRIDGE"
    DEFI_TX = "DEFI_TX"
    STOP_LOSS_ORDER = "STOP_LOSS_ORDER"
    TAKE_PROFIT_ORDER = "TAKE_PROFIT_ORDER"
    TRAILING_STOP_ORDER = "TRAILING_STOP_ORDER"

    def to_bytes(self) -> bytes:
        """ASCII-байты тега (именно они дописываются перед хешированием)."""
        return self.value.encode("ascii")
