"""
Derivation Errors — таксономия ошибок derivation-операций

Все ошибки обнаруживаются синхронно, до формирования любого частичного
результата. Операция либо возвращает полное значение, либо бросает
исключение. Ретраи не применимы: это ошибки валидации входа.

error_code передаётся вызывающей стороне без изменений.
"""

from typing import Optional


class DerivationError(Exception):
    """Базовая ошибка всех derivation-операций."""

    error_code: str = "derivation_error"

    def __init__(self, message: str, error_code: Optional[str] = None):
        if error_code is not None:
            self.error_code = error_code
        super().__init__(f"{message} ({self.error_code})")


class IdenticalInputError(DerivationError):
    """Симметричная пара получила два одинаковых идентификатора."""

    error_code = "identical_input"


class ZeroValueError(DerivationError):
    """Передан нулевой (unset) идентификатор там, где нужен реальный."""

    error_code = "zero_value"


class LengthMismatchError(DerivationError):
    """Параллельные массивы batch-операции имеют разную длину."""

    error_code = "length_mismatch"


class EncodingError(DerivationError):
    """Значение не помещается в объявленную ширину или имеет неверный тип."""

    error_code = "encoding_error"


class QuantityRangeError(EncodingError):
    """Quantity вне диапазона uint256."""

    error_code = "quantity_out_of_range"


class UnknownOperationError(DerivationError):
    """Запрошена операция, отсутствующая в каталоге."""

    error_code = "unknown_operation"
