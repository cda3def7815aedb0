"""Trading fee calculation in basis points."""

from __future__ import annotations

import enum
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Union

AmountLike = Union[Decimal, int, str]

_MAX_BPS = 10_000
_RESULT_PLACES = 8
_MAKER_SHARE = Decimal("0.5")


class Side(enum.Enum):
    """Which side of the trade pays the fee."""

    MAKER = "maker"
    TAKER = "taker"


class FeeError(ValueError):
    """Base class for fee calculation errors."""


class NonPositiveAmountError(FeeError):
    """Raised when the traded amount is zero or negative."""

    def __init__(self) -> None:
        super().__init__("amount must be positive")


class BadBpsError(FeeError):
    """Raised when the rate in basis points is outside 0..10000."""

    def __init__(self) -> None:
        super().__init__("rate basis points out of range")


def _to_decimal(amount: AmountLike) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, bool):
        raise TypeError("amount must be a decimal number")
    if isinstance(amount, float):
        return Decimal(str(amount))
    if isinstance(amount, (int, str)):
        return Decimal(amount)
    raise TypeError("amount must be a decimal number")


def _round_dp(value: Decimal, places: int) -> Decimal:
    """Round to at most ``places`` fractional digits, ties to even."""
    if value.as_tuple().exponent >= -places:
        return value
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)


def fee(amount: AmountLike, bps: int, side: Side) -> Decimal:
    """Return the fee on ``amount`` at ``bps`` basis points for ``side``.

    Makers pay half the taker rate. The result is rounded to eight
    decimal places using banker's rounding.
    """
    value = _to_decimal(amount)
    if isinstance(bps, bool) or not isinstance(bps, int):
        raise TypeError("bps must be an integer")
    if value <= 0:
        raise NonPositiveAmountError()
    if not 0 <= bps <= _MAX_BPS:
        raise BadBpsError()
    with localcontext() as ctx:
        ctx.prec = 80
        base = value * Decimal(bps) / Decimal(_MAX_BPS)
        if side is Side.MAKER:
            base = base * _MAKER_SHARE
        elif side is not Side.TAKER:
            raise TypeError("side must be a Side")
        return _round_dp(base, _RESULT_PLACES)