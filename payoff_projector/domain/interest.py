"""Interest and cycle payment calculations for amortizing accounts"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Union

from payoff_projector.domain.exceptions import NonAmortizingPaymentError, ValidationError
from payoff_projector.domain.models import Account

Number = Union[Decimal, int, float, str]


class CompoundingPeriod(Enum):
    """Number of periods an annual rate is divided into"""

    DAILY = 365
    WEEKLY = 52
    MONTHLY = 12
    QUARTERLY = 4
    YEARLY = 1


def to_decimal(value: Number) -> Decimal:
    """Convert through str so floats keep their printed value (0.12, not 0.1199...)"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class RoundingPolicy:
    """
    How currency amounts are rounded.

    `places` is the currency's minor-unit precision (2 for dollars) and
    `rounding` is one of the `decimal` module's rounding constants.
    """

    places: int = 2
    rounding: str = ROUND_HALF_EVEN

    @property
    def quantum(self) -> Decimal:
        return Decimal(1).scaleb(-self.places)

    def apply(self, amount: Decimal) -> Decimal:
        try:
            return amount.quantize(self.quantum, rounding=self.rounding)
        except InvalidOperation:
            raise ValidationError(f"Amount too large to round to {self.places} places: {amount}")


def _maybe_round(value: Decimal, rounding: Optional[RoundingPolicy]) -> Decimal:
    return rounding.apply(value) if rounding is not None else value


def convert_annual_rate(
    annual_rate: Number,
    period: CompoundingPeriod = CompoundingPeriod.MONTHLY,
    rate_places: Optional[int] = None,
) -> Decimal:
    """Convert an annual rate to a per-period rate, optionally rounded to `rate_places`"""
    rate = to_decimal(annual_rate) / period.value
    if rate_places is not None:
        rate = round(rate, rate_places)
    return rate


def simple_interest(
    principal: Number,
    annual_rate: Number,
    periods: int,
    period: CompoundingPeriod = CompoundingPeriod.MONTHLY,
    rounding: Optional[RoundingPolicy] = None,
) -> Decimal:
    """
    Non-compounded interest, I = PRT.

    The result is left unrounded unless a rounding policy is given.
    """
    value = to_decimal(principal) * convert_annual_rate(annual_rate, period) * periods
    return _maybe_round(value, rounding)


def future_value(
    present_value: Number,
    annual_rate: Number,
    periods: int,
    period: CompoundingPeriod = CompoundingPeriod.MONTHLY,
    rounding: Optional[RoundingPolicy] = None,
) -> Decimal:
    """Value of `present_value` after compounding for `periods` periods, PV(1 + r)^n"""
    rate = convert_annual_rate(annual_rate, period)
    return _maybe_round(to_decimal(present_value) * (1 + rate) ** periods, rounding)


def compound_interest(
    principal: Number,
    annual_rate: Number,
    years: int,
    period: CompoundingPeriod = CompoundingPeriod.MONTHLY,
    rounding: Optional[RoundingPolicy] = None,
) -> Decimal:
    """
    Interest earned on `principal` compounded every `period` for `years` years.

    Example:
        $10,000 at 8% compounded quarterly for 2 years → $1,716.59
    """
    principal = to_decimal(principal)
    value = future_value(principal, annual_rate, period.value * years, period) - principal
    return _maybe_round(value, rounding)


def future_value_of_payments(
    payment: Number,
    annual_rate: Number,
    periods: int,
    period: CompoundingPeriod = CompoundingPeriod.MONTHLY,
    rounding: Optional[RoundingPolicy] = None,
) -> Decimal:
    """Accumulated value of `periods` equal end-of-period payments, PMT((1 + r)^n - 1) / r"""
    payment = to_decimal(payment)
    rate = convert_annual_rate(annual_rate, period)
    if rate == 0:
        return _maybe_round(payment * periods, rounding)
    return _maybe_round(payment * ((1 + rate) ** periods - 1) / rate, rounding)


def present_value(
    future_amount: Number,
    annual_rate: Number,
    periods: int,
    period: CompoundingPeriod = CompoundingPeriod.MONTHLY,
    rounding: Optional[RoundingPolicy] = None,
) -> Decimal:
    """Amount that grows to `future_amount` after `periods` periods, FV / (1 + r)^n"""
    rate = convert_annual_rate(annual_rate, period)
    return _maybe_round(to_decimal(future_amount) / (1 + rate) ** periods, rounding)


def monthly_interest(balance: Decimal, apr: Decimal, rounding: RoundingPolicy) -> Decimal:
    """Interest charged on `balance` for one monthly cycle"""
    return simple_interest(balance, apr, 1, CompoundingPeriod.MONTHLY, rounding)


def cycle_payment(account: Account) -> Decimal:
    """Payment due on an account each cycle"""
    return account.minimum_payment


def ensure_amortizing(
    account: Account,
    balance: Decimal,
    month_index: int,
    rounding: RoundingPolicy,
) -> None:
    """Raise NonAmortizingPaymentError if the cycle payment cannot reduce `balance`"""
    if balance <= 0:
        return
    interest = monthly_interest(balance, account.apr, rounding)
    payment = cycle_payment(account)
    if payment <= interest:
        raise NonAmortizingPaymentError(
            account_name=account.name,
            month_index=month_index,
            interest_amount=interest,
            payment_amount=payment,
        )


def amortized_payment(
    principal: Number,
    annual_rate: Number,
    number_of_payments: int,
    rounding: RoundingPolicy,
) -> Decimal:
    """
    Level monthly payment that retires `principal` in `number_of_payments` payments.

    Standard annuity formula: P * r / (1 - (1 + r)^-n), with r the monthly
    rate. A zero rate spreads the principal evenly.

    Example:
        $10,000 at 6% over 36 months → $304.22
    """
    if number_of_payments < 1:
        raise ValidationError("number_of_payments must be at least 1")
    principal = to_decimal(principal)
    if principal < 0 or to_decimal(annual_rate) < 0:
        raise ValidationError("principal and annual_rate must not be negative")

    rate = convert_annual_rate(annual_rate, CompoundingPeriod.MONTHLY)
    if rate == 0:
        return rounding.apply(principal / number_of_payments)

    value = principal * rate / (1 - (1 + rate) ** -number_of_payments)
    return rounding.apply(value)
