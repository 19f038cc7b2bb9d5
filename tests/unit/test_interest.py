"""Unit tests for interest and cycle payment calculations"""

import pytest
from decimal import ROUND_HALF_UP, Decimal
from payoff_projector.domain.exceptions import NonAmortizingPaymentError, ValidationError
from payoff_projector.domain.interest import (
    CompoundingPeriod,
    RoundingPolicy,
    amortized_payment,
    compound_interest,
    convert_annual_rate,
    cycle_payment,
    ensure_amortizing,
    future_value,
    future_value_of_payments,
    monthly_interest,
    present_value,
    simple_interest,
)
from payoff_projector.domain.models import Account


def test_monthly_interest_one_percent(rounding: RoundingPolicy):
    """12% APR is 1% per month"""
    assert monthly_interest(Decimal("1000.00"), Decimal("0.12"), rounding) == Decimal("10.00")


def test_monthly_interest_rounds_to_minor_unit(rounding: RoundingPolicy):
    """$1234.56 at 18% → 18.5184 → $18.52"""
    assert monthly_interest(Decimal("1234.56"), Decimal("0.18"), rounding) == Decimal("18.52")


def test_monthly_interest_uses_supplied_rounding_mode():
    """$108.50 at 12% is exactly 1.085; half-even and half-up disagree"""
    half_even = RoundingPolicy()
    half_up = RoundingPolicy(rounding=ROUND_HALF_UP)

    assert monthly_interest(Decimal("108.50"), Decimal("0.12"), half_even) == Decimal("1.08")
    assert monthly_interest(Decimal("108.50"), Decimal("0.12"), half_up) == Decimal("1.09")


def test_monthly_interest_zero_decimal_currency():
    """Currencies without minor units round to whole numbers"""
    yen = RoundingPolicy(places=0)
    assert monthly_interest(Decimal("150000"), Decimal("0.15"), yen) == Decimal("1875")


def test_monthly_interest_zero_apr(rounding: RoundingPolicy):
    assert monthly_interest(Decimal("500.00"), Decimal("0"), rounding) == Decimal("0.00")


def test_convert_annual_rate_periods():
    assert convert_annual_rate(Decimal("0.12")) == Decimal("0.01")
    assert convert_annual_rate(Decimal("0.12"), CompoundingPeriod.QUARTERLY) == Decimal("0.03")
    assert convert_annual_rate(Decimal("0.12"), CompoundingPeriod.YEARLY) == Decimal("0.12")
    assert convert_annual_rate(Decimal("0.052"), CompoundingPeriod.WEEKLY) == Decimal("0.001")


def test_convert_annual_rate_rate_places():
    """5% monthly is 0.0041666...; rounded to 5 places → 0.00417"""
    assert convert_annual_rate(Decimal("0.05"), rate_places=5) == Decimal("0.00417")


def test_simple_interest_multiple_periods(rounding: RoundingPolicy):
    """I = PRT over months and years"""
    assert simple_interest(Decimal("30000"), Decimal("0.05"), 1, rounding=rounding) == Decimal("125.00")
    assert simple_interest(Decimal("30000"), Decimal("0.05"), 12, rounding=rounding) == Decimal("1500.00")
    assert (
        simple_interest(Decimal("30000"), Decimal("0.05"), 4, CompoundingPeriod.YEARLY, rounding)
        == Decimal("6000.00")
    )


def test_simple_interest_unrounded_without_policy():
    value = simple_interest(Decimal("100"), Decimal("0.05"), 1)
    assert value > Decimal("0.4166")
    assert value < Decimal("0.4167")


def test_cycle_payment_is_minimum(single_card: Account):
    assert cycle_payment(single_card) == Decimal("50.00")


def test_ensure_amortizing_accepts_paying_account(single_card: Account, rounding: RoundingPolicy):
    ensure_amortizing(single_card, single_card.balance, 0, rounding)


def test_ensure_amortizing_rejects_payment_equal_to_interest(rounding: RoundingPolicy):
    """$10,000 at 24% accrues $200/month; a $200 minimum never reduces the balance"""
    account = Account(name="Stuck", balance=Decimal("10000"), apr=Decimal("0.24"), minimum_payment=Decimal("200"))

    with pytest.raises(NonAmortizingPaymentError) as exc_info:
        ensure_amortizing(account, account.balance, 3, rounding)

    error = exc_info.value
    assert error.account_name == "Stuck"
    assert error.month_index == 3
    assert error.interest_amount == Decimal("200.00")
    assert error.payment_amount == Decimal("200")
    assert "Stuck" in str(error)


def test_ensure_amortizing_ignores_paid_off_balance(rounding: RoundingPolicy):
    account = Account(name="Stuck", balance=Decimal("10000"), apr=Decimal("0.24"), minimum_payment=Decimal("100"))
    ensure_amortizing(account, Decimal("0"), 5, rounding)


def test_amortized_payment_standard_loan(rounding: RoundingPolicy):
    """$10,000 at 6% over 36 months"""
    assert amortized_payment(Decimal("10000"), Decimal("0.06"), 36, rounding) == Decimal("304.22")


def test_amortized_payment_zero_rate(rounding: RoundingPolicy):
    assert amortized_payment(Decimal("1200"), Decimal("0"), 12, rounding) == Decimal("100.00")


def test_amortized_payment_requires_a_payment(rounding: RoundingPolicy):
    with pytest.raises(ValidationError):
        amortized_payment(Decimal("1000"), Decimal("0.05"), 0, rounding)


def test_amortized_payment_rejects_unroundable_principal(rounding: RoundingPolicy):
    """Amounts beyond decimal precision surface as validation errors"""
    with pytest.raises(ValidationError, match="too large"):
        amortized_payment(Decimal("1e40"), Decimal("0.06"), 36, rounding)


def test_rounding_policy_rejects_amount_beyond_precision(rounding: RoundingPolicy):
    with pytest.raises(ValidationError):
        rounding.apply(Decimal("1e30"))


def test_float_inputs_keep_their_printed_value(rounding: RoundingPolicy):
    """0.12 as a float converts to exactly 0.12, not 0.11999..."""
    assert convert_annual_rate(0.12) == Decimal("0.01")
    assert simple_interest(1000.0, 0.12, 1) == Decimal("10.00")
    assert amortized_payment(10000.0, 0.06, 36, rounding) == Decimal("304.22")


def test_future_value_monthly(rounding: RoundingPolicy):
    """$1000 at 12% compounded monthly for a year: 1000 * 1.01^12"""
    assert future_value(Decimal("1000"), Decimal("0.12"), 12, rounding=rounding) == Decimal("1126.83")


def test_future_value_unrounded_without_policy():
    value = future_value(Decimal("1000"), Decimal("0.12"), 12)
    assert value > Decimal("1126.825")
    assert value < Decimal("1126.826")


def test_compound_interest_quarterly(rounding: RoundingPolicy):
    """$10,000 at 8% compounded quarterly for 2 years"""
    interest = compound_interest(
        Decimal("10000"), Decimal("0.08"), 2, CompoundingPeriod.QUARTERLY, rounding
    )
    assert interest == Decimal("1716.59")


def test_compound_interest_exceeds_simple_interest(rounding: RoundingPolicy):
    simple = simple_interest(Decimal("1000"), Decimal("0.12"), 12, rounding=rounding)
    compound = compound_interest(Decimal("1000"), Decimal("0.12"), 1, rounding=rounding)

    assert simple == Decimal("120.00")
    assert compound == Decimal("126.83")


def test_future_value_of_payments(rounding: RoundingPolicy):
    """$100 a month for a year at 12%"""
    assert future_value_of_payments(Decimal("100"), Decimal("0.12"), 12, rounding=rounding) == Decimal("1268.25")


def test_future_value_of_payments_zero_rate(rounding: RoundingPolicy):
    assert future_value_of_payments(Decimal("100"), Decimal("0"), 12, rounding=rounding) == Decimal("1200.00")


def test_present_value_discounts_future_amount(rounding: RoundingPolicy):
    """Discounting the one-year future value of $1000 lands back on $1000"""
    assert present_value(Decimal("1126.83"), Decimal("0.12"), 12, rounding=rounding) == Decimal("1000.00")
    assert present_value(Decimal("500"), Decimal("0"), 24, rounding=rounding) == Decimal("500.00")
