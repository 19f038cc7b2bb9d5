"""Debt payoff projection engine - drives the month-by-month simulation"""

from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from payoff_projector.domain.allocation import AccountState, allocate_minimum_payments, allocate_snowball
from payoff_projector.domain.exceptions import ProjectionDidNotConvergeError, ValidationError
from payoff_projector.domain.interest import RoundingPolicy, ensure_amortizing, to_decimal
from payoff_projector.domain.models import Account, AccountLedger, MonthlyEntry, Projection, SortOrder
from payoff_projector.domain.sequencer import SortKey, sequence_accounts
from payoff_projector.utils.date_utils import add_months, month_start

DEFAULT_MAX_MONTHS = 1200


def validate_inputs(accounts: List[Account], extra_monthly_amount: Decimal, max_months: int) -> None:
    """Reject inputs that cannot describe a projection"""
    if not accounts:
        raise ValidationError("At least one account is required")

    invalid = [a.name for a in accounts if a.minimum_payment <= 0]
    if invalid:
        raise ValidationError(f"Minimum payment must be greater than zero: {', '.join(invalid)}")

    negative = [a.name for a in accounts if a.balance < 0 or a.apr < 0]
    if negative:
        raise ValidationError(f"Balance and APR must not be negative: {', '.join(negative)}")

    if extra_monthly_amount < 0:
        raise ValidationError(f"Extra monthly amount must not be negative: {extra_monthly_amount}")

    if max_months < 1:
        raise ValidationError(f"max_months must be at least 1: {max_months}")


def generate_projection(
    accounts: Iterable[Account],
    start_date: Optional[date] = None,
    snowballing: bool = False,
    extra_monthly_amount: Decimal = Decimal("0"),
    sort_order: SortOrder = SortOrder.UNSORTED,
    rounding: RoundingPolicy = RoundingPolicy(),
    max_months: int = DEFAULT_MAX_MONTHS,
    sort_key: Optional[SortKey] = None,
) -> Projection:
    """
    Main entry point: simulate monthly payments until every account is paid off.

    Flow:
    1. Validate inputs and order the accounts (the order never changes after this)
    2. Check every account's first cycle payment covers its interest
    3. Each month, run the minimum-only or snowball allocation and record entries
    4. Stop when all balances reach zero

    `sort_key`, when given, orders the accounts instead of `sort_order`.

    Raises:
        ValidationError: inputs are malformed or too large to round
        NonAmortizingPaymentError: an account's payment cannot cover its interest
        ProjectionDidNotConvergeError: balances remain after `max_months` months
    """
    accounts = list(accounts)
    extra_monthly_amount = to_decimal(extra_monthly_amount)
    validate_inputs(accounts, extra_monthly_amount, max_months)

    ordered = sequence_accounts(accounts, sort_order, key=sort_key)
    for account in ordered:
        ensure_amortizing(account, account.balance, 0, rounding)

    states = [AccountState(account=a, balance=a.balance) for a in ordered]
    entries: List[List[MonthlyEntry]] = [[] for _ in ordered]
    monthly_budget = sum((a.minimum_payment for a in ordered), Decimal("0"))
    if snowballing:
        monthly_budget += extra_monthly_amount

    first_month = month_start(start_date)
    months: List[date] = []

    while sum(s.balance for s in states) > 0:
        month_index = len(months)
        if month_index >= max_months:
            raise ProjectionDidNotConvergeError(max_months, sum(s.balance for s in states))

        months.append(add_months(first_month, month_index))
        if snowballing:
            states, month_entries = allocate_snowball(states, monthly_budget, month_index, rounding)
        else:
            states, month_entries = allocate_minimum_payments(states, month_index, rounding)

        for ledger_entries, entry in zip(entries, month_entries):
            if entry is not None:
                ledger_entries.append(entry)

    return Projection(
        ledgers=tuple(AccountLedger(account=a, entries=tuple(e)) for a, e in zip(ordered, entries)),
        start_date=first_month,
        months=tuple(months),
        snowballing=snowballing,
        extra_monthly_amount=extra_monthly_amount,
        sort_order=SortOrder(sort_order),
    )
