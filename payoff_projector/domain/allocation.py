"""
Monthly payment allocation across accounts.

Both strategies are pure functions of the account states at month start.
They return the states after this month's payments together with one
entry per account (None for accounts already paid off), in the same
order the states were given.
"""

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from payoff_projector.domain.interest import RoundingPolicy, cycle_payment, ensure_amortizing, monthly_interest
from payoff_projector.domain.models import Account, MonthlyEntry

ZERO = Decimal("0")


@dataclass(frozen=True)
class AccountState:
    """Running balance of an account between months"""

    account: Account
    balance: Decimal

    @property
    def active(self) -> bool:
        return self.balance > 0


MonthResult = Tuple[List[AccountState], List[Optional[MonthlyEntry]]]


def _minimum_entry(
    state: AccountState,
    month_index: int,
    rounding: RoundingPolicy,
    absorb_interest_on_payoff: bool,
) -> MonthlyEntry:
    """Entry for an account paying only its cycle payment this month"""
    ensure_amortizing(state.account, state.balance, month_index, rounding)
    interest = monthly_interest(state.balance, state.account.apr, rounding)
    payment = cycle_payment(state.account)

    if state.balance > payment - interest:
        return MonthlyEntry(
            payment_amount=payment,
            interest_amount=interest,
            running_balance=state.balance - payment + interest,
        )

    # Payment would overshoot: cap it to clear the account
    payoff = state.balance + interest if absorb_interest_on_payoff else state.balance
    return MonthlyEntry(payment_amount=payoff, interest_amount=interest, running_balance=ZERO)


def allocate_minimum_payments(
    states: Sequence[AccountState],
    month_index: int,
    rounding: RoundingPolicy,
) -> MonthResult:
    """Every active account pays its minimum; nothing is redirected"""
    new_states: List[AccountState] = []
    entries: List[Optional[MonthlyEntry]] = []

    for state in states:
        if not state.active:
            new_states.append(state)
            entries.append(None)
            continue
        entry = _minimum_entry(state, month_index, rounding, absorb_interest_on_payoff=False)
        new_states.append(replace(state, balance=entry.running_balance))
        entries.append(entry)

    return new_states, entries


def allocate_snowball(
    states: Sequence[AccountState],
    monthly_budget: Decimal,
    month_index: int,
    rounding: RoundingPolicy,
) -> MonthResult:
    """
    Pay minimums, then cascade the unspent budget down the account order.

    Pass 1 charges every active account its minimum (a payoff absorbs the
    month's interest). Whatever is left of `monthly_budget`, including the
    minimums of accounts already retired, goes to the first account still
    carrying a balance. When that retires the account with budget to spare,
    the remainder moves on to the next account in the same month.
    """
    # Pass 1 - minimum payments
    new_states, entries = [], []
    remaining_budget = monthly_budget
    for state in states:
        if not state.active:
            new_states.append(state)
            entries.append(None)
            continue
        entry = _minimum_entry(state, month_index, rounding, absorb_interest_on_payoff=True)
        new_states.append(replace(state, balance=entry.running_balance))
        entries.append(entry)
        remaining_budget -= entry.payment_amount

    # Pass 2 - overflow cascade, same order
    for i, state in enumerate(new_states):
        balance = state.balance
        if balance <= 0:
            continue
        entry = entries[i]

        if balance > remaining_budget:
            entries[i] = replace(
                entry,
                payment_amount=entry.payment_amount + remaining_budget,
                running_balance=balance - remaining_budget,
            )
            new_states[i] = replace(state, balance=balance - remaining_budget)
            break

        entries[i] = replace(entry, payment_amount=entry.payment_amount + balance, running_balance=ZERO)
        new_states[i] = replace(state, balance=ZERO)
        if balance == remaining_budget:
            break
        remaining_budget -= balance

    return new_states, entries
