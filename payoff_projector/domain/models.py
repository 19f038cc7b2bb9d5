"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional, Tuple


class SortOrder(str, Enum):
    """Order in which accounts receive payments and snowball overflow"""

    UNSORTED = "unsorted"
    APR = "apr"
    APR_DESCENDING = "apr_descending"
    BALANCE = "balance"
    BALANCE_DESCENDING = "balance_descending"


@dataclass(frozen=True)
class Account:
    """Credit account as it stands before the projection starts"""

    name: str
    balance: Decimal
    apr: Decimal  # annual rate, 0.18 for 18%
    minimum_payment: Decimal
    account_number: Optional[str] = None


@dataclass(frozen=True)
class MonthlyEntry:
    """One month of activity on an account"""

    payment_amount: Decimal
    interest_amount: Decimal
    running_balance: Decimal  # after payment

    @property
    def principal_amount(self) -> Decimal:
        return self.payment_amount - self.interest_amount


@dataclass(frozen=True)
class AccountLedger:
    """Monthly entries for a single account, oldest first"""

    account: Account
    entries: Tuple[MonthlyEntry, ...] = ()

    @property
    def running_balance(self) -> Decimal:
        return self.entries[-1].running_balance if self.entries else self.account.balance

    @property
    def months_to_payoff(self) -> int:
        return len(self.entries)

    @property
    def total_interest(self) -> Decimal:
        return sum((e.interest_amount for e in self.entries), Decimal("0"))

    @property
    def total_paid(self) -> Decimal:
        return sum((e.payment_amount for e in self.entries), Decimal("0"))


@dataclass(frozen=True)
class MonthlyTotal:
    """Payments and interest summed across all accounts for one month"""

    month: date
    payment_amount: Decimal
    interest_amount: Decimal
    remaining_balance: Decimal

    @property
    def principal_amount(self) -> Decimal:
        return self.payment_amount - self.interest_amount


@dataclass(frozen=True)
class Projection:
    """
    Completed payoff projection.

    Ledgers are in sequencer order, which is also the order snowball
    overflow is handed out in. `months` holds the first day of every
    simulated calendar month.
    """

    ledgers: Tuple[AccountLedger, ...]
    start_date: date
    months: Tuple[date, ...]
    snowballing: bool = False
    extra_monthly_amount: Decimal = Decimal("0")
    sort_order: SortOrder = SortOrder.UNSORTED

    @property
    def minimum_monthly_budget(self) -> Decimal:
        return sum((ledger.account.minimum_payment for ledger in self.ledgers), Decimal("0"))

    @property
    def total_monthly_budget(self) -> Decimal:
        extra = self.extra_monthly_amount if self.snowballing else Decimal("0")
        return self.minimum_monthly_budget + extra

    @property
    def number_of_months(self) -> int:
        return len(self.months)

    @property
    def total_interest(self) -> Decimal:
        return sum((ledger.total_interest for ledger in self.ledgers), Decimal("0"))

    @property
    def total_paid(self) -> Decimal:
        return sum((ledger.total_paid for ledger in self.ledgers), Decimal("0"))

    @property
    def total_original_balance(self) -> Decimal:
        return sum((ledger.account.balance for ledger in self.ledgers), Decimal("0"))

    @property
    def payoff_date(self) -> Optional[date]:
        return self.months[-1] if self.months else None

    def monthly_totals(self) -> List[MonthlyTotal]:
        """Sum every account's activity per simulated month (reporting only)"""
        totals = []
        for i, month in enumerate(self.months):
            payment = Decimal("0")
            interest = Decimal("0")
            remaining = Decimal("0")
            for ledger in self.ledgers:
                if i < len(ledger.entries):
                    entry = ledger.entries[i]
                    payment += entry.payment_amount
                    interest += entry.interest_amount
                    remaining += entry.running_balance
            totals.append(
                MonthlyTotal(
                    month=month,
                    payment_amount=payment,
                    interest_amount=interest,
                    remaining_balance=remaining,
                )
            )
        return totals
