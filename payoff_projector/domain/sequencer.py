"""Account ordering applied once before a projection starts"""

from decimal import Decimal
from typing import Callable, Iterable, Optional, Tuple

from payoff_projector.domain.models import Account, SortOrder

SortKey = Callable[[Account], Decimal]


def sequence_accounts(
    accounts: Iterable[Account],
    sort_order: SortOrder = SortOrder.UNSORTED,
    key: Optional[SortKey] = None,
) -> Tuple[Account, ...]:
    """
    Order accounts for payment and snowball overflow precedence.

    A caller-supplied `key` sorts ascending and takes precedence over
    `sort_order`. Sorting is stable, so accounts with equal keys keep their
    input order (including the descending orders).
    """
    accounts = tuple(accounts)
    if key is not None:
        return tuple(sorted(accounts, key=key))

    sort_order = SortOrder(sort_order)
    if sort_order == SortOrder.APR:
        return tuple(sorted(accounts, key=lambda a: a.apr))
    elif sort_order == SortOrder.APR_DESCENDING:
        return tuple(sorted(accounts, key=lambda a: a.apr, reverse=True))
    elif sort_order == SortOrder.BALANCE:
        return tuple(sorted(accounts, key=lambda a: a.balance))
    elif sort_order == SortOrder.BALANCE_DESCENDING:
        return tuple(sorted(accounts, key=lambda a: a.balance, reverse=True))
    return accounts
