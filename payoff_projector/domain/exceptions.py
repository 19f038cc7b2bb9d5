"""Domain-specific exceptions"""

from decimal import Decimal


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Projection inputs are missing or invalid"""

    pass


class NonAmortizingPaymentError(DomainException):
    """An account's cycle payment does not exceed its cycle interest"""

    def __init__(
        self,
        account_name: str,
        month_index: int,
        interest_amount: Decimal,
        payment_amount: Decimal,
    ) -> None:
        self.account_name = account_name
        self.month_index = month_index
        self.interest_amount = interest_amount
        self.payment_amount = payment_amount
        super().__init__(
            f"{account_name}: minimum payment must exceed the monthly interest "
            f"(month {month_index}): {payment_amount} <= {interest_amount}"
        )


class ProjectionDidNotConvergeError(DomainException):
    """Balances were still outstanding after the maximum number of months"""

    def __init__(self, max_months: int, remaining_balance: Decimal) -> None:
        self.max_months = max_months
        self.remaining_balance = remaining_balance
        super().__init__(
            f"Projection did not converge within {max_months} months "
            f"({remaining_balance} still outstanding)"
        )
