"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from payoff_projector.domain.models import SortOrder

MAX_AMOUNT = Decimal("1000000000000")
MAX_APR = Decimal("100")


class AccountSchema(BaseModel):
    """Credit account supplied by the caller"""

    name: str = Field(..., min_length=1, description="Account display name")
    balance: Decimal = Field(..., ge=0, le=MAX_AMOUNT, description="Current balance")
    apr: Decimal = Field(..., ge=0, le=MAX_APR, description="Annual percentage rate, 0.18 for 18%")
    minimum_payment: Decimal = Field(..., gt=0, le=MAX_AMOUNT, description="Fixed monthly minimum payment")
    account_number: Optional[str] = None


class ProjectionRequest(BaseModel):
    """Request body for POST /v1/projection"""

    accounts: List[AccountSchema] = Field(..., min_length=1)
    start_date: Optional[date] = None
    snowballing: bool = False
    extra_monthly_amount: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT, description="Only applied when snowballing")
    sort_order: SortOrder = SortOrder.UNSORTED
    include_totals: bool = True


class MonthlyEntrySchema(BaseModel):
    """Single month of activity on an account"""

    month: date
    payment_amount: Decimal
    interest_amount: Decimal
    principal_amount: Decimal
    running_balance: Decimal


class LedgerSchema(BaseModel):
    """Payment schedule for one account"""

    account: AccountSchema
    months_to_payoff: int
    total_interest: Decimal
    total_paid: Decimal
    entries: List[MonthlyEntrySchema]


class MonthlyTotalSchema(BaseModel):
    """Activity summed across all accounts for one month"""

    month: date
    payment_amount: Decimal
    interest_amount: Decimal
    principal_amount: Decimal
    remaining_balance: Decimal


class ProjectionResponse(BaseModel):
    """Response for POST /v1/projection"""

    start_date: date
    payoff_date: Optional[date] = None
    snowballing: bool
    sort_order: SortOrder
    number_of_months: int
    total_interest: Decimal
    total_paid: Decimal
    minimum_monthly_budget: Decimal
    total_monthly_budget: Decimal
    months: List[date]
    ledgers: List[LedgerSchema]
    totals: Optional[List[MonthlyTotalSchema]] = None


class PaymentRequest(BaseModel):
    """Request body for POST /v1/payment"""

    principal: Decimal = Field(..., ge=0, le=MAX_AMOUNT)
    apr: Decimal = Field(..., ge=0, le=MAX_APR)
    number_of_payments: int = Field(..., ge=1, le=1200)


class PaymentResponse(BaseModel):
    """Response for POST /v1/payment"""

    monthly_payment: Decimal
    total_paid: Decimal
    total_interest: Decimal
