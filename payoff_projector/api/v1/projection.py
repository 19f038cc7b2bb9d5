"""POST /v1/projection - Debt payoff projection endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from payoff_projector.api.v1.schemas import (
    AccountSchema,
    LedgerSchema,
    MonthlyEntrySchema,
    MonthlyTotalSchema,
    ProjectionRequest,
    ProjectionResponse,
)
from payoff_projector.api.dependencies import get_max_months, get_request_id, get_rounding_policy
from payoff_projector.config import settings
from payoff_projector.domain.exceptions import (
    NonAmortizingPaymentError,
    ProjectionDidNotConvergeError,
    ValidationError,
)
from payoff_projector.domain.interest import RoundingPolicy
from payoff_projector.domain.models import Account, Projection
from payoff_projector.domain.projection import generate_projection
from payoff_projector.infrastructure.observability.metrics import record_projection, record_projection_failure
from payoff_projector.infrastructure.observability.logging import log_projection

router = APIRouter()


def _to_response(projection: Projection, include_totals: bool) -> ProjectionResponse:
    """Serialize a completed projection, pairing each entry with its calendar month"""
    ledgers = [
        LedgerSchema(
            account=AccountSchema(
                name=ledger.account.name,
                balance=ledger.account.balance,
                apr=ledger.account.apr,
                minimum_payment=ledger.account.minimum_payment,
                account_number=ledger.account.account_number,
            ),
            months_to_payoff=ledger.months_to_payoff,
            total_interest=ledger.total_interest,
            total_paid=ledger.total_paid,
            entries=[
                MonthlyEntrySchema(
                    month=month,
                    payment_amount=entry.payment_amount,
                    interest_amount=entry.interest_amount,
                    principal_amount=entry.principal_amount,
                    running_balance=entry.running_balance,
                )
                for month, entry in zip(projection.months, ledger.entries)
            ],
        )
        for ledger in projection.ledgers
    ]

    totals = None
    if include_totals:
        totals = [
            MonthlyTotalSchema(
                month=t.month,
                payment_amount=t.payment_amount,
                interest_amount=t.interest_amount,
                principal_amount=t.principal_amount,
                remaining_balance=t.remaining_balance,
            )
            for t in projection.monthly_totals()
        ]

    return ProjectionResponse(
        start_date=projection.start_date,
        payoff_date=projection.payoff_date,
        snowballing=projection.snowballing,
        sort_order=projection.sort_order,
        number_of_months=projection.number_of_months,
        total_interest=projection.total_interest,
        total_paid=projection.total_paid,
        minimum_monthly_budget=projection.minimum_monthly_budget,
        total_monthly_budget=projection.total_monthly_budget,
        months=list(projection.months),
        ledgers=ledgers,
        totals=totals,
    )


@router.post("/projection", response_model=ProjectionResponse)
def create_projection(
    request_body: ProjectionRequest,
    request: Request,
    rounding: RoundingPolicy = Depends(get_rounding_policy),
    max_months: int = Depends(get_max_months),
):
    """
    Project month-by-month payoff of a set of credit accounts.

    Flow:
    1. Convert request accounts to domain accounts
    2. Run the projection (minimum-only, or snowball with extra budget)
    3. Record metrics and logs
    4. Return ledgers, monthly totals and aggregates
    """
    start_time = time.time()
    request_id = get_request_id(request)

    if len(request_body.accounts) > settings.max_accounts_per_request:
        record_projection_failure("validation")
        raise HTTPException(
            status_code=422,
            detail=f"At most {settings.max_accounts_per_request} accounts per projection",
        )

    accounts = [
        Account(
            name=a.name,
            balance=a.balance,
            apr=a.apr,
            minimum_payment=a.minimum_payment,
            account_number=a.account_number,
        )
        for a in request_body.accounts
    ]

    try:
        projection = generate_projection(
            accounts,
            start_date=request_body.start_date,
            snowballing=request_body.snowballing,
            extra_monthly_amount=request_body.extra_monthly_amount,
            sort_order=request_body.sort_order,
            rounding=rounding,
            max_months=max_months,
        )

    except ValidationError as e:
        record_projection_failure("validation")
        logging.warning(f"Invalid projection input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except NonAmortizingPaymentError as e:
        record_projection_failure("non_amortizing")
        logging.warning(f"Non-amortizing account: {e}", extra={"request_id": request_id})
        raise HTTPException(
            status_code=422,
            detail={
                "message": str(e),
                "account_name": e.account_name,
                "month_index": e.month_index,
                "interest_amount": str(e.interest_amount),
                "payment_amount": str(e.payment_amount),
            },
        )

    except ProjectionDidNotConvergeError as e:
        record_projection_failure("did_not_converge")
        logging.error(f"Projection did not converge: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail=str(e))

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_projection(projection.snowballing, projection.number_of_months)
    log_projection(
        request_id,
        len(accounts),
        projection.snowballing,
        projection.sort_order.value,
        projection.number_of_months,
        str(projection.total_interest),
        duration_ms,
    )

    return _to_response(projection, request_body.include_totals)
