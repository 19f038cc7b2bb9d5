"""POST /v1/payment - Level monthly payment for an installment loan"""

from fastapi import APIRouter, Depends, HTTPException

from payoff_projector.api.v1.schemas import PaymentRequest, PaymentResponse
from payoff_projector.api.dependencies import get_rounding_policy
from payoff_projector.domain.exceptions import ValidationError
from payoff_projector.domain.interest import RoundingPolicy, amortized_payment

router = APIRouter()


@router.post("/payment", response_model=PaymentResponse)
def calculate_payment(
    request_body: PaymentRequest,
    rounding: RoundingPolicy = Depends(get_rounding_policy),
):
    """
    Calculate the fixed monthly payment that retires a principal over a term.

    Returns:
        Monthly payment plus total paid and total interest over the term
    """
    try:
        payment = amortized_payment(
            request_body.principal,
            request_body.apr,
            request_body.number_of_payments,
            rounding,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    total_paid = payment * request_body.number_of_payments
    return PaymentResponse(
        monthly_payment=payment,
        total_paid=total_paid,
        total_interest=total_paid - request_body.principal,
    )
