"""Dependency injection for FastAPI endpoints"""

import decimal

from fastapi import Request
from payoff_projector.config import settings
from payoff_projector.domain.interest import RoundingPolicy


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_rounding_policy() -> RoundingPolicy:
    """Provide currency rounding configured for this deployment"""
    rounding = getattr(decimal, settings.rounding_mode)
    return RoundingPolicy(places=settings.currency_decimal_places, rounding=rounding)


def get_max_months() -> int:
    """Provide the simulation ceiling in months"""
    return settings.max_projection_months
