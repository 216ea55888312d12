"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache
from fastapi import Request
from decision_gateway.domain.engine import DecisionEngine


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache(maxsize=1)
def get_decision_engine() -> DecisionEngine:
    """Provide the shared, stateless decision engine"""
    return DecisionEngine()
