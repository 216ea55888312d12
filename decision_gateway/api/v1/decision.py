"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from decision_gateway.api.v1.schemas import DecisionRequest, DecisionResponse
from decision_gateway.api.dependencies import get_decision_engine, get_request_id
from decision_gateway.domain.engine import DecisionEngine
from decision_gateway.domain.exceptions import AgeRestrictionError, NoValidLoanError
from decision_gateway.infrastructure.observability.metrics import record_decision
from decision_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=DecisionResponse.from_error(message).model_dump(),
    )


@router.post(
    "/loan/decision",
    response_model=DecisionResponse,
    responses={400: {"model": DecisionResponse}, 404: {"model": DecisionResponse}},
)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Calculate the largest loan amount and period the applicant can get.

    Status codes:
    - 200: approved offer
    - 400: invalid input or age restriction, with error_message
    - 404: no loan period within bounds reaches the minimum amount
    - 500: unexpected failure
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    def elapsed_ms() -> float:
        return (time.perf_counter() - start_time) * 1000

    try:
        decision = engine.calculate_approved_loan(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
            request_body.country,
        )

    except AgeRestrictionError as e:
        record_decision("ineligible")
        log_decision(request_id, "ineligible", None, None, elapsed_ms(), reason=str(e))
        return _error_response(400, str(e))

    except NoValidLoanError as e:
        record_decision("no_valid_loan")
        log_decision(request_id, "no_valid_loan", None, None, elapsed_ms(), reason=str(e))
        return _error_response(404, str(e))

    except Exception as e:
        record_decision("error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        return _error_response(500, "An unexpected error occurred")

    if not decision.is_approved:
        record_decision("invalid_input")
        log_decision(request_id, "invalid_input", None, None, elapsed_ms(), reason=decision.error_message)
        return _error_response(400, decision.error_message)

    record_decision("approved", decision.loan_amount)
    log_decision(request_id, "approved", decision.loan_amount, decision.loan_period, elapsed_ms())

    return DecisionResponse.from_decision(decision)
