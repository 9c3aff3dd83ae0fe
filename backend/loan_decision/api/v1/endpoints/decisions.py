"""Loan Decision Endpoints.

Translates decision engine outcomes into HTTP responses:
- approved decision       -> 200
- invalid input           -> 400
- no valid loan           -> 404
- anything unexpected     -> 500
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ....core.constants import ApiEndpoints, DecisionOutcome, ErrorMessages
from ....core.exceptions import InvalidInputError, NoValidLoanError
from ....core.logging import get_logger
from ....core.metrics import record_decision
from ....domain.decision_engine import DecisionEngine
from ....schemas.decision import LoanDecisionRequest, LoanDecisionResponse
from ....utils import mask_document
from ...dependencies import get_decision_engine

logger = get_logger(__name__)

router = APIRouter()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=LoanDecisionResponse(error_message=message).model_dump(),
    )


@router.post(
    ApiEndpoints.LOAN_DECISION,
    response_model=LoanDecisionResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": LoanDecisionResponse},
        status.HTTP_404_NOT_FOUND: {"model": LoanDecisionResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": LoanDecisionResponse},
    },
)
async def request_loan_decision(
    request: LoanDecisionRequest,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """Decide the loan amount and period the applicant qualifies for.

    The approved amount can be higher than requested, and the approved period
    can be longer than requested when no amount fits the requested period.
    """
    masked_code = mask_document(request.personal_code)

    try:
        decision = engine.calculate_approved_loan(
            request.personal_code,
            request.loan_amount,
            request.loan_period,
        )
    except InvalidInputError as e:
        logger.info(
            "Loan request rejected",
            extra={'identity_code': masked_code, 'outcome': e.outcome, 'reason': e.message}
        )
        record_decision(e.outcome)
        return _error_response(status.HTTP_400_BAD_REQUEST, e.message)
    except NoValidLoanError as e:
        logger.info(
            "No valid loan found",
            extra={
                'identity_code': masked_code,
                'requested_amount': request.loan_amount,
                'requested_period': request.loan_period,
            }
        )
        record_decision(e.outcome)
        return _error_response(status.HTTP_404_NOT_FOUND, e.message)
    except Exception as e:
        logger.error(
            "Loan decision failed",
            extra={
                'identity_code': masked_code,
                'error': str(e),
                'error_type': type(e).__name__,
            },
            exc_info=True
        )
        record_decision(DecisionOutcome.ERROR)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorMessages.UNEXPECTED_ERROR)

    logger.info(
        "Loan approved",
        extra={
            'identity_code': masked_code,
            'requested_amount': request.loan_amount,
            'requested_period': request.loan_period,
            'approved_amount': decision.approved_amount,
            'approved_period': decision.approved_period,
        }
    )
    record_decision(DecisionOutcome.APPROVED, decision.approved_amount, decision.approved_period)

    return LoanDecisionResponse(
        loan_amount=decision.approved_amount,
        loan_period=decision.approved_period,
    )
