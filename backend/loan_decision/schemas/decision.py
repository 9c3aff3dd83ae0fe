"""Pydantic Schemas for API Request/Response Validation.

These schemas handle validation and serialization for the API.
Range checks on amount and period belong to the decision engine, so the
request schema only checks types and that the identity code is present.
"""

from pydantic import BaseModel, Field, field_validator

from ..core.constants import ErrorMessages, IdentityCodeFormat
from ..utils import sanitize_string


class LoanDecisionRequest(BaseModel):
    """Schema for requesting a loan decision.

    Note: personal_code is treated as PII (Personally Identifiable Information)
    and is only ever logged in masked form.
    """
    personal_code: str = Field(
        ...,
        max_length=IdentityCodeFormat.LENGTH * 2,
        description="Personal identity code of the applicant",
        examples=["39002017500"],
    )
    loan_amount: int = Field(..., description="Requested loan amount", examples=[4000])
    loan_period: int = Field(..., description="Requested loan period in months", examples=[12])

    @field_validator('personal_code')
    @classmethod
    def validate_code_not_empty(cls, v):
        """Validate and sanitize the identity code."""
        sanitized = sanitize_string(v)
        if not sanitized:
            raise ValueError(ErrorMessages.IDENTITY_CODE_EMPTY)
        return sanitized


class LoanDecisionResponse(BaseModel):
    """Schema for loan decision responses.

    Either loan_amount and loan_period are set, or error_message is.
    """
    loan_amount: int | None = None
    loan_period: int | None = None
    error_message: str | None = None
