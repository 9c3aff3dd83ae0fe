"""Decision Engine Exceptions.

This module defines the failure outcomes of a loan decision. Every failure
is a deterministic rejection of the given input, never a transient fault,
so none of them is retried.

Invalid input errors are problems with what the caller sent:
- Identity code rejected by the validator
- Loan amount outside the allowed range
- Loan period outside the allowed range
- Applicant age outside the eligible range

Business rule errors mean the input was fine but no loan can be offered:
- Applicant is in debt (credit modifier 0)
- No approvable amount exists up to the maximum loan period

The engine raises these and never catches them; the request layer is the
only place they are translated into responses.
"""

from .constants import DecisionOutcome, ErrorMessages


class DecisionError(Exception):
    """Base exception for all loan decision failures."""

    default_message = ErrorMessages.UNEXPECTED_ERROR
    outcome = DecisionOutcome.ERROR

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(DecisionError):
    """The request itself is not acceptable.

    The request layer maps these to 400 Bad Request.
    """
    pass


class NoValidLoanError(DecisionError):
    """No loan can be offered for this applicant.

    The request layer maps this to 404 Not Found.
    """

    default_message = ErrorMessages.NO_VALID_LOAN
    outcome = DecisionOutcome.NO_VALID_LOAN


# Specific invalid input errors
class InvalidIdentityCodeError(InvalidInputError):
    """Identity code failed format validation."""

    default_message = ErrorMessages.INVALID_IDENTITY_CODE
    outcome = DecisionOutcome.INVALID_IDENTITY_CODE


class InvalidLoanAmountError(InvalidInputError):
    """Requested loan amount is outside the allowed range."""

    default_message = ErrorMessages.INVALID_LOAN_AMOUNT
    outcome = DecisionOutcome.INVALID_LOAN_AMOUNT


class InvalidLoanPeriodError(InvalidInputError):
    """Requested loan period is outside the allowed range."""

    default_message = ErrorMessages.INVALID_LOAN_PERIOD
    outcome = DecisionOutcome.INVALID_LOAN_PERIOD


class InvalidAgeError(InvalidInputError):
    """Applicant is too young or too old for a loan."""

    default_message = ErrorMessages.INVALID_AGE
    outcome = DecisionOutcome.INVALID_AGE
