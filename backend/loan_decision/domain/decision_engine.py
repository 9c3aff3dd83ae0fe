"""Loan Decision Engine.

Calculates the approved loan amount and period for an applicant based on
their credit modifier, which is derived from the last four digits of their
personal identity code.

The credit score of an (amount, period) pair is

    credit_score = (credit_modifier / loan_amount) * loan_period

and the pair is approvable when the score is at least 1. For a fixed
modifier and period the score strictly decreases as the amount grows, which
is what lets highest_valid_loan_amount() binary search the amount range. A
scoring formula that is not monotonic in the amount needs a linear search.

Every call is self-contained: the credit modifier is a local value passed
down explicitly, so one engine instance can serve concurrent callers.
"""

from collections.abc import Callable
from datetime import date

from pydantic import BaseModel

from ..core.config import LoanRules, get_loan_rules
from ..core.constants import CreditSegment
from ..core.exceptions import (
    InvalidAgeError,
    InvalidIdentityCodeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    NoValidLoanError,
)
from ..core.logging import get_logger
from ..utils import calculate_age, mask_document
from .identity_code import (
    IdentityCodeValidator,
    StructuralIdentityCodeValidator,
    extract_segment,
    parse_birth_date,
)

logger = get_logger(__name__)


class Decision(BaseModel):
    """Outcome of a loan decision.

    The engine always fills approved_amount and approved_period. Callers that
    catch a DecisionError build one carrying only error_message.
    """
    approved_amount: int | None = None
    approved_period: int | None = None
    error_message: str | None = None


def credit_modifier(segment: int, rules: LoanRules) -> int:
    """Map a segment number to its credit modifier.

    Debt      - 0000...2499 -> 0
    Segment 1 - 2500...4999
    Segment 2 - 5000...7499
    Segment 3 - 7500...9999

    Args:
        segment: Last four digits of the identity code as an integer
        rules: Loan rules holding the per-segment modifiers

    Returns:
        Credit modifier, 0 when no loan is possible
    """
    if segment < CreditSegment.SEGMENT_1_LOWER_BOUND:
        return CreditSegment.DEBT_CREDIT_MODIFIER
    if segment < CreditSegment.SEGMENT_2_LOWER_BOUND:
        return rules.segment_1_credit_modifier
    if segment < CreditSegment.SEGMENT_3_LOWER_BOUND:
        return rules.segment_2_credit_modifier
    return rules.segment_3_credit_modifier


def credit_score(modifier: int, loan_amount: int, loan_period: int) -> float:
    """Calculate the credit score of a loan amount over a loan period."""
    return (modifier / loan_amount) * loan_period


def highest_valid_loan_amount(modifier: int, loan_period: int, rules: LoanRules) -> int:
    """Find the largest approvable loan amount for a period using binary search.

    Args:
        modifier: Applicant's credit modifier
        loan_period: Loan period in months
        rules: Loan rules holding the amount bounds

    Returns:
        Largest amount in [minimum, maximum] with a credit score of at least 1,
        or 0 if no amount in the range qualifies
    """
    low = rules.minimum_loan_amount
    high = rules.maximum_loan_amount
    result = 0

    while low <= high:
        mid = low + (high - low) // 2

        if credit_score(modifier, mid, loan_period) >= CreditSegment.APPROVAL_THRESHOLD:
            result = mid
            low = mid + 1
        else:
            high = mid - 1

    return result


class DecisionEngine:
    """Calculates the approved loan amount and period for an applicant.

    Usage:
        engine = DecisionEngine()
        decision = engine.calculate_approved_loan("39002017500", 4000, 12)
    """

    def __init__(
        self,
        rules: LoanRules | None = None,
        validator: IdentityCodeValidator | None = None,
        today: Callable[[], date] | None = None,
    ):
        """Initialize the engine.

        Args:
            rules: Loan rules (defaults to the process-wide rules from settings)
            validator: Identity code validator (defaults to the structural validator)
            today: Clock used for age calculation (defaults to date.today)
        """
        self.rules = rules if rules is not None else get_loan_rules()
        self.validator = validator if validator is not None else StructuralIdentityCodeValidator()
        self.today = today if today is not None else date.today

    def calculate_approved_loan(
        self,
        identity_code: str,
        loan_amount: int,
        loan_period: int,
    ) -> Decision:
        """Calculate the maximum loan amount and period for the applicant.

        Starting from the requested period, the period is extended one month
        at a time until some amount in the allowed range is approvable. The
        search never goes past the maximum loan period.

        Args:
            identity_code: Personal identity code of the applicant
            loan_amount: Requested loan amount
            loan_period: Requested loan period in months

        Returns:
            Decision with the approved amount and period

        Raises:
            InvalidIdentityCodeError: If the identity code is invalid
            InvalidLoanAmountError: If the requested amount is out of range
            InvalidLoanPeriodError: If the requested period is out of range
            InvalidAgeError: If the applicant's age is outside the eligible range
            NoValidLoanError: If no loan can be offered for this applicant
        """
        self.verify_inputs(identity_code, loan_amount, loan_period)
        self.verify_age(identity_code)

        modifier = credit_modifier(extract_segment(identity_code), self.rules)
        if modifier == CreditSegment.DEBT_CREDIT_MODIFIER:
            raise NoValidLoanError()

        period = loan_period
        while period <= self.rules.maximum_loan_period:
            highest_amount = highest_valid_loan_amount(modifier, period, self.rules)
            if highest_amount >= self.rules.minimum_loan_amount:
                approved_amount = min(self.rules.maximum_loan_amount, highest_amount)
                logger.debug(
                    "Loan offer found",
                    extra={
                        'identity_code': mask_document(identity_code),
                        'requested_period': loan_period,
                        'approved_amount': approved_amount,
                        'approved_period': period,
                    }
                )
                return Decision(approved_amount=approved_amount, approved_period=period)
            period += 1

        raise NoValidLoanError()

    def verify_inputs(self, identity_code: str, loan_amount: int, loan_period: int) -> None:
        """Verify that all inputs are valid according to business rules.

        Checks run in order and the first failure stops processing.

        Raises:
            InvalidIdentityCodeError: If the identity code is invalid
            InvalidLoanAmountError: If the requested amount is out of range
            InvalidLoanPeriodError: If the requested period is out of range
        """
        if not self.validator.is_valid(identity_code):
            raise InvalidIdentityCodeError()

        if not self.is_loan_amount_valid(loan_amount):
            raise InvalidLoanAmountError()

        if not self.is_loan_period_valid(loan_period):
            raise InvalidLoanPeriodError()

    def is_loan_amount_valid(self, loan_amount: int) -> bool:
        return self.rules.minimum_loan_amount <= loan_amount <= self.rules.maximum_loan_amount

    def is_loan_period_valid(self, loan_period: int) -> bool:
        return self.rules.minimum_loan_period <= loan_period <= self.rules.maximum_loan_period

    def verify_age(self, identity_code: str) -> None:
        """Verify the applicant's age is within the eligible range.

        The oldest eligible age leaves room for the longest loan period
        before the expected age is reached.

        Raises:
            InvalidIdentityCodeError: If no birth date can be parsed from the code
            InvalidAgeError: If the age is outside [minimum_age, maximum_age]
        """
        age = calculate_age(parse_birth_date(identity_code), today=self.today())
        if age < self.rules.minimum_age or age > self.rules.maximum_age:
            raise InvalidAgeError()
