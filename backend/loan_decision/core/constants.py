"""Application Constants.

Centralized constants used throughout the application.
This file contains all hardcoded values that should be maintained in one place.
"""


# ============================================================================
# LOAN LIMIT CONSTANTS
# ============================================================================

class LoanLimits:
    """Default loan amount and period bounds.

    Amounts are whole euros, periods are whole months.
    These are defaults only; the active values come from LoanRules.
    """
    MINIMUM_LOAN_AMOUNT = 2000
    MAXIMUM_LOAN_AMOUNT = 10000
    MINIMUM_LOAN_PERIOD = 12
    MAXIMUM_LOAN_PERIOD = 48


class AgeLimits:
    """Default age eligibility bounds (years)."""
    MINIMUM_AGE = 18
    # Same for every applicant; there is no way to tell countries apart yet.
    EXPECTED_AGE = 78
    MONTHS_PER_YEAR = 12


# ============================================================================
# CREDIT SEGMENT CONSTANTS
# ============================================================================

class CreditSegment:
    """Credit segments derived from the last four digits of the identity code.

    Debt      - 0000...2499
    Segment 1 - 2500...4999
    Segment 2 - 5000...7499
    Segment 3 - 7500...9999
    """
    SEGMENT_1_LOWER_BOUND = 2500
    SEGMENT_2_LOWER_BOUND = 5000
    SEGMENT_3_LOWER_BOUND = 7500

    SEGMENT_1_CREDIT_MODIFIER = 100
    SEGMENT_2_CREDIT_MODIFIER = 300
    SEGMENT_3_CREDIT_MODIFIER = 1000

    # Modifier meaning "no loan is ever possible"
    DEBT_CREDIT_MODIFIER = 0

    SEGMENT_DIGITS = 4

    # Minimum credit score for an (amount, period) pair to be approvable
    APPROVAL_THRESHOLD = 1.0


# ============================================================================
# IDENTITY CODE CONSTANTS
# ============================================================================

class IdentityCodeFormat:
    """Layout of the 11-digit personal identity code.

    Position 0 is the century/gender digit, positions 1-6 are YYMMDD,
    positions 7-10 are the serial number and check digit.
    """
    LENGTH = 11
    VALID_CENTURY_DIGITS = "123456"
    # Century digits 5 and 6 are people born in the 2000s
    CENTURY_2000_DIGITS = "56"
    CENTURY_2000_BASE = 2000
    CENTURY_1900_BASE = 1900

    YEAR_SLICE = slice(1, 3)
    MONTH_SLICE = slice(3, 5)
    DAY_SLICE = slice(5, 7)


# ============================================================================
# DECISION OUTCOMES
# ============================================================================

class DecisionOutcome:
    """Outcome labels used in logs and metrics."""
    APPROVED = "approved"
    INVALID_IDENTITY_CODE = "invalid_identity_code"
    INVALID_LOAN_AMOUNT = "invalid_loan_amount"
    INVALID_LOAN_PERIOD = "invalid_loan_period"
    INVALID_AGE = "invalid_age"
    NO_VALID_LOAN = "no_valid_loan"
    ERROR = "error"


# ============================================================================
# SECURITY & MASKING CONSTANTS
# ============================================================================

class Security:
    """Security-related constants."""
    # Identity code masking
    DOCUMENT_MASK_CHAR = "*"
    DOCUMENT_VISIBLE_CHARS = 4  # Show last 4 characters
    DOCUMENT_MASK_FULL = "****"  # When document is too short


# ============================================================================
# ERROR MESSAGES
# ============================================================================

class ErrorMessages:
    """Standard error messages."""
    INTERNAL_SERVER_ERROR = "Internal server error"
    UNEXPECTED_ERROR = "An unexpected error occurred"
    INVALID_IDENTITY_CODE = "Invalid personal ID code!"
    INVALID_LOAN_AMOUNT = "Invalid loan amount!"
    INVALID_LOAN_PERIOD = "Invalid loan period!"
    INVALID_AGE = "Invalid age for taking out loan."
    NO_VALID_LOAN = "No valid loan found!"
    IDENTITY_CODE_EMPTY = "Personal ID code cannot be empty"


# ============================================================================
# HTTP HEADERS
# ============================================================================

class HttpHeaders:
    """HTTP header names."""
    REQUEST_ID = "X-Request-ID"
    PROCESS_TIME = "X-Process-Time"
    CONTENT_TYPE = "Content-Type"
    ACCEPT = "Accept"


class HttpStatusCodes:
    """HTTP status code constants."""
    INTERNAL_SERVER_ERROR = 500
    NOT_FOUND = 404
    BAD_REQUEST = 400
    OK = 200


# ============================================================================
# API ENDPOINTS
# ============================================================================

class ApiEndpoints:
    """API endpoint paths."""
    DOCS = "/docs"
    REDOC = "/redoc"
    OPENAPI = "/openapi.json"
    HEALTH = "/health"
    ROOT = "/"
    LOAN_DECISION = "/decision"


class Metrics:
    """Metrics-related constants."""
    ENDPOINT_PATH = "/metrics"
