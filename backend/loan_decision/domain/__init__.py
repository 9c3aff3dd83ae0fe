"""Domain layer.

Contains pure business logic without framework dependencies:
- decision_engine: credit modifier, credit score and loan search
- identity_code: identity code parsing and structural validation
"""

from .decision_engine import (
    Decision,
    DecisionEngine,
    credit_modifier,
    credit_score,
    highest_valid_loan_amount,
)
from .identity_code import (
    IdentityCodeValidator,
    StructuralIdentityCodeValidator,
    extract_segment,
    parse_birth_date,
)

__all__ = [
    "Decision",
    "DecisionEngine",
    "IdentityCodeValidator",
    "StructuralIdentityCodeValidator",
    "credit_modifier",
    "credit_score",
    "extract_segment",
    "highest_valid_loan_amount",
    "parse_birth_date",
]
