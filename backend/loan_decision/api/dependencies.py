"""FastAPI Dependencies.

Provides the decision engine to endpoints. Overriding get_decision_engine
through app.dependency_overrides swaps in different rules, validator or
clock, which is how tests pin the current date.
"""

from functools import lru_cache

from ..core.config import get_loan_rules
from ..domain.decision_engine import DecisionEngine
from ..domain.identity_code import StructuralIdentityCodeValidator


@lru_cache
def get_decision_engine() -> DecisionEngine:
    """Dependency returning the shared decision engine.

    The engine keeps no per-call state, so a single instance serves every request.
    """
    return DecisionEngine(
        rules=get_loan_rules(),
        validator=StructuralIdentityCodeValidator(),
    )
