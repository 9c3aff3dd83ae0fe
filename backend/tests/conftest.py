"""
Pytest Configuration and Shared Fixtures

This module contains shared test fixtures and configuration for all test modules.
"""

import os
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from loan_decision.api.dependencies import get_decision_engine
from loan_decision.core.config import LoanRules
from loan_decision.domain.decision_engine import DecisionEngine
from loan_decision.main import app

# Every age in the suite is measured against this date
FIXED_TODAY = date(2025, 6, 15)


class AcceptAllValidator:
    """Validator stub that accepts any identity code."""

    def __init__(self):
        self.calls = []

    def is_valid(self, identity_code: str) -> bool:
        self.calls.append(identity_code)
        return True


class RejectAllValidator:
    """Validator stub that rejects any identity code."""

    def __init__(self):
        self.calls = []

    def is_valid(self, identity_code: str) -> bool:
        self.calls.append(identity_code)
        return False


@pytest.fixture()
def accept_all_validator():
    return AcceptAllValidator()


@pytest.fixture()
def reject_all_validator():
    return RejectAllValidator()


@pytest.fixture()
def fixed_today():
    """Clock pinned to FIXED_TODAY."""
    return lambda: FIXED_TODAY


@pytest.fixture()
def rules():
    """Default loan rules"""
    return LoanRules()


@pytest.fixture()
def engine(rules, fixed_today):
    """Decision engine with default rules and a pinned clock"""
    return DecisionEngine(rules=rules, today=fixed_today)


@pytest.fixture()
def identity_codes():
    """Structurally valid identity codes for an applicant born 1990-02-01, by segment"""
    return {
        "debt": "39002010965",
        "debt_upper": "39002012499",
        "segment_1_lower": "39002012500",
        "segment_1_upper": "39002014999",
        "segment_2_lower": "39002015000",
        "segment_2_upper": "39002017499",
        "segment_3_lower": "39002017500",
        "segment_3_upper": "39002019999",
    }


@pytest_asyncio.fixture()
async def client(fixed_today):
    """
    HTTP client bound to the application.

    The decision engine dependency is overridden so ages are computed
    against FIXED_TODAY.
    """
    app.dependency_overrides[get_decision_engine] = lambda: DecisionEngine(
        rules=LoanRules(),
        today=fixed_today,
    )

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
