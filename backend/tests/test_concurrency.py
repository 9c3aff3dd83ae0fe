"""
Concurrency Tests for the Decision Engine

A single engine instance is shared by every request. These tests make sure
concurrent decisions for applicants in different segments never see each
other's credit modifier.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from loan_decision.core.exceptions import NoValidLoanError

DECISION_URL = "/api/v1/loan/decision"


def decide(engine, identity_code: str, loan_amount: int, loan_period: int):
    """Run one decision, returning the offer or the failure type"""
    try:
        decision = engine.calculate_approved_loan(identity_code, loan_amount, loan_period)
    except NoValidLoanError as e:
        return type(e)
    return decision.approved_amount, decision.approved_period


class TestConcurrentDecisions:
    """Test suite for shared-engine concurrency"""

    def test_threads_share_engine(self, engine, identity_codes):
        """Test interleaved decisions in threads match sequential results"""
        requests = [
            (identity_codes[key], 4000, period)
            for key in ("debt", "segment_1_lower", "segment_2_upper", "segment_3_lower")
            for period in (12, 24, 36)
        ] * 25

        expected = [decide(engine, *request) for request in requests]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda request: decide(engine, *request), requests))

        assert results == expected

    @pytest.mark.asyncio()
    async def test_concurrent_requests(self, client, identity_codes):
        """Test concurrent HTTP requests for different segments get their own offers"""
        payloads = [
            {"personal_code": identity_codes["segment_3_lower"], "loan_amount": 4000, "loan_period": 12},
            {"personal_code": identity_codes["segment_1_lower"], "loan_amount": 4000, "loan_period": 12},
            {"personal_code": identity_codes["debt"], "loan_amount": 4000, "loan_period": 12},
        ] * 10

        responses = await asyncio.gather(
            *(client.post(DECISION_URL, json=payload) for payload in payloads)
        )

        for payload, response in zip(payloads, responses):
            if payload["personal_code"] == identity_codes["segment_3_lower"]:
                assert response.status_code == 200
                assert (response.json()["loan_amount"], response.json()["loan_period"]) == (10000, 12)
            elif payload["personal_code"] == identity_codes["segment_1_lower"]:
                assert response.status_code == 200
                assert (response.json()["loan_amount"], response.json()["loan_period"]) == (2000, 20)
            else:
                assert response.status_code == 404
