"""
Tests for settings and loan rules
"""

import pytest
from pydantic import ValidationError

from loan_decision.core.config import LoanRules, Settings, get_loan_rules


class TestLoanRules:
    """Test suite for the immutable loan rules"""

    def test_defaults(self):
        """Test the default rules"""
        rules = LoanRules()

        assert rules.minimum_loan_amount == 2000
        assert rules.maximum_loan_amount == 10000
        assert rules.minimum_loan_period == 12
        assert rules.maximum_loan_period == 48
        assert rules.minimum_age == 18
        assert rules.expected_age == 78
        assert (
            rules.segment_1_credit_modifier,
            rules.segment_2_credit_modifier,
            rules.segment_3_credit_modifier,
        ) == (100, 300, 1000)

    def test_maximum_age(self):
        """Test the oldest eligible age leaves room for the longest loan"""
        assert LoanRules().maximum_age == 74
        assert LoanRules(maximum_loan_period=60).maximum_age == 73

    def test_frozen(self):
        """Test rules cannot be changed after construction"""
        rules = LoanRules()

        with pytest.raises(ValidationError):
            rules.maximum_loan_amount = 20000

    def test_amount_range_must_be_ordered(self):
        with pytest.raises(ValidationError, match="minimum_loan_amount"):
            LoanRules(minimum_loan_amount=5000, maximum_loan_amount=4000)

    def test_period_range_must_be_ordered(self):
        with pytest.raises(ValidationError, match="minimum_loan_period"):
            LoanRules(minimum_loan_period=24, maximum_loan_period=12)

    def test_age_range_must_be_ordered(self):
        with pytest.raises(ValidationError, match="minimum_age"):
            LoanRules(minimum_age=18, expected_age=20)

    @pytest.mark.parametrize(
        "field",
        ["minimum_loan_amount", "minimum_loan_period", "segment_1_credit_modifier"],
    )
    def test_positive_values(self, field):
        """Test non-positive amounts, periods and modifiers are rejected"""
        with pytest.raises(ValidationError):
            LoanRules(**{field: 0})


class TestSettings:
    """Test suite for environment-driven settings"""

    def test_loan_rules_from_settings(self):
        """Test loan rules are built from LOAN_* settings"""
        settings = Settings(
            LOAN_MINIMUM_AMOUNT=1000,
            LOAN_MAXIMUM_AMOUNT=5000,
            LOAN_MAXIMUM_PERIOD=60,
            LOAN_SEGMENT_2_CREDIT_MODIFIER=250,
        )

        rules = LoanRules.from_settings(settings)

        assert rules.minimum_loan_amount == 1000
        assert rules.maximum_loan_amount == 5000
        assert rules.maximum_loan_period == 60
        assert rules.segment_2_credit_modifier == 250
        assert rules.segment_1_credit_modifier == 100

    def test_loan_rules_from_environment(self, monkeypatch):
        """Test LOAN_* environment variables reach the rules"""
        monkeypatch.setenv("LOAN_MAXIMUM_AMOUNT", "8000")

        rules = LoanRules.from_settings(Settings())

        assert rules.maximum_loan_amount == 8000

    def test_inconsistent_settings_rejected(self):
        """Test inconsistent LOAN_* settings fail when rules are built"""
        settings = Settings(LOAN_MINIMUM_AMOUNT=9000, LOAN_MAXIMUM_AMOUNT=8000)

        with pytest.raises(ValidationError):
            LoanRules.from_settings(settings)

    def test_log_level_normalized(self):
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_log_level_invalid(self):
        with pytest.raises(ValidationError, match="LOG_LEVEL"):
            Settings(LOG_LEVEL="LOUD")

    def test_process_rules_cached(self):
        """Test the process-wide rules are built once"""
        assert get_loan_rules() is get_loan_rules()
