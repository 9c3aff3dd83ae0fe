"""
Tests for utility helpers
"""

from datetime import date

from loan_decision.utils import calculate_age, mask_document, normalize_path, sanitize_string


class TestMaskDocument:
    """Test suite for identity code masking"""

    def test_shows_last_four(self):
        assert mask_document("39002010965") == "*******0965"

    def test_short_value_fully_masked(self):
        assert mask_document("0965") == "****"
        assert mask_document("") == "****"

    def test_custom_visible_chars(self):
        assert mask_document("39002010965", visible_chars=2) == "*********65"


class TestSanitizeString:
    """Test suite for string sanitizing"""

    def test_strips_whitespace(self):
        assert sanitize_string("  39002010965  ") == "39002010965"

    def test_truncates(self):
        assert sanitize_string("39002010965", max_length=4) == "3900"

    def test_empty(self):
        assert sanitize_string("") == ""
        assert sanitize_string("   ") == ""


class TestCalculateAge:
    """Test suite for age calculation"""

    def test_day_before_birthday(self):
        assert calculate_age(date(1990, 2, 1), today=date(2026, 1, 31)) == 35

    def test_on_birthday(self):
        assert calculate_age(date(1990, 2, 1), today=date(2026, 2, 1)) == 36

    def test_leap_day_birthday(self):
        """Test a 29 February birthday counts from 1 March in other years"""
        assert calculate_age(date(2004, 2, 29), today=date(2022, 2, 28)) == 17
        assert calculate_age(date(2004, 2, 29), today=date(2022, 3, 1)) == 18

    def test_defaults_to_current_date(self):
        today = date.today()
        assert calculate_age(date(today.year - 30, 1, 1)) == 30


class TestNormalizePath:
    """Test suite for metrics path normalization"""

    def test_static_path_unchanged(self):
        assert normalize_path("/api/v1/loan/decision") == "/api/v1/loan/decision"

    def test_numeric_id_replaced(self):
        assert normalize_path("/api/v1/loan/123") == "/api/v1/loan/{id}"

    def test_uuid_replaced(self):
        assert normalize_path(
            "/api/v1/loan/a1b2c3d4-e5f6-7890-abcd-ef1234567890/history"
        ) == "/api/v1/loan/{id}/history"
