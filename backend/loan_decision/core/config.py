"""Application Configuration.

Centralized configuration using Pydantic Settings for type safety and validation.
Loan rules are read once at startup into an immutable LoanRules snapshot.
"""

import logging
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import AgeLimits, CreditSegment, LoanLimits


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Loan Decision Engine"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # API
    API_V1_PREFIX: str = "/api/v1"

    # CORS
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Loan rules
    LOAN_MINIMUM_AMOUNT: int = LoanLimits.MINIMUM_LOAN_AMOUNT
    LOAN_MAXIMUM_AMOUNT: int = LoanLimits.MAXIMUM_LOAN_AMOUNT
    LOAN_MINIMUM_PERIOD: int = LoanLimits.MINIMUM_LOAN_PERIOD
    LOAN_MAXIMUM_PERIOD: int = LoanLimits.MAXIMUM_LOAN_PERIOD
    LOAN_MINIMUM_AGE: int = AgeLimits.MINIMUM_AGE
    LOAN_EXPECTED_AGE: int = AgeLimits.EXPECTED_AGE
    LOAN_SEGMENT_1_CREDIT_MODIFIER: int = CreditSegment.SEGMENT_1_CREDIT_MODIFIER
    LOAN_SEGMENT_2_CREDIT_MODIFIER: int = CreditSegment.SEGMENT_2_CREDIT_MODIFIER
    LOAN_SEGMENT_3_CREDIT_MODIFIER: int = CreditSegment.SEGMENT_3_CREDIT_MODIFIER

    @field_validator('LOG_LEVEL', mode='after')
    @classmethod
    def validate_log_level(cls, v):
        """Validate LOG_LEVEL is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, got '{v}'"
            )
        return level


class LoanRules(BaseModel):
    """Immutable loan decision rules.

    Built once from Settings and shared read-only by every decision.
    """

    model_config = ConfigDict(frozen=True)

    minimum_loan_amount: int = Field(default=LoanLimits.MINIMUM_LOAN_AMOUNT, gt=0)
    maximum_loan_amount: int = Field(default=LoanLimits.MAXIMUM_LOAN_AMOUNT, gt=0)
    minimum_loan_period: int = Field(default=LoanLimits.MINIMUM_LOAN_PERIOD, gt=0)
    maximum_loan_period: int = Field(default=LoanLimits.MAXIMUM_LOAN_PERIOD, gt=0)
    minimum_age: int = Field(default=AgeLimits.MINIMUM_AGE, ge=0)
    expected_age: int = Field(default=AgeLimits.EXPECTED_AGE, gt=0)
    segment_1_credit_modifier: int = Field(default=CreditSegment.SEGMENT_1_CREDIT_MODIFIER, gt=0)
    segment_2_credit_modifier: int = Field(default=CreditSegment.SEGMENT_2_CREDIT_MODIFIER, gt=0)
    segment_3_credit_modifier: int = Field(default=CreditSegment.SEGMENT_3_CREDIT_MODIFIER, gt=0)

    @model_validator(mode='after')
    def validate_ranges(self):
        """Reject rules whose lower bounds exceed their upper bounds."""
        if self.minimum_loan_amount > self.maximum_loan_amount:
            raise ValueError(
                f"minimum_loan_amount ({self.minimum_loan_amount}) must not exceed "
                f"maximum_loan_amount ({self.maximum_loan_amount})"
            )
        if self.minimum_loan_period > self.maximum_loan_period:
            raise ValueError(
                f"minimum_loan_period ({self.minimum_loan_period}) must not exceed "
                f"maximum_loan_period ({self.maximum_loan_period})"
            )
        if self.minimum_age > self.maximum_age:
            raise ValueError(
                f"minimum_age ({self.minimum_age}) must not exceed the maximum eligible "
                f"age ({self.maximum_age})"
            )
        return self

    @property
    def maximum_age(self) -> int:
        """Oldest eligible age: the loan must end before the expected age."""
        return self.expected_age - self.maximum_loan_period // AgeLimits.MONTHS_PER_YEAR

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "LoanRules":
        """Build loan rules from application settings.

        Args:
            app_settings: Loaded application settings

        Returns:
            Frozen LoanRules instance
        """
        return cls(
            minimum_loan_amount=app_settings.LOAN_MINIMUM_AMOUNT,
            maximum_loan_amount=app_settings.LOAN_MAXIMUM_AMOUNT,
            minimum_loan_period=app_settings.LOAN_MINIMUM_PERIOD,
            maximum_loan_period=app_settings.LOAN_MAXIMUM_PERIOD,
            minimum_age=app_settings.LOAN_MINIMUM_AGE,
            expected_age=app_settings.LOAN_EXPECTED_AGE,
            segment_1_credit_modifier=app_settings.LOAN_SEGMENT_1_CREDIT_MODIFIER,
            segment_2_credit_modifier=app_settings.LOAN_SEGMENT_2_CREDIT_MODIFIER,
            segment_3_credit_modifier=app_settings.LOAN_SEGMENT_3_CREDIT_MODIFIER,
        )


settings = Settings()


@lru_cache
def get_loan_rules() -> LoanRules:
    """Get the process-wide loan rules, built on first use."""
    return LoanRules.from_settings(settings)
