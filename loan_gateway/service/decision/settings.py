"""
Decision Settings for the Loan Decision Engine.

This module contains the business constraints the decision engine works
within: loan amount and period bounds, per-segment credit modifiers and
the life expectancy used for the upper age limit. They are loaded once per
process and never mutated by the engine.

Environment variables use the DECISION_ prefix:
    DECISION_MINIMUM_LOAN_AMOUNT=2000
    DECISION_MAXIMUM_LOAN_PERIOD=60
    DECISION_SEGMENT_2_CREDIT_MODIFIER=300

Usage:
    from loan_gateway.service.decision.settings import decision_settings

    # Use default settings (loaded from env)
    max_amount = decision_settings.maximum_loan_amount

    # Or create custom settings for testing
    custom = DecisionSettings(life_expectancy=75)
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Search granularity is part of the product definition, not deployment config.
AMOUNT_STEP = 100
PERIOD_STEP = 1


class DecisionSettings(BaseSettings):
    """
    Configurable constraints for the loan decision algorithm.

    All settings can be overridden via environment variables with DECISION_ prefix.
    Amounts are in whole euros, periods in months.
    """

    model_config = SettingsConfigDict(
        env_prefix="DECISION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Loan Amount Bounds ===
    minimum_loan_amount: int = Field(
        default=2000,
        gt=0,
        description="Smallest loan amount that can be requested or approved",
    )
    maximum_loan_amount: int = Field(
        default=10000,
        gt=0,
        description="Largest loan amount that can be requested or approved",
    )

    # === Loan Period Bounds (months) ===
    minimum_loan_period: int = Field(
        default=12,
        gt=0,
        description="Shortest loan period in months",
    )
    maximum_loan_period: int = Field(
        default=60,
        gt=0,
        description="Longest loan period in months",
    )

    # === Age Eligibility ===
    life_expectancy: int = Field(
        default=80,
        gt=0,
        description="Assumed life expectancy in years; the upper age limit is derived from it",
    )

    # === Segment Credit Modifiers ===
    segment_1_credit_modifier: int = Field(
        default=100,
        gt=0,
        description="Credit modifier for identity codes ending in 2500-4999",
    )
    segment_2_credit_modifier: int = Field(
        default=300,
        gt=0,
        description="Credit modifier for identity codes ending in 5000-7499",
    )
    segment_3_credit_modifier: int = Field(
        default=1000,
        gt=0,
        description="Credit modifier for identity codes ending in 7500-9999",
    )

    @model_validator(mode="after")
    def validate_bounds(self) -> "DecisionSettings":
        """Validate that every configured range is non-empty."""
        if self.minimum_loan_amount > self.maximum_loan_amount:
            raise ValueError(
                f"minimum_loan_amount ({self.minimum_loan_amount}) > "
                f"maximum_loan_amount ({self.maximum_loan_amount})"
            )
        if self.minimum_loan_period > self.maximum_loan_period:
            raise ValueError(
                f"minimum_loan_period ({self.minimum_loan_period}) > "
                f"maximum_loan_period ({self.maximum_loan_period})"
            )
        return self


@lru_cache
def get_decision_settings() -> DecisionSettings:
    """Get cached decision settings instance."""
    return DecisionSettings()


decision_settings = get_decision_settings()
