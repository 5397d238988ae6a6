"""Engine parameters — one immutable input set per computation."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DepreciationModel(str, Enum):
    """How the asset loses value from one period to the next."""

    MONTHLY = "monthly"
    """Compounds a per-month rate on the running value."""

    ANNUAL = "annual"
    """Recomputes from the base value using a per-year rate and elapsed fractional years."""

    HEAVY_USE = "heavy_use"
    """Compounds a per-month rate, multiplied up in the early months."""


class Parameters(BaseModel):
    """Loan + depreciation inputs for one fleet of identical vehicles.

    Frozen so that a parameter set is a value: equal inputs hash equally and
    can key a cache.  Defaults match a single 65k vehicle on a 5-year loan.
    """

    model_config = ConfigDict(frozen=True)

    unit_count: int = Field(default=1, ge=1, description="Number of identical financed vehicles")
    unit_value: float = Field(default=65_000.0, gt=0, description="Principal per vehicle")
    annual_interest_rate_pct: float = Field(
        default=6.8, ge=0,
        description="Nominal annual interest rate in percent (6.8 = 6.8%)",
    )
    term_months: int = Field(default=60, gt=0, description="Number of monthly loan periods")
    depreciation_model: DepreciationModel = Field(
        default=DepreciationModel.MONTHLY,
        description="Depreciation strategy applied to the fleet value",
    )
    depreciation_rate_pct: float = Field(
        default=1.0, ge=0, le=100,
        description="Depreciation rate in percent. Per month for 'monthly' and "
                    "'heavy_use', per year for 'annual'.",
    )

    @property
    def total_principal(self) -> float:
        """Aggregate principal = unit_count × unit_value."""
        return self.unit_count * self.unit_value

    @property
    def periodic_rate(self) -> float:
        """Monthly interest rate as a fraction."""
        return self.annual_interest_rate_pct / 100 / 12

    def cache_key(self) -> tuple:
        """The full parameter tuple, in field order."""
        return (
            self.unit_count,
            self.unit_value,
            self.annual_interest_rate_pct,
            self.term_months,
            DepreciationModel(self.depreciation_model).value,
            self.depreciation_rate_pct,
        )
