"""Shared test fixtures — the reference parameter sets."""

from __future__ import annotations

import pytest

from vehicle_equity_sim.config import DepreciationModel, Parameters


@pytest.fixture
def single_vehicle() -> Parameters:
    """One 65k vehicle, 6.8% over 60 months, 1% monthly depreciation."""
    return Parameters(
        unit_count=1,
        unit_value=65_000,
        annual_interest_rate_pct=6.8,
        term_months=60,
        depreciation_model=DepreciationModel.MONTHLY,
        depreciation_rate_pct=1.0,
    )


@pytest.fixture
def interest_free(single_vehicle: Parameters) -> Parameters:
    return single_vehicle.model_copy(update={"annual_interest_rate_pct": 0.0})


@pytest.fixture
def fleet_of_ten(single_vehicle: Parameters) -> Parameters:
    return single_vehicle.model_copy(update={"unit_count": 10})


@pytest.fixture
def annual_params(single_vehicle: Parameters) -> Parameters:
    """Same loan with 15% per year, recomputed from the base value."""
    return single_vehicle.model_copy(update={
        "depreciation_model": DepreciationModel.ANNUAL,
        "depreciation_rate_pct": 15.0,
    })


@pytest.fixture
def heavy_use_params(single_vehicle: Parameters) -> Parameters:
    return single_vehicle.model_copy(update={
        "depreciation_model": DepreciationModel.HEAVY_USE,
        "depreciation_rate_pct": 1.0,
    })


@pytest.fixture(params=list(DepreciationModel))
def any_model_params(request, single_vehicle: Parameters) -> Parameters:
    """The reference loan under each depreciation model with a non-zero rate."""
    rate = 15.0 if request.param is DepreciationModel.ANNUAL else 1.0
    return single_vehicle.model_copy(update={
        "depreciation_model": request.param,
        "depreciation_rate_pct": rate,
    })
