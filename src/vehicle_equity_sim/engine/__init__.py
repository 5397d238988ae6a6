"""Engine — payment, depreciation, schedule and summary computation."""

from vehicle_equity_sim.engine.payment import compute_payment, periodic_rate
from vehicle_equity_sim.engine.depreciation import (
    depreciate_annual,
    depreciate_heavy_use,
    depreciate_monthly,
    heavy_use_multiplier,
    select_depreciation,
)
from vehicle_equity_sim.engine.schedule import generate_schedule, round_currency
from vehicle_equity_sim.engine.summary import extract_summary
from vehicle_equity_sim.engine.orchestrator import (
    ScheduleCache,
    compare_depreciation_models,
    compute_schedule,
    validate_parameters,
)

__all__ = [
    "compute_payment",
    "periodic_rate",
    "depreciate_annual",
    "depreciate_heavy_use",
    "depreciate_monthly",
    "heavy_use_multiplier",
    "select_depreciation",
    "generate_schedule",
    "round_currency",
    "extract_summary",
    "ScheduleCache",
    "compare_depreciation_models",
    "compute_schedule",
    "validate_parameters",
]
