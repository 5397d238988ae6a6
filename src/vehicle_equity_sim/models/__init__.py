"""Result models — engine output contracts."""

from vehicle_equity_sim.models.results import (
    PeriodRecord,
    ScheduleResult,
    Summary,
)

__all__ = [
    "PeriodRecord",
    "ScheduleResult",
    "Summary",
]
