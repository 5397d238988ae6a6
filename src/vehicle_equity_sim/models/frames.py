"""Tabular views of a schedule for charting and tables."""

from __future__ import annotations

import pandas as pd

from vehicle_equity_sim.models.results import ScheduleResult

SCHEDULE_COLUMNS = ["period", "asset_value", "loan_balance", "equity", "period_payment"]


def schedule_to_frame(result: ScheduleResult, per_unit: bool = False) -> pd.DataFrame:
    """One row per period, indexed by ``period``.

    With ``per_unit=True`` the money columns are divided by the unit count,
    giving the single-vehicle view of a fleet schedule.
    """
    df = pd.DataFrame(
        [r.model_dump() for r in result.schedule],
        columns=SCHEDULE_COLUMNS,
    )
    if per_unit:
        count = result.parameters.unit_count
        for col in SCHEDULE_COLUMNS[1:]:
            df[col] = df[col] / count
    return df.set_index("period")
