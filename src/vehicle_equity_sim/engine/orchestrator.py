"""Engine entry point — validate, price the loan, run the schedule, summarise.

``compute_schedule`` is a pure function of its parameters: it holds no
state and every call builds a brand-new result.  Callers that recompute on
every input change can wrap it in a ``ScheduleCache`` keyed by the full
parameter tuple.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from vehicle_equity_sim.config.parameters import DepreciationModel, Parameters
from vehicle_equity_sim.config.presets import DEFAULT_DEPRECIATION_RATES
from vehicle_equity_sim.engine.payment import compute_payment
from vehicle_equity_sim.engine.schedule import generate_schedule
from vehicle_equity_sim.engine.summary import extract_summary
from vehicle_equity_sim.exceptions import InvalidParameter
from vehicle_equity_sim.models.results import ScheduleResult

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════════

def _coerce_parameters(params: Parameters | Mapping[str, Any]) -> Parameters:
    """Accept a ready ``Parameters`` or a plain mapping of its fields."""
    if isinstance(params, Parameters):
        return params
    try:
        return Parameters.model_validate(dict(params))
    except ValidationError as exc:
        err = exc.errors()[0]
        field = ".".join(str(part) for part in err["loc"]) or "parameters"
        raise InvalidParameter(field, err.get("input"), err["msg"]) from exc


def validate_parameters(params: Parameters) -> None:
    """Check the engine's domain independently of any model-level validation.

    ``Parameters.model_construct`` skips pydantic validation entirely, so the
    engine cannot rely on field constraints alone.
    """
    if not params.term_months > 0:
        raise InvalidParameter("term_months", params.term_months, "must be greater than 0")
    if not params.unit_count >= 1:
        raise InvalidParameter("unit_count", params.unit_count, "must be at least 1")
    if not params.unit_value > 0:
        raise InvalidParameter("unit_value", params.unit_value, "must be greater than 0")
    if not params.annual_interest_rate_pct >= 0:
        raise InvalidParameter(
            "annual_interest_rate_pct", params.annual_interest_rate_pct, "must not be negative",
        )
    if not params.depreciation_rate_pct >= 0:
        raise InvalidParameter(
            "depreciation_rate_pct", params.depreciation_rate_pct, "must not be negative",
        )
    if not params.depreciation_rate_pct <= 100:
        raise InvalidParameter(
            "depreciation_rate_pct", params.depreciation_rate_pct, "must not exceed 100",
        )
    try:
        DepreciationModel(params.depreciation_model)
    except ValueError as exc:
        raise InvalidParameter(
            "depreciation_model", params.depreciation_model, "unknown depreciation model",
        ) from exc


# ═══════════════════════════════════════════════════════════════════════════
# Public entry point
# ═══════════════════════════════════════════════════════════════════════════

def compute_schedule(params: Parameters | Mapping[str, Any]) -> ScheduleResult:
    """Compute the full schedule and summary for one parameter set.

    Parameters
    ----------
    params : Parameters | Mapping[str, Any]
        Engine inputs. A mapping is validated into ``Parameters`` first.

    Returns
    -------
    ScheduleResult
        ``term_months + 13`` period records plus the summary.

    Raises
    ------
    InvalidParameter
        Before any generation, if an input is outside the engine's domain.
    """
    params = _coerce_parameters(params)
    validate_parameters(params)

    payment = compute_payment(
        params.total_principal, params.annual_interest_rate_pct, params.term_months,
    )
    schedule = generate_schedule(params, payment)
    summary = extract_summary(params, schedule, payment)
    return ScheduleResult(parameters=params, schedule=schedule, summary=summary)


def compare_depreciation_models(
    params: Parameters,
    rates: Mapping[DepreciationModel, float] | None = None,
) -> dict[DepreciationModel, ScheduleResult]:
    """Run the same loan under every depreciation model.

    ``rates`` gives the rate to use per model; a model missing from it keeps
    ``params.depreciation_rate_pct`` if it is the selected model, otherwise
    the model's default rate.  A per-year annual rate and a per-month rate
    are not interchangeable, hence the per-model lookup.
    """
    rates = dict(rates or {})
    results: dict[DepreciationModel, ScheduleResult] = {}
    for model in DepreciationModel:
        if model in rates:
            rate = rates[model]
        elif model is params.depreciation_model:
            rate = params.depreciation_rate_pct
        else:
            rate = DEFAULT_DEPRECIATION_RATES[model]
        variant = params.model_copy(update={
            "depreciation_model": model,
            "depreciation_rate_pct": rate,
        })
        results[model] = compute_schedule(variant)
    return results


# ═══════════════════════════════════════════════════════════════════════════
# Memoization
# ═══════════════════════════════════════════════════════════════════════════

class ScheduleCache:
    """Least-recently-used cache of results keyed by the full parameter tuple.

    Usage::

        cache = ScheduleCache(maxsize=64)
        result = cache.get(params)     # computes on first call
        result = cache.get(params)     # served from cache

    Results are frozen models, so handing out the same instance twice is safe.
    Invalid parameters raise and are never cached.
    """

    def __init__(self, maxsize: int = 128) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self._maxsize = maxsize
        self._entries: OrderedDict[tuple, ScheduleResult] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, params: Parameters | Mapping[str, Any]) -> ScheduleResult:
        params = _coerce_parameters(params)
        validate_parameters(params)
        key = params.cache_key()

        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                logger.debug("Schedule cache hit for %s", key)
                return cached

        result = compute_schedule(params)

        with self._lock:
            self.misses += 1
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self._maxsize:
                self._entries.popitem(last=False)
        logger.debug("Schedule cache miss for %s", key)
        return result

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0
