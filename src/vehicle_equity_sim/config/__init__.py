"""Configuration models — engine inputs and presentation presets."""

from vehicle_equity_sim.config.parameters import DepreciationModel, Parameters
from vehicle_equity_sim.config.presets import (
    DEFAULT_DEPRECIATION_RATES,
    HeavyUseBand,
    InputRange,
    heavy_use_bands,
    input_ranges,
    out_of_range_fields,
    switch_model,
)

__all__ = [
    "DepreciationModel",
    "Parameters",
    "DEFAULT_DEPRECIATION_RATES",
    "HeavyUseBand",
    "InputRange",
    "heavy_use_bands",
    "input_ranges",
    "out_of_range_fields",
    "switch_model",
]
