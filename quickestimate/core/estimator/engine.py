"""Pricing engine.

Turns an ``EstimateInputs`` into an ``EstimateResult`` using the pricing
``EstimateSettings`` passed in by the caller.  The engine is pure: it reads
its two arguments and returns a new frozen result, so it is safe to call
concurrently and never touches the settings store itself.

Missing or non-finite numbers are treated as zero rather than rejected;
shape and range validation happens in the request models before this runs.
"""

from __future__ import annotations

import math

from quickestimate.common.enums import Measurement, ProjectType
from quickestimate.core.estimator.defaults import DEFAULT_SETTINGS
from quickestimate.core.estimator.schemas import (
    DimensionInputs,
    EstimateInputs,
    EstimateResult,
    EstimateSettings,
    LineItem,
    LineItems,
)

BASELINE_HEIGHT_FT = 6.0
MIN_PRODUCTION_RATE = 0.25
MIN_QUANTITY = 1.0

_REQUIRED_FIELDS: dict[ProjectType, list[str]] = {
    ProjectType.FENCE: ["linear_feet", "height_feet"],
    ProjectType.DECK: ["square_feet", "height_feet"],
    ProjectType.PERGOLA: ["square_feet", "height_feet"],
    ProjectType.REPAIR_HANDYMAN: ["hours_requested"],
}


def get_required_fields(project_type: ProjectType) -> list[str]:
    """Dimension fields the estimate form must collect for *project_type*."""
    return list(_REQUIRED_FIELDS.get(project_type, []))


def _number_or_zero(value: float | None) -> float:
    if value is None or not math.isfinite(value):
        return 0.0
    return float(value)


def _measured_value(dims: DimensionInputs, measurement: Measurement) -> float:
    return _number_or_zero(getattr(dims, measurement.value))


def height_factor(height_feet: float | None) -> float:
    """Scale-up for structures taller than 6 ft; never below 1."""
    return max(1.0, _number_or_zero(height_feet) / BASELINE_HEIGHT_FT)


def _line_item(base: float, settings: EstimateSettings, multiplier: float) -> LineItem:
    return LineItem(
        base=base,
        low=base * settings.low_factor * multiplier,
        high=base * settings.high_factor * multiplier,
    )


def calculate_estimate(
    inputs: EstimateInputs,
    settings: EstimateSettings = DEFAULT_SETTINGS,
) -> EstimateResult:
    """Compute the price range for *inputs* under *settings*.

    The minimum charge floors the subtotal before the complexity multiplier
    is applied.  Line-item ``base`` values are the raw material and labor
    costs, so when the minimum charge dominates they do not add up to
    ``subtotal``.
    """
    config = settings.project_configs.for_project(inputs.project_type)
    dims = inputs.dimensions

    quantity = max(MIN_QUANTITY, _measured_value(dims, config.measurement))
    h_factor = height_factor(dims.height_feet)

    materials = quantity * config.unit_material_cost * h_factor

    labor_hours = config.labor_hours_base + quantity / max(
        config.production_rate_per_hour, MIN_PRODUCTION_RATE
    )
    labor = labor_hours * settings.labor_rate_per_hour * h_factor

    raw_subtotal = materials + labor
    subtotal = max(raw_subtotal, config.minimum_charge)

    multipliers = settings.complexity_multipliers
    complexity_multiplier = (
        multipliers.access.for_level(inputs.access)
        * multipliers.demo_haul_off.for_level(inputs.demo_haul_off)
        * multipliers.slope.for_level(inputs.slope)
    )

    adjusted_subtotal = subtotal * complexity_multiplier

    return EstimateResult(
        quantity=quantity,
        material_cost=materials,
        labor_hours=labor_hours,
        labor_cost=labor,
        subtotal=subtotal,
        complexity_multiplier=complexity_multiplier,
        adjusted_subtotal=adjusted_subtotal,
        low_estimate=adjusted_subtotal * settings.low_factor,
        high_estimate=adjusted_subtotal * settings.high_factor,
        line_items=LineItems(
            materials=_line_item(materials, settings, complexity_multiplier),
            labor=_line_item(labor, settings, complexity_multiplier),
        ),
    )
