"""Pydantic models for the pricing engine.

``EstimateInputs`` and ``EstimateSettings`` are the two arguments of
``calculate_estimate``; ``EstimateResult`` is the frozen snapshot it returns
and the exact value persisted with a lead.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from quickestimate.common.enums import (
    PROJECT_MEASUREMENTS,
    ComplexityLevel,
    Measurement,
    ProjectType,
)

# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class DimensionInputs(BaseModel):
    """Raw measurements. Only the one named by the project's measurement is priced."""

    model_config = ConfigDict(frozen=True)

    linear_feet: float | None = Field(None, ge=0, allow_inf_nan=False)
    height_feet: float | None = Field(None, ge=0, allow_inf_nan=False)
    square_feet: float | None = Field(None, ge=0, allow_inf_nan=False)
    hours_requested: float | None = Field(None, ge=0, allow_inf_nan=False)


class EstimateInputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    project_type: ProjectType
    dimensions: DimensionInputs = Field(default_factory=DimensionInputs)
    access: ComplexityLevel
    demo_haul_off: ComplexityLevel
    slope: ComplexityLevel
    notes: str = Field("", max_length=1000)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class LevelMultipliers(BaseModel):
    model_config = ConfigDict(frozen=True)

    easy: float = Field(gt=0)
    standard: float = Field(gt=0)
    difficult: float = Field(gt=0)

    def for_level(self, level: ComplexityLevel) -> float:
        return getattr(self, level.value)


class ComplexityMultipliers(BaseModel):
    model_config = ConfigDict(frozen=True)

    access: LevelMultipliers
    demo_haul_off: LevelMultipliers
    slope: LevelMultipliers


class ProjectConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    unit_material_cost: float = Field(ge=0)
    production_rate_per_hour: float = Field(gt=0)
    labor_hours_base: float = Field(ge=0)
    minimum_charge: float = Field(ge=0)
    measurement: Measurement


_CONFIG_FIELDS: dict[ProjectType, str] = {
    ProjectType.FENCE: "fence",
    ProjectType.DECK: "deck",
    ProjectType.PERGOLA: "pergola",
    ProjectType.REPAIR_HANDYMAN: "repair_handyman",
}


class ProjectConfigs(BaseModel):
    """One config per project type; serialized keyed by the project-type value."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    fence: ProjectConfig = Field(alias=ProjectType.FENCE.value)
    deck: ProjectConfig = Field(alias=ProjectType.DECK.value)
    pergola: ProjectConfig = Field(alias=ProjectType.PERGOLA.value)
    repair_handyman: ProjectConfig = Field(alias=ProjectType.REPAIR_HANDYMAN.value)

    @model_validator(mode="after")
    def _check_measurements(self) -> ProjectConfigs:
        for project_type, expected in PROJECT_MEASUREMENTS.items():
            actual = self.for_project(project_type).measurement
            if actual != expected:
                raise ValueError(
                    f"{project_type.value} must be measured in {expected.value}, got {actual.value}"
                )
        return self

    def for_project(self, project_type: ProjectType) -> ProjectConfig:
        return getattr(self, _CONFIG_FIELDS[project_type])


class EstimateSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    labor_rate_per_hour: float = Field(gt=0)
    low_factor: float = Field(gt=0)
    high_factor: float = Field(gt=0)
    complexity_multipliers: ComplexityMultipliers
    project_configs: ProjectConfigs


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


class LineItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    base: float
    low: float
    high: float


class LineItems(BaseModel):
    model_config = ConfigDict(frozen=True)

    materials: LineItem
    labor: LineItem


class EstimateResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    quantity: float
    material_cost: float
    labor_hours: float
    labor_cost: float
    subtotal: float
    complexity_multiplier: float
    adjusted_subtotal: float
    low_estimate: float
    high_estimate: float
    line_items: LineItems


class RequiredFieldsResponse(BaseModel):
    project_type: ProjectType
    required_fields: list[str]
