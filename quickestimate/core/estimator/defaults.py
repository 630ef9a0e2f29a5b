"""Pricing settings seeded into the settings store on first boot."""

from quickestimate.common.enums import Measurement
from quickestimate.core.estimator.schemas import (
    ComplexityMultipliers,
    EstimateSettings,
    LevelMultipliers,
    ProjectConfig,
    ProjectConfigs,
)

DEFAULT_SETTINGS = EstimateSettings(
    labor_rate_per_hour=85,
    low_factor=0.9,
    high_factor=1.15,
    complexity_multipliers=ComplexityMultipliers(
        access=LevelMultipliers(easy=0.95, standard=1, difficult=1.2),
        demo_haul_off=LevelMultipliers(easy=0.95, standard=1, difficult=1.25),
        slope=LevelMultipliers(easy=0.95, standard=1, difficult=1.2),
    ),
    project_configs=ProjectConfigs(
        fence=ProjectConfig(
            unit_material_cost=42,
            production_rate_per_hour=8,
            labor_hours_base=3,
            minimum_charge=1200,
            measurement=Measurement.LINEAR_FEET,
        ),
        deck=ProjectConfig(
            unit_material_cost=24,
            production_rate_per_hour=10,
            labor_hours_base=8,
            minimum_charge=3000,
            measurement=Measurement.SQUARE_FEET,
        ),
        pergola=ProjectConfig(
            unit_material_cost=36,
            production_rate_per_hour=7,
            labor_hours_base=10,
            minimum_charge=3500,
            measurement=Measurement.SQUARE_FEET,
        ),
        repair_handyman=ProjectConfig(
            unit_material_cost=18,
            production_rate_per_hour=1,
            labor_hours_base=2,
            minimum_charge=300,
            measurement=Measurement.HOURS_REQUESTED,
        ),
    ),
)


def default_settings() -> EstimateSettings:
    """Return a private copy of the defaults."""
    return DEFAULT_SETTINGS.model_copy(deep=True)
