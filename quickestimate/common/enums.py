import enum


class ProjectType(str, enum.Enum):
    FENCE = "Fence"
    DECK = "Deck"
    PERGOLA = "Pergola"
    REPAIR_HANDYMAN = "Repair/Handyman"


class ComplexityLevel(str, enum.Enum):
    EASY = "easy"
    STANDARD = "standard"
    DIFFICULT = "difficult"


class Measurement(str, enum.Enum):
    LINEAR_FEET = "linear_feet"
    SQUARE_FEET = "square_feet"
    HOURS_REQUESTED = "hours_requested"


class StorageBackend(str, enum.Enum):
    AUTO = "auto"
    LOCAL = "local"
    INLINE = "inline"


# Each project type is priced off exactly one dimension.
PROJECT_MEASUREMENTS: dict[ProjectType, Measurement] = {
    ProjectType.FENCE: Measurement.LINEAR_FEET,
    ProjectType.DECK: Measurement.SQUARE_FEET,
    ProjectType.PERGOLA: Measurement.SQUARE_FEET,
    ProjectType.REPAIR_HANDYMAN: Measurement.HOURS_REQUESTED,
}
