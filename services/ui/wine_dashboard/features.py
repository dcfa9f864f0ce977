from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict

WHITE = 1
RED = 0


@dataclass(frozen=True)
class FeatureRange:
    label: str
    min: float
    max: float
    step: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    @property
    def decimals(self) -> int:
        return 4 if self.step < 0.01 else 2


# Bounds follow the 95th percentile of the training data.
FEATURE_RANGES: dict[str, FeatureRange] = {
    "fixed_acidity": FeatureRange("Fixed acidity", 4.0, 12.0, 0.1),
    "volatile_acidity": FeatureRange("Volatile acidity", 0.0, 0.9, 0.01),
    "citric_acid": FeatureRange("Citric acid", 0.0, 0.8, 0.01),
    "chlorides": FeatureRange("Chlorides", 0.0, 0.2, 0.001),
    "free_sulfur_dioxide": FeatureRange("Free sulfur dioxide", 1.0, 65.0, 1.0),
    "density": FeatureRange("Density", 0.98, 1.01, 0.0001),
    "alcohol": FeatureRange("Alcohol", 8.0, 14.0, 0.1),
    "type_white": FeatureRange("Wine type", 0, 1, 1),
}

CONTINUOUS_FEATURES = [f for f in FEATURE_RANGES if f != "type_white"]


class FeatureSet(BaseModel):
    """Current value of every model input, in wire order."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    fixed_acidity: float = 7.0
    volatile_acidity: float = 0.27
    citric_acid: float = 0.36
    chlorides: float = 0.05
    free_sulfur_dioxide: float = 30.0
    density: float = 0.995
    alcohol: float = 10.5
    type_white: Literal[0, 1] = WHITE

    def to_payload(self) -> dict:
        return self.model_dump()


def format_value(name: str, value: float) -> str:
    if name == "type_white":
        return "White" if value == WHITE else "Red"
    return f"{value:.{FEATURE_RANGES[name].decimals}f}"
