from pydantic import BaseModel, ConfigDict, Field
from typing import Literal


class WineFeatures(BaseModel):
    # NaN and infinity are not valid JSON for the upstream request
    model_config = ConfigDict(allow_inf_nan=False)

    fixed_acidity: float = Field(..., examples=[7.0])
    volatile_acidity: float = Field(..., examples=[0.27])
    citric_acid: float = Field(..., examples=[0.36])
    chlorides: float = Field(..., examples=[0.05])
    free_sulfur_dioxide: float = Field(..., examples=[30])
    density: float = Field(..., examples=[0.995])
    alcohol: float = Field(..., examples=[10.5])
    type_white: Literal[0, 1] = Field(..., examples=[1])


class PredictResponse(BaseModel):
    predicted_quality: float


class ErrorResponse(BaseModel):
    error: str
