from typing import Literal

from pydantic import BaseModel

Bucket = Literal["A", "B", "C", "D"]


class PredictionResponse(BaseModel):
    """Default probability and letter bucket returned to the caller."""
    probability: float
    bucket: Bucket


class ErrorResponse(BaseModel):
    error: str
    details: str = "Failed to process prediction request"


class CategoricalLevels(BaseModel):
    genders: list[str]
    contract_types: list[str]
    education_levels: list[str]


class ModelMetadata(BaseModel):
    """Cutoffs and form options exposed to the client."""
    version: str
    model_name: str
    calibrated: bool
    cutoffs: dict[str, float]
    risk_labels: dict[str, str]
    levels: CategoricalLevels
