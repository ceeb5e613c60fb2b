"""Request validation — checks the prediction payload before scoring.

Only presence and basic type coercion are enforced. Categorical values are
accepted as any string.
"""
from __future__ import annotations

import math
from typing import Any

from pydantic import ValidationError

from risk_api.models.applicant import ApplicantData

REQUIRED_FIELDS = (
    "annual_income",
    "credit_amount",
    "annuity",
    "age",
    "employment_years",
    "gender",
    "contract_type",
    "education",
)
_NUMERIC_FIELDS = REQUIRED_FIELDS[:5]


class PredictionRequestError(ValueError):
    """Raised when a prediction request cannot be scored."""


def validate_payload(body: Any) -> ApplicantData:
    """Return the applicant record from a decoded request body.

    Raises PredictionRequestError naming the first problem found.
    """
    if not isinstance(body, dict) or not isinstance(body.get("data"), dict):
        raise PredictionRequestError("Missing data field in request")

    data = body["data"]
    for field in REQUIRED_FIELDS:
        if field not in data:
            raise PredictionRequestError(f"Missing required field: {field}")

    try:
        applicant = ApplicantData.model_validate({f: data[f] for f in REQUIRED_FIELDS})
    except ValidationError as e:
        first = e.errors()[0]
        field = first["loc"][0] if first.get("loc") else "data"
        raise PredictionRequestError(f"Invalid value for field {field}: {first['msg']}") from e

    for field in _NUMERIC_FIELDS:
        if not math.isfinite(getattr(applicant, field)):
            raise PredictionRequestError(f"Invalid value for field {field}: must be a finite number")

    if applicant.annual_income <= 0:
        raise PredictionRequestError("annual_income must be greater than zero")

    return applicant
