"""Bucket assigner — maps a default probability to a letter bucket A-D.

Buckets are checked in order A, B, C; the first whose cutoff is >= the
probability wins. Anything above the C cutoff (or NaN) is D.
"""
from __future__ import annotations

import math

from risk_api.ml.artifacts import Cutoffs

CATCH_ALL_BUCKET = "D"

RISK_LABELS = {
    "A": "Low Risk",
    "B": "Moderate Risk",
    "C": "High Risk",
    "D": "Very High Risk",
}


def assign_bucket(probability: float, cutoffs: Cutoffs) -> str:
    """Return the bucket for a probability. Ties go to the safer bucket."""
    if math.isnan(probability):
        return CATCH_ALL_BUCKET
    for bucket, upper in cutoffs.items():
        if probability <= upper:
            return bucket
    return CATCH_ALL_BUCKET


def bucket_label(bucket: str) -> str:
    return RISK_LABELS.get(bucket, "Unknown")
