"""Prediction service.

Facade for artifact loading, scorer construction, and per-request scoring.
"""
from __future__ import annotations

import logging
from pathlib import Path

from risk_api.config import settings
from risk_api.ml.artifacts import ArtifactMetadata, load_artifacts
from risk_api.ml.bucket_assigner import assign_bucket
from risk_api.ml.noise import UniformNoise
from risk_api.ml.scorer import RiskScorer
from risk_api.models.applicant import ApplicantData
from risk_api.models.prediction import PredictionResponse

logger = logging.getLogger(__name__)


def initialize_artifacts(path: str | Path | None = None) -> ArtifactMetadata:
    """Load artifact metadata at startup."""
    metadata = load_artifacts(path)
    logger.info("Artifacts initialized — status: %s", metadata.get_status()["status"])
    return metadata


def build_scorer() -> RiskScorer:
    """Create the process-wide scorer from settings."""
    noise = UniformNoise(settings.NOISE_AMPLITUDE, seed=settings.NOISE_SEED)
    return RiskScorer(noise=noise, clamp_after_noise=settings.CLAMP_AFTER_NOISE)


def predict(
    applicant: ApplicantData,
    scorer: RiskScorer,
    metadata: ArtifactMetadata,
) -> PredictionResponse:
    """Score one applicant and bucket the probability against the cutoffs."""
    breakdown = scorer.score(applicant)
    bucket = assign_bucket(breakdown.probability, metadata.cutoffs)

    logger.info(
        "Prediction: credit_to_income=%.4f annuity_to_income=%.4f debt_to_income=%.4f "
        "probability=%.4f bucket=%s",
        breakdown.ratios.credit_to_income,
        breakdown.ratios.annuity_to_income,
        breakdown.ratios.debt_to_income,
        breakdown.probability,
        bucket,
    )
    return PredictionResponse(probability=breakdown.probability, bucket=bucket)
