"""Scoring pipeline — artifact metadata, heuristic scorer, noise, and bucketing."""
from risk_api.ml.artifacts import ArtifactError, ArtifactMetadata, Cutoffs, load_artifacts
from risk_api.ml.bucket_assigner import assign_bucket, bucket_label
from risk_api.ml.noise import FixedNoise, UniformNoise, ZeroNoise
from risk_api.ml.scorer import RiskScorer

__all__ = [
    "ArtifactError",
    "ArtifactMetadata",
    "Cutoffs",
    "load_artifacts",
    "assign_bucket",
    "bucket_label",
    "FixedNoise",
    "UniformNoise",
    "ZeroNoise",
    "RiskScorer",
]
