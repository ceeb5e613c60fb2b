from fastapi import Request

from risk_api.ml.artifacts import ArtifactMetadata
from risk_api.ml.scorer import RiskScorer


def get_metadata(request: Request) -> ArtifactMetadata:
    """FastAPI dependency returning the artifact metadata loaded at startup."""
    return request.app.state.metadata


def get_scorer(request: Request) -> RiskScorer:
    return request.app.state.scorer
