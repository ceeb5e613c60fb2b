import pytest
from fastapi.testclient import TestClient

from risk_api.main import app
from risk_api.ml.artifacts import ArtifactMetadata, Cutoffs
from risk_api.ml.noise import ZeroNoise
from risk_api.ml.scorer import RiskScorer

TEST_CUTOFFS = Cutoffs(A=0.06, B=0.12, C=0.20)


@pytest.fixture
def applicant_payload():
    """Median applicant from the training data."""
    return {
        "annual_income": 147150,
        "credit_amount": 599025,
        "annuity": 27108,
        "age": 35,
        "employment_years": 5,
        "gender": "F",
        "contract_type": "Cash loans",
        "education": "Higher education",
    }


@pytest.fixture
def client():
    """TestClient with startup run, then pinned to fixed cutoffs and no noise."""
    with TestClient(app) as c:
        app.state.metadata = ArtifactMetadata(cutoffs=TEST_CUTOFFS)
        app.state.scorer = RiskScorer(noise=ZeroNoise())
        yield c
