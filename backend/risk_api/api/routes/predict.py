import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from risk_api.api.deps import get_metadata, get_scorer
from risk_api.ml.artifacts import ArtifactMetadata
from risk_api.ml.scorer import RiskScorer
from risk_api.models.prediction import ErrorResponse, PredictionResponse
from risk_api.services.prediction_service import predict
from risk_api.services.validation import PredictionRequestError, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["predict"])


def _error_response(message: str) -> JSONResponse:
    body = ErrorResponse(error=message)
    return JSONResponse(status_code=500, content=body.model_dump())


@router.post(
    "/predict",
    response_model=PredictionResponse,
    responses={500: {"model": ErrorResponse}},
)
@router.post("/predict-risk", include_in_schema=False)
async def predict_risk(
    request: Request,
    scorer: RiskScorer = Depends(get_scorer),
    metadata: ArtifactMetadata = Depends(get_metadata),
):
    """Score an applicant payload of the form {"data": {...}}.

    Returns probability and bucket, or a 500 error body naming the problem.
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("Rejected non-JSON prediction request: %s", e)
        return _error_response("Missing data field in request")

    logger.debug("Received prediction request: %s", body)

    try:
        applicant = validate_payload(body)
        return predict(applicant, scorer, metadata)
    except PredictionRequestError as e:
        logger.error("Error in predict-risk: %s", e)
        return _error_response(str(e))
    except Exception as e:
        logger.exception("Unexpected failure in predict-risk")
        return _error_response(str(e) or "Unknown error")
