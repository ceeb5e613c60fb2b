from fastapi import APIRouter, Depends

from risk_api.api.deps import get_metadata
from risk_api.ml.artifacts import ArtifactMetadata
from risk_api.ml.bucket_assigner import CATCH_ALL_BUCKET, bucket_label
from risk_api.models.applicant import CONTRACT_TYPES, EDUCATION_LEVELS, GENDERS
from risk_api.models.prediction import CategoricalLevels, ModelMetadata

router = APIRouter(tags=["models"])


@router.get("/model/metadata", response_model=ModelMetadata)
def get_model_metadata(metadata: ArtifactMetadata = Depends(get_metadata)):
    """Return cutoffs, risk labels, and the form's categorical options."""
    cutoffs = metadata.cutoffs.as_dict()
    return ModelMetadata(
        version=metadata.model_version,
        model_name=metadata.model_name,
        calibrated=metadata.calibrated,
        cutoffs=cutoffs,
        risk_labels={b: bucket_label(b) for b in [*cutoffs, CATCH_ALL_BUCKET]},
        levels=CategoricalLevels(
            genders=GENDERS,
            contract_types=CONTRACT_TYPES,
            education_levels=EDUCATION_LEVELS,
        ),
    )
