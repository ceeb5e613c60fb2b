from fastapi import APIRouter, Depends

from risk_api.api.deps import get_metadata
from risk_api.ml.artifacts import ArtifactMetadata

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(metadata: ArtifactMetadata = Depends(get_metadata)):
    status = metadata.get_status()
    return {
        "status": "ok",
        "artifacts": {"status": status["status"], "version": status["version"]},
    }
