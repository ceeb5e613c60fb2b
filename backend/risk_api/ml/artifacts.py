"""Artifact loader — reads artifacts_meta.json and validates the risk cutoffs.

The trained classifier and calibrator are not served from this codebase; only
their metadata (cutoffs, version) is read here. Loaded once at startup and
treated as read-only for the life of the process.
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from risk_api.config import settings

logger = logging.getLogger(__name__)

_DEFAULT_CUTOFFS = {"A": 0.06, "B": 0.12, "C": 0.20}
_DEFAULT_MODEL_NAME = "LightGBM classifier + isotonic calibrator (external)"


class ArtifactError(ValueError):
    """Raised when artifact metadata is unreadable or inconsistent."""


@dataclass(frozen=True)
class Cutoffs:
    """Upper probability bounds for buckets A, B and C. Anything above C is D."""

    A: float
    B: float
    C: float

    def __post_init__(self) -> None:
        for name in ("A", "B", "C"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool) or math.isnan(value):
                raise ArtifactError(f"Cutoff {name} must be a number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise ArtifactError(f"Cutoff {name} must be within [0, 1], got {value}")
        if not self.A < self.B < self.C:
            raise ArtifactError(
                f"Cutoffs must be strictly increasing (A < B < C), got "
                f"A={self.A}, B={self.B}, C={self.C}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Cutoffs":
        missing = [name for name in ("A", "B", "C") if name not in data]
        if missing:
            raise ArtifactError(f"Cutoffs missing keys: {', '.join(missing)}")
        return cls(A=data["A"], B=data["B"], C=data["C"])

    def items(self) -> list[tuple[str, float]]:
        """Ordered (bucket, upper bound) pairs, safest first."""
        return [("A", self.A), ("B", self.B), ("C", self.C)]

    def as_dict(self) -> dict[str, float]:
        return dict(self.items())


DEFAULT_CUTOFFS = Cutoffs(**_DEFAULT_CUTOFFS)


@dataclass(frozen=True)
class ArtifactMetadata:
    cutoffs: Cutoffs = DEFAULT_CUTOFFS
    model_version: str = "0.0.0"
    model_name: str = _DEFAULT_MODEL_NAME
    generated_at: str = ""
    calibrated: bool = False
    source: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str | None = None) -> "ArtifactMetadata":
        if not isinstance(data, dict):
            raise ArtifactError("Artifact metadata must be a JSON object")
        if "cutoffs" not in data:
            raise ArtifactError("Artifact metadata has no 'cutoffs' entry")
        cutoffs = data["cutoffs"]
        if not isinstance(cutoffs, dict):
            raise ArtifactError("'cutoffs' must be an object with keys A, B, C")
        return cls(
            cutoffs=Cutoffs.from_dict(cutoffs),
            model_version=str(data.get("version", "0.0.0")),
            model_name=str(data.get("model_name", _DEFAULT_MODEL_NAME)),
            generated_at=str(data.get("generated_at", "")),
            calibrated=bool(data.get("calibrated", False)),
            source=source,
        )

    def get_status(self) -> dict[str, Any]:
        return {
            "status": "loaded" if self.source else "default",
            "version": self.model_version,
            "model_name": self.model_name,
            "generated_at": self.generated_at,
            "calibrated": self.calibrated,
            "cutoffs": self.cutoffs.as_dict(),
        }


def resolve_artifacts_path(path: str | Path | None = None) -> Path:
    """Return the metadata file path; a directory resolves to its CUTOFFS_FILE."""
    candidate = Path(path or settings.ARTIFACTS_DIR)
    if candidate.suffix != ".json":
        candidate = candidate / settings.CUTOFFS_FILE
    return candidate.resolve()


def load_artifacts(path: str | Path | None = None) -> ArtifactMetadata:
    """Load artifact metadata once. A missing file yields the built-in cutoffs."""
    meta_path = resolve_artifacts_path(path)
    logger.info("Loading artifact metadata from %s", meta_path)

    if not meta_path.is_file():
        logger.warning("No %s found — using default cutoffs %s", meta_path.name, _DEFAULT_CUTOFFS)
        return ArtifactMetadata()

    try:
        data = json.loads(meta_path.read_text())
    except json.JSONDecodeError as e:
        raise ArtifactError(f"Malformed artifact metadata in {meta_path}: {e}") from e

    metadata = ArtifactMetadata.from_dict(data, source=str(meta_path))
    logger.info(
        "Loaded artifact metadata v%s — cutoffs %s",
        metadata.model_version,
        metadata.cutoffs.as_dict(),
    )
    return metadata
