#!/usr/bin/env python3
"""Generate artifacts/artifacts_meta.json in the project root.

The metadata carries the bucket cutoffs the API reads at startup, plus a
description of the external model the cutoffs were fitted for.

Usage:
  python backend/scripts/generate_artifacts_meta.py
  python backend/scripts/generate_artifacts_meta.py --cutoffs 0.05 0.10 0.18 --version 1.1.0
"""
import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from risk_api.ml.artifacts import ArtifactError, Cutoffs

BACKEND_DIR = Path(__file__).resolve().parent.parent
PROJECT_ROOT = BACKEND_DIR.parent
ARTIFACTS_DIR = PROJECT_ROOT / "artifacts"


def _write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n")
    print(f"  wrote {path}")


def build_metadata(cutoffs: Cutoffs, version: str, calibrated: bool) -> dict:
    return {
        "version": version,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "model_name": "LightGBM classifier + isotonic calibrator (external)",
        "calibrated": calibrated,
        "cutoffs": cutoffs.as_dict(),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Write the risk cutoff metadata file")
    parser.add_argument(
        "--cutoffs", nargs=3, type=float, metavar=("A", "B", "C"),
        default=[0.06, 0.12, 0.20],
        help="Upper probability bounds for buckets A, B, C (default: 0.06 0.12 0.20)",
    )
    parser.add_argument("--version", default="1.0.0", help="Metadata version (default: 1.0.0)")
    parser.add_argument(
        "--uncalibrated", dest="calibrated", action="store_false",
        help="Cutoffs come from the raw, uncalibrated classifier",
    )
    parser.add_argument("--out", help="Output path (default: artifacts/artifacts_meta.json)")
    args = parser.parse_args()

    try:
        cutoffs = Cutoffs(*args.cutoffs)
    except ArtifactError as e:
        print(f"Invalid cutoffs: {e}", file=sys.stderr)
        sys.exit(1)

    out_path = Path(args.out) if args.out else ARTIFACTS_DIR / "artifacts_meta.json"
    print(f"Generating artifact metadata in {out_path.parent}")
    _write_json(out_path, build_metadata(cutoffs, args.version, args.calibrated))
    print("Done.")


if __name__ == "__main__":
    main()
