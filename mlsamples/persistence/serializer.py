"""Model save/load (.zip container).

Uses a zip container with a JSON manifest + the joblib-pickled estimator.

Manifest structure (version 1):
{
    "version": 1,
    "meta": {"created_at": ISO8601, "app_version": str, "name": str},
    "schema": {column: dtype, ...},
    "data_model": {... optional, metadata + operation log, no rows ...},
    "extra": {... optional ...}
}
"""
from __future__ import annotations
import io
import json
import logging
import zipfile
from pathlib import Path
from typing import Any, Dict, List, Tuple
from datetime import datetime, timezone
import joblib
import pandas as pd
from ..core.data_model import DataModel

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"
MANIFEST_NAME = "manifest.json"
MODEL_NAME = "model.joblib"

Schema = Dict[str, str]


def schema_of(df: pd.DataFrame) -> Schema:
    """Input schema of a training frame as ``{column: dtype}``."""
    return {str(c): str(t) for c, t in df.dtypes.items()}


def save_model(
    path: str | Path,
    model,
    schema: Schema | pd.DataFrame,
    dm: DataModel | None = None,
    extra: Dict[str, Any] | None = None,
    name: str | None = None,
) -> Path:
    path = Path(path)
    if path.suffix != ".zip":
        path = path.with_suffix(".zip")
    if isinstance(schema, pd.DataFrame):
        schema = schema_of(schema)
    manifest = {
        "version": 1,
        "meta": {
            "created_at": datetime.now(timezone.utc).isoformat(),
            "app_version": APP_VERSION,
            "name": name or path.stem,
        },
        "schema": dict(schema),
    }
    if dm is not None:
        manifest["data_model"] = dm.to_dict(include_data=False)
    if extra:
        manifest["extra"] = extra
    buf = io.BytesIO()
    joblib.dump(model, buf)
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as z:
        z.writestr(MANIFEST_NAME, json.dumps(manifest, indent=2, default=str))
        z.writestr(MODEL_NAME, buf.getvalue())
    logger.info("Saved model %s to %s", manifest["meta"]["name"], path)
    return path


def load_model(path: str | Path) -> Tuple[Any, Schema, Dict[str, Any]]:
    """Load a model and return (model, schema, extra).

    ``extra['meta']`` holds the manifest meta block and, when the model was
    saved with a DataModel, ``extra['data_model']`` holds its DataModel.
    """
    path = Path(path)
    with zipfile.ZipFile(path, "r") as z:
        names = set(z.namelist())
        for required in (MANIFEST_NAME, MODEL_NAME):
            if required not in names:
                raise ValueError(f"{path} is not a model container: missing {required}")
        manifest = json.loads(z.read(MANIFEST_NAME).decode())
        model = joblib.load(io.BytesIO(z.read(MODEL_NAME)))
    schema = manifest.get("schema", {})
    extra = dict(manifest.get("extra", {}))
    extra.setdefault("meta", manifest.get("meta", {}))
    if "data_model" in manifest:
        extra["data_model"] = DataModel.from_dict(manifest["data_model"])
    logger.info("Loaded model %s from %s", extra["meta"].get("name"), path)
    return model, schema, extra


def list_models(directory: str | Path) -> List[Path]:
    """Return list of .zip model paths in directory (non-recursive)."""
    p = Path(directory)
    if not p.exists():
        return []
    return sorted(p.glob("*.zip"))


__all__ = [
    "save_model",
    "load_model",
    "list_models",
    "schema_of",
    "APP_VERSION",
]
