"""scikit-learn pipelines used by the sample programs.

Every pipeline has a ``features`` step (a ColumnTransformer that encodes,
normalizes and concatenates input columns into one feature vector) followed
by a single trainer step.
"""
from __future__ import annotations
from typing import List
import pandas as pd
from sklearn.base import clone
from sklearn.cluster import KMeans
from sklearn.compose import ColumnTransformer
from sklearn.linear_model import Ridge
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder, StandardScaler
from .constants import L2_REGULARIZATION, SEED
from .readers import IRIS_FEATURES

HOUSE_FEATURES = ["size"]
HOUSE_LABEL = "price"

TAXI_CATEGORICAL_FEATURES = ["vendor_id", "rate_code", "payment_type"]
TAXI_NUMERIC_FEATURES = ["passenger_count", "trip_time_in_secs", "trip_distance"]
TAXI_LABEL = "fare_amount"


def _sag_regressor(max_iter: int) -> Ridge:
    return Ridge(
        alpha=L2_REGULARIZATION,
        solver="sag",
        max_iter=max_iter,
        random_state=SEED,
    )


def build_house_price_pipeline(max_iter: int = 100) -> Pipeline:
    features = ColumnTransformer([("features", "passthrough", HOUSE_FEATURES)])
    return Pipeline([
        ("features", features),
        ("regressor", _sag_regressor(max_iter)),
    ])


def build_iris_pipeline(n_clusters: int = 3) -> Pipeline:
    features = ColumnTransformer([("features", "passthrough", IRIS_FEATURES)])
    return Pipeline([
        ("features", features),
        ("clusterer", KMeans(n_clusters=n_clusters, n_init=10, random_state=SEED)),
    ])


def build_taxi_fare_pipeline(max_iter: int = 1000) -> Pipeline:
    steps = [
        (
            f"{col}_encoded",
            OneHotEncoder(handle_unknown="ignore", sparse_output=False),
            [col],
        )
        for col in TAXI_CATEGORICAL_FEATURES
    ]
    steps += [(col, StandardScaler(), [col]) for col in TAXI_NUMERIC_FEATURES]
    return Pipeline([
        ("features", ColumnTransformer(steps)),
        ("regressor", _sag_regressor(max_iter)),
    ])


def feature_names(pipeline: Pipeline) -> List[str]:
    """Output names of a fitted pipeline's feature step."""
    return [str(n) for n in pipeline.named_steps["features"].get_feature_names_out()]


def feature_preview(pipeline: Pipeline, frame: pd.DataFrame, rows: int = 5) -> pd.DataFrame:
    """Transformed feature vectors for the first *rows* rows of *frame*.

    The preprocessing steps are cloned and fitted on *frame*, the trainer is
    not touched.
    """
    prep = clone(pipeline.named_steps["features"])
    values = prep.fit_transform(frame)
    names = [str(n) for n in prep.get_feature_names_out()]
    return pd.DataFrame(values[:rows], columns=names)


def describe_trainer(pipeline: Pipeline) -> str:
    trainer = pipeline.steps[-1][1]
    solver = getattr(trainer, "solver", None)
    name = type(trainer).__name__
    return f"{name} ({solver})" if solver else name


__all__ = [
    "HOUSE_FEATURES",
    "HOUSE_LABEL",
    "TAXI_CATEGORICAL_FEATURES",
    "TAXI_NUMERIC_FEATURES",
    "TAXI_LABEL",
    "build_house_price_pipeline",
    "build_iris_pipeline",
    "build_taxi_fare_pipeline",
    "feature_names",
    "feature_preview",
    "describe_trainer",
]
