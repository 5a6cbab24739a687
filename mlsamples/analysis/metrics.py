"""Evaluation metrics for the regression and clustering samples."""
from __future__ import annotations
from dataclasses import dataclass
import numpy as np
import pandas as pd
from sklearn.metrics import (
    davies_bouldin_score,
    mean_absolute_error,
    mean_squared_error,
    r2_score,
)
from .fits import InvalidInput


@dataclass
class RegressionMetrics:
    loss: float
    r2: float
    mean_absolute_error: float
    mean_squared_error: float
    root_mean_squared_error: float


@dataclass
class ClusteringMetrics:
    average_distance: float
    davies_bouldin: float


def evaluate_regression(y_true, y_pred) -> RegressionMetrics:
    y_true = np.asarray(y_true, dtype=float).ravel()
    y_pred = np.asarray(y_pred, dtype=float).ravel()
    if len(y_true) == 0:
        raise InvalidInput("Cannot evaluate on an empty set")
    if len(y_true) != len(y_pred):
        raise InvalidInput(
            f"Label/score length mismatch ({len(y_true)} != {len(y_pred)})"
        )
    mse = float(mean_squared_error(y_true, y_pred))
    # Squared loss is the default regression loss, so it equals the MSE.
    return RegressionMetrics(
        loss=mse,
        r2=float(r2_score(y_true, y_pred)),
        mean_absolute_error=float(mean_absolute_error(y_true, y_pred)),
        mean_squared_error=mse,
        root_mean_squared_error=float(np.sqrt(mse)),
    )


def evaluate_clustering(pipeline, frame: pd.DataFrame) -> ClusteringMetrics:
    """Score a fitted clustering pipeline on *frame*.

    ``average_distance`` is the mean squared distance from each row to its
    assigned centroid.
    """
    if len(frame) == 0:
        raise InvalidInput("Cannot evaluate on an empty set")
    labels = pipeline.predict(frame)
    distances = pipeline.transform(frame)
    assigned = distances[np.arange(len(labels)), labels]
    features = pipeline[:-1].transform(frame)
    if len(np.unique(labels)) > 1:
        db = float(davies_bouldin_score(features, labels))
    else:
        db = 0.0
    return ClusteringMetrics(
        average_distance=float(np.mean(assigned ** 2)),
        davies_bouldin=db,
    )


__all__ = [
    "RegressionMetrics",
    "ClusteringMetrics",
    "evaluate_regression",
    "evaluate_clustering",
]
