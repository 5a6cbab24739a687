"""Human-readable console reports shared by the sample programs."""
from __future__ import annotations
import pandas as pd
from .analysis.metrics import ClusteringMetrics, RegressionMetrics

RULE = "*" * 70


def format_short(value: float) -> str:
    """At most two decimals without trailing zeros: 0.90 -> '0.9', 1.0 -> '1'."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def banner(text: str):
    print(f"=============== {text} ===============")


def print_regression_metrics(name: str, metrics: RegressionMetrics):
    print(RULE)
    print(f"*       Metrics for {name} regression model")
    print("*" + "-" * 69)
    print(f"*       LossFn:        {metrics.loss:.2f}")
    print(f"*       R2 Score:      {metrics.r2:.2f}")
    print(f"*       Absolute loss: {metrics.mean_absolute_error:.2f}")
    print(f"*       Squared loss:  {metrics.mean_squared_error:.2f}")
    print(f"*       RMS loss:      {metrics.root_mean_squared_error:.2f}")
    print(RULE)


def print_clustering_metrics(name: str, metrics: ClusteringMetrics):
    print(RULE)
    print(f"*       Metrics for {name} clustering model")
    print("*" + "-" * 69)
    print(f"*       Average Distance: {metrics.average_distance:.4f}")
    print(f"*       Davies Bouldin Index: {metrics.davies_bouldin:.4f}")
    print(RULE)


def peek_frame(df: pd.DataFrame, rows: int, title: str):
    print(f"Peek data in {title}: showing {min(rows, len(df))} rows")
    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(df.head(rows).to_string())


def print_prediction_pair(predicted: float, actual: float):
    print("-------------------------------------------------")
    print(f"Predicted : {predicted:.4f}")
    print(f"Actual:    {actual:.4f}")
    print("-------------------------------------------------")
