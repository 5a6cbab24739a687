"""Taxi fare regression: train, evaluate, persist, predict and chart.

Steps:
 1. Read train/test CSVs, drop training fares outside [$1, $150)
 2. Encode/normalize features and train a SAG ridge regressor
 3. Evaluate on the test set and save the model container
 4. Reload the model from disk and score a single trip
 5. Chart predicted vs actual fares for the first test rows
"""
from __future__ import annotations
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional
import pandas as pd
from ..analysis.fits import InvalidInput, fit_line
from ..analysis.metrics import evaluate_regression
from ..charts import export_chart, make_regression_chart, open_chart
from ..config import Settings, configure_logging
from ..console import (
    banner,
    peek_frame,
    print_prediction_pair,
    print_regression_metrics,
)
from ..constants import FARE_LOWER_BOUND, FARE_UPPER_BOUND, PEEK_ROWS
from ..core.data_model import DataModel
from ..models import (
    TAXI_LABEL,
    build_taxi_fare_pipeline,
    describe_trainer,
    feature_preview,
)
from ..persistence.serializer import load_model, save_model
from ..readers import read_taxi_trips

logger = logging.getLogger(__name__)

MODEL_NAME = "taxi_fare_model"
CHART_NAME = "TaxiRegressionDistribution"

# vendor_id,rate_code,passenger_count,trip_time_in_secs,trip_distance,payment_type,fare_amount
# VTS,1,1,1140,3.75,CRD,15.5
SAMPLE_TRIP = {
    "vendor_id": "VTS",
    "rate_code": "1",
    "passenger_count": 1.0,
    "trip_time_in_secs": 1140.0,
    "trip_distance": 3.75,
    "payment_type": "CRD",
    "fare_amount": 0.0,
}
SAMPLE_ACTUAL_FARE = 15.5


def load_training_data(path) -> DataModel:
    dm = DataModel(read_taxi_trips(path))
    dm.set_column_meta("trip_time_in_secs", unit="s")
    dm.set_column_meta("trip_distance", unit="mi")
    dm.set_column_meta(TAXI_LABEL, unit="USD", label="Fare")
    dm.apply_operation(
        "filter_range",
        column=TAXI_LABEL,
        lower=FARE_LOWER_BOUND,
        upper=FARE_UPPER_BOUND,
    )
    if dm.df.empty:
        raise InvalidInput(f"No training rows left in {path} after outlier filtering")
    return dm


def build_train_evaluate_and_save(settings: Settings):
    train_dm = load_training_data(settings.taxi_train_file)
    test_df = read_taxi_trips(settings.taxi_test_file)
    if test_df.empty:
        raise InvalidInput(f"No test rows in {settings.taxi_test_file}")

    pipeline = build_taxi_fare_pipeline()
    peek_frame(train_dm.df, PEEK_ROWS, "training data")
    peek_frame(
        feature_preview(pipeline, train_dm.df, PEEK_ROWS),
        PEEK_ROWS,
        "'Features' column",
    )

    banner("Training the model")
    pipeline.fit(train_dm.df, train_dm.df[TAXI_LABEL])

    banner("Evaluating Model's accuracy with Test data")
    scores = pipeline.predict(test_df)
    metrics = evaluate_regression(test_df[TAXI_LABEL], scores)
    print_regression_metrics(describe_trainer(pipeline), metrics)

    model_path = save_model(
        settings.model_path(MODEL_NAME),
        pipeline,
        train_dm.df,
        dm=train_dm,
        extra={"metrics": asdict(metrics)},
        name=MODEL_NAME,
    )
    print(f"The model is saved to {model_path}")
    return pipeline, metrics, model_path


def predict_sample_trip(model_path: Path) -> float:
    model, _, _ = load_model(model_path)
    predicted = float(model.predict(pd.DataFrame([SAMPLE_TRIP]))[0])
    print("*" * 70)
    print(f"Predicted fare: {predicted:.4f}, actual fare: {SAMPLE_ACTUAL_FARE}")
    print("*" * 70)
    return predicted


def plot_regression_chart(settings: Settings, model_path: Path):
    model, _, _ = load_model(model_path)
    dm = DataModel(read_taxi_trips(settings.taxi_test_file))
    dm.apply_operation("head", n=settings.chart_records)
    actual = dm.df[TAXI_LABEL].tolist()
    predicted = [float(v) for v in model.predict(dm.df)]
    for a, p in zip(actual, predicted):
        print_prediction_pair(p, a)

    pairs = list(zip(actual, predicted))
    fit = fit_line(pairs)
    print(f"Regression line: {fit.equation} (R^2 {fit.r2:.2f})")
    fig = make_regression_chart(pairs, fit)
    chart_path = export_chart(fig, settings.chart_path(CHART_NAME))
    if settings.open_chart:
        print("Showing chart...")
        open_chart(chart_path)
    return fit, chart_path


def run(settings: Settings) -> Dict[str, Any]:
    _, metrics, model_path = build_train_evaluate_and_save(settings)
    predicted = predict_sample_trip(model_path)
    fit, chart_path = plot_regression_chart(settings, model_path)
    return {
        "metrics": metrics,
        "model_path": model_path,
        "sample_prediction": predicted,
        "fit": fit,
        "chart_path": chart_path,
    }


def main(settings: Optional[Settings] = None) -> int:
    try:
        settings = settings or Settings()
        configure_logging(settings.log_level)
        run(settings)
    except (ValueError, OSError) as exc:
        configure_logging()
        logger.error("Taxi fare sample failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
