"""House price from size: linear regression on a tiny in-memory dataset.

Sizes are in thousands of square feet, prices in hundreds of thousands.
"""
from __future__ import annotations
import logging
import sys
from typing import Any, Dict, Optional
import pandas as pd
from ..analysis.metrics import evaluate_regression
from ..config import Settings, configure_logging
from ..console import format_short
from ..models import HOUSE_FEATURES, HOUSE_LABEL, build_house_price_pipeline
from ..persistence.serializer import save_model

logger = logging.getLogger(__name__)

MODEL_NAME = "house_price_model"

TRAINING_DATA = pd.DataFrame({
    "size": [1.1, 1.9, 2.8, 3.4],
    "price": [1.2, 2.3, 3.0, 3.7],
})
TEST_DATA = pd.DataFrame({
    "size": [1.1, 1.9, 2.8, 3.4],
    "price": [0.98, 2.1, 2.9, 3.6],
})
QUERY_SIZE = 2.5


def train(frame: pd.DataFrame = TRAINING_DATA):
    pipeline = build_house_price_pipeline()
    pipeline.fit(frame[HOUSE_FEATURES], frame[HOUSE_LABEL])
    return pipeline


def predict_price(model, size: float) -> float:
    return float(model.predict(pd.DataFrame({"size": [size]}))[0])


def run(settings: Settings) -> Dict[str, Any]:
    model = train(TRAINING_DATA)
    model_path = save_model(
        settings.model_path(MODEL_NAME), model, TRAINING_DATA, name=MODEL_NAME
    )

    price = predict_price(model, QUERY_SIZE)
    print(
        f"Predicted price for size: {QUERY_SIZE * 1000:.0f} sq ft= "
        f"${price * 100:,.2f}k"
    )

    scores = model.predict(TEST_DATA[HOUSE_FEATURES])
    metrics = evaluate_regression(TEST_DATA[HOUSE_LABEL], scores)
    print(f"R^2: {format_short(metrics.r2)}")
    print(f"RMS error: {format_short(metrics.root_mean_squared_error)}")
    return {"model_path": model_path, "price": price, "metrics": metrics}


def main(settings: Optional[Settings] = None) -> int:
    try:
        settings = settings or Settings()
        configure_logging(settings.log_level)
        run(settings)
    except (ValueError, OSError) as exc:
        configure_logging()
        logger.error("House price sample failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
