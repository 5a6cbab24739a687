"""mlsamples package root.

Exposes high-level API surface for convenience.
"""
from .analysis.fits import (  # noqa: F401
	DegenerateInput,
	InvalidInput,
	LineFit,
	fit_line,
	fit_line_xy,
)
from .analysis.metrics import evaluate_regression, evaluate_clustering  # noqa: F401
from .charts import make_regression_chart, export_chart  # noqa: F401
from .core import DataModel  # noqa: F401
from .persistence import save_model, load_model, list_models  # noqa: F401
from .readers import ParseError, read_taxi_trips, read_iris  # noqa: F401
