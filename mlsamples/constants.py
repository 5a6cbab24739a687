"""Central constants."""

SEED = 0
L2_REGULARIZATION = 1e-3

# Training fares outside [lower, upper) are treated as error data.
FARE_LOWER_BOUND = 1.0
FARE_UPPER_BOUND = 150.0

PEEK_ROWS = 5
CHART_RECORDS = 100

# Rides above $35 are not shown in the chart.
CHART_X_RANGE = (0.0, 35.0)
CHART_Y_RANGE = (0.0, 35.0)
OVERLAY_X = (1.0, 39.0)

CHART_TITLE = "Distribution of Taxi Fare Prediction"
CHART_X_TITLE = "Measured"
CHART_Y_TITLE = "Predicted"

PALETTES = {
    "Plotly": [
        "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
        "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf"
    ]
}
POINT_COLOR = PALETTES["Plotly"][0]
LINE_COLOR = PALETTES["Plotly"][3]

__all__ = [
    "SEED",
    "L2_REGULARIZATION",
    "FARE_LOWER_BOUND",
    "FARE_UPPER_BOUND",
    "PEEK_ROWS",
    "CHART_RECORDS",
    "CHART_X_RANGE",
    "CHART_Y_RANGE",
    "OVERLAY_X",
    "CHART_TITLE",
    "CHART_X_TITLE",
    "CHART_Y_TITLE",
    "PALETTES",
    "POINT_COLOR",
    "LINE_COLOR",
]
