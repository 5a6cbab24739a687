"""Least-squares line fitting for the predicted-vs-actual chart overlay.

The fit works from raw first and second moments of the samples:

    slope     = (mean(x) * mean(y) - mean(x*y)) / (mean(x)**2 - mean(x*x))
    intercept = mean(y) - slope * mean(x)

which is the ordinary least-squares solution rearranged so it can be
accumulated in a single pass over (observed, predicted) pairs.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple
import numpy as np


class InvalidInput(ValueError):
    """Raised when the sample set is empty or not made of finite pairs."""
    pass


class DegenerateInput(ValueError):
    """Raised when the x values have zero spread (vertical line)."""
    pass


Point = Tuple[float, float]


@dataclass(frozen=True)
class LineFit:
    slope: float
    intercept: float
    n: int
    r2: float
    equation: str

    def predict(self, x):
        if np.ndim(x):
            return self.slope * np.asarray(x, dtype=float) + self.intercept
        return self.slope * float(x) + self.intercept

    def endpoints(self, x1: float, x2: float) -> Tuple[Point, Point]:
        return (
            (float(x1), float(self.predict(x1))),
            (float(x2), float(self.predict(x2))),
        )


def _r2(y, yhat):
    ss_res = np.sum((y - yhat) ** 2)
    ss_tot = np.sum((y - np.mean(y)) ** 2)
    return float(1 - ss_res / ss_tot) if ss_tot != 0 else 0.0


def _as_pairs(samples) -> np.ndarray:
    try:
        arr = np.asarray(list(samples), dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"Samples must be numeric (x, y) pairs: {exc}") from exc
    if arr.size == 0:
        raise InvalidInput("Cannot fit a line to an empty sample set")
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidInput(
            f"Samples must be (x, y) pairs, got shape {arr.shape}"
        )
    if not np.all(np.isfinite(arr)):
        raise InvalidInput("Samples contain non-finite values")
    return arr


def fit_line(samples: Iterable[Sequence[float]]) -> LineFit:
    """Fit ``y = slope*x + intercept`` to (x, y) samples.

    Raises InvalidInput for an empty or malformed sample set and
    DegenerateInput when every x is the same (this includes a single sample).
    """
    arr = _as_pairs(samples)
    x = arr[:, 0]
    y = arr[:, 1]
    if np.all(x == x[0]):
        raise DegenerateInput(
            f"All {len(x)} x values equal {x[0]:g}; slope is undefined"
        )
    mean_x = np.mean(x)
    mean_y = np.mean(y)
    mean_xy = np.mean(x * y)
    mean_xx = np.mean(x * x)
    denom = mean_x * mean_x - mean_xx
    if denom == 0:
        raise DegenerateInput("Zero variance in x; slope is undefined")
    slope = float((mean_x * mean_y - mean_xy) / denom)
    intercept = float(mean_y - slope * mean_x)
    yhat = slope * x + intercept
    return LineFit(
        slope=slope,
        intercept=intercept,
        n=int(len(x)),
        r2=_r2(y, yhat),
        equation=f"y = {slope:.4g}x + {intercept:.4g}",
    )


def fit_line_xy(x: Sequence[float], y: Sequence[float]) -> LineFit:
    """Same as :func:`fit_line` for two parallel sequences."""
    x = list(x)
    y = list(y)
    if len(x) != len(y):
        raise InvalidInput(
            f"x and y must have the same length ({len(x)} != {len(y)})"
        )
    return fit_line(zip(x, y))


__all__ = [
    "LineFit",
    "InvalidInput",
    "DegenerateInput",
    "fit_line",
    "fit_line_xy",
]
