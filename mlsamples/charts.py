"""Predicted-vs-actual scatter chart with a regression overlay line."""
from __future__ import annotations
import logging
import webbrowser
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple
import plotly.graph_objs as go
from .analysis.fits import LineFit
from .constants import (
    CHART_TITLE,
    CHART_X_RANGE,
    CHART_X_TITLE,
    CHART_Y_RANGE,
    CHART_Y_TITLE,
    LINE_COLOR,
    OVERLAY_X,
    POINT_COLOR,
)
from .themes import DEFAULT_THEME, set_theme

logger = logging.getLogger(__name__)


def make_regression_chart(
    pairs: Iterable[Sequence[float]],
    fit: Optional[LineFit] = None,
    title: str = CHART_TITLE,
    x_title: str = CHART_X_TITLE,
    y_title: str = CHART_Y_TITLE,
    x_range: Tuple[float, float] = CHART_X_RANGE,
    y_range: Tuple[float, float] = CHART_Y_RANGE,
    overlay_x: Tuple[float, float] = OVERLAY_X,
    theme: str = DEFAULT_THEME,
) -> go.Figure:
    """Scatter (actual, predicted) points; draw *fit* across *overlay_x*.

    Points outside the axis ranges are kept in the trace but fall off-chart.
    """
    pairs = list(pairs)
    xs = [float(p[0]) for p in pairs]
    ys = [float(p[1]) for p in pairs]
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=xs,
        y=ys,
        mode="markers",
        name="Predictions",
        marker=dict(color=POINT_COLOR, size=6, symbol="circle-open"),
    ))
    if fit is not None:
        (x1, y1), (x2, y2) = fit.endpoints(*overlay_x)
        fig.add_trace(go.Scatter(
            x=[x1, x2],
            y=[y1, y2],
            mode="lines",
            name=fit.equation,
            line=dict(color=LINE_COLOR, width=2),
        ))
    fig.update_layout(
        template=set_theme(theme),
        title=dict(text=title, font=dict(size=20)),
        showlegend=fit is not None,
    )
    fig.update_xaxes(title_text=x_title, range=list(x_range))
    fig.update_yaxes(title_text=y_title, range=list(y_range))
    return fig


def export_chart(fig: go.Figure, path: str | Path) -> Path:
    """Write *fig* to *path*: ``.html`` as a page, anything else as an image."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".html":
        fig.write_html(str(path), include_plotlyjs="cdn")
    else:
        # Static export goes through kaleido; format follows the suffix.
        try:
            fig.write_image(str(path))
        except RuntimeError as exc:
            logger.warning("Static image export failed for %s", path)
            raise OSError(
                f"Could not write {path} ({exc}); set MLSAMPLES_CHART_FORMAT=html "
                "to export the chart without an image engine"
            ) from exc
    logger.info("Chart written to %s", path)
    return path


def open_chart(path: str | Path) -> bool:
    """Show the chart file in the default viewer."""
    return webbrowser.open(Path(path).resolve().as_uri())


__all__ = ["make_regression_chart", "export_chart", "open_chart"]
