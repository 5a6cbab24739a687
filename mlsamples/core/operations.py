"""Pure row operations (stateless) + registry.

Each operation is a function(df, **kwargs) -> df.
Used so data preparation steps can be logged and persisted with a model.
"""
from __future__ import annotations
from typing import Callable, Dict, Optional
import pandas as pd

Registry: Dict[str, Callable] = {}

def register(name: str):
    def deco(fn: Callable):
        Registry[name] = fn
        return fn
    return deco

@register("filter_range")
def op_filter_range(
    df: pd.DataFrame,
    column: str,
    lower: Optional[float] = None,
    upper: Optional[float] = None,
):
    """Keep rows with ``lower <= df[column] < upper``.

    Either bound may be None. NaN values never pass the filter.
    """
    values = df[column]
    mask = values.notna()
    if lower is not None:
        mask &= values >= lower
    if upper is not None:
        mask &= values < upper
    return df[mask].reset_index(drop=True)

@register("head")
def op_head(df: pd.DataFrame, n: int):
    return df.head(n).reset_index(drop=True)
