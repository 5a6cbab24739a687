"""Core data model abstraction.

The DataModel wraps a pandas DataFrame adding:
 - Column metadata (units, label, comments)
 - Operation log (saved next to a trained model for reproducibility)
 - Convenience methods for applying registered operations
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import logging
from typing import Any, Dict, List, Optional
import pandas as pd
from . import operations

logger = logging.getLogger(__name__)

OperationRecord = Dict[str, Any]


@dataclass
class ColumnMeta:
    name: str
    label: Optional[str] = None
    unit: Optional[str] = None
    comment: Optional[str] = None


@dataclass
class DataModel:
    df: pd.DataFrame
    columns_meta: Dict[str, ColumnMeta] = field(default_factory=dict)
    operations: List[OperationRecord] = field(default_factory=list)

    def log(self, op: str, **params):
        rec: OperationRecord = {
            "op": op,
            "params": params,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "rows": int(len(self.df)),
            "cols": int(len(self.df.columns)),
        }
        self.operations.append(rec)

    # --- Column metadata ---
    def set_column_meta(self, col: str, **meta):
        if col not in self.columns_meta:
            self.columns_meta[col] = ColumnMeta(name=col)
        cm = self.columns_meta[col]
        for k, v in meta.items():
            setattr(cm, k, v)
        self.log("set_column_meta", column=col, meta=meta)

    # Apply a registered op by name and log it
    def apply_operation(self, name: str, **kwargs):
        if name not in operations.Registry:
            raise KeyError(f"Unknown operation: {name}")
        fn = operations.Registry[name]
        before_rows = len(self.df)
        self.df = fn(self.df, **kwargs)
        after_rows = len(self.df)
        logger.info(
            "%s %s: %d -> %d rows", name, kwargs, before_rows, after_rows
        )
        self.log(
            name,
            before_rows=before_rows,
            after_rows=after_rows,
            **kwargs,
        )
        return self

    # --- Serialization helpers ---
    def to_dict(self, include_data: bool = True) -> Dict[str, Any]:
        d = {
            "columns_meta": {k: vars(v) for k, v in self.columns_meta.items()},
            "operations": self.operations,
        }
        if include_data:
            d["data"] = self.df.to_dict(orient="list")
        else:
            d["columns"] = [str(c) for c in self.df.columns]
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "DataModel":
        if "data" in d:
            df = pd.DataFrame(d["data"])
        else:
            df = pd.DataFrame(columns=d.get("columns", []))
        dm = cls(df)
        dm.columns_meta = {
            k: ColumnMeta(**v) for k, v in d.get("columns_meta", {}).items()
        }
        dm.operations = d.get("operations", [])
        return dm
