from .data_model import DataModel, ColumnMeta  # noqa: F401
from . import operations  # noqa: F401
