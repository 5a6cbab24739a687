from . import fits, metrics  # noqa: F401
