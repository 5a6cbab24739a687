import logging
import os
from pathlib import Path
from dotenv import load_dotenv
from .constants import CHART_RECORDS

load_dotenv()  # Load .env automatically

PACKAGE_DIR = Path(__file__).resolve().parent
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class Settings:
    """Runtime settings read from ``MLSAMPLES_*`` environment variables.

    Keyword arguments override the environment, e.g.
    ``Settings(output_dir=tmp_path, chart_format="html")``.
    """

    def __init__(self, **overrides):
        self.data_dir = Path(
            os.getenv("MLSAMPLES_DATA_DIR", str(PACKAGE_DIR / "sample_data"))
        )
        self.output_dir = Path(os.getenv("MLSAMPLES_OUTPUT_DIR", "."))
        self.chart_format = os.getenv("MLSAMPLES_CHART_FORMAT", "svg").lower()
        self.open_chart = _env_bool("MLSAMPLES_OPEN_CHART")
        self.chart_records = _env_int("MLSAMPLES_CHART_RECORDS", CHART_RECORDS)
        self.log_level = os.getenv("MLSAMPLES_LOG_LEVEL", "INFO").upper()
        for key, value in overrides.items():
            if not hasattr(self, key):
                raise TypeError(f"Unknown setting: {key}")
            setattr(self, key, value)
        self.data_dir = Path(self.data_dir)
        self.output_dir = Path(self.output_dir)
        if self.chart_format not in ("svg", "html"):
            raise ValueError(f"Unsupported chart format: {self.chart_format}")

    @property
    def taxi_train_file(self) -> Path:
        return self.data_dir / "taxi-fare-train.csv"

    @property
    def taxi_test_file(self) -> Path:
        return self.data_dir / "taxi-fare-test.csv"

    @property
    def iris_file(self) -> Path:
        return self.data_dir / "iris.data"

    def model_path(self, name: str) -> Path:
        return self.output_dir / f"{name}.zip"

    def chart_path(self, name: str) -> Path:
        return self.output_dir / f"{name}.{self.chart_format}"


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
