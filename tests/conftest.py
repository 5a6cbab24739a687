import sys
from pathlib import Path
import pytest

# Make the package importable without installing it
PROJECT_DIR = Path(__file__).resolve().parents[1]
if str(PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(PROJECT_DIR))

from mlsamples.config import Settings  # noqa: E402

TAXI_HEADER = (
    "vendor_id,rate_code,passenger_count,trip_time_in_secs,"
    "trip_distance,payment_type,fare_amount"
)


@pytest.fixture
def write_csv(tmp_path):
    def _write(name, lines):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def settings(tmp_path):
    out = tmp_path / "out"
    return Settings(output_dir=out, chart_format="html", open_chart=False,
                    log_level="WARNING")
