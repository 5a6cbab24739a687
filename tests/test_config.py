import pytest
from mlsamples.config import Settings


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MLSAMPLES_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("MLSAMPLES_CHART_FORMAT", "HTML")
    monkeypatch.setenv("MLSAMPLES_OPEN_CHART", "true")
    monkeypatch.setenv("MLSAMPLES_CHART_RECORDS", "25")
    s = Settings()
    assert s.data_dir == tmp_path
    assert s.chart_format == "html"
    assert s.open_chart is True
    assert s.chart_records == 25
    assert s.taxi_train_file == tmp_path / "taxi-fare-train.csv"


def test_keyword_overrides_win(monkeypatch, tmp_path):
    monkeypatch.setenv("MLSAMPLES_CHART_FORMAT", "html")
    s = Settings(chart_format="svg", output_dir=str(tmp_path))
    assert s.chart_format == "svg"
    assert s.chart_path("chart") == tmp_path / "chart.svg"
    assert s.model_path("m") == tmp_path / "m.zip"


def test_defaults_point_at_bundled_data(monkeypatch):
    monkeypatch.delenv("MLSAMPLES_DATA_DIR", raising=False)
    s = Settings()
    assert s.taxi_train_file.exists()
    assert s.taxi_test_file.exists()


def test_rejects_unknown_setting():
    with pytest.raises(TypeError):
        Settings(colour="red")


def test_rejects_unknown_chart_format():
    with pytest.raises(ValueError):
        Settings(chart_format="png")
