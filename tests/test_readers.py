import pytest
from mlsamples.readers import (
    IRIS_COLUMNS,
    TAXI_COLUMNS,
    ParseError,
    read_iris,
    read_taxi_trips,
)
from conftest import TAXI_HEADER


def test_reads_taxi_rows(write_csv):
    path = write_csv("trips.csv", [
        TAXI_HEADER,
        "VTS,1,1,1140,3.75,CRD,15.5",
        "CMT, 2 ,2,300,0.5, CSH ,52",
    ])
    df = read_taxi_trips(path)
    assert list(df.columns) == TAXI_COLUMNS
    assert len(df) == 2
    assert df.loc[0, "vendor_id"] == "VTS"
    assert df.loc[0, "trip_distance"] == pytest.approx(3.75)
    assert df.loc[0, "fare_amount"] == pytest.approx(15.5)
    # categorical fields are trimmed strings
    assert df.loc[1, "rate_code"] == "2"
    assert df.loc[1, "payment_type"] == "CSH"


def test_limit_keeps_first_rows(write_csv):
    lines = [TAXI_HEADER] + [f"VTS,1,1,{60 * i},1.0,CRD,{i}.5" for i in range(1, 11)]
    df = read_taxi_trips(write_csv("trips.csv", lines), limit=3)
    assert df["fare_amount"].tolist() == [1.5, 2.5, 3.5]


def test_non_numeric_field_names_row_and_column(write_csv):
    path = write_csv("trips.csv", [
        TAXI_HEADER,
        "VTS,1,1,1140,3.75,CRD,15.5",
        "VTS,1,1,abc,3.75,CRD,15.5",
    ])
    with pytest.raises(ParseError) as info:
        read_taxi_trips(path)
    err = info.value
    assert err.row == 3
    assert err.column == "trip_time_in_secs"
    assert err.value == "abc"
    assert "row 3" in str(err)


def test_missing_field_is_parse_error(write_csv):
    path = write_csv("trips.csv", [
        TAXI_HEADER,
        "VTS,1,1,1140,3.75,CRD,15.5",
        "VTS,1,1,1140,3.75",
    ])
    with pytest.raises(ParseError) as info:
        read_taxi_trips(path)
    assert info.value.row == 3
    assert info.value.column == "payment_type"


def test_empty_numeric_field_is_parse_error(write_csv):
    path = write_csv("trips.csv", [TAXI_HEADER, "VTS,1,,1140,3.75,CRD,15.5"])
    with pytest.raises(ParseError) as info:
        read_taxi_trips(path)
    assert info.value.row == 2
    assert info.value.column == "passenger_count"


def test_extra_field_is_parse_error(write_csv):
    path = write_csv("trips.csv", [
        TAXI_HEADER,
        "VTS,1,1,1140,3.75,CRD,15.5",
        "VTS,1,1,1140,3.75,CRD,15.5,99",
    ])
    with pytest.raises(ParseError) as info:
        read_taxi_trips(path)
    assert info.value.row == 3


def test_wrong_header_width_is_parse_error(write_csv):
    path = write_csv("trips.csv", ["a,b,c", "1,2,3"])
    with pytest.raises(ParseError) as info:
        read_taxi_trips(path)
    assert info.value.row == 1


def test_parse_error_is_value_error():
    assert issubclass(ParseError, ValueError)


def test_missing_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_taxi_trips(tmp_path / "nope.csv")


def test_bundled_sample_data_parses():
    from mlsamples.config import Settings
    s = Settings()
    train = read_taxi_trips(s.taxi_train_file)
    test = read_taxi_trips(s.taxi_test_file)
    assert len(train) == 600
    assert len(test) == 150


def test_read_iris_file_skips_blank_lines(write_csv):
    path = write_csv("iris.data", [
        "5.1,3.5,1.4,0.2,Iris-setosa",
        "7.0,3.2,4.7,1.4,Iris-versicolor",
        "",
    ])
    df = read_iris(path)
    assert list(df.columns) == IRIS_COLUMNS
    assert len(df) == 2
    assert df.loc[1, "petal_length"] == pytest.approx(4.7)


def test_read_iris_bad_value(write_csv):
    path = write_csv("iris.data", [
        "5.1,3.5,1.4,0.2,Iris-setosa",
        "7.0,x,4.7,1.4,Iris-versicolor",
    ])
    with pytest.raises(ParseError) as info:
        read_iris(path)
    assert info.value.row == 2
    assert info.value.column == "sepal_width"


def test_read_iris_bundled():
    df = read_iris()
    assert len(df) == 150
    assert set(df["label"]) == {"setosa", "versicolor", "virginica"}


def test_blank_line_between_taxi_rows_is_skipped(write_csv):
    path = write_csv("trips.csv", [
        TAXI_HEADER,
        "VTS,1,1,1140,3.75,CRD,15.5",
        "",
        "CMT,1,2,600,1.5,CSH,8.0",
    ])
    df = read_taxi_trips(path)
    assert len(df) == 2
    assert df["fare_amount"].tolist() == [15.5, 8.0]


def test_row_numbers_count_skipped_blank_lines(write_csv):
    path = write_csv("trips.csv", [
        TAXI_HEADER,
        "",
        "VTS,1,1,1140,3.75,CRD,15.5",
        "VTS,1,1,1140,x,CRD,15.5",
    ])
    with pytest.raises(ParseError) as info:
        read_taxi_trips(path)
    assert info.value.row == 4
    assert info.value.column == "trip_distance"


def test_empty_categorical_field_is_parse_error(write_csv):
    path = write_csv("trips.csv", [TAXI_HEADER, "VTS,1,1,1140,3.75, ,15.5"])
    with pytest.raises(ParseError) as info:
        read_taxi_trips(path)
    assert info.value.row == 2
    assert info.value.column == "payment_type"
    assert "missing field" in str(info.value)
