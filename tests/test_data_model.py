import pandas as pd
import pytest
from mlsamples.core.data_model import DataModel

def test_roundtrip_keeps_fare_meta_and_filtered_rows():
    dm = DataModel(pd.DataFrame({'fare': [0.5, 15.5, 200.0]}))
    dm.set_column_meta('fare', unit='USD', label='Fare')
    dm.apply_operation('filter_range', column='fare', lower=1.0, upper=150.0)
    dm2 = DataModel.from_dict(dm.to_dict())
    assert dm2.columns_meta['fare'].unit == 'USD'
    assert dm2.columns_meta['fare'].label == 'Fare'
    assert dm2.df['fare'].tolist() == [15.5]
    assert [r['op'] for r in dm2.operations] == ['set_column_meta', 'filter_range']


def test_to_dict_without_data_keeps_columns_and_log():
    dm = DataModel(pd.DataFrame({'fare':[0.5, 10.0, 200.0]}))
    dm.apply_operation('filter_range', column='fare', lower=1, upper=150)
    d = dm.to_dict(include_data=False)
    assert 'data' not in d
    dm2 = DataModel.from_dict(d)
    assert list(dm2.df.columns) == ['fare']
    assert dm2.df.empty
    assert dm2.operations[0]['op'] == 'filter_range'


def test_filter_range_lower_inclusive_upper_exclusive():
    df = pd.DataFrame({'fare': [0.99, 1.0, 15.5, 149.99, 150.0, 300.0]})
    dm = DataModel(df)
    dm.apply_operation('filter_range', column='fare', lower=1.0, upper=150.0)
    assert dm.df['fare'].tolist() == [1.0, 15.5, 149.99]
    rec = dm.operations[-1]
    assert rec['params']['before_rows'] == 6
    assert rec['params']['after_rows'] == 3


def test_filter_range_open_bounds_and_nan():
    df = pd.DataFrame({'v': [1.0, None, 5.0]})
    dm = DataModel(df)
    dm.apply_operation('filter_range', column='v', upper=3.0)
    assert dm.df['v'].tolist() == [1.0]


def test_head_operation():
    dm = DataModel(pd.DataFrame({'x': range(10)}))
    dm.apply_operation('head', n=3)
    assert dm.df['x'].tolist() == [0, 1, 2]
    assert dm.operations[-1]['op'] == 'head'


def test_unknown_operation_raises():
    dm = DataModel(pd.DataFrame({'x': [1]}))
    with pytest.raises(KeyError):
        dm.apply_operation('does_not_exist')
