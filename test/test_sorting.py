import pyarrow as pa
import pytest

from tidyintent.compute import GroupedTable, NameResolutionError
from tidyintent.verbs import arrange, desc, slice_head, ungroup


def test_arrange_single_key():
    data = pa.table({"values": [5, 3, 1, 4, 2]})
    assert arrange(data, "values").column(0).to_pylist() == [1, 2, 3, 4, 5]


def test_arrange_descending():
    data = pa.table({"values": [1, 2, 3, 4, 5]})
    assert arrange(data, desc("values")).column(0).to_pylist() == [5, 4, 3, 2, 1]
    assert arrange(data, "-values").column(0).to_pylist() == [5, 4, 3, 2, 1]


def test_arrange_multiple_keys():
    data = pa.table({"a": [2, 1, 2, 1], "b": [1, 2, 3, 4]})
    result = arrange(data, "a", desc("b"))
    assert result.to_pydict() == {"a": [1, 1, 2, 2], "b": [4, 2, 3, 1]}


def test_arrange_is_stable():
    data = pa.table({"key": [1, 0, 1, 0], "order": [0, 1, 2, 3]})
    assert arrange(data, "key").column("order").to_pylist() == [1, 3, 0, 2]


def test_arrange_without_keys():
    data = pa.table({"values": [2, 1]})
    assert arrange(data) is data


def test_arrange_unknown_column():
    with pytest.raises(NameResolutionError):
        arrange(pa.table({"values": [1]}), "other")


def test_arrange_record_batch():
    data = pa.record_batch({"values": [5, 3, 1]})
    assert arrange(data, "values").column(0).to_pylist() == [1, 3, 5]


def test_slice_head():
    data = pa.table({"values": [1, 2, 3, 4, 5]})
    assert slice_head(data, 2).column(0).to_pylist() == [1, 2]
    assert slice_head(data, 10).num_rows == 5
    assert slice_head(data, 0).num_rows == 0


def test_slice_head_negative():
    with pytest.raises(ValueError):
        slice_head(pa.table({"values": [1]}), -1)


def test_ungroup():
    data = pa.table({"values": [1]})
    assert ungroup(GroupedTable(data, ["values"])) is data
    assert ungroup(data) is data
