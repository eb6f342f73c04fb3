import pyarrow as pa
import pytest

from tidyintent.compute import GroupedTable
from tidyintent.verbs import filter

TEST_DATA = pa.table(
    {
        "species": ["Adelie", "Gentoo", "Adelie", "Chinstrap"],
        "sex": ["male", "female", None, "female"],
    }
)


def test_filter_single_predicate():
    result = filter(TEST_DATA, pa.array([True, False, True, False]))
    assert result.column("species").to_pylist() == ["Adelie", "Adelie"]
    assert result.column_names == TEST_DATA.column_names


def test_filter_multiple_predicates_are_combined():
    result = filter(
        TEST_DATA,
        pa.array([True, False, True, True]),
        pa.array([True, True, False, True]),
    )
    assert result.column("species").to_pylist() == ["Adelie", "Chinstrap"]


def test_filter_without_predicates():
    assert filter(TEST_DATA) is TEST_DATA


def test_filter_scalar_predicates():
    assert filter(TEST_DATA, True).num_rows == 4
    assert filter(TEST_DATA, pa.scalar(False)).num_rows == 0


def test_filter_skips_missing():
    mask = pa.array([True, None, True, False])
    assert filter(TEST_DATA, mask).column("sex").to_pylist() == ["male", None]


def test_filter_missing_not_skipped():
    mask = pa.array([True, None, True, False])
    with pytest.raises(ValueError):
        filter(TEST_DATA, mask, skip_missing=False)


def test_filter_non_boolean_predicate():
    with pytest.raises(ValueError):
        filter(TEST_DATA, pa.array([1, 0, 1, 0]))


def test_filter_keeps_grouping():
    result = filter(GroupedTable(TEST_DATA, ["species"]), pa.array([True, True, False, False]))
    assert isinstance(result, GroupedTable)
    assert result.keys == ["species"]
    assert result.num_rows == 2
