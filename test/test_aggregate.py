import math

import pyarrow as pa
import pytest

from tidyintent.compute import (
    GroupedTable,
    NameResolutionError,
    col,
    maximum,
    mean,
    minimum,
    n,
    n_distinct,
    sd,
    total,
)
from tidyintent.verbs import count, group_by, summarize

TEST_DATA = pa.table(
    {
        "city": pa.array(
            ["New York", "New York", "Los Angeles", "Los Angeles", "New York"]
        ),
        "shop": pa.array(["Shop A", "Shop B", "Shop A", "Shop A2", "Shop B"]),
        "n_employees": pa.array([10, 15, 8, 12, 20]),
    }
)


@pytest.mark.parametrize("keys", [["city"], ["city", "shop"]])
def test_basic_aggregation(keys):
    result = summarize(
        GroupedTable(TEST_DATA, keys), total_employees=total("n_employees")
    )

    if keys == ["city"]:
        assert result.column_names == ["city", "total_employees"]
        assert result.column(0).to_pylist() == ["Los Angeles", "New York"]
        assert result.column(1).to_pylist() == [20, 45]
    else:
        assert result.column_names == ["city", "shop", "total_employees"]
        assert result.column(0).to_pylist() == [
            "Los Angeles",
            "Los Angeles",
            "New York",
            "New York",
        ]
        assert result.column(1).to_pylist() == ["Shop A", "Shop A2", "Shop A", "Shop B"]
        assert result.column(2).to_pylist() == [8, 12, 10, 35]


@pytest.mark.parametrize(
    "aggregation,expected",
    [
        (minimum("n_employees"), [8, 10]),
        (maximum("n_employees"), [12, 20]),
        (mean("n_employees"), [10.0, 15.0]),
        (n(), [2, 3]),
        (n_distinct("shop"), [2, 2]),
    ],
)
def test_aggregations(aggregation, expected):
    result = summarize(GroupedTable(TEST_DATA, ["city"]), value=aggregation)
    assert result.column("value").to_pylist() == expected


def test_aggregation_str():
    assert str(total("n_employees")) == "SumAggregation(n_employees)"
    assert str(n()) == "CountAggregation()"


def test_standard_deviation():
    data = pa.table({"x": [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]})
    result = summarize(data, sd_x=sd("x"))
    assert result.column("sd_x")[0].as_py() == pytest.approx(2.138089935)


def test_missing_values():
    data = pa.table({"x": [1.0, None, 3.0]})
    result = summarize(data, skipping=mean("x"), keeping=mean("x", na_rm=False))
    assert result.to_pydict() == {"skipping": [2.0], "keeping": [None]}


def test_aggregate_expression():
    result = summarize(TEST_DATA, doubled=total(col("n_employees") * 2))
    assert result.to_pydict() == {"doubled": [130]}


def test_aggregate_callable():
    result = summarize(
        GroupedTable(TEST_DATA, ["city"]), rows=lambda rows: rows.num_rows * 10
    )
    assert result.column("rows").to_pylist() == [20, 30]


def test_ungrouped_summarize():
    result = summarize(TEST_DATA, shops=n(), employees=total("n_employees"))
    assert result.to_pydict() == {"shops": [5], "employees": [65]}


def test_summarize_unknown_column():
    with pytest.raises(NameResolutionError):
        summarize(TEST_DATA, value=total("missing"))


@pytest.mark.parametrize(
    "groups,expected_keys",
    [("drop", None), ("drop_last", ["city"]), ("keep", ["city", "shop"])],
)
def test_summarize_groups(groups, expected_keys):
    result = summarize(
        GroupedTable(TEST_DATA, ["city", "shop"]), groups=groups, n=n()
    )
    if expected_keys is None:
        assert isinstance(result, pa.Table)
    else:
        assert isinstance(result, GroupedTable)
        assert result.keys == expected_keys


def test_summarize_invalid_groups():
    with pytest.raises(ValueError):
        summarize(TEST_DATA, groups="sometimes", n=n())


def test_group_by():
    grouped = group_by(TEST_DATA, "city")
    assert grouped.keys == ["city"]
    assert grouped.table is TEST_DATA
    assert group_by(grouped, "shop").keys == ["shop"]
    assert group_by(grouped, "shop", add=True).keys == ["city", "shop"]


def test_nan_keys_form_a_single_group():
    data = pa.table({"x": [float("nan"), 1.0, float("nan"), None], "v": [1, 2, 3, 4]})
    grouped = GroupedTable(data, ["x"])
    groups = [(key, group.column("v").to_pylist()) for key, group in grouped.groups()]
    assert [values for _, values in groups] == [[2], [1, 3], [4]]
    assert groups[0][0] == (1.0,)
    assert math.isnan(groups[1][0][0])
    assert groups[2][0] == (None,)


def test_group_by_unknown_column():
    with pytest.raises(NameResolutionError):
        group_by(TEST_DATA, "country")


def test_count():
    result = count(TEST_DATA, "city")
    assert result.to_pydict() == {"city": ["Los Angeles", "New York"], "n": [2, 3]}


def test_count_sorted():
    result = count(TEST_DATA, "city", sort=True, name="shops")
    assert result.to_pydict() == {"city": ["New York", "Los Angeles"], "shops": [3, 2]}


def test_count_total():
    assert count(TEST_DATA).to_pydict() == {"n": [5]}


def test_count_grouped():
    result = count(GroupedTable(TEST_DATA, ["city"]), "shop")
    assert isinstance(result, GroupedTable)
    assert result.keys == ["city"]
    assert result.table.column("n").to_pylist() == [1, 1, 1, 2]
