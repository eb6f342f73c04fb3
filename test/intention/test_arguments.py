import pyarrow as pa
import pytest

from tidyintent.compute import NameResolutionError, col
from tidyintent.intention import Arguments


def test_capture_preserves_order_and_names():
    arguments = Arguments(1, col("a"), skip=True, groups="drop")
    assert len(arguments) == 4
    assert arguments.args[0] == 1
    assert str(arguments.args[1]) == "ColumnRef(a)"
    assert arguments.names() == ("skip", "groups")


def test_capture_never_evaluates():
    # None of these columns exist anywhere.
    arguments = Arguments(col("nope") > 1, value=col("missing") * 2)
    assert len(arguments) == 2


def test_evaluate_resolves_expressions():
    data = pa.table({"a": [1, 2, 3]})
    args, kwargs = Arguments(col("a") > 1, "name", doubled=col("a") * 2).evaluate(data)
    assert args[0].to_pylist() == [False, True, True]
    assert args[1] == "name"
    assert kwargs["doubled"].to_pylist() == [2, 4, 6]


def test_evaluate_resolves_containers():
    data = pa.table({"a": [1, 2]})
    args, kwargs = Arguments([col("a"), 3], mapping={"x": col("a")}).evaluate(data)
    assert args[0][0].to_pylist() == [1, 2]
    assert args[0][1] == 3
    assert kwargs["mapping"]["x"].to_pylist() == [1, 2]


def test_evaluate_against_different_datasets():
    arguments = Arguments(col("a") + 1)
    first, _ = arguments.evaluate(pa.table({"a": [1]}))
    second, _ = arguments.evaluate(pa.table({"a": [10]}))
    assert first[0].to_pylist() == [2]
    assert second[0].to_pylist() == [11]


def test_evaluate_unknown_name():
    arguments = Arguments(col("missing"))
    with pytest.raises(NameResolutionError):
        arguments.evaluate(pa.table({"a": [1]}))


def test_captured_arguments_are_isolated():
    options = {"skip": True}
    arguments = Arguments(**options)
    options["skip"] = False
    assert arguments.kwargs["skip"] is True
    with pytest.raises(TypeError):
        arguments.kwargs["skip"] = False


def test_captured_containers_are_isolated():
    columns = [col("s"), 1]
    options = {"names": ["a"]}
    arguments = Arguments(columns, options=options)
    columns.append(2)
    options["names"].append("b")
    options["extra"] = True
    assert len(arguments.args[0]) == 2
    assert list(arguments.kwargs["options"]) == ["names"]
    assert list(arguments.kwargs["options"]["names"]) == ["a"]
    with pytest.raises(AttributeError):
        arguments.args[0].append(3)
    with pytest.raises(TypeError):
        arguments.kwargs["options"]["extra"] = True

    args, kwargs = arguments.evaluate(pa.table({"s": [7]}))
    assert isinstance(args[0], list)
    assert args[0][0].to_pylist() == [7]
    assert args[0][1] == 1
    assert kwargs["options"] == {"names": ["a"]}
    assert isinstance(kwargs["options"], dict)


def test_str():
    arguments = Arguments(col("a") == "x", skip_missing=False)
    assert str(arguments) == "pyarrow.compute.equal(ColumnRef(a),x), skip_missing=False"
    assert repr(arguments) == f"Arguments({arguments})"
