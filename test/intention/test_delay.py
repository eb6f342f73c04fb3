import pyarrow as pa
import pyarrow.compute as pc
import pytest

from tidyintent.compute import NameResolutionError, X, col, expr
from tidyintent.intention import DEFAULT_CACHE_SIZE, DelayedVerb, Intention, Memoized, delay
from tidyintent.verbs import filter, mutate


@pytest.fixture
def data():
    return pa.table({"a": [1, 2, 3], "b": [10, 20, 30]})


def test_delay_builds_intentions(data):
    filtering = delay(filter)
    intention = filtering(col("a") > 1)
    assert isinstance(intention, DelayedVerb)
    assert isinstance(intention, Intention)
    assert intention(data).column("a").to_pylist() == [2, 3]


def test_delay_keeps_verb_identity():
    delayed = delay(filter)
    assert delayed.__name__ == "filter"
    assert delayed.__wrapped__ is filter
    assert str(delayed) == "delay(tidyintent.verbs.filtering.filter)"


def test_intention_str():
    intention = delay(filter)(col("a") > 1, skip_missing=False)
    assert str(intention) == (
        "tidyintent.verbs.filtering.filter("
        "pyarrow.compute.greater(ColumnRef(a),1), skip_missing=False)"
    )


def test_construction_never_fails_on_unknown_names():
    intention = delay(filter)(col("not_a_column") == "x")
    with pytest.raises(NameResolutionError) as excinfo:
        intention(pa.table({"a": [1]}))
    assert excinfo.value.name == "not_a_column"
    assert any("While applying" in note for note in excinfo.value.__notes__)


def test_resolution_is_per_dataset():
    intention = delay(mutate)(c=X.a * 2)
    assert intention(pa.table({"a": [1]})).column("c").to_pylist() == [2]
    assert intention(pa.table({"a": [5, 6]})).column("c").to_pylist() == [10, 12]


def test_outer_names_resolve_lexically(data):
    threshold = 15
    intention = delay(filter)(expr(lambda b: pc.greater(b, threshold)))
    assert intention(data).column("b").to_pylist() == [20, 30]


def test_verb_failures_propagate_unchanged(data):
    def failing(dataset, message):
        raise RuntimeError(message)

    intention = delay(failing)("boom")
    with pytest.raises(RuntimeError, match="boom") as excinfo:
        intention(data)
    assert excinfo.value.__notes__ == [f"While applying {intention}"]


def test_verb_application_errors(data):
    intention = delay(mutate)(c=pa.array([1, 2]))
    with pytest.raises(ValueError):
        intention(data)


def test_repeated_invocation_is_referentially_transparent(data):
    calls = []

    def verb(dataset, factor):
        calls.append(dataset)
        return mutate(dataset, c=factor)

    intention = delay(verb)(X.a * 3)
    first = intention(data)
    second = intention(data)
    assert first.equals(second)
    assert len(calls) == 2


def test_any_callable_can_be_delayed():
    def scale(dataset, factor, offset=0):
        return [v * factor + offset for v in dataset]

    intention = delay(scale)(2, offset=1)
    assert intention([1, 2]) == [3, 5]


def test_only_callables_can_be_delayed():
    with pytest.raises(TypeError):
        delay("filter")


def test_delay_as_decorator(data):
    @delay
    def keep_above(dataset, threshold):
        return filter(dataset, threshold)

    assert keep_above.__name__ == "keep_above"
    assert keep_above(X.a > 2)(data).num_rows == 1


def test_delay_memoized(data):
    calls = []

    @delay(memoized=True, cache_size=4)
    def counted(dataset):
        calls.append(dataset)
        return dataset

    intention = counted()
    assert isinstance(intention, Memoized)
    assert intention.maxsize == 4
    intention(data)
    intention(data)
    assert len(calls) == 1


def test_delaying_an_intention(data):
    keep_big = delay(filter)(X.a > 1)
    redelayed = delay(keep_big)()
    assert redelayed(data).num_rows == keep_big(data).num_rows == 2


class FlaggedVerb:
    """A callable verb carrying attributes of its own."""

    def __init__(self):
        self.memoized = True
        self.cache_size = 1
        self.verb = None

    def __call__(self, dataset):
        return dataset


def test_verb_attributes_do_not_configure_the_delayer(data):
    delayer = delay(FlaggedVerb())
    assert delayer.memoized is False
    assert delayer.cache_size == DEFAULT_CACHE_SIZE
    assert isinstance(delayer.verb, FlaggedVerb)
    intention = delayer()
    assert not isinstance(intention, Memoized)
    assert intention(data) is data
