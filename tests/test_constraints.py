import pytest

from storekeeper.constraints import (
    Constraint,
    ErrorBag,
    MustFixSizeConstraint,
    MustInRangeConstraint,
    MustIntegerConstraint,
    MustNumericConstraint,
)


def test_error_bag_collects():
    bag = ErrorBag()
    assert bag.is_any() is False
    bag.push("first")
    bag.push("second")
    assert bag.is_any() is True
    assert bag.errors == ["first", "second"]


def test_base_constraint_passes_without_next():
    bag = ErrorBag()
    assert Constraint().check("anything", bag) is True
    assert bag.errors == []


def test_set_next_returns_self_and_links():
    first = MustIntegerConstraint()
    second = MustInRangeConstraint(1, 5)
    assert first.has_next() is False
    assert first.set_next(second) is first
    assert first.has_next() is True
    assert first.next is second


def test_integer_constraint():
    bag = ErrorBag()
    assert MustIntegerConstraint().check("0123", bag) is True
    assert MustIntegerConstraint().check("12a", bag) is False
    assert bag.errors == ["Input harus integer"]


def test_integer_constraint_rejects_sign():
    bag = ErrorBag()
    assert MustIntegerConstraint().check("-1", bag) is False


def test_range_constraint():
    bag = ErrorBag()
    rule = MustInRangeConstraint(1, 5)
    assert rule.check("1", bag) is True
    assert rule.check("5", bag) is True
    assert bag.is_any() is False
    assert rule.check("7", bag) is False
    assert bag.errors == ["Input harus berada di antara 1 dan 5"]


def test_range_constraint_without_number_raises():
    with pytest.raises(ValueError):
        MustInRangeConstraint(1, 5).check("", ErrorBag())


def test_range_constraint_overflow_raises():
    with pytest.raises(ValueError):
        MustInRangeConstraint(1, 5).check("99999999999", ErrorBag())


def test_chain_stops_at_first_failure():
    chain = MustIntegerConstraint().set_next(MustInRangeConstraint(1, 3))
    bag = ErrorBag()
    assert chain.check("abc", bag) is False
    assert bag.errors == ["Input harus integer"]


def test_chain_runs_next_rule():
    chain = MustIntegerConstraint().set_next(MustInRangeConstraint(1, 3))
    bag = ErrorBag()
    assert chain.check("9", bag) is False
    assert bag.errors == ["Input harus berada di antara 1 dan 3"]


def test_fix_size_constraint():
    bag = ErrorBag()
    rule = MustFixSizeConstraint(3)
    assert rule.check("abc", bag) is True
    assert rule.check("ab", bag) is False
    assert bag.errors == ["Input harus memiliki panjang 3"]


@pytest.mark.parametrize("text", ["12.5", "7", "-3e2", "12abc", " 4", ".5"])
def test_numeric_accepts(text):
    bag = ErrorBag()
    assert MustNumericConstraint().check(text, bag) is True
    assert bag.errors == []


@pytest.mark.parametrize("text", ["", "abc", "-", ".", "1e999"])
def test_numeric_rejects(text):
    bag = ErrorBag()
    assert MustNumericConstraint().check(text, bag) is False
    assert bag.errors == ["Input harus bertipe numerik"]