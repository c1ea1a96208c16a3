import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.knapsack import Item, fractional_knapsack

items_strategy = st.lists(
    st.builds(
        Item,
        weight=st.integers(min_value=1, max_value=50),
        value=st.integers(min_value=0, max_value=100),
    ),
    max_size=8,
)


def test_source_example():
    items = [Item(10, 60), Item(20, 100), Item(30, 120)]
    assert fractional_knapsack(50, items) == pytest.approx(240.0)


def test_ratio():
    item = Item(10, 60)
    assert item.ratio == pytest.approx(60 / 10)


def test_zero_weight_rejected():
    with pytest.raises(ValueError):
        Item(0, 5)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        fractional_knapsack(-1, [Item(1, 1)])


@given(items_strategy)
def test_zero_capacity_gives_nothing(items):
    assert fractional_knapsack(0, items) == 0.0


@given(items_strategy)
def test_ample_capacity_takes_everything(items):
    capacity = sum(item.weight for item in items)
    assert fractional_knapsack(capacity, items) == pytest.approx(
        sum(item.value for item in items)
    )


@given(items_strategy, st.integers(min_value=0, max_value=200))
def test_monotonic_in_capacity(items, capacity):
    smaller = fractional_knapsack(capacity, items)
    larger = fractional_knapsack(capacity + 10, items)
    assert smaller <= larger + 1e-9
    assert larger <= sum(item.value for item in items) + 1e-9


def test_partial_item_taken_pro_rata():
    item = Item(4, 8)
    assert fractional_knapsack(1, [item]) == pytest.approx(item.ratio)