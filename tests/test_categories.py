"""Tests for value category dispatch."""

from collections import OrderedDict
from decimal import Decimal

import numpy as np
import pandas as pd
import pytest

from fieldrules.categories import Field, ValueCategory, classify, is_absent


class TestClassify:
    """classify() should put every value in exactly one category."""

    @pytest.mark.parametrize(
        "value,quantity",
        [("", 0), ("hello", 5), ("héllo", 5), ("日本", 2)],
    )
    def test_text_measures_characters(self, value, quantity):
        field = classify(value)
        assert field.category is ValueCategory.TEXT
        assert field.quantity == quantity

    @pytest.mark.parametrize(
        "value,quantity",
        [
            ([], 0),
            ([1, 2, 3], 3),
            ((1, 2), 2),
            ({"a": 1}, 1),
            (OrderedDict(a=1, b=2), 2),
            ({1, 2, 3, 4}, 4),
            (frozenset(), 0),
            (b"abc", 3),
            (bytearray(b"ab"), 2),
            (range(5), 5),
        ],
    )
    def test_collections_measure_elements(self, value, quantity):
        field = classify(value)
        assert field.category is ValueCategory.SEQUENCE
        assert field.quantity == quantity

    def test_numpy_and_pandas_collections(self):
        assert classify(np.array([1, 2, 3])).quantity == 3
        assert classify(pd.Series([1, 2])).category is ValueCategory.SEQUENCE
        assert classify(pd.Series([], dtype=float)).quantity == 0

    def test_dataframe_measures_rows(self):
        empty = classify(pd.DataFrame())
        assert empty.category is ValueCategory.SEQUENCE
        assert empty.quantity == 0
        assert classify(pd.DataFrame({"a": [1, 2], "b": [3, 4]})).quantity == 2

    def test_zero_dimensional_array_counts_one_element(self):
        field = classify(np.array(5))
        assert field.category is ValueCategory.SEQUENCE
        assert field.quantity == 1

    def test_field_is_frozen(self):
        field = classify("abc")
        assert field == Field(ValueCategory.TEXT, "abc", 3)
        with pytest.raises(AttributeError):
            field.quantity = 10

    @pytest.mark.parametrize("value", [0, -5, 2**70, np.int8(-3), np.int64(9)])
    def test_signed_integers(self, value):
        field = classify(value)
        assert field.category is ValueCategory.SIGNED_INTEGER
        assert field.quantity == int(value)
        assert type(field.quantity) is int

    @pytest.mark.parametrize("value", [np.uint8(3), np.uint64(2**64 - 1)])
    def test_unsigned_integers(self, value):
        field = classify(value)
        assert field.category is ValueCategory.UNSIGNED_INTEGER
        assert field.quantity == int(value)

    @pytest.mark.parametrize("value", [0.0, -1.5, float("inf"), np.float32(2.5), np.float64(1.0)])
    def test_floats(self, value):
        field = classify(value)
        assert field.category is ValueCategory.FLOATING_POINT
        assert type(field.quantity) is float

    @pytest.mark.parametrize(
        "value",
        [True, False, np.bool_(True), None, Decimal("1.5"), object(), 1 + 2j],
    )
    def test_everything_else_is_other(self, value):
        """Booleans are not integers for rule purposes."""
        field = classify(value)
        assert field.category is ValueCategory.OTHER
        assert field.quantity is None

    def test_classify_does_not_mutate_value(self):
        value = [3, 1, 2]
        classify(value)
        assert value == [3, 1, 2]


def test_category_flags():
    assert ValueCategory.TEXT.is_sized
    assert ValueCategory.SEQUENCE.is_sized
    assert not ValueCategory.FLOATING_POINT.is_sized
    assert ValueCategory.UNSIGNED_INTEGER.is_numeric
    assert not ValueCategory.OTHER.is_numeric


def test_is_absent():
    assert is_absent(None)
    assert is_absent(pd.NA)
    assert is_absent(pd.NaT)
    assert not is_absent(0)
    assert not is_absent("")
