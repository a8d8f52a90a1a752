"""Value category dispatch.

Every predicate asks the same question first: what kind of field is this?
``classify`` answers it once, turning an arbitrary runtime value into a
``Field`` tagged with one ValueCategory and the quantity the comparison
predicates measure (length for text and collections, the value itself for
numbers).

Values coming out of DataFrame records are numpy scalars, so numpy integer
and float types are classified alongside the builtins. numpy is also the
only source of unsigned integers. A whole DataFrame is a collection of rows.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

import numpy as np
import pandas as pd

__all__ = [
    "ValueCategory",
    "Field",
    "classify",
    "is_absent",
]


class ValueCategory(str, Enum):
    """Coarse runtime classification of a field value."""

    TEXT = "text"
    SEQUENCE = "sequence"  # ordered, associative or fixed-size collections
    SIGNED_INTEGER = "signed_integer"
    UNSIGNED_INTEGER = "unsigned_integer"
    FLOATING_POINT = "floating_point"
    OTHER = "other"

    @property
    def is_sized(self) -> bool:
        """Whether the measured quantity is a length."""
        return self in (ValueCategory.TEXT, ValueCategory.SEQUENCE)

    @property
    def is_numeric(self) -> bool:
        return self in (
            ValueCategory.SIGNED_INTEGER,
            ValueCategory.UNSIGNED_INTEGER,
            ValueCategory.FLOATING_POINT,
        )


@dataclass(frozen=True)
class Field:
    """A field value tagged with its category.

    ``quantity`` is the number the comparison predicates look at: a length
    for TEXT and SEQUENCE, the plain Python number for numeric categories,
    and None for OTHER.
    """

    category: ValueCategory
    value: Any
    quantity: Union[int, float, None] = None


_SEQUENCE_TYPES = (
    Sequence,
    Mapping,
    Set,
    bytes,
    bytearray,
    np.ndarray,
    pd.Series,
    pd.DataFrame,  # measured in rows
    pd.Index,
)


def classify(value: Any) -> Field:
    """Classify a value into exactly one ValueCategory.

    Args:
        value: Field value under test

    Returns:
        Field carrying the category and measured quantity
    """
    # bool is an int subclass; booleans are neither numbers nor lengths here
    if isinstance(value, (bool, np.bool_)):
        return Field(ValueCategory.OTHER, value)

    if isinstance(value, str):
        return Field(ValueCategory.TEXT, value, len(value))

    if isinstance(value, _SEQUENCE_TYPES):
        return Field(ValueCategory.SEQUENCE, value, _length(value))

    if isinstance(value, np.unsignedinteger):
        return Field(ValueCategory.UNSIGNED_INTEGER, value, int(value))

    if isinstance(value, (int, np.signedinteger)):
        return Field(ValueCategory.SIGNED_INTEGER, value, int(value))

    if isinstance(value, (float, np.floating)):
        return Field(ValueCategory.FLOATING_POINT, value, float(value))

    return Field(ValueCategory.OTHER, value)


def _length(value: Any) -> int:
    # 0-d arrays have no len(); treat them as a single element
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return 1
    return len(value)


def is_absent(value: Any) -> bool:
    """Return True for None and pandas missing-value markers (NA, NaT)."""
    if value is None:
        return True
    return value is pd.NA or value is pd.NaT
