"""Comparison predicates.

``length``, ``gte``/``min``, ``lte``/``max``, ``lt`` and ``gt`` behave the
same way across value categories:

- text: compare the character count
- collections: compare the element count
- signed / unsigned integers and floats: compare the value itself

The parameter is coerced once per call with the numeric kind matching the
comparison (unsigned for unsigned fields, float for float fields, signed
otherwise). Any other category raises UnsupportedFieldType.

``required`` is the odd one out: it ignores its parameter and accepts every
category.
"""

from __future__ import annotations

import dataclasses
import datetime
import operator
from decimal import Decimal
from typing import Any, Callable, Dict, Tuple

import numpy as np

from fieldrules.categories import ValueCategory, classify, is_absent
from fieldrules.errors import UnsupportedFieldType
from fieldrules.params import as_float, as_int, as_uint

__all__ = [
    "length",
    "gte",
    "gt",
    "lte",
    "lt",
    "min",
    "max",
    "required",
]

# Parameter parser used for each comparable category
_COERCERS: Dict[ValueCategory, Callable[[str], Any]] = {
    ValueCategory.TEXT: as_int,
    ValueCategory.SEQUENCE: as_int,
    ValueCategory.SIGNED_INTEGER: as_int,
    ValueCategory.UNSIGNED_INTEGER: as_uint,
    ValueCategory.FLOATING_POINT: as_float,
}


def _compare(
    field: Any,
    param: str,
    op: Callable[[Any, Any], bool],
) -> bool:
    measured = classify(field)
    coerce = _COERCERS.get(measured.category)
    if coerce is None:
        raise UnsupportedFieldType(field, param=param)
    return bool(op(measured.quantity, coerce(param)))


def length(field: Any, param: str) -> bool:
    """Test whether a field's length (or value) equals the parameter.

    For strings it tests the number of characters, for collections the
    number of items, and for numbers the value itself.
    """
    return _compare(field, param, operator.eq)


def gte(field: Any, param: str) -> bool:
    return _compare(field, param, operator.ge)


def gt(field: Any, param: str) -> bool:
    return _compare(field, param, operator.gt)


def lte(field: Any, param: str) -> bool:
    return _compare(field, param, operator.le)


def lt(field: Any, param: str) -> bool:
    return _compare(field, param, operator.lt)


def min(field: Any, param: str) -> bool:  # noqa: A001
    """Test whether a field is at least the parameter.

    Same operation as ``gte``, kept under its own rule name.
    """
    return gte(field, param)


def max(field: Any, param: str) -> bool:  # noqa: A001
    """Test whether a field is at most the parameter.

    Same operation as ``lte``, kept under its own rule name.
    """
    return lte(field, param)


def required(field: Any, param: str = "") -> bool:
    """Test that a field is present and not its type's zero value.

    Collections must hold at least one element. Everything else must not be
    absent (None, pandas NA/NaT) and must differ from the zero value of its
    type: ``""``, ``0``, ``0.0``, ``False``, ``0j``, ``Decimal(0)``, a zero
    timedelta, or a dataclass instance equal to its all-defaults instance.
    Other objects have no zero value and count as present.

    The parameter is ignored.
    """
    if is_absent(field):
        return False

    measured = classify(field)
    if measured.category.is_sized:
        return measured.quantity > 0
    if measured.category.is_numeric:
        return measured.quantity != 0

    return not _is_zero_value(field)


# Zero values of OTHER-category types; pd.Timedelta subclasses timedelta
_ZERO_VALUES: Tuple[Tuple[Tuple[type, ...], Any], ...] = (
    ((bool, np.bool_), False),
    ((complex, np.complexfloating), 0j),
    ((Decimal,), Decimal(0)),
    ((datetime.timedelta,), datetime.timedelta(0)),
    ((np.timedelta64,), np.timedelta64(0)),
)


def _is_zero_value(field: Any) -> bool:
    for types, zero in _ZERO_VALUES:
        if isinstance(field, types):
            return _equals(field, zero)

    if dataclasses.is_dataclass(field) and not isinstance(field, type):
        try:
            default = type(field)()
        except Exception:
            # required fields or a failing __post_init__: no zero value
            return False
        return _equals(default, field)

    return False


def _equals(left: Any, right: Any) -> bool:
    try:
        return bool(left == right)
    except (TypeError, ValueError, ArithmeticError):
        # ambiguous truth values, signaling Decimal NaN
        return False
