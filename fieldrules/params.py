"""Rule parameter coercion.

Rule parameters arrive as text (``"10"``, ``"0x0A"``, ``"2.5"``) and are
parsed on demand into the numeric kind the comparison needs. Integer
parameters accept base prefixes (``0x``, ``0o``, ``0b``, and a legacy
leading ``0`` for octal) plus ``_`` digit separators. Anything that does not
parse, or does not fit in 64 bits, raises MalformedParameter.

Example:
    >>> as_int("0x0A")
    10
    >>> as_uint("017")
    15
    >>> as_float("2.5e3")
    2500.0
"""

from __future__ import annotations

import math
import re

from fieldrules.errors import MalformedParameter

__all__ = [
    "as_int",
    "as_uint",
    "as_float",
    "INT64_MIN",
    "INT64_MAX",
    "UINT64_MAX",
]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

# "017" is octal; Python's int() rejects leading zeros so it is rewritten to "0o17"
_LEGACY_OCTAL = re.compile(r"0[0-7_]+")

_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)

_NON_FINITE = {"inf", "infinity", "nan"}


def _check_token(param: str, kind: str) -> None:
    if not isinstance(param, str) or not param:
        raise MalformedParameter(param, kind)
    if not param.isascii() or param != param.strip():
        raise MalformedParameter(param, kind)


def _parse_integer(param: str, kind: str) -> int:
    _check_token(param, kind)

    sign, body = "", param
    if body[0] in "+-":
        sign, body = body[0], body[1:]

    if _LEGACY_OCTAL.fullmatch(body):
        body = "0o" + body[1:]

    try:
        return int(sign + body, 0)
    except ValueError as e:
        raise MalformedParameter(param, kind, cause=e) from e


def as_int(param: str) -> int:
    """Return the parameter as a signed 64-bit integer.

    Raises:
        MalformedParameter: If the parameter is not an integer literal or
            falls outside the int64 range
    """
    value = _parse_integer(param, "int64")
    if not INT64_MIN <= value <= INT64_MAX:
        raise MalformedParameter(param, "int64", details={"reason": "value out of range"})
    return value


def as_uint(param: str) -> int:
    """Return the parameter as an unsigned 64-bit integer.

    Signs are rejected, including a leading ``+``.

    Raises:
        MalformedParameter: If the parameter is not an unsigned integer
            literal or falls outside the uint64 range
    """
    if isinstance(param, str) and param[:1] in ("+", "-"):
        raise MalformedParameter(param, "uint64", details={"reason": "sign not allowed"})
    value = _parse_integer(param, "uint64")
    if value > UINT64_MAX:
        raise MalformedParameter(param, "uint64", details={"reason": "value out of range"})
    return value


def as_float(param: str) -> float:
    """Return the parameter as a 64-bit float.

    Accepts decimal and exponent notation, hexadecimal floats with a binary
    exponent (``0x1p-2``) and the spellings ``inf``, ``infinity`` and ``nan``
    (any case, optionally signed). A finite literal too large to represent
    is malformed rather than silently becoming infinity.

    Raises:
        MalformedParameter: If the parameter is not a float literal
    """
    _check_token(param, "float64")

    if "_" in param:
        raise MalformedParameter(param, "float64", details={"reason": "digit separators not allowed"})

    try:
        if _HEX_FLOAT.fullmatch(param):
            value = float.fromhex(param)
        else:
            value = float(param)
    except (ValueError, OverflowError) as e:
        raise MalformedParameter(param, "float64", cause=e) from e

    if math.isinf(value) and param.lstrip("+-").lower() not in _NON_FINITE:
        raise MalformedParameter(param, "float64", details={"reason": "value out of range"})

    return value
