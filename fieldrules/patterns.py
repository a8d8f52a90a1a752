"""Precompiled patterns for the format predicates.

Patterns carry no ``^``/``$`` anchors; callers apply them with
``fullmatch`` so the whole value must conform and a trailing newline never
slips through. Character classes spell out ``[0-9]`` and ``[a-zA-Z]``
because ``\\d`` and ``\\w`` match any Unicode digit or letter in Python.
"""

from __future__ import annotations

import re

__all__ = [
    "ALPHA",
    "ALPHANUMERIC",
    "NUMERIC",
    "NUMBER",
    "HEXADECIMAL",
    "HEXCOLOR",
    "RGB",
    "RGBA",
    "HSL",
    "HSLA",
    "EMAIL",
]

# 0-255
_BYTE = r"\s*(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9]?[0-9])\s*"
# 0-360
_HUE = r"\s*(?:360|3[0-5][0-9]|[12][0-9]{2}|[1-9]?[0-9])\s*"
# 0%-100%
_PERCENT = r"\s*(?:100|[1-9]?[0-9])%\s*"
# 0-1, including fractions such as .5 and 0.25
_ALPHA_CHANNEL = r"\s*(?:0?\.[0-9]+|[01](?:\.0+)?)\s*"

# Non-ASCII ranges allowed in internationalized addresses
_UCS = r"\u00a0-\ud7ff\uf900-\ufdcf\ufdf0-\uffef"
_ATOM = "[a-zA-Z0-9!#$%&'*+/=?^_`{|}~" + _UCS + "-]+"
_QUOTED = r'"(?:[\x20\x21\x23-\x5b\x5d-\x7e' + _UCS + r']|\\[\x20-\x7e])*"'
_LABEL_CHAR = "[a-zA-Z0-9" + _UCS + "]"
_LABEL = _LABEL_CHAR + "(?:[a-zA-Z0-9" + _UCS + "-]*" + _LABEL_CHAR + ")?"
_TLD = "[a-zA-Z" + _UCS + "](?:[a-zA-Z0-9" + _UCS + "-]*" + _LABEL_CHAR + ")?"

ALPHA = re.compile(r"[a-zA-Z]+")
ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]+")
NUMERIC = re.compile(r"[-+]?[0-9]+(?:\.[0-9]+)?")
NUMBER = re.compile(r"[0-9]+")
HEXADECIMAL = re.compile(r"[0-9a-fA-F]+")
HEXCOLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
RGB = re.compile(r"rgb\(" + _BYTE + "," + _BYTE + "," + _BYTE + r"\)")
RGBA = re.compile(r"rgba\(" + _BYTE + "," + _BYTE + "," + _BYTE + "," + _ALPHA_CHANNEL + r"\)")
HSL = re.compile(r"hsl\(" + _HUE + "," + _PERCENT + "," + _PERCENT + r"\)")
HSLA = re.compile(r"hsla\(" + _HUE + "," + _PERCENT + "," + _PERCENT + "," + _ALPHA_CHANNEL + r"\)")
EMAIL = re.compile(
    "(?:" + _ATOM + r"(?:\." + _ATOM + ")*|" + _QUOTED + ")"
    + "@(?:" + _LABEL + r"\.)+" + _TLD + r"\.?"
)
