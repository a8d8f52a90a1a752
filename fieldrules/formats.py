"""Format predicates for text fields.

Each predicate wraps one precompiled pattern and passes only when the whole
value conforms. Format is a textual notion, so any non-text field raises
UnsupportedFieldType instead of returning False.

Example:
    >>> hexcolor("#FFF", "")
    True
    >>> alphanum("abc123!", "")
    False
"""

from __future__ import annotations

import re
from typing import Any, Callable, Union

from fieldrules import patterns
from fieldrules.categories import ValueCategory, classify
from fieldrules.errors import MalformedParameter, UnsupportedFieldType

__all__ = [
    "alpha",
    "alphanum",
    "numeric",
    "number",
    "hexadecimal",
    "hexcolor",
    "rgb",
    "rgba",
    "hsl",
    "hsla",
    "email",
    "pattern_matcher",
]


def _format_matcher(name: str, pattern: re.Pattern[str], doc: str) -> Callable[[Any, str], bool]:
    def matcher(field: Any, param: str = "") -> bool:
        if classify(field).category is not ValueCategory.TEXT:
            raise UnsupportedFieldType(field, rule=name)
        return pattern.fullmatch(field) is not None

    matcher.__name__ = name
    matcher.__qualname__ = name
    matcher.__doc__ = doc
    return matcher


def pattern_matcher(name: str, regex: Union[str, re.Pattern[str]]) -> Callable[[Any, str], bool]:
    """Build a format predicate from a caller-supplied regular expression.

    The predicate has the same contract as the built-in format rules: text
    only, full-string match, parameter ignored.

    Args:
        name: Rule name, used in fault messages
        regex: Pattern text or an already compiled pattern

    Returns:
        Predicate callable

    Raises:
        MalformedParameter: If the pattern does not compile

    Example:
        >>> zipcode = pattern_matcher("zipcode", r"[0-9]{5}")
        >>> zipcode("90210", "")
        True
    """
    if isinstance(regex, str):
        try:
            compiled = re.compile(regex)
        except re.error as e:
            raise MalformedParameter(regex, "regular expression", rule=name, cause=e) from e
    else:
        compiled = regex
    return _format_matcher(name, compiled, f"Test that a text field matches {compiled.pattern!r}.")


alpha = _format_matcher("alpha", patterns.ALPHA, "Test that a text field holds ASCII letters only.")
alphanum = _format_matcher(
    "alphanum",
    patterns.ALPHANUMERIC,
    "Test that a text field holds ASCII letters and digits only.",
)
numeric = _format_matcher(
    "numeric",
    patterns.NUMERIC,
    "Test that a text field is a decimal number, optionally signed (e.g. -12.5).",
)
number = _format_matcher("number", patterns.NUMBER, "Test that a text field holds digits only.")
hexadecimal = _format_matcher(
    "hexadecimal",
    patterns.HEXADECIMAL,
    "Test that a text field holds hexadecimal digits only.",
)
hexcolor = _format_matcher("hexcolor", patterns.HEXCOLOR, "Test for a #RGB or #RRGGBB color.")
rgb = _format_matcher("rgb", patterns.RGB, "Test for an rgb(r, g, b) color.")
rgba = _format_matcher("rgba", patterns.RGBA, "Test for an rgba(r, g, b, a) color.")
hsl = _format_matcher("hsl", patterns.HSL, "Test for an hsl(h, s%, l%) color.")
hsla = _format_matcher("hsla", patterns.HSLA, "Test for an hsla(h, s%, l%, a) color.")
email = _format_matcher("email", patterns.EMAIL, "Test that a text field is an email address.")
