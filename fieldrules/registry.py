"""Rule name to predicate registry.

A Registry is an immutable mapping built once and only read afterwards, so
any number of threads may look rules up without locking. Extending a
registry never touches the original; ``extend`` returns a new Registry.

Override policy: adding a name that already exists (built-in or custom)
raises DuplicateRule unless the caller passes ``override=True``.

Usage:
```python
from fieldrules import DEFAULT_REGISTRY, lookup

lookup("min")("hello", "3")  # True

custom = DEFAULT_REGISTRY.extend({"even": lambda v, p: v % 2 == 0})
custom.evaluate("even", 4)  # True
```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from fieldrules import comparisons, formats
from fieldrules.errors import DuplicateRule, RuleNotFound

logger = logging.getLogger(__name__)

__all__ = [
    "Predicate",
    "Registry",
    "BUILTIN_PREDICATES",
    "DEFAULT_REGISTRY",
    "lookup",
]

Predicate = Callable[[Any, str], bool]

Entries = Union[Mapping, List[Tuple[str, Predicate]]]

BUILTIN_PREDICATES: Mapping = MappingProxyType(
    {
        "required": comparisons.required,
        "len": comparisons.length,
        "min": comparisons.min,
        "max": comparisons.max,
        "lt": comparisons.lt,
        "lte": comparisons.lte,
        "gt": comparisons.gt,
        "gte": comparisons.gte,
        "alpha": formats.alpha,
        "alphanum": formats.alphanum,
        "numeric": formats.numeric,
        "number": formats.number,
        "hexadecimal": formats.hexadecimal,
        "hexcolor": formats.hexcolor,
        "rgb": formats.rgb,
        "rgba": formats.rgba,
        "hsl": formats.hsl,
        "hsla": formats.hsla,
        "email": formats.email,
    }
)


class Registry(Mapping):
    """Immutable mapping from rule name to predicate."""

    def __init__(self, entries: Optional[Entries] = None):
        """Build a registry.

        Args:
            entries: Mapping or (name, predicate) pairs

        Raises:
            TypeError: If a name is not a string or a predicate not callable
            DuplicateRule: If the same name appears twice in pair form
        """
        table: Dict[str, Predicate] = {}
        for name, predicate in _iter_entries(entries):
            _check_entry(name, predicate)
            if name in table:
                raise DuplicateRule(name)
            table[name] = predicate
        self._table = MappingProxyType(table)

    def __getitem__(self, name: str) -> Predicate:
        return self._table[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"Registry({len(self)} rules)"

    def lookup(self, name: str) -> Predicate:
        """Resolve a rule name to its predicate.

        Raises:
            RuleNotFound: If no predicate is registered under ``name``
        """
        try:
            return self._table[name]
        except KeyError:
            raise RuleNotFound(name, available=self._table.keys()) from None

    def names(self) -> List[str]:
        """Registered rule names, sorted."""
        return sorted(self._table)

    def evaluate(self, name: str, value: Any, param: str = "") -> bool:
        """Look up a rule and apply it to one value."""
        return self.lookup(name)(value, param)

    def extend(self, entries: Entries, *, override: bool = False) -> "Registry":
        """Return a new registry with additional rules.

        Args:
            entries: Mapping or (name, predicate) pairs to add
            override: Allow replacing rules that already exist

        Returns:
            New Registry; this one is left unchanged

        Raises:
            DuplicateRule: If a name already exists and override is False
        """
        table = dict(self._table)
        added: List[str] = []
        for name, predicate in _iter_entries(entries):
            _check_entry(name, predicate)
            if name in table or name in added:
                if not override:
                    raise DuplicateRule(name)
                logger.warning("Overriding rule '%s'", name)
            table[name] = predicate
            added.append(name)

        logger.debug("Extended registry with %d rule(s): %s", len(added), ", ".join(added))
        return Registry(table)

    def alias(self, new_name: str, existing: str, *, override: bool = False) -> "Registry":
        """Return a new registry exposing an existing rule under another name.

        Raises:
            RuleNotFound: If ``existing`` is not registered
            DuplicateRule: If ``new_name`` exists and override is False
        """
        return self.extend({new_name: self.lookup(existing)}, override=override)


def _iter_entries(entries: Optional[Entries]) -> Iterator[Tuple[str, Predicate]]:
    if entries is None:
        return iter(())
    if isinstance(entries, Mapping):
        return iter(entries.items())
    return iter(entries)


def _check_entry(name: Any, predicate: Any) -> None:
    if not isinstance(name, str) or not name:
        raise TypeError(f"Rule name must be a non-empty string, got {name!r}")
    if not callable(predicate):
        raise TypeError(f"Predicate for rule '{name}' is not callable")


DEFAULT_REGISTRY = Registry(BUILTIN_PREDICATES)
logger.debug("Built default registry with %d rules", len(DEFAULT_REGISTRY))


def lookup(name: str) -> Predicate:
    """Resolve a rule name against the built-in registry.

    Raises:
        RuleNotFound: If the name is unknown
    """
    return DEFAULT_REGISTRY.lookup(name)
