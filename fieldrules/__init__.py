"""fieldrules - field validation predicates.

Each rule is a predicate ``(value, param) -> bool`` resolved by name from a
Registry. ``False`` means the value does not satisfy the rule; configuration
and programming errors raise a ValidationFault instead.

Quick start:
    from fieldrules import lookup

    lookup("min")("alice", "3")                  # True
    lookup("email")("alice@example.com", "")     # True
    lookup("lte")(42, "0x20")                    # False
"""

from fieldrules.categories import Field, ValueCategory, classify
from fieldrules.errors import (
    DuplicateRule,
    MalformedParameter,
    RegistryConfigError,
    RuleNotFound,
    UnsupportedFieldType,
    ValidationFault,
)
from fieldrules.formats import pattern_matcher
from fieldrules.params import as_float, as_int, as_uint
from fieldrules.registry import (
    BUILTIN_PREDICATES,
    DEFAULT_REGISTRY,
    Predicate,
    Registry,
    lookup,
)

__version__ = "1.0.0"

__all__ = [
    # Registry
    "BUILTIN_PREDICATES",
    "DEFAULT_REGISTRY",
    "Predicate",
    "Registry",
    "lookup",
    "pattern_matcher",
    # Categories
    "Field",
    "ValueCategory",
    "classify",
    # Parameters
    "as_float",
    "as_int",
    "as_uint",
    # Faults
    "DuplicateRule",
    "MalformedParameter",
    "RegistryConfigError",
    "RuleNotFound",
    "UnsupportedFieldType",
    "ValidationFault",
]
