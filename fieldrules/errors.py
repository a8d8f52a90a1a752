"""Structured fault hierarchy for the rule engine.

Faults signal configuration or programming errors: a rule parameter that
cannot be parsed, a field type a rule does not support, an unknown rule
name. They are raised, never returned, so callers can tell them apart from
an ordinary ``False`` validation outcome.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

__all__ = [
    "ValidationFault",
    "MalformedParameter",
    "UnsupportedFieldType",
    "RuleNotFound",
    "DuplicateRule",
    "RegistryConfigError",
]


class ValidationFault(Exception):
    """Base exception for all rule engine faults.

    Provides structured error information for debugging.
    """

    def __init__(
        self,
        message: str,
        *,
        rule: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.message = message
        self.rule = rule
        self.details = dict(details or {})
        self.suggestion = suggestion

        parts = [message]

        if rule:
            parts.insert(0, f"[{rule}]")

        if self.details:
            parts.append("\nDetails:")
            parts.extend(f"  {k}: {v}" for k, v in self.details.items())

        if suggestion:
            parts.append(f"\nSuggestion: {suggestion}")

        super().__init__("\n".join(parts) if len(parts) > 1 else message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "rule": self.rule,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class MalformedParameter(ValidationFault):
    """A rule parameter cannot be parsed as the kind the rule requires.

    This is a rule declaration bug, not a field that failed validation.
    """

    def __init__(
        self,
        param: str,
        kind: str,
        *,
        cause: Optional[Exception] = None,
        **kwargs: Any,
    ) -> None:
        self.param = param
        self.kind = kind
        self.cause = cause

        details = dict(kwargs.pop("details", None) or {})
        details["param"] = repr(param)
        details["expected"] = kind
        if cause:
            details["cause"] = str(cause)

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion:
            suggestion = f"Declare the rule with a valid {kind} parameter."

        super().__init__(
            f"Bad input param {param!r} for {kind}",
            details=details,
            suggestion=suggestion,
            **kwargs,
        )


class UnsupportedFieldType(ValidationFault):
    """The field's value category is not handled by the invoked rule."""

    def __init__(
        self,
        value: Any,
        *,
        param: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        self.value = value
        self.value_type = type(value).__name__
        self.param = param

        details = dict(kwargs.pop("details", None) or {})
        details["field_type"] = self.value_type
        if param is not None:
            details["param"] = repr(param)

        super().__init__(
            f"Bad field type {self.value_type}",
            details=details,
            **kwargs,
        )


class RuleNotFound(ValidationFault, KeyError):
    """No predicate is registered under the requested rule name."""

    def __init__(
        self,
        name: str,
        *,
        available: Optional[Iterable[str]] = None,
        **kwargs: Any,
    ) -> None:
        self.name = name
        self.available = sorted(available) if available is not None else []

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion and self.available:
            suggestion = "Known rules: " + ", ".join(self.available)

        super().__init__(
            f"Unknown rule {name!r}",
            suggestion=suggestion,
            **kwargs,
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the whole message
        return Exception.__str__(self)


class DuplicateRule(ValidationFault):
    """An extension would replace an already registered rule name."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        self.name = name
        suggestion = kwargs.pop("suggestion", None)
        if not suggestion:
            suggestion = "Pass override=True to replace an existing rule on purpose."
        super().__init__(
            f"Rule {name!r} is already registered",
            suggestion=suggestion,
            **kwargs,
        )


class RegistryConfigError(ValidationFault):
    """Error in a YAML registry configuration."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        field: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        self.path = path
        self.field = field

        details = dict(kwargs.pop("details", None) or {})
        if path:
            details["path"] = path
        if field:
            details["field"] = field

        super().__init__(message, details=details, **kwargs)
