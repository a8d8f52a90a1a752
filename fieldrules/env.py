"""Environment variable helpers for registry configuration.

Expands ``${VAR}`` references in config values and loads .env files with
python-dotenv. The bare ``$VAR`` form is deliberately not recognized:
config values are mostly regular expressions, where ``$`` is an anchor.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

__all__ = ["ENV_VAR_PATTERN", "expand_env_vars", "expand_options", "load_env_file"]

ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def load_env_file(
    path: Optional[Union[str, Path]] = None,
    *,
    override: bool = False,
) -> bool:
    """Load variables from a .env file into the process environment.

    Args:
        path: .env file path; None searches the current and parent directories
        override: Replace variables that are already set

    Returns:
        True if at least one variable was set
    """
    return load_dotenv(dotenv_path=path, override=override)


def expand_env_vars(value: str, *, strict: bool = False) -> str:
    """Expand ``${VAR}`` references in a string.

    Missing variables are left as-is unless ``strict`` is set.

    Raises:
        KeyError: If strict and a referenced variable is not set

    Example:
        >>> os.environ["SKU_PREFIX"] = "AB"
        >>> expand_env_vars("${SKU_PREFIX}-[0-9]{4}")
        'AB-[0-9]{4}'
    """

    def replacer(match: re.Match[str]) -> str:
        name = match.group(1)
        env_value = os.environ.get(name)
        if env_value is None:
            if strict:
                raise KeyError(f"Environment variable not set: {name}")
            return match.group(0)
        return env_value

    return ENV_VAR_PATTERN.sub(replacer, value)


def expand_options(options: Dict[str, Any], *, strict: bool = False) -> Dict[str, Any]:
    """Return a copy of a config mapping with env vars expanded in strings.

    Nested mappings and lists are expanded too. Keys and non-string values
    are kept unchanged.

    Raises:
        KeyError: If strict and a referenced variable is not set
    """
    return {key: _expand(value, strict) for key, value in options.items()}


def _expand(value: Any, strict: bool) -> Any:
    if isinstance(value, str):
        return expand_env_vars(value, strict=strict)
    if isinstance(value, dict):
        return expand_options(value, strict=strict)
    if isinstance(value, list):
        return [_expand(item, strict) for item in value]
    return value
