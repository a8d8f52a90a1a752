"""YAML configuration for custom registries.

Lets a project add its own rules without writing Python: regex-backed
format rules and aliases of existing rules.

Example YAML (rules.yaml):
    allow_override: false
    patterns:
      zipcode: "[0-9]{5}"
      sku: "${SKU_PATTERN}"
    aliases:
      minlen: min
      colour: hexcolor

``${VAR}`` references are expanded from the environment, optionally after
loading a .env file. The bare ``$VAR`` form is not supported because ``$``
is common in regular expressions.

Usage:
    from fieldrules.config import load_registry
    registry = load_registry("./rules.yaml")
    registry.evaluate("zipcode", "90210")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


from fieldrules.env import expand_options, load_env_file
from fieldrules.errors import MalformedParameter, RegistryConfigError
from fieldrules.formats import pattern_matcher
from fieldrules.registry import DEFAULT_REGISTRY, Registry

logger = logging.getLogger(__name__)

__all__ = [
    "RegistryConfig",
    "build_registry",
    "load_registry",
    "load_registry_config",
]

_KNOWN_KEYS = {"allow_override", "aliases", "patterns"}


def _string_map(data: Dict[str, Any], key: str) -> Dict[str, str]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise RegistryConfigError(f"'{key}' must be a mapping of names to strings", field=key)
    for name, value in section.items():
        if not isinstance(name, str) or not isinstance(value, str):
            raise RegistryConfigError(
                f"'{key}' entries must map a name to a string",
                field=f"{key}.{name}",
            )
    return dict(section)


@dataclass
class RegistryConfig:
    """Custom rules declared in configuration."""

    allow_override: bool = False
    aliases: Dict[str, str] = field(default_factory=dict)
    patterns: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RegistryConfig":
        """Create a config from a parsed YAML document.

        Raises:
            RegistryConfigError: If the structure is invalid
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise RegistryConfigError("Registry config must be a mapping")

        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise RegistryConfigError(
                f"Unknown registry config keys: {', '.join(sorted(map(str, unknown)))}",
                suggestion=f"Valid keys: {', '.join(sorted(_KNOWN_KEYS))}",
            )

        allow_override = data.get("allow_override", False)
        if not isinstance(allow_override, bool):
            raise RegistryConfigError("'allow_override' must be true or false", field="allow_override")

        return cls(
            allow_override=allow_override,
            aliases=_string_map(data, "aliases"),
            patterns=_string_map(data, "patterns"),
        )


def load_registry_config(
    path: Union[str, Path],
    *,
    env_file: Optional[Union[str, Path]] = None,
    strict_env: bool = False,
) -> RegistryConfig:
    """Load a registry config from a YAML file.

    Args:
        path: YAML file path
        env_file: Optional .env file loaded before expansion
        strict_env: Fail on ${VAR} references to unset variables

    Raises:
        RegistryConfigError: If the file is missing, unparsable or invalid
    """
    path = Path(path)
    if not path.exists():
        raise RegistryConfigError("Registry config file not found", path=str(path))

    if env_file is not None:
        loaded = load_env_file(env_file)
        logger.debug("Loaded env file %s: %s", env_file, loaded)

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RegistryConfigError(f"Invalid YAML: {e}", path=str(path)) from e

    if isinstance(data, dict):
        try:
            data = expand_options(data, strict=strict_env)
        except KeyError as e:
            raise RegistryConfigError(str(e.args[0]), path=str(path)) from e

    try:
        config = RegistryConfig.from_dict(data)
    except RegistryConfigError as e:
        raise RegistryConfigError(
            e.message,
            path=str(path),
            field=e.field,
            suggestion=e.suggestion,
        ) from e

    logger.info(
        "Loaded registry config %s (%d pattern(s), %d alias(es))",
        path,
        len(config.patterns),
        len(config.aliases),
    )
    return config


def build_registry(config: RegistryConfig, base: Registry = DEFAULT_REGISTRY) -> Registry:
    """Apply a config on top of a base registry.

    Patterns are added first so aliases may point at them.

    Raises:
        RegistryConfigError: If a pattern does not compile
        RuleNotFound: If an alias targets an unknown rule
        DuplicateRule: If a name exists and allow_override is false
    """
    matchers = {}
    for name, regex in config.patterns.items():
        try:
            matchers[name] = pattern_matcher(name, regex)
        except MalformedParameter as e:
            raise RegistryConfigError(
                f"Pattern for rule '{name}' does not compile",
                field=f"patterns.{name}",
                details={"cause": str(e.cause)},
            ) from e

    registry = base.extend(matchers, override=config.allow_override)
    for new_name, existing in config.aliases.items():
        registry = registry.alias(new_name, existing, override=config.allow_override)

    return registry


def load_registry(
    path: Union[str, Path],
    *,
    base: Registry = DEFAULT_REGISTRY,
    env_file: Optional[Union[str, Path]] = None,
    strict_env: bool = False,
) -> Registry:
    """Load a YAML config and build the resulting registry.

    Takes the same ``env_file`` and ``strict_env`` options as
    ``load_registry_config``.
    """
    config = load_registry_config(path, env_file=env_file, strict_env=strict_env)
    return build_registry(config, base=base)
