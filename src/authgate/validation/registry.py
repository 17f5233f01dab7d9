"""Provider type -> validation rule registry.

Per-type rules are registered once, at import time, with a decorator:

    @register_provider_rule(PROVIDER_TYPE_GOOGLE)
    def validate_google_config(provider, probe):
        ...

The provider validator looks rules up by exact type tag. Adding a provider
type means registering a rule; the aggregator does not change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from authgate.config import ProviderConfig
    from authgate.validation.probe import EnvironmentProbe

__all__ = [
    "ProviderRule",
    "register_provider_rule",
    "registered_provider_types",
    "rules_for",
]

ProviderRule = Callable[["ProviderConfig", "EnvironmentProbe"], list[str]]

_RULES: dict[str, list[ProviderRule]] = {}


def register_provider_rule(*provider_types: str) -> Callable[[ProviderRule], ProviderRule]:
    """Register the decorated function as a rule for each given type tag.

    Args:
        *provider_types: Exact type tags the rule applies to.

    Returns:
        Decorator that registers the rule and returns it unchanged.

    Raises:
        ValueError: If no type tag is given, or the rule is already
            registered for one of them.
    """
    if not provider_types:
        raise ValueError("register_provider_rule requires at least one provider type")

    def decorator(rule: ProviderRule) -> ProviderRule:
        for provider_type in provider_types:
            rules = _RULES.setdefault(provider_type, [])
            if rule in rules:
                raise ValueError(f"rule {rule.__name__} already registered for {provider_type!r}")
            rules.append(rule)
        return rule

    return decorator


def rules_for(provider_type: str) -> tuple[ProviderRule, ...]:
    """Rules registered for a type tag, in registration order (empty if unknown)."""
    return tuple(_RULES.get(provider_type, ()))


def registered_provider_types() -> frozenset[str]:
    """Type tags that have at least one rule."""
    return frozenset(tag for tag, rules in _RULES.items() if rules)
