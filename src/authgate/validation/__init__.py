"""Identity provider configuration validation.

Importing this package registers the built-in per-type rules
(see provider_rules.py).
"""

from authgate.validation.probe import EnvironmentProbe, LocalProbe
from authgate.validation.providers import validate_config, validate_provider, validate_providers
from authgate.validation.registry import register_provider_rule, rules_for

__all__ = [
    "EnvironmentProbe",
    "LocalProbe",
    "register_provider_rule",
    "rules_for",
    "validate_config",
    "validate_provider",
    "validate_providers",
]
