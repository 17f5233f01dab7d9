"""Provider list validation.

validate_providers walks the configured providers in order and returns
every problem it finds; it never stops at the first one and never raises.
Provider ids seen so far are threaded through the walk as an immutable
frozenset that each validate_provider step receives and returns.

validate_config wraps it for callers that want an exception instead of a
list (startup, the CLI).
"""

from __future__ import annotations

from authgate.config import GatewayConfig, ProviderConfig
from authgate.exceptions import ConfigValidationError
from authgate.telemetry.models.system import SystemEvent
from authgate.telemetry.system_logger import get_system_logger
from authgate.validation.probe import EnvironmentProbe, LocalProbe
from authgate.validation.provider_rules import validate_authentication_config
from authgate.validation.registry import rules_for

__all__ = [
    "validate_config",
    "validate_provider",
    "validate_providers",
]

_system_logger = get_system_logger()


def validate_providers(
    config: GatewayConfig,
    probe: EnvironmentProbe | None = None,
) -> list[str]:
    """Validate the provider list and every provider in it.

    Args:
        config: Loaded gateway configuration (not modified).
        probe: Filesystem/environment probe. Defaults to LocalProbe.

    Returns:
        Problem messages in traversal order. Empty means valid.
    """
    probe = probe if probe is not None else LocalProbe()
    msgs: list[str] = []

    if len(config.providers) == 0:
        msgs.append("at least one provider has to be defined")
    if config.skip_provider_button and len(config.providers) > 1:
        msgs.append("SkipProviderButton and multiple providers are mutually exclusive")

    seen_ids: frozenset[str] = frozenset()
    for provider in config.providers:
        provider_msgs, seen_ids = validate_provider(provider, seen_ids, probe)
        msgs.extend(provider_msgs)

    return msgs


def validate_provider(
    provider: ProviderConfig,
    seen_ids: frozenset[str],
    probe: EnvironmentProbe,
) -> tuple[list[str], frozenset[str]]:
    """Validate a single provider.

    Args:
        provider: Provider to validate.
        seen_ids: Ids of the providers validated before this one.
        probe: Filesystem/environment probe passed to type rules.

    Returns:
        Tuple of (problem messages, seen_ids with this provider's id added).
    """
    msgs: list[str] = []

    if provider.id == "":
        msgs.append("provider has empty id: ids are required for all providers")

    if provider.id in seen_ids:
        msgs.append(
            f"multiple providers found with id {provider.id}: provider ids must be unique"
        )
    seen_ids = seen_ids | {provider.id}

    if provider.client_id == "":
        msgs.append("provider missing setting: client-id")

    msgs.extend(validate_authentication_config(provider))

    rules = rules_for(provider.type)
    if not rules:
        _system_logger.debug(
            SystemEvent(
                event="provider_type_without_rules",
                message="no type-specific rules for provider type",
                component="validation",
                provider_id=provider.id,
                provider_type=provider.type,
            ).model_dump(exclude_none=True)
        )
    for rule in rules:
        msgs.extend(rule(provider, probe))

    return msgs, seen_ids


def validate_config(
    config: GatewayConfig,
    probe: EnvironmentProbe | None = None,
) -> None:
    """Validate configuration, raising if any problem is found.

    Each problem is logged as a WARNING system event before raising.

    Args:
        config: Loaded gateway configuration.
        probe: Filesystem/environment probe. Defaults to LocalProbe.

    Raises:
        ConfigValidationError: With every problem found.
    """
    msgs = validate_providers(config, probe)

    for msg in msgs:
        _system_logger.warning(
            SystemEvent(
                event="provider_config_problem",
                message=msg,
                component="validation",
            ).model_dump(exclude_none=True)
        )

    _system_logger.info(
        SystemEvent(
            event="provider_validation_completed",
            message="provider configuration valid" if not msgs else "provider configuration invalid",
            component="validation",
            details={"providers": len(config.providers), "problems": len(msgs)},
        ).model_dump(exclude_none=True)
    )

    if msgs:
        raise ConfigValidationError(msgs)
