"""Tests for the provider type rule registry."""

from __future__ import annotations

import pytest

from authgate.config import GatewayConfig, ProviderConfig
from authgate.validation import registry, validate_providers
from authgate.validation.probe import LocalProbe
from authgate.validation.provider_rules import validate_entra_id_config, validate_google_config
from authgate.validation.registry import register_provider_rule, registered_provider_types, rules_for


@pytest.fixture
def isolated_registry(monkeypatch: pytest.MonkeyPatch):
    """Copy of the registry so tests can register rules without leaking them."""
    monkeypatch.setattr(registry, "_RULES", {k: list(v) for k, v in registry._RULES.items()})


class TestBuiltinRules:
    """Tests for rules registered on import."""

    def test_google_rule_registered(self):
        """The google type dispatches to validate_google_config."""
        assert rules_for("google") == (validate_google_config,)

    def test_entra_rule_registered(self):
        """The entra-id type dispatches to validate_entra_id_config."""
        assert rules_for("entra-id") == (validate_entra_id_config,)

    def test_unknown_type_has_no_rules(self):
        """An unregistered tag yields an empty tuple."""
        assert rules_for("github") == ()

    def test_registered_types(self):
        """Built-in registrations cover google and entra-id."""
        assert {"google", "entra-id"} <= registered_provider_types()


class TestRegisterProviderRule:
    """Tests for adding new provider types."""

    def test_new_type_rule_runs_in_aggregator(self, isolated_registry):
        """Given a rule registered for a new type, the aggregator applies it."""

        # Arrange
        @register_provider_rule("github")
        def require_org(provider, probe):
            return ["missing setting: github-org"]

        config = GatewayConfig(providers=[ProviderConfig(id="gh", type="github", client_id="c")])

        # Act
        msgs = validate_providers(config, LocalProbe())

        # Assert
        assert msgs == ["missing setting: github-org"]

    def test_rules_run_in_registration_order(self, isolated_registry):
        """Given two rules for one type, both run in registration order."""

        # Arrange
        @register_provider_rule("gitlab")
        def first(provider, probe):
            return ["first"]

        @register_provider_rule("gitlab")
        def second(provider, probe):
            return ["second"]

        # Act
        result = [msg for rule in rules_for("gitlab") for msg in rule(ProviderConfig(), LocalProbe())]

        # Assert
        assert result == ["first", "second"]

    def test_one_rule_for_several_types(self, isolated_registry):
        """Given several tags, the rule is registered under each."""

        # Arrange / Act
        @register_provider_rule("a", "b")
        def shared(provider, probe):
            return []

        # Assert
        assert rules_for("a") == (shared,)
        assert rules_for("b") == (shared,)

    def test_double_registration_rejected(self, isolated_registry):
        """Given the same rule registered twice for a tag, ValueError is raised."""

        # Arrange
        def rule(provider, probe):
            return []

        register_provider_rule("dup")(rule)

        # Act / Assert
        with pytest.raises(ValueError, match="already registered"):
            register_provider_rule("dup")(rule)

    def test_requires_a_type(self):
        """Given no type tags, ValueError is raised."""
        with pytest.raises(ValueError):
            register_provider_rule()
