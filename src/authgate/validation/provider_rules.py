"""Provider-specific validation rules.

Each rule takes one ProviderConfig and a probe and returns problem messages.
Rules never raise: failed file or environment lookups become messages.

- validate_authentication_config: runs for every provider; enforces the
  client authentication method some provider types mandate.
- validate_google_config: "google" group lookup and credential wiring.
- validate_entra_id_config: "entra-id" workload identity token file.
"""

from __future__ import annotations

from authgate.config import ProviderConfig
from authgate.constants import (
    AUTH_METHOD_PRIVATE_KEY_JWT,
    AZURE_FEDERATED_TOKEN_FILE_ENV,
    PROVIDER_TYPE_ENTRA_ID,
    PROVIDER_TYPE_GOOGLE,
    PROVIDER_TYPE_LOGIN_GOV,
)
from authgate.validation.probe import EnvironmentProbe
from authgate.validation.registry import register_provider_rule

__all__ = [
    "REQUIRED_AUTHENTICATION_METHODS",
    "validate_authentication_config",
    "validate_entra_id_config",
    "validate_google_config",
]

# Provider types that only work with one client authentication method.
# login.gov rejects shared client secrets.
REQUIRED_AUTHENTICATION_METHODS: dict[str, str] = {
    PROVIDER_TYPE_LOGIN_GOV: AUTH_METHOD_PRIVATE_KEY_JWT,
}


def validate_authentication_config(provider: ProviderConfig) -> list[str]:
    """Check the provider uses the authentication method its type requires.

    Applied to every provider. Types without an entry in
    REQUIRED_AUTHENTICATION_METHODS accept any method. This is the only
    place the login.gov method rule lives, so a misconfigured login.gov
    provider gets the message once, not once per check.

    Args:
        provider: Provider to check.

    Returns:
        A single message if the method is wrong for the type, else [].
    """
    required = REQUIRED_AUTHENTICATION_METHODS.get(provider.type)
    if required is None or provider.authentication_config.method == required:
        return []

    return [f"{provider.type} configuration not using {required.replace('_', ' ')}"]


@register_provider_rule(PROVIDER_TYPE_GOOGLE)
def validate_google_config(provider: ProviderConfig, probe: EnvironmentProbe) -> list[str]:
    """Validate Google group lookup settings.

    The whole google_config block is optional. Once any field is set,
    groups and admin email are required, plus exactly one credential
    strategy: a service account file or application default credentials.
    """
    google = provider.google_config
    msgs: list[str] = []

    has_groups = len(google.groups) >= 1
    has_admin_email = google.admin_email != ""
    has_sa_json = google.service_account_json != ""
    use_adc = google.use_application_default_credentials

    if not (has_groups or has_admin_email or has_sa_json or use_adc):
        return msgs

    if not has_groups:
        msgs.append("missing setting: google-group")
    if not has_admin_email:
        msgs.append("missing setting: google-admin-email")

    if not use_adc:
        if not has_sa_json:
            msgs.append(
                "missing setting: google-service-account-json or "
                "google-use-application-default-credentials"
            )
        elif not probe.path_exists(google.service_account_json):
            msgs.append(f"Google credentials file not found: {google.service_account_json}")
    elif has_sa_json:
        msgs.append(
            "invalid setting: can't use both google-service-account-json and "
            "google-use-application-default-credentials"
        )

    return msgs


@register_provider_rule(PROVIDER_TYPE_ENTRA_ID)
def validate_entra_id_config(provider: ProviderConfig, probe: EnvironmentProbe) -> list[str]:
    """Validate Entra ID federated token (workload identity) settings.

    The token file path comes from AZURE_FEDERATED_TOKEN_FILE. Only
    readability is checked; the token itself is not inspected.
    """
    if not provider.microsoft_entra_id_config.federated_token_auth:
        return []

    token_path = probe.getenv(AZURE_FEDERATED_TOKEN_FILE_ENV)
    if token_path == "":
        return [
            "entra federated token authentication is enabled, but "
            f"{AZURE_FEDERATED_TOKEN_FILE_ENV} variable is not set, "
            "check your workload identity configuration."
        ]

    if not probe.can_read(token_path):
        return ["could not read entra federated token file"]

    return []
