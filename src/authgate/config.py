"""Gateway configuration models for authgate.

Defines the identity provider records that preflight validation inspects,
plus logging settings. Config is stored as JSON at the OS-appropriate
location (via platformdirs), or passed explicitly with --config.

Every provider field has an empty default. A half-filled provider loads
successfully so that validation can report *all* of its problems at once,
instead of pydantic stopping at the first missing key.

Example usage:
    # Load from config file
    config = GatewayConfig.load_from_files(config_path)

    # Save new configuration
    config.save_to_file(config_path)
"""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from authgate.constants import DEFAULT_AUTH_METHOD
from authgate.utils.file_helpers import load_validated_json, require_file_exists


# =============================================================================
# Provider Configuration
# =============================================================================


class AuthenticationConfig(BaseModel):
    """How the gateway authenticates itself to the provider's token endpoint.

    Attributes:
        method: Client authentication method, e.g. "client_secret" or
            "private_key_jwt". Unrecognised values load fine; validation
            decides whether they are acceptable for the provider type.
    """

    method: str = DEFAULT_AUTH_METHOD

    model_config = ConfigDict(frozen=True)


class GoogleConfig(BaseModel):
    """Google-specific settings for group membership lookups.

    The block is optional as a whole. Once any field is set, the others
    (groups, admin email, and one credential strategy) become required.

    Attributes:
        groups: Google groups to restrict access to.
        admin_email: Workspace admin to impersonate for directory lookups.
        service_account_json: Path to a service account credentials file.
        use_application_default_credentials: Use ambient platform credentials
            instead of a service account file.
    """

    groups: list[str] = Field(default_factory=list)
    admin_email: str = ""
    service_account_json: str = ""
    use_application_default_credentials: bool = False

    model_config = ConfigDict(frozen=True)


class MicrosoftEntraIDConfig(BaseModel):
    """Microsoft Entra ID specific settings.

    Attributes:
        federated_token_auth: Authenticate with a workload identity token
            file instead of a client secret.
        allowed_tenants: Tenant IDs allowed to log in (empty allows all).
    """

    federated_token_auth: bool = False
    allowed_tenants: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ProviderConfig(BaseModel):
    """One identity provider the gateway can authenticate against.

    Attributes:
        id: Unique provider identifier.
        type: Provider type tag ("oidc", "google", "entra-id", "login.gov", ...).
        client_id: OAuth client ID registered with the provider.
        client_secret: OAuth client secret (unused with private_key_jwt).
        authentication_config: Client authentication method settings.
        google_config: Settings read when type is "google".
        microsoft_entra_id_config: Settings read when type is "entra-id".
    """

    id: str = ""
    type: str = ""
    client_id: str = ""
    client_secret: str = ""
    authentication_config: AuthenticationConfig = Field(default_factory=AuthenticationConfig)
    google_config: GoogleConfig = Field(default_factory=GoogleConfig)
    microsoft_entra_id_config: MicrosoftEntraIDConfig = Field(default_factory=MicrosoftEntraIDConfig)

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Logging Configuration
# =============================================================================


class LoggingConfig(BaseModel):
    """Logging configuration settings.

    Validation events always go to stderr. When log_dir is set they are
    also appended to:
        <log_dir>/
        └── authgate_logs/
            └── system.jsonl

    Attributes:
        log_level: Minimum level for emitted events.
        log_dir: Base directory for the JSONL log (optional).
    """

    log_level: Literal["DEBUG", "INFO", "WARNING"] = "INFO"
    log_dir: str | None = None

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Top-level Configuration
# =============================================================================


class GatewayConfig(BaseModel):
    """Main configuration for the gateway's identity providers.

    Attributes:
        providers: Configured identity providers, in display order.
        skip_provider_button: Skip the provider chooser page and go straight
            to the (single) provider's login.
        logging: Logging configuration.
    """

    providers: list[ProviderConfig] = Field(default_factory=list)
    skip_provider_button: bool = False
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(frozen=True)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to JSON file.

        Creates parent directories if they don't exist.

        Args:
            config_path: Path where the config should be saved.
        """
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(), f, indent=2)

        config_path.chmod(0o600)

    @classmethod
    def load_from_files(cls, config_path: Path) -> "GatewayConfig":
        """Load configuration from JSON file.

        Args:
            config_path: Path to the config file.

        Returns:
            GatewayConfig instance with loaded configuration.

        Raises:
            FileNotFoundError: If config file doesn't exist.
            ValueError: If config file is invalid JSON or has wrong field types.
        """
        require_file_exists(config_path, file_type="configuration")
        return load_validated_json(
            config_path,
            cls,
            file_type="config",
            recovery_hint="Fix the file or pass another one with --config.",
            encoding="utf-8",
        )
