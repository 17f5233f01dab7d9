"""Application-wide constants for authgate.

Constants that define validation behavior.
For user-configurable settings per deployment, see config.py.
"""

import os

from platformdirs import user_config_dir

# ============================================================================
# Configuration Location
# ============================================================================

# OS-specific config directory.
# - macOS: ~/Library/Application Support/authgate/
# - Linux: ~/.config/authgate/
# - Windows: %APPDATA%\authgate\
CONFIG_DIR: str = os.path.realpath(user_config_dir("authgate"))

CONFIG_FILENAME: str = "authgate_config.json"

DEFAULT_CONFIG_PATH: str = os.path.join(CONFIG_DIR, CONFIG_FILENAME)

# Subdirectory created under the user-specified log_dir
LOG_SUBDIR: str = "authgate_logs"
SYSTEM_LOG_FILENAME: str = "system.jsonl"

# ============================================================================
# Provider Types
# ============================================================================

# Type tags are an open set: unknown tags (e.g. "oidc") load fine and get no extra rules.
PROVIDER_TYPE_GOOGLE: str = "google"
PROVIDER_TYPE_ENTRA_ID: str = "entra-id"
PROVIDER_TYPE_LOGIN_GOV: str = "login.gov"

# ============================================================================
# Client Authentication Methods
# ============================================================================

AUTH_METHOD_CLIENT_SECRET: str = "client_secret"
AUTH_METHOD_PRIVATE_KEY_JWT: str = "private_key_jwt"

DEFAULT_AUTH_METHOD: str = AUTH_METHOD_CLIENT_SECRET

# ============================================================================
# Workload Identity
# ============================================================================

# Injected by the Azure workload identity webhook into federated pods
AZURE_FEDERATED_TOKEN_FILE_ENV: str = "AZURE_FEDERATED_TOKEN_FILE"
