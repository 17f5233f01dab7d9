"""authgate: identity provider configuration preflight for authentication gateways."""

__version__ = "0.1.0"
