"""Services for dx_deploy."""

from dx_deploy.services.api_client import DxApiClient, error_message, parse_response
from dx_deploy.services.config_builder import build_config

__all__ = [
    "DxApiClient",
    "build_config",
    "error_message",
    "parse_response",
]
