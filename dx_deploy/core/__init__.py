"""Core functionality for dx_deploy."""

from dx_deploy.core.exceptions import (
    AttributionConflictError,
    AttributionMissingError,
    DxApiError,
    DxDeploymentError,
    GenericRequestError,
    ResponseParseError,
    TransportError,
    ValidationError,
)
from dx_deploy.core.host import GitHubActionsHost, HostPlatform, InMemoryHost

__all__ = [
    "DxDeploymentError",
    "ValidationError",
    "AttributionConflictError",
    "AttributionMissingError",
    "TransportError",
    "ResponseParseError",
    "DxApiError",
    "GenericRequestError",
    "HostPlatform",
    "GitHubActionsHost",
    "InMemoryHost",
]
