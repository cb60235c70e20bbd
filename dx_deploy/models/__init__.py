"""Data models for dx_deploy."""

from dx_deploy.models.deployment import (
    ActionInputs,
    Attribution,
    CommitAttribution,
    DeploymentConfig,
    DeploymentPayload,
    ExecutionContext,
    MergeCommitAttribution,
)
from dx_deploy.models.response import (
    DeploymentResponse,
    DxErrorResponse,
    DxSuccessResponse,
)

__all__ = [
    # Input models
    "ActionInputs",
    "ExecutionContext",
    # Deployment models
    "Attribution",
    "CommitAttribution",
    "MergeCommitAttribution",
    "DeploymentConfig",
    "DeploymentPayload",
    # Response models
    "DeploymentResponse",
    "DxSuccessResponse",
    "DxErrorResponse",
]
