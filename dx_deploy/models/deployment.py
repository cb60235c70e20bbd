"""Deployment data models."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr

DX_HOST_TEMPLATE = "https://{instance}.getdx.net"


class ActionInputs(BaseModel):
    """Raw string inputs as the host hands them over."""

    dx_instance: str = ""
    bearer: str = ""
    service: str = ""

    repository: str | None = None
    commit_sha: str | None = None
    deployed_at: str | None = None
    reference_id: str | None = None
    source_url: str | None = None
    source_name: str | None = None
    metadata: str | None = None
    integration_branch: str | None = None
    success: str | None = None
    environment: str | None = None
    merge_commit_shas: str | None = None


class ExecutionContext(BaseModel):
    """Ambient context of the pipeline run, used as attribution fallback."""

    repository: str | None = None
    commit_sha: str | None = None


class CommitAttribution(BaseModel):
    """A deployment of a single commit in one repository."""

    mode: Literal["commit"] = "commit"
    repository: str = Field(..., min_length=1)
    commit_sha: str = Field(..., min_length=1)


class MergeCommitAttribution(BaseModel):
    """A deployment identified by the merge commits it contains."""

    mode: Literal["merge_commits"] = "merge_commits"
    merge_commit_shas: list[str] = Field(..., min_length=1)


Attribution = Annotated[
    CommitAttribution | MergeCommitAttribution,
    Field(discriminator="mode"),
]


class DeploymentPayload(BaseModel):
    """Request body for deployments.create."""

    model_config = ConfigDict(extra="forbid")

    service: str
    deployed_at: int

    repository: str | None = None
    commit_sha: str | None = None
    merge_commit_shas: list[str] | None = None

    reference_id: str | None = None
    source_url: str | None = None
    source_name: str | None = None
    metadata: dict[str, Any] | None = None
    integration_branch: str | None = None
    success: bool | None = None
    environment: str | None = None

    def to_wire(self) -> dict[str, Any]:
        """Body as sent to the API; absent fields are left out entirely."""
        return self.model_dump(exclude_none=True)


class DeploymentConfig(BaseModel):
    """Validated configuration for one deployment report."""

    dx_host: str
    bearer: SecretStr
    service: str = Field(..., min_length=1)
    attribution: Attribution
    deployed_at: int

    reference_id: str | None = None
    source_url: str | None = None
    source_name: str | None = None
    metadata: dict[str, Any] | None = None
    integration_branch: str | None = None
    success: bool | None = None
    environment: str | None = None

    @staticmethod
    def host_for_instance(instance: str) -> str:
        """Base URL of a DX instance."""
        return DX_HOST_TEMPLATE.format(instance=instance)

    def attribution_fields(self) -> dict[str, Any]:
        """Wire fields identifying what was deployed."""
        if isinstance(self.attribution, MergeCommitAttribution):
            return {"merge_commit_shas": list(self.attribution.merge_commit_shas)}
        return {
            "repository": self.attribution.repository,
            "commit_sha": self.attribution.commit_sha,
        }

    def to_payload(self) -> DeploymentPayload:
        """Map the config onto the API's wire shape."""
        return DeploymentPayload(
            service=self.service,
            deployed_at=self.deployed_at,
            reference_id=self.reference_id,
            source_url=self.source_url,
            source_name=self.source_name,
            metadata=self.metadata,
            integration_branch=self.integration_branch,
            success=self.success,
            environment=self.environment,
            **self.attribution_fields(),
        )
