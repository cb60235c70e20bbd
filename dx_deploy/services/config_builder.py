"""Config Builder.

Turns the raw string inputs of the action into a validated
:class:`DeploymentConfig`.
"""

import json
import time
from typing import Any, Callable

from dx_deploy.core.exceptions import (
    AttributionConflictError,
    AttributionMissingError,
    ValidationError,
)
from dx_deploy.models.deployment import (
    ActionInputs,
    CommitAttribution,
    DeploymentConfig,
    ExecutionContext,
    MergeCommitAttribution,
)

Clock = Callable[[], float]

REQUIRED_INPUTS = ("dx_instance", "bearer", "service")


def empty_to_none(value: str | None) -> str | None:
    """Treat empty and whitespace-only strings as absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_json(raw: str, field: str, expected: str) -> Any:
    """Parse strict JSON; NaN and Infinity are rejected."""

    def reject_constant(constant: str) -> Any:
        raise ValidationError(
            f"{field} must be valid JSON: {constant} is not a JSON value",
            field=field,
            value=raw,
        )

    try:
        return json.loads(raw, parse_constant=reject_constant)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"{field} must be a valid JSON {expected}: {e.msg}", field=field, value=raw
        ) from e


def parse_metadata(raw: str | None) -> dict[str, Any] | None:
    """Parse the metadata input, which must be a JSON object."""
    raw = empty_to_none(raw)
    if raw is None:
        return None

    metadata = load_json(raw, "metadata", "object")
    if not isinstance(metadata, dict):
        raise ValidationError(
            f"metadata must be a JSON object, got {type(metadata).__name__}",
            field="metadata",
            value=raw,
        )
    return metadata


def parse_merge_commit_shas(raw: str | None) -> list[str] | None:
    """Parse the merge_commit_shas input, a JSON array of strings."""
    raw = empty_to_none(raw)
    if raw is None:
        return None

    shas = load_json(raw, "merge_commit_shas", "array")
    if not isinstance(shas, list):
        raise ValidationError(
            "merge_commit_shas must be a JSON array of strings",
            field="merge_commit_shas",
            value=raw,
        )
    if not all(isinstance(sha, str) for sha in shas):
        raise ValidationError(
            "merge_commit_shas must contain only strings",
            field="merge_commit_shas",
            value=raw,
        )
    return shas or None


def parse_success(raw: str | None) -> bool | None:
    """Strictly parse "true"/"false"; anything else is rejected."""
    raw = empty_to_none(raw)
    if raw is None:
        return None

    normalized = raw.lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise ValidationError(
        f"success must be 'true' or 'false', got '{raw}'", field="success", value=raw
    )


def parse_deployed_at(raw: str | None, clock: Clock) -> int:
    """Unix timestamp from the input, or the current time."""
    raw = empty_to_none(raw)
    if raw is None:
        return int(clock())

    # Plain ASCII digits only; int() would also take "1_000", "+1" and "١٢"
    if not (raw.isascii() and raw.removeprefix("-").isdigit()):
        raise ValidationError(
            f"deployed_at must be a Unix timestamp in seconds, got '{raw}'",
            field="deployed_at",
            value=raw,
        )
    return int(raw)


def validate_required_inputs(inputs: ActionInputs) -> None:
    """Raise if any required input is missing."""
    for name in REQUIRED_INPUTS:
        if empty_to_none(getattr(inputs, name)) is None:
            raise ValidationError(f"{name} input is required", field=name)


def resolve_attribution(
    inputs: ActionInputs,
    context: ExecutionContext,
) -> CommitAttribution | MergeCommitAttribution:
    """Pick the attribution mode.

    A non-empty merge_commit_shas list selects merge-commit mode, and any
    explicit repository or commit_sha input next to it is a conflict. The
    execution context only backs the single-commit fields when no merge list
    was given, since runners export it on every job.
    """
    merge_commit_shas = parse_merge_commit_shas(inputs.merge_commit_shas)
    repository = empty_to_none(inputs.repository)
    commit_sha = empty_to_none(inputs.commit_sha)

    if merge_commit_shas:
        if repository or commit_sha:
            raise AttributionConflictError()
        return MergeCommitAttribution(merge_commit_shas=merge_commit_shas)

    repository = repository or empty_to_none(context.repository)
    commit_sha = commit_sha or empty_to_none(context.commit_sha)
    if not repository or not commit_sha:
        raise AttributionMissingError()
    return CommitAttribution(repository=repository, commit_sha=commit_sha)


def build_config(
    inputs: ActionInputs,
    context: ExecutionContext | None = None,
    clock: Clock = time.time,
) -> DeploymentConfig:
    """Validate inputs and create the deployment configuration.

    Args:
        inputs: Raw inputs of the action
        context: Ambient pipeline context for repository/commit fallback
        clock: Source of the current time, used when deployed_at is absent

    Returns:
        The validated configuration

    Raises:
        ValidationError: If any input is missing, malformed or conflicting
    """
    validate_required_inputs(inputs)
    context = context or ExecutionContext()

    metadata = parse_metadata(inputs.metadata)
    success = parse_success(inputs.success)
    attribution = resolve_attribution(inputs, context)
    deployed_at = parse_deployed_at(inputs.deployed_at, clock)

    return DeploymentConfig(
        dx_host=DeploymentConfig.host_for_instance(inputs.dx_instance.strip()),
        bearer=inputs.bearer.strip(),
        service=inputs.service.strip(),
        attribution=attribution,
        deployed_at=deployed_at,
        reference_id=empty_to_none(inputs.reference_id),
        source_url=empty_to_none(inputs.source_url),
        source_name=empty_to_none(inputs.source_name),
        metadata=metadata,
        integration_branch=empty_to_none(inputs.integration_branch),
        success=success,
        environment=empty_to_none(inputs.environment),
    )
