"""Exceptions raised while creating a DX deployment."""

from typing import Any


class DxDeploymentError(Exception):
    """Base exception for dx_deploy."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(DxDeploymentError):
    """Action inputs are missing, malformed or conflicting."""

    def __init__(self, message: str, field: str | None = None, value: str | None = None):
        details: dict[str, Any] = {}
        if field is not None:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field


class AttributionConflictError(ValidationError):
    """Both commit and merge-commit attribution were supplied."""

    def __init__(self):
        super().__init__(
            "Provide either repository and commit_sha, or merge_commit_shas, not both"
        )


class AttributionMissingError(ValidationError):
    """Neither commit nor merge-commit attribution could be resolved."""

    def __init__(self):
        super().__init__(
            "Either repository and commit_sha (or the GITHUB_REPOSITORY and "
            "GITHUB_SHA environment variables), or merge_commit_shas must be provided"
        )


class TransportError(DxDeploymentError):
    """The request never produced an HTTP response."""

    def __init__(self, cause: Exception):
        super().__init__(
            f"Request failed: {cause}",
            {"cause": type(cause).__name__},
        )
        self.cause = cause


class ResponseParseError(DxDeploymentError):
    """The response body is not a JSON object."""

    def __init__(self, status_code: int, body: str, reason: str):
        super().__init__(
            f"Failed to parse API response (status {status_code}): {reason}. Response: {body}",
            {"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body


class DxApiError(DxDeploymentError):
    """The DX API answered with an error envelope."""

    def __init__(self, error_code: str, status_code: int, message: str | None = None):
        super().__init__(
            message or f"DX API error: {error_code}",
            {"error_code": error_code, "status_code": status_code},
        )
        self.error_code = error_code
        self.status_code = status_code


class GenericRequestError(DxDeploymentError):
    """Non-2xx response without a DX error envelope."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"API request failed with status {status_code}: {body}",
            {"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body
