"""DX API client.

Creates deployments through ``POST /api/deployments.create``. The body's
``ok`` field is authoritative; the HTTP status is only consulted when the
body carries no envelope.
"""

import json
import time

import httpx

from dx_deploy import __version__
from dx_deploy.core.exceptions import (
    DxApiError,
    GenericRequestError,
    ResponseParseError,
    TransportError,
    ValidationError,
)
from dx_deploy.models.deployment import DeploymentPayload
from dx_deploy.models.response import DeploymentResponse, DxErrorResponse, DxSuccessResponse
from dx_deploy.utils.logging import get_logger

logger = get_logger("api_client")

USER_AGENT = f"gha-dx-create-deployment/{__version__}"
CREATE_DEPLOYMENT_PATH = "/api/deployments.create"

# Known DX error codes; other codes are possible
ERROR_MESSAGES: dict[str, str] = {
    "not_authed": "No authentication token provided. Check that the bearer input is set.",
    "invalid_auth": "The bearer token is invalid or has expired.",
    "account_inactive": "The account that owns the bearer token has been deactivated.",
    "invalid_json": "The request body could not be parsed as JSON.",
    "required_params_missing": "One or more required parameters are missing from the request.",
    "repo_not_found": "The repository was not found in DX. Check that it is connected to your DX account.",
}


def error_message(error_code: str) -> str:
    """Human-readable explanation for a DX error code."""
    if error_code in ERROR_MESSAGES:
        return f"DX API error: {error_code}. {ERROR_MESSAGES[error_code]}"
    return (
        f"Unexpected DX API error: {error_code}. This may indicate service issues "
        "or other unexpected factors affecting processing."
    )


def parse_response(status_code: int, text: str) -> DeploymentResponse:
    """Discriminate a response body into a success or error envelope.

    Raises:
        ResponseParseError: If the body is not a JSON object
        GenericRequestError: If there is no envelope and the status is not 2xx
    """
    try:
        body = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseParseError(status_code, text, e.msg) from e

    if not isinstance(body, dict):
        raise ResponseParseError(status_code, text, "expected a JSON object")

    ok = body.get("ok")
    if ok is True:
        return DxSuccessResponse.model_validate(body)
    if ok is False:
        error = body.get("error")
        return DxErrorResponse.model_validate(
            {**body, "error": str(error) if error else "unknown_error"}
        )

    # No envelope, fall back to the status code
    if 200 <= status_code < 300:
        return DxSuccessResponse.model_validate({**body, "ok": True})
    raise GenericRequestError(status_code, text)


class DxApiClient:
    """Client for the DX deployments API."""

    def __init__(
        self,
        base_url: str,
        bearer_token: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._bearer_token = bearer_token
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._bearer_token}",
            "User-Agent": USER_AGENT,
        }

    async def create_deployment(self, payload: DeploymentPayload) -> DxSuccessResponse:
        """Create a deployment in DX.

        Args:
            payload: The deployment to report

        Returns:
            The success envelope returned by DX

        Raises:
            ValidationError: If the payload cannot be encoded as strict JSON
            TransportError: If no response was received
            ResponseParseError: If the body is not a JSON object
            DxApiError: If DX answered with an error envelope
            GenericRequestError: If a non-2xx status came without an envelope
        """
        url = f"{self.base_url}{CREATE_DEPLOYMENT_PATH}"
        try:
            content = json.dumps(payload.to_wire(), allow_nan=False).encode("utf-8")
        except ValueError as e:
            raise ValidationError(f"Deployment payload is not valid JSON: {e}") from e

        start_time = time.perf_counter()
        logger.debug("api_client.request.started", url=url, size=len(content))

        # The host enforces the step timeout, so the client sets none
        async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
            try:
                response = await client.post(url, content=content, headers=self.headers)
            except httpx.RequestError as e:
                logger.error("api_client.request.failed", url=url, error=str(e))
                raise TransportError(e) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "api_client.request.completed",
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )

        result = parse_response(response.status_code, response.text)
        if isinstance(result, DxErrorResponse):
            raise DxApiError(
                result.error, response.status_code, error_message(result.error)
            )
        return result
