"""DX API response envelopes.

The API signals success through the boolean ``ok`` field of the body, which
takes precedence over the HTTP status code.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

UNKNOWN_DEPLOYMENT_ID = "unknown"


class DxSuccessResponse(BaseModel):
    """Successful response; any other keys the server sends are kept."""

    model_config = ConfigDict(extra="allow")

    ok: Literal[True] = True

    @property
    def deployment_id(self) -> str:
        value = (self.model_extra or {}).get("id")
        if value is None or value == "":
            return UNKNOWN_DEPLOYMENT_ID
        return str(value)

    def body(self) -> dict[str, Any]:
        return self.model_dump()


class DxErrorResponse(BaseModel):
    """Error envelope carrying a DX error code."""

    model_config = ConfigDict(extra="allow")

    ok: Literal[False] = False
    error: str = "unknown_error"


DeploymentResponse = DxSuccessResponse | DxErrorResponse
