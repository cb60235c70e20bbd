"""Deployment Orchestrator.

Runs the action: inputs → config → DX API → outputs.
"""

import json
import time
from typing import Callable

from dx_deploy.core.exceptions import DxDeploymentError
from dx_deploy.core.host import HostPlatform
from dx_deploy.models.deployment import ActionInputs, DeploymentConfig
from dx_deploy.models.response import DxSuccessResponse
from dx_deploy.services.api_client import DxApiClient
from dx_deploy.services.config_builder import Clock, build_config
from dx_deploy.utils.logging import get_logger

FAILURE_PREFIX = "Action failed: "

ClientFactory = Callable[[str, str], DxApiClient]


class DeploymentOrchestrator:
    """Reports one deployment to DX and publishes the result to the host."""

    def __init__(
        self,
        host: HostPlatform,
        client_factory: ClientFactory = DxApiClient,
        clock: Clock = time.time,
    ):
        self.host = host
        self.client_factory = client_factory
        self.clock = clock
        self.logger = get_logger("orchestrator")

    def read_inputs(self) -> ActionInputs:
        """Collect every declared input from the host."""
        return ActionInputs.model_validate(
            {name: self.host.get_input(name) for name in ActionInputs.model_fields}
        )

    async def run(self) -> bool:
        """Run the action.

        Returns:
            True if the deployment was created, False if the run failed
        """
        try:
            inputs = self.read_inputs()
            config = build_config(inputs, self.host.get_context(), clock=self.clock)
            response = await self._create_deployment(config)
        except DxDeploymentError as e:
            self.logger.error(
                "action.failed",
                error_type=type(e).__name__,
                error=e.message,
                details=e.details,
            )
            self.host.set_failed(f"{FAILURE_PREFIX}{e.message}")
            return False
        except Exception as e:
            self.logger.error("action.unexpected_error", error=str(e), exc_info=True)
            self.host.set_failed(f"{FAILURE_PREFIX}{e}")
            return False

        self.publish_outputs(response)
        return True

    async def _create_deployment(self, config: DeploymentConfig) -> DxSuccessResponse:
        self.logger.info(
            "deployment.creating",
            service=config.service,
            deployed_at=config.deployed_at,
            environment=config.environment,
            **config.attribution_fields(),
        )

        client = self.client_factory(config.dx_host, config.bearer.get_secret_value())
        response = await client.create_deployment(config.to_payload())

        self.logger.info("deployment.created", deployment_id=response.deployment_id)
        return response

    def publish_outputs(self, response: DxSuccessResponse) -> None:
        """Expose the response and deployment id as step outputs."""
        body = json.dumps(response.body(), separators=(",", ":"))
        deployment_id = response.deployment_id

        self.host.set_output("response", body)
        self.host.set_output("deployment_id", deployment_id)
