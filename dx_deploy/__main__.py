"""Entry point of the GitHub Action: ``python -m dx_deploy``."""

import asyncio
import sys

from dx_deploy import __version__
from dx_deploy.core.host import GitHubActionsHost
from dx_deploy.core.orchestrator import DeploymentOrchestrator
from dx_deploy.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> int:
    configure_logging()
    logger.info("action.starting", version=__version__)

    orchestrator = DeploymentOrchestrator(host=GitHubActionsHost())
    succeeded = asyncio.run(orchestrator.run())
    return 0 if succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
