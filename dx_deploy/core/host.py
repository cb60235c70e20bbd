"""Host platform boundary.

Reading inputs, writing outputs and reporting failure all go through
:class:`HostPlatform`, so the rest of the package never touches the runner
directly.
"""

import os
import sys
import uuid
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TextIO

from dx_deploy.config import Settings, get_settings
from dx_deploy.models.deployment import ExecutionContext
from dx_deploy.utils.logging import get_logger

logger = get_logger("host")


class HostPlatform(ABC):
    """Capabilities the action needs from the pipeline it runs in."""

    @abstractmethod
    def get_input(self, name: str) -> str:
        """Raw value of a named input, or an empty string."""
        pass

    @abstractmethod
    def get_context(self) -> ExecutionContext:
        """Ambient repository/commit of the pipeline run."""
        pass

    @abstractmethod
    def set_output(self, name: str, value: str) -> None:
        pass

    @abstractmethod
    def set_failed(self, message: str) -> None:
        """Report a terminal failure."""
        pass


def escape_command_data(value: str) -> str:
    """Escape a message for a workflow command."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GitHubActionsHost(HostPlatform):
    """Host backed by the GitHub Actions runner environment."""

    def __init__(
        self,
        settings: Settings | None = None,
        environ: Mapping[str, str] | None = None,
        stdout: TextIO | None = None,
    ):
        self.settings = settings or get_settings()
        self.environ = os.environ if environ is None else environ
        self.stdout = stdout or sys.stdout

    def get_input(self, name: str) -> str:
        key = f"INPUT_{name.replace(' ', '_').upper()}"
        return self.environ.get(key, "")

    def get_context(self) -> ExecutionContext:
        return ExecutionContext(
            repository=self.settings.github_repository,
            commit_sha=self.settings.github_sha,
        )

    def set_output(self, name: str, value: str) -> None:
        output_file = self.settings.github_output
        if not output_file:
            logger.warning("host.output_file_missing", output=name)
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with open(output_file, "a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

    def set_failed(self, message: str) -> None:
        self.stdout.write(f"::error::{escape_command_data(message)}\n")
        self.stdout.flush()


class InMemoryHost(HostPlatform):
    """Host that keeps everything in memory, for tests and dry runs."""

    def __init__(
        self,
        inputs: Mapping[str, str] | None = None,
        context: ExecutionContext | None = None,
    ):
        self.inputs = dict(inputs or {})
        self.context = context or ExecutionContext()
        self.outputs: dict[str, str] = {}
        self.failure: str | None = None

    def get_input(self, name: str) -> str:
        return self.inputs.get(name, "")

    def get_context(self) -> ExecutionContext:
        return self.context

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value

    def set_failed(self, message: str) -> None:
        self.failure = message

    @property
    def failed(self) -> bool:
        return self.failure is not None
