"""Deploy serverless components with a single nim invocation."""

import logging
from collections.abc import Sequence

from ..appspec.models import AppServerlessSpec
from ..core.exceptions import MissingRequiredFieldError
from ..nim.runner import NimRunner
from .project import convert_to_nim_project

logger = logging.getLogger(__name__)

DEPLOY_ARGS = ["project", "deploy", "--exclude", "web"]


class ServerlessDeployer:
    """Deploy the serverless components of an app spec.

    Every component is translated before nim runs, so an invalid component
    means nothing is deployed. A failure reported by nim itself leaves
    whatever nim already deployed in place; nim project deploys are safe to
    repeat.
    """

    def __init__(self, runner: NimRunner | None = None) -> None:
        self.runner = runner or NimRunner()

    def build_projects(self, components: Sequence[AppServerlessSpec]) -> list[str]:
        """Translate components to project references, in input order."""
        return [convert_to_nim_project(component) for component in components]

    def deploy(self, components: Sequence[AppServerlessSpec]) -> str:
        """Deploy all components.

        Args:
            components: Serverless components, in deployment order

        Returns:
            Combined nim output

        Raises:
            MissingRequiredFieldError: If ``components`` is empty; nim is not
                run with an empty project list.
            ServerlessError: On the first translation or invocation failure.
        """
        return self.deploy_projects(self.build_projects(components))

    def deploy_projects(self, projects: Sequence[str]) -> str:
        """Run one `nim project deploy` for already translated projects.

        Unlike a bare `nim project deploy`, an empty project list is an
        error here instead of a nim run with no projects.

        Raises:
            MissingRequiredFieldError: If ``projects`` is empty.
            ProcessInvocationError: If nim fails.
        """
        if not projects:
            raise MissingRequiredFieldError(
                "serverless", "at least one serverless component is required"
            )

        logger.info("Deploying %d serverless project(s): %s", len(projects), list(projects))
        return self.runner.run([*DEPLOY_ARGS, *projects])
