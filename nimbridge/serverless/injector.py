"""Inject the namespace endpoint into static sites."""

import logging
from collections.abc import Sequence

from ..appspec.models import (
    AppStaticSiteSpec,
    AppVariableDefinition,
    VariableScope,
    VariableType,
)
from ..core.exceptions import ConflictingVariableError, ProcessInvocationError
from ..nim.runner import NimRunner

logger = logging.getLogger(__name__)

SERVERLESS_URL_KEY = "SERVERLESS_URL"
ENDPOINT_ARGS = ["auth", "current", "--web"]


class EndpointInjector:
    """Make the serverless endpoint available to static site builds."""

    def __init__(self, runner: NimRunner | None = None) -> None:
        self.runner = runner or NimRunner()

    def fetch_endpoint(self) -> str:
        """Get the public web endpoint of the current namespace.

        nim prints the URL as plain text; surrounding whitespace is dropped.

        Raises:
            ProcessInvocationError: If nim fails or prints nothing.
        """
        output = self.runner.run(ENDPOINT_ARGS)
        endpoint = output.strip()
        if not endpoint:
            raise ProcessInvocationError(ENDPOINT_ARGS, output=output, returncode=0)
        return endpoint

    def inject(self, static_sites: Sequence[AppStaticSiteSpec]) -> str:
        """Add a build-time ``SERVERLESS_URL`` variable to every static site.

        All sites are checked before any is changed, so a conflict leaves
        every site as it was.

        Args:
            static_sites: Sites to patch in place

        Returns:
            The endpoint that was injected

        Raises:
            ConflictingVariableError: A site already defines ``SERVERLESS_URL``.
            ProcessInvocationError: If the endpoint cannot be fetched.
        """
        endpoint = self.fetch_endpoint()

        for site in static_sites:
            if site.get_env(SERVERLESS_URL_KEY) is not None:
                raise ConflictingVariableError(site.name, SERVERLESS_URL_KEY)

        for site in static_sites:
            site.envs.append(
                AppVariableDefinition(
                    key=SERVERLESS_URL_KEY,
                    value=endpoint,
                    scope=VariableScope.BUILD_TIME,
                    type=VariableType.GENERAL,
                )
            )
            logger.info("Injected %s into static site %s", SERVERLESS_URL_KEY, site.name)

        return endpoint
