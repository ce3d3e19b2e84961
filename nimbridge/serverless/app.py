"""Deploy the serverless part of an app spec and patch its static sites."""

import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from ..appspec.models import AppSpec
from ..nim.runner import NimRunner
from .deployer import ServerlessDeployer
from .injector import EndpointInjector

logger = logging.getLogger(__name__)


class DeploymentResult(BaseModel):
    """Outcome of :func:`deploy_app`."""

    projects: List[str] = Field(default_factory=list, description="Deployed project references")
    output: str = Field("", description="Combined nim deploy output")
    endpoint: Optional[str] = Field(None, description="Injected namespace endpoint")
    patched_sites: List[str] = Field(
        default_factory=list, description="Static sites that received the endpoint"
    )


def deploy_app(app_spec: AppSpec, runner: NimRunner | None = None) -> DeploymentResult:
    """Deploy serverless components, then inject the endpoint into static sites.

    Nothing runs when the app spec has no serverless components. The static
    sites of ``app_spec`` are modified in place.
    """
    if not app_spec.serverless:
        logger.info("App %s has no serverless components", app_spec.name)
        return DeploymentResult()

    runner = runner or NimRunner()
    deployer = ServerlessDeployer(runner)

    projects = deployer.build_projects(app_spec.serverless)
    output = deployer.deploy_projects(projects)

    result = DeploymentResult(projects=projects, output=output)
    if app_spec.static_sites:
        result.endpoint = EndpointInjector(runner).inject(app_spec.static_sites)
        result.patched_sites = [site.name for site in app_spec.static_sites]

    return result
