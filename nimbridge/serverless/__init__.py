"""Serverless deployment through nim."""

from .app import DeploymentResult, deploy_app
from .deployer import DEPLOY_ARGS, ServerlessDeployer
from .injector import ENDPOINT_ARGS, SERVERLESS_URL_KEY, EndpointInjector
from .project import convert_to_nim_project, github_project, local_project

__all__ = [
    "DEPLOY_ARGS",
    "DeploymentResult",
    "ENDPOINT_ARGS",
    "EndpointInjector",
    "SERVERLESS_URL_KEY",
    "ServerlessDeployer",
    "convert_to_nim_project",
    "deploy_app",
    "github_project",
    "local_project",
]
