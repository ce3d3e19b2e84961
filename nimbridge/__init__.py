"""Deploy app spec serverless components through nim."""

from .appspec import AppSpec, AppSpecLoader, AppSpecLoadError
from .config import settings
from .core import (
    ConflictingSourceSpecError,
    ConflictingVariableError,
    HomeDirectoryUnavailableError,
    MissingRequiredFieldError,
    MissingSourceSpecError,
    ProcessInvocationError,
    ServerlessError,
    UnsupportedFeatureError,
)
from .nim import NimRunner, get_nim_path
from .serverless import (
    EndpointInjector,
    ServerlessDeployer,
    convert_to_nim_project,
    deploy_app,
)

__version__ = "0.1.0"

__all__ = [
    # App spec
    "AppSpec",
    "AppSpecLoadError",
    "AppSpecLoader",
    # Configuration
    "settings",
    # nim
    "NimRunner",
    "get_nim_path",
    # Serverless
    "EndpointInjector",
    "ServerlessDeployer",
    "convert_to_nim_project",
    "deploy_app",
    # Exceptions
    "ConflictingSourceSpecError",
    "ConflictingVariableError",
    "HomeDirectoryUnavailableError",
    "MissingRequiredFieldError",
    "MissingSourceSpecError",
    "ProcessInvocationError",
    "ServerlessError",
    "UnsupportedFeatureError",
]
