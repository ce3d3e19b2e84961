"""App spec models and loading."""

from .loader import AppSpecLoader, AppSpecLoadError
from .models import (
    AppServerlessSpec,
    AppSpec,
    AppStaticSiteSpec,
    AppVariableDefinition,
    GitHubSourceSpec,
    LocalSourceSpec,
    VariableScope,
    VariableType,
)

__all__ = [
    "AppServerlessSpec",
    "AppSpec",
    "AppSpecLoadError",
    "AppSpecLoader",
    "AppStaticSiteSpec",
    "AppVariableDefinition",
    "GitHubSourceSpec",
    "LocalSourceSpec",
    "VariableScope",
    "VariableType",
]
