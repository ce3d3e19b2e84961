"""Pydantic models for the parts of an app spec that nimbridge reads."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator


# ============================================================================
# Sources
# ============================================================================

class GitHubSourceSpec(BaseModel):
    """A GitHub repository holding component source."""

    model_config = ConfigDict(extra="ignore")

    repo: str = Field("", description="Repository in 'owner/name' form")
    branch: str = Field("", description="Branch to deploy (default branch when empty)")
    deploy_on_push: bool = Field(
        False, description="Redeploy automatically on push to the branch"
    )


class LocalSourceSpec(BaseModel):
    """A directory on the local filesystem holding component source."""

    model_config = ConfigDict(extra="ignore")

    path: str = Field("", description="Filesystem path")


# ============================================================================
# Components
# ============================================================================

class AppServerlessSpec(BaseModel):
    """A serverless component deployed as a nim project.

    Exactly one of ``github`` and ``local`` is expected; that is checked when
    the component is translated, not when it is loaded.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Component name")
    github: Optional[GitHubSourceSpec] = Field(None, description="GitHub source")
    local: Optional[LocalSourceSpec] = Field(None, description="Local source")
    source_dir: str = Field("", description="Sub-path within the source")


class VariableScope(str, Enum):
    """When an environment variable is available."""

    UNSET = "UNSET"
    RUN_TIME = "RUN_TIME"
    BUILD_TIME = "BUILD_TIME"
    RUN_AND_BUILD_TIME = "RUN_AND_BUILD_TIME"


class VariableType(str, Enum):
    """How an environment variable value is stored."""

    GENERAL = "GENERAL"
    SECRET = "SECRET"


class AppVariableDefinition(BaseModel):
    """An environment variable of a component."""

    model_config = ConfigDict(extra="ignore")

    key: str = Field(..., description="Variable name")
    value: str = Field("", description="Variable value")
    scope: VariableScope = Field(
        VariableScope.RUN_AND_BUILD_TIME, description="Availability scope"
    )
    type: VariableType = Field(VariableType.GENERAL, description="Variable type")


class AppStaticSiteSpec(BaseModel):
    """A static site component."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Component name")
    source_dir: str = Field("", description="Sub-path within the source")
    build_command: Optional[str] = Field(None, description="Build command")
    output_dir: Optional[str] = Field(None, description="Build output directory")
    envs: List[AppVariableDefinition] = Field(
        default_factory=list, description="Environment variables, in order"
    )

    def get_env(self, key: str) -> Optional[AppVariableDefinition]:
        """Get the first environment variable with the given key."""
        for env in self.envs:
            if env.key == key:
                return env
        return None


# ============================================================================
# Complete App Spec
# ============================================================================

class AppSpec(BaseModel):
    """An application spec.

    Only the collections nimbridge works with are modelled. The document an
    AppSpec was loaded from is kept so that writing it back preserves
    everything that is not modelled.
    """

    model_config = ConfigDict(extra="ignore")

    _document: Optional[Dict[str, Any]] = PrivateAttr(default=None)

    name: str = Field(..., description="Application name")
    region: Optional[str] = Field(None, description="Region slug")
    serverless: List[AppServerlessSpec] = Field(
        default_factory=list, description="Serverless components"
    )
    static_sites: List[AppStaticSiteSpec] = Field(
        default_factory=list, description="Static site components"
    )

    @field_validator("serverless", "static_sites")
    @classmethod
    def validate_unique_names(cls, v: list) -> list:
        """Ensure component names are unique within a collection."""
        names = [component.name for component in v]
        if len(names) != len(set(names)):
            raise ValueError("Component names must be unique")
        return v
