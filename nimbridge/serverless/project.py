"""Translate serverless components into nim project locators.

``nim project deploy`` accepts either a local directory or a
``github:owner/repo[/path][#branch]`` reference for each project.
"""

from ..appspec.models import AppServerlessSpec, GitHubSourceSpec, LocalSourceSpec
from ..core.exceptions import (
    ConflictingSourceSpecError,
    MissingRequiredFieldError,
    MissingSourceSpecError,
    UnsupportedFeatureError,
)


def convert_to_nim_project(spec: AppServerlessSpec) -> str:
    """Convert a serverless component to the project argument nim deploys.

    Args:
        spec: Serverless component

    Returns:
        Project reference string

    Raises:
        MissingSourceSpecError: Neither `local` nor `github` is set.
        ConflictingSourceSpecError: Both are set.
        UnsupportedFeatureError: `deploy_on_push` is requested.
        MissingRequiredFieldError: A required source field is empty.
    """
    if spec.local is None:
        if spec.github is None:
            raise MissingSourceSpecError(spec.name)
        return github_project(spec.github, spec.source_dir)

    if spec.github is not None:
        raise ConflictingSourceSpecError(spec.name)

    return local_project(spec.local, spec.source_dir)


def github_project(spec: GitHubSourceSpec, source_dir: str) -> str:
    """Build a ``github:`` project reference."""
    if spec.deploy_on_push:
        raise UnsupportedFeatureError("deploy on push")
    if not spec.repo:
        raise MissingRequiredFieldError("repo")

    project = f"github:{spec.repo}"
    if source_dir:
        project = f"{project}/{source_dir}"
    if spec.branch:
        project = f"{project}#{spec.branch}"
    return project


def local_project(spec: LocalSourceSpec, source_dir: str) -> str:
    """Build a local directory project reference."""
    if spec.path:
        if source_dir:
            return f"{spec.path}/{source_dir}"
        return spec.path
    if source_dir:
        return source_dir

    raise MissingRequiredFieldError(
        "path",
        "if `local` is used, either the path or the source_dir or both must be specified",
    )
