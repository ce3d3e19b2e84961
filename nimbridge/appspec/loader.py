"""App spec loader - Parse, validate and write app spec files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import AppSpec

logger = logging.getLogger(__name__)


class AppSpecLoadError(Exception):
    """Error loading or validating an app spec."""

    pass


class AppSpecLoader:
    """Load app specs from YAML or JSON files and write them back."""

    def load(self, spec_path: str | Path) -> AppSpec:
        """Load an app spec from a file.

        JSON documents are accepted as well since JSON is valid YAML. A
        top-level ``spec`` key wrapping the spec is unwrapped.

        Args:
            spec_path: Path to the app spec file

        Returns:
            Validated AppSpec

        Raises:
            AppSpecLoadError: If loading or validation fails
        """
        spec_path = Path(spec_path)

        if not spec_path.exists():
            raise AppSpecLoadError(f"App spec file not found: {spec_path}")

        # 1. Parse YAML
        try:
            with open(spec_path) as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise AppSpecLoadError(f"Invalid YAML: {e}") from e

        if not isinstance(document, dict):
            raise AppSpecLoadError("App spec file must contain a dictionary")

        # 2. Unwrap `apps get` output
        data = _spec_body(document)

        # 3. Pydantic validation (schema)
        try:
            spec = AppSpec(**data)
        except ValidationError as e:
            raise AppSpecLoadError(f"Validation error:\n{e}") from e

        # 4. Keep the raw document for dump()
        spec._document = copy.deepcopy(document)

        logger.debug(
            "Loaded app spec %s: %d serverless, %d static sites",
            spec.name,
            len(spec.serverless),
            len(spec.static_sites),
        )
        return spec

    def dump(self, spec: AppSpec, spec_path: str | Path | None = None) -> str:
        """Serialize an app spec to YAML.

        A spec that came from :meth:`load` is written as its original
        document, wrapper included, with only the environment variables
        appended to static sites since loading added to it.

        Args:
            spec: Spec to serialize
            spec_path: Optional file to write the YAML to

        Returns:
            The YAML text
        """
        if spec._document is None:
            data = spec.model_dump(mode="json", exclude_none=True)
        else:
            data = copy.deepcopy(spec._document)
            _append_new_envs(_spec_body(data), spec)

        text = yaml.safe_dump(data, sort_keys=False)

        if spec_path is not None:
            spec_path = Path(spec_path)
            spec_path.write_text(text)
            logger.info("Wrote app spec to %s", spec_path)

        return text


def _spec_body(document: dict[str, Any]) -> dict[str, Any]:
    if isinstance(document.get("spec"), dict):
        return document["spec"]
    return document


def _append_new_envs(body: dict[str, Any], spec: AppSpec) -> None:
    # Env collections are append-only, so anything past the raw length is new.
    raw_sites = body.get("static_sites") or []
    for raw_site, site in zip(raw_sites, spec.static_sites):
        raw_envs = raw_site.get("envs") or []
        added = site.envs[len(raw_envs):]
        if added:
            raw_site["envs"] = raw_envs + [env.model_dump(mode="json") for env in added]
