"""Comparison filenames for Kubernetes resources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kubediff.models.resources import ResourceIdentity


def format_name(resource: ResourceIdentity | Mapping[str, Any]) -> str:
    """Return ``<apiVersion>.<kind>.<namespace>.<name>`` with ``/`` replaced by ``-``.

    API versions such as ``apps/v1`` carry a group segment that is not a
    valid path component, so every slash is flattened.
    """
    if not isinstance(resource, ResourceIdentity):
        resource = ResourceIdentity.from_manifest(resource)
    joined = f"{resource.api_version}.{resource.kind}.{resource.namespace}.{resource.name}"
    return joined.replace("/", "-")
