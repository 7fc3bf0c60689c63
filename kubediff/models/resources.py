"""Resource identity and comparison data structures."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ResourceIdentity:
    """Identifying fields of a Kubernetes resource.

    Read-only: used to build display names, never to mutate a resource.
    """

    api_version: str = ""
    kind: str = ""
    namespace: str = ""
    name: str = ""

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, Any]) -> ResourceIdentity:
        """Build an identity from a manifest mapping. Missing fields become ``""``."""
        metadata = manifest.get("metadata")
        if not isinstance(metadata, Mapping):
            metadata = {}
        return cls(
            api_version=str(manifest.get("apiVersion") or ""),
            kind=str(manifest.get("kind") or ""),
            namespace=str(metadata.get("namespace") or ""),
            name=str(metadata.get("name") or ""),
        )


@dataclass(frozen=True)
class ComparisonRequest:
    """One diff invocation. Constructed per call and discarded afterwards."""

    name: str
    live_text: str
    desired_text: str


@dataclass(frozen=True)
class ComparisonResult:
    """Rendered diff text. An empty string means there are no differences."""

    rendered_text: str

    @property
    def has_changes(self) -> bool:
        return self.rendered_text != ""
