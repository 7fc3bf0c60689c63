"""Core data structures for kubediff."""

from kubediff.models.config import KubeDiffConfig, LogConfig, ToolsConfig
from kubediff.models.resources import (
    ComparisonRequest,
    ComparisonResult,
    ResourceIdentity,
)

__all__ = [
    "ComparisonRequest",
    "ComparisonResult",
    "KubeDiffConfig",
    "LogConfig",
    "ResourceIdentity",
    "ToolsConfig",
]
