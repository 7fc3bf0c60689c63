"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ToolsConfig:
    """External tool configuration."""

    preferred_tool: str = "icdiff"
    fallback_tool: str = "diff"
    stats_tool: str = "diffstat"
    default_width: int = 80


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "warning"


@dataclass
class KubeDiffConfig:
    """Top-level kubediff configuration."""

    tools: ToolsConfig = field(default_factory=ToolsConfig)
    log: LogConfig = field(default_factory=LogConfig)
    stderr_filters: list[str] = field(default_factory=list)
