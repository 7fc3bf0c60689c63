"""Configuration loading from environment variables."""

from __future__ import annotations

import os
import re

from kubediff.models.config import KubeDiffConfig, LogConfig, ToolsConfig


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"KUBEDIFF_{key}", default)


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    val = int(_env(key, str(default)))
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _env_list(key: str) -> list[str]:
    return [item.strip() for item in _env(key).split(",") if item.strip()]


def _validate_patterns(patterns: list[str]) -> list[str]:
    for pattern in patterns:
        try:
            re.compile(pattern)
        except re.error as exc:
            raise ValueError(f"Invalid stderr filter pattern {pattern!r}: {exc}") from exc
    return patterns


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> KubeDiffConfig:
    """Load configuration from KUBEDIFF_* environment variables."""
    return KubeDiffConfig(
        tools=ToolsConfig(
            preferred_tool=_env("PREFERRED_TOOL", "icdiff"),
            fallback_tool=_env("FALLBACK_TOOL", "diff"),
            stats_tool=_env("STATS_TOOL", "diffstat"),
            default_width=_env_int("DEFAULT_WIDTH", 80, min_val=20, max_val=1000),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "warning")),
        ),
        stderr_filters=_validate_patterns(_env_list("STDERR_FILTERS")),
    )
