"""Entry point for `python -m kubediff`.

Usage:
    python -m kubediff diff live.yaml desired.yaml
"""

from __future__ import annotations

from kubediff.cli import cli

cli()
