"""kubediff command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``kubediff`` script).
"""

from kubediff.cli.main import cli

__all__ = ["cli"]
