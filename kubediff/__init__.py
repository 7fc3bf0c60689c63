"""kubediff: operator-facing diffs of live and desired Kubernetes resources."""

__version__ = "0.1.0"
