"""Logging setup for kubediff."""
