"""Fetch-transform-publish pipeline for the OUI registry."""

from .download import update
from .metrics import parse, publish, render_metrics, write_metrics
from .registry import read_registry

__all__ = [
    "update",
    "parse",
    "publish",
    "read_registry",
    "render_metrics",
    "write_metrics",
]
