"""Orchestration processors for coordinating services."""

from .visualize_processor import VisualizeProcessor

__all__ = ["VisualizeProcessor"]
