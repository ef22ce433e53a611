"""Utility functions for tt stats."""

from .file_utils import ensure_directory, is_bare_filename, resolve_log_path

__all__ = ["ensure_directory", "is_bare_filename", "resolve_log_path"]
