"""File system utilities."""

import os
from pathlib import Path


def ensure_directory(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists

    Returns:
        The directory path
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def is_bare_filename(name: str) -> bool:
    """Check whether a name has no directory part.

    A bare filename contains no path separator and does not start
    with ``~`` or ``/``.
    """
    if not name or name[0] in ("~", "/"):
        return False
    separators = {os.sep, "/"}
    if os.altsep:
        separators.add(os.altsep)
    return not any(sep in name for sep in separators)


def resolve_log_path(name: str, results_dir: Path) -> Path:
    """Resolve a user-supplied stats log location.

    Args:
        name: Bare filename, ``~``-prefixed path, or any other path
        results_dir: Directory bare filenames are looked up in

    Returns:
        ``results_dir / name`` for bare filenames; otherwise the path
        with a leading ``~`` expanded to the home directory

    Raises:
        RuntimeError: If ``~`` cannot be expanded
    """
    if is_bare_filename(name):
        return results_dir / name
    return Path(name).expanduser()
