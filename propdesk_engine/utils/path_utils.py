# ## File: propdesk_engine/utils/path_utils.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: Path helpers used to locate the on-disk preference store.

import os
from pathlib import Path
from typing import Union


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists

    Returns:
        Path object of the ensured directory

    Raises:
        ValueError: If the path is empty
        OSError: If directory cannot be created
    """
    if not path or not str(path).strip():
        raise ValueError(f"Invalid path provided: {path!r}")
    path_obj = Path(os.path.expanduser(str(path).strip()))
    path_obj.mkdir(parents=True, exist_ok=True)
    return path_obj
