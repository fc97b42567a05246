"""Collision-free output paths for saved images."""

import re
from pathlib import Path
from typing import Optional

from rowgram.config import get_settings

settings = get_settings()

_UNSAFE = re.compile(r"[^A-Za-z0-9_-]+")


def sanitize_name(base_name: str) -> str:
    """Reduce a user-supplied image name to ``[A-Za-z0-9_-]``."""
    return _UNSAFE.sub("_", base_name).strip("_") or "crew"


def get_next_file_name(base_name: str, extension: str, directory: Optional[str] = None) -> Path:
    """Absolute path for ``base_name.extension`` that does not exist yet.

    Appends ``_1``, ``_2``, ... until a free name is found. The directory
    (default ``settings.saved_images_dir``) is created if missing.
    """
    folder = Path(directory or settings.saved_images_dir).resolve()
    folder.mkdir(parents=True, exist_ok=True)

    stem = sanitize_name(base_name)
    path = folder / f"{stem}.{extension}"
    counter = 1
    while path.exists():
        path = folder / f"{stem}_{counter}.{extension}"
        counter += 1
    return path
