"""Directory access checks."""

import os
from pathlib import Path
from typing import Union


def is_readable_dir(path: Union[str, Path]) -> bool:
    """Exists, is a directory and can be listed."""
    p = Path(path)
    try:
        return p.is_dir() and os.access(str(p), os.R_OK)
    except OSError:
        return False


def is_writable(path: Union[str, Path]) -> bool:
    return os.access(str(path), os.W_OK)
