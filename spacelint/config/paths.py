from __future__ import annotations

from pathlib import Path
from typing import Optional

# Config file names, looked up in this order at the project root.
CFG_FILES = ("spacelint.yaml", ".spacelint.yaml")


def find_config(root: Path) -> Optional[Path]:
    """First existing config file under root, or None."""
    for name in CFG_FILES:
        p = (root / name).resolve()
        if p.is_file():
            return p
    return None
