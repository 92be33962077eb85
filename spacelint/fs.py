from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional, Set

import pathspec

# Never descended into
_SKIP_DIRS = {".git", "node_modules"}


def build_ignore_spec(patterns: List[str]) -> Optional[pathspec.PathSpec]:
    """PathSpec from gitwildmatch patterns; None when there are none."""
    lines = [p.strip() for p in patterns if p.strip() and not p.strip().startswith("#")]
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def _rel_posix(path: Path, root: Path) -> str:
    try:
        return path.resolve().relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def iter_source_files(
    paths: Iterable[Path],
    *,
    root: Path,
    extensions: Set[str],
    ignore: Optional[pathspec.PathSpec] = None,
) -> Iterable[Path]:
    """
    Expand files and directories into source files with a known extension.

    Explicitly named files are yielded as-is (extension permitting);
    directories are walked recursively with early pruning of ignored branches.
    """
    root = root.resolve()
    seen: Set[Path] = set()

    for p in paths:
        if p.is_file():
            if p.suffix.lower() in extensions and p.resolve() not in seen:
                seen.add(p.resolve())
                yield p
            continue

        for dirpath, dirnames, filenames in os.walk(p):
            keep: List[str] = []
            for d in sorted(dirnames):
                if d in _SKIP_DIRS:
                    continue
                if ignore and ignore.match_file(_rel_posix(Path(dirpath, d), root) + "/"):
                    continue
                keep.append(d)
            dirnames[:] = keep

            for fn in sorted(filenames):
                f = Path(dirpath, fn)
                if f.suffix.lower() not in extensions:
                    continue
                if ignore and ignore.match_file(_rel_posix(f, root)):
                    continue
                if f.resolve() in seen:
                    continue
                seen.add(f.resolve())
                yield f


__all__ = ["build_ignore_spec", "iter_source_files"]
