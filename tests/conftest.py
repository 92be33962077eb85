import textwrap
from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write


@pytest.fixture
def tmpproj(tmp_path: Path):
    """Small project: spacelint.yaml plus a few JS/TS sources and an ignored dir."""
    root = tmp_path
    write(
        root / "spacelint.yaml",
        textwrap.dedent("""
        rules:
          computed-property-even-spacing: never
        ignore:
          - "dist/"
        """).strip() + "\n",
    )
    write(root / "src" / "ok.js", "const v = obj[key];\n")
    write(root / "src" / "bad.js", "const v = obj[ key ];\n")
    write(root / "src" / "types.ts", "const o = { [k]: 1 };\n")
    write(root / "dist" / "bundle.js", "x[ y ];\n")
    write(root / "node_modules" / "dep" / "index.js", "x[ y ];\n")
    write(root / "README.md", "obj[ key ]\n")
    return root
