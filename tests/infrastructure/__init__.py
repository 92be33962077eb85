"""
Shared test infrastructure for spacelint.

Modules:
- file_utils: creating files and directories
- cli_utils: running the CLI in a subprocess
- region_utils: building tokens and regions by hand
"""

from .file_utils import write
from .cli_utils import run_cli, jload
from .region_utils import tok, region_from_line, lint_js, lint_ts

__all__ = ["write", "run_cli", "jload", "tok", "region_from_line", "lint_js", "lint_ts"]
