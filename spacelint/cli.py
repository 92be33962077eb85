from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from .config import load_config, parse_rule_overrides
from .engine import lint_paths
from .errors import SpaceLintUserError
from .jsonic import dumps as jdumps
from .logs import setup_logging
from .report_schema import LintReport, RuleInfo
from .rules import get_rule_class, list_rules
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="spacelint",
        description="Spacing checks for computed property access in JavaScript/TypeScript",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_check = sub.add_parser("check", help="check files and directories")
    sp_check.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="files or directories to check (default: current directory)",
    )
    sp_check.add_argument(
        "--rule",
        action="append",
        metavar="ID=OPTION",
        help="rule option override, e.g. computed-property-even-spacing=even (repeatable)",
    )
    sp_check.add_argument(
        "--config",
        metavar="FILE",
        help="explicit config file instead of spacelint.yaml in the current directory",
    )
    sp_check.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="output format",
    )
    sp_check.add_argument(
        "--verbose",
        action="store_true",
        help="debug logging to stderr",
    )

    sub.add_parser("rules", help="list available rules (JSON)")

    return p


def _rules_payload() -> List[dict]:
    out = []
    for rule_id in list_rules():
        meta = get_rule_class(rule_id).meta
        info = RuleInfo(
            id=meta.id,
            type=meta.type,
            description=meta.description,
            docs_url=meta.docs_url,
            options=list(meta.options),
        )
        out.append(info.model_dump(mode="json", by_alias=True))
    return out


def _write_text(report: LintReport) -> None:
    for d in report.diagnostics:
        sys.stdout.write(d.format() + "\n")
    if report.error_count:
        sys.stdout.write(f"\n{report.error_count} problem(s) in {report.files} file(s)\n")


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)

    try:
        if ns.cmd == "check":
            setup_logging(verbose=bool(ns.verbose))
            root = Path.cwd()
            cfg = load_config(root, Path(ns.config) if ns.config else None)
            overrides = parse_rule_overrides(ns.rule)
            paths = [Path(p) for p in ns.paths]
            missing = [str(p) for p in paths if not p.exists()]
            if missing:
                raise SpaceLintUserError(f"Path not found: {', '.join(missing)}")
            report = lint_paths(paths, cfg, root, overrides)

            if ns.format == "json":
                sys.stdout.write(jdumps(report.model_dump(mode="json", by_alias=True)))
            else:
                _write_text(report)
            return 1 if report.error_count else 0

        if ns.cmd == "rules":
            sys.stdout.write(jdumps({"rules": _rules_payload()}))
            return 0

    except SpaceLintUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
