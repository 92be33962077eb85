from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from .config import Config
from .diagnostics import Diagnostic, DiagnosticCollector
from .fs import build_ignore_spec, iter_source_files
from .report_schema import DiagnosticModel, LintReport
from .rules import BaseRule, get_rule_class, list_rules
from .source import iter_regions, parse_document, supported_extensions
from .version import tool_version

logger = logging.getLogger(__name__)


def build_rules(cfg: Config, overrides: Optional[Mapping[str, str]] = None) -> List[BaseRule]:
    """
    Instantiate every enabled rule.

    Rules absent from the config are enabled with no options.
    An override replaces the rule's options with a single option and enables it.

    Raises:
        UnknownRuleError: If an override names an unregistered rule
    """
    overrides = dict(overrides or {})
    for rule_id in overrides:
        get_rule_class(rule_id)

    rules: List[BaseRule] = []
    for rule_id in list_rules():
        rule_cfg = cfg.rules.get(rule_id)
        options = list(rule_cfg.options) if rule_cfg else []
        enabled = rule_cfg.enabled if rule_cfg else True
        if rule_id in overrides:
            options = [overrides[rule_id]]
            enabled = True
        if not enabled:
            logger.debug("rule %s disabled", rule_id)
            continue
        rule = get_rule_class(rule_id)(options)
        rules.append(rule)
        logger.debug("rule %s options=%r", rule.id, rule.options)
    return rules


def lint_text(
        text: str,
        *,
        ext: str,
        rules: Sequence[BaseRule],
        path: Optional[Path] = None,
) -> List[Diagnostic]:
    """
    Lint one source text.

    Args:
        text: Source code
        ext: File extension selecting the grammar (".js", ".ts", ...)
        rules: Active rule instances
        path: Attached to every diagnostic

    Returns:
        Diagnostics ordered by position
    """
    doc = parse_document(text, ext)
    if doc.has_error():
        logger.warning("%s: syntax errors, results may be incomplete", path or "<text>")

    sink = DiagnosticCollector()
    for region in iter_regions(doc):
        for rule in rules:
            rule.check(region, sink)

    return [d.with_path(path) for d in sink.sorted()]


def lint_paths(
        paths: Sequence[Path],
        cfg: Config,
        root: Path,
        overrides: Optional[Mapping[str, str]] = None,
) -> LintReport:
    """
    Lint files and directories.

    Unreadable files are skipped with a warning and listed in the report.
    """
    rules = build_rules(cfg, overrides)
    ignore = build_ignore_spec(cfg.ignore)
    exts = set(supported_extensions())

    report = LintReport(tool_version=tool_version())

    for f in iter_source_files(paths, root=root, extensions=exts, ignore=ignore):
        try:
            text = f.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("skipping %s: %s", f, e)
            report.skipped.append(str(f))
            continue

        diags = lint_text(text, ext=f.suffix, rules=rules, path=f)
        report.diagnostics.extend(DiagnosticModel.from_diagnostic(d) for d in diags)
        report.files += 1

    report.error_count = len(report.diagnostics)
    return report


__all__ = ["build_rules", "lint_text", "lint_paths"]
