from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .diagnostics import Diagnostic

PROTOCOL_VERSION = 1


class DiagnosticModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path: str
    line: int
    column: int = Field(description="1-based character column")
    rule: str
    message: str

    @classmethod
    def from_diagnostic(cls, d: Diagnostic) -> DiagnosticModel:
        return cls(
            path=str(d.path) if d.path is not None else "<text>",
            line=d.line,
            column=d.column + 1,
            rule=d.rule_id,
            message=d.message,
        )

    def format(self) -> str:
        """Text form: path:line:column: [rule] message"""
        return f"{self.path}:{self.line}:{self.column}: [{self.rule}] {self.message}"


class LintReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    protocol: int = PROTOCOL_VERSION
    tool_version: str = Field(alias="toolVersion")
    files: int = 0
    skipped: List[str] = Field(default_factory=list)
    diagnostics: List[DiagnosticModel] = Field(default_factory=list)
    error_count: int = Field(default=0, alias="errorCount")


class RuleInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str
    description: str
    docs_url: str = Field(alias="docsUrl")
    options: List[str] = Field(default_factory=list)


__all__ = ["PROTOCOL_VERSION", "DiagnosticModel", "LintReport", "RuleInfo"]
