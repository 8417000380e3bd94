from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Optional

from identspell.model import Location


@dataclass
class Finding:
    rule_id: str
    severity: str  # ERROR|WARN
    path: str
    line: int
    col: int
    message: str
    evidence: str = ""
    word: Optional[str] = None


class Reporter:
    """Diagnostics sink for one file: ``add(message, location, word=None)``."""

    def __init__(self, path: str = "<unknown>", rule_id: str = "S001",
                 severity: str = "ERROR", source: str = "") -> None:
        self.path = path
        self.rule_id = rule_id
        self.severity = severity
        self.findings: list[Finding] = []
        self._lines = source.splitlines()

    def add(self, message: str, location: Location, word: Optional[str] = None) -> None:
        self.findings.append(Finding(
            rule_id=self.rule_id,
            severity=self.severity,
            path=self.path,
            line=location.line,
            col=location.column,
            message=message,
            evidence=self._line(location.line).strip(),
            word=word,
        ))

    def add_finding(self, f: Finding) -> None:
        self.findings.append(f)

    def _line(self, line_no: int) -> str:
        if line_no <= 0 or line_no > len(self._lines):
            return ""
        return self._lines[line_no-1]

    def sorted_findings(self) -> list[Finding]:
        return sorted(self.findings, key=lambda f: (f.path, f.line, f.col))

    @property
    def error_count(self) -> int:
        return len(self.findings)

    def is_empty(self) -> bool:
        return not self.findings

    def to_jsonl(self) -> str:
        return "\n".join(json.dumps(asdict(f), ensure_ascii=False) for f in self.sorted_findings())

    def render_human(self) -> str:
        out: list[str] = []
        for f in self.sorted_findings():
            loc = f"{f.path}:{f.line}:{f.col}"
            out.append(f"- {f.severity} {f.rule_id} {loc} -- {f.message}")
            if f.evidence:
                out.append(f"    evidence: {f.evidence[:220]}")
        return "\n".join(out)


def render_summary(reporters: list[Reporter]) -> str:
    files = sum(1 for r in reporters if not r.is_empty())
    total = sum(r.error_count for r in reporters)
    return f"Findings: {total} in {files} file(s)"
