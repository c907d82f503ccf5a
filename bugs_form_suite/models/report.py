"""
Defect report - Known site defects found during a run.
Kept apart from pass/fail so a report consumer can tell a logged bug from a silent pass.
"""

from dataclasses import dataclass, asdict, field as dataclass_field
from typing import List, Dict, Any
from datetime import datetime
import json


VALIDITY_MISMATCH = 'validity_mismatch'
DISABLED_CONTROL = 'disabled_control'


@dataclass
class Finding:
    """A single known defect observed on one page."""

    kind: str                # validity_mismatch, disabled_control
    field: str               # display name of the field
    page: str                # URL of the page the defect was seen on
    message: str
    timestamp: str = dataclass_field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class DefectReport:
    """All findings of a run."""

    findings: List[Finding] = dataclass_field(default_factory=list)
    started_at: str = dataclass_field(default_factory=lambda: datetime.now().isoformat())

    def record(self, kind: str, field: str, page: str, message: str) -> Finding:
        """Add a finding and return it."""
        finding = Finding(kind=kind, field=field, page=page, message=message)
        self.findings.append(finding)
        return finding

    def by_kind(self, kind: str) -> List[Finding]:
        """Get findings of one kind."""
        return [f for f in self.findings if f.kind == kind]

    def by_field(self, field: str) -> List[Finding]:
        """Get findings for one field."""
        return [f for f in self.findings if f.field == field]

    def clear(self):
        """Drop all findings."""
        self.findings.clear()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'started_at': self.started_at,
            'total_findings': len(self.findings),
            'findings': [f.to_dict() for f in self.findings],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def save_to_file(self, filepath: str):
        """Save report to JSON file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(self.to_json())

    def summary(self) -> str:
        """Get a human-readable summary."""
        lines = [
            "Known Defects Summary",
            "=" * 50,
            f"Total findings: {len(self.findings)}",
        ]
        for finding in self.findings:
            lines.append(f"- [{finding.kind}] {finding.field} @ {finding.page}: {finding.message}")
        lines.append("=" * 50)
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return len(self.findings)

    def __repr__(self) -> str:
        """String representation."""
        return f"DefectReport(findings={len(self.findings)})"
