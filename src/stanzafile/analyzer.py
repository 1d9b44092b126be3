"""
Document Analyzer: diagnostics and inventory of stanza documents.

This module provides lightweight analysis of StanzaDocument objects:
    - Stanza and attribute counts
    - Repeated stanza names
    - Stanzas without attributes
    - Lines the parser dropped
    - Attribute usage across stanzas

IMPORTANT: The analyzer does NOT modify the document.
It only produces read-only reports.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from stanzafile.document import StanzaDocument
from stanzafile.parser import DroppedLine


@dataclass
class DocumentReport:
    """Analysis report for a stanza document."""

    source_path: str | None = None
    total_stanzas: int = 0
    total_attributes: int = 0
    document_comment_lines: int = 0

    duplicate_names: List[str] = field(default_factory=list)
    empty_stanzas: List[str] = field(default_factory=list)
    dropped_lines: List[DroppedLine] = field(default_factory=list)

    # Attribute name -> number of stanzas defining it
    attribute_usage: Dict[str, int] = field(default_factory=dict)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_document(doc: StanzaDocument) -> DocumentReport:
    """
    Perform analysis of a StanzaDocument.

    Returns a DocumentReport with counts and warnings.
    """
    report = DocumentReport(source_path=doc.source_path)

    report.total_stanzas = len(doc.stanzas)
    report.total_attributes = sum(len(s.attributes) for s in doc.stanzas)
    report.document_comment_lines = len(doc.document_comment)
    report.dropped_lines = list(doc.dropped_lines)

    name_counts = Counter(s.name for s in doc.stanzas)
    report.duplicate_names = [name for name, count in name_counts.items() if count > 1]
    report.empty_stanzas = [s.name for s in doc.stanzas if s.is_empty()]

    usage: Counter = Counter()
    for stanza in doc.stanzas:
        usage.update(stanza.attribute_names())
    report.attribute_usage = dict(usage)

    if report.duplicate_names:
        report.add_warning(
            f"Repeated stanza names: {', '.join(report.duplicate_names)}"
        )

    if report.empty_stanzas:
        report.add_warning(
            f"Stanzas without attributes: {', '.join(report.empty_stanzas)}"
        )

    for dropped in report.dropped_lines:
        report.add_warning(
            f"Line {dropped.line_number} dropped ({dropped.reason}): {dropped.text.strip()}"
        )

    return report
