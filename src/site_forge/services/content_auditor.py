"""Content auditor — finds template leftovers, placeholders and SEO gaps.

All regex patterns are pre-compiled once at import.  Detection is purely
lexical: the terminology check flags every whole-word "book" even where the
word means a printed book.  Scores start at 100 and lose 25/10/5/2 points per
critical/high/medium/low issue, floored at 0.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Iterable, Sequence

from site_forge.domain.entities import (
    AuditIssue,
    AuditReport,
    AuditResult,
    AuditStatus,
    AuditSummary,
    IssueType,
    Severity,
    SourceFile,
    ThemeConfig,
)
from site_forge.domain.serialization import to_jsonable

logger = logging.getLogger(__name__)

# ── Compiled patterns ───────────────────────────────────────────────────────

_TEMPLATE_PATTERNS: tuple[tuple[re.Pattern[str], Severity, IssueType], ...] = (
    # Content from the companion-booking template this platform was forked from
    (
        re.compile(r"escort|companion|gfe|girlfriend experience", re.IGNORECASE),
        Severity.CRITICAL,
        IssueType.TEMPLATE_CONTENT,
    ),
    (re.compile(r"claire hamilton", re.IGNORECASE), Severity.CRITICAL, IssueType.TEMPLATE_CONTENT),
    (re.compile(r"canberra companion", re.IGNORECASE), Severity.CRITICAL, IssueType.TEMPLATE_CONTENT),
    # Generic placeholders
    (re.compile(r"\[your business name\]", re.IGNORECASE), Severity.HIGH, IssueType.PLACEHOLDER_TEXT),
    (re.compile(r"\[your city\]", re.IGNORECASE), Severity.HIGH, IssueType.PLACEHOLDER_TEXT),
    (re.compile(r"\[business name\]", re.IGNORECASE), Severity.HIGH, IssueType.PLACEHOLDER_TEXT),
    (re.compile(r"yourdomain\.com", re.IGNORECASE), Severity.HIGH, IssueType.PLACEHOLDER_TEXT),
    (re.compile(r"your-organization", re.IGNORECASE), Severity.MEDIUM, IssueType.PLACEHOLDER_TEXT),
    (re.compile(r"contact@example\.com", re.IGNORECASE), Severity.MEDIUM, IssueType.PLACEHOLDER_TEXT),
    # Generic service copy
    (
        re.compile(r"professional services in your city", re.IGNORECASE),
        Severity.MEDIUM,
        IssueType.TEMPLATE_CONTENT,
    ),
    (re.compile(r"book your service", re.IGNORECASE), Severity.LOW, IssueType.OUTDATED_TERMINOLOGY),
    (re.compile(r"lorem ipsum", re.IGNORECASE), Severity.HIGH, IssueType.PLACEHOLDER_TEXT),
    # Example / test data
    (re.compile(r"test@test\.com", re.IGNORECASE), Severity.MEDIUM, IssueType.PLACEHOLDER_TEXT),
    (re.compile(r"john doe", re.IGNORECASE), Severity.LOW, IssueType.PLACEHOLDER_TEXT),
    (re.compile(r"jane smith", re.IGNORECASE), Severity.LOW, IssueType.PLACEHOLDER_TEXT),
)

_REQUIRED_SEO_TAGS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r'<meta\s+property="og:title"', re.IGNORECASE), "Open Graph title"),
    (re.compile(r'<meta\s+property="og:description"', re.IGNORECASE), "Open Graph description"),
    (re.compile(r'<meta\s+property="og:image"', re.IGNORECASE), "Open Graph image"),
    (re.compile(r'<meta\s+property="twitter:card"', re.IGNORECASE), "Twitter card"),
    (re.compile(r'<meta\s+name="description"', re.IGNORECASE), "Meta description"),
)

_SEO_CHECKED_SUFFIXES = (".html", ".tsx")

_GENERIC_TERMS: tuple[str, ...] = ("book", "service", "client", "booking")
_TERM_PATTERNS: dict[str, re.Pattern[str]] = {
    term: re.compile(rf"\b{term}\b", re.IGNORECASE) for term in _GENERIC_TERMS
}

_SEVERITY_PENALTY: dict[Severity, int] = {
    Severity.CRITICAL: 25,
    Severity.HIGH: 10,
    Severity.MEDIUM: 5,
    Severity.LOW: 2,
}

_SEVERITY_ORDER = (Severity.CRITICAL, Severity.HIGH, Severity.MEDIUM, Severity.LOW)
_MAX_ISSUES_PER_SEVERITY = 5
_MAX_CONTEXT = 80


# ── Helpers ─────────────────────────────────────────────────────────────────


def _position(content: str, offset: int) -> tuple[int, int]:
    """1-based (line, column) of *offset* within *content*."""
    line = content.count("\n", 0, offset) + 1
    column = offset - (content.rfind("\n", 0, offset) + 1) + 1
    return line, column


def _suggestion(found: str, theme: ThemeConfig | None) -> str:
    lower = found.lower()

    if "escort" in lower or "companion" in lower:
        return "Remove or replace with industry-appropriate content"
    if "claire hamilton" in lower:
        if theme is not None:
            return f'Replace with "{theme.terminology.client}" or actual business owner name'
        return "Replace with actual name"
    if "[your business name]" in lower or "[business name]" in lower:
        return "Replace with actual business name"
    if "[your city]" in lower:
        return "Replace with actual city/location"
    if "yourdomain.com" in lower:
        return "Replace with actual domain"
    if "your-organization" in lower:
        return "Replace with actual organization name"
    if "lorem ipsum" in lower:
        return "Replace with actual content"
    if "test@" in lower:
        return "Replace with real email address"
    return "Update with project-specific content"


def _scan(
    content: str,
    lines: Sequence[str],
    pattern: re.Pattern[str],
    severity: Severity,
    issue_type: IssueType,
    suggestion: str | None,
    theme: ThemeConfig | None,
) -> Iterable[AuditIssue]:
    for match in pattern.finditer(content):
        line, column = _position(content, match.start())
        yield AuditIssue(
            type=issue_type,
            severity=severity,
            found=match.group(0),
            suggestion=suggestion or _suggestion(match.group(0), theme),
            line=line,
            column=column,
            context=lines[line - 1].strip(),
        )


def _score(issues: Sequence[AuditIssue]) -> int:
    penalty = sum(_SEVERITY_PENALTY[issue.severity] for issue in issues)
    return max(0, 100 - penalty)


def _status(issues: Sequence[AuditIssue]) -> AuditStatus:
    severities = {issue.severity for issue in issues}
    if Severity.CRITICAL in severities:
        return AuditStatus.CRITICAL
    if Severity.HIGH in severities:
        return AuditStatus.WARNING
    return AuditStatus.CLEAN


def _recommendations(results: Sequence[AuditResult]) -> tuple[str, ...]:
    recommendations: list[str] = []

    critical = sum(1 for r in results if r.status is AuditStatus.CRITICAL)
    if critical:
        recommendations.append(
            f"CRITICAL: {critical} file(s) contain template content that must be "
            "replaced immediately"
        )
    if any(r.has_issue_type(IssueType.MISSING_SEO) for r in results):
        recommendations.append(
            "Add Open Graph and Twitter Card meta tags for better social media sharing"
        )
    placeholders = sum(1 for r in results if r.has_issue_type(IssueType.PLACEHOLDER_TEXT))
    if placeholders:
        recommendations.append(
            "Replace placeholder text with actual business information in "
            f"{placeholders} file(s)"
        )
    if any(r.has_issue_type(IssueType.OUTDATED_TERMINOLOGY) for r in results):
        recommendations.append("Consider updating terminology to match your industry standards")

    if not recommendations:
        recommendations.append("No issues found - content appears clean!")
    return tuple(recommendations)


# ── Public API ──────────────────────────────────────────────────────────────


def audit_file(path: str, content: str, theme: ThemeConfig | None = None) -> AuditResult:
    """Audit one file.

    Issues are reported in a fixed order: template/placeholder patterns,
    then missing SEO tags (``.html``/``.tsx`` only), then terminology drift
    against *theme* when one is given.
    """
    lines = content.split("\n")
    issues: list[AuditIssue] = []

    for pattern, severity, issue_type in _TEMPLATE_PATTERNS:
        issues.extend(_scan(content, lines, pattern, severity, issue_type, None, theme))

    if path.endswith(_SEO_CHECKED_SUFFIXES):
        for pattern, name in _REQUIRED_SEO_TAGS:
            if not pattern.search(content):
                issues.append(
                    AuditIssue(
                        type=IssueType.MISSING_SEO,
                        severity=Severity.HIGH,
                        found="Missing tag",
                        suggestion=f"Add {name} meta tag",
                    )
                )

    if theme is not None:
        term = theme.terminology
        replacements = {
            "book": term.book,
            "service": term.service,
            "client": term.client,
            "booking": term.booking,
        }
        for old, new in replacements.items():
            if old == new:
                continue
            issues.extend(
                _scan(
                    content,
                    lines,
                    _TERM_PATTERNS[old],
                    Severity.LOW,
                    IssueType.OUTDATED_TERMINOLOGY,
                    f'Consider using "{new}" instead of "{old}"',
                    theme,
                )
            )

    return AuditResult(
        file=path,
        issues=tuple(issues),
        score=_score(issues),
        status=_status(issues),
    )


def audit_files(files: Sequence[SourceFile], theme: ThemeConfig | None = None) -> AuditReport:
    """Audit every file and aggregate the results.

    The average score covers all files, clean ones included, and is 0 for
    an empty input.  Only files with issues are listed in ``results``,
    worst score first.
    """
    results = [audit_file(f.path, f.content, theme) for f in files]

    total_files = len(results)
    average = round(sum(r.score for r in results) / total_files) if total_files else 0
    with_issues = [r for r in results if r.issues]

    summary = AuditSummary(
        total_files=total_files,
        files_with_issues=len(with_issues),
        total_issues=sum(len(r.issues) for r in results),
        critical_issues=sum(r.count(Severity.CRITICAL) for r in results),
        average_score=average,
    )
    logger.info(
        "Audited %d file(s): %d with issues, %d issue(s), average score %d",
        summary.total_files,
        summary.files_with_issues,
        summary.total_issues,
        summary.average_score,
    )

    return AuditReport(
        summary=summary,
        results=tuple(sorted(with_issues, key=lambda r: r.score)),
        recommendations=_recommendations(results),
    )


def format_audit_report(report: AuditReport) -> str:
    """Render *report* as plain text, showing at most five issues per severity."""
    rule = "=" * 60
    thin = "-" * 60
    summary = report.summary
    out: list[str] = [
        "",
        rule,
        "  CONTENT AUDIT REPORT",
        rule,
        "",
        f"Total Files Scanned: {summary.total_files}",
        f"Files with Issues: {summary.files_with_issues}",
        f"Total Issues Found: {summary.total_issues}",
        f"Critical Issues: {summary.critical_issues}",
        f"Average Score: {summary.average_score}/100",
        "",
    ]

    if report.recommendations:
        out += ["RECOMMENDATIONS:", thin, *report.recommendations, ""]

    if report.results:
        out += ["DETAILED ISSUES:", thin, ""]
        for result in report.results:
            out.append(
                f"{result.file} (Score: {result.score}/100, "
                f"Status: {result.status.value.upper()})"
            )
            for severity in _SEVERITY_ORDER:
                issues = [i for i in result.issues if i.severity is severity]
                if not issues:
                    continue
                out.append(f"  {severity.value.upper()} ({len(issues)}):")
                for issue in issues[:_MAX_ISSUES_PER_SEVERITY]:
                    out.append(f'     Line {issue.line or "?"}: "{issue.found}"')
                    out.append(f"     -> {issue.suggestion}")
                    if issue.context:
                        context = issue.context[:_MAX_CONTEXT]
                        if len(issue.context) > _MAX_CONTEXT:
                            context += "..."
                        out.append(f"     Context: {context}")
                    out.append("")
                hidden = len(issues) - _MAX_ISSUES_PER_SEVERITY
                if hidden > 0:
                    out += [f"     ... and {hidden} more {severity.value} issue(s)", ""]
            out.append("")

    return "\n".join(out) + "\n"


def _replacement(found: str, theme: ThemeConfig) -> str:
    term = theme.terminology
    for old, new in (
        ("book", term.book),
        ("service", term.service),
        ("client", term.client),
        ("booking", term.booking),
    ):
        if _TERM_PATTERNS[old].search(found):
            return new
    return "[REPLACE_ME]"


def generate_migration_script(results: Sequence[AuditResult], theme: ThemeConfig) -> str:
    """Return a reviewable shell script of ``sed`` replacements.

    Only terminology and placeholder issues are migrated; anything without
    an obvious replacement becomes ``[REPLACE_ME]``.
    """
    lines = [
        "#!/bin/bash",
        "",
        "# Auto-generated migration script",
        "# Review before running!",
        "",
    ]
    for result in results:
        for issue in result.issues:
            if issue.type not in (IssueType.OUTDATED_TERMINOLOGY, IssueType.PLACEHOLDER_TEXT):
                continue
            old = re.sub(r"[.*+?^${}()|\[\]\\/]", r"\\\g<0>", issue.found)
            new = _replacement(issue.found, theme).replace("/", r"\/")
            lines.append(f"sed -i 's/{old}/{new}/g' \"{result.file}\"")
    return "\n".join(lines) + "\n"


def export_audit_json(report: AuditReport) -> str:
    return json.dumps(to_jsonable(report), indent=2)
