"""Content auditor: pattern detection, SEO gate, terminology drift, scoring, reports.

Coverage:
  audit_file               — template/placeholder patterns, line/column, SEO tags, terminology
  scoring                  — exact formula, floor at 0, status consistency
  audit_files              — summary counts, average (incl. empty input), ordering, recommendations
  format / migration / json exports
"""

import json

import pytest

from site_forge.domain.entities import (
    AuditIssue,
    AuditResult,
    AuditStatus,
    IssueType,
    Severity,
    SourceFile,
)
from site_forge.services.content_auditor import (
    _score,
    _status,
    audit_file,
    audit_files,
    export_audit_json,
    format_audit_report,
    generate_migration_script,
)
from site_forge.services.prompt_parser import parse_theme_prompt
from site_forge.services.theme_compiler import generate_theme

FULL_HEAD = """<head>
  <meta name="description" content="x" />
  <meta property="og:title" content="x" />
  <meta property="og:description" content="x" />
  <meta property="og:image" content="x" />
  <meta property="twitter:card" content="x" />
</head>"""


def _issue(severity: Severity) -> AuditIssue:
    return AuditIssue(
        type=IssueType.TEMPLATE_CONTENT, severity=severity, found="x", suggestion="y"
    )


# ── Pattern detection ──────────────────────────────────────────────────────────


def test_claire_hamilton_is_one_critical_template_issue():
    result = audit_file("notes.txt", "Written by Claire Hamilton for the site.")
    critical = [i for i in result.issues if i.severity is Severity.CRITICAL]
    assert len(critical) == 1
    assert critical[0].type is IssueType.TEMPLATE_CONTENT
    assert critical[0].found == "Claire Hamilton"
    assert result.score <= 75
    assert result.status is AuditStatus.CRITICAL


def test_claire_hamilton_suggestion_uses_theme_client_term(mtg_theme):
    result = audit_file("notes.txt", "claire hamilton", mtg_theme)
    assert result.issues[0].suggestion == (
        'Replace with "warrior" or actual business owner name'
    )


def test_line_and_column_are_one_based():
    content = "first line\n  second has lorem ipsum here\nthird"
    result = audit_file("page.md", content)
    assert len(result.issues) == 1
    issue = result.issues[0]
    assert issue.line == 2
    assert issue.column == content.split("\n")[1].index("lorem") + 1
    assert issue.context == "second has lorem ipsum here"
    assert issue.severity is Severity.HIGH
    assert issue.type is IssueType.PLACEHOLDER_TEXT


def test_every_occurrence_is_reported():
    result = audit_file("people.txt", "John Doe\njohn doe\nJOHN DOE")
    assert [i.line for i in result.issues] == [1, 2, 3]
    assert all(i.severity is Severity.LOW for i in result.issues)
    assert result.score == 94


@pytest.mark.parametrize(
    "text, severity, issue_type",
    [
        ("[your city]", Severity.HIGH, IssueType.PLACEHOLDER_TEXT),
        ("visit yourdomain.com", Severity.HIGH, IssueType.PLACEHOLDER_TEXT),
        ("github.com/your-organization", Severity.MEDIUM, IssueType.PLACEHOLDER_TEXT),
        ("mail contact@example.com", Severity.MEDIUM, IssueType.PLACEHOLDER_TEXT),
        ("mail test@test.com", Severity.MEDIUM, IssueType.PLACEHOLDER_TEXT),
        ("Professional services in your city", Severity.MEDIUM, IssueType.TEMPLATE_CONTENT),
        ("book your service", Severity.LOW, IssueType.OUTDATED_TERMINOLOGY),
        ("Canberra escort agency", Severity.CRITICAL, IssueType.TEMPLATE_CONTENT),
    ],
)
def test_single_pattern_severity(text, severity, issue_type):
    result = audit_file("copy.txt", text)
    assert result.issues[0].severity is severity
    assert result.issues[0].type is issue_type


def test_clean_file_scores_100():
    result = audit_file("src/utils/math.ts", "export const add = (a, b) => a + b;")
    assert result.issues == ()
    assert result.score == 100
    assert result.status is AuditStatus.CLEAN


# ── SEO gate ───────────────────────────────────────────────────────────────────


def test_html_without_meta_tags_has_five_missing_seo_issues():
    result = audit_file("index.html", "<html><head><title>Site</title></head></html>")
    missing = [i for i in result.issues if i.type is IssueType.MISSING_SEO]
    assert len(missing) == 5
    assert all(i.severity is Severity.HIGH for i in missing)
    assert all(i.line is None for i in missing)
    assert result.score == 50
    assert result.status is AuditStatus.WARNING


def test_html_with_all_meta_tags_is_clean():
    assert audit_file("index.html", f"<html>{FULL_HEAD}</html>").issues == ()


def test_tsx_is_seo_checked_but_ts_is_not():
    assert len(audit_file("Home.tsx", "export {}").issues) == 5
    assert audit_file("home.ts", "export {}").issues == ()


# ── Terminology drift ──────────────────────────────────────────────────────────


def test_terminology_drift_flags_whole_words_only(mtg_theme):
    content = "Book a service today.\nOur bookings and services; the client is happy."
    result = audit_file("copy.txt", content, mtg_theme)
    found = sorted(i.found for i in result.issues)
    # "bookings"/"services" are not whole-word matches for book/service/booking
    assert found == ["Book", "client", "service"]
    assert all(i.type is IssueType.OUTDATED_TERMINOLOGY for i in result.issues)
    assert all(i.severity is Severity.LOW for i in result.issues)
    book = next(i for i in result.issues if i.found == "Book")
    assert book.suggestion == 'Consider using "register" instead of "book"'


def test_terminology_heuristic_is_lexical(mtg_theme):
    # Known limitation: an unrelated "book" in prose is still flagged.
    result = audit_file("about.txt", "Our founder wrote a book about strategy.", mtg_theme)
    assert [i.found for i in result.issues] == ["book"]


def test_terms_equal_to_theme_are_not_flagged():
    wellness = generate_theme(parse_theme_prompt("wellness spa"))
    result = audit_file("copy.txt", "book a session with our client team", wellness)
    # wellness keeps "book" and "client"; only "service"/"booking" differ and are absent
    assert result.issues == ()


def test_no_terminology_check_without_theme():
    assert audit_file("copy.txt", "book a service for your client").issues == ()


# ── Scoring ────────────────────────────────────────────────────────────────────


def test_score_formula_exact():
    issues = (
        [_issue(Severity.CRITICAL)]
        + [_issue(Severity.HIGH)] * 2
        + [_issue(Severity.LOW)] * 3
    )
    assert _score(issues) == 49


def test_score_floors_at_zero():
    assert _score([_issue(Severity.CRITICAL)] * 5) == 0


@pytest.mark.parametrize(
    "severities, status",
    [
        ([], AuditStatus.CLEAN),
        ([Severity.LOW, Severity.MEDIUM], AuditStatus.CLEAN),
        ([Severity.HIGH, Severity.LOW], AuditStatus.WARNING),
        ([Severity.HIGH, Severity.CRITICAL], AuditStatus.CRITICAL),
    ],
)
def test_status_from_severities(severities, status):
    assert _status([_issue(s) for s in severities]) is status


def test_score_bounds_and_status_consistency_on_noisy_input(mtg_theme):
    noisy = "\n".join(["Claire Hamilton escort lorem ipsum book service client"] * 20)
    result = audit_file("noisy.html", noisy, mtg_theme)
    assert 0 <= result.score <= 100
    assert result.score == 0
    has_critical = any(i.severity is Severity.CRITICAL for i in result.issues)
    assert (result.status is AuditStatus.CRITICAL) == has_critical


# ── Aggregate report ───────────────────────────────────────────────────────────


def test_audit_files_summary(template_files):
    report = audit_files(template_files)
    summary = report.summary
    assert summary.total_files == 3
    assert summary.files_with_issues == 2
    assert summary.total_issues == 13
    assert summary.critical_issues == 1
    # (23 + 40 + 100) / 3, the clean file counts toward the average
    assert summary.average_score == 54


def test_audit_files_lists_only_files_with_issues_worst_first(template_files):
    report = audit_files(template_files)
    assert [r.file for r in report.results] == ["src/pages/About.tsx", "index.html"]
    assert [r.score for r in report.results] == [23, 40]


def test_audit_files_with_theme_adds_terminology(template_files, mtg_theme):
    report = audit_files(template_files, mtg_theme)
    about = report.results[0]
    assert about.file == "src/pages/About.tsx"
    assert about.score == 19


def test_recommendations_are_gated(template_files):
    recommendations = audit_files(template_files).recommendations
    assert len(recommendations) == 4
    assert recommendations[0].startswith("CRITICAL: 1 file(s)")
    assert "Open Graph" in recommendations[1]
    assert recommendations[2].endswith("in 1 file(s)")
    assert "terminology" in recommendations[3]


def test_clean_report_has_single_all_clear_recommendation():
    report = audit_files([SourceFile("a.ts", "const a = 1;")])
    assert report.recommendations == ("No issues found - content appears clean!",)
    assert report.results == ()
    assert report.summary.average_score == 100


def test_empty_audit_has_zero_average():
    report = audit_files([])
    assert report.summary.total_files == 0
    assert report.summary.average_score == 0
    assert report.results == ()


# ── Exports ────────────────────────────────────────────────────────────────────


def test_format_audit_report(template_files):
    text = format_audit_report(audit_files(template_files))
    assert "CONTENT AUDIT REPORT" in text
    assert "Average Score: 54/100" in text
    assert "src/pages/About.tsx (Score: 23/100, Status: CRITICAL)" in text
    assert '     Line 4: "Claire Hamilton"' in text
    assert '     Line ?: "Missing tag"' in text


def test_format_audit_report_truncates_per_severity():
    content = "\n".join("john doe" for _ in range(8))
    text = format_audit_report(audit_files([SourceFile("people.txt", content)]))
    assert "LOW (8):" in text
    assert "... and 3 more low issue(s)" in text


def test_migration_script(mtg_theme):
    result = audit_file("src/Home.tsx", "Book now at yourdomain.com", mtg_theme)
    script = generate_migration_script([result], mtg_theme)
    assert script.startswith("#!/bin/bash\n")
    assert "sed -i 's/yourdomain\\.com/[REPLACE_ME]/g' \"src/Home.tsx\"" in script
    assert "sed -i 's/Book/register/g' \"src/Home.tsx\"" in script
    # missing-seo issues are not migrated
    assert script.count("sed -i") == 2


def test_export_audit_json(template_files):
    payload = json.loads(export_audit_json(audit_files(template_files)))
    assert payload["summary"]["average_score"] == 54
    first_issue = payload["results"][0]["issues"][0]
    assert first_issue["severity"] == "critical"
    assert first_issue["type"] == "template-content"
    assert payload["results"][0]["status"] == "critical"


def test_result_helpers():
    result = AuditResult(
        file="f",
        issues=(_issue(Severity.HIGH), _issue(Severity.HIGH)),
        score=80,
        status=AuditStatus.WARNING,
    )
    assert result.count(Severity.HIGH) == 2
    assert result.has_issue_type(IssueType.TEMPLATE_CONTENT)
    assert not result.has_issue_type(IssueType.MISSING_SEO)
