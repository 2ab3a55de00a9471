"""Turns an AnalysisReport into a plain view model the dashboard can draw.

Nothing here touches Streamlit, so the mapping from report to screen can be
tested directly.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from errors import AnalyzerError
from schemas import AnalysisReport

COMPARISON_COLUMNS = (
    "Job Description Requirement",
    "Resume Evidence & Analysis",
    "Match Status",
)


@dataclass(frozen=True)
class Section:
    key: str
    title: str
    icon: str
    text: str = ""
    caption: str = ""
    items: Tuple[str, ...] = ()
    rows: Tuple[Tuple[str, str, str], ...] = ()
    progress: Optional[int] = None
    color: Optional[str] = None


@dataclass(frozen=True)
class ReportView:
    sections: Tuple[Section, ...]


@dataclass(frozen=True)
class Notice:
    title: str
    description: str
    variant: str = "error"  # error | warning | success


def status_label(status: str) -> str:
    s = (status or "").lower()
    if "strong" in s:
        return "✅ Strong Match"
    if "partial" in s:
        return "⚠️ Partial Match"
    if "missing" in s or "no" in s:
        return "❌ Missing"
    return "Match"


def score_color(score: float) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "orange"
    return "red"


def _pct(value: float) -> int:
    return max(0, min(100, int(round(value))))


def present(report: AnalysisReport) -> ReportView:
    """Map each report field to its section, always in the same eight-section order."""
    score = report.score.value
    match = report.match_percentage
    return ReportView(
        sections=(
            Section(
                key="ats_score",
                title="ATS Score",
                icon="📊",
                text=f"{score:g} / 100",
                caption=f"Reason: {report.score.reason}",
                progress=_pct(score),
                color=score_color(score),
            ),
            Section(
                key="match_percentage",
                title="Resume-to-JD Match Percentage",
                icon="🎯",
                text=f"{match:g}% Match",
                progress=_pct(match),
            ),
            Section(
                key="comparison",
                title="Detailed Match Analysis",
                icon="🎯",
                rows=tuple(
                    (row.requirement, row.evidence, status_label(row.status))
                    for row in report.comparison_rows
                ),
            ),
            Section(
                key="knockout_factors",
                title="Knockout Factors Affecting ATS Score",
                icon="📊",
                items=tuple(f"❌ {factor}" for factor in report.knockout_factors),
            ),
            Section(
                key="strengths",
                title="Resume Strengths",
                icon="💡",
                items=tuple(f"✅ {s}" for s in report.strengths),
            ),
            Section(key="conclusion", title="Conclusion", icon="📄", text=report.conclusion),
            Section(
                key="recommendations",
                title="How to Improve",
                icon="💡",
                items=tuple(f"{i}. {r}" for i, r in enumerate(report.recommendations, start=1)),
            ),
            Section(key="overall_summary", title="Final AI Summary", icon="✨", text=report.overall_summary),
        )
    )


def notice_for(exc: Exception) -> Notice:
    if isinstance(exc, AnalyzerError):
        return Notice(title=exc.title, description=exc.description)
    return Notice(
        title="Analysis Failed",
        description=str(exc) or "An error occurred during analysis.",
    )
