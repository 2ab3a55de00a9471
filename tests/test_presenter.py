import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from errors import MissingInputError, UpstreamError  # noqa: E402
from schemas import ALL_CLEAR, AnalysisReport, ATSScore, ComparisonRow  # noqa: E402
from ui.presenter import notice_for, present, score_color, status_label  # noqa: E402


def make_report():
    return AnalysisReport(
        score=ATSScore(value=82, reason="Meets all must-haves."),
        match_percentage=76.5,
        comparison_rows=(
            ComparisonRow(requirement="Python", evidence="5 years", status="strong match"),
            ComparisonRow(requirement="Kubernetes", evidence="-", status="No evidence"),
        ),
        strengths=("Clear impact metrics",),
        conclusion="Worth an interview.",
        recommendations=("Quantify the Kafka work", "Add a skills section"),
        overall_summary="Strong candidate.",
    )


class PresentTests(unittest.TestCase):
    def test_rendering_is_idempotent(self):
        report = make_report()
        self.assertEqual(present(report), present(report))

    def test_eight_sections_in_fixed_order(self):
        keys = [s.key for s in present(make_report()).sections]
        self.assertEqual(
            keys,
            [
                "ats_score",
                "match_percentage",
                "comparison",
                "knockout_factors",
                "strengths",
                "conclusion",
                "recommendations",
                "overall_summary",
            ],
        )

    def test_section_content(self):
        sections = {s.key: s for s in present(make_report()).sections}

        self.assertEqual(sections["ats_score"].text, "82 / 100")
        self.assertEqual(sections["ats_score"].color, "green")
        self.assertEqual(sections["ats_score"].caption, "Reason: Meets all must-haves.")
        self.assertEqual(sections["match_percentage"].text, "76.5% Match")
        self.assertEqual(sections["match_percentage"].progress, 76)
        self.assertEqual(
            sections["comparison"].rows,
            (("Python", "5 years", "✅ Strong Match"), ("Kubernetes", "-", "❌ Missing")),
        )
        self.assertEqual(sections["knockout_factors"].items, (f"❌ {ALL_CLEAR}",))
        self.assertEqual(
            sections["recommendations"].items,
            ("1. Quantify the Kafka work", "2. Add a skills section"),
        )
        self.assertEqual(sections["overall_summary"].text, "Strong candidate.")


class LabelTests(unittest.TestCase):
    def test_status_labels(self):
        self.assertEqual(status_label("Strong Match"), "✅ Strong Match")
        self.assertEqual(status_label("PARTIAL match"), "⚠️ Partial Match")
        self.assertEqual(status_label("Missing"), "❌ Missing")
        self.assertEqual(status_label("Not found"), "❌ Missing")
        self.assertEqual(status_label("Match"), "Match")
        self.assertEqual(status_label("Exceeds"), "Match")
        self.assertEqual(status_label(""), "Match")

    def test_score_colors(self):
        self.assertEqual(score_color(80), "green")
        self.assertEqual(score_color(79.9), "orange")
        self.assertEqual(score_color(60), "orange")
        self.assertEqual(score_color(12), "red")


class NoticeTests(unittest.TestCase):
    def test_taxonomy_errors_keep_their_title(self):
        notice = notice_for(MissingInputError("job_description"))
        self.assertEqual(notice.title, "Missing Job Description")
        self.assertEqual(notice.variant, "error")

        notice = notice_for(UpstreamError(429))
        self.assertEqual(notice.title, "Analysis Failed")
        self.assertEqual(notice.description, "Gemini error 429")

    def test_unexpected_errors_get_generic_notice(self):
        notice = notice_for(KeyError())
        self.assertEqual(notice.title, "Analysis Failed")
        self.assertEqual(notice.description, "An error occurred during analysis.")


if __name__ == "__main__":
    unittest.main()
