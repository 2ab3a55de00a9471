"""
analyzer.py

Runs one resume-vs-job-description analysis against Gemini.

The same prompt is sent twice: first at temperature 0 so the score and match
percentage are stable between runs, then at a higher temperature for the
descriptive fields. Either reply may be an error object
(``{"error": "..."}``) meaning the model rejected the input.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from config import Settings, load_settings
from errors import (
    ConfigurationError,
    InvalidInputError,
    MalformedResponseError,
    MissingInputError,
)
from matching.llm_gemini import GeminiClient
from matching.prompts import build_prompt
from matching.response import parse_json_payload
from schemas import ALL_CLEAR, AnalysisReport, ModelAnalysis

logger = logging.getLogger(__name__)


def check_error_sentinel(parsed: Dict[str, Any]) -> None:
    if "error" in parsed:
        message = str(parsed.get("error") or "").strip()
        raise InvalidInputError(message or "The resume or job description could not be evaluated.")


def validate_analysis(parsed: Dict[str, Any]) -> ModelAnalysis:
    try:
        return ModelAnalysis.model_validate(parsed)
    except ValidationError as e:
        logger.warning(f"Model JSON failed validation: {e.error_count()} error(s)")
        raise MalformedResponseError(
            "The AI response was missing required fields or had out-of-range scores. Please try again."
        ) from e


def merge_report(numeric: ModelAnalysis) -> AnalysisReport:
    """Build the report; every field comes from the deterministic (numeric) reply."""
    return AnalysisReport(
        score=numeric.ATS_Score,
        match_percentage=numeric.Resume_to_JD_Match.percentage,
        comparison_rows=tuple(numeric.Resume_to_JD_Match.comparison_table),
        knockout_factors=tuple(numeric.ATS_Knockout_Factors or [ALL_CLEAR]),
        strengths=tuple(numeric.Strengths or []),
        conclusion=numeric.Conclusion or "",
        recommendations=tuple(numeric.Recommendations or []),
        overall_summary=numeric.Overall_Summary or "",
    )


def analyze(
    resume_text: str,
    job_description: str,
    client: Optional[GeminiClient] = None,
    settings: Optional[Settings] = None,
) -> AnalysisReport:
    """
    Score a resume against a job description.

    Args:
        resume_text: plain resume text (extracted or pasted)
        job_description: pasted job description
        client: anything with ``generate(prompt, temperature) -> str``
        settings: defaults to ``load_settings()``

    Returns:
        AnalysisReport built from the numeric reply.

    Raises:
        AnalyzerError subclasses; nothing is retried.
    """
    if not resume_text or not resume_text.strip():
        raise MissingInputError("resume")
    if not job_description or not job_description.strip():
        raise MissingInputError("job_description")

    settings = settings or load_settings()
    if not settings.api_key:
        raise ConfigurationError("GEMINI_API_KEY is not set")
    client = client or GeminiClient(settings)

    prompt = build_prompt(resume_text, job_description)

    numeric_raw = client.generate(prompt, settings.numeric_temperature)
    numeric_json = parse_json_payload(numeric_raw)
    check_error_sentinel(numeric_json)
    numeric = validate_analysis(numeric_json)

    descriptive_raw = client.generate(prompt, settings.descriptive_temperature)
    try:
        descriptive_json = parse_json_payload(descriptive_raw)
    except MalformedResponseError:
        logger.info("Descriptive reply was not JSON; keeping the numeric result")
    else:
        check_error_sentinel(descriptive_json)

    # TODO: read Strengths/Conclusion/Recommendations/Overall_Summary from the
    # descriptive reply once product confirms that is the intended source.
    report = merge_report(numeric)
    logger.info(
        f"Analysis complete: score={report.score.value:g} match={report.match_percentage:g}% "
        f"rows={len(report.comparison_rows)}"
    )
    return report
