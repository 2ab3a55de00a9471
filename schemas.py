from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional, Tuple

ALL_CLEAR = "All Clear 🚀"

MATCH_STATUSES = ("Strong Match", "Match", "Partial Match", "Missing")


def _text_or_empty(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


# Upload turned into text (text is empty for DOC/DOCX)
class IngestResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_name: str
    media_type: str
    text: str = ""
    warning: Optional[str] = None


# ATS score block, shared by the model's JSON and the final report
class ATSScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: float = Field(ge=0, le=100)
    reason: str = ""

    @field_validator("reason", mode="before")
    @classmethod
    def _reason(cls, v):
        return _text_or_empty(v)


# One row of the requirement-by-requirement comparison
class ComparisonRow(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    requirement: str = Field("", alias="Job_Requirement")
    evidence: str = Field("", alias="Resume_Evidence")
    # Free text; unknown or null values are shown with the generic label
    status: str = Field("", alias="Match_Status")

    @field_validator("requirement", "evidence", "status", mode="before")
    @classmethod
    def _null_to_empty(cls, v):
        return _text_or_empty(v)


class ResumeToJDMatch(BaseModel):
    percentage: float = Field(ge=0, le=100)
    comparison_table: List[ComparisonRow] = []

    @field_validator("comparison_table", mode="before")
    @classmethod
    def _rows(cls, v):
        if v is None:
            return []
        return [row for row in v if isinstance(row, dict)] if isinstance(v, list) else []


# JSON object returned by the model for a normal (non-error) answer.
# Only the two scores are strict; everything else is coerced for display.
class ModelAnalysis(BaseModel):
    ATS_Score: ATSScore
    Resume_to_JD_Match: ResumeToJDMatch
    ATS_Knockout_Factors: Optional[List[str]] = None
    Strengths: Optional[List[str]] = None
    Conclusion: Optional[str] = None
    Recommendations: Optional[List[str]] = None
    Overall_Summary: Optional[str] = None

    @field_validator("ATS_Knockout_Factors", "Strengths", "Recommendations", mode="before")
    @classmethod
    def _as_list(cls, v):
        if v is None:
            return None
        if isinstance(v, str):
            return [v] if v.strip() else []
        if isinstance(v, list):
            return [_text_or_empty(item) for item in v if item is not None]
        return [_text_or_empty(v)]

    @field_validator("Conclusion", "Overall_Summary", mode="before")
    @classmethod
    def _as_text(cls, v):
        return None if v is None else _text_or_empty(v)


# Merged result shown to the user
class AnalysisReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: ATSScore
    match_percentage: float = Field(ge=0, le=100)
    comparison_rows: Tuple[ComparisonRow, ...] = ()
    knockout_factors: Tuple[str, ...] = (ALL_CLEAR,)
    strengths: Tuple[str, ...] = ()
    conclusion: str = ""
    recommendations: Tuple[str, ...] = ()
    overall_summary: str = ""
