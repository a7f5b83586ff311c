"""Structured résumé analysis, from the provider or from regex fallback."""

from typing import List, Literal, Optional

from pydantic import Field

from resumetrics.schemas.base import CamelModel, Priority, Score
from resumetrics.schemas.match_result import MatchResult


class CurrentPosition(CamelModel):
    title: Optional[str] = None
    designation: Optional[str] = None
    company: Optional[str] = None
    duration: Optional[str] = None


class PositionHistoryEntry(CurrentPosition):
    level: Optional[str] = None
    responsibilities: List[str] = Field(default_factory=list)


class RequiredSkill(CamelModel):
    skill: Optional[str] = None
    priority: Optional[Priority] = None
    current_level: Optional[str] = Field(default=None, description="none|basic|intermediate|advanced")
    action_items: List[str] = Field(default_factory=list)


class Milestone(CamelModel):
    title: Optional[str] = None
    timeframe: Optional[str] = None
    actions: List[str] = Field(default_factory=list)


class ProgressionRoadmap(CamelModel):
    target_role: Optional[str] = None
    estimated_timeframe: Optional[str] = None
    required_skills: List[RequiredSkill] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    milestones: List[Milestone] = Field(default_factory=list)


class CareerAnalysis(CamelModel):
    current_level: Optional[str] = None
    total_years_of_experience: Optional[float] = None
    position_history: List[PositionHistoryEntry] = Field(default_factory=list)
    suggested_next_role: Optional[str] = None
    career_progression: Optional[str] = None
    progression_roadmap: Optional[ProgressionRoadmap] = None


class Strengths(CamelModel):
    skills: List[str] = Field(default_factory=list)
    experience: List[str] = Field(default_factory=list)
    market_alignment: List[str] = Field(default_factory=list)


class Improvements(CamelModel):
    skills: List[str] = Field(default_factory=list)
    experience: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class ResumeAssessment(CamelModel):
    strengths: Optional[Strengths] = None
    improvements: Optional[Improvements] = None
    market_score: Optional[Score] = Field(default=None, description="Market score 0-100")
    cv_score: Optional[Score] = Field(default=None, description="CV score 0-100")


class AnalysisResult(CamelModel):
    """
    Résumé analysis as consumed by the presentation layer.

    Produced either by the analysis provider (source="ai") or by the regex
    fallback (source="fallback"). Every field may be absent; raw_text is
    always the extracted text the analysis was run on.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experience: Optional[str] = None
    current_position: Optional[CurrentPosition] = None
    career_analysis: Optional[CareerAnalysis] = None
    analysis: Optional[ResumeAssessment] = None
    raw_text: str = Field(default="", description="Extracted text the analysis was run on")
    source: Literal["ai", "fallback"] = "ai"
    job_match: Optional[MatchResult] = None


# Top-level names the résumé prompt asks the provider for
ANALYSIS_RESULT_FIELDS = (
    "name",
    "email",
    "skills",
    "experience",
    "currentPosition",
    "careerAnalysis",
    "analysis",
)
