"""Résumé vs. job description match produced by the analysis provider."""

from typing import List, Optional

from pydantic import Field

from resumetrics.schemas.base import CamelModel, Priority, Score


class CvSummary(CamelModel):
    position: Optional[str] = None
    experience: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)


class JobSummary(CamelModel):
    title: Optional[str] = None
    responsibilities: List[str] = Field(default_factory=list)
    requirements: List[str] = Field(default_factory=list)


class Improvement(CamelModel):
    """One suggested change to the CV, tagged with a priority."""

    category: Optional[str] = None
    details: Optional[str] = None
    priority: Optional[Priority] = None


class MatchAnalysis(CamelModel):
    strengths: List[str] = Field(default_factory=list)
    gaps: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class MatchResult(CamelModel):
    """Match of a CV against a job description. Every field may be absent."""

    match_rate: Optional[Score] = Field(default=None, description="Match rate 0-100")
    suitable: Optional[bool] = Field(default=None, description="Whether the candidate suits the role")
    cv_summary: Optional[CvSummary] = None
    job_summary: Optional[JobSummary] = None
    improvements: List[Improvement] = Field(default_factory=list, description="Ordered improvement list")
    analysis: Optional[MatchAnalysis] = None


MATCH_RESULT_FIELDS = ("matchRate", "suitable", "cvSummary", "jobSummary", "improvements", "analysis")
