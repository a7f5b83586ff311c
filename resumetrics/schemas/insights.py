"""Schemas for interview preparation, LinkedIn profile and market intelligence analyses."""

from typing import List, Optional

from pydantic import Field

from resumetrics.schemas.base import CamelModel, Priority, Score


# ---- Interview preparation ----


class AnswerFramework(CamelModel):
    structure: Optional[str] = None
    key_points: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)


class InterviewQuestion(CamelModel):
    question: Optional[str] = None
    answer_framework: Optional[AnswerFramework] = None


class InterviewQuestionSet(CamelModel):
    """Role-specific interview questions with a framework for answering each."""

    questions: List[InterviewQuestion] = Field(default_factory=list)


# ---- LinkedIn profile ----


class ProfileSummary(CamelModel):
    name: Optional[str] = None
    current_role: Optional[str] = None
    years_of_experience: Optional[float] = None
    industry: Optional[str] = None


class StrengthsAnalysis(CamelModel):
    major_strengths: List[str] = Field(default_factory=list)
    technical_strengths: List[str] = Field(default_factory=list)
    soft_skills: List[str] = Field(default_factory=list)


class WeaknessAnalysis(CamelModel):
    areas_of_improvement: List[str] = Field(default_factory=list)
    skill_gaps: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class CareerGrowth(CamelModel):
    potential_roles: List[str] = Field(default_factory=list)
    suggested_skills: List[str] = Field(default_factory=list)
    growth_score: Optional[Score] = None


class MarketRelevance(CamelModel):
    industry_fit: Optional[str] = None
    market_score: Optional[Score] = None
    demand_level: Optional[Priority] = None


class LinkedInAnalysis(CamelModel):
    """Assessment of a LinkedIn profile."""

    profile_summary: Optional[ProfileSummary] = None
    strengths_analysis: Optional[StrengthsAnalysis] = None
    weakness_analysis: Optional[WeaknessAnalysis] = None
    career_growth: Optional[CareerGrowth] = None
    market_relevance: Optional[MarketRelevance] = None


# ---- Market intelligence ----


class GrowthSector(CamelModel):
    sector: Optional[str] = None
    growth_rate: Optional[float] = None


class EmergingRole(CamelModel):
    role: Optional[str] = None
    demand: Optional[float] = None


class SkillTrend(CamelModel):
    skill: Optional[str] = None
    demand_score: Optional[float] = None


class IndustryTrends(CamelModel):
    growth_sectors: List[GrowthSector] = Field(default_factory=list)
    emerging_roles: List[EmergingRole] = Field(default_factory=list)
    skill_trends: List[SkillTrend] = Field(default_factory=list)


class LocationCount(CamelModel):
    location: Optional[str] = None
    job_count: Optional[int] = None


class LocationSalary(CamelModel):
    location: Optional[str] = None
    avg_salary: Optional[float] = None


class RemoteWork(CamelModel):
    percentage: Optional[Score] = None
    trend: Optional[str] = None


class GeographicalAnalysis(CamelModel):
    hotspots: List[LocationCount] = Field(default_factory=list)
    salary_ranges: List[LocationSalary] = Field(default_factory=list)
    remote_work: Optional[RemoteWork] = None


class SkillDemandEntry(CamelModel):
    skill: Optional[str] = None
    demand: Optional[float] = None
    trend: Optional[str] = None


class CertificationValue(CamelModel):
    name: Optional[str] = None
    value: Optional[float] = None


class SkillDemand(CamelModel):
    technical: List[SkillDemandEntry] = Field(default_factory=list)
    soft: List[SkillDemandEntry] = Field(default_factory=list)
    certifications: List[CertificationValue] = Field(default_factory=list)


class HealthMetric(CamelModel):
    name: Optional[str] = None
    value: Optional[float] = None


class MarketHealth(CamelModel):
    overall: Optional[float] = None
    metrics: List[HealthMetric] = Field(default_factory=list)
    forecast: Optional[str] = None


class MarketAnalysis(CamelModel):
    """Market intelligence derived from a batch of job descriptions."""

    industry_trends: Optional[IndustryTrends] = None
    geographical_analysis: Optional[GeographicalAnalysis] = None
    skill_demand: Optional[SkillDemand] = None
    market_health: Optional[MarketHealth] = None
