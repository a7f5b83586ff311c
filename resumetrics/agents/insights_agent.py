"""Insights Agent: interview questions, LinkedIn profile analysis and market intelligence."""

import json
import re
from typing import List, Optional, Sequence

from resumetrics.schemas.analysis_result import AnalysisResult
from resumetrics.schemas.insights import InterviewQuestionSet, LinkedInAnalysis, MarketAnalysis
from resumetrics.services.analysis_provider import AnalysisProvider, get_analysis_provider
from resumetrics.services.response_parser import parse_llm_json, require_any_field, validate_loosely
from resumetrics.utils.logger import get_logger

logger = get_logger(__name__)

LINKEDIN_PROFILE_URL_RE = re.compile(r"^https?://([\w]+\.)?linkedin\.com/in/[A-Za-z0-9_-]+/?$")

INTERVIEW_QUESTIONS_PROMPT = """Based on this CV data, generate {count} role-specific interview questions
and provide a framework for answering each question.
Focus on the candidate's current role as {current_role}
and their target role as {target_role}.

Return only valid JSON matching this structure:
{{
  "questions": [{{
    "question": "string",
    "answerFramework": {{
      "structure": "string",
      "keyPoints": ["string"],
      "tips": ["string"]
    }}
  }}]
}}

CV Data: {cv_data}"""

LINKEDIN_PROFILE_PROMPT = """Analyze this LinkedIn profile and provide a JSON response with:
1. Professional assessment
2. Key strengths and weaknesses
3. Skill evaluation
4. Career growth potential

Return only valid JSON matching this structure:
{{
  "profileSummary": {{
    "name": "string",
    "currentRole": "string",
    "yearsOfExperience": number,
    "industry": "string"
  }},
  "strengthsAnalysis": {{
    "majorStrengths": ["string"],
    "technicalStrengths": ["string"],
    "softSkills": ["string"]
  }},
  "weaknessAnalysis": {{
    "areasOfImprovement": ["string"],
    "skillGaps": ["string"],
    "recommendations": ["string"]
  }},
  "careerGrowth": {{
    "potentialRoles": ["string"],
    "suggestedSkills": ["string"],
    "growthScore": number between 0 and 100
  }},
  "marketRelevance": {{
    "industryFit": "string",
    "marketScore": number between 0 and 100,
    "demandLevel": "high|medium|low"
  }}
}}

Profile data: {profile}"""

MARKET_ANALYSIS_PROMPT = """Analyze these job descriptions and provide market intelligence data.
Return only valid JSON matching this structure:
{{
  "industryTrends": {{
    "growthSectors": [{{"sector": "string", "growthRate": number}}],
    "emergingRoles": [{{"role": "string", "demand": number}}],
    "skillTrends": [{{"skill": "string", "demandScore": number}}]
  }},
  "geographicalAnalysis": {{
    "hotspots": [{{"location": "string", "jobCount": number}}],
    "salaryRanges": [{{"location": "string", "avgSalary": number}}],
    "remoteWork": {{"percentage": number, "trend": "string"}}
  }},
  "skillDemand": {{
    "technical": [{{"skill": "string", "demand": number, "trend": "string"}}],
    "soft": [{{"skill": "string", "demand": number}}],
    "certifications": [{{"name": "string", "value": number}}]
  }},
  "marketHealth": {{
    "overall": number,
    "metrics": [{{"name": "string", "value": number}}],
    "forecast": "string"
  }}
}}

Job descriptions: {job_descriptions}"""


def is_valid_linkedin_url(url: str) -> bool:
    """True for public profile URLs such as https://www.linkedin.com/in/jane-doe/."""
    return bool(LINKEDIN_PROFILE_URL_RE.match((url or "").strip()))


class InsightsAgent:
    """Secondary analyses built on the same provider. No fallback: failures propagate."""

    def __init__(self, provider: Optional[AnalysisProvider] = None) -> None:
        self._provider = provider or get_analysis_provider()

    async def generate_interview_questions(self, analysis: AnalysisResult, count: int = 5) -> InterviewQuestionSet:
        """Interview questions for the candidate's current role and roadmap target role."""
        if count < 1:
            raise ValueError("count must be at least 1")
        current_role = analysis.current_position.title if analysis.current_position else None
        roadmap = analysis.career_analysis.progression_roadmap if analysis.career_analysis else None
        target_role = (roadmap.target_role if roadmap else None) or (
            analysis.career_analysis.suggested_next_role if analysis.career_analysis else None
        )
        cv_data = analysis.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"raw_text", "job_match"})
        prompt = INTERVIEW_QUESTIONS_PROMPT.format(
            count=count,
            current_role=current_role or "not stated",
            target_role=target_role or "not stated",
            cv_data=json.dumps(cv_data),
        )
        payload = parse_llm_json(await self._provider.generate(prompt))
        require_any_field(payload, ("questions",), "interview questions")
        result = validate_loosely(InterviewQuestionSet, payload)
        logger.info("Generated %s interview questions", len(result.questions))
        return result

    async def analyze_linkedin_profile(self, profile_text: str) -> LinkedInAnalysis:
        """Assess a LinkedIn profile given as exported or pasted text."""
        if not (profile_text or "").strip():
            raise ValueError("profile_text is empty")
        payload = parse_llm_json(await self._provider.generate(LINKEDIN_PROFILE_PROMPT.format(profile=profile_text)))
        require_any_field(
            payload,
            ("profileSummary", "strengthsAnalysis", "weaknessAnalysis", "careerGrowth", "marketRelevance"),
            "LinkedIn analysis",
        )
        return validate_loosely(LinkedInAnalysis, payload)

    async def analyze_market(self, job_descriptions: Sequence[str]) -> MarketAnalysis:
        """Market intelligence (trends, geography, skill demand, health) from job descriptions."""
        descriptions: List[str] = [d.strip() for d in job_descriptions if d and d.strip()]
        if not descriptions:
            raise ValueError("At least one job description is required")
        prompt = MARKET_ANALYSIS_PROMPT.format(job_descriptions=json.dumps(descriptions))
        payload = parse_llm_json(await self._provider.generate(prompt))
        require_any_field(
            payload,
            ("industryTrends", "geographicalAnalysis", "skillDemand", "marketHealth"),
            "market analysis",
        )
        result = validate_loosely(MarketAnalysis, payload)
        logger.info("Market analysis over %s job descriptions", len(descriptions))
        return result
