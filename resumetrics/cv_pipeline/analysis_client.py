"""Structured résumé analysis through the analysis provider, with regex fallback."""

import asyncio
from typing import Optional

import httpx

from resumetrics.cv_pipeline.fallback_extractor import extract_with_regex
from resumetrics.cv_pipeline.prompts import build_match_prompt, build_resume_prompt
from resumetrics.exceptions import AnalysisError
from resumetrics.schemas.analysis_result import ANALYSIS_RESULT_FIELDS, AnalysisResult
from resumetrics.schemas.match_result import MATCH_RESULT_FIELDS, MatchResult
from resumetrics.services.analysis_provider import AnalysisProvider, get_analysis_provider
from resumetrics.services.response_parser import parse_llm_json, require_any_field, validate_loosely
from resumetrics.utils.logger import get_logger

logger = get_logger(__name__)


class AnalysisClient:
    """
    Turns extracted résumé text into an AnalysisResult.

    The full résumé text (and job description, when given) is sent to the
    configured third-party provider.
    """

    def __init__(self, provider: Optional[AnalysisProvider] = None) -> None:
        self._provider = provider or get_analysis_provider()

    @property
    def provider(self) -> AnalysisProvider:
        return self._provider

    async def _analyze_with_provider(self, text: str) -> AnalysisResult:
        output = await self._provider.generate(build_resume_prompt(text))
        payload = parse_llm_json(output)
        require_any_field(payload, ANALYSIS_RESULT_FIELDS, "resume analysis")
        # Tagging fields are ours, not the model's.
        for key in ("rawText", "raw_text", "source", "jobMatch", "job_match"):
            payload.pop(key, None)
        result = validate_loosely(AnalysisResult, payload)
        return result.model_copy(update={"raw_text": text, "source": "ai"})

    async def analyze_resume(self, text: str) -> AnalysisResult:
        """Provider analysis of ``text``; falls back to regex extraction on any provider or parse failure."""
        try:
            result = await self._analyze_with_provider(text)
        except (AnalysisError, httpx.HTTPError) as e:
            logger.warning("Falling back to regex extraction: %s", e)
            return extract_with_regex(text)
        logger.info("Resume analysis via %s: %s skills", self._provider.name, len(result.skills))
        return result

    async def match_job(self, text: str, job_description: str) -> MatchResult:
        """Match ``text`` against ``job_description``. No fallback: failures propagate."""
        output = await self._provider.generate(build_match_prompt(text, job_description))
        payload = parse_llm_json(output)
        require_any_field(payload, MATCH_RESULT_FIELDS, "job match")
        result = validate_loosely(MatchResult, payload)
        logger.info("Job match via %s: matchRate=%s", self._provider.name, result.match_rate)
        return result

    async def analyze(self, text: str, job_description: Optional[str] = None) -> AnalysisResult:
        """
        Analyze résumé text; with a job description, also match it and embed
        the MatchResult as ``job_match``. A failed match propagates.
        """
        if not job_description or not job_description.strip():
            return await self.analyze_resume(text)
        resume_task = asyncio.ensure_future(self.analyze_resume(text))
        try:
            match = await self.match_job(text, job_description)
        except BaseException:
            # The résumé call must not outlive a failed match.
            resume_task.cancel()
            await asyncio.gather(resume_task, return_exceptions=True)
            raise
        result = await resume_task
        return result.model_copy(update={"job_match": match})


def run_analysis(text: str, job_description: Optional[str] = None, client: Optional[AnalysisClient] = None) -> AnalysisResult:
    """
    Analyze text from a sync context. Runs its own event loop,
    so it must not be called from inside a running loop.
    """
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        client = client or AnalysisClient()
        return loop.run_until_complete(client.analyze(text, job_description))
    finally:
        loop.close()
