"""Analysis providers: send one prompt to a generative model, return its text output."""

from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx
from openai import AsyncOpenAI, OpenAIError

from resumetrics.config import (
    ANALYSIS_PROVIDER,
    GEMINI_API_KEY,
    GEMINI_API_URL,
    HTTP_TIMEOUT_SECONDS,
    MODEL_NAME,
    OPENAI_API_KEY,
)
from resumetrics.exceptions import ProviderUnavailable
from resumetrics.utils.logger import get_logger

logger = get_logger(__name__)


class AnalysisProvider(ABC):
    """Abstract generative-analysis provider."""

    name: str = "provider"

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Send a single prompt and return the model's text output.
        Raises ProviderUnavailable on transport, HTTP or envelope errors.
        """
        ...


class GeminiAnalysisProvider(AnalysisProvider):
    """Google Gemini ``generateContent`` REST endpoint, authenticated by an API-key query parameter."""

    name = "gemini"

    def __init__(
        self,
        api_key: str = GEMINI_API_KEY,
        api_url: str = GEMINI_API_URL,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._api_url = api_url
        self._timeout = timeout
        self._transport = transport

    @staticmethod
    def _output_text(data: Any) -> str:
        """candidates[0].content.parts[0].text of a generateContent response."""
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderUnavailable(f"Malformed Gemini response envelope: missing {e}") from e
        if not isinstance(text, str):
            raise ProviderUnavailable("Malformed Gemini response envelope: text is not a string")
        return text

    async def generate(self, prompt: str) -> str:
        if not self._api_key:
            logger.error("GEMINI_API_KEY is not set; cannot call the analysis provider")
            raise ProviderUnavailable("GEMINI_API_KEY is not set")

        body = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self._api_url, params={"key": self._api_key}, json=body)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            # Exception text embeds the request URL (and so the key); log the status only.
            status = e.response.status_code
            logger.error("Gemini HTTP error: %s", status)
            raise ProviderUnavailable("Gemini request failed", status_code=status) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Gemini request failed: %s", type(e).__name__)
            raise ProviderUnavailable(f"Gemini request failed: {type(e).__name__}") from e
        except ValueError as e:
            logger.error("Gemini returned a non-JSON body")
            raise ProviderUnavailable("Gemini returned a non-JSON body") from e

        text = self._output_text(data)
        logger.info("Gemini returned %s characters", len(text))
        return text


class OpenAIAnalysisProvider(AnalysisProvider):
    """OpenAI chat completions (e.g. gpt-4o-mini)."""

    name = "openai"

    def __init__(
        self,
        api_key: str = OPENAI_API_KEY,
        model: str = MODEL_NAME,
        client: Optional[AsyncOpenAI] = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._client = client
        self._timeout = timeout

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key, timeout=self._timeout)
        return self._client

    async def generate(self, prompt: str) -> str:
        if self._client is None and not self._api_key:
            logger.error("OPENAI_API_KEY is not set; cannot call the analysis provider")
            raise ProviderUnavailable("OPENAI_API_KEY is not set")
        try:
            response = await self._get_client().chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.1,
            )
        except OpenAIError as e:
            logger.error("OpenAI request failed: %s", type(e).__name__)
            raise ProviderUnavailable(
                f"OpenAI request failed: {type(e).__name__}",
                status_code=getattr(e, "status_code", None),
            ) from e
        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message or not choice.message.content:
            raise ProviderUnavailable("OpenAI returned an empty completion")
        return choice.message.content


def get_analysis_provider(provider: Optional[str] = None) -> AnalysisProvider:
    """
    Return the configured analysis provider (dependency injection).
    provider: override config; None uses ANALYSIS_PROVIDER.
    """
    p = (provider or ANALYSIS_PROVIDER).strip().lower()
    if p == "openai":
        return OpenAIAnalysisProvider()
    if p != "gemini":
        logger.warning("Unknown ANALYSIS_PROVIDER %r; using gemini", p)
    return GeminiAnalysisProvider()
