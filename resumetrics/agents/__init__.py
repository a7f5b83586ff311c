"""Agent exports."""

from .insights_agent import InsightsAgent, is_valid_linkedin_url

__all__ = ["InsightsAgent", "is_valid_linkedin_url"]
