"""Shared pydantic base and field types for provider-produced JSON."""

from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _lowercase(value: Any) -> Any:
    return value.strip().lower() if isinstance(value, str) else value


def _clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


# Provider output is camelCase JSON; attributes stay snake_case.
class CamelModel(BaseModel):
    """Lenient model: camelCase aliases, either naming accepted, unknown fields kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_json_dict(self) -> dict:
        """Dump using the camelCase wire names, JSON-compatible values only."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


Priority = Annotated[Literal["high", "medium", "low"], BeforeValidator(_lowercase)]
Score = Annotated[float, AfterValidator(_clamp_score)]
