"""Pull a JSON object out of free-form model output and validate it leniently."""

import json
import re
from typing import Any, Iterable, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_snake

from resumetrics.exceptions import AnalysisParseFailed
from resumetrics.utils.logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)

# Upper bound on pruning passes; each pass removes every value reported invalid.
MAX_PRUNE_PASSES = 100


def parse_llm_json(text: str) -> dict:
    """
    Parse the JSON object embedded in model output.

    Code-fence markers are stripped, then the span from the first ``{`` to the
    last ``}`` is decoded. Raises AnalysisParseFailed when there is no such span
    or it is not valid JSON.
    """
    raw = _FENCE_RE.sub("", text or "")
    start = raw.find("{")
    end = raw.rfind("}")
    if start == -1 or end < start:
        raise AnalysisParseFailed("No JSON object found in provider output", raw_output=text)
    try:
        data = json.loads(raw[start : end + 1])
    except json.JSONDecodeError as e:
        raise AnalysisParseFailed(f"Provider output is not valid JSON: {e}", raw_output=text) from e
    if not isinstance(data, dict):
        raise AnalysisParseFailed("Provider output is not a JSON object", raw_output=text)
    return data


def _prune(payload: Any, loc: tuple) -> Optional[tuple]:
    """
    Remove the value at ``loc`` (or its nearest reachable ancestor) and return
    the prefix of ``loc`` that was removed; None if nothing was removed.
    """
    parent: Any = None
    key: Any = None
    node = payload
    depth = 0
    for step in loc:
        if isinstance(node, dict) and step in node:
            parent, key, node = node, step, node[step]
        elif isinstance(node, dict) and isinstance(step, str) and to_snake(step) in node:
            step = to_snake(step)
            parent, key, node = node, step, node[step]
        elif isinstance(node, list) and isinstance(step, int) and 0 <= step < len(node):
            parent, key, node = node, step, node[step]
        else:
            break
        depth += 1
    if parent is None:
        return None
    del parent[key]
    return loc[:depth]


def _deepest_first(locs: Iterable[tuple]) -> list:
    """Order error locations so removing one never shifts or detaches another."""

    def sort_key(loc: tuple) -> tuple:
        steps = tuple((1, step, "") if isinstance(step, int) else (0, 0, str(step)) for step in loc)
        return (len(loc), steps)

    return sorted({tuple(loc) for loc in locs}, key=sort_key, reverse=True)


def validate_loosely(model: Type[ModelT], payload: dict) -> ModelT:
    """
    Validate provider JSON against ``model``, discarding values of the wrong shape.

    Every value a validation pass reports is dropped and validation is retried,
    so one malformed nested field does not discard the rest of the payload.
    """
    data = json.loads(json.dumps(payload))
    for _ in range(MAX_PRUNE_PASSES):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            errors = e.errors()
            removed: list = []
            for loc in _deepest_first(error["loc"] for error in errors):
                if any(loc[: len(prefix)] == prefix for prefix in removed):
                    continue
                prefix = _prune(data, loc)
                if prefix is not None:
                    removed.append(prefix)
            logger.warning(
                "Dropping %s invalid %s field(s): %s",
                len(errors),
                model.__name__,
                ", ".join(".".join(str(p) for p in error["loc"]) for error in errors[:10]),
            )
            if not removed:
                raise AnalysisParseFailed(f"Provider output does not fit {model.__name__}: {e}") from e
    raise AnalysisParseFailed(f"Provider output does not fit {model.__name__}: too many invalid fields")


def require_any_field(payload: dict, fields: Iterable[str], what: Optional[str] = None) -> None:
    """Reject payloads that carry none of the documented top-level field names."""
    fields = tuple(fields)
    if not any(f in payload for f in fields):
        raise AnalysisParseFailed(
            f"Provider JSON has none of the expected {what or 'result'} fields: {', '.join(fields)}",
            raw_output=json.dumps(payload)[:500],
        )
