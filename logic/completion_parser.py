"""Repair and parse model completions that should contain a JSON array."""

from __future__ import annotations

import json
import logging
from typing import Any, List

from logic.errors import MalformedOutputError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name!r}")


def repair_completion(raw_completion: str) -> str:
    """Close a completion that was cut off at the array's closing bracket.

    Only the common truncation shapes are handled: a missing ``]`` (with or
    without a dangling ``,``) and a missing leading ``[``.
    """

    repaired = raw_completion.strip()
    if not repaired.endswith("]"):
        if repaired.endswith(","):
            repaired = repaired[:-1]
        repaired += "\n]"
    if not repaired.startswith("["):
        repaired = "[" + repaired
    return repaired


def repair_and_parse(raw_completion: str) -> List[Any]:
    repaired = repair_completion(raw_completion)
    try:
        payload = json.loads(repaired, parse_constant=_reject_constant)
    except ValueError as exc:
        logger.debug("Repaired completion is not valid JSON: %r", repaired)
        raise MalformedOutputError(
            f"Unable to parse completion as JSON: {exc}",
            details=f"{type(exc).__name__}: {exc}",
        ) from exc

    if not isinstance(payload, list):
        raise MalformedOutputError("Completion must be a JSON array of tickets.")
    return payload
