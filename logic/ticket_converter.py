"""Text-to-tickets pipeline: prompt, completion, repair, normalize."""

import logging
from typing import Any, Callable, Dict, List, Optional

from logic.completion_parser import repair_and_parse
from logic.llm_client import generate_completion
from logic.normalizer import normalize
from logic.prompt_builder import build_prompt

logger = logging.getLogger(__name__)

CompletionFn = Callable[..., str]


def convert_text_to_tickets(
    text: str,
    *,
    generate: Optional[CompletionFn] = None,
    llm_options: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """Turn free-form text into normalized tickets via one completion call."""

    generate = generate or generate_completion
    prompt = build_prompt(text)
    raw_completion = generate(prompt, llm_options)
    logger.debug("Raw completion: %r", raw_completion)

    tickets = normalize(repair_and_parse(raw_completion))
    logger.info("Generated %d tickets from %d characters of text", len(tickets), len(text))
    return tickets
