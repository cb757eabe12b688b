"""LLM-as-a-judge invocation.

`judge_llm` sends one rubric-constrained prompt and returns a tagged result:
a `JudgeVerdict` when the response holds a score object, a
`JudgeParseFailure` otherwise. Parse problems never raise; errors from the
model client itself (network, auth, provider timeouts) propagate to the
caller.

The judge expects a JSON object anywhere in its text:
    {"score": <number 0-1>, "reasoning": "<brief explanation>"}
"""

from __future__ import annotations

import asyncio
import json
import math
from typing import Any

import structlog
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_core.utils.json import parse_json_markdown

from skill_evals.prompts.templates import JUDGE_SYSTEM, JUDGE_TASK
from skill_evals.schemas.scores import JudgeParseFailure, JudgeResult, JudgeVerdict

logger = structlog.get_logger(__name__)

PARSE_FAILURE_PREFIX = "Failed to parse evaluator response"
EXCERPT_CHARS = 200

_decoder = json.JSONDecoder()


def coerce_score(value: Any) -> float:
    """Turn a judge-provided score into a float in [0, 1].

    Numbers and numeric strings are accepted; anything else (including
    booleans and NaN) becomes 0.
    """
    if isinstance(value, bool):
        return 0.0
    try:
        score = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(score):
        return 0.0
    return max(0.0, min(1.0, score))


def _is_score_object(data: Any) -> bool:
    return isinstance(data, dict) and "score" in data


def _find_score_object(text: str) -> dict | None:
    """Return the first well-formed JSON object with a "score" key in `text`.

    Objects are tried in text order, fenced or not. A response nested deeper
    than the decoder can follow is rejected as a whole.
    """
    start = text.find("{")
    while start != -1:
        try:
            data, _ = _decoder.raw_decode(text, start)
        except RecursionError:
            return None
        except ValueError:
            data = None
        if _is_score_object(data):
            return data
        start = text.find("{", start + 1)

    try:
        data = parse_json_markdown(text, parser=json.loads)
    except (ValueError, TypeError, RecursionError):
        return None
    return data if _is_score_object(data) else None


def parse_failure(text: str) -> JudgeParseFailure:
    return JudgeParseFailure(reasoning=f"{PARSE_FAILURE_PREFIX}: {text[:EXCERPT_CHARS]}")


def parse_judge_response(text: str) -> JudgeResult:
    """Extract a verdict from judge output, tolerating surrounding prose."""
    data = _find_score_object(text)
    if data is None:
        return parse_failure(text)

    reasoning = data.get("reasoning")
    return JudgeVerdict(
        score=coerce_score(data.get("score")),
        reasoning=str(reasoning) if reasoning else "",
    )


def response_text(response: BaseMessage) -> str:
    """Flatten message content that may be a string or a list of content blocks."""
    content = response.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and "text" in block:
            parts.append(str(block["text"]))
    return "".join(parts)


def build_judge_messages(
    *,
    question: str,
    answer: str,
    criteria: str,
    skill_content: str,
) -> list[BaseMessage]:
    return [
        SystemMessage(content=JUDGE_SYSTEM.format()),
        HumanMessage(
            content=JUDGE_TASK.format(
                skill_content=skill_content,
                question=question,
                answer=answer,
                criteria=criteria,
            )
        ),
    ]


async def judge_llm(
    llm: BaseChatModel,
    *,
    question: str,
    answer: str,
    criteria: str,
    skill_content: str,
    timeout: float | None = None,
) -> JudgeResult:
    """Score an answer against criteria with the judge model.

    Args:
        llm: Shared judge model, constructed once at zero temperature.
        question: The question the answer responds to.
        answer: Candidate answer to grade.
        criteria: Grading criteria (already focused on one dimension).
        skill_content: Skill reference the answer should be consistent with.
        timeout: Optional per-call limit in seconds. A call that runs over is
            scored like an unparsable response.

    Returns:
        JudgeVerdict or JudgeParseFailure.
    """
    messages = build_judge_messages(
        question=question,
        answer=answer,
        criteria=criteria,
        skill_content=skill_content,
    )

    call = llm.ainvoke(messages)
    if timeout:
        try:
            response = await asyncio.wait_for(call, timeout=timeout)
        except TimeoutError:
            logger.warning("judge_timeout", timeout=timeout)
            return JudgeParseFailure(reasoning=f"Judge call timed out after {timeout:g}s")
    else:
        response = await call

    text = response_text(response)
    result = parse_judge_response(text)
    if isinstance(result, JudgeParseFailure):
        logger.warning("judge_parse_failure", excerpt=text[:80])
    return result
