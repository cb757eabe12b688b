"""LLM-as-a-Judge evaluators for skill answer quality.

Each evaluator scores one dimension of an answer produced with a skill as
context and returns a `JudgeScore`:
  - score: 0.0 to 1.0 (normalized)
  - reasoning: the judge's explanation, or why the judge was not called

Evaluators fail closed: a case without grading criteria scores 0 and never
reaches the judge.
"""

from __future__ import annotations

import asyncio
import re

import structlog
from langchain_core.language_models import BaseChatModel
from pydantic import BaseModel

from skill_evals.agents.answerer import language_label
from skill_evals.evals.judge import judge_llm
from skill_evals.prompts.templates import (
    ACCURACY_CRITERIA,
    CODE_QUALITY_CRITERIA,
    COMPLETENESS_CRITERIA,
    GROUNDED_CRITERIA,
    REFUSAL_CRITERIA,
)
from skill_evals.schemas.cases import ReferenceOutputs
from skill_evals.schemas.scores import CompositeResult, JudgeScore
from skill_evals.utils.code_validation import validate_code

logger = structlog.get_logger(__name__)

MISSING_CRITERIA_REASON = "No grading criteria provided"
NO_CODE_REASON = "No code blocks in answer; code quality not applicable"

_FENCED_CODE_RE = re.compile(r"```.*?```", re.DOTALL)


class EvalOutputs(BaseModel):
    """What the evaluators grade: the answer plus the context it was produced in."""

    answer: str
    skill_content: str
    question: str
    language: str = "js"


def has_fenced_code(text: str) -> bool:
    return bool(_FENCED_CODE_RE.search(text))


def _missing_criteria(reference: ReferenceOutputs | None) -> bool:
    return reference is None or not reference.has_criteria


async def _judge(
    llm: BaseChatModel,
    key: str,
    outputs: EvalOutputs,
    criteria: str,
    timeout: float | None,
) -> JudgeScore:
    result = await judge_llm(
        llm,
        question=outputs.question,
        answer=outputs.answer,
        criteria=criteria,
        skill_content=outputs.skill_content,
        timeout=timeout,
    )
    logger.info(f"{key}_eval", question=outputs.question[:50], score=result.score, kind=result.kind)
    return JudgeScore(key=key, score=result.score, reasoning=result.reasoning)


async def accuracy_evaluator(
    llm: BaseChatModel,
    outputs: EvalOutputs,
    reference: ReferenceOutputs | None,
    *,
    timeout: float | None = None,
) -> JudgeScore:
    """Is the answer factually consistent with the skill reference?"""
    if _missing_criteria(reference):
        return JudgeScore(key="accuracy", score=0.0, reasoning=MISSING_CRITERIA_REASON)
    criteria = ACCURACY_CRITERIA.format(criteria=reference.criteria)
    return await _judge(llm, "accuracy", outputs, criteria, timeout)


async def completeness_evaluator(
    llm: BaseChatModel,
    outputs: EvalOutputs,
    reference: ReferenceOutputs | None,
    *,
    timeout: float | None = None,
) -> JudgeScore:
    """Does the answer cover the key points the criteria call for?"""
    if _missing_criteria(reference):
        return JudgeScore(key="completeness", score=0.0, reasoning=MISSING_CRITERIA_REASON)
    criteria = COMPLETENESS_CRITERIA.format(criteria=reference.criteria)
    return await _judge(llm, "completeness", outputs, criteria, timeout)


async def code_quality_evaluator(
    llm: BaseChatModel,
    outputs: EvalOutputs,
    reference: ReferenceOutputs | None,
    *,
    timeout: float | None = None,
) -> JudgeScore:
    """Is the code in the answer valid and consistent with the skill's patterns?

    Answers without fenced code score 1 (nothing to penalize).
    """
    if _missing_criteria(reference):
        return JudgeScore(key="code_quality", score=0.0, reasoning=MISSING_CRITERIA_REASON)
    if not has_fenced_code(outputs.answer):
        return JudgeScore(key="code_quality", score=1.0, reasoning=NO_CODE_REASON)
    criteria = CODE_QUALITY_CRITERIA.format(language_label=language_label(outputs.language))
    return await _judge(llm, "code_quality", outputs, criteria, timeout)


async def run_quality_evaluators(
    llm: BaseChatModel,
    outputs: EvalOutputs,
    reference: ReferenceOutputs | None,
    *,
    timeout: float | None = None,
) -> CompositeResult:
    """Run accuracy, completeness, and code quality concurrently and combine them."""
    accuracy, completeness, code_quality = await asyncio.gather(
        accuracy_evaluator(llm, outputs, reference, timeout=timeout),
        completeness_evaluator(llm, outputs, reference, timeout=timeout),
        code_quality_evaluator(llm, outputs, reference, timeout=timeout),
    )
    return CompositeResult(accuracy=accuracy, completeness=completeness, code_quality=code_quality)


def code_validation_evaluator(
    answer: str,
    reference: ReferenceOutputs,
    language: str,
) -> JudgeScore:
    """Deterministic code checks wrapped as a named score."""
    result = validate_code(
        answer,
        language=language,
        required_imports=reference.required_imports,
        required_patterns=reference.required_patterns,
        forbidden_patterns=reference.forbidden_patterns,
    )
    return JudgeScore(key="code_validation", score=result.score, reasoning=result.summary())


async def negative_evaluator(
    llm: BaseChatModel,
    outputs: EvalOutputs,
    reference: ReferenceOutputs | None,
    *,
    timeout: float | None = None,
) -> JudgeScore:
    """Grade boundary adherence.

    With `expect_refusal` the answer should decline or redirect; otherwise it
    should stay within what the skill reference says.
    """
    if _missing_criteria(reference):
        return JudgeScore(key="boundary_adherence", score=0.0, reasoning=MISSING_CRITERIA_REASON)
    template = REFUSAL_CRITERIA if reference.expect_refusal else GROUNDED_CRITERIA
    criteria = template.format(criteria=reference.criteria)
    return await _judge(llm, "boundary_adherence", outputs, criteria, timeout)
