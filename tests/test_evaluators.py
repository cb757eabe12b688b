"""Tests for the quality evaluators and composite scoring (mocked judge)."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

from skill_evals.evals.evaluators import (
    MISSING_CRITERIA_REASON,
    NO_CODE_REASON,
    EvalOutputs,
    accuracy_evaluator,
    code_quality_evaluator,
    code_validation_evaluator,
    completeness_evaluator,
    negative_evaluator,
    run_quality_evaluators,
)
from skill_evals.schemas.cases import ReferenceOutputs
from skill_evals.schemas.scores import (
    CompositeResult,
    JudgeScore,
    coding_composite,
    compute_composite,
)

CODE_ANSWER = "Use this:\n```ts\nconst agent = createAgent({ tools });\n```"
PROSE_ANSWER = "Agents pick tools at runtime."


def _outputs(answer: str = CODE_ANSWER) -> EvalOutputs:
    return EvalOutputs(answer=answer, skill_content="SKILL", question="How?", language="js")


def _human_prompt(llm: MagicMock, call: int = 0) -> str:
    messages = llm.ainvoke.await_args_list[call].args[0]
    return messages[1].content


# ---------------------------------------------------------------------------
# Composite arithmetic
# ---------------------------------------------------------------------------


class TestComposite:
    @pytest.mark.parametrize(
        "triple",
        [(0.0, 0.0, 0.0), (1.0, 1.0, 1.0), (0.5, 0.2, 0.9), (1.0, 0.0, 0.0), (0.33, 0.66, 0.99)],
    )
    def test_weighted_identity(self, triple):
        a, c, q = triple
        result = CompositeResult(
            accuracy=JudgeScore(key="accuracy", score=a),
            completeness=JudgeScore(key="completeness", score=c),
            code_quality=JudgeScore(key="code_quality", score=q),
        )
        assert result.composite == pytest.approx(0.4 * a + 0.3 * c + 0.3 * q)
        assert result.composite == pytest.approx(compute_composite(a, c, q))

    def test_coding_composite_is_even_blend(self):
        assert coding_composite(0.8, 0.4) == pytest.approx(0.6)


# ---------------------------------------------------------------------------
# Fail-closed criteria
# ---------------------------------------------------------------------------


class TestMissingCriteria:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("reference", [None, ReferenceOutputs(), ReferenceOutputs(criteria="   ")])
    async def test_every_evaluator_scores_zero_without_judge(self, judge_factory, reference):
        llm = judge_factory('{"score": 1, "reasoning": "x"}')
        result = await run_quality_evaluators(llm, _outputs(), reference)
        assert result.accuracy.score == 0
        assert result.completeness.score == 0
        assert result.code_quality.score == 0
        assert result.composite == 0
        assert result.accuracy.reasoning == MISSING_CRITERIA_REASON
        assert llm.ainvoke.await_count == 0

    @pytest.mark.asyncio
    async def test_negative_evaluator_fails_closed(self, judge_factory):
        llm = judge_factory('{"score": 1, "reasoning": "x"}')
        result = await negative_evaluator(llm, _outputs(), ReferenceOutputs(expect_refusal=True))
        assert result == JudgeScore(key="boundary_adherence", score=0.0, reasoning=MISSING_CRITERIA_REASON)
        llm.ainvoke.assert_not_awaited()


# ---------------------------------------------------------------------------
# Code quality short-circuit
# ---------------------------------------------------------------------------


class TestCodeQuality:
    @pytest.mark.asyncio
    async def test_no_code_scores_one_without_judge(self):
        llm = MagicMock()
        llm.ainvoke = AsyncMock(side_effect=RuntimeError("judge unavailable"))
        result = await code_quality_evaluator(llm, _outputs(PROSE_ANSWER), ReferenceOutputs(criteria="c"))
        assert result.score == 1.0
        assert result.reasoning == NO_CODE_REASON
        llm.ainvoke.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_code_is_judged_with_language(self, judge_factory):
        llm = judge_factory('{"score": 0.5, "reasoning": "meh"}')
        result = await code_quality_evaluator(llm, _outputs(), ReferenceOutputs(criteria="c"))
        assert result.score == 0.5
        assert "syntactically valid TypeScript" in _human_prompt(llm)


# ---------------------------------------------------------------------------
# Sub-evaluators and concurrency
# ---------------------------------------------------------------------------


class TestQualityEvaluators:
    @pytest.mark.asyncio
    async def test_accuracy_prompt_embeds_criteria(self, judge_ok):
        result = await accuracy_evaluator(judge_ok, _outputs(), ReferenceOutputs(criteria="Mention createAgent"))
        assert result.key == "accuracy"
        assert result.score == 0.8
        prompt = _human_prompt(judge_ok)
        assert "Evaluate ACCURACY" in prompt
        assert "Mention createAgent" in prompt

    @pytest.mark.asyncio
    async def test_completeness_prompt(self, judge_ok):
        result = await completeness_evaluator(judge_ok, _outputs(), ReferenceOutputs(criteria="All steps"))
        assert result.key == "completeness"
        assert "Evaluate COMPLETENESS" in _human_prompt(judge_ok)

    @pytest.mark.asyncio
    async def test_composite_from_three_judge_calls(self, judge_ok):
        result = await run_quality_evaluators(judge_ok, _outputs(), ReferenceOutputs(criteria="c"))
        assert judge_ok.ainvoke.await_count == 3
        assert result.composite == pytest.approx(0.8)

    @pytest.mark.asyncio
    async def test_parse_failure_becomes_low_score(self, judge_factory):
        llm = judge_factory("not json")
        result = await run_quality_evaluators(llm, _outputs(PROSE_ANSWER), ReferenceOutputs(criteria="c"))
        assert result.accuracy.score == 0
        assert result.completeness.score == 0
        assert result.code_quality.score == 1.0
        assert result.composite == pytest.approx(0.3)

    @pytest.mark.asyncio
    async def test_sub_evaluations_run_concurrently(self):
        in_flight = 0
        peak = 0

        async def ainvoke(_messages):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return AIMessage(content='{"score": 1, "reasoning": "ok"}')

        llm = MagicMock()
        llm.ainvoke = ainvoke
        await run_quality_evaluators(llm, _outputs(), ReferenceOutputs(criteria="c"))
        assert peak == 3


# ---------------------------------------------------------------------------
# Boundary adherence
# ---------------------------------------------------------------------------


class TestNegativeEvaluator:
    @pytest.mark.asyncio
    async def test_refusal_rubric(self, judge_ok):
        reference = ReferenceOutputs(criteria="Say TensorFlow is out of scope", expect_refusal=True)
        result = await negative_evaluator(judge_ok, _outputs(PROSE_ANSWER), reference)
        assert result.key == "boundary_adherence"
        prompt = _human_prompt(judge_ok)
        assert "outside the scope" in prompt
        assert "Say TensorFlow is out of scope" in prompt

    @pytest.mark.asyncio
    async def test_grounded_rubric(self, judge_ok):
        reference = ReferenceOutputs(criteria="Mention recursion limits", expect_refusal=False)
        await negative_evaluator(judge_ok, _outputs(PROSE_ANSWER), reference)
        prompt = _human_prompt(judge_ok)
        assert "stays within the information" in prompt
        assert "outside the scope" not in prompt

    @pytest.mark.asyncio
    async def test_single_judge_call(self, judge_ok):
        await negative_evaluator(judge_ok, _outputs(), ReferenceOutputs(criteria="c", expect_refusal=True))
        judge_ok.ainvoke.assert_awaited_once()


# ---------------------------------------------------------------------------
# Deterministic code validation wrapper
# ---------------------------------------------------------------------------


def test_code_validation_evaluator_key_and_score():
    reference = ReferenceOutputs(
        criteria="c",
        required_imports=["zod"],
        required_patterns=["createAgent", "bindTools("],
        forbidden_patterns=["eval("],
    )
    answer = '```ts\nimport { z } from "zod";\nconst agent = createAgent({});\n```'
    result = code_validation_evaluator(answer, reference, "js")
    assert result.key == "code_validation"
    # syntax 0.3 + imports 0.3 + patterns 0.2 * 0.5 + forbidden 0.2
    assert result.score == pytest.approx(0.9)
    assert "missing_patterns=bindTools(" in result.reasoning
