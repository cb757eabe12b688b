"""Offline evaluation runner.

Runs structural checks or judge-based quality scoring over a dataset of
records, reports per-case feedback to a sink, and prints a suite report.

Records are independent. A suite runs them concurrently under a semaphore;
inside a quality record the three sub-evaluators run concurrently too. A
record whose evaluation raises (network, auth, missing file) is reported as
errored, never as a low score, and does not stop the other records.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

import structlog
from langchain_core.language_models import BaseChatModel

from skill_evals.agents.answerer import answer_with_skill, coding_prompt
from skill_evals.evals.evaluators import (
    EvalOutputs,
    code_validation_evaluator,
    negative_evaluator,
    run_quality_evaluators,
)
from skill_evals.evals.feedback import FeedbackSink
from skill_evals.evals.structural import check_structure
from skill_evals.schemas.cases import CaseOutcome, CaseStage, TestCase
from skill_evals.schemas.scores import coding_composite
from skill_evals.schemas.skill import SkillArtifact
from skill_evals.skills.loader import load_skill
from skill_evals.utils.console import (
    print_low_score_warning,
    print_structural_failures,
    print_suite_report,
)

logger = structlog.get_logger(__name__)

SOFT_THRESHOLD = 0.5
DEFAULT_LANGUAGE = "js"


class StructuralSuiteFailure(AssertionError):
    """Raised after a structural suite in which any skill failed a required check."""

    def __init__(self, outcomes: Sequence[CaseOutcome]) -> None:
        self.outcomes = list(outcomes)
        lines = []
        for outcome in self.outcomes:
            problems = outcome.failures or [f"errored: {outcome.error}"]
            lines.append(f"{outcome.case_id}: {', '.join(problems)}")
        super().__init__(
            f"{len(self.outcomes)} skill(s) failed structural checks:\n" + "\n".join(lines)
        )


@dataclass(frozen=True)
class EvalContext:
    """Collaborators shared read-only by every record in a run."""

    sink: FeedbackSink
    skills_dir: Path | None = None
    judge: BaseChatModel | None = None
    answerer: BaseChatModel | None = None
    judge_timeout: float | None = None

    def require_models(self) -> tuple[BaseChatModel, BaseChatModel]:
        if self.judge is None or self.answerer is None:
            raise ValueError("Quality suites need both a judge and an answerer model")
        return self.judge, self.answerer


CaseFn = Callable[[TestCase, EvalContext], Awaitable[CaseOutcome]]


def _advance(outcome: CaseOutcome, stage: CaseStage) -> None:
    outcome.stage = stage
    logger.debug("case_stage", stage=str(stage))


def _report(ctx: EvalContext, outcome: CaseOutcome, key: str, score: float, comment: str | None = None) -> None:
    outcome.scores[key] = score
    ctx.sink.log_feedback(key, score, case_id=outcome.case_id, comment=comment)


async def _load(case: TestCase, ctx: EvalContext, outcome: CaseOutcome) -> SkillArtifact:
    skill = await load_skill(case.inputs.skill_path, ctx.skills_dir)
    outcome.skill_name = skill.display_name
    _advance(outcome, CaseStage.LOADED)
    return skill


def _flag_low_score(outcome: CaseOutcome, headline: str) -> None:
    if outcome.scores[headline] >= SOFT_THRESHOLD:
        return
    outcome.status = "low_score"
    logger.warning("low_quality_score", skill=outcome.skill_name, **outcome.scores)
    print_low_score_warning(outcome.skill_name, outcome.scores, SOFT_THRESHOLD)


# ---------------------------------------------------------------------------
# Per-record evaluation
# ---------------------------------------------------------------------------


async def run_structural_case(case: TestCase, ctx: EvalContext) -> CaseOutcome:
    """LOADED -> VALIDATED -> REPORTED."""
    outcome = CaseOutcome(case_id=case.case_id)
    skill = await _load(case, ctx, outcome)

    result = check_structure(skill)
    outcome.failures = list(result.failures)
    outcome.details = {
        "checks": result.model_dump(exclude={"failures"}),
        "section_checks": result.section_checks,
    }
    _advance(outcome, CaseStage.VALIDATED)

    _report(ctx, outcome, "frontmatter_valid", 1.0 if result.frontmatter_valid else 0.0)
    _report(ctx, outcome, "sections_completeness", result.sections_completeness)
    _report(ctx, outcome, "code_quality", result.code_block_score)
    _report(
        ctx,
        outcome,
        "structural_score",
        1.0 if result.passed else 0.0,
        comment="; ".join(result.failures) or None,
    )
    outcome.status = "passed" if result.passed else "failed"
    _advance(outcome, CaseStage.REPORTED)

    if not result.passed:
        print_structural_failures(case.inputs.skill_path, result.failures)
    return outcome


async def _answer(case: TestCase, ctx: EvalContext, skill: SkillArtifact, outcome: CaseOutcome, question: str) -> EvalOutputs:
    _, answerer = ctx.require_models()
    answer = await answer_with_skill(answerer, skill.body, question)
    outcome.details["answer"] = answer
    _advance(outcome, CaseStage.ANSWERED)
    return EvalOutputs(
        answer=answer,
        skill_content=skill.body,
        question=case.inputs.prompt,
        language=skill.language or DEFAULT_LANGUAGE,
    )


async def run_quality_case(case: TestCase, ctx: EvalContext) -> CaseOutcome:
    """LOADED -> ANSWERED -> SCORED -> COMPOSITED -> REPORTED."""
    judge, _ = ctx.require_models()
    outcome = CaseOutcome(case_id=case.case_id)
    skill = await _load(case, ctx, outcome)
    outputs = await _answer(case, ctx, skill, outcome, case.inputs.prompt)

    scores = await run_quality_evaluators(
        judge, outputs, case.reference_outputs, timeout=ctx.judge_timeout
    )
    _advance(outcome, CaseStage.SCORED)
    _advance(outcome, CaseStage.COMPOSITED)

    for sub in (scores.accuracy, scores.completeness, scores.code_quality):
        _report(ctx, outcome, sub.key, sub.score, comment=sub.reasoning)
    _report(ctx, outcome, "composite_quality", scores.composite)
    _advance(outcome, CaseStage.REPORTED)

    _flag_low_score(outcome, "composite_quality")
    return outcome


async def run_coding_case(case: TestCase, ctx: EvalContext) -> CaseOutcome:
    """Coding challenge: judged quality blended 50/50 with deterministic code checks."""
    judge, _ = ctx.require_models()
    outcome = CaseOutcome(case_id=case.case_id)
    skill = await _load(case, ctx, outcome)
    language = skill.language or DEFAULT_LANGUAGE
    outputs = await _answer(
        case, ctx, skill, outcome, coding_prompt(case.inputs.prompt, language)
    )

    scores = await run_quality_evaluators(
        judge, outputs, case.reference_outputs, timeout=ctx.judge_timeout
    )
    validation = code_validation_evaluator(outputs.answer, case.reference_outputs, language)
    _advance(outcome, CaseStage.SCORED)

    combined = coding_composite(scores.composite, validation.score)
    _advance(outcome, CaseStage.COMPOSITED)

    for sub in (scores.accuracy, scores.completeness, scores.code_quality):
        _report(ctx, outcome, sub.key, sub.score, comment=sub.reasoning)
    _report(ctx, outcome, "composite_quality", scores.composite)
    _report(ctx, outcome, validation.key, validation.score, comment=validation.reasoning)
    _report(ctx, outcome, "coding_composite", combined)
    _advance(outcome, CaseStage.REPORTED)

    _flag_low_score(outcome, "coding_composite")
    return outcome


async def run_negative_case(case: TestCase, ctx: EvalContext) -> CaseOutcome:
    """Boundary adherence: one judge call, rubric chosen by expect_refusal."""
    judge, _ = ctx.require_models()
    outcome = CaseOutcome(case_id=case.case_id)
    skill = await _load(case, ctx, outcome)
    outputs = await _answer(case, ctx, skill, outcome, case.inputs.prompt)

    result = await negative_evaluator(
        judge, outputs, case.reference_outputs, timeout=ctx.judge_timeout
    )
    _advance(outcome, CaseStage.SCORED)
    outcome.details["expect_refusal"] = case.reference_outputs.expect_refusal

    _report(ctx, outcome, result.key, result.score, comment=result.reasoning)
    _advance(outcome, CaseStage.REPORTED)

    _flag_low_score(outcome, result.key)
    return outcome


# ---------------------------------------------------------------------------
# Suites
# ---------------------------------------------------------------------------


async def _run_one(case: TestCase, case_fn: CaseFn, ctx: EvalContext, limiter: asyncio.Semaphore) -> CaseOutcome:
    async with limiter:
        with structlog.contextvars.bound_contextvars(case=case.case_id):
            try:
                return await case_fn(case, ctx)
            except Exception as exc:
                logger.error("case_errored", error=str(exc), exc_info=True)
                return CaseOutcome(
                    case_id=case.case_id,
                    status="errored",
                    error=f"{type(exc).__name__}: {exc}",
                )


async def run_suite(
    cases: Sequence[TestCase],
    case_fn: CaseFn,
    ctx: EvalContext,
    *,
    max_concurrency: int = 4,
    title: str | None = None,
) -> list[CaseOutcome]:
    """Evaluate every record with `case_fn`; outcomes keep dataset order."""
    limiter = asyncio.Semaphore(max(1, max_concurrency))
    logger.info("suite_started", suite=title or case_fn.__name__, cases=len(cases))

    outcomes = await asyncio.gather(*(_run_one(case, case_fn, ctx, limiter) for case in cases))

    errored = sum(1 for o in outcomes if o.status == "errored")
    logger.info("suite_finished", suite=title or case_fn.__name__, cases=len(outcomes), errored=errored)
    if title:
        print_suite_report(title, outcomes)
    return list(outcomes)


async def run_structural_suite(
    cases: Sequence[TestCase],
    ctx: EvalContext,
    *,
    max_concurrency: int = 4,
    title: str | None = "Skill Structural Quality",
) -> list[CaseOutcome]:
    """Run structural checks on every skill and fail if any required check failed."""
    outcomes = await run_suite(
        cases, run_structural_case, ctx, max_concurrency=max_concurrency, title=title
    )
    failing = [o for o in outcomes if o.status in ("failed", "errored")]
    if failing:
        raise StructuralSuiteFailure(failing)
    return outcomes
