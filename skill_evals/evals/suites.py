"""Suite entry points.

Each function wires configuration, models, and a dataset into the runner
and returns the per-case outcomes:

    structural_suite()      every discovered skill, hard-fails on violations
    quality_suite()         judged answer quality (accuracy / completeness / code)
    langchain_core_suite()  the same scoring over the core LangChain questions only
    coding_suite()          coding challenges, judged + deterministic code checks
    negative_suite()        boundary adherence
    python_skills_suite()   generic quality question for every Python skill

Suite metadata (skill revision, answering model, suite id) is bound to the
log context for the duration of a run.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import structlog

from skill_evals.config import Settings, get_agent_settings, get_settings
from skill_evals.evals.dataset import (
    get_all_test_cases,
    get_coding_challenges,
    get_negative_test_cases,
    get_test_cases,
    python_skill_cases,
    structural_cases,
)
from skill_evals.evals.feedback import FeedbackSink, InMemoryFeedbackSink
from skill_evals.evals.runner import (
    CaseFn,
    EvalContext,
    run_coding_case,
    run_negative_case,
    run_quality_case,
    run_structural_suite,
    run_suite,
)
from skill_evals.logging_config import setup_logging
from skill_evals.models import create_answerer_llm, create_judge_llm
from skill_evals.schemas.cases import CaseOutcome, TestCase
from skill_evals.skills.loader import discover_skill_paths

STRUCTURAL_SUITE = "structural-v1"
QUALITY_SUITE = "agent-quality-v1"
LANGCHAIN_CORE_SUITE = "langchain-core-v1"
CODING_SUITE = "coding-challenges-v1"
NEGATIVE_SUITE = "negative-v1"
PYTHON_SKILLS_SUITE = "python-skills-v1"


def suite_metadata(suite: str, settings: Settings) -> dict[str, str]:
    """Metadata attached to every log line of a suite run."""
    return {
        "eval_suite": suite,
        "skill_version": settings.git_sha,
        "model": get_agent_settings().get_model("answerer"),
    }


def _skills_dir(skills_dir: str | Path | None) -> Path:
    if skills_dir is not None:
        return Path(skills_dir)
    return get_agent_settings().resolve_skills_dir()


def build_context(
    sink: FeedbackSink | None = None,
    *,
    skills_dir: str | Path | None = None,
    settings: Settings | None = None,
) -> EvalContext:
    """Context for judged suites: one shared judge and answerer per run."""
    if settings is None:
        settings = get_settings()
    judge_timeout = get_agent_settings().eval.judge_timeout
    return EvalContext(
        sink=sink or InMemoryFeedbackSink(),
        skills_dir=_skills_dir(skills_dir),
        judge=create_judge_llm(settings),
        answerer=create_answerer_llm(settings),
        judge_timeout=judge_timeout or None,
    )


async def structural_suite(
    *,
    language: str = "js",
    skills_dir: str | Path | None = None,
    sink: FeedbackSink | None = None,
    log_level: str = "INFO",
) -> list[CaseOutcome]:
    """Check every `<skill>/<language>/SKILL.md`; raises StructuralSuiteFailure on violations.

    Needs no models or API keys, so the log level is passed in rather than
    read from Settings.
    """
    setup_logging(log_level)
    root = _skills_dir(skills_dir)
    cases = structural_cases(discover_skill_paths(root, language))
    ctx = EvalContext(sink=sink or InMemoryFeedbackSink(), skills_dir=root)
    with structlog.contextvars.bound_contextvars(eval_suite=STRUCTURAL_SUITE, language=language):
        return await run_structural_suite(
            cases,
            ctx,
            max_concurrency=get_agent_settings().eval.max_concurrency,
        )


async def _judged_suite(
    suite: str,
    title: str,
    cases: Sequence[TestCase],
    case_fn: CaseFn,
    *,
    sink: FeedbackSink | None,
    skills_dir: str | Path | None,
    settings: Settings | None,
) -> list[CaseOutcome]:
    if settings is None:
        settings = get_settings()
    setup_logging(settings.log_level, json_logs=settings.log_json)
    ctx = build_context(sink, skills_dir=skills_dir, settings=settings)
    with structlog.contextvars.bound_contextvars(**suite_metadata(suite, settings)):
        return await run_suite(
            cases,
            case_fn,
            ctx,
            max_concurrency=get_agent_settings().eval.max_concurrency,
            title=title,
        )


async def quality_suite(
    cases: Sequence[TestCase] | None = None,
    *,
    sink: FeedbackSink | None = None,
    skills_dir: str | Path | None = None,
    settings: Settings | None = None,
) -> list[CaseOutcome]:
    return await _judged_suite(
        QUALITY_SUITE,
        "Skill Agent Quality",
        get_all_test_cases() if cases is None else cases,
        run_quality_case,
        sink=sink,
        skills_dir=skills_dir,
        settings=settings,
    )


async def langchain_core_suite(
    *,
    sink: FeedbackSink | None = None,
    skills_dir: str | Path | None = None,
    settings: Settings | None = None,
) -> list[CaseOutcome]:
    return await _judged_suite(
        LANGCHAIN_CORE_SUITE,
        "LangChain Core Skill Quality",
        get_test_cases("langchain-core"),
        run_quality_case,
        sink=sink,
        skills_dir=skills_dir,
        settings=settings,
    )


async def coding_suite(
    cases: Sequence[TestCase] | None = None,
    *,
    sink: FeedbackSink | None = None,
    skills_dir: str | Path | None = None,
    settings: Settings | None = None,
) -> list[CaseOutcome]:
    return await _judged_suite(
        CODING_SUITE,
        "Skill Coding Challenges",
        get_coding_challenges() if cases is None else cases,
        run_coding_case,
        sink=sink,
        skills_dir=skills_dir,
        settings=settings,
    )


async def negative_suite(
    cases: Sequence[TestCase] | None = None,
    *,
    sink: FeedbackSink | None = None,
    skills_dir: str | Path | None = None,
    settings: Settings | None = None,
) -> list[CaseOutcome]:
    return await _judged_suite(
        NEGATIVE_SUITE,
        "Skill Boundary Adherence",
        get_negative_test_cases() if cases is None else cases,
        run_negative_case,
        sink=sink,
        skills_dir=skills_dir,
        settings=settings,
    )


async def python_skills_suite(
    *,
    sink: FeedbackSink | None = None,
    skills_dir: str | Path | None = None,
    settings: Settings | None = None,
) -> list[CaseOutcome]:
    """Ask the generic explain-and-example question of every Python skill."""
    paths = discover_skill_paths(_skills_dir(skills_dir), "python")
    return await _judged_suite(
        PYTHON_SKILLS_SUITE,
        "Python Skill Quality",
        python_skill_cases(paths),
        run_quality_case,
        sink=sink,
        skills_dir=skills_dir,
        settings=settings,
    )
