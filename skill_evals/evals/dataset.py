"""Eval datasets: built-in question sets, JSON dataset files, and suite builders.

Records follow the shared dataset format:

    {"inputs": {"skillPath": ..., "question": ...},
     "referenceOutputs": {"criteria": ..., ...}}

Coding challenges carry `challenge` instead of `question` plus the
`requiredImports` / `requiredPatterns` / `forbiddenPatterns` lists; boundary
cases carry `expectRefusal`.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
from pydantic import TypeAdapter

from skill_evals.evals.questions import coding, deepagents, integrations, langchain_core, langgraph, negative
from skill_evals.schemas.cases import TestCase

logger = structlog.get_logger(__name__)

_CASES = TypeAdapter(list[TestCase])

# ---------------------------------------------------------------------------
# Built-in datasets
# ---------------------------------------------------------------------------

QUESTION_CATEGORIES: dict[str, dict[str, list[dict[str, Any]]]] = {
    "langchain-core": langchain_core.QUESTIONS,
    "langgraph": langgraph.QUESTIONS,
    "deepagents": deepagents.QUESTIONS,
    "integrations": integrations.QUESTIONS,
}

SKILL_QUESTIONS: dict[str, list[dict[str, Any]]] = {
    skill: cases for questions in QUESTION_CATEGORIES.values() for skill, cases in questions.items()
}

CODING_CHALLENGES = coding.CHALLENGES
NEGATIVE_QUESTIONS = negative.QUESTIONS

PYTHON_SKILL_QUESTION = (
    "Explain the key concepts covered in this skill and show a basic Python usage example."
)
PYTHON_SKILL_CRITERIA = (
    "Answer should accurately describe the skill topic, provide a Python code example, "
    "and use correct Python imports and syntax (not TypeScript/JavaScript)."
)


def _flatten(questions: dict[str, list[dict[str, Any]]]) -> list[TestCase]:
    return _CASES.validate_python([case for cases in questions.values() for case in cases])


def get_all_test_cases() -> list[TestCase]:
    """Flatten every per-skill question set into one ordered list."""
    return _flatten(SKILL_QUESTIONS)


def get_test_cases(category: str) -> list[TestCase]:
    """Questions for one skill family ("langchain-core", "langgraph", ...).

    Raises:
        KeyError: Unknown category.
    """
    try:
        questions = QUESTION_CATEGORIES[category]
    except KeyError:
        known = ", ".join(QUESTION_CATEGORIES)
        raise KeyError(f"Unknown question category {category!r} (known: {known})") from None
    return _flatten(questions)


def get_coding_challenges() -> list[TestCase]:
    return _CASES.validate_python(CODING_CHALLENGES)


def get_negative_test_cases() -> list[TestCase]:
    return _CASES.validate_python(NEGATIVE_QUESTIONS)


# ---------------------------------------------------------------------------
# Generated datasets
# ---------------------------------------------------------------------------


def structural_cases(skill_paths: Iterable[str]) -> list[TestCase]:
    """One structural record per skill file; structural checks need no criteria."""
    return [TestCase.model_validate({"inputs": {"skillPath": path}}) for path in skill_paths]


def python_skill_cases(skill_paths: Iterable[str]) -> list[TestCase]:
    """The generic explain-and-example question for each Python skill."""
    return [
        TestCase.model_validate(
            {
                "inputs": {"skillPath": path, "question": PYTHON_SKILL_QUESTION},
                "referenceOutputs": {"criteria": PYTHON_SKILL_CRITERIA},
            }
        )
        for path in skill_paths
    ]


def filter_by_skill(cases: Iterable[TestCase], skill: str) -> list[TestCase]:
    """Keep cases whose skill path starts with the given skill directory name."""
    prefix = skill.rstrip("/") + "/"
    return [case for case in cases if case.inputs.skill_path.startswith(prefix)]


# ---------------------------------------------------------------------------
# Dataset files
# ---------------------------------------------------------------------------


def load_dataset(path: str | Path) -> list[TestCase]:
    """Load an ordered list of records from a JSON dataset file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    cases = _CASES.validate_python(data)
    logger.info("dataset_loaded", path=str(path), cases=len(cases))
    return cases
