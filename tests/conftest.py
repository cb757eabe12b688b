"""Shared test fixtures."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

# Ensure tests don't accidentally call real APIs
os.environ.setdefault("OPENROUTER_API_KEY", "test-key")

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SKILLS_DIR = FIXTURES_DIR / "skills"

OVERVIEW_60_WORDS = " ".join(f"word{i}" for i in range(60))


def build_skill_text(
    *,
    frontmatter: dict[str, str] | None = None,
    overview: str = OVERVIEW_60_WORDS,
    code_tag: str = "ts",
    extra: str = "",
) -> str:
    """A skill file that passes every required check unless told otherwise."""
    if frontmatter is None:
        frontmatter = {"name": "x", "description": "y", "language": "js"}
    header = "\n".join(f"{k}: {v}" for k, v in frontmatter.items())
    return (
        f"---\n{header}\n---\n\n"
        f"## Overview\n\n{overview}\n\n"
        f"## Code Examples\n\n```{code_tag}\nconst x = 1;\n```\n\n"
        "## Boundaries\n\nStays within the documented API.\n\n"
        "## Gotchas\n\nNone known.\n\n"
        "[docs](https://example.com)\n"
        f"{extra}"
    )


def make_judge(*responses: str) -> MagicMock:
    """A chat-model double whose ainvoke returns the given texts in order.

    With a single response, every call returns it.
    """
    llm = MagicMock()
    if len(responses) == 1:
        llm.ainvoke = AsyncMock(return_value=AIMessage(content=responses[0]))
    else:
        llm.ainvoke = AsyncMock(side_effect=[AIMessage(content=r) for r in responses])
    return llm


@pytest.fixture
def skills_dir() -> Path:
    return SKILLS_DIR


@pytest.fixture
def skill_text():
    return build_skill_text


@pytest.fixture
def judge_factory():
    return make_judge


@pytest.fixture
def judge_ok() -> MagicMock:
    return make_judge('{"score": 0.8, "reasoning": "solid"}')
