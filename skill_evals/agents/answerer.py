"""Skill answerer: asks a model a question with a skill file as its only reference.

This is the system under test for the quality suites. Its answers are graded
by the evaluators; nothing here scores anything.
"""

from __future__ import annotations

import structlog
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from skill_evals.evals.judge import response_text
from skill_evals.evals.structural import JS_LANGUAGES
from skill_evals.prompts.templates import ANSWERER_SYSTEM, CODE_ONLY_SUFFIX

logger = structlog.get_logger(__name__)


def language_label(language: str) -> str:
    """Human name of a skill language, as used in prompts."""
    if language.strip().lower() in JS_LANGUAGES:
        return "TypeScript"
    return "Python"


def coding_prompt(challenge: str, language: str) -> str:
    """A coding challenge plus the instruction to reply with code only."""
    return challenge + CODE_ONLY_SUFFIX.format(language_label=language_label(language))


async def answer_with_skill(llm: BaseChatModel, skill_content: str, question: str) -> str:
    """Answer `question` using only `skill_content` as reference."""
    messages = [
        SystemMessage(content=ANSWERER_SYSTEM.format(skill_content=skill_content)),
        HumanMessage(content=question),
    ]
    response = await llm.ainvoke(messages)
    answer = response_text(response)
    logger.info("answer_generated", question=question[:50], chars=len(answer))
    return answer
