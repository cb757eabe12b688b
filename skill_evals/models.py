"""Chat model factory.

All eval roles (judge, answerer) talk to OpenRouter through langchain-openai.
Models and temperatures are configured in evals.toml. The judge is built once
per process by the caller and shared read-only across concurrent calls.
"""

from __future__ import annotations

import structlog
from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from skill_evals.config import Settings, get_agent_settings, get_settings

logger = structlog.get_logger(__name__)


def create_llm(
    agent_name: str,
    temperature: float | None = None,
    max_tokens: int | None = None,
    settings: Settings | None = None,
) -> BaseChatModel:
    """Create a chat model for an eval role.

    No fallback chain and no client-side retries: a failed call surfaces to
    the test case that made it.

    Args:
        agent_name: Role identifier used to look up config in evals.toml
            ("judge" or "answerer").
        temperature: Sampling temperature. None = read from evals.toml.
        max_tokens: Maximum tokens in response.
        settings: Optional Settings instance; loads from env if not provided.
    """
    if settings is None:
        settings = get_settings()

    agent_settings = get_agent_settings()
    model = agent_settings.get_model(agent_name)

    if temperature is None:
        temperature = agent_settings.get_temperature(agent_name)

    kwargs = dict(
        model=model,
        temperature=temperature,
        openai_api_key=settings.openrouter_api_key,
        openai_api_base=settings.openrouter_base_url,
        timeout=agent_settings.defaults.timeout,
        max_retries=0,
    )
    if max_tokens is not None:
        kwargs["max_tokens"] = max_tokens

    logger.debug("llm_created", agent=agent_name, model=model, temperature=temperature)
    return ChatOpenAI(**kwargs)


def create_judge_llm(settings: Settings | None = None) -> BaseChatModel:
    """Create the judge model (zero temperature)."""
    return create_llm("judge", temperature=0.0, settings=settings)


def create_answerer_llm(settings: Settings | None = None) -> BaseChatModel:
    """Create the model that answers questions using a skill as context."""
    return create_llm("answerer", settings=settings)
