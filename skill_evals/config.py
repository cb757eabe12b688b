"""Application configuration using pydantic-settings.

Loads settings from environment variables and .env file.
Judge/answerer behavior (models, temperatures, concurrency) loaded from evals.toml.

Priority: Environment variables (.env) > evals.toml > hardcoded defaults
"""

import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ---------------------------------------------------------------------------
# Eval settings from evals.toml
# ---------------------------------------------------------------------------


class AgentConfig(BaseModel):
    """Base configuration for a single LLM role."""

    model: str | None = None
    temperature: float | None = None


class JudgeConfig(AgentConfig):
    """Judge-specific configuration. Grading is always deterministic."""

    temperature: float = 0.0


class AnswererConfig(AgentConfig):
    temperature: float = 0.0


class AgentsTable(BaseModel):
    """The [agents] table from evals.toml."""

    judge: JudgeConfig = Field(default_factory=JudgeConfig)
    answerer: AnswererConfig = Field(default_factory=AnswererConfig)


class DefaultsTable(BaseModel):
    """The [defaults] table from evals.toml."""

    model: str = "anthropic/claude-sonnet-4"
    timeout: int = 120


class EvalConfig(BaseModel):
    """The [eval] table from evals.toml."""

    skills_dir: str = "skills"
    max_concurrency: int = 4
    judge_timeout: float = 0.0  # seconds; 0 disables the per-call timeout


class AgentSettings(BaseModel):
    """Configuration loaded from evals.toml."""

    defaults: DefaultsTable = Field(default_factory=DefaultsTable)
    agents: AgentsTable = Field(default_factory=AgentsTable)
    eval: EvalConfig = Field(default_factory=EvalConfig)

    def get_agent_config(self, agent_name: str) -> AgentConfig:
        """Get the config for a specific role."""
        return getattr(self.agents, agent_name, AgentConfig())

    def get_model(self, agent_name: str) -> str:
        """Get the resolved model for a role (role-specific > defaults)."""
        agent_cfg = self.get_agent_config(agent_name)
        return agent_cfg.model or self.defaults.model

    def get_temperature(self, agent_name: str) -> float:
        """Get the resolved temperature for a role."""
        agent_cfg = self.get_agent_config(agent_name)
        if agent_cfg.temperature is not None:
            return agent_cfg.temperature
        return 0.0

    def resolve_skills_dir(self, base: Path | None = None) -> Path:
        """Resolve the skills directory relative to the project root."""
        path = Path(self.eval.skills_dir)
        if path.is_absolute():
            return path
        return (base or PROJECT_ROOT) / path


PROJECT_ROOT = Path(__file__).parent.parent

_AGENT_SETTINGS_CACHE: AgentSettings | None = None


def get_agent_settings() -> AgentSettings:
    """Load and cache eval settings from evals.toml."""
    global _AGENT_SETTINGS_CACHE
    if _AGENT_SETTINGS_CACHE is not None:
        return _AGENT_SETTINGS_CACHE

    toml_path = PROJECT_ROOT / "evals.toml"
    if toml_path.exists():
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
        _AGENT_SETTINGS_CACHE = AgentSettings.model_validate(data)
    else:
        _AGENT_SETTINGS_CACHE = AgentSettings()

    return _AGENT_SETTINGS_CACHE


# ---------------------------------------------------------------------------
# Environment settings from .env (API keys, secrets, env-var overrides)
# ---------------------------------------------------------------------------


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Keys
    openrouter_api_key: str

    # LangSmith (set LANGCHAIN_TRACING_V2=true to enable)
    langchain_tracing_v2: bool = False
    langchain_api_key: str | None = None
    langchain_project: str = "skill-evals"

    # OpenRouter base URL
    openrouter_base_url: str = "https://openrouter.ai/api/v1"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Skill revision under test, attached to experiment metadata
    git_sha: str = "local"


def get_settings() -> Settings:
    """Create and return a Settings instance.

    Also exports LangSmith env vars so the LangChain SDK
    picks them up automatically for tracing.
    """
    settings = Settings()

    if settings.langchain_tracing_v2:
        os.environ.setdefault("LANGCHAIN_TRACING_V2", "true")
        if settings.langchain_api_key:
            os.environ.setdefault("LANGCHAIN_API_KEY", settings.langchain_api_key)
        os.environ.setdefault("LANGCHAIN_PROJECT", settings.langchain_project)

    return settings
