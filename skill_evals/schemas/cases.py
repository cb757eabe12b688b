"""Dataset records and per-case outcomes.

Records use the camelCase keys of the shared dataset format
(``skillPath``, ``referenceOutputs``, ``requiredImports`` ...) and accept
snake_case field names when built in Python.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CaseInputs(_CamelModel):
    skill_path: str
    question: str | None = None
    challenge: str | None = None

    @property
    def prompt(self) -> str:
        """The text put to the answerer: the question, or the coding challenge."""
        return self.question or self.challenge or ""


class ReferenceOutputs(_CamelModel):
    criteria: str | None = None
    required_imports: list[str] = Field(default_factory=list)
    required_patterns: list[str] = Field(default_factory=list)
    forbidden_patterns: list[str] = Field(default_factory=list)
    expect_refusal: bool | None = None

    @property
    def has_criteria(self) -> bool:
        return bool(self.criteria and self.criteria.strip())


class TestCase(_CamelModel):
    __test__ = False  # keep pytest from collecting this model

    inputs: CaseInputs
    reference_outputs: ReferenceOutputs = Field(default_factory=ReferenceOutputs)

    @property
    def case_id(self) -> str:
        prompt = self.inputs.prompt
        if not prompt:
            return self.inputs.skill_path
        return f"{self.inputs.skill_path} :: {prompt[:60]}"


class CaseStage(StrEnum):
    """Stages a record passes through while being evaluated."""

    PENDING = "pending"
    LOADED = "loaded"
    VALIDATED = "validated"
    ANSWERED = "answered"
    SCORED = "scored"
    COMPOSITED = "composited"
    REPORTED = "reported"


class CaseOutcome(BaseModel):
    """What one record produced. `errored` marks infrastructure failures."""

    case_id: str
    skill_name: str = ""
    status: Literal["passed", "failed", "low_score", "errored"] = "passed"
    stage: CaseStage = CaseStage.PENDING
    scores: dict[str, float] = Field(default_factory=dict)
    failures: list[str] = Field(default_factory=list)
    error: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)

    @property
    def headline_score(self) -> float | None:
        """The score a suite report sorts and summarizes by."""
        for key in ("coding_composite", "composite_quality", "boundary_adherence", "structural_score"):
            if key in self.scores:
                return self.scores[key]
        return None
