"""Judge results, composite scores, and deterministic code validation scores."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, computed_field

ACCURACY_WEIGHT = 0.4
COMPLETENESS_WEIGHT = 0.3
CODE_QUALITY_WEIGHT = 0.3

SYNTAX_WEIGHT = 0.3
IMPORTS_WEIGHT = 0.3
PATTERNS_WEIGHT = 0.2
FORBIDDEN_WEIGHT = 0.2

CODING_QUALITY_SHARE = 0.5
CODING_VALIDATION_SHARE = 0.5


class JudgeScore(BaseModel):
    """A single named sub-score. Always produced, even for malformed judge output."""

    key: str
    score: float = Field(ge=0.0, le=1.0)
    reasoning: str = ""


class JudgeVerdict(BaseModel):
    """The judge returned a well-formed score object."""

    kind: Literal["verdict"] = "verdict"
    score: float = Field(ge=0.0, le=1.0)
    reasoning: str = ""


class JudgeParseFailure(BaseModel):
    """The judge response held no usable score object (or the call timed out)."""

    kind: Literal["parse_failure"] = "parse_failure"
    reasoning: str

    @property
    def score(self) -> float:
        return 0.0


JudgeResult = Annotated[Union[JudgeVerdict, JudgeParseFailure], Field(discriminator="kind")]


def compute_composite(accuracy: float, completeness: float, code_quality: float) -> float:
    """Weighted composite: 0.4 accuracy + 0.3 completeness + 0.3 code quality."""
    return (
        ACCURACY_WEIGHT * accuracy
        + COMPLETENESS_WEIGHT * completeness
        + CODE_QUALITY_WEIGHT * code_quality
    )


class CompositeResult(BaseModel):
    accuracy: JudgeScore
    completeness: JudgeScore
    code_quality: JudgeScore

    @computed_field  # type: ignore[prop-decorator]
    @property
    def composite(self) -> float:
        return compute_composite(
            self.accuracy.score, self.completeness.score, self.code_quality.score
        )


class CodeValidationResult(BaseModel):
    """Deterministic checks over generated code."""

    syntax_valid: bool
    syntax_error: str | None = None
    import_coverage: float = Field(ge=0.0, le=1.0)
    pattern_coverage: float = Field(ge=0.0, le=1.0)
    forbidden_absence: float = Field(ge=0.0, le=1.0)
    missing_imports: list[str] = Field(default_factory=list)
    missing_patterns: list[str] = Field(default_factory=list)
    forbidden_found: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> float:
        return (
            SYNTAX_WEIGHT * (1.0 if self.syntax_valid else 0.0)
            + IMPORTS_WEIGHT * self.import_coverage
            + PATTERNS_WEIGHT * self.pattern_coverage
            + FORBIDDEN_WEIGHT * self.forbidden_absence
        )

    def summary(self) -> str:
        parts = [f"syntax={'ok' if self.syntax_valid else 'error'}"]
        if self.syntax_error:
            parts.append(f"syntax_error={self.syntax_error}")
        if self.missing_imports:
            parts.append(f"missing_imports={', '.join(self.missing_imports)}")
        if self.missing_patterns:
            parts.append(f"missing_patterns={', '.join(self.missing_patterns)}")
        if self.forbidden_found:
            parts.append(f"forbidden_found={', '.join(self.forbidden_found)}")
        return "; ".join(parts)


def coding_composite(quality_composite: float, validation_score: float) -> float:
    """Blend of LLM-judged quality and deterministic code validation."""
    return CODING_QUALITY_SHARE * quality_composite + CODING_VALIDATION_SHARE * validation_score
