"""Skill artifact and structural check result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field


class SkillArtifact(BaseModel):
    """A loaded SKILL.md file. Reloaded per test case, never mutated."""

    model_config = ConfigDict(frozen=True)

    path: str
    frontmatter: dict[str, str] = Field(default_factory=dict)
    body: str = ""
    raw: str = ""

    @property
    def name(self) -> str:
        return self.frontmatter.get("name", "")

    @property
    def description(self) -> str:
        return self.frontmatter.get("description", "")

    @property
    def language(self) -> str:
        return self.frontmatter.get("language", "")

    @property
    def display_name(self) -> str:
        """Skill name for reports, falling back to the path."""
        return self.name or self.path


SECTION_FIELDS = (
    "has_overview",
    "has_code_examples",
    "has_boundaries",
    "has_gotchas",
    "has_doc_links",
)


class StructuralCheckResult(BaseModel):
    """Outcome of the deterministic structural checks on one skill.

    `passed` depends only on `failures`; the depth metrics are informational.
    """

    # Required checks
    has_frontmatter: bool = False
    has_name: bool = False
    has_description: bool = False
    has_language: bool = False
    has_overview: bool = False
    has_code_examples: bool = False
    has_boundaries: bool = False
    has_gotchas: bool = False
    has_doc_links: bool = False
    has_code_blocks: bool = False
    code_blocks_use_correct_language: bool = False
    no_empty_sections: bool = False

    failures: list[str] = Field(default_factory=list)

    # Depth metrics
    overview_word_count: int = 0
    overview_min_words: bool = False
    code_block_count: int = 0
    has_decision_table: bool = False
    links_are_absolute: bool = True

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return len(self.failures) == 0

    @property
    def frontmatter_valid(self) -> bool:
        return self.has_frontmatter and self.has_name and self.has_description and self.has_language

    @property
    def section_checks(self) -> dict[str, bool]:
        return {field: getattr(self, field) for field in SECTION_FIELDS}

    @property
    def sections_completeness(self) -> float:
        """Fraction of the required section checks that pass."""
        checks = self.section_checks
        return sum(checks.values()) / len(checks)

    @property
    def code_block_score(self) -> float:
        """Weighted code-block health: presence 0.4, language 0.3, no empty sections 0.3."""
        return (
            (0.4 if self.has_code_blocks else 0.0)
            + (0.3 if self.code_blocks_use_correct_language else 0.0)
            + (0.3 if self.no_empty_sections else 0.0)
        )
