"""Structural evaluator: deterministic format checks on a skill file (no LLM calls).

Skill files are generated text, so heading checks accept common synonyms and
ignore case. The required checks live in one ordered table; each predicate is
a plain function of the artifact and can be tested on its own. Failures are
reported in table order.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from skill_evals.schemas.skill import SkillArtifact, StructuralCheckResult

logger = structlog.get_logger(__name__)

OVERVIEW_MIN_WORDS = 50

JS_LANGUAGES = frozenset({"js", "javascript", "ts", "typescript"})
JS_CODE_TAGS = frozenset({"typescript", "ts", "javascript", "js"})
PYTHON_CODE_TAGS = frozenset({"python", "py"})

_FRONTMATTER_BLOCK_RE = re.compile(r"\A---[ \t]*\r?\n.*?\r?\n---", re.DOTALL)

_OVERVIEW_RE = re.compile(r"##\s+overview", re.IGNORECASE)
_CODE_EXAMPLES_RES = (
    re.compile(r"##\s+code\s+examples?", re.IGNORECASE),
    re.compile(r"###\s+.*example", re.IGNORECASE),
    re.compile(r"##\s+basic\s+usage", re.IGNORECASE),
)
_BOUNDARIES_RES = (
    re.compile(r"##\s+boundaries", re.IGNORECASE),
    re.compile(r"###\s+what\s+(?:(?:agents?|you)\s+)?can(?:not|'t)?\s+", re.IGNORECASE),
)
_GOTCHAS_RE = re.compile(r"##\s+gotchas", re.IGNORECASE)
_DOC_LINKS_RES = (
    re.compile(r"##\s+(?:full\s+)?documentation", re.IGNORECASE),
    re.compile(r"##\s+links", re.IGNORECASE),
    re.compile(r"\[[^\]]*\]\(https?://[^)]*\)", re.IGNORECASE),
)

_CODE_BLOCK_RE = re.compile(r"```([\w+-]+)?[^\n]*\n(.*?)```", re.DOTALL)
_EMPTY_SECTION_RE = re.compile(r"^#{2,}[ \t]+.+\n+(?=#{2,}\s)", re.MULTILINE)
_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(.+?)[ \t]*$", re.MULTILINE)
_TABLE_SEPARATOR_RE = re.compile(r"^\s*\|?\s*:?-{3,}:?\s*(\|\s*:?-{3,}:?\s*)+\|?\s*$", re.MULTILINE)
_LINK_RE = re.compile(r"(?<!!)\[[^\]]*\]\(([^)\s]*)[^)]*\)")


# ---------------------------------------------------------------------------
# Code block helpers
# ---------------------------------------------------------------------------


def find_code_blocks(text: str) -> list[tuple[str | None, str]]:
    """Return (language tag or None, body) for each fenced code block."""
    return [(m.group(1), m.group(2)) for m in _CODE_BLOCK_RE.finditer(text)]


def expected_code_tags(language: str) -> frozenset[str]:
    """Code fence tags accepted for a skill's declared language."""
    if language.strip().lower() in JS_LANGUAGES:
        return JS_CODE_TAGS
    return PYTHON_CODE_TAGS


def _strip_code_blocks(text: str) -> str:
    return _CODE_BLOCK_RE.sub("", text)


# ---------------------------------------------------------------------------
# Required checks
# ---------------------------------------------------------------------------


def has_frontmatter(skill: SkillArtifact) -> bool:
    return bool(_FRONTMATTER_BLOCK_RE.match(skill.raw))


def has_name(skill: SkillArtifact) -> bool:
    return bool(skill.name)


def has_description(skill: SkillArtifact) -> bool:
    return bool(skill.description)


def has_language(skill: SkillArtifact) -> bool:
    return bool(skill.language)


def has_overview(skill: SkillArtifact) -> bool:
    return bool(_OVERVIEW_RE.search(skill.body))


def has_code_examples(skill: SkillArtifact) -> bool:
    return any(p.search(skill.body) for p in _CODE_EXAMPLES_RES)


def has_boundaries(skill: SkillArtifact) -> bool:
    return any(p.search(skill.body) for p in _BOUNDARIES_RES)


def has_gotchas(skill: SkillArtifact) -> bool:
    return bool(_GOTCHAS_RE.search(skill.body))


def has_doc_links(skill: SkillArtifact) -> bool:
    return any(p.search(skill.body) for p in _DOC_LINKS_RES)


def has_code_blocks(skill: SkillArtifact) -> bool:
    return bool(find_code_blocks(skill.body))


def code_blocks_use_correct_language(skill: SkillArtifact) -> bool:
    """True if no block declares a tag, or at least one tag fits the skill language."""
    tags = [tag.lower() for tag, _ in find_code_blocks(skill.body) if tag]
    if not tags:
        return True
    expected = expected_code_tags(skill.language)
    return any(tag in expected for tag in tags)


def no_empty_sections(skill: SkillArtifact) -> bool:
    """No heading is directly followed by another heading."""
    return not _EMPTY_SECTION_RE.search(skill.body)


@dataclass(frozen=True)
class StructuralCheck:
    field: str
    predicate: Callable[[SkillArtifact], bool]
    failure: Callable[[SkillArtifact], str]


def _fixed(message: str) -> Callable[[SkillArtifact], str]:
    return lambda _skill: message


REQUIRED_CHECKS: tuple[StructuralCheck, ...] = (
    StructuralCheck("has_frontmatter", has_frontmatter, _fixed("Missing YAML frontmatter")),
    StructuralCheck("has_name", has_name, _fixed("Missing frontmatter: name")),
    StructuralCheck("has_description", has_description, _fixed("Missing frontmatter: description")),
    StructuralCheck("has_language", has_language, _fixed("Missing frontmatter: language")),
    StructuralCheck("has_overview", has_overview, _fixed("Missing section: Overview")),
    StructuralCheck("has_code_examples", has_code_examples, _fixed("Missing section: Code Examples")),
    StructuralCheck("has_boundaries", has_boundaries, _fixed("Missing section: Boundaries")),
    StructuralCheck("has_gotchas", has_gotchas, _fixed("Missing section: Gotchas")),
    StructuralCheck("has_doc_links", has_doc_links, _fixed("Missing documentation links")),
    StructuralCheck("has_code_blocks", has_code_blocks, _fixed("No code blocks found")),
    StructuralCheck(
        "code_blocks_use_correct_language",
        code_blocks_use_correct_language,
        lambda skill: f"Code blocks don't use expected language for {skill.language}",
    ),
    StructuralCheck("no_empty_sections", no_empty_sections, _fixed("Contains empty sections")),
)


# ---------------------------------------------------------------------------
# Depth metrics
# ---------------------------------------------------------------------------


def section_text(body: str, title_pattern: str) -> str | None:
    """Text under the first heading matching `title_pattern`, up to the next
    heading of the same or higher level. Code blocks are kept."""
    headings = list(_HEADING_RE.finditer(body))
    for i, heading in enumerate(headings):
        if not re.fullmatch(title_pattern, heading.group(2), re.IGNORECASE):
            continue
        level = len(heading.group(1))
        end = len(body)
        for nxt in headings[i + 1 :]:
            if len(nxt.group(1)) <= level:
                end = nxt.start()
                break
        return body[heading.end() : end]
    return None


def overview_word_count(skill: SkillArtifact) -> int:
    text = section_text(skill.body, r"overview")
    if text is None:
        return 0
    return len(_strip_code_blocks(text).split())


def has_markdown_table(skill: SkillArtifact) -> bool:
    return bool(_TABLE_SEPARATOR_RE.search(_strip_code_blocks(skill.body)))


def links_are_absolute(skill: SkillArtifact) -> bool:
    """All markdown links point at http(s) URLs (true when there are none)."""
    targets = _LINK_RE.findall(_strip_code_blocks(skill.body))
    return all(re.match(r"https?://", target, re.IGNORECASE) for target in targets)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def check_structure(skill: SkillArtifact) -> StructuralCheckResult:
    """Run all structural checks on a skill file.

    Returns a result with every individual check outcome, the ordered list of
    failure messages, and the informational depth metrics.
    """
    flags: dict[str, bool] = {}
    failures: list[str] = []
    for check in REQUIRED_CHECKS:
        ok = check.predicate(skill)
        flags[check.field] = ok
        if not ok:
            failures.append(check.failure(skill))

    words = overview_word_count(skill)
    result = StructuralCheckResult(
        **flags,
        failures=failures,
        overview_word_count=words,
        overview_min_words=words >= OVERVIEW_MIN_WORDS,
        code_block_count=len(find_code_blocks(skill.body)),
        has_decision_table=has_markdown_table(skill),
        links_are_absolute=links_are_absolute(skill),
    )

    if failures:
        logger.debug("structural_failures", skill=skill.path, failures=failures)
    return result
