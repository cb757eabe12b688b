"""Tests for the deterministic structural checks."""

from __future__ import annotations

import pytest

from skill_evals.evals.structural import (
    REQUIRED_CHECKS,
    check_structure,
    code_blocks_use_correct_language,
    expected_code_tags,
    has_boundaries,
    has_code_examples,
    has_doc_links,
    links_are_absolute,
    no_empty_sections,
    section_text,
)
from skill_evals.schemas.skill import SkillArtifact
from skill_evals.skills.loader import parse_frontmatter, read_skill


def _skill(raw: str, path: str = "test/js/SKILL.md") -> SkillArtifact:
    fm, body = parse_frontmatter(raw)
    return SkillArtifact(path=path, frontmatter=fm, body=body, raw=raw)


def _body(body: str, language: str = "js") -> SkillArtifact:
    return _skill(f"---\nname: x\ndescription: y\nlanguage: {language}\n---\n{body}")


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_valid_skill_passes(self, skill_text):
        result = check_structure(_skill(skill_text()))
        assert result.passed is True
        assert result.failures == []
        assert result.overview_min_words is True
        assert result.overview_word_count == 60
        assert result.has_decision_table is False
        assert result.code_block_count == 1

    def test_code_block_without_examples_heading_fails(self):
        overview = " ".join(f"word{i}" for i in range(60))
        raw = (
            "---\nname: x\ndescription: y\nlanguage: js\n---\n\n"
            f"## Overview\n\n{overview}\n\n"
            "```ts\nconst x = 1;\n```\n\n"
            "## Boundaries\n\nStays within the documented API.\n\n"
            "## Gotchas\n\nNone known.\n\n"
            "[docs](https://example.com)\n"
        )
        result = check_structure(_skill(raw))
        assert result.code_blocks_use_correct_language is True
        assert result.has_code_examples is False
        assert result.failures == ["Missing section: Code Examples"]
        assert result.passed is False

    def test_python_tag_in_js_skill_fails(self, skill_text):
        result = check_structure(_skill(skill_text(code_tag="python")))
        assert result.code_blocks_use_correct_language is False
        assert result.passed is False
        assert result.failures == ["Code blocks don't use expected language for js"]

    def test_short_overview_does_not_fail(self, skill_text):
        result = check_structure(_skill(skill_text(overview="Too short.")))
        assert result.overview_min_words is False
        assert result.passed is True

    def test_fixture_js_skill_passes(self, skills_dir):
        result = check_structure(read_skill("langchain-agents/js/SKILL.md", skills_dir))
        assert result.failures == []
        assert result.has_decision_table is True
        assert result.links_are_absolute is True

    def test_fixture_python_skill_passes(self, skills_dir):
        result = check_structure(read_skill("langchain-agents/python/SKILL.md", skills_dir))
        assert result.passed is True
        assert result.overview_min_words is False

    def test_broken_fixture_reports_failures_in_order(self, skills_dir):
        result = check_structure(read_skill("broken-skill/js/SKILL.md", skills_dir))
        assert result.failures == [
            "Missing frontmatter: description",
            "Missing section: Code Examples",
            "Missing section: Boundaries",
            "Missing documentation links",
            "Code blocks don't use expected language for js",
            "Contains empty sections",
        ]
        assert result.sections_completeness == pytest.approx(2 / 5)


# ---------------------------------------------------------------------------
# Frontmatter
# ---------------------------------------------------------------------------


class TestFrontmatterChecks:
    def test_all_keys_present(self, skill_text):
        result = check_structure(_skill(skill_text()))
        assert result.has_frontmatter and result.has_name
        assert result.has_description and result.has_language
        assert result.frontmatter_valid is True

    def test_no_frontmatter(self, skill_text):
        raw = skill_text().split("---\n", 2)[2]
        result = check_structure(_skill(raw))
        assert result.failures[:4] == [
            "Missing YAML frontmatter",
            "Missing frontmatter: name",
            "Missing frontmatter: description",
            "Missing frontmatter: language",
        ]

    @pytest.mark.parametrize("key", ["name", "description", "language"])
    def test_blank_key_fails_once(self, skill_text, key):
        fm = {"name": "x", "description": "y", "language": "js"}
        fm[key] = ""
        result = check_structure(_skill(skill_text(frontmatter=fm)))
        assert f"Missing frontmatter: {key}" in result.failures
        assert result.frontmatter_valid is False


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


class TestSectionChecks:
    @pytest.mark.parametrize(
        ("heading", "failure"),
        [
            ("## Overview", "Missing section: Overview"),
            ("## Code Examples", "Missing section: Code Examples"),
            ("## Boundaries", "Missing section: Boundaries"),
            ("## Gotchas", "Missing section: Gotchas"),
        ],
    )
    def test_missing_heading_gives_exactly_one_failure(self, skill_text, heading, failure):
        raw = skill_text().replace(heading, "## Notes")
        result = check_structure(_skill(raw))
        assert result.passed is False
        assert result.failures == [failure]

    def test_missing_links_gives_one_failure(self, skill_text):
        raw = skill_text().replace("[docs](https://example.com)", "See the docs.")
        assert check_structure(_skill(raw)).failures == ["Missing documentation links"]

    @pytest.mark.parametrize(
        "body",
        ["## Code Example\n", "## basic usage\n", "### Streaming example\n", "## CODE EXAMPLES\n"],
    )
    def test_code_example_synonyms(self, body):
        assert has_code_examples(_body(body))

    @pytest.mark.parametrize(
        "body",
        [
            "## Boundaries\n",
            "### What agents can do\n",
            "### What Agents Cannot Do\n",
            "### What you can't configure\n",
            "### What can be changed\n",
        ],
    )
    def test_boundaries_synonyms(self, body):
        assert has_boundaries(_body(body))

    @pytest.mark.parametrize(
        "body",
        ["## Documentation\n", "## Full Documentation\n", "## Links\n", "see [x](http://a.b/c)\n"],
    )
    def test_doc_link_variants(self, body):
        assert has_doc_links(_body(body))

    def test_relative_link_is_not_doc_link(self):
        assert not has_doc_links(_body("see [x](./other.md)\n"))


# ---------------------------------------------------------------------------
# Code blocks
# ---------------------------------------------------------------------------


class TestCodeBlockChecks:
    def test_untagged_blocks_are_vacuously_correct(self):
        for language in ("js", "python", ""):
            assert code_blocks_use_correct_language(_body("```\nx = 1\n```\n", language))

    def test_no_blocks_is_vacuously_correct(self):
        assert code_blocks_use_correct_language(_body("## Overview\n\ntext\n"))

    def test_one_matching_tag_is_enough(self):
        body = "```bash\nnpm i langchain\n```\n\n```javascript\nrun();\n```\n"
        assert code_blocks_use_correct_language(_body(body, "js"))

    def test_python_skill_with_ts_only_fails(self):
        assert not code_blocks_use_correct_language(_body("```ts\nconst a = 1;\n```\n", "python"))

    def test_tag_sets(self):
        assert expected_code_tags("js") == {"typescript", "ts", "javascript", "js"}
        assert expected_code_tags("python") == {"python", "py"}

    def test_no_code_blocks_failure(self, skill_text):
        raw = skill_text().replace("```ts\nconst x = 1;\n```", "No code.")
        assert check_structure(_skill(raw)).failures == ["No code blocks found"]


# ---------------------------------------------------------------------------
# Empty sections and depth metrics
# ---------------------------------------------------------------------------


class TestEmptySections:
    def test_heading_followed_by_heading(self):
        assert not no_empty_sections(_body("## Overview\n\n## Gotchas\n\ntext\n"))

    def test_heading_followed_by_subheading(self):
        assert not no_empty_sections(_body("## Boundaries\n### What agents can do\n- x\n"))

    def test_heading_with_content(self):
        assert no_empty_sections(_body("## Overview\n\ntext\n\n## Gotchas\n\nmore\n"))


class TestDepthMetrics:
    def test_section_text_stops_at_same_level(self):
        body = "## Overview\n\nalpha beta\n\n### Detail\n\ngamma\n\n## Next\n\ndelta\n"
        text = section_text(body, "overview")
        assert "gamma" in text
        assert "delta" not in text

    def test_table_detected(self):
        result = check_structure(_body("## Overview\n\n| a | b |\n|---|---|\n| 1 | 2 |\n"))
        assert result.has_decision_table is True

    def test_relative_links_flagged(self):
        assert not links_are_absolute(_body("[a](https://x.y) and [b](../b.md)\n"))
        assert links_are_absolute(_body("no links\n"))


def test_check_table_order_is_fixed():
    assert [c.field for c in REQUIRED_CHECKS] == [
        "has_frontmatter",
        "has_name",
        "has_description",
        "has_language",
        "has_overview",
        "has_code_examples",
        "has_boundaries",
        "has_gotchas",
        "has_doc_links",
        "has_code_blocks",
        "code_blocks_use_correct_language",
        "no_empty_sections",
    ]
