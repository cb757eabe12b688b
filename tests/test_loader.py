"""Tests for skill loading, frontmatter parsing, and discovery."""

from __future__ import annotations

import pytest

from skill_evals.skills.loader import (
    discover_skill_paths,
    dump_frontmatter,
    load_skill,
    parse_frontmatter,
    read_skill,
)


# ---------------------------------------------------------------------------
# Frontmatter parsing
# ---------------------------------------------------------------------------


class TestParseFrontmatter:
    def test_parses_key_value_lines(self):
        fm, body = parse_frontmatter("---\nname: x\ndescription: y\nlanguage: js\n---\n# Body\n")
        assert fm == {"name": "x", "description": "y", "language": "js"}
        assert body == "# Body"

    def test_no_frontmatter_returns_raw_body(self):
        raw = "# Just markdown\n\nText."
        assert parse_frontmatter(raw) == ({}, raw)

    def test_single_marker_is_not_frontmatter(self):
        raw = "---\nname: x\n# no closing marker"
        assert parse_frontmatter(raw) == ({}, raw)

    def test_trims_keys_and_values(self):
        fm, _ = parse_frontmatter("---\n  name  :   spaced out  \n---\nbody")
        assert fm == {"name": "spaced out"}

    def test_value_keeps_later_colons(self):
        fm, _ = parse_frontmatter("---\ndescription: Use it: carefully\n---\n")
        assert fm["description"] == "Use it: carefully"

    def test_values_are_not_yaml_typed(self):
        fm, _ = parse_frontmatter('---\nname: "quoted"\nstable: yes\nversion: 1.0\n---\n')
        assert fm == {"name": '"quoted"', "stable": "yes", "version": "1.0"}

    def test_ignores_lines_without_key(self):
        fm, _ = parse_frontmatter("---\nname: x\n: orphan\njust text\n---\n")
        assert fm == {"name": "x"}

    def test_empty_value_kept_as_empty_string(self):
        fm, _ = parse_frontmatter("---\nname:\nlanguage: js\n---\n")
        assert fm == {"name": "", "language": "js"}

    def test_crlf_line_endings(self):
        fm, body = parse_frontmatter("---\r\nname: x\r\n---\r\nBody")
        assert fm == {"name": "x"}
        assert body == "Body"


class TestFrontmatterRoundTrip:
    @pytest.mark.parametrize(
        "mapping",
        [
            {"name": "langchain-agents", "description": "Build agents", "language": "js"},
            {"name": "a", "description": "with: colon", "language": "python", "version": "2"},
            {"name": "  padded  ", "description": "tab\tinside", "language": "js"},
        ],
    )
    def test_dump_then_parse_recovers_mapping(self, mapping):
        fm, body = parse_frontmatter(dump_frontmatter(mapping, "## Overview\n"))
        assert fm == {k.strip(): v.strip() for k, v in mapping.items()}
        assert body == "## Overview"


# ---------------------------------------------------------------------------
# Reading files
# ---------------------------------------------------------------------------


class TestReadSkill:
    def test_reads_relative_to_skills_dir(self, skills_dir):
        skill = read_skill("langchain-agents/js/SKILL.md", skills_dir)
        assert skill.path == "langchain-agents/js/SKILL.md"
        assert skill.name == "langchain-agents"
        assert skill.language == "js"
        assert skill.body.startswith("## Overview")
        assert skill.raw.startswith("---")

    def test_absolute_path_ignores_skills_dir(self, skills_dir, tmp_path):
        path = skills_dir / "langchain-agents" / "python" / "SKILL.md"
        skill = read_skill(path, tmp_path)
        assert skill.language == "python"

    def test_artifact_is_frozen(self, skills_dir):
        skill = read_skill("langchain-agents/js/SKILL.md", skills_dir)
        with pytest.raises(Exception):
            skill.body = "changed"

    def test_missing_file_raises(self, skills_dir):
        with pytest.raises(FileNotFoundError):
            read_skill("does-not-exist/js/SKILL.md", skills_dir)

    @pytest.mark.asyncio
    async def test_load_skill_async(self, skills_dir):
        skill = await load_skill("broken-skill/js/SKILL.md", skills_dir)
        assert skill.name == "broken-skill"
        assert skill.description == ""


class TestDiscoverSkillPaths:
    def test_js_skills(self, skills_dir):
        assert discover_skill_paths(skills_dir) == [
            "broken-skill/js/SKILL.md",
            "langchain-agents/js/SKILL.md",
        ]

    def test_python_skills(self, skills_dir):
        assert discover_skill_paths(skills_dir, "python") == ["langchain-agents/python/SKILL.md"]

    def test_missing_dir_returns_empty(self, tmp_path):
        assert discover_skill_paths(tmp_path / "nope") == []
