"""Skill file discovery and loading.

A skill file starts with a frontmatter block:

    ---
    name: langchain-agents
    description: Build agents with createAgent()
    language: js
    ---

followed by the markdown body. Only flat ``key: value`` lines are read;
nothing here checks whether the required keys are present.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Mapping
from pathlib import Path

import structlog

from skill_evals.schemas.skill import SkillArtifact

logger = structlog.get_logger(__name__)

FRONTMATTER_MARKER = "---"
SKILL_FILENAME = "SKILL.md"

_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)(.*)\Z", re.DOTALL)


def parse_frontmatter(raw: str) -> tuple[dict[str, str], str]:
    """Split a skill file into its frontmatter mapping and trimmed body.

    Returns ({}, raw) when there is no frontmatter block.
    """
    match = _FRONTMATTER_RE.match(raw)
    if not match:
        return {}, raw

    frontmatter: dict[str, str] = {}
    for line in match.group(1).splitlines():
        colon = line.find(":")
        if colon > 0:
            frontmatter[line[:colon].strip()] = line[colon + 1 :].strip()

    return frontmatter, match.group(2).strip()


def dump_frontmatter(frontmatter: Mapping[str, str], body: str = "") -> str:
    """Render a frontmatter mapping and body back into skill file text."""
    lines = [FRONTMATTER_MARKER]
    lines.extend(f"{key}: {value}" for key, value in frontmatter.items())
    lines.append(FRONTMATTER_MARKER)
    return "\n".join(lines) + "\n" + body


def _resolve(path: str | Path, skills_dir: str | Path | None) -> Path:
    candidate = Path(path)
    if candidate.is_absolute() or skills_dir is None:
        return candidate
    return Path(skills_dir) / candidate


def read_skill(path: str | Path, skills_dir: str | Path | None = None) -> SkillArtifact:
    """Read and parse a single skill file.

    Args:
        path: Path to the file, or a path relative to `skills_dir`
            such as "langchain-agents/js/SKILL.md".
        skills_dir: Root of the skills tree.
    """
    full_path = _resolve(path, skills_dir)
    raw = full_path.read_text(encoding="utf-8")
    frontmatter, body = parse_frontmatter(raw)
    logger.debug("skill_loaded", path=str(path), keys=sorted(frontmatter))
    return SkillArtifact(path=str(path), frontmatter=frontmatter, body=body, raw=raw)


async def load_skill(path: str | Path, skills_dir: str | Path | None = None) -> SkillArtifact:
    """Async variant of `read_skill`; the file read runs off the event loop."""
    return await asyncio.to_thread(read_skill, path, skills_dir)


def discover_skill_paths(skills_dir: str | Path, language: str = "js") -> list[str]:
    """List skill files for one language, relative to `skills_dir`.

    Expects the layout ``<skill>/<language>/SKILL.md``. Skill directories
    without a file for that language are skipped.
    """
    root = Path(skills_dir)
    if not root.is_dir():
        logger.warning("skills_dir_missing", path=str(root))
        return []

    paths = []
    for entry in root.iterdir():
        if not entry.is_dir():
            continue
        skill_file = entry / language / SKILL_FILENAME
        if skill_file.is_file():
            paths.append(skill_file.relative_to(root).as_posix())
    return sorted(paths)
