"""Structural and LLM-as-a-judge evaluation of SKILL.md reference files."""

__version__ = "0.1.0"
