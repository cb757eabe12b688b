"""Loading SKILL.md files from disk."""
