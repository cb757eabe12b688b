"""Prompt text for the judge and the answerer."""
