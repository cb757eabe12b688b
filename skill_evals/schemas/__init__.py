"""Pydantic models shared across the loader, evaluators, and runner."""
