"""Deterministic helpers: code validation and console output."""
