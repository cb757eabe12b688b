"""Evaluation pipeline: structural checks and LLM-as-a-judge quality scoring.

Skill files are judged two ways. Structural checks are deterministic and
reject broken documents (missing metadata, no examples, empty sections).
Quality suites ask a model questions with a skill as its only reference and
grade the answers with independent judge calls.

Key components:
- structural: deterministic format checks
- judge: rubric prompt + tolerant score parsing
- evaluators: accuracy / completeness / code quality, coding and boundary variants
- dataset: built-in question sets (records under `questions`) and JSON dataset loading
- feedback: append-only score sinks (in-memory, LangSmith)
- runner: per-record orchestration and suite reports
- suites: configured entry points (structural, quality, langchain-core, coding, negative, python)
"""
