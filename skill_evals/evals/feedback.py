"""Feedback sinks: where per-case scores are reported.

Sinks are append-only. The evaluators and runner write to them and never read
back; aggregation happens downstream (reports, LangSmith experiments).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

import structlog
from pydantic import BaseModel

logger = structlog.get_logger(__name__)


class FeedbackEntry(BaseModel):
    case_id: str
    key: str
    score: float | bool
    comment: str | None = None


@runtime_checkable
class FeedbackSink(Protocol):
    def log_feedback(
        self,
        key: str,
        score: float | bool,
        *,
        case_id: str,
        comment: str | None = None,
    ) -> None: ...


class InMemoryFeedbackSink:
    """Collects feedback in process, in the order it was logged."""

    def __init__(self) -> None:
        self._entries: list[FeedbackEntry] = []

    def log_feedback(
        self,
        key: str,
        score: float | bool,
        *,
        case_id: str,
        comment: str | None = None,
    ) -> None:
        self._entries.append(FeedbackEntry(case_id=case_id, key=key, score=score, comment=comment))
        logger.debug("feedback_logged", case=case_id, key=key, score=score)

    @property
    def entries(self) -> tuple[FeedbackEntry, ...]:
        return tuple(self._entries)

    def scores_for(self, key: str) -> list[float]:
        return [float(e.score) for e in self._entries if e.key == key]


class LangSmithFeedbackSink:
    """Attaches feedback to LangSmith runs.

    Each case's feedback goes to the run registered for it in `run_ids` (or
    later through `bind`). Cases without their own run fall back to `run_id`,
    which aggregates them on one experiment run; the case id is kept in
    `source_info` either way.

    Requires LANGCHAIN_API_KEY to be set when no client is passed in.
    """

    def __init__(
        self,
        run_id: str | None = None,
        client: object | None = None,
        *,
        run_ids: Mapping[str, str] | None = None,
    ) -> None:
        if run_id is None and not run_ids:
            raise ValueError("LangSmithFeedbackSink needs a run_id or per-case run_ids")
        if client is None:
            from langsmith import Client

            client = Client()
        self._client = client
        self._run_id = run_id
        self._run_ids = dict(run_ids or {})

    def bind(self, case_id: str, run_id: str) -> None:
        """Route a case's feedback to its own run."""
        self._run_ids[case_id] = run_id

    def run_id_for(self, case_id: str) -> str:
        run_id = self._run_ids.get(case_id, self._run_id)
        if run_id is None:
            raise KeyError(f"No LangSmith run registered for case {case_id!r}")
        return run_id

    def log_feedback(
        self,
        key: str,
        score: float | bool,
        *,
        case_id: str,
        comment: str | None = None,
    ) -> None:
        run_id = self.run_id_for(case_id)
        self._client.create_feedback(
            run_id,
            key=key,
            score=float(score),
            comment=comment,
            source_info={"case_id": case_id},
        )
        logger.debug("langsmith_feedback", run_id=run_id, case=case_id, key=key, score=score)
