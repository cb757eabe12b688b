"""Tests for feedback sinks."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from skill_evals.evals.feedback import FeedbackSink, InMemoryFeedbackSink, LangSmithFeedbackSink


class TestInMemorySink:
    def test_entries_keep_log_order(self):
        sink = InMemoryFeedbackSink()
        sink.log_feedback("accuracy", 0.9, case_id="a")
        sink.log_feedback("completeness", 0.5, case_id="a", comment="gaps")
        sink.log_feedback("accuracy", 0.3, case_id="b")

        assert [(e.case_id, e.key) for e in sink.entries] == [
            ("a", "accuracy"),
            ("a", "completeness"),
            ("b", "accuracy"),
        ]
        assert sink.entries[1].comment == "gaps"
        assert sink.scores_for("accuracy") == [0.9, 0.3]

    def test_entries_are_read_only_view(self):
        sink = InMemoryFeedbackSink()
        sink.log_feedback("k", True, case_id="a")
        assert isinstance(sink.entries, tuple)
        assert sink.scores_for("k") == [1.0]

    def test_satisfies_protocol(self):
        assert isinstance(InMemoryFeedbackSink(), FeedbackSink)


class TestLangSmithSink:
    def test_forwards_to_client(self):
        client = MagicMock()
        sink = LangSmithFeedbackSink("run-123", client=client)
        sink.log_feedback("composite_quality", 0.75, case_id="a/js/SKILL.md :: q", comment="ok")

        client.create_feedback.assert_called_once_with(
            "run-123",
            key="composite_quality",
            score=0.75,
            comment="ok",
            source_info={"case_id": "a/js/SKILL.md :: q"},
        )

    def test_boolean_scores_are_numeric(self):
        client = MagicMock()
        LangSmithFeedbackSink("run-1", client=client).log_feedback("frontmatter_valid", False, case_id="x")
        assert client.create_feedback.call_args.kwargs["score"] == 0.0

    def test_satisfies_protocol(self):
        assert isinstance(LangSmithFeedbackSink("run-1", client=MagicMock()), FeedbackSink)

    def test_per_case_runs(self):
        client = MagicMock()
        sink = LangSmithFeedbackSink("experiment", client=client, run_ids={"a": "run-a"})
        sink.bind("b", "run-b")
        for case_id in ("a", "b", "c"):
            sink.log_feedback("accuracy", 0.5, case_id=case_id)

        run_ids = [call.args[0] for call in client.create_feedback.call_args_list]
        assert run_ids == ["run-a", "run-b", "experiment"]

    def test_unregistered_case_without_default_run(self):
        sink = LangSmithFeedbackSink(client=MagicMock(), run_ids={"a": "run-a"})
        with pytest.raises(KeyError, match="'b'"):
            sink.log_feedback("accuracy", 0.5, case_id="b")

    def test_requires_some_run(self):
        with pytest.raises(ValueError):
            LangSmithFeedbackSink(client=MagicMock())
