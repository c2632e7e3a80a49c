"""Tests for the analysis session lifecycle."""

import pytest

from core.session import AnalysisSession, SessionStateError, SessionStatus


class TestSessionLifecycle:
    def test_starts_idle(self):
        session = AnalysisSession()
        assert session.status == SessionStatus.IDLE
        assert not session.is_ready

    def test_load_then_ready(self):
        session = AnalysisSession()
        report = object()
        session.begin("sales.xlsx")
        assert session.status == SessionStatus.LOADING
        session.complete(report)
        assert session.is_ready
        assert session.report is report
        assert session.source == "sales.xlsx"

    def test_load_then_error(self):
        session = AnalysisSession()
        session.begin("empty.xlsx")
        session.fail("No rows found in the first sheet.")
        assert session.status == SessionStatus.ERROR
        assert session.error == "No rows found in the first sheet."
        assert session.report is None

    def test_new_load_clears_previous_result(self):
        session = AnalysisSession()
        session.begin("a.xlsx")
        session.fail("broken")
        session.begin("b.xlsx")
        assert session.status == SessionStatus.LOADING
        assert session.error is None
        assert session.source == "b.xlsx"


class TestInvalidTransitions:
    def test_cannot_complete_from_idle(self):
        with pytest.raises(SessionStateError):
            AnalysisSession().complete(object())

    def test_cannot_fail_from_idle(self):
        with pytest.raises(SessionStateError):
            AnalysisSession().fail("boom")

    def test_cannot_begin_twice(self):
        session = AnalysisSession()
        session.begin("a.xlsx")
        with pytest.raises(SessionStateError, match="loading"):
            session.begin("b.xlsx")
