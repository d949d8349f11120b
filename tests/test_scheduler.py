"""Tests for aviary.core.scheduler – virtual time."""

from __future__ import annotations

from aviary.core.scheduler import VirtualScheduler


class TestVirtualScheduler:
    def test_not_fired_before_due(self):
        s = VirtualScheduler()
        fired = []
        s.call_later(500, lambda: fired.append("a"))
        s.advance(499)
        assert fired == []
        assert s.pending == 1

    def test_fired_at_due_time(self):
        s = VirtualScheduler()
        fired = []
        s.call_later(500, lambda: fired.append(s.now_ms))
        s.advance(500)
        assert fired == [500]
        assert s.pending == 0

    def test_order_by_due_then_fifo(self):
        s = VirtualScheduler()
        fired = []
        s.call_later(200, lambda: fired.append("late"))
        s.call_later(100, lambda: fired.append("first"))
        s.call_later(100, lambda: fired.append("second"))
        s.advance(1000)
        assert fired == ["first", "second", "late"]

    def test_nested_schedule_within_window(self):
        s = VirtualScheduler()
        fired = []
        s.call_later(100, lambda: s.call_later(100, lambda: fired.append(s.now_ms)))
        s.advance(250)
        assert fired == [200]
        assert s.now_ms == 250

    def test_run_all(self):
        s = VirtualScheduler()
        fired = []
        s.call_later(20000, lambda: fired.append("x"))
        s.run_all()
        assert fired == ["x"]
        assert s.now_ms == 20000

    def test_negative_delay_runs_now(self):
        s = VirtualScheduler()
        fired = []
        s.call_later(-5, lambda: fired.append("x"))
        s.advance(0)
        assert fired == ["x"]
