"""
Unit Tests for DrawTimer (busy guard and delayed completion).
"""

from src.chit_picker.services.draw_timer import DrawTimer


class TestDrawTimer:
    def test_start_when_idle_then_busy_until_due(self):
        timer = DrawTimer(delay=2.0)
        assert timer.start(100.0)
        assert timer.busy
        assert timer.remaining(100.5) == 1.5
        assert not timer.poll(101.9)
        assert timer.busy

    def test_start_when_busy_then_rejected_and_due_unchanged(self):
        timer = DrawTimer(delay=2.0)
        timer.start(100.0)
        assert not timer.start(101.0)
        assert timer.due_at == 102.0

    def test_poll_when_due_then_fires_once(self):
        timer = DrawTimer(delay=2.0)
        timer.start(100.0)
        assert timer.poll(102.0)
        assert not timer.busy
        assert not timer.poll(200.0)

    def test_remaining_when_idle_then_zero(self):
        assert DrawTimer(delay=2.0).remaining(5.0) == 0.0

    def test_start_when_negative_delay_then_due_immediately(self):
        timer = DrawTimer(delay=-1.0)
        timer.start(10.0)
        assert timer.poll(10.0)
