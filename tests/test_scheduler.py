"""
Tests cho RecomputeScheduler (debounce state machine).

Dung ManualTimer + FakeClock de dieu khien thoi gian chinh xac,
va mot test voi SafeTimer that de kiem tra wiring tren Timer thread.
"""

import time
from unittest.mock import Mock

import pytest

from core.text_stats import StatsSnapshot
from services.stats_pkg import IDLE, PendingAt, RecomputeScheduler, SinkRegistry


class Document:
    """Noi dung document ma compute_snapshot doc tai thoi diem chay."""

    def __init__(self, text: str = ""):
        self.text = text

    def snapshot(self) -> StatsSnapshot:
        words = len(self.text.split())
        return StatsSnapshot(characters=len(self.text), words=words, pages=0.0)


@pytest.fixture
def document():
    return Document()


@pytest.fixture
def sink():
    return Mock()


@pytest.fixture
def scheduler(clock, timers, document, sink):
    registry = SinkRegistry()
    registry.register(sink)
    return RecomputeScheduler(
        compute_snapshot=document.snapshot,
        registry=registry,
        quiet_window_ms=500,
        timer_factory=timers,
        clock=clock,
    )


class TestDebounce:
    """Coalesced trigger: edit lien tuc -> 1 recompute."""

    def test_burst_within_window_recomputes_once(self, scheduler, clock, timers, document, sink):
        for i in range(5):
            document.text = "word " * (i + 1)
            scheduler.notify_content_edited()
            clock.advance(0.1)

        assert sink.call_count == 0
        assert isinstance(scheduler.state, PendingAt)

        clock.advance(0.5)
        timers.current.fire()

        assert scheduler.recompute_count == 1
        sink.assert_called_once()
        # Doc noi dung sau edit cuoi cung
        assert sink.call_args[0][0].words == 5
        assert scheduler.state == IDLE

    def test_spaced_edits_recompute_each_time(self, scheduler, clock, timers, sink):
        for _ in range(3):
            scheduler.notify_content_edited()
            clock.advance(0.6)
            timers.current.fire()

        assert scheduler.recompute_count == 3
        assert sink.call_count == 3

    def test_single_timer_reused(self, scheduler, timers):
        for _ in range(10):
            scheduler.notify_content_edited()

        assert len(timers.timers) == 1
        assert timers.current.start_count == 10

    def test_deadline_moves_with_last_edit(self, scheduler, clock):
        scheduler.notify_content_edited()
        first = scheduler.state
        clock.advance(0.3)
        scheduler.notify_content_edited()

        assert first.deadline == pytest.approx(100.5)
        assert scheduler.state.deadline == pytest.approx(100.8)

    def test_early_fire_ignored(self, scheduler, clock, timers, sink):
        """Fire truoc deadline (vd: stale thread timer) khong recompute."""
        scheduler.notify_content_edited()
        clock.advance(0.1)
        timers.current.fire()

        sink.assert_not_called()
        assert scheduler.is_pending

        # Timer duoc hen lai, fire sau deadline -> dung 1 recompute
        timers.current.start()
        clock.advance(0.4)
        timers.current.fire()

        sink.assert_called_once()
        assert scheduler.recompute_count == 1
        assert scheduler.state == IDLE

    def test_content_read_at_execution_time(self, scheduler, clock, timers, document, sink):
        document.text = "old"
        scheduler.notify_content_edited()
        document.text = "new content here"
        clock.advance(0.5)
        timers.current.fire()

        assert sink.call_args[0][0].words == 3


class TestImmediateTrigger:
    """Focus change: recompute dong bo, huy pending edit."""

    def test_focus_change_recomputes_immediately(self, scheduler, document, sink):
        document.text = "a b"
        snapshot = scheduler.notify_active_document_changed()

        assert snapshot is not None and snapshot.words == 2
        sink.assert_called_once_with(snapshot)
        assert scheduler.last_snapshot is snapshot

    def test_focus_change_cancels_pending_edit(self, scheduler, clock, timers, sink):
        scheduler.notify_content_edited()
        scheduler.notify_active_document_changed()

        assert scheduler.state == IDLE
        assert not timers.current.active

        clock.advance(1.0)
        timers.current.fire()
        assert sink.call_count == 1

    def test_recompute_now(self, scheduler, sink):
        scheduler.recompute_now("settings")
        assert scheduler.recompute_count == 1
        sink.assert_called_once()


class TestShutdown:
    """Shutdown: huy timer, khong broadcast nua."""

    def test_shutdown_cancels_pending(self, scheduler, clock, timers, sink):
        scheduler.notify_content_edited()
        scheduler.shutdown()

        assert timers.current.disposed
        assert scheduler.state == IDLE
        clock.advance(1.0)
        timers.current.fire()
        sink.assert_not_called()

    def test_no_triggers_after_shutdown(self, scheduler, timers, sink):
        scheduler.shutdown()
        scheduler.notify_content_edited()

        assert scheduler.recompute_now() is None
        assert scheduler.notify_active_document_changed() is None
        assert timers.current.start_count == 0
        sink.assert_not_called()

    def test_shutdown_idempotent(self, scheduler):
        scheduler.shutdown()
        scheduler.shutdown()
        assert scheduler.is_shutdown


class TestQuietWindow:
    def test_negative_window_rejected(self, timers):
        with pytest.raises(ValueError):
            RecomputeScheduler(Mock(), SinkRegistry(), quiet_window_ms=-1, timer_factory=timers)

    def test_timer_interval_from_window(self, scheduler, timers):
        assert timers.current.interval == 0.5

    def test_change_window_reschedules_pending(self, scheduler, clock, timers, sink):
        scheduler.notify_content_edited()
        scheduler.set_quiet_window_ms(200)

        assert len(timers.timers) == 2
        assert timers.timers[0].disposed
        assert timers.current.interval == 0.2
        assert scheduler.state.deadline == pytest.approx(100.2)

        clock.advance(0.2)
        timers.current.fire()
        sink.assert_called_once()

    def test_change_window_when_idle_does_not_start(self, scheduler, timers):
        scheduler.set_quiet_window_ms(100)
        assert not timers.current.active
        assert scheduler.quiet_window_ms == 100


class TestComputeErrors:
    def test_compute_error_is_not_broadcast(self, timers, sink):
        registry = SinkRegistry()
        registry.register(sink)
        failing = Mock(side_effect=OSError("disk gone"))
        scheduler = RecomputeScheduler(failing, registry, timer_factory=timers)

        assert scheduler.recompute_now() is None
        sink.assert_not_called()
        assert scheduler.last_snapshot is None

        # Van hoat dong binh thuong sau loi
        failing.side_effect = None
        failing.return_value = StatsSnapshot(1, 1, 0.0)
        assert scheduler.recompute_now() == StatsSnapshot(1, 1, 0.0)


class TestWithSafeTimer:
    """Wiring voi SafeTimer that (Timer thread)."""

    def test_burst_with_real_timer(self, document):
        sink = Mock()
        registry = SinkRegistry()
        registry.register(sink)
        scheduler = RecomputeScheduler(
            compute_snapshot=document.snapshot,
            registry=registry,
            quiet_window_ms=100,
        )
        try:
            for i in range(5):
                document.text = "w " * (i + 1)
                scheduler.notify_content_edited()
                time.sleep(0.001)

            time.sleep(0.6)

            assert sink.call_count == 1
            assert sink.call_args[0][0].words == 5
        finally:
            scheduler.shutdown()

    def test_shutdown_before_fire(self, document):
        sink = Mock()
        registry = SinkRegistry()
        registry.register(sink)
        scheduler = RecomputeScheduler(document.snapshot, registry, quiet_window_ms=50)

        scheduler.notify_content_edited()
        scheduler.shutdown()
        time.sleep(0.2)

        sink.assert_not_called()
