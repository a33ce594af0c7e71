"""Tests for debounce.py — cancel-and-replace timers."""

import time
from unittest.mock import MagicMock

import pytest

from qamus.debounce import DEBOUNCE_SECONDS, Debouncer


@pytest.fixture
def callback() -> MagicMock:
    return MagicMock()


class TestDebouncer:

    def test_default_delay(self) -> None:
        assert Debouncer().delay == DEBOUNCE_SECONDS == 0.3

    def test_invalid_delay(self) -> None:
        with pytest.raises(ValueError):
            Debouncer(0)

    def test_fires_after_delay(self, callback: MagicMock) -> None:
        debouncer = Debouncer(0.05)
        debouncer.schedule(callback, "بيت")
        assert debouncer.pending
        callback.assert_not_called()

        time.sleep(0.2)
        callback.assert_called_once_with("بيت")
        assert not debouncer.pending

    def test_last_call_wins(self, callback: MagicMock) -> None:
        """Rapid schedules coalesce into one call with the last arguments."""
        debouncer = Debouncer(0.1)
        for text in ["ب", "بي", "بيت"]:
            debouncer.schedule(callback, text)
            time.sleep(0.02)

        time.sleep(0.3)
        callback.assert_called_once_with("بيت")

    def test_cancel(self, callback: MagicMock) -> None:
        debouncer = Debouncer(0.05)
        debouncer.schedule(callback)
        debouncer.cancel()
        assert not debouncer.pending

        time.sleep(0.15)
        callback.assert_not_called()

    def test_cancel_without_pending(self) -> None:
        Debouncer(0.05).cancel()  # Should not raise

    def test_flush_runs_immediately(self, callback: MagicMock) -> None:
        debouncer = Debouncer(5.0)
        debouncer.schedule(callback, 1, 2)
        assert debouncer.flush() is True
        callback.assert_called_once_with(1, 2)
        assert not debouncer.pending

    def test_flush_without_pending(self, callback: MagicMock) -> None:
        assert Debouncer(0.05).flush() is False

    def test_flush_prevents_timer_firing(self, callback: MagicMock) -> None:
        debouncer = Debouncer(0.05)
        debouncer.schedule(callback)
        debouncer.flush()
        time.sleep(0.15)
        callback.assert_called_once()

    def test_callback_error_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """A failing callback does not propagate out of flush()."""
        failing = MagicMock(side_effect=RuntimeError("boom"))
        debouncer = Debouncer(5.0)
        debouncer.schedule(failing)
        assert debouncer.flush() is True
        assert "Error in debounced callback" in caplog.text
