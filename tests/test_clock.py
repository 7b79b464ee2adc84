"""Tests for FrameClock pacing."""

import pytest

from tick_wave.clock import FrameClock
from tick_wave.types import WaveConfigError


def test_clock_initialization():
    clock = FrameClock(frame_cap=30)
    assert clock.frame_cap == 30
    assert clock.frame_number == 0
    assert clock.last_frame is None
    assert abs(clock.frame_length - 1 / 30) < 1e-9


def test_zero_frame_cap_raises():
    with pytest.raises(WaveConfigError, match="frame_cap must be positive"):
        FrameClock(frame_cap=0)


def test_negative_frame_cap_raises():
    with pytest.raises(ValueError):
        FrameClock(frame_cap=-5)


def test_first_frame_always_due():
    clock = FrameClock(frame_cap=30)
    assert clock.due(0.0)
    assert clock.due(1234.5)


def test_not_due_before_frame_length():
    clock = FrameClock(frame_cap=10)
    clock.mark(5.0)
    assert not clock.due(5.0)
    assert not clock.due(5.05)


def test_due_after_frame_length():
    clock = FrameClock(frame_cap=10)
    clock.mark(5.0)
    assert clock.due(5.2)


def test_mark_counts_frames():
    clock = FrameClock(frame_cap=10)
    assert clock.mark(1.0) == 1
    assert clock.mark(2.0) == 2
    assert clock.frame_number == 2
    assert clock.last_frame == 2.0


def test_reset():
    clock = FrameClock(frame_cap=10)
    clock.mark(1.0)
    clock.reset()
    assert clock.frame_number == 0
    assert clock.last_frame is None
    assert clock.due(1.0)
