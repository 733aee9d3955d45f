import pytest

from fightstick_view.core import (
    Button, ButtonSet, HistoryBuffer, HistoryEmptyError, Snapshot, StickAxis,
)

ATTACKS = [Button.NORTH, Button.SOUTH, Button.WEST, Button.EAST,
           Button.LEFT_TRIGGER, Button.RIGHT_TRIGGER,
           Button.LEFT_TRIGGER_2, Button.RIGHT_TRIGGER_2]


def make(i):
    """Distinct, non-zero snapshot for every i in 0..71."""
    return Snapshot(
        axis=StickAxis(i % 3 - 1, (i // 3) % 3 - 1),
        buttons=ButtonSet([ATTACKS[(i // 9) % 8]]),
    )


def test_starts_with_single_zero_snapshot():
    history = HistoryBuffer()
    assert len(history) == 1
    assert history.capacity == 24
    assert history.latest() == Snapshot.zero()


def test_length_stays_bounded():
    history = HistoryBuffer()
    for i in range(70):
        history.push(make(i))
        assert 1 <= len(history) <= 24
    assert history.is_full()


def test_fifo_eviction_removes_only_oldest():
    history = HistoryBuffer()
    for i in range(23):
        history.push(make(i))
    assert len(history) == 24
    before = list(history)

    history.push(make(50))

    assert len(history) == 24
    assert list(history) == before[1:] + [make(50)]


def test_latest_is_last_pushed():
    history = HistoryBuffer(capacity=3)
    for i in range(10):
        history.push(make(i))
        assert history.latest() == make(i)


def test_reverse_iteration_newest_first():
    history = HistoryBuffer(capacity=4)
    for i in range(6):
        history.push(make(i))

    assert list(history.iter_chronological_reverse()) == [make(5), make(4), make(3), make(2)]
    assert list(history) == [make(2), make(3), make(4), make(5)]


def test_reverse_iteration_is_a_stable_copy():
    history = HistoryBuffer(capacity=4)
    history.push(make(1))
    entries = history.iter_chronological_reverse()
    history.push(make(2))

    assert list(entries) == [make(1), Snapshot.zero()]
    # A fresh query sees the new state
    assert list(history.iter_chronological_reverse()) == [make(2), make(1), Snapshot.zero()]


def test_reset_leaves_single_zero_snapshot():
    history = HistoryBuffer()
    for i in range(30):
        history.push(make(i))
    history.reset()
    assert len(history) == 1
    assert list(history) == [Snapshot.zero()]

    history.reset()
    assert len(history) == 1
    assert history.latest() == Snapshot.zero()


def test_push_stores_a_copy():
    history = HistoryBuffer()
    working = make(4)
    history.push(working)

    working.axis.x = 0
    working.buttons.add(Button.START)

    assert history.latest() == make(4)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        HistoryBuffer(capacity=0)


def test_capacity_one_keeps_only_latest():
    history = HistoryBuffer(capacity=1)
    history.push(make(7))
    assert list(history) == [make(7)]


def test_latest_on_empty_buffer_raises():
    history = HistoryBuffer()
    # Not reachable through the public API, which always reseeds on reset
    history._length = 0
    with pytest.raises(HistoryEmptyError):
        history.latest()
