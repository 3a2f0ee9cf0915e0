"""Tests for the single-flight move lock."""

from taskboard.client.lock import MoveLock


def test_try_begin_once():
    lock = MoveLock()
    assert not lock.held
    assert lock.try_begin()
    assert lock.held
    assert not lock.try_begin()


def test_end_releases():
    lock = MoveLock()
    lock.try_begin()
    lock.end()
    assert not lock.held
    assert lock.try_begin()


def test_end_when_free():
    lock = MoveLock()
    lock.end()
    assert not lock.held
