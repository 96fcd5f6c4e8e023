"""Tests for transient status messages."""

from product_slides.services import StatusNotifier

from conftest import wait_until


def test_show_replaces_message(qapp):
    notifier = StatusNotifier()
    seen = []
    notifier.message_changed.connect(seen.append)

    notifier.show("first", 1000)
    notifier.show("second", 1000)

    assert notifier.message == "second"
    assert seen == ["first", "second"]


def test_message_clears_after_duration(qapp):
    notifier = StatusNotifier()
    notifier.show("saved", 20)
    assert notifier.is_pending
    assert wait_until(lambda: notifier.message == "")
    assert not notifier.is_pending


def test_last_call_wins_deadline(qapp):
    notifier = StatusNotifier()
    notifier.show("short", 20)
    notifier.show("long", 2000)
    wait_until(lambda: False, timeout=0.15)
    assert notifier.message == "long"
    notifier.clear()


def test_clear_is_idempotent(qapp):
    notifier = StatusNotifier()
    seen = []
    notifier.message_changed.connect(seen.append)
    notifier.show("x", 1000)
    notifier.clear()
    notifier.clear()
    assert seen == ["x", ""]
    assert notifier.message == ""
