"""Tests for the autosave change detector."""

import pytest

from product_slides.models import EditValues
from product_slides.services import CatalogStore, ChangeDetector, StatusNotifier


@pytest.fixture
def store(raw_items):
    store = CatalogStore()
    store.load(raw_items)
    return store


@pytest.fixture
def notifier(qapp):
    return StatusNotifier()


@pytest.fixture
def writes(store, monkeypatch):
    calls = []
    original = store.apply_edit

    def counting_apply_edit(*args):
        calls.append(args)
        original(*args)

    monkeypatch.setattr(store, "apply_edit", counting_apply_edit)
    return calls


def test_flush_is_idempotent(store, notifier, writes):
    detector = ChangeDetector(store, notifier)
    messages = []
    notifier.message_changed.connect(messages.append)
    values = EditValues(price_text="15", not_available=False, note_text="")

    assert detector.flush(values, interactive=True) is True
    assert detector.flush(values, interactive=True) is False

    assert writes == [(15.0, True, "")]
    assert messages == ['Data for "Pen" updated!']


def test_numeric_price_equality(store, notifier, writes):
    detector = ChangeDetector(store, notifier)
    assert detector.flush(EditValues(price_text="10.0"), interactive=True) is False
    assert detector.flush(EditValues(price_text=" 10 "), interactive=True) is False
    assert writes == []
    assert notifier.message == ""


def test_blank_price_matches_absent_price(store, notifier, writes):
    store.seek(1)
    detector = ChangeDetector(store, notifier)
    values = EditValues(price_text="", not_available=True, note_text="chipped")
    assert detector.flush(values) is False
    assert writes == []


def test_silent_flush_commits_without_message(store, notifier):
    detector = ChangeDetector(store, notifier)
    assert detector.flush(EditValues(price_text="12", note_text="new"), interactive=False)
    assert store.current_record().price == 12.0
    assert store.current_record().note == "new"
    assert notifier.message == ""


def test_not_available_toggle_is_inverted(store, notifier):
    detector = ChangeDetector(store, notifier)
    detector.flush(EditValues(price_text="10", not_available=True))
    assert store.current_record().is_available is False


def test_note_is_trimmed_before_comparison(store, notifier, writes):
    detector = ChangeDetector(store, notifier)
    assert detector.flush(EditValues(price_text="10", note_text="  gift  "))
    assert store.current_record().note == "gift"
    assert detector.flush(EditValues(price_text="10", note_text="gift ")) is False
    assert len(writes) == 1


def test_combined_write_of_all_fields(store, notifier, writes):
    detector = ChangeDetector(store, notifier)
    detector.flush(EditValues(price_text="10", not_available=False, note_text="only note"))
    assert writes == [(10.0, True, "only note")]


def test_unparseable_price_keeps_stored_price(store, notifier):
    detector = ChangeDetector(store, notifier)
    assert detector.flush(EditValues(price_text="abc", note_text="kept")) is True
    record = store.current_record()
    assert record.price == 10.0
    assert record.note == "kept"
    assert detector.flush(EditValues(price_text="abc", note_text="kept")) is False


def test_flush_on_empty_store_is_noop(notifier):
    detector = ChangeDetector(CatalogStore(), notifier)
    assert detector.flush(EditValues(price_text="1"), interactive=True) is False
    assert notifier.message == ""


def test_update_status_duration_comes_from_config(store, notifier, monkeypatch):
    from product_slides.protocols import AppConfig, set_app_config

    set_app_config(AppConfig(update_status_ms=1234))
    durations = []
    monkeypatch.setattr(notifier, "show", lambda message, duration_ms: durations.append(duration_ms))
    ChangeDetector(store, notifier).flush(EditValues(price_text="11"), interactive=True)
    assert durations == [1234]
