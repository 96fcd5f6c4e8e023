"""Tests for the command-line entry point."""

import json

import pytest

from product_slides import app
from product_slides.core import log_utils
from product_slides.protocols import get_app_config


@pytest.fixture(autouse=True)
def skip_logging_setup(monkeypatch):
    monkeypatch.setattr(log_utils, "_configured", True)


def test_export_prints_report(tmp_path, capsys):
    data = tmp_path / "data.json"
    data.write_text(json.dumps([
        {"id": 1, "title": "Pen", "image": "pen.png", "price": 10},
        {"id": 2, "title": "Cup", "image": "cup.png", "isAvailable": False, "note": "chipped"},
    ]), encoding="utf-8")

    assert app.main([str(data), "--export"]) == 0

    out = capsys.readouterr().out
    assert out == (
        "--- PRODUCT LIST ---\n\n1. Pen\n   - Price: 10 PKR\n---\n"
        "2. Cup\n   - Status: *Not Available*\n   - Note: chipped\n\n--- END ---\n"
    )
    assert get_app_config().data_source == str(data)


def test_export_missing_source_fails(tmp_path, capsys):
    assert app.main([str(tmp_path / "missing.json"), "--export"]) == 1
    assert capsys.readouterr().out == ""


def test_build_config_from_args():
    args = app._parse_args(["shop.json", "--image-timeout", "2.5", "--log-level", "DEBUG"])
    config = app.build_config(args)
    assert config.data_source == "shop.json"
    assert config.image_timeout_s == 2.5
    assert config.log_level == "DEBUG"
