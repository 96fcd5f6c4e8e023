"""Tests for catalog and image IO."""

import json

import pytest
import requests
from PyQt6.QtGui import QColor, QImage

from product_slides.io import (
    CatalogLoadError, ImageLoadError, fetch_catalog_document, fetch_image_bytes,
    load_image, resolve_image_reference,
)
from product_slides.io import data_source, image_fetcher


class FakeResponse:
    def __init__(self, status_code=200, text="", content=b""):
        self.status_code = status_code
        self.text = text
        self.content = content

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


def test_reads_list_from_file(tmp_path, raw_items):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(raw_items), encoding="utf-8")
    assert fetch_catalog_document(str(path)) == raw_items


def test_reads_file_uri(tmp_path, raw_items):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(raw_items), encoding="utf-8")
    assert fetch_catalog_document(path.as_uri()) == raw_items


def test_accepts_items_wrapper(tmp_path, raw_items):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"items": raw_items}), encoding="utf-8")
    assert len(fetch_catalog_document(str(path))) == 3


@pytest.mark.parametrize("content", ["{not json", '{"products": []}', '"text"'])
def test_bad_documents_raise(tmp_path, content):
    path = tmp_path / "data.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        fetch_catalog_document(str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(CatalogLoadError):
        fetch_catalog_document(str(tmp_path / "nope.json"))


def test_http_success(monkeypatch, raw_items):
    seen = {}

    def fake_get(url, timeout):
        seen["url"], seen["timeout"] = url, timeout
        return FakeResponse(text=json.dumps(raw_items))

    monkeypatch.setattr(data_source.requests, "get", fake_get)
    assert fetch_catalog_document("https://example.com/data.json", timeout=3) == raw_items
    assert seen == {"url": "https://example.com/data.json", "timeout": 3}


def test_http_error_status_raises(monkeypatch):
    monkeypatch.setattr(data_source.requests, "get",
                        lambda url, timeout: FakeResponse(status_code=404))
    with pytest.raises(CatalogLoadError):
        fetch_catalog_document("https://example.com/data.json")


def test_http_transport_failure_raises(monkeypatch):
    def fake_get(url, timeout):
        raise requests.exceptions.ConnectionError("offline")

    monkeypatch.setattr(data_source.requests, "get", fake_get)
    with pytest.raises(CatalogLoadError):
        fetch_catalog_document("http://example.com/data.json")


def test_resolve_image_reference(tmp_path):
    data_file = str(tmp_path / "data.json")
    assert resolve_image_reference(data_file, "img/pen.png") == str(tmp_path / "img" / "pen.png")
    assert resolve_image_reference(data_file, "https://cdn.test/pen.png") == "https://cdn.test/pen.png"
    assert resolve_image_reference("https://shop.test/catalog/data.json", "pen.png") == \
        "https://shop.test/catalog/pen.png"
    assert resolve_image_reference("", "pen.png") == "pen.png"
    absolute = str(tmp_path / "pen.png")
    assert resolve_image_reference(data_file, absolute) == absolute


def test_fetch_image_bytes_missing_file(tmp_path):
    with pytest.raises(ImageLoadError) as excinfo:
        fetch_image_bytes(str(tmp_path / "missing.png"))
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    with pytest.raises(ImageLoadError):
        fetch_image_bytes("")


def test_fetch_image_bytes_http_error(monkeypatch):
    monkeypatch.setattr(image_fetcher.requests, "get",
                        lambda url, timeout: FakeResponse(status_code=500))
    with pytest.raises(ImageLoadError):
        fetch_image_bytes("https://cdn.test/pen.png")


def test_load_image_decodes_png(qapp, tmp_path):
    path = tmp_path / "pen.png"
    source = QImage(4, 3, QImage.Format.Format_RGB32)
    source.fill(QColor("red"))
    assert source.save(str(path), "PNG")

    image = load_image(str(path))
    assert (image.width(), image.height()) == (4, 3)


def test_load_image_rejects_undecodable_bytes(qapp, tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"definitely not an image")
    with pytest.raises(ImageLoadError):
        load_image(str(path))


def test_undecodable_file_raises(tmp_path):
    path = tmp_path / "data.json"
    path.write_bytes(b'[{"title": "P\xff", "image": "a.png"}]')
    with pytest.raises(CatalogLoadError) as excinfo:
        fetch_catalog_document(str(path))
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
