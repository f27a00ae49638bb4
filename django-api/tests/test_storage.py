"""Tests for media storage on Django's Storage API.

Run with: pytest tests/test_storage.py -v
"""

import pytest
from django.core.files.storage import FileSystemStorage
from django.core.files.uploadedfile import SimpleUploadedFile

from events.domain.errors import ValidationError
from events.storage import MAX_IMAGE_BYTES, DjangoMediaStorage


@pytest.fixture
def storage(tmp_path, settings) -> DjangoMediaStorage:
    settings.MEDIA_URL = "/media/"
    return DjangoMediaStorage(FileSystemStorage(location=tmp_path, base_url="/media/"))


class TestUpload:
    def test_saves_under_events_with_unique_name(self, storage, tmp_path):
        first = storage.upload(SimpleUploadedFile("a.webp", b"x", content_type="image/webp"))
        second = storage.upload(SimpleUploadedFile("a.webp", b"x", content_type="image/webp"))

        assert first != second
        assert len(list((tmp_path / "events").iterdir())) == 2

    def test_rejects_oversized_images(self, storage):
        big = SimpleUploadedFile("big.jpg", b"0" * (MAX_IMAGE_BYTES + 1), content_type="image/jpeg")
        with pytest.raises(ValidationError):
            storage.upload(big)

    def test_rejects_mismatched_content_type(self, storage):
        with pytest.raises(ValidationError):
            storage.upload(SimpleUploadedFile("a.png", b"x", content_type="application/pdf"))


class TestDeleteUrls:
    def test_one_result_per_url(self, storage, tmp_path):
        url = storage.upload(SimpleUploadedFile("a.png", b"x", content_type="image/png"))

        results = storage.delete_urls([url, "/media/events/gone.png", ""])

        assert [result.success for result in results] == [True, False, False]
        assert results[1].error == "File not found"
        assert results[2].error == "Invalid URL"
        assert list((tmp_path / "events").iterdir()) == []


class TestNameFromUrl:
    def test_path_below_media_url(self, settings):
        settings.MEDIA_URL = "/media/"
        assert DjangoMediaStorage.name_from_url("https://jax.example.com/media/events/a.png") == (
            "events/a.png"
        )

    def test_foreign_url_uses_last_segment(self, settings):
        settings.MEDIA_URL = "/media/"
        assert DjangoMediaStorage.name_from_url("https://cdn.example.com/x/y/a%20b.png") == "a b.png"
