"""
Tests for image ingest.
"""
import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from blog_api import exceptions
from blog_api.media import content_hash, store_image

from .utils import make_image


class TestStoreImage:
    """Tests for store_image."""

    def test_stores_under_content_hash(self, media_root):
        upload = make_image("photo.png")
        digest = content_hash(upload)

        ref = store_image(upload)

        assert ref == f"/media/uploads/{digest}.png"
        assert (media_root / "uploads" / f"{digest}.png").exists()

    def test_same_content_is_stored_once(self, media_root):
        first = store_image(make_image("a.png"))
        second = store_image(make_image("b.png"))

        assert first == second
        assert len(list((media_root / "uploads").iterdir())) == 1

    def test_different_content_gets_different_names(self):
        red = store_image(make_image(color="red"))
        blue = store_image(make_image(color="blue"))
        assert red != blue

    def test_extension_from_detected_format(self):
        upload = make_image("noext", image_format="JPEG", content_type="image/jpeg")
        ref = store_image(upload)
        assert ref == f"/media/uploads/{content_hash(upload)}.jpg"

    def test_client_filename_extension_is_ignored(self):
        ref = store_image(make_image("payload.html"))
        assert ref.endswith(".png")
        assert ".html" not in ref

    def test_declared_type_does_not_pick_extension(self):
        """PNG bytes sent as image/jpeg are stored as .png."""
        ref = store_image(make_image("photo.jpg", content_type="image/jpeg"))
        assert ref.endswith(".png")

    def test_rejects_detected_format_outside_allowed_types(self):
        upload = make_image("cover.bmp", image_format="BMP", content_type="image/png")
        with pytest.raises(exceptions.ValidationError, match="Unsupported image format"):
            store_image(upload)

    def test_missing_upload(self):
        with pytest.raises(exceptions.ValidationError):
            store_image(None)

    def test_rejects_disallowed_type(self):
        upload = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")
        with pytest.raises(exceptions.ValidationError, match="Unsupported image type"):
            store_image(upload)

    def test_rejects_bytes_that_are_not_an_image(self):
        upload = SimpleUploadedFile("fake.png", b"definitely not a png", content_type="image/png")
        with pytest.raises(exceptions.ValidationError, match="not a valid image"):
            store_image(upload)

    def test_rejects_oversized_upload(self, settings):
        settings.BLOG_API = {"MEDIA_MAX_SIZE_MB": 0}
        with pytest.raises(exceptions.ValidationError, match="limit"):
            store_image(make_image())
