"""Tests for image upload validation and retrieval."""

import base64

import pytest

from folio.core.exceptions import NotFoundError, ValidationError
from folio.schemas.image import ImageCreate
from folio.services import image_service
from folio.services.image_service import MAX_IMAGE_BYTES, ImageService, decoded_size, sanitize_filename

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(64))
PNG_B64 = base64.b64encode(PNG_BYTES).decode()


@pytest.fixture
def service(db) -> ImageService:
    return ImageService(db)


def upload(service, data=PNG_B64, mime_type="image/png", filename="cover.png"):
    return service.create(ImageCreate(filename=filename, mime_type=mime_type, data=data), uploaded_by="user-1")


class TestCreate:
    def test_stores_plain_base64(self, service):
        image = upload(service)

        assert image.id
        assert image.mime_type == "image/png"
        assert image.data == PNG_B64
        assert image.uploaded_by == "user-1"

    def test_strips_data_uri_prefix(self, service):
        image = upload(service, data=f"data:image/png;base64,{PNG_B64}")
        assert image.data == PNG_B64

    def test_svg_prefix_is_recognised(self, service):
        svg = base64.b64encode(b"<svg xmlns='http://www.w3.org/2000/svg'/>").decode()
        image = upload(service, data=f"data:image/svg+xml;base64,{svg}", mime_type="image/svg+xml")
        assert image.data == svg

    @pytest.mark.parametrize("mime_type", ["image/jpeg", "image/png", "image/gif", "image/webp", "image/svg+xml"])
    def test_allowed_mime_types(self, service, mime_type):
        assert upload(service, mime_type=mime_type).mime_type == mime_type

    @pytest.mark.parametrize("mime_type", ["image/bmp", "application/pdf", "text/html", "IMAGE/PNG"])
    def test_rejects_other_mime_types(self, service, mime_type):
        with pytest.raises(ValidationError) as exc_info:
            upload(service, mime_type=mime_type)
        assert "Invalid file type" in exc_info.value.message

    @pytest.mark.parametrize("data", ["not base64!!", "abc", "ab=c", "data:image/png;base64,@@@@"])
    def test_rejects_malformed_base64(self, service, data):
        with pytest.raises(ValidationError) as exc_info:
            upload(service, data=data)
        assert exc_info.value.message == "Invalid base64 data"

    def test_rejects_payload_over_five_mebibytes(self, service):
        too_big = base64.b64encode(b"\x00" * (MAX_IMAGE_BYTES + 1)).decode()
        with pytest.raises(ValidationError) as exc_info:
            upload(service, data=too_big)
        assert "too large" in exc_info.value.message

    def test_oversized_payload_is_rejected_before_decoding(self, service, monkeypatch):
        too_big = base64.b64encode(b"\x00" * (MAX_IMAGE_BYTES + 3)).decode()

        def fail_decode(*args, **kwargs):
            raise AssertionError("payload should not be decoded")

        monkeypatch.setattr(image_service.base64, "b64decode", fail_decode)
        with pytest.raises(ValidationError) as exc_info:
            upload(service, data=too_big)
        assert "too large" in exc_info.value.message

    @pytest.mark.parametrize("length", [1, 2, 3, 4, 100])
    def test_decoded_size_matches_payload_length(self, length):
        encoded = base64.b64encode(b"x" * length).decode()
        assert decoded_size(encoded) == length

    def test_accepts_payload_at_the_cap(self, service):
        at_cap = base64.b64encode(b"\x00" * MAX_IMAGE_BYTES).decode()
        assert upload(service, data=at_cap).id

    def test_filename_is_sanitized(self, service):
        image = upload(service, filename="my photo (1)/../évil.png")
        assert image.filename == "my_photo__1__..__vil.png"


class TestSanitizeFilename:
    def test_keeps_allowed_characters(self):
        assert sanitize_filename("Cover_image-2.final.PNG") == "Cover_image-2.final.PNG"

    def test_truncates_to_255(self):
        assert len(sanitize_filename("a" * 400 + ".png")) == 255


class TestReadDelete:
    def test_get_content_decodes_bytes(self, service):
        image = upload(service, data=f"data:image/png;base64,{PNG_B64}")
        content, mime_type = service.get_content(image.id)
        assert content == PNG_BYTES
        assert mime_type == "image/png"

    def test_unknown_image(self, service):
        with pytest.raises(NotFoundError):
            service.get_content("missing")

    def test_list_and_delete(self, service):
        first = upload(service, filename="a.png")
        second = upload(service, filename="b.png")
        assert {i.id for i in service.list_all()} == {first.id, second.id}

        service.delete(first.id)
        service.delete("missing")
        assert [i.id for i in service.list_all()] == [second.id]
