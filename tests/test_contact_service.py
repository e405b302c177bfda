"""Tests for the contact inbox."""

import pydantic
import pytest

from folio.core.exceptions import NotFoundError
from folio.schemas.contact import ContactMessageCreate
from folio.services.contact_service import ContactService

VALID = {
    "name": "Grace",
    "email": "grace@folio.dev",
    "subject": "Hello there",
    "message": "x" * 20,
}


@pytest.fixture
def service(db) -> ContactService:
    return ContactService(db)


class TestSubmit:
    def test_twenty_character_message_is_accepted_unread(self, service):
        message = service.submit(ContactMessageCreate(**VALID))
        assert message.id
        assert message.read is False

    def test_nineteen_character_message_is_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            ContactMessageCreate(**{**VALID, "message": "x" * 19})

    @pytest.mark.parametrize(
        "field, value",
        [("name", "G"), ("email", "not-an-email"), ("subject", "Hey"), ("message", "too short")],
    )
    def test_field_rules(self, field, value):
        with pytest.raises(pydantic.ValidationError):
            ContactMessageCreate(**{**VALID, field: value})

    def test_each_submission_is_a_new_record(self, service):
        service.submit(ContactMessageCreate(**VALID))
        service.submit(ContactMessageCreate(**VALID))
        assert len(service.list_all()) == 2


class TestInbox:
    def test_mark_read(self, service):
        message = service.submit(ContactMessageCreate(**VALID))
        assert service.mark_read(message.id).read is True

    def test_mark_read_unknown(self, service):
        with pytest.raises(NotFoundError):
            service.mark_read("missing")

    def test_delete_is_idempotent(self, service):
        message_id = service.submit(ContactMessageCreate(**VALID)).id
        service.delete(message_id)
        service.delete(message_id)
        assert service.list_all() == []
