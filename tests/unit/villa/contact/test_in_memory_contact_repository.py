from datetime import datetime, timedelta, timezone

import pytest

from villa.contact.domain.value_object import ContactId
from villa.contact.infrastructure import InMemoryContactRepository


@pytest.fixture
def repository():
    ticks = iter(range(100))
    start = datetime(2025, 6, 1, tzinfo=timezone.utc)
    return InMemoryContactRepository(
        clock=lambda: start + timedelta(minutes=next(ticks))
    )


def _details(name: str = "Jane Doe") -> dict:
    return {
        "name": name,
        "email": "jane@luxestay.com",
        "message": "Is the villa available for New Year?",
    }


class TestInMemoryContactRepository:
    def test_create_then_find_by_id(self, repository):
        contact = repository.create(_details())

        found = repository.find_by_id(contact.id)

        assert found == contact
        assert found.message == "Is the villa available for New Year?"

    def test_find_all_is_newest_first(self, repository):
        older = repository.create(_details("Older"))
        newer = repository.create(_details("Newer"))

        assert [c.id for c in repository.find_all()] == [newer.id, older.id]

    def test_find_by_unknown_id(self, repository):
        assert repository.find_by_id(ContactId(value="missing")) is None

    def test_blank_message_is_rejected(self, repository):
        with pytest.raises(ValueError, match="Message is required"):
            repository.create({**_details(), "message": "   "})
