from villa.shared.domain import (
    DomainException,
    DuplicateResourceException,
    ResourceNotFoundException,
)


def test_not_found_message_names_the_resource():
    error = ResourceNotFoundException("Booking")

    assert str(error) == "Booking not found"
    assert isinstance(error, DomainException)


def test_duplicate_message_names_the_key():
    error = DuplicateResourceException("Content section", "hero-title")

    assert str(error) == "Content section already exists: hero-title"
    assert error.key == "hero-title"
