from .contact_repository import ContactDetails, ContactRepository

__all__ = ["ContactDetails", "ContactRepository"]
