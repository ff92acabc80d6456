from .entity import Contact
from .repository import ContactDetails, ContactRepository
from .value_object import ContactId

__all__ = ["Contact", "ContactDetails", "ContactRepository", "ContactId"]
