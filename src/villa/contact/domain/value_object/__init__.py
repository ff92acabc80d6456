from .contact_id import ContactId

__all__ = ["ContactId"]
