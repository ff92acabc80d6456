from .in_memory_contact_repository import InMemoryContactRepository

__all__ = ["InMemoryContactRepository"]
