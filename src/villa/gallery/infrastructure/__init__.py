from .in_memory_property_image_repository import InMemoryPropertyImageRepository

__all__ = ["InMemoryPropertyImageRepository"]
