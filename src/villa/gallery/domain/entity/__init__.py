from .property_image import PropertyImage, PropertyImageChanges

__all__ = ["PropertyImage", "PropertyImageChanges"]
