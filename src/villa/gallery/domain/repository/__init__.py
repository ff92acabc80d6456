from .property_image_repository import PropertyImageDetails, PropertyImageRepository

__all__ = ["PropertyImageDetails", "PropertyImageRepository"]
