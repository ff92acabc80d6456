from .entity import PropertyImage, PropertyImageChanges
from .enum import ImageCategory
from .repository import PropertyImageDetails, PropertyImageRepository
from .value_object import ImageId

__all__ = [
    "PropertyImage",
    "PropertyImageChanges",
    "ImageCategory",
    "PropertyImageDetails",
    "PropertyImageRepository",
    "ImageId",
]
